import pytest

from corekit.selection import Operator


@pytest.mark.parametrize(
    "text, member",
    [
        ("!", Operator.DOES_NOT_EXIST),
        ("=", Operator.EQUALS),
        ("==", Operator.DOUBLE_EQUALS),
        ("in", Operator.IN),
        ("!=", Operator.NOT_EQUALS),
        ("notin", Operator.NOT_IN),
        ("exists", Operator.EXISTS),
        ("gt", Operator.GREATER_THAN),
        ("lt", Operator.LESS_THAN),
    ],
)
def test_operator_from_text(text, member):
    assert Operator(text) is member
    assert str(member) == text
    assert member == text


def test_operator_values_are_distinct():
    texts = ["!", "=", "==", "in", "!=", "notin", "exists", "gt", "lt"]
    members = [Operator(text) for text in texts]
    assert len(set(members)) == len(texts)
    assert [str(member) for member in members] == texts


def test_unknown_operator_rejected():
    with pytest.raises(ValueError):
        Operator("like")