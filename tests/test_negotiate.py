import pytest

from corekit.meta import TypeMeta
from corekit.negotiate import (
    ClientNegotiator,
    Decoder,
    Encoder,
    JSONSerializer,
    NegotiateError,
    new_simple_client_negotiator,
)


def test_encode_is_compact_and_sorted():
    assert JSONSerializer().encode({"b": 1, "a": [1, 2]}) == b'{"a":[1,2],"b":1}'


@pytest.mark.parametrize(
    "value",
    [{"name": "demo", "count": 3, "nested": {"x": [True, None]}}, [1, "two", 3.5], "text", 42],
)
def test_round_trip(value):
    serializer = JSONSerializer()
    assert serializer.decode(serializer.encode(value)) == value


def test_decode_accepts_text():
    assert JSONSerializer().decode('{"k": "v"}') == {"k": "v"}


def test_decode_rejects_malformed_data():
    with pytest.raises(ValueError):
        JSONSerializer().decode(b"{not json")


def test_encode_rejects_nan():
    with pytest.raises(ValueError):
        JSONSerializer().encode({"x": float("nan")})


def test_encode_rejects_unknown_objects():
    with pytest.raises(TypeError):
        JSONSerializer().encode({"x": object()})


def test_encode_uses_to_dict():
    serializer = JSONSerializer()
    meta = TypeMeta(kind="K", api_version="v1")
    assert serializer.decode(serializer.encode(meta)) == meta.to_dict()


def test_negotiator_round_trip():
    negotiator = new_simple_client_negotiator()
    encoder = negotiator.encoder()
    decoder = negotiator.decoder()
    assert isinstance(encoder, Encoder) and isinstance(decoder, Decoder)
    payload = {"a": 1, "b": ["c"]}
    assert decoder.decode(encoder.encode(payload)) == payload


def test_negotiator_class_gives_json_serializers():
    negotiator = ClientNegotiator()
    encoded = negotiator.encoder().encode({"z": 0})
    assert negotiator.decoder().decode(encoded) == {"z": 0}


def test_negotiate_error_messages():
    plain = NegotiateError("application/yaml")
    stream = NegotiateError("application/yaml", stream=True)
    assert str(plain) == "no serializers registered for application/yaml"
    assert str(stream) == "no stream serializers registered for application/yaml"
    assert plain.content_type == "application/yaml"
    assert stream.stream is True


def test_negotiate_error_defaults_to_non_stream():
    error = NegotiateError("text/plain")
    assert error.content_type == "text/plain"
    assert error.stream is False
    assert str(error) == "no serializers registered for text/plain"