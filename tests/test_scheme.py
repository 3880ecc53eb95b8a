import pytest

from corekit.scheme import (
    EMPTY_OBJECT_KIND,
    EmptyObjectKind,
    GroupKind,
    GroupResource,
    GroupVersion,
    GroupVersionKind,
    GroupVersionResource,
    GroupVersions,
    ObjectKind,
    from_api_version_and_kind,
    parse_group_kind,
    parse_group_resource,
    parse_group_version,
    parse_kind_arg,
    parse_resource_arg,
)


def test_parse_resource_arg_three_segments():
    gvr, gr = parse_resource_arg("resource.group.com")
    assert gvr == GroupVersionResource(group="com", version="group", resource="resource")
    assert gr == GroupResource(group="group.com", resource="resource")


def test_parse_resource_arg_two_segments_has_no_version():
    gvr, gr = parse_resource_arg("resource.group")
    assert gvr is None
    assert gr == GroupResource(group="group", resource="resource")


def test_parse_resource_arg_many_dots_keeps_rest_in_group():
    gvr, _ = parse_resource_arg("pods.v1.apps.example.com")
    assert gvr.group == "apps.example.com"
    assert gvr.version == "v1"
    assert gvr.resource == "pods"


def test_parse_kind_arg_three_segments():
    gvk, gk = parse_kind_arg("Kind.group.com")
    assert gvk == GroupVersionKind(group="com", version="group", kind="Kind")
    assert gk == GroupKind(group="group.com", kind="Kind")


def test_parse_kind_arg_no_dot():
    gvk, gk = parse_kind_arg("Kind")
    assert gvk is None
    assert gk == GroupKind(kind="Kind")


def test_parse_group_kind_and_resource_without_dot():
    assert parse_group_kind("Pod") == GroupKind(group="", kind="Pod")
    assert parse_group_resource("pods") == GroupResource(group="", resource="pods")


@pytest.mark.parametrize("text", ["pods", "pods.apps", "deployments.apps.example.com"])
def test_group_resource_string_round_trip(text):
    assert str(parse_group_resource(text)) == text


@pytest.mark.parametrize("text", ["Pod", "Deployment.apps", "Thing.a.b"])
def test_group_kind_string_round_trip(text):
    assert str(parse_group_kind(text)) == text


def test_empty_checks():
    assert GroupResource().empty()
    assert not GroupResource(resource="pods").empty()
    assert GroupVersionResource().empty()
    assert not GroupVersionResource(version="v1").empty()
    assert GroupKind().empty()
    assert not GroupKind(group="apps").empty()
    assert GroupVersionKind().empty()
    assert not GroupVersionKind(kind="Pod").empty()
    assert GroupVersion().empty()
    assert not GroupVersion(version="v1").empty()


def test_with_version_and_back():
    gr = GroupResource(group="apps", resource="deployments")
    gvr = gr.with_version("v1")
    assert gvr == GroupVersionResource(group="apps", version="v1", resource="deployments")
    assert gvr.group_resource() == gr
    assert gvr.group_version() == GroupVersion(group="apps", version="v1")

    gk = GroupKind(group="apps", kind="Deployment")
    gvk = gk.with_version("v1")
    assert gvk.group_kind() == gk
    assert gvk.group_version() == GroupVersion(group="apps", version="v1")


def test_string_formats():
    assert str(GroupVersionResource("apps", "v1", "deployments")) == "apps/v1, Resource=deployments"
    assert str(GroupVersionKind("apps", "v1", "Deployment")) == "apps/v1, Kind=Deployment"
    assert str(GroupVersion("apps", "v1")) == "apps/v1"
    assert str(GroupVersion("", "v1")) == "v1"
    assert GroupVersion("apps", "v1").identifier() == str(GroupVersion("apps", "v1"))


@pytest.mark.parametrize("text", ["v1", "apps/v1", "example.com/v2beta1"])
def test_parse_group_version_round_trip(text):
    assert str(parse_group_version(text)) == text


def test_parse_group_version_empty_forms():
    assert parse_group_version("") == GroupVersion()
    assert parse_group_version("/") == GroupVersion()


def test_parse_group_version_rejects_two_slashes():
    with pytest.raises(ValueError, match="unexpected GroupVersion string"):
        parse_group_version("a/b/c")


def test_with_kind_and_resource():
    gv = GroupVersion("apps", "v1")
    assert gv.with_kind("Deployment") == GroupVersionKind("apps", "v1", "Deployment")
    assert gv.with_resource("deployments") == GroupVersionResource("apps", "v1", "deployments")


def test_kind_for_group_version_kinds_prefers_exact_match():
    gv = GroupVersion("apps", "v1")
    kinds = [GroupVersionKind("apps", "v2", "Other"), GroupVersionKind("apps", "v1", "Deployment")]
    assert gv.kind_for_group_version_kinds(kinds) == GroupVersionKind("apps", "v1", "Deployment")


def test_kind_for_group_version_kinds_falls_back_to_group():
    gv = GroupVersion("apps", "v1")
    kinds = [GroupVersionKind("batch", "v1", "Job"), GroupVersionKind("apps", "v2", "Deployment")]
    assert gv.kind_for_group_version_kinds(kinds) == GroupVersionKind("apps", "v1", "Deployment")


def test_kind_for_group_version_kinds_no_match():
    gv = GroupVersion("apps", "v1")
    assert gv.kind_for_group_version_kinds([GroupVersionKind("batch", "v1", "Job")]) is None
    assert gv.kind_for_group_version_kinds([]) is None


def test_group_versions_identifier():
    gvs = GroupVersions([GroupVersion("apps", "v1"), GroupVersion("", "v1")])
    assert gvs.identifier() == "[apps/v1,v1]"
    assert GroupVersions().identifier() == "[]"


def test_group_versions_single_target():
    gvs = GroupVersions([GroupVersion("apps", "v1"), GroupVersion("batch", "v1")])
    kinds = [GroupVersionKind("batch", "v1", "Job")]
    assert gvs.kind_for_group_version_kinds(kinds) == GroupVersionKind("batch", "v1", "Job")


def test_group_versions_best_match_prefers_exact_kind():
    gvs = GroupVersions([GroupVersion("apps", "v2"), GroupVersion("batch", "v1")])
    kinds = [GroupVersionKind("apps", "v1", "Deployment"), GroupVersionKind("batch", "v1", "Job")]
    # apps/v2 yields a synthesized kind not in the list; batch/v1 matches exactly.
    assert gvs.kind_for_group_version_kinds(kinds) == GroupVersionKind("batch", "v1", "Job")


def test_group_versions_best_match_falls_back_to_first():
    gvs = GroupVersions([GroupVersion("apps", "v2"), GroupVersion("apps", "v3")])
    kinds = [GroupVersionKind("apps", "v1", "Deployment")]
    assert gvs.kind_for_group_version_kinds(kinds) == GroupVersionKind("apps", "v2", "Deployment")


def test_group_versions_no_match():
    gvs = GroupVersions([GroupVersion("apps", "v1")])
    assert gvs.kind_for_group_version_kinds([GroupVersionKind("batch", "v1", "Job")]) is None


def test_to_api_version_and_kind():
    assert GroupVersionKind().to_api_version_and_kind() == ("", "")
    assert GroupVersionKind("apps", "v1", "Deployment").to_api_version_and_kind() == (
        "apps/v1",
        "Deployment",
    )


@pytest.mark.parametrize(
    "gvk",
    [GroupVersionKind("apps", "v1", "Deployment"), GroupVersionKind("", "v1", "Pod")],
)
def test_api_version_and_kind_round_trip(gvk):
    assert from_api_version_and_kind(*gvk.to_api_version_and_kind()) == gvk


def test_from_api_version_and_kind_bad_version_keeps_kind():
    assert from_api_version_and_kind("a/b/c", "Pod") == GroupVersionKind(kind="Pod")


def test_empty_object_kind_ignores_set():
    kind = EmptyObjectKind()
    kind.set_group_version_kind(GroupVersionKind("apps", "v1", "Deployment"))
    assert kind.group_version_kind() == GroupVersionKind()
    assert EMPTY_OBJECT_KIND.group_version_kind().empty()


def test_object_kind_is_abstract():
    with pytest.raises(TypeError):
        ObjectKind()