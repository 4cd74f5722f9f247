"""Tests for permissive upload option resolution."""
from bifrost import ACL_PRIVATE, ACL_PUBLIC_READ, OPT_ACL, OPT_CONTENT_TYPE, OPT_METADATA
from bifrost.options import resolve_upload_options


def test_no_options_and_no_default_sets_nothing():
    resolved = resolve_upload_options(None)
    assert resolved.acl is None
    assert resolved.content_type is None
    assert resolved.metadata == {}
    assert not resolved.public


def test_public_read_default_grants_public_read():
    assert resolve_upload_options({}, public_read=True).acl == ACL_PUBLIC_READ


def test_private_option_overrides_public_default():
    resolved = resolve_upload_options({OPT_ACL: ACL_PRIVATE}, public_read=True)
    assert resolved.acl == ACL_PRIVATE
    assert not resolved.public


def test_public_option_overrides_private_default():
    resolved = resolve_upload_options({OPT_ACL: ACL_PUBLIC_READ}, public_read=False)
    assert resolved.acl == ACL_PUBLIC_READ
    assert resolved.public


def test_recognized_options_are_applied():
    resolved = resolve_upload_options({
        OPT_CONTENT_TYPE: "image/png",
        OPT_METADATA: {"owner": "alice"},
    })
    assert resolved.content_type == "image/png"
    assert resolved.metadata == {"owner": "alice"}


def test_unknown_keys_are_ignored():
    resolved = resolve_upload_options({"storage_class": "GLACIER", "cache": True})
    assert resolved.acl is None
    assert resolved.content_type is None
    assert resolved.metadata == {}


def test_mistyped_values_are_ignored():
    resolved = resolve_upload_options(
        {
            OPT_ACL: True,
            OPT_CONTENT_TYPE: 42,
            OPT_METADATA: {"count": 3},
        },
        public_read=True,
    )
    assert resolved.acl == ACL_PUBLIC_READ
    assert resolved.content_type is None
    assert resolved.metadata == {}


def test_unsupported_acl_value_keeps_default():
    assert resolve_upload_options({OPT_ACL: "authenticated-read"}, public_read=True).acl == ACL_PUBLIC_READ
    assert resolve_upload_options({OPT_ACL: "authenticated-read"}).acl is None


def test_metadata_is_copied():
    metadata = {"owner": "alice"}
    resolved = resolve_upload_options({OPT_METADATA: metadata})
    metadata["owner"] = "bob"
    assert resolved.metadata == {"owner": "alice"}
