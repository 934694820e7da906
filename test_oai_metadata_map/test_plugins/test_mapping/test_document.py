"""Test module for the `DocumentHost`."""

import pytest

from oai_metadata_map.plugins.mapping import HostInterface, DocumentHost


def test_document_host_interface():
    """Test that `DocumentHost` implements the `HostInterface`."""
    assert isinstance(DocumentHost(), HostInterface)
    assert not issubclass(dict, DocumentHost)


def test_document_host_fields_of(host, item_entity):
    """Test method `fields_of` of `DocumentHost`."""
    fields = list(host.fields_of(item_entity))
    assert [field.name for field in fields][:3] == [
        "title", "field_title", "field_member_of"
    ]
    member_of = fields[2]
    assert len(member_of) == 1
    item = member_of.items[0]
    assert item.main_property == "target_id"
    assert item.main_value == 7
    assert item.target == {"label": "Collection A"}
    assert "target" not in item.values

    path = fields[-1]
    assert path.items[0].main_property == "alias"
    assert path.items[0].main_value == "/letters/letter-to-the-editor"


def test_document_host_fields_of_no_fields(host):
    """Test method `fields_of` of `DocumentHost` without fields."""
    assert list(host.fields_of({})) == []
    assert list(host.fields_of({"fields": None})) == []


def test_document_host_get_field(host, item_entity):
    """Test method `get_field` of `DocumentHost`."""
    assert host.get_field(item_entity, "field_language").items[0].values == {
        "value": "eng"
    }
    assert host.get_field(item_entity, "field_unknown") is None


@pytest.mark.parametrize(
    ("field", "visible"),
    [
        ([{"value": "a"}], True),
        ({"items": [{"value": "a"}]}, True),
        ({"access": True, "items": []}, True),
        ({"access": False, "items": [{"value": "a"}]}, False),
    ],
)
def test_document_host_field_visibility(host, field, visible):
    """Test method `is_visible` of `DocumentHost` for fields."""
    assert (
        host.is_visible(
            next(host.fields_of({"fields": {"field_a": field}}))
        )
        is visible
    )


def test_document_host_item_visibility(host):
    """Test method `is_visible` of `DocumentHost` for items/targets."""
    field = next(
        host.fields_of(
            {
                "fields": {
                    "field_a": [
                        {"value": "a"},
                        {"value": "b", "access": False},
                    ]
                }
            }
        )
    )
    assert [host.is_visible(item) for item in field] == [True, False]
    assert "access" not in field.items[1].values
    assert host.is_visible({"label": "a"})
    assert not host.is_visible({"label": "a", "access": False})
    assert not host.is_visible(None)


def test_document_host_media(host, item_entity):
    """Test media-related methods of `DocumentHost`."""
    term = host.term_for_uri("http://pcdm.org/use#ServiceFile")
    media = host.media_with_term(item_entity, term)
    assert host.file_url(host.media_file(media)).endswith("letter.jpg")
    assert host.media_with_term(item_entity, "unknown") is None
    assert host.media_with_term({}, term) is None
    assert host.file_url(
        host.media_file(host.representative_image(item_entity))
    ).endswith("letter-tn.jpg")
    assert host.representative_image({}) is None


def test_document_host_canonical_url(host):
    """Test method `canonical_url` of `DocumentHost`."""
    entity = {"url": "https://r/node/1", "alias": "https://r/a"}
    assert host.canonical_url(entity) == "https://r/a"
    assert host.canonical_url(entity, alias=False) == "https://r/node/1"
    assert host.canonical_url({"url": "https://r/node/1"}) == (
        "https://r/node/1"
    )
    assert host.canonical_url({}) is None
