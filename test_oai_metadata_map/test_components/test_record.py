"""Test module for `MetadataRecord`."""

import pytest
from lxml import etree as ET

from oai_metadata_map.components import MetadataRecord
from oai_metadata_map.components.record import qualify
from oai_metadata_map.plugins.mapping import MetadataWrapper


@pytest.fixture(name="wrapper")
def _wrapper():
    return MetadataWrapper(
        root="mdRecord",
        namespaces={
            "": "http://dplava.lib.virginia.edu",
            "dc": "http://purl.org/dc/elements/1.1/",
            "dcterms": "http://purl.org/dc/terms/",
            "xsi": "http://www.w3.org/2001/XMLSchema-instance",
        },
        attributes={
            "xsi:schemaLocation": "http://dplava.lib.virginia.edu "
            + "https://dplava.lib.virginia.edu/dplava.xsd"
        },
    )


def test_record_order():
    """Test insertion order of elements and values."""
    record = MetadataRecord()
    record.add("dcterms:subject", "b")
    record.add("dc:language", "eng")
    record.extend("dcterms:subject", ["a", "c"])
    assert list(record) == ["dcterms:subject", "dc:language"]
    assert record.get("dcterms:subject") == ["b", "a", "c"]
    assert len(record) == 2


def test_record_no_empty_elements():
    """Test that elements without values are never listed."""
    record = MetadataRecord({"dcterms:subject": []})
    record.extend("dcterms:title", [])
    assert len(record) == 0
    assert "dcterms:title" not in record
    assert record.get("dcterms:title") == []
    assert record == {}


def test_record_copies():
    """Test that accessors return copies."""
    record = MetadataRecord({"dcterms:title": ["a"]})
    record.get("dcterms:title").append("b")
    record.elements["dcterms:title"].append("c")
    assert record.elements == {"dcterms:title": ["a"]}


def test_record_equality():
    """Test comparison of records."""
    assert MetadataRecord({"a": ["1"]}) == MetadataRecord({"a": ["1"]})
    assert MetadataRecord({"a": ["1"]}) == {"a": ["1"]}
    assert MetadataRecord({"a": ["1", "2"]}) != {"a": ["2", "1"]}
    assert MetadataRecord({"a": ["1"]}) != ["a"]


def test_record_to_xml(wrapper):
    """Test XML-serialization of a record."""
    record = MetadataRecord(
        {
            "dcterms:title": ["Title"],
            "dc:language": ["eng", "ger"],
            "format": ["text"],
        }
    )
    root = ET.fromstring(record.to_xml(wrapper))
    assert root.tag == "{http://dplava.lib.virginia.edu}mdRecord"
    assert root.get(
        "{http://www.w3.org/2001/XMLSchema-instance}schemaLocation"
    ).startswith("http://dplava.lib.virginia.edu ")
    assert [(child.tag, child.text) for child in root] == [
        ("{http://purl.org/dc/terms/}title", "Title"),
        ("{http://purl.org/dc/elements/1.1/}language", "eng"),
        ("{http://purl.org/dc/elements/1.1/}language", "ger"),
        ("{http://dplava.lib.virginia.edu}format", "text"),
    ]


def test_record_to_xml_escaping(wrapper):
    """Test XML-serialization of special characters."""
    root = ET.fromstring(
        MetadataRecord({"dcterms:title": ["A & B <c>"]}).to_xml(wrapper)
    )
    assert root[0].text == "A & B <c>"


def test_record_to_xml_undeclared_prefix(wrapper):
    """Test XML-serialization with an undeclared namespace-prefix."""
    with pytest.raises(ValueError):
        MetadataRecord({"edm:preview": ["url"]}).to_xml(wrapper)


@pytest.mark.parametrize(
    ("name", "nsmap", "expected"),
    [
        ("dc:title", {"dc": "dc-uri"}, "{dc-uri}title"),
        ("title", {None: "default-uri"}, "{default-uri}title"),
        ("title", {"dc": "dc-uri"}, "title"),
    ],
    ids=["prefixed", "default-namespace", "no-namespace"],
)
def test_qualify(name, nsmap, expected):
    """Test function `qualify`."""
    assert qualify(name, nsmap) == expected


def test_record_to_xml_incompatible_value(wrapper):
    """Test XML-serialization of a value with control characters."""
    with pytest.raises(ValueError):
        MetadataRecord({"dcterms:title": ["Title\u000b"]}).to_xml(wrapper)
