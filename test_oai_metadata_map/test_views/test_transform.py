"""Test-module for transform-endpoints."""

import pytest
from lxml import etree as ET

from oai_metadata_map import app_factory


@pytest.fixture(name="client")
def _client(testing_config):
    return app_factory(testing_config()).test_client()


def test_identify(client):
    """Test basic functionality of /identify-GET endpoint."""
    response = client.get("/identify")
    assert response.status_code == 200
    assert response.json["version"]["app"]
    settings = response.json["configuration"]["settings"]
    assert settings["transform"]["default_profile"] == "dgi_standard_oai"
    assert "dgi_standard_oai_qdc" in settings["transform"]["profiles"]
    assert "oai-metadata-map" in response.json["configuration"]["plugins"]


def test_profiles(client):
    """Test basic functionality of /profiles-GET endpoint."""
    response = client.get("/profiles")
    assert response.status_code == 200
    assert response.mimetype == "application/json"
    assert response.json["dgi_standard_oai"] == {
        "label": "DPLAVA",
        "metadataFormat": {
            "metadataPrefix": "mdRecord",
            "schema": "https://dplava.lib.virginia.edu/dplava.xsd",
            "metadataNamespace": "http://dplava.lib.virginia.edu",
        },
    }
    assert (
        response.json["dgi_standard_oai_qdc"]["metadataFormat"][
            "metadataPrefix"
        ]
        == "oai_qdc"
    )


def test_profiles_unknown_query(client):
    """Test /profiles-GET endpoint with unknown query."""
    assert client.get("/profiles?unknown=1").status_code != 200


def test_transform_json(client, item_entity, dgi_mapper):
    """Test basic functionality of /transform-POST endpoint."""
    response = client.post(
        "/transform", json={"transform": {"entity": item_entity}}
    )
    assert response.status_code == 200
    assert response.mimetype == "application/json"
    assert response.json["success"]
    assert response.json["metadata"] == dgi_mapper.map(item_entity).elements


def test_transform_xml(client, item_entity):
    """Test /transform-POST endpoint with XML-output."""
    response = client.post(
        "/transform",
        json={
            "transform": {
                "entity": item_entity,
                "profile": "dgi_standard_oai_qdc",
                "format": "xml",
            }
        },
    )
    assert response.status_code == 200
    assert response.mimetype == "application/xml"
    root = ET.fromstring(response.data)
    assert root.tag == "{http://worldcat.org/xmlschemas/qdc-1.0/}qualifieddc"
    assert root[0].tag == "{http://purl.org/dc/elements/1.1/}title"
    assert root[0].text == "Letter to the editor"


def test_transform_bad_request(client):
    """Test /transform-POST endpoint with bad request body."""
    response = client.post(
        "/transform",
        json={"transform": {"entity": {}, "profile": "unknown"}},
    )
    assert response.status_code != 200
    assert response.status_code < 500


def test_transform_malformed_entity(client):
    """Test /transform-POST endpoint with malformed entity."""
    response = client.post(
        "/transform",
        json={
            "transform": {
                "entity": {"fields": {"field_language": [{"v": "eng"}]}}
            }
        },
    )
    assert response.status_code == 500
    assert not response.json["success"]
    assert "ERROR" in response.json["log"]


def test_ping(client):
    """Test /ping-GET endpoint."""
    assert client.get("/ping").status_code == 200


def test_transform_xml_incompatible_value(client):
    """
    Test /transform-POST endpoint with XML-output for a value that
    cannot be represented in XML.
    """
    body = {
        "transform": {
            "entity": {"fields": {"field_language": [{"value": "eng\u000b"}]}}
        }
    }
    response = client.post("/transform", json=body)
    assert response.status_code == 200
    assert response.json["metadata"] == {"dc:language": ["eng\u000b"]}

    body["transform"]["format"] = "xml"
    response = client.post("/transform", json=body)
    assert response.status_code == 500
    assert response.mimetype == "application/json"
    assert not response.json["success"]
    assert "XML" in str(response.json["log"]["ERROR"])
