from pathlib import Path
import json

import pytest

from oai_metadata_map.config import AppConfig
from oai_metadata_map.plugins.mapping import (
    DocumentHost,
    OaiMetadataMapper,
    builtin_profiles,
)


# define fixture-directory
@pytest.fixture(scope="session", name="fixtures")
def _fixtures():
    return Path("test_oai_metadata_map/fixtures")


@pytest.fixture(scope="session", name="profiles")
def _profiles():
    return builtin_profiles()


@pytest.fixture(name="host")
def _host():
    return DocumentHost()


@pytest.fixture(name="dgi_mapper")
def _dgi_mapper(profiles, host):
    return OaiMetadataMapper(profiles["dgi_standard_oai"], host)


@pytest.fixture(name="qdc_mapper")
def _qdc_mapper(profiles, host):
    return OaiMetadataMapper(profiles["dgi_standard_oai_qdc"], host)


@pytest.fixture(name="item_entity")
def _item_entity(fixtures):
    return json.loads(
        (fixtures / "entities" / "item.json").read_text(encoding="utf-8")
    )


@pytest.fixture(name="testing_config")
def _testing_config():
    """Returns test-config"""
    # setup config-class
    class TestingConfig(AppConfig):
        TESTING = True
        ADDITIONAL_PROFILES_DIR = None
        DEFAULT_PROFILE = "dgi_standard_oai"

    return TestingConfig
