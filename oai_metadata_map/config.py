"""Configuration module for the 'OAI Metadata Map'-app."""

import sys
import os
from pathlib import Path
from importlib.metadata import version

from dcm_common.services import BaseConfig

from oai_metadata_map.plugins.mapping import (
    DocumentHost,
    MappingProfile,
    OaiMetadataMapPlugin,
    ProfileError,
    builtin_profiles,
    load_profiles,
)


def load_additional_profiles(
    directory: Path, known: dict[str, MappingProfile]
) -> dict[str, MappingProfile]:
    """
    Loads profiles from `directory`. Prints a warning to stderr for
    every profile that cannot be loaded and skips it.
    """

    def warn(exc_info: ProfileError) -> None:
        print(
            f"WARNING: Unable to load profile from '{directory}': "
            + str(exc_info),
            file=sys.stderr,
        )

    return load_profiles(directory, known=known, on_error=warn)


class AppConfig(BaseConfig):
    """
    Configuration for the 'OAI Metadata Map'.
    """

    # ------ PROFILES ------
    ADDITIONAL_PROFILES_DIR = (
        Path(os.environ.get("ADDITIONAL_PROFILES_DIR"))
        if "ADDITIONAL_PROFILES_DIR" in os.environ
        else None
    )
    DEFAULT_PROFILE = os.environ.get("DEFAULT_PROFILE") or "dgi_standard_oai"

    # ------ APP ------
    ALLOW_CORS = (int(os.environ.get("ALLOW_CORS") or 0)) == 1

    def __init__(self) -> None:
        self.load_profiles()
        self.load_plugins()
        super().__init__()

    def load_profiles(self):
        """Loads built-in and additional mapping profiles."""
        self.profiles = dict(builtin_profiles())
        if self.ADDITIONAL_PROFILES_DIR is not None:
            self.profiles.update(
                load_additional_profiles(
                    self.ADDITIONAL_PROFILES_DIR, self.profiles
                )
            )
        if self.DEFAULT_PROFILE not in self.profiles:
            raise ValueError(
                f"Default profile '{self.DEFAULT_PROFILE}' is not available "
                + f"(known profiles: {sorted(self.profiles)})."
            )

    def load_plugins(self):
        """Loads the mapping plugin for document-based entities."""
        self.mapping_plugin = OaiMetadataMapPlugin(
            profiles=self.profiles, host=DocumentHost()
        )

    def set_identity(self) -> None:
        super().set_identity()
        self.CONTAINER_SELF_DESCRIPTION["description"] = (
            "This API provides endpoints for mapping repository entities "
            + "onto OAI metadata profiles."
        )

        # version
        self.CONTAINER_SELF_DESCRIPTION["version"]["app"] = version(
            "oai-metadata-map"
        )

        # configuration
        # - settings
        settings = self.CONTAINER_SELF_DESCRIPTION["configuration"]["settings"]
        settings["transform"] = {
            "default_profile": self.DEFAULT_PROFILE,
            "profiles": list(self.profiles.keys()),
        }
        # - plugins
        self.CONTAINER_SELF_DESCRIPTION["configuration"]["plugins"] = {
            self.mapping_plugin.name: self.mapping_plugin.json
        }
