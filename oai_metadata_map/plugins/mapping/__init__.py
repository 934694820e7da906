from .interface import MappingPlugin, MappingPluginResult
from .profile import (
    MappingProfile,
    MetadataFormat,
    MetadataWrapper,
    ProfileError,
    load_profiles,
    builtin_profiles,
)
from .host import HostInterface
from .document import DocumentHost
from .oai import OaiMetadataMapper, OaiMetadataMapPlugin


__all__ = [
    "MappingPlugin",
    "MappingPluginResult",
    "MappingProfile",
    "MetadataFormat",
    "MetadataWrapper",
    "ProfileError",
    "load_profiles",
    "builtin_profiles",
    "HostInterface",
    "DocumentHost",
    "OaiMetadataMapper",
    "OaiMetadataMapPlugin",
]
