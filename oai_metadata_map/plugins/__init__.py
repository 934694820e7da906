from .mapping import (
    MappingPlugin, MappingPluginResult, OaiMetadataMapPlugin
)


__all__ = [
    "MappingPlugin", "MappingPluginResult", "OaiMetadataMapPlugin",
]
