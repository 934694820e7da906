from .record import MetadataRecord


__all__ = [
    "MetadataRecord",
]
