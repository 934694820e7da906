from .entity import FieldItem, FieldItemList, MalformedFieldItemError
from .transform_config import TransformConfig


__all__ = [
    "FieldItem", "FieldItemList", "MalformedFieldItemError",
    "TransformConfig",
]
