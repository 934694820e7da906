from .transform import TransformView


__all__ = [
    "TransformView",
]
