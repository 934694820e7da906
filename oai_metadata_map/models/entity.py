"""
FieldItem and FieldItemList definitions
"""

from typing import Any, Optional, Mapping
from dataclasses import dataclass, field


class MalformedFieldItemError(ValueError):
    """
    Raised if a `FieldItem` does not carry a value for its main
    property, i.e. the host violated the iteration contract.
    """


@dataclass
class FieldItem:
    """
    A single value of a (repeatable) entity field.

    Keyword arguments:
    main_property -- name of the property in `values` that carries the
                     item's value; `"target_id"` marks references and
                     `"alias"` marks path aliases
    values -- property values of this item
    target -- referenced entity or embedded paragraph, if any
              (default None)
    source -- host-native object this item was created from
              (default None)
    """

    main_property: str
    values: Mapping[str, Any] = field(default_factory=dict)
    target: Optional[Any] = None
    source: Optional[Any] = None

    @property
    def main_value(self) -> Any:
        """
        Returns the value of the main property.

        Raises `MalformedFieldItemError` if the main property is not
        present in `values`.
        """
        if self.main_property not in self.values:
            raise MalformedFieldItemError(
                "Field item is missing its main property "
                + f"'{self.main_property}' (got {list(self.values)})."
            )
        return self.values[self.main_property]


@dataclass
class FieldItemList:
    """
    Named, ordered list of `FieldItem`s as yielded by a host.

    Keyword arguments:
    name -- field name
    items -- field items in order
    source -- host-native object this list was created from
              (default None)
    """

    name: str
    items: list[FieldItem] = field(default_factory=list)
    source: Optional[Any] = None

    def __iter__(self):
        return iter(self.items)

    def __len__(self):
        return len(self.items)

    def is_empty(self) -> bool:
        """Returns `True` if this list holds no items."""
        return len(self.items) == 0
