"""
Utility definitions used by the OAI metadata mapping.
"""

from typing import Any, Optional, Callable

from lxml import html

from oai_metadata_map.models import FieldItemList
from .host import HostInterface


# main property of path-alias items; such fields are never mapped
ALIAS_PROPERTY = "alias"
# main property of entity references
REFERENCE_PROPERTY = "target_id"


def strip_tags(value: str) -> str:
    """
    Returns `value` with all HTML-markup removed and HTML-entities
    decoded.
    """
    if "<" not in value and "&" not in value:
        return value
    return html.fragment_fromstring(
        value, create_parent="div"
    ).text_content()


def as_string(value: Any) -> str:
    """Returns string representation of a scalar field value."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "1" if value else ""
    if hasattr(value, "isoformat"):
        return value.isoformat()
    return str(value)


def field_string(items: FieldItemList) -> str:
    """
    Returns the values of all `items`' main properties joined into a
    single string.
    """
    return ", ".join(
        as_string(item.main_value)
        for item in items
        if item.main_value is not None
    )


def extract_values(
    items: FieldItemList,
    host: HostInterface,
    post_process: Optional[Callable[[str], str]] = None,
) -> list[str]:
    """
    Returns the output values of a mapped field in order.

    References with an existing target are represented by the
    target's label, all other items by the value of their main
    property. If any item is a path alias, the entire field is
    suppressed (an empty list is returned).

    Raises `MalformedFieldItemError` if an item is missing the value
    for its main property.

    Keyword arguments:
    items -- field items
    host -- `HostInterface` used to resolve references
    post_process -- callable applied to every value
                    (default None)
    """
    values = []
    for item in items:
        if item.main_property == ALIAS_PROPERTY:
            return []
        if (
            item.main_property == REFERENCE_PROPERTY
            and item.target is not None
        ):
            value = host.label_of(item.target)
        else:
            value = item.main_value
        if value is None:
            continue
        value = as_string(value)
        values.append(post_process(value) if post_process else value)
    return values
