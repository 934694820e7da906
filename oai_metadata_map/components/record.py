"""Metadata-record (element multimap) definition."""

from typing import Iterable, Iterator, Optional

from lxml import etree as ET


class MetadataRecord:
    """
    Ordered multimap of element names to element values.

    Element names are kept in order of their first insertion, values
    per element in insertion order. An element is only ever present
    with at least one value.

    Keyword arguments:
    elements -- initial elements
                (default None)
    """

    def __init__(
        self, elements: Optional[dict[str, Iterable[str]]] = None
    ) -> None:
        self._elements: dict[str, list[str]] = {}
        for element, values in (elements or {}).items():
            self.extend(element, values)

    def add(self, element: str, value: str) -> None:
        """Appends `value` to `element`."""
        self._elements.setdefault(element, []).append(value)

    def extend(self, element: str, values: Iterable[str]) -> None:
        """Appends all `values` to `element`."""
        for value in values:
            self.add(element, value)

    def get(self, element: str) -> list[str]:
        """Returns a copy of the values of `element`."""
        return list(self._elements.get(element, []))

    def __contains__(self, element: str) -> bool:
        return element in self._elements

    def __iter__(self) -> Iterator[str]:
        return iter(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __eq__(self, other) -> bool:
        if isinstance(other, MetadataRecord):
            return self._elements == other._elements
        if isinstance(other, dict):
            return self._elements == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._elements!r})"

    @property
    def elements(self) -> dict[str, list[str]]:
        """Returns a (deep) copy of the elements as plain dictionary."""
        return {k: list(v) for k, v in self._elements.items()}

    def to_xml(self, wrapper, encoding: str = "unicode") -> str:
        """
        Serialize record as XML-document using the given
        `MetadataWrapper`.

        Raises `ValueError` if an element uses a namespace-prefix that
        is not declared by the wrapper.

        Keyword arguments:
        wrapper -- `MetadataWrapper` providing root element and
                   namespace declarations
        encoding -- encoding passed to `lxml.etree.tostring`
                    (default 'unicode')
        """
        nsmap = wrapper.nsmap
        root = ET.Element(qualify(wrapper.root, nsmap), nsmap=nsmap)
        for attribute, value in wrapper.attributes.items():
            root.set(qualify(attribute, nsmap), value)
        for element, values in self._elements.items():
            tag = qualify(element, nsmap)
            for value in values:
                ET.SubElement(root, tag).text = value
        return ET.tostring(root, encoding=encoding, pretty_print=True)


def qualify(name: str, nsmap: dict[Optional[str], str]) -> str:
    """
    Returns the Clark-notation ('{uri}local') of a prefixed `name`
    based on `nsmap`. Names without prefix are placed in the default
    namespace (if any).
    """
    if ":" in name:
        prefix, local = name.split(":", 1)
    else:
        prefix, local = None, name
    if prefix not in nsmap:
        if prefix is None:
            return local
        raise ValueError(
            f"Undeclared namespace-prefix '{prefix}' in element '{name}'."
        )
    return f"{{{nsmap[prefix]}}}{local}"
