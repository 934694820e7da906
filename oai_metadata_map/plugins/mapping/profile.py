"""
Mapping-profile definitions.

A profile bundles all static, schema-specific configuration that the
`OaiMetadataMapper` needs: the mapping tables, the single-valued
special elements, and the metadata format/wrapper handed to the
renderer. Profiles are values. A derived profile is created from its
base by replacing individual attributes (see `MappingProfile.replace`
and the `extends`-key of profile documents).
"""

from typing import Any, Optional, Mapping, Callable
from collections.abc import Iterable
from dataclasses import dataclass, field, fields, replace
from functools import cache
from pathlib import Path
from types import MappingProxyType

import yaml


BUILTIN_PROFILES_DIR = Path(__file__).parents[2] / "static" / "profiles"


class ProfileError(ValueError):
    """Raised for invalid profile documents."""


def _freeze(mapping: Optional[Mapping], name: str = "table") -> Mapping:
    """
    Returns a read-only (nested) copy of `mapping`.

    Raises `ProfileError` if `mapping` is neither `None` nor a mapping.
    """
    if mapping is None:
        mapping = {}
    if not isinstance(mapping, Mapping):
        raise ProfileError(
            f"Expected a mapping for '{name}' but got "
            + f"'{type(mapping).__name__}'."
        )
    return MappingProxyType(
        {
            k: (_freeze(v, f"{name}.{k}") if isinstance(v, Mapping) else v)
            for k, v in mapping.items()
        }
    )


@dataclass(frozen=True)
class MetadataFormat:
    """
    OAI metadata-format descriptor.

    Keyword arguments:
    prefix -- metadata prefix
    schema -- url of the XML-schema
    namespace -- metadata namespace uri
    """

    prefix: str
    schema: str
    namespace: str

    @property
    def json(self) -> dict[str, str]:
        """Returns format in the common OAI-PMH key-notation."""
        return {
            "metadataPrefix": self.prefix,
            "schema": self.schema,
            "metadataNamespace": self.namespace,
        }


@dataclass(frozen=True)
class MetadataWrapper:
    """
    Root element of a metadata record.

    Keyword arguments:
    root -- (prefixed) name of the root element
    namespaces -- mapping of namespace-prefixes to uris; the empty
                  string denotes the default namespace
    attributes -- additional (prefixed) root-attributes like
                  'xsi:schemaLocation'
                  (default {})
    """

    root: str
    namespaces: Mapping[str, str]
    attributes: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(
            self, "namespaces", _freeze(self.namespaces, "namespaces")
        )
        object.__setattr__(
            self, "attributes", _freeze(self.attributes, "attributes")
        )

    @property
    def nsmap(self) -> dict[Optional[str], str]:
        """Returns namespaces as `lxml`-compatible nsmap."""
        return {
            (prefix or None): uri for prefix, uri in self.namespaces.items()
        }


@dataclass(frozen=True)
class MappingProfile:
    """
    Static configuration of a metadata profile.

    Special elements set to `None` are disabled, i.e. no output is
    generated for the corresponding case.

    Keyword arguments:
    identifier -- unique profile identifier
    label -- human-readable name
    metadata_format -- `MetadataFormat`
    wrapper -- `MetadataWrapper`
    field_mapping -- field name to element name
    paragraph_mapping -- paragraph field name to mapping of paragraph
                         subfield name to element name
    linked_agent_mapping -- relator code to element name
    linked_agent_fields -- field names processed as linked agents
    title_paragraph_fields -- field names processed as title
                              paragraphs
    title_element_main -- element for untyped titles
    title_element_alternative -- element for typed titles
    note_paragraph_fields -- field names processed as note paragraphs
    note_default_element -- element for notes without specific mapping
    note_type_element_map -- note type to element name
    file_element -- element for original files; `None` disables the
                    media-type map entirely
    media_type_element_map -- media-use uri to element name
    link_element -- element for the persistent url
    thumbnail_element -- element for the thumbnail url
    strip_tags -- whether to remove HTML-markup from mapped values
    title_field -- title subfield of title paragraphs
    title_type_field -- type subfield of title paragraphs
    note_field -- note subfield of note paragraphs
    note_type_field -- type subfield of note paragraphs
    relator_property -- item property carrying a linked agent's relator
    """

    identifier: str
    label: str
    metadata_format: MetadataFormat
    wrapper: MetadataWrapper
    field_mapping: Mapping[str, str] = field(default_factory=dict)
    paragraph_mapping: Mapping[str, Mapping[str, str]] = field(
        default_factory=dict
    )
    linked_agent_mapping: Mapping[str, str] = field(default_factory=dict)
    linked_agent_fields: tuple[str, ...] = ()
    title_paragraph_fields: tuple[str, ...] = ()
    title_element_main: Optional[str] = None
    title_element_alternative: Optional[str] = None
    note_paragraph_fields: tuple[str, ...] = ()
    note_default_element: Optional[str] = None
    note_type_element_map: Mapping[str, str] = field(default_factory=dict)
    file_element: Optional[str] = None
    media_type_element_map: Mapping[str, str] = field(default_factory=dict)
    link_element: Optional[str] = None
    thumbnail_element: Optional[str] = None
    strip_tags: bool = True
    title_field: str = "field_title"
    title_type_field: str = "field_title_type"
    note_field: str = "field_note"
    note_type_field: str = "field_note_type"
    relator_property: str = "rel_type"

    _TABLES = (
        "field_mapping",
        "paragraph_mapping",
        "linked_agent_mapping",
        "note_type_element_map",
        "media_type_element_map",
    )
    _NAME_SETS = (
        "linked_agent_fields",
        "title_paragraph_fields",
        "note_paragraph_fields",
    )
    _ELEMENTS = (
        "title_element_main",
        "title_element_alternative",
        "note_default_element",
        "file_element",
        "link_element",
        "thumbnail_element",
    )

    def __post_init__(self):
        for name in self._TABLES:
            object.__setattr__(
                self, name, _freeze(getattr(self, name), name)
            )
        for field_name, subfields in self.paragraph_mapping.items():
            if not isinstance(subfields, Mapping):
                raise ProfileError(
                    "Expected a mapping of subfields for paragraph field "
                    + f"'{field_name}' in profile '{self.identifier}'."
                )
        for name in self._NAME_SETS:
            if not isinstance(getattr(self, name), (list, tuple)):
                raise ProfileError(
                    f"Expected a list for '{name}' in profile "
                    + f"'{self.identifier}'."
                )
            object.__setattr__(self, name, tuple(getattr(self, name)))
        # 'false' is accepted as alias for a disabled element
        for name in self._ELEMENTS:
            if getattr(self, name) is False:
                object.__setattr__(self, name, None)
        self._validate_elements()

    def _validate_elements(self) -> None:
        """
        Raises `ProfileError` if an element or wrapper name is not a
        string or uses a namespace-prefix that is not declared by the
        wrapper.
        """
        prefixes = set()
        for element in (
            *iter_profile_elements(self),
            self.wrapper.root,
            *self.wrapper.attributes,
        ):
            if not isinstance(element, str):
                raise ProfileError(
                    f"Bad element name '{element}' in profile "
                    + f"'{self.identifier}'."
                )
            if ":" in element:
                prefixes.add(element.split(":", 1)[0])
        undeclared = prefixes - set(self.wrapper.namespaces)
        if undeclared:
            raise ProfileError(
                f"Undeclared namespace-prefix(es) {sorted(undeclared)} in "
                + f"profile '{self.identifier}'."
            )

    def replace(self, **changes) -> "MappingProfile":
        """Returns a copy of this profile with `changes` applied."""
        return replace(self, **changes)

    @classmethod
    def from_dict(
        cls,
        document: Mapping[str, Any],
        base: Optional["MappingProfile"] = None,
    ) -> "MappingProfile":
        """
        Instantiate profile from a (deserialized) profile document.

        Keyword arguments:
        document -- profile document; the key 'extends' is ignored
        base -- profile to take all attributes from that are not
                given in `document`
                (default None)
        """
        known = {f.name for f in fields(cls)}
        unknown = set(document) - known - {"extends"}
        if unknown:
            raise ProfileError(
                f"Unknown key(s) {sorted(unknown)} in profile "
                + f"'{document.get('identifier')}'."
            )
        kwargs = {k: v for k, v in document.items() if k != "extends"}
        try:
            if "metadata_format" in kwargs:
                kwargs["metadata_format"] = MetadataFormat(
                    **kwargs["metadata_format"]
                )
            if "wrapper" in kwargs:
                kwargs["wrapper"] = MetadataWrapper(**kwargs["wrapper"])
            if base is not None:
                return base.replace(**kwargs)
            return cls(**kwargs)
        except TypeError as exc_info:
            raise ProfileError(
                f"Bad profile '{document.get('identifier')}': {exc_info}"
            ) from exc_info


def load_profile_document(path: Path) -> dict[str, Any]:
    """Loads profile document from the YAML-file at `path`."""
    try:
        document = yaml.load(
            path.read_text(encoding="utf-8"), Loader=yaml.SafeLoader
        )
    except (yaml.YAMLError, OSError, UnicodeDecodeError) as exc_info:
        raise ProfileError(
            f"Unable to read profile at '{path}': {exc_info}"
        ) from exc_info
    if not isinstance(document, dict) or not isinstance(
        document.get("identifier"), str
    ):
        raise ProfileError(
            f"Profile at '{path}' is not a mapping with an 'identifier'."
        )
    if not isinstance(document.get("extends"), (str, type(None))):
        raise ProfileError(
            f"Bad value for 'extends' in profile at '{path}' (expected "
            + "an identifier)."
        )
    return document


def load_profiles(
    *directories: Path,
    known: Optional[Mapping[str, MappingProfile]] = None,
    on_error: Optional[Callable[[ProfileError], None]] = None,
) -> dict[str, MappingProfile]:
    """
    Loads all profile documents ('*.yaml') from `directories` and
    returns them as a dictionary of identifiers and profiles.

    A document may extend any other document or any of the `known`
    profiles. Documents in later directories replace documents with
    the same identifier from earlier directories.

    Keyword arguments:
    directories -- directories to search for profile documents
    known -- already loaded profiles that can be extended
             (default None)
    on_error -- if given, `ProfileError`s are passed to this callable
                and the affected profiles are skipped instead of
                raising
                (default None)
    """

    def fail(exc_info: ProfileError) -> None:
        if on_error is None:
            raise exc_info
        on_error(exc_info)

    documents: dict[str, dict[str, Any]] = {}
    for directory in directories:
        for path in sorted(Path(directory).glob("*.yaml")):
            try:
                document = load_profile_document(path)
            except ProfileError as exc_info:
                fail(exc_info)
                continue
            documents[document["identifier"]] = document

    available = dict(known or {})
    profiles = {}
    while documents:
        resolved = [
            identifier
            for identifier, document in documents.items()
            if document.get("extends") is None
            or (
                document["extends"] in available
                and document["extends"] not in documents
            )
        ]
        if not resolved:
            fail(
                ProfileError(
                    "Unable to resolve base profile(s) for "
                    + ", ".join(
                        f"'{i}' (extends '{d['extends']}')"
                        for i, d in documents.items()
                    )
                    + "."
                )
            )
            break
        for identifier in resolved:
            document = documents.pop(identifier)
            try:
                profile = MappingProfile.from_dict(
                    document,
                    (
                        available[document["extends"]]
                        if document.get("extends") is not None
                        else None
                    ),
                )
            except ProfileError as exc_info:
                fail(exc_info)
                continue
            available[identifier] = profile
            profiles[identifier] = profile
    return profiles


@cache
def builtin_profiles() -> Mapping[str, MappingProfile]:
    """Returns the profiles shipped with this package."""
    return MappingProxyType(load_profiles(BUILTIN_PROFILES_DIR))


def iter_profile_elements(profile: MappingProfile) -> Iterable[str]:
    """Yields every element name a profile can produce."""
    yield from profile.field_mapping.values()
    for subfields in profile.paragraph_mapping.values():
        yield from subfields.values()
    yield from profile.linked_agent_mapping.values()
    yield from profile.note_type_element_map.values()
    if profile.file_element:
        yield from profile.media_type_element_map.values()
    for name in MappingProfile._ELEMENTS:
        if getattr(profile, name) is not None:
            yield getattr(profile, name)
