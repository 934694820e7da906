"""Definition of the OAI metadata mapper and its plugin."""

from typing import Any, Mapping

from dcm_common import LoggingContext as Context
from dcm_common.plugins import Signature, Argument, JSONType

from oai_metadata_map.models import FieldItemList
from oai_metadata_map.components import MetadataRecord
from .interface import MappingPlugin, MappingPluginContext
from .profile import MappingProfile
from .host import HostInterface
from .classifier import FieldCategory, classify_field
from .util import extract_values, field_string, strip_tags


class OaiMetadataMapper:
    """
    Maps entities onto the elements of a `MappingProfile`.

    A mapper holds no state besides its (read-only) configuration;
    every call to `map` builds a new `MetadataRecord`.

    Keyword arguments:
    profile -- `MappingProfile` defining the output
    host -- `HostInterface` giving access to the entities
    """

    def __init__(self, profile: MappingProfile, host: HostInterface) -> None:
        self.profile = profile
        self.host = host

    def map(self, entity: Any) -> MetadataRecord:
        """
        Returns the `MetadataRecord` for `entity`.

        Fields are processed in order of their declaration on the
        entity. Afterwards, links to files, the persistent url, and the
        thumbnail are appended (in that order).

        Raises `MalformedFieldItemError` if the host yields an item
        without a value for its main property.
        """
        record = MetadataRecord()
        for field in self.host.fields_of(entity):
            self._add_field(record, field)

        if self.profile.file_element and self.profile.media_type_element_map:
            self._add_files(record, entity)
        if self.profile.link_element:
            self._add_persistent_url(record, entity, self.profile.link_element)
        if self.profile.thumbnail_element:
            self._add_thumbnail(
                record, entity, self.profile.thumbnail_element
            )
        return record

    def _add_field(self, record: MetadataRecord, field: FieldItemList) -> None:
        for category in classify_field(self.profile, field.name):
            match category:
                case FieldCategory.LINKED_AGENT:
                    self._add_linked_agents(record, field)
                case FieldCategory.TITLE_PARAGRAPH:
                    self._add_title_paragraphs(record, field)
                case FieldCategory.NOTE_PARAGRAPH:
                    self._add_note_paragraphs(record, field)
                case FieldCategory.DIRECT:
                    if not field.is_empty() and self.host.is_visible(field):
                        self._add_values(
                            record,
                            field,
                            self.profile.field_mapping[field.name],
                        )
                case FieldCategory.PARAGRAPH:
                    if not field.is_empty() and self.host.is_visible(field):
                        self._add_paragraphs(record, field)

    def _add_values(
        self, record: MetadataRecord, items: FieldItemList, element: str
    ) -> None:
        record.extend(
            element,
            extract_values(
                items,
                self.host,
                post_process=strip_tags if self.profile.strip_tags else None,
            ),
        )

    def _add_paragraphs(
        self, record: MetadataRecord, items: FieldItemList
    ) -> None:
        """Flattens the mapped subfields of paragraphs into `record`."""
        subfield_mapping = self.profile.paragraph_mapping[items.name]
        for item in items:
            if item.target is None or not self.host.is_visible(item.target):
                continue
            for subfield in self.host.fields_of(item.target):
                element = subfield_mapping.get(subfield.name)
                if (
                    element
                    and not subfield.is_empty()
                    and self.host.is_visible(subfield)
                ):
                    self._add_values(record, subfield, element)

    def _get_paragraph_string(self, paragraph: Any, name: str) -> str:
        """
        Returns the string value of the subfield `name` of `paragraph`
        or an empty string if the subfield is missing, empty, or not
        visible.
        """
        subfield = self.host.get_field(paragraph, name)
        if (
            subfield is None
            or subfield.is_empty()
            or not self.host.is_visible(subfield)
        ):
            return ""
        return field_string(subfield)

    def _add_title_paragraphs(
        self, record: MetadataRecord, items: FieldItemList
    ) -> None:
        for item in items:
            if item.target is None or not self.host.is_visible(item.target):
                continue
            title = self._get_paragraph_string(
                item.target, self.profile.title_field
            )
            if not title:
                continue
            title_type = self.host.get_field(
                item.target, self.profile.title_type_field
            )
            if title_type is not None and not title_type.is_empty():
                element = self.profile.title_element_alternative
            else:
                element = self.profile.title_element_main
            if element:
                record.add(element, title)

    def _add_note_paragraphs(
        self, record: MetadataRecord, items: FieldItemList
    ) -> None:
        for item in items:
            if item.target is None or not self.host.is_visible(item.target):
                continue
            note = self._get_paragraph_string(
                item.target, self.profile.note_field
            )
            if not note:
                continue
            note_type = self.host.get_field(
                item.target, self.profile.note_type_field
            )
            element = self.profile.note_type_element_map.get(
                field_string(note_type) if note_type is not None else "",
                self.profile.note_default_element,
            )
            if element:
                record.add(element, note)

    def _add_linked_agents(
        self, record: MetadataRecord, items: FieldItemList
    ) -> None:
        for item in items:
            if not self.host.is_visible(item):
                continue
            element = self.profile.linked_agent_mapping.get(
                item.values.get(self.profile.relator_property)
            )
            if not element or item.target is None:
                continue
            label = self.host.label_of(item.target)
            if label is not None:
                record.add(element, label)

    def _add_media(
        self, record: MetadataRecord, media: Any, element: str
    ) -> None:
        file = self.host.media_file(media)
        if file is not None:
            record.add(element, self.host.file_url(file))

    def _add_files(self, record: MetadataRecord, entity: Any) -> None:
        for uri, element in self.profile.media_type_element_map.items():
            term = self.host.term_for_uri(uri)
            if term is None:
                continue
            media = self.host.media_with_term(entity, term)
            if media is not None:
                self._add_media(record, media, element)

    def _add_persistent_url(
        self, record: MetadataRecord, entity: Any, element: str
    ) -> None:
        url = self.host.canonical_url(entity, alias=True)
        if url:
            record.add(element, url)

    def _add_thumbnail(
        self, record: MetadataRecord, entity: Any, element: str
    ) -> None:
        media = self.host.representative_image(entity)
        if media is not None:
            self._add_media(record, media, element)


class OaiMetadataMapPlugin(MappingPlugin):
    """
    Mapping plugin for repository entities based on OAI metadata
    profiles.

    Keyword arguments:
    profiles -- mapping of identifiers to available `MappingProfile`s
    host -- `HostInterface` giving access to the entities
    """

    _DISPLAY_NAME = "OAI-Metadata-Map-Plugin"
    _NAME = "oai-metadata-map"
    _DESCRIPTION = (
        "Maps repository entities onto the elements of an OAI metadata "
        + "profile."
    )
    _SIGNATURE = Signature(
        profile=Argument(
            type_=JSONType.STRING,
            required=True,
            description="identifier of the metadata profile",
            example="dgi_standard_oai",
        ),
        entity=MappingPlugin.signature.properties["entity"],
    )

    def __init__(
        self,
        profiles: Mapping[str, MappingProfile],
        host: HostInterface,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)

        self.profiles = dict(profiles)
        self.host = host
        self.mappers = {
            identifier: OaiMetadataMapper(profile, host)
            for identifier, profile in self.profiles.items()
        }

    def _get(self, context: MappingPluginContext, /, **kwargs):
        mapper = self.mappers.get(kwargs["profile"])
        if mapper is None:
            context.result.success = False
            context.set_progress("failure")
            context.result.log.log(
                Context.ERROR,
                body=f"Unknown metadata profile '{kwargs['profile']}'.",
            )
            context.push()
            return context.result

        context.set_progress(
            f"mapping entity with profile '{mapper.profile.identifier}'"
        )
        context.result.log.log(
            Context.INFO,
            body=f"Mapping entity with profile '{mapper.profile.label}'.",
        )
        context.push()

        try:
            record = mapper.map(kwargs["entity"])
        # pylint: disable=broad-exception-caught
        except Exception as exc_info:
            context.result.success = False
            context.set_progress("failure")
            context.result.log.log(
                Context.ERROR,
                body=(
                    "Failed to map entity with profile "
                    + f"'{mapper.profile.identifier}': "
                    + f"{type(exc_info).__name__}: {exc_info}"
                ),
            )
            context.push()
            return context.result

        context.result.metadata = record.elements
        context.result.success = True
        context.result.log.log(
            Context.INFO,
            body=f"Mapped entity onto {len(record)} element(s).",
        )
        context.set_progress("success")
        context.push()
        return context.result

