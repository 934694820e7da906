"""Definition of the document-based host."""

from typing import Any, Optional, Mapping
from collections.abc import Iterable

from oai_metadata_map.models import FieldItem, FieldItemList
from .host import HostInterface
from .util import REFERENCE_PROPERTY


class DocumentHost(HostInterface):
    """
    `HostInterface`-implementation for entities given as
    JSON-documents.

    Entity and paragraph documents are mappings like
     {
       "label": "Some title",
       "url": "https://repository/node/1",
       "alias": "https://repository/some-title",
       "access": true,
       "fields": {
         "field_language": [{"value": "eng"}],
         "field_member_of": {
           "access": true,
           "items": [{"target_id": 2, "target": {"label": "A"}}]
         }
       },
       "media": [
         {
           "terms": ["http://pcdm.org/use#OriginalFile"],
           "file": {"url": "https://repository/files/1.tiff"}
         }
       ],
       "thumbnail": {"file": {"url": "https://repository/files/1.jpg"}}
     }
    Field items are mappings of property values with the reserved
    keys
    * 'mainProperty' (defaults to 'target_id' if present, else
      'value'),
    * 'target' (referenced entity or embedded paragraph), and
    * 'access' (defaults to `True`; as everywhere in the document).
    """

    RESERVED_ITEM_KEYS = ("mainProperty", "target", "access")

    @classmethod
    def _item(cls, document: Mapping[str, Any]) -> FieldItem:
        return FieldItem(
            main_property=document.get(
                "mainProperty",
                REFERENCE_PROPERTY if REFERENCE_PROPERTY in document
                else "value",
            ),
            values={
                k: v
                for k, v in document.items()
                if k not in cls.RESERVED_ITEM_KEYS
            },
            target=document.get("target"),
            source=document,
        )

    def fields_of(self, record: Mapping[str, Any]) -> Iterable[FieldItemList]:
        for name, field in (record.get("fields") or {}).items():
            if isinstance(field, list):
                field = {"items": field}
            yield FieldItemList(
                name=name,
                items=[self._item(item) for item in field.get("items", [])],
                source=field,
            )

    def is_visible(self, obj: Any) -> bool:
        if isinstance(obj, (FieldItem, FieldItemList)):
            obj = obj.source
        if isinstance(obj, Mapping):
            return obj.get("access", True) is not False
        return obj is not None

    def label_of(self, target: Mapping[str, Any]) -> Optional[str]:
        return target.get("label")

    def term_for_uri(self, uri: str) -> Optional[str]:
        # terms are identified by their uri
        return uri

    def media_with_term(
        self, entity: Mapping[str, Any], term: str
    ) -> Optional[Mapping[str, Any]]:
        return next(
            (
                media
                for media in entity.get("media", [])
                if term in media.get("terms", [])
            ),
            None,
        )

    def media_file(
        self, media: Mapping[str, Any]
    ) -> Optional[Mapping[str, Any]]:
        return media.get("file")

    def file_url(self, file: Mapping[str, Any]) -> str:
        return file["url"]

    def representative_image(
        self, entity: Mapping[str, Any]
    ) -> Optional[Mapping[str, Any]]:
        return entity.get("thumbnail")

    def canonical_url(
        self, entity: Mapping[str, Any], alias: bool = True
    ) -> Optional[str]:
        if alias and entity.get("alias"):
            return entity["alias"]
        return entity.get("url")
