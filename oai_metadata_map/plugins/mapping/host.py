"""Host-system interface required by the OAI metadata mapping."""

from typing import Any, Optional
from collections.abc import Iterable
import abc

from oai_metadata_map.models import FieldItemList


class HostInterface(metaclass=abc.ABCMeta):
    """
    Interface for the (content-repository) host system that stores the
    entities to be mapped.

    Entities, paragraphs, media, terms, and files are opaque to the
    mapping; they are only ever passed back into the methods of this
    interface. Lookups that find nothing return `None`.
    """

    @classmethod
    def __subclasshook__(cls, subclass):
        if cls is not HostInterface:
            return NotImplemented
        return (
            all(
                callable(getattr(subclass, method, None))
                for method in cls.__abstractmethods__
            )
            or NotImplemented
        )

    @abc.abstractmethod
    def fields_of(self, record: Any) -> Iterable[FieldItemList]:
        """
        Yields the fields of an entity or paragraph `record` in order
        of their declaration.
        """
        raise NotImplementedError(
            f"Class {self.__class__.__name__} does not define method "
            + "'fields_of'."
        )

    def get_field(self, record: Any, name: str) -> Optional[FieldItemList]:
        """Returns the field `name` of `record` (if it exists)."""
        for field in self.fields_of(record):
            if field.name == name:
                return field
        return None

    @abc.abstractmethod
    def is_visible(self, obj: Any) -> bool:
        """
        Returns `True` if the current user may view `obj` (a
        `FieldItemList`, `FieldItem`, or paragraph).
        """
        raise NotImplementedError(
            f"Class {self.__class__.__name__} does not define method "
            + "'is_visible'."
        )

    @abc.abstractmethod
    def label_of(self, target: Any) -> Optional[str]:
        """Returns the display label of the referenced `target`."""
        raise NotImplementedError(
            f"Class {self.__class__.__name__} does not define method "
            + "'label_of'."
        )

    @abc.abstractmethod
    def term_for_uri(self, uri: str) -> Optional[Any]:
        """Returns the taxonomy term identified by `uri`."""
        raise NotImplementedError(
            f"Class {self.__class__.__name__} does not define method "
            + "'term_for_uri'."
        )

    @abc.abstractmethod
    def media_with_term(self, entity: Any, term: Any) -> Optional[Any]:
        """Returns the media of `entity` that is tagged with `term`."""
        raise NotImplementedError(
            f"Class {self.__class__.__name__} does not define method "
            + "'media_with_term'."
        )

    @abc.abstractmethod
    def media_file(self, media: Any) -> Optional[Any]:
        """Returns the file that is the source of `media`."""
        raise NotImplementedError(
            f"Class {self.__class__.__name__} does not define method "
            + "'media_file'."
        )

    @abc.abstractmethod
    def file_url(self, file: Any) -> str:
        """Returns the public url of `file`."""
        raise NotImplementedError(
            f"Class {self.__class__.__name__} does not define method "
            + "'file_url'."
        )

    @abc.abstractmethod
    def representative_image(self, entity: Any) -> Optional[Any]:
        """Returns the media that represents `entity` as thumbnail."""
        raise NotImplementedError(
            f"Class {self.__class__.__name__} does not define method "
            + "'representative_image'."
        )

    @abc.abstractmethod
    def canonical_url(self, entity: Any, alias: bool = True) -> Optional[str]:
        """
        Returns the absolute canonical url of `entity`.

        Keyword arguments:
        entity -- entity to generate the url for
        alias -- whether to use the path alias (if available)
                 (default True)
        """
        raise NotImplementedError(
            f"Class {self.__class__.__name__} does not define method "
            + "'canonical_url'."
        )
