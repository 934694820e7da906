"""Field classification for the OAI metadata mapping."""

from enum import Enum

from .profile import MappingProfile


class FieldCategory(Enum):
    """Handling strategies for entity fields."""

    LINKED_AGENT = "linked-agent"
    TITLE_PARAGRAPH = "title-paragraph"
    NOTE_PARAGRAPH = "note-paragraph"
    DIRECT = "direct"
    PARAGRAPH = "paragraph"
    SKIP = "skip"


def classify_field(
    profile: MappingProfile, field_name: str
) -> tuple[FieldCategory, ...]:
    """
    Returns the categories that apply to the field `field_name`, in
    the order in which they are to be handled.

    Linked agents are handled exclusively. Title- and note-paragraphs
    may additionally be direct-mapped or paragraph-mapped if the
    profile's tables contain an entry for the same field.
    """
    if field_name in profile.linked_agent_fields:
        return (FieldCategory.LINKED_AGENT,)

    categories = []
    if field_name in profile.title_paragraph_fields:
        categories.append(FieldCategory.TITLE_PARAGRAPH)
    elif field_name in profile.note_paragraph_fields:
        categories.append(FieldCategory.NOTE_PARAGRAPH)

    if field_name in profile.field_mapping:
        categories.append(FieldCategory.DIRECT)
    elif field_name in profile.paragraph_mapping:
        categories.append(FieldCategory.PARAGRAPH)

    return tuple(categories) or (FieldCategory.SKIP,)
