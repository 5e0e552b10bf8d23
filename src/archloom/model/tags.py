# archloom:domain=model
"""Tag registry: required tags per element kind."""

from __future__ import annotations

import enum

# ---------------------------------------------------------------------------
# Tag names
# ---------------------------------------------------------------------------

ELEMENT = "Element"
SOFTWARE_SYSTEM = "Software System"
CONTAINER = "Container"
CONTAINER_INSTANCE = "Container Instance"
RELATIONSHIP = "Relationship"


class ElementKind(enum.Enum):
    """Closed set of taggable kinds in the model."""

    SOFTWARE_SYSTEM = "software_system"
    CONTAINER = "container"
    CONTAINER_INSTANCE = "container_instance"
    RELATIONSHIP = "relationship"


_REQUIRED_TAGS: dict[ElementKind, tuple[str, ...]] = {
    ElementKind.SOFTWARE_SYSTEM: (ELEMENT, SOFTWARE_SYSTEM),
    ElementKind.CONTAINER: (ELEMENT, CONTAINER),
    ElementKind.CONTAINER_INSTANCE: (ELEMENT, CONTAINER, CONTAINER_INSTANCE),
    ElementKind.RELATIONSHIP: (RELATIONSHIP,),
}


def required_tags(kind: ElementKind) -> tuple[str, ...]:
    """Return the fixed, ordered required tags for *kind*."""
    return _REQUIRED_TAGS[kind]


def is_required(kind: ElementKind, tag: str) -> bool:
    """Return True if *tag* can never be removed from an element of *kind*."""
    return tag in _REQUIRED_TAGS[kind]


def merge_tags(*groups: tuple[str, ...] | list[str]) -> tuple[str, ...]:
    """Concatenate tag groups, keeping the first occurrence of each tag."""
    seen: set[str] = set()
    merged: list[str] = []
    for group in groups:
        for tag in group:
            if tag not in seen:
                seen.add(tag)
                merged.append(tag)
    return tuple(merged)
