# archloom:domain=model
"""Ordered, duplicate-free tag sets with protected required tags."""

from __future__ import annotations

import logging
from typing import ClassVar

from archloom.model.errors import is_blank
from archloom.model.tags import ElementKind, is_required, merge_tags, required_tags

logger = logging.getLogger(__name__)


class Taggable:
    """Base for anything carrying tags.

    Subclasses set ``kind``; the required tags for that kind always lead the
    tag sequence and cannot be removed.  Tags added by callers follow in
    first-insertion order.
    """

    kind: ClassVar[ElementKind]

    def __init__(self) -> None:
        self._added_tags: list[str] = []

    def _leading_tags(self) -> tuple[str, ...]:
        """Tags placed before the caller-added ones."""
        return required_tags(self.kind)

    @property
    def tag_list(self) -> tuple[str, ...]:
        return merge_tags(self._leading_tags(), self._added_tags)

    @property
    def tags(self) -> str:
        """Comma-joined tag sequence."""
        return ",".join(self.tag_list)

    def get_required_tags(self) -> tuple[str, ...]:
        return required_tags(self.kind)

    def has_tag(self, tag: str) -> bool:
        return tag in self.tag_list

    def add_tags(self, *tags: str | None) -> None:
        """Append tags not already present; ``None`` and blank values are skipped."""
        for tag in tags:
            if tag is None or is_blank(tag):
                continue
            tag = tag.strip()
            if tag in self.tag_list:
                continue
            self._added_tags.append(tag)

    def remove_tag(self, tag: str | None) -> bool:
        """Remove a caller-added tag.

        *tag* is stripped the same way :meth:`add_tags` strips it.  Returns
        False (and changes nothing) when *tag* is required for this kind or
        was never added.
        """
        if tag is None or is_blank(tag):
            return False
        tag = tag.strip()
        if is_required(self.kind, tag):
            logger.debug("Refusing to remove required tag %r from %s", tag, self)
            return False
        if tag not in self._added_tags:
            return False
        self._added_tags.remove(tag)
        return True
