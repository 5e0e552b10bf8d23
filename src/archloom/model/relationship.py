# archloom:domain=model
"""Directed relationships between elements and the factory that interns them."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from archloom.model.errors import ErrorCode, Ok, Result, fail
from archloom.model.tags import ElementKind
from archloom.model.taggable import Taggable

if TYPE_CHECKING:
    from collections.abc import Iterator

    from archloom.model.element import Element

logger = logging.getLogger(__name__)


class Relationship(Taggable):
    """A directed "uses" edge from *source* to *destination*."""

    kind = ElementKind.RELATIONSHIP

    def __init__(
        self,
        relationship_id: str,
        source: Element,
        destination: Element,
        description: str = "",
        technology: str = "",
    ) -> None:
        super().__init__()
        self._id = relationship_id
        self._source = source
        self._destination = destination
        self.description = description
        self.technology = technology

    def __repr__(self) -> str:
        return (
            f"Relationship(id={self._id!r}, source={self._source.id!r}, "
            f"destination={self._destination.id!r}, description={self.description!r})"
        )

    @property
    def id(self) -> str:
        return self._id

    @property
    def source(self) -> Element:
        return self._source

    @property
    def destination(self) -> Element:
        return self._destination

    @property
    def source_id(self) -> str:
        return self._source.id

    @property
    def destination_id(self) -> str:
        return self._destination.id


class RelationshipFactory:
    """Validates, builds, and registers relationships for one model.

    Each (source, destination, description) triple is interned: a second
    request for the same triple is rejected rather than creating a parallel
    edge.
    """

    def __init__(self, allocate_id: Callable[[], str]) -> None:
        self._allocate_id = allocate_id
        self._relationships: list[Relationship] = []
        self._keys: set[tuple[str, str, str]] = set()

    def __iter__(self) -> Iterator[Relationship]:
        return iter(self._relationships)

    def __len__(self) -> int:
        return len(self._relationships)

    def create(
        self,
        source: Element,
        destination: Element | None,
        description: str = "",
        technology: str = "",
    ) -> Result[Relationship]:
        """Build and register a relationship, or return why it was rejected.

        Nothing is registered when the result is an ``Err``.
        """
        if destination is None:
            return fail(
                ErrorCode.MISSING_DESTINATION,
                "The destination of a relationship must be specified.",
            )

        key = (source.id, destination.id, description)
        if key in self._keys:
            logger.warning(
                "Rejected duplicate relationship %s -> %s (%r)",
                source.canonical_name,
                destination.canonical_name,
                description,
            )
            return fail(
                ErrorCode.DUPLICATE_RELATIONSHIP,
                f"A relationship from '{source.canonical_name}' to "
                f"'{destination.canonical_name}' with description "
                f"'{description}' already exists.",
            )

        relationship = Relationship(
            self._allocate_id(),
            source,
            destination,
            description,
            technology,
        )
        self._keys.add(key)
        self._relationships.append(relationship)
        logger.debug("Created relationship %r", relationship)
        return Ok(relationship)
