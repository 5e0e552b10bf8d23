# archloom:domain=model
"""In-memory model aggregate: allocates ids and owns every element and relationship."""

from __future__ import annotations

import itertools
import logging
from typing import TYPE_CHECKING

from archloom.infrastructure.config import ModelSettings
from archloom.model.container_instance import ContainerInstance
from archloom.model.element import Container, Element, Location, SoftwareSystem
from archloom.model.errors import ErrorCode, ValidationError, is_blank
from archloom.model.relationship import Relationship, RelationshipFactory

if TYPE_CHECKING:
    from archloom.model.errors import Result

logger = logging.getLogger(__name__)


class Model:
    """Owns the element graph.

    Not thread-safe: id allocation and instance numbering are plain counters,
    so concurrent callers must serialize mutating access.
    """

    def __init__(self, settings: ModelSettings | None = None) -> None:
        self.settings = settings or ModelSettings()
        self._ids = itertools.count(1)
        self._elements: dict[str, Element] = {}
        self._relationships = RelationshipFactory(self._allocate_id)
        # container id -> number of instances created so far
        self._instance_counts: dict[str, int] = {}

    def _allocate_id(self) -> str:
        return str(next(self._ids))

    def _register(self, element: Element) -> None:
        self._elements[element.id] = element
        logger.debug("Added %r", element)

    # -- read access -------------------------------------------------------

    @property
    def elements(self) -> list[Element]:
        return list(self._elements.values())

    @property
    def relationships(self) -> list[Relationship]:
        return list(self._relationships)

    @property
    def software_systems(self) -> list[SoftwareSystem]:
        return [e for e in self._elements.values() if isinstance(e, SoftwareSystem)]

    def get_element(self, element_id: str) -> Element | None:
        return self._elements.get(element_id)

    def get_element_with_canonical_name(self, canonical_name: str) -> Element | None:
        for element in self._elements.values():
            if element.canonical_name == canonical_name:
                return element
        return None

    def get_software_system_with_name(self, name: str) -> SoftwareSystem | None:
        for system in self.software_systems:
            if system.name == name:
                return system
        return None

    def get_container_instances(self, container: Container) -> list[ContainerInstance]:
        """Instances currently bound to *container*, in creation order."""
        return [
            e
            for e in self._elements.values()
            if isinstance(e, ContainerInstance) and e.resolve_container() is container
        ]

    # -- name checks -------------------------------------------------------

    def check_software_system_name(
        self,
        name: str | None,
        *,
        exclude: SoftwareSystem | None = None,
    ) -> None:
        """Raise unless *name* is non-blank and free among software systems.

        *exclude* is the system being renamed; its own name does not count.
        """
        if name is None or is_blank(name):
            raise ValidationError(ErrorCode.BLANK_NAME, "The name must not be null or empty.")
        existing = self.get_software_system_with_name(name)
        if existing is not None and existing is not exclude:
            raise ValidationError(
                ErrorCode.DUPLICATE_NAME,
                f"A software system named '{name}' already exists.",
            )

    def check_container_name(
        self,
        software_system: SoftwareSystem,
        name: str | None,
        *,
        exclude: Container | None = None,
    ) -> None:
        """Raise unless *name* is non-blank and free within *software_system*."""
        if name is None or is_blank(name):
            raise ValidationError(ErrorCode.BLANK_NAME, "The name must not be null or empty.")
        existing = software_system.get_container_with_name(name)
        if existing is not None and existing is not exclude:
            raise ValidationError(
                ErrorCode.DUPLICATE_NAME,
                f"A container named '{name}' already exists for this software system.",
            )

    # -- factories ---------------------------------------------------------

    def add_software_system(
        self,
        name: str,
        description: str = "",
        *,
        location: Location = Location.UNSPECIFIED,
    ) -> SoftwareSystem:
        """Create a top-level software system.

        Raises:
            ValidationError: If *name* is blank or already used by another
                software system.
        """
        self.check_software_system_name(name)
        system = SoftwareSystem(self, self._allocate_id(), name, description, location=location)
        self._register(system)
        return system

    def add_container(
        self,
        software_system: SoftwareSystem,
        name: str,
        description: str = "",
        technology: str = "",
    ) -> Container:
        """Create a container inside *software_system*.

        Raises:
            ValidationError: If *name* is blank or already used within the
                software system.
        """
        self.check_container_name(software_system, name)
        container = Container(
            self,
            self._allocate_id(),
            name,
            description,
            technology,
            parent_id=software_system.id,
        )
        self._register(container)
        return container

    def add_container_instance(self, container: Container) -> ContainerInstance:
        """Create the next runtime instance of *container*.

        Instance ids start at 1 and count per container; they are never
        reused or renumbered.
        """
        instance_id = self._instance_counts.get(container.id, 0) + 1
        instance = ContainerInstance(self, self._allocate_id(), container, instance_id)
        self._instance_counts[container.id] = instance_id
        self._register(instance)
        return instance

    def add_relationship(
        self,
        source: Element,
        destination: Element | None,
        description: str = "",
        technology: str = "",
    ) -> Result[Relationship]:
        return self._relationships.create(source, destination, description, technology)
