# archloom:domain=model
"""Model elements: identity, hierarchy, and canonical naming.

Elements never hold their parent directly.  They store the parent's id and
resolve it through the owning :class:`~archloom.model.model.Model`, so the
containment hierarchy has no reference cycles and canonical names always
reflect the current state of the model.
"""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING

from archloom.model.errors import Result
from archloom.model.tags import ElementKind
from archloom.model.taggable import Taggable

if TYPE_CHECKING:
    from archloom.model.model import Model
    from archloom.model.relationship import Relationship

CANONICAL_NAME_SEPARATOR = "/"


class Location(enum.Enum):
    """Whether a software system is owned by the modeled organisation."""

    UNSPECIFIED = "Unspecified"
    INTERNAL = "Internal"
    EXTERNAL = "External"


def format_for_canonical_name(name: str) -> str:
    return name.replace(CANONICAL_NAME_SEPARATOR, "")


class Element(Taggable):
    """A named node in the architecture model."""

    def __init__(
        self,
        model: Model,
        element_id: str,
        name: str | None,
        description: str = "",
        *,
        parent_id: str | None = None,
    ) -> None:
        super().__init__()
        self._model = model
        self._id = element_id
        self._name = name
        self.description = description
        self.url: str | None = None
        self.properties: dict[str, str] = {}
        self._parent_id = parent_id

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id!r}, canonical_name={self.canonical_name!r})"

    @property
    def id(self) -> str:
        return self._id

    @property
    def model(self) -> Model:
        return self._model

    @property
    def name(self) -> str | None:
        return self._name

    @name.setter
    def name(self, value: str | None) -> None:
        """Rename the element.

        Raises:
            ValidationError: If *value* is blank or already taken by a
                sibling of the same kind.
        """
        if value == self._name:
            return
        self._check_name_available(value)
        self._name = value

    def _check_name_available(self, name: str | None) -> None:
        pass

    @property
    def parent(self) -> Element | None:
        if self._parent_id is None:
            return None
        return self._model.get_element(self._parent_id)

    def _canonical_segment(self) -> str:
        return format_for_canonical_name(self._name or "")

    @property
    def canonical_name(self) -> str:
        """Hierarchical path, recomputed from the parent chain on every read."""
        parent = self.parent
        prefix = parent.canonical_name if parent is not None else ""
        return f"{prefix}{CANONICAL_NAME_SEPARATOR}{self._canonical_segment()}"

    def add_property(self, name: str, value: str) -> None:
        if name and value is not None:
            self.properties[name] = value

    # -- relationships -----------------------------------------------------

    def try_uses(
        self,
        destination: Element | None,
        description: str = "",
        technology: str = "",
    ) -> Result[Relationship]:
        """Like :meth:`uses` but returns ``Ok``/``Err`` instead of raising."""
        return self._model.add_relationship(self, destination, description, technology)

    def uses(
        self,
        destination: Element | None,
        description: str = "",
        technology: str = "",
    ) -> Relationship:
        """Create and register a relationship from this element to *destination*.

        Raises:
            ValidationError: If *destination* is ``None`` or the same
                relationship already exists.
        """
        return self.try_uses(destination, description, technology).unwrap()

    def get_efferent_relationships(self) -> list[Relationship]:
        return [r for r in self._model.relationships if r.source is self]

    def has_efferent_relationship_with(
        self,
        destination: Element,
        description: str | None = None,
    ) -> bool:
        """Return True if this element already uses *destination*.

        When *description* is given only relationships with that exact
        description count.
        """
        for rel in self.get_efferent_relationships():
            if rel.destination is not destination:
                continue
            if description is None or rel.description == description:
                return True
        return False


class SoftwareSystem(Element):
    """Top-level element; owns containers."""

    kind = ElementKind.SOFTWARE_SYSTEM

    def __init__(
        self,
        model: Model,
        element_id: str,
        name: str,
        description: str = "",
        *,
        location: Location = Location.UNSPECIFIED,
    ) -> None:
        super().__init__(model, element_id, name, description)
        self.location = location

    def _check_name_available(self, name: str | None) -> None:
        self._model.check_software_system_name(name, exclude=self)

    @property
    def containers(self) -> list[Container]:
        return [
            e
            for e in self._model.elements
            if isinstance(e, Container) and e.parent is self
        ]

    def add_container(self, name: str, description: str = "", technology: str = "") -> Container:
        return self._model.add_container(self, name, description, technology)

    def get_container_with_name(self, name: str) -> Container | None:
        for container in self.containers:
            if container.name == name:
                return container
        return None


class Container(Element):
    """A deployable/runnable unit inside a software system."""

    kind = ElementKind.CONTAINER

    def __init__(
        self,
        model: Model,
        element_id: str,
        name: str,
        description: str = "",
        technology: str = "",
        *,
        parent_id: str,
    ) -> None:
        super().__init__(model, element_id, name, description, parent_id=parent_id)
        self.technology = technology

    def _check_name_available(self, name: str | None) -> None:
        system = self.software_system
        if system is not None:
            self._model.check_container_name(system, name, exclude=self)

    @property
    def software_system(self) -> SoftwareSystem | None:
        parent = self.parent
        return parent if isinstance(parent, SoftwareSystem) else None
