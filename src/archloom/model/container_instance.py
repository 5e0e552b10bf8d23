# archloom:domain=model
"""Runtime instances of containers.

A container instance is bound to its container through two independent
channels: a direct object reference (``container``) and the container's id
(``container_id``).  Setting one never touches the other.  Derived values
(canonical name, parent, inherited tags) use the reference when present and
fall back to looking ``container_id`` up in the model.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from archloom.model.element import Container, Element, SoftwareSystem, format_for_canonical_name
from archloom.model.errors import Ok, Result
from archloom.model.health_check import HttpHealthCheck, create_health_check
from archloom.model.tags import ElementKind, merge_tags, required_tags

if TYPE_CHECKING:
    from archloom.model.model import Model

logger = logging.getLogger(__name__)


class ContainerInstance(Element):
    """One runtime occurrence of a :class:`Container`."""

    kind = ElementKind.CONTAINER_INSTANCE

    def __init__(
        self,
        model: Model,
        element_id: str,
        container: Container,
        instance_id: int,
    ) -> None:
        super().__init__(model, element_id, None)
        self._container: Container | None = container
        self._container_id: str | None = container.id
        self._instance_id = instance_id
        self._health_checks: list[HttpHealthCheck] = []

    # -- binding -----------------------------------------------------------

    @property
    def container(self) -> Container | None:
        return self._container

    @container.setter
    def container(self, value: Container | None) -> None:
        self._container = value

    @property
    def container_id(self) -> str | None:
        return self._container_id

    @container_id.setter
    def container_id(self, value: str | None) -> None:
        self._container_id = value

    @property
    def instance_id(self) -> int:
        return self._instance_id

    def resolve_container(self) -> Container | None:
        """Return the bound container, by reference or else by id lookup."""
        if self._container is not None:
            return self._container
        if self._container_id is None:
            return None
        element = self._model.get_element(self._container_id)
        return element if isinstance(element, Container) else None

    # -- identity ----------------------------------------------------------

    @property
    def name(self) -> str | None:
        """Always ``None``: an instance is named after its container."""
        return None

    @name.setter
    def name(self, value: str | None) -> None:
        pass

    @property
    def parent(self) -> SoftwareSystem | None:
        """The software system owning the backing container."""
        container = self.resolve_container()
        if container is None:
            return None
        return container.software_system

    def _canonical_segment(self) -> str:
        container = self.resolve_container()
        container_name = container.name if container is not None and container.name else ""
        return f"{format_for_canonical_name(container_name)}[{self._instance_id}]"

    # -- tags --------------------------------------------------------------

    def _leading_tags(self) -> tuple[str, ...]:
        container = self.resolve_container()
        inherited = container.tag_list if container is not None else ()
        return merge_tags(inherited, required_tags(self.kind))

    # -- health checks -----------------------------------------------------

    @property
    def health_checks(self) -> tuple[HttpHealthCheck, ...]:
        return tuple(self._health_checks)

    def try_add_health_check(
        self,
        name: str | None,
        url: str | None,
        interval: int | None = None,
        timeout: int | None = None,
    ) -> Result[HttpHealthCheck]:
        """Like :meth:`add_health_check` but returns ``Ok``/``Err`` instead of raising."""
        settings = self._model.settings
        result = create_health_check(
            name,
            url,
            settings.health_check_interval if interval is None else interval,
            settings.health_check_timeout if timeout is None else timeout,
        )
        if isinstance(result, Ok):
            self._health_checks.append(result.value)
            logger.debug("Added health check %r to %s", result.value.name, self.canonical_name)
        return result

    def add_health_check(
        self,
        name: str | None,
        url: str | None,
        interval: int | None = None,
        timeout: int | None = None,
    ) -> HttpHealthCheck:
        """Validate and append an HTTP health check.

        *interval* and *timeout* default to the model settings (60 and 0
        seconds unless configured otherwise).

        Raises:
            ValidationError: On a blank name or url, a url that is not
                absolute, or a negative interval or timeout.
        """
        return self.try_add_health_check(name, url, interval, timeout).unwrap()
