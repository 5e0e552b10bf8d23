"""Model domain — elements, tags, relationships, health checks."""

# archloom:domain=model

from archloom.model.container_instance import ContainerInstance
from archloom.model.element import Container, Element, Location, SoftwareSystem
from archloom.model.errors import Err, ErrorCode, Ok, Result, ValidationError
from archloom.model.health_check import HttpHealthCheck, create_health_check
from archloom.model.model import Model
from archloom.model.relationship import Relationship, RelationshipFactory
from archloom.model.tags import ElementKind, required_tags

__all__ = [
    "Container",
    "ContainerInstance",
    "Element",
    "ElementKind",
    "Err",
    "ErrorCode",
    "HttpHealthCheck",
    "Location",
    "Model",
    "Ok",
    "Relationship",
    "RelationshipFactory",
    "Result",
    "SoftwareSystem",
    "ValidationError",
    "create_health_check",
    "required_tags",
]
