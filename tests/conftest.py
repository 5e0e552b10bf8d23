"""Shared test fixtures for Archloom."""

from __future__ import annotations

import pytest

from archloom.model import Container, Location, Model, SoftwareSystem


@pytest.fixture()
def model() -> Model:
    return Model()


@pytest.fixture()
def software_system(model: Model) -> SoftwareSystem:
    return model.add_software_system("System", "Description", location=Location.EXTERNAL)


@pytest.fixture()
def database(software_system: SoftwareSystem) -> Container:
    return software_system.add_container("Database Schema", "Stores data", "MySQL")
