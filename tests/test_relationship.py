"""Tests for archloom.model.relationship — the relationship factory."""

from __future__ import annotations

import logging

import pytest

from archloom.model import (
    Container,
    Err,
    ErrorCode,
    Model,
    Ok,
    Relationship,
    SoftwareSystem,
    ValidationError,
)
from archloom.model.relationship import RelationshipFactory


@pytest.fixture()
def web(software_system: SoftwareSystem) -> Container:
    return software_system.add_container("Web Application", "Serves pages", "Java")


class TestUses:
    def test_fields(self, web: Container, database: Container) -> None:
        rel = web.uses(database, "Reads from and writes to", "JDBC")
        assert isinstance(rel, Relationship)
        assert rel.source is web
        assert rel.destination is database
        assert rel.source_id == web.id
        assert rel.destination_id == database.id
        assert rel.description == "Reads from and writes to"
        assert rel.technology == "JDBC"

    def test_empty_description_and_technology(self, web: Container, database: Container) -> None:
        rel = web.uses(database, "", "")
        assert rel.description == ""
        assert rel.technology == ""

    def test_registered_with_model(self, model: Model, web: Container, database: Container) -> None:
        rel = web.uses(database, "Reads from")
        assert model.relationships == [rel]
        assert web.get_efferent_relationships() == [rel]
        assert database.get_efferent_relationships() == []

    def test_missing_destination(self, model: Model, web: Container) -> None:
        with pytest.raises(ValidationError) as exc_info:
            web.uses(None, "", "")
        assert str(exc_info.value) == "The destination of a relationship must be specified."
        assert exc_info.value.code is ErrorCode.MISSING_DESTINATION
        assert model.relationships == []

    def test_validation_error_is_a_value_error(self, web: Container) -> None:
        with pytest.raises(ValueError, match="destination"):
            web.uses(None)


class TestInterning:
    def test_duplicate_rejected(
        self, model: Model, web: Container, database: Container, caplog: pytest.LogCaptureFixture
    ) -> None:
        web.uses(database, "Reads from", "JDBC")
        with caplog.at_level(logging.WARNING, logger="archloom.model.relationship"):
            with pytest.raises(ValidationError, match="already exists"):
                web.uses(database, "Reads from", "ODBC")
        assert len(model.relationships) == 1
        assert "duplicate relationship" in caplog.text

    def test_different_description_allowed(
        self, model: Model, web: Container, database: Container
    ) -> None:
        web.uses(database, "Reads from")
        web.uses(database, "Writes to")
        assert len(model.relationships) == 2

    def test_reverse_direction_allowed(
        self, model: Model, web: Container, database: Container
    ) -> None:
        web.uses(database, "Reads from")
        database.uses(web, "Reads from")
        assert len(model.relationships) == 2

    def test_has_efferent_relationship_with(self, web: Container, database: Container) -> None:
        assert not web.has_efferent_relationship_with(database)
        web.uses(database, "Reads from")
        assert web.has_efferent_relationship_with(database)
        assert web.has_efferent_relationship_with(database, "Reads from")
        assert not web.has_efferent_relationship_with(database, "Writes to")
        assert not database.has_efferent_relationship_with(web)


class TestTryUses:
    def test_ok(self, web: Container, database: Container) -> None:
        result = web.try_uses(database, "Reads from")
        assert isinstance(result, Ok)
        assert result.ok
        assert result.unwrap().destination is database

    def test_err_does_not_raise(self, model: Model, web: Container) -> None:
        result = web.try_uses(None)
        assert isinstance(result, Err)
        assert not result.ok
        assert result.error.code is ErrorCode.MISSING_DESTINATION
        assert model.relationships == []
        with pytest.raises(ValidationError):
            result.unwrap()


class TestRelationshipFactory:
    def test_uses_allocator(self, web: Container, database: Container) -> None:
        ids = iter(["r1", "r2"])
        factory = RelationshipFactory(lambda: next(ids))
        first = factory.create(web, database, "a").unwrap()
        second = factory.create(web, database, "b").unwrap()
        assert (first.id, second.id) == ("r1", "r2")
        assert list(factory) == [first, second]
        assert len(factory) == 2

    def test_rejected_call_allocates_nothing(self, web: Container, database: Container) -> None:
        calls: list[int] = []

        def allocate() -> str:
            calls.append(1)
            return str(len(calls))

        factory = RelationshipFactory(allocate)
        factory.create(web, None)
        factory.create(web, database)
        factory.create(web, database)
        assert len(calls) == 1
