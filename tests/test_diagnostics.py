"""Tests for how queries report misconfiguration."""

import logging

import pytest

from menu_query.diagnostics import (
    ERROR,
    WARNING,
    DiagnosticLog,
    MenuNotFoundError,
    MissingLocationError,
    NoMenuAttachedWarning,
    UnregisteredLocationWarning,
)
from menu_query.lookup_cache import MenuLookupCache
from menu_query.menu_query import EMPTY, MenuQuery
from menu_query.menu_request import MenuRequest
from menu_query.yaml_menu_source import YamlMenuSource


@pytest.mark.parametrize("location", [None, "", "   ", 5])
def test_missing_location(request_scope: MenuRequest, location: object) -> None:
    """A missing location is a fatal diagnostic, not an exception."""
    q = request_scope.query(location=location)
    assert q.item_count == 0
    assert q.state == EMPTY
    assert q.diagnostics.has_errors()
    [diagnostic] = q.diagnostics
    assert isinstance(diagnostic.problem, MissingLocationError)
    assert diagnostic.severity == ERROR


def test_missing_location_without_args(request_scope: MenuRequest) -> None:
    """Running a query that was never given a location reports it."""
    q = request_scope.new_query()
    q.query()
    assert q.diagnostics.categories() == {"MissingLocationError": 1}


def test_unregistered_location(request_scope: MenuRequest) -> None:
    """An unregistered location warns and yields nothing."""
    q = request_scope.query(location="nowhere")
    assert q.item_count == 0
    assert not q.diagnostics.has_errors()
    [diagnostic] = q.diagnostics.warnings
    assert isinstance(diagnostic.problem, UnregisteredLocationWarning)
    assert diagnostic.severity == WARNING
    assert "'nowhere' is not registered" in diagnostic.message


def test_location_without_menu(request_scope: MenuRequest) -> None:
    """A registered location with no menu assigned warns and yields nothing."""
    q = request_scope.query(location="sidebar")
    assert q.item_count == 0
    assert q.diagnostics.categories() == {"NoMenuAttachedWarning": 1}
    assert isinstance(q.diagnostics.warnings[0].problem, NoMenuAttachedWarning)


def test_assigned_menu_missing(request_scope: MenuRequest) -> None:
    """A menu id that does not exist is reported on every query."""
    first = request_scope.query(location="broken")
    second = request_scope.query(location="broken")
    for q in (first, second):
        assert q.item_count == 0
        assert q.state == EMPTY
        assert q.diagnostics.categories() == {"MenuNotFoundError": 1}


def test_caller_is_attributed(source: YamlMenuSource) -> None:
    """Diagnostics name the entry point and the calling file and line."""
    q = MenuQuery({"location": "nowhere"}, cache=MenuLookupCache(source))
    [diagnostic] = q.diagnostics
    assert diagnostic.caller.function == "MenuQuery()"
    assert diagnostic.caller.file == __file__
    assert diagnostic.caller.line > 0

    q.query({"location": ""})
    [diagnostic] = q.diagnostics
    assert diagnostic.caller.function == "MenuQuery.query"


def test_diagnostics_are_logged(
    request_scope: MenuRequest, caplog: pytest.LogCaptureFixture
) -> None:
    """Warnings and errors are mirrored to the logger."""
    with caplog.at_level(logging.WARNING, logger="menu_query"):
        request_scope.query(location="nowhere")
        request_scope.query(location="")

    levels = [r.levelno for r in caplog.records]
    assert levels == [logging.WARNING, logging.ERROR]
    assert "not registered" in caplog.records[0].getMessage()


def test_successful_requery_clears_diagnostics(request_scope: MenuRequest) -> None:
    """Diagnostics describe the latest run only."""
    q = request_scope.query(location="nowhere")
    assert q.diagnostics
    q.query({"location": "primary"})
    assert not q.diagnostics
    assert q.item_count == 5


def test_raise_first() -> None:
    """Strict callers can turn the first fatal diagnostic into an exception."""
    log = DiagnosticLog()
    log.report(UnregisteredLocationWarning("warn"))
    log.raise_first()

    log.report(MenuNotFoundError("gone"))
    with pytest.raises(MenuNotFoundError):
        log.raise_first()


def test_as_dict() -> None:
    """Diagnostics serialize to plain data."""
    log = DiagnosticLog()
    data = log.report(NoMenuAttachedWarning("no menu")).as_dict()
    assert data["severity"] == WARNING
    assert data["category"] == "NoMenuAttachedWarning"
    assert data["message"] == "no menu"
    assert data["file"] == __file__
