"""Tests for the filter registry."""

from menu_query.hooks import MenuQueryHooks


def test_apply_without_filters() -> None:
    """Values pass through unchanged when nothing is registered."""
    hooks = MenuQueryHooks()
    assert hooks.apply_filters("anything", 3) == 3
    assert not hooks.has_filter("anything")


def test_priority_order() -> None:
    """Lower priorities run first; equal priorities run in order added."""
    hooks = MenuQueryHooks()
    hooks.add_filter("name", lambda v: v + "b")
    hooks.add_filter("name", lambda v: v + "a", priority=5)
    hooks.add_filter("name", lambda v: v + "c")
    assert hooks.apply_filters("name", "") == "abc"


def test_extra_arguments_and_removal() -> None:
    """Filters receive extra arguments and can be removed."""
    hooks = MenuQueryHooks()

    def add(value: int, amount: int) -> int:
        return value + amount

    hooks.add_filter("sum", add)
    assert hooks.apply_filters("sum", 1, 2) == 3
    assert hooks.remove_filter("sum", add)
    assert not hooks.remove_filter("sum", add)
    assert hooks.apply_filters("sum", 1, 2) == 1
