"""Test factories for creating test data."""

from tests.factories.models import (
    FORBIDDEN_NAME,
    AccumulatingWidget,
    Inner,
    Note,
    Plain,
    Stock,
    Widget,
    WidgetFactory,
)

__all__ = [
    "FORBIDDEN_NAME",
    "AccumulatingWidget",
    "Inner",
    "Note",
    "Plain",
    "Stock",
    "Widget",
    "WidgetFactory",
]
