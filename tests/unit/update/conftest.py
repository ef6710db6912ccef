"""Fixtures shared by the update engine tests."""

import pytest

from patchable.config.models.engine import EngineConfig
from patchable.update import UpdateEngine
from tests.factories import Inner, Widget, WidgetFactory


@pytest.fixture
def engine() -> UpdateEngine:
    return UpdateEngine(EngineConfig())


@pytest.fixture
def widget() -> Widget:
    return WidgetFactory.create(inner=Inner(name="inner", label="abc"))


@pytest.fixture
def accumulating_widget() -> Widget:
    return WidgetFactory.create(accumulate=True)
