"""Tests for RendererContainer."""

from __future__ import annotations

import pytest

from pydataview.column import (
    Cell,
    DataColumnRenderer,
    DataContext,
    GlobalContext,
    HeaderContext,
    RendererContainer,
    SerialColumn,
    SerialColumnRenderer,
)


class Clock:
    """Dependency injected by type."""


class ClockRenderer(SerialColumnRenderer):
    """Renderer with an injectable dependency and a plain option."""

    def __init__(self, clock: Clock, label: str = "now") -> None:
        self.clock = clock
        self.label = label


class OptionalClockRenderer(SerialColumnRenderer):
    """Renderer with an optional dependency."""

    def __init__(self, clock: Clock | None = None) -> None:
        self.clock = clock


class TestCache:
    """Tests for instance caching."""

    def test_same_instance(self):
        """Consecutive get() calls return the same instance."""
        container = RendererContainer()
        assert container.get(SerialColumnRenderer) is container.get(SerialColumnRenderer)

    def test_add_configs_evicts_only_affected_classes(self):
        """Configured classes are rebuilt while others keep their instance."""
        container = RendererContainer()
        data_renderer = container.get(DataColumnRenderer)
        serial_renderer = container.get(SerialColumnRenderer)

        configured = container.add_configs({DataColumnRenderer: {"date_time_format": "%d.%m.%Y"}})
        new_data_renderer = configured.get(DataColumnRenderer)

        assert new_data_renderer is not data_renderer
        assert new_data_renderer.date_time_format == "%d.%m.%Y"
        assert configured.get(SerialColumnRenderer) is serial_renderer

    def test_receiver_is_not_modified(self):
        """add_configs() leaves the original container untouched."""
        container = RendererContainer()
        data_renderer = container.get(DataColumnRenderer)
        container.add_configs({DataColumnRenderer: {"date_time_format": "%Y"}})
        assert container.get(DataColumnRenderer) is data_renderer
        assert container.get_config(DataColumnRenderer) == {}


class TestConfigs:
    """Tests for constructor argument configs."""

    def test_configs_are_merged(self):
        """New keys win and existing keys are kept."""
        container = RendererContainer({Clock: Clock()})
        container = container.add_configs({ClockRenderer: {"label": "a"}})
        container = container.add_configs({ClockRenderer: {"label": "b"}, DataColumnRenderer: {"date_time_format": "%Y"}})
        assert container.get_config(ClockRenderer) == {"label": "b"}
        assert container.get(ClockRenderer).label == "b"
        assert container.get(DataColumnRenderer).date_time_format == "%Y"

    def test_construction_errors_propagate(self):
        """Unknown constructor arguments raise TypeError unchanged."""
        container = RendererContainer().add_configs({SerialColumnRenderer: {"unknown": 1}})
        with pytest.raises(TypeError):
            container.get(SerialColumnRenderer)


class TestDependencyInjection:
    """Tests for constructor injection by annotated type."""

    def test_injects_registered_type(self):
        """Parameters annotated with a registered type are injected."""
        clock = Clock()
        renderer = RendererContainer({Clock: clock}).get(ClockRenderer)
        assert renderer.clock is clock
        assert renderer.label == "now"

    def test_injects_optional_type(self):
        """Optional annotations are resolved too."""
        clock = Clock()
        assert RendererContainer({Clock: clock}).get(OptionalClockRenderer).clock is clock

    def test_config_wins_over_dependency(self):
        """Explicit configs take precedence over injected objects."""
        other = Clock()
        container = RendererContainer({Clock: Clock()}).add_configs({ClockRenderer: {"clock": other}})
        assert container.get(ClockRenderer).clock is other

    def test_missing_dependency(self):
        """A required dependency that is not registered is a TypeError."""
        with pytest.raises(TypeError):
            RendererContainer().get(ClockRenderer)


class TestRenderersFromContainer:
    """Renderers from the container draw their columns."""

    def test_serial_renderer(self):
        """A cached renderer renders body and header cells."""
        renderer = RendererContainer().get(SerialColumnRenderer)
        column = SerialColumn()
        body = renderer.render_body(column, Cell(), DataContext(column=column, data={}, key=0, index=4))
        header = renderer.render_header(column, Cell(), HeaderContext())
        footer = renderer.render_footer(column, Cell(), GlobalContext())
        assert body.content == ("5",)
        assert header.content == ("#",)
        assert footer.content == ("",)
