# tests/test_charts.py
from __future__ import annotations

import plotly.graph_objects as go

from src.ui.charts import ChartMount, base_layout


class FakeSurface:
    """Stands in for st.empty(): tracks which charts are currently drawn on it."""

    def __init__(self):
        self.live: list[object] = []
        self.keys: list[str] = []
        self.empty_calls = 0
        self.last_kwargs: dict = {}

    def plotly_chart(self, fig, **kwargs):
        self.live.append(fig)
        self.last_kwargs = kwargs
        self.keys.append(kwargs.get("key"))

    def empty(self):
        self.empty_calls += 1
        self.live.clear()


def _mount():
    surface = FakeSurface()
    return ChartMount("test-chart", surface_factory=lambda: surface), surface


def test_mount_draws_on_surface():
    mount, surface = _mount()
    fig = go.Figure()

    mount.mount(fig)

    assert mount.mounted
    assert mount.figure is fig
    assert surface.live == [fig]


def test_second_mount_replaces_first():
    mount, surface = _mount()
    first, second = go.Figure(), go.Figure()

    mount.mount(first)
    mount.mount(second)

    assert surface.live == [second]
    assert surface.empty_calls == 1
    # element keys differ between renders within one script run
    assert len(set(surface.keys)) == 2


def test_unmount_clears_and_is_safe_to_repeat():
    mount, surface = _mount()
    mount.unmount()
    assert surface.empty_calls == 0

    mount.mount(go.Figure())
    mount.unmount()
    mount.unmount()

    assert surface.live == []
    assert surface.empty_calls == 1
    assert not mount.mounted


def test_bind_creates_surface_only_once():
    created = []

    def factory():
        created.append(FakeSurface())
        return created[-1]

    mount = ChartMount("x", surface_factory=factory)
    mount.bind()
    mount.bind()
    mount.mount(go.Figure())

    assert len(created) == 1


def test_base_layout_disables_animation():
    fig = base_layout(go.Figure(), height=200, y_title="°C")

    assert fig.layout.transition.duration == 0
    assert fig.layout.height == 200
    assert fig.layout.yaxis.title.text == "°C"


def test_charts_follow_container_width_with_fixed_height():
    fig = base_layout(go.Figure(), height=260, y_title="°F")
    surface = FakeSurface()
    mount = ChartMount("c", surface_factory=lambda: surface)

    mount.mount(fig)

    kwargs = surface.last_kwargs
    assert kwargs["use_container_width"] is True
    assert kwargs["config"]["responsive"] is True
    assert fig.layout.autosize is True
    assert fig.layout.height == 260
