"""Chart renderers for sun path graphs."""

import plotly.graph_objects as go
import pytest
from matplotlib.figure import Figure

from sunpath.graph import solar_position_graph
from sunpath.models import MonthDay, SunPathGraph
from sunpath.renderers.plotly_2d import render_plotly_chart
from sunpath.renderers.static import render_static_chart, save_static_chart

DAYS = [MonthDay(12, 21), MonthDay(3, 20), MonthDay(6, 21)]


@pytest.fixture
def graph(chemnitz) -> SunPathGraph:
    return solar_position_graph(chemnitz, 2021, DAYS)


class TestPlotlyChart:
    def test_one_trace_per_day(self, graph):
        fig = render_plotly_chart(graph)
        assert isinstance(fig, go.Figure)
        names = [trace.name for trace in fig.data if trace.showlegend is not False]
        assert names == ["21. Dec", "20. Mar", "21. Jun"]

    def test_day_trace_holds_sun_path(self, graph):
        fig = render_plotly_chart(graph)
        summer = next(trace for trace in fig.data if trace.name == "21. Jun")
        points = graph.sun_paths[MonthDay(6, 21)]
        assert list(summer.y) == pytest.approx([p.y for p in points])
        assert min(summer.y) > 0

    def test_iso_hour_curves(self, graph):
        fig = render_plotly_chart(graph, title="Chemnitz")
        hour_lines = [trace for trace in fig.data if trace.mode == "lines"]
        # hours seen on at least two days
        assert len(hour_lines) == sum(1 for pts in graph.timed_positions.values() if len(pts) >= 2)
        assert fig.layout.title.text == "Chemnitz"
        assert tuple(fig.layout.xaxis.range) == (-180.0, 180.0)


class TestStaticChart:
    def test_render(self, graph):
        fig = render_static_chart(graph)
        assert isinstance(fig, Figure)
        ax = fig.axes[0]
        labels = [text.get_text() for text in ax.get_legend().get_texts()]
        assert labels == ["21. Dec", "20. Mar", "21. Jun"]

    def test_save(self, graph, tmp_path):
        path = save_static_chart(graph, tmp_path / "out" / "chart.png")
        assert path.exists()
        assert path.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"

    def test_empty_graph(self, tmp_path):
        empty = SunPathGraph(year=2021, use_solar_noon=True, sun_paths={}, timed_positions={})
        assert save_static_chart(empty, tmp_path / "empty.png").exists()
