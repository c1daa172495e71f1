"""Plotly 2D interactive sun path chart renderer.

x axis: azimuth (degrees from south, east negative), y axis: elevation.
One line per sampled day, dotted iso-hour curves linking the same hour across days.
"""

import numpy as np
import plotly.graph_objects as go

from sunpath.models import SunPathGraph

_BG = "#0d1b35"
_GRID = "#334466"
_HOUR_COLOR = "#c9a96e"
_DAY_COLORS = ["#7ec8e3", "#8fd694", "#f4d35e", "#ee964b", "#f95738", "#b388eb", "#ffffff"]


def render_plotly_chart(graph: SunPathGraph, title: str = "") -> go.Figure:
    """Render a SunPathGraph as an interactive Plotly chart.

    Args:
        graph: Fully computed sun path series.
        title: Optional chart title.

    Returns:
        Plotly Figure object.
    """
    traces: list[go.Scatter] = []

    # Iso-hour curves first so the day paths are drawn on top
    for hour, points in graph.timed_positions.items():
        if len(points) < 2:
            continue
        xs = np.array([p.x for p in points])
        order = np.argsort([p.y for p in points])
        traces.append(
            go.Scatter(
                x=xs[order],
                y=np.array([p.y for p in points])[order],
                mode="lines",
                line=dict(color=_HOUR_COLOR, width=1, dash="dot"),
                opacity=0.6,
                hoverinfo="skip",
                showlegend=False,
                name=f"{hour:02d}:00",
            )
        )
        top = max(points, key=lambda p: p.y)
        traces.append(
            go.Scatter(
                x=[top.x],
                y=[top.y],
                mode="text",
                text=[f"{hour}h"],
                textposition="top center",
                textfont=dict(color=_HOUR_COLOR, size=10),
                hoverinfo="skip",
                showlegend=False,
            )
        )

    for i, (day, points) in enumerate(graph.sun_paths.items()):
        traces.append(
            go.Scatter(
                x=[p.x for p in points],
                y=[p.y for p in points],
                mode="lines+markers",
                line=dict(color=_DAY_COLORS[i % len(_DAY_COLORS)], width=2),
                marker=dict(size=5),
                name=day.label,
                hovertemplate="az %{x:.1f}°<br>el %{y:.1f}°<extra>" + day.label + "</extra>",
            )
        )

    fig = go.Figure(data=traces)
    fig.update_layout(
        title=title or None,
        paper_bgcolor=_BG,
        plot_bgcolor=_BG,
        font=dict(color="#d0d8e8"),
        margin=dict(l=40, r=10, t=40 if title else 10, b=40),
        legend=dict(orientation="h", y=-0.15),
        xaxis=dict(
            title="azimuth [°]",
            range=[-180.0, 180.0],
            tickvals=list(range(-180, 181, 45)),
            gridcolor=_GRID,
            zeroline=False,
        ),
        yaxis=dict(
            title="elevation [°]",
            range=[0.0, 90.0],
            gridcolor=_GRID,
            zeroline=False,
        ),
    )
    fig._config = {"scrollZoom": True, "displayModeBar": False}  # type: ignore[attr-defined]

    return fig
