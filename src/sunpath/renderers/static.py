"""Matplotlib static PNG renderer."""

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.figure import Figure

from sunpath.models import SunPathGraph

_ROOT = Path(__file__).parent.parent.parent.parent


def render_static_chart(graph: SunPathGraph, chart_size: int = 10) -> Figure:
    """Render a SunPathGraph as a static matplotlib image.

    Args:
        graph: Fully computed sun path series.
        chart_size: Output image width in inches (height is half of it).

    Returns:
        matplotlib Figure object.
    """
    fig, ax = plt.subplots(figsize=(chart_size, chart_size / 2))

    for hour, points in graph.timed_positions.items():
        if len(points) < 2:
            continue
        pts = sorted(points, key=lambda p: p.y)
        ax.plot(
            [p.x for p in pts],
            [p.y for p in pts],
            color="#c9a96e",
            linestyle=":",
            linewidth=0.8,
            zorder=1,
        )
        top = pts[-1]
        ax.annotate(f"{hour}h", (top.x, top.y), fontsize=7, ha="center", va="bottom")

    for day, points in graph.sun_paths.items():
        xs = np.array([p.x for p in points])
        ys = np.array([p.y for p in points])
        ax.plot(xs, ys, marker=".", linewidth=1.2, label=day.label, zorder=2)

    ax.set_xlim(-180, 180)
    ax.set_ylim(0, 90)
    ax.set_xticks(range(-180, 181, 45))
    ax.set_xlabel("azimuth [°]")
    ax.set_ylabel("elevation [°]")
    ax.grid(True, alpha=0.3)
    if graph.sun_paths:
        ax.legend(loc="upper right", fontsize=8)

    return fig


def save_static_chart(
    graph: SunPathGraph, output_path: Path | None = None, name: str = "sunpath"
) -> Path:
    """Save a SunPathGraph as a PNG file.

    Args:
        graph: Fully computed sun path series.
        output_path: Destination path. Auto-generated under results/ if None.
        name: Site name used for the generated file name.

    Returns:
        Path to the saved file.
    """
    if output_path is None:
        mode = "solar" if graph.use_solar_noon else "civil"
        filename = f"{name}__{graph.year}_{mode}.png".replace(" ", "_")
        output_path = _ROOT / "results" / filename

    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig = render_static_chart(graph)
    fig.savefig(output_path)
    plt.close(fig)
    return output_path
