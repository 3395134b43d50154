from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

import plotly.graph_objects as go

from ..analytics.models import DishLocation
from .config import DEFAULT_REPORT_CONFIG, ReportConfig

logger = logging.getLogger(__name__)


def build_dish_map(
    locations: Sequence[DishLocation],
    config: ReportConfig = DEFAULT_REPORT_CONFIG,
    title: str = "Vegetarian & Vegan Dishes",
) -> go.Figure:
    """Clustered scatter map, one marker per restaurant."""
    hover = [
        f"{loc.name or loc.restaurant_id}<br>{loc.city or ''}<br>{loc.dish_count} dishes"
        for loc in locations
    ]
    fig = go.Figure(
        go.Scattermap(
            lat=[loc.latitude for loc in locations],
            lon=[loc.longitude for loc in locations],
            mode="markers",
            marker={"size": 9, "color": "seagreen"},
            text=hover,
            hoverinfo="text",
            cluster={"enabled": True, "color": "darkgreen", "maxzoom": 12},
        )
    )
    lat, lon = config.map_center
    fig.update_layout(
        title=title,
        map={"style": "open-street-map", "center": {"lat": lat, "lon": lon}, "zoom": config.map_zoom},
        margin={"l": 0, "r": 0, "t": 40, "b": 0},
    )
    return fig


def save_dish_map(
    locations: Sequence[DishLocation],
    path: Path,
    config: ReportConfig = DEFAULT_REPORT_CONFIG,
) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    build_dish_map(locations, config).write_html(str(path), include_plotlyjs="cdn")
    logger.info("Saved map with %d restaurants to %s", len(locations), path)
    return path
