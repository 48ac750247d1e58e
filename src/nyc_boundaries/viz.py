from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import branca
import folium
import geopandas as gpd

from .io import features_to_gdf


# One fill per `color` class (0-4); adjacent neighborhoods never share a class
COLOR_PALETTE = ["#1b9e77", "#d95f02", "#7570b3", "#e7298a", "#66a61e"]
UNKNOWN_COLOR = "#cccccc"


def _make_base_map() -> folium.Map:
    return folium.Map(location=[40.7128, -74.0060], zoom_start=11, tiles="cartodbpositron")


def _fill_for(value: Any) -> str:
    if isinstance(value, bool):
        return UNKNOWN_COLOR
    try:
        idx = int(value)
    except (TypeError, ValueError):
        return UNKNOWN_COLOR
    if idx != value or not 0 <= idx < len(COLOR_PALETTE):
        return UNKNOWN_COLOR
    return COLOR_PALETTE[idx]


def _color_legend() -> branca.colormap.StepColormap:
    n = len(COLOR_PALETTE)
    return branca.colormap.StepColormap(
        COLOR_PALETTE, index=list(range(n + 1)), vmin=0, vmax=n, caption="color class"
    )


def _tooltip_fields_and_aliases(gdf: gpd.GeoDataFrame) -> Tuple[List[str], List[str]]:
    fields: List[str] = []
    aliases: List[str] = []
    for c in ["name", "borough", "slug", "color"]:
        if c in gdf.columns:
            fields.append(c)
            aliases.append(c.replace("_", " ").title())
    return fields, aliases


def add_boundaries_layer(m: folium.Map, gdf: gpd.GeoDataFrame) -> None:
    def style_fn(feature):
        v = feature["properties"].get("color")
        return {"fillColor": _fill_for(v), "color": "#555555", "weight": 0.5, "fillOpacity": 0.6}

    layer = folium.FeatureGroup(name="boundaries")
    fields, aliases = _tooltip_fields_and_aliases(gdf)
    folium.GeoJson(
        gdf,
        name="boundaries",
        style_function=style_fn,
        tooltip=folium.GeoJsonTooltip(fields=fields, aliases=aliases, labels=True) if fields else None,
        highlight_function=lambda feat: {"weight": 2, "color": "#333333"},
    ).add_to(layer)
    layer.add_to(m)


def add_centroids_layer(m: folium.Map, gdf: gpd.GeoDataFrame) -> None:
    layer = folium.FeatureGroup(name="centroids")
    has_name = "name" in gdf.columns
    has_color = "color" in gdf.columns
    for _, row in gdf.iterrows():
        geom = row.geometry
        if geom is None or geom.is_empty:
            continue
        folium.CircleMarker(
            location=[geom.y, geom.x],
            radius=3,
            color="#222222",
            weight=1,
            fill=True,
            fill_color=_fill_for(row["color"]) if has_color else UNKNOWN_COLOR,
            fill_opacity=0.9,
            tooltip=str(row["name"]) if has_name and isinstance(row["name"], str) else None,
        ).add_to(layer)
    layer.add_to(m)


def make_quickcheck_map(
    boundaries: Dict[str, Any],
    centroids: Optional[Dict[str, Any]] = None,
) -> folium.Map:
    """Boundaries filled by color class with centroid markers on top."""
    m = _make_base_map()
    add_boundaries_layer(m, features_to_gdf(boundaries))
    if centroids is not None:
        add_centroids_layer(m, features_to_gdf(centroids))
    _color_legend().add_to(m)
    folium.LayerControl(collapsed=False).add_to(m)
    return m


def save_map(m: folium.Map, path: str | Path) -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    m.save(str(p))
