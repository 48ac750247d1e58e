import copy
import json

import pytest


def square(x0, y0, size):
    """Counter-clockwise closed square ring with its lower-left corner at (x0, y0)."""
    return [[x0, y0], [x0 + size, y0], [x0 + size, y0 + size], [x0, y0 + size], [x0, y0]]


def boundary_feature(name, borough, color, geometry, slug=None, **extra):
    props = {"name": name, "borough": borough, "color": color}
    props.update(extra)
    props["slug"] = slug if slug is not None else f"{name}-{borough}".lower().replace(" ", "-").replace(".", "")
    return {"type": "Feature", "properties": props, "geometry": geometry}


BOUNDARIES = {
    "type": "FeatureCollection",
    "metadata": {"source": "test", "features_count": 5},
    "features": [
        boundary_feature(
            "Bay Ridge",
            "brooklyn",
            3,
            {"type": "MultiPolygon", "coordinates": [[square(30, 0, 0.1)], [square(40, 0, 4)]]},
        ),
        boundary_feature("Upper East Side", "manhattan", 0, {"type": "Polygon", "coordinates": [square(0, 0, 2)]}),
        boundary_feature("Astoria", "queens", 1, {"type": "Polygon", "coordinates": [square(10, 0, 2)]}),
        boundary_feature("Co-op City", "bronx", 2, {"type": "Polygon", "coordinates": [square(20, 0, 2)]}),
        boundary_feature(
            "St. George",
            "staten-island",
            4,
            {"type": "Polygon", "coordinates": [square(50, 0, 2)]},
            wikipedia_url="https://en.wikipedia.org/wiki/St._George,_Staten_Island",
        ),
    ],
}
BOUNDARIES["features"][1]["id"] = "ues"


@pytest.fixture
def boundaries():
    return copy.deepcopy(BOUNDARIES)


@pytest.fixture
def data_dir(tmp_path, boundaries):
    d = tmp_path / "data"
    d.mkdir()
    (d / "nyc-neighborhood-boundaries.geojson").write_text(json.dumps(boundaries, indent=2), encoding="utf-8")
    return d
