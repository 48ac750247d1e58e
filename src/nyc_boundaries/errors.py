from __future__ import annotations

from typing import Iterable, List


class BoundaryDataError(Exception):
    """Base class for every failure raised by the boundary tooling."""


class JsonParseError(BoundaryDataError, ValueError):
    """Input file is not valid JSON or not a FeatureCollection-shaped object."""


class GeometryError(BoundaryDataError, ValueError):
    pass


class UnsupportedGeometryError(GeometryError):
    """Geometry type other than Polygon/MultiPolygon."""


class DegenerateGeometryError(GeometryError):
    """Ring with zero signed area; its centroid is undefined."""


class CentroidError(GeometryError):
    """Centroid computation failed for one feature of a collection."""

    def __init__(self, index: int, feature_id, cause: GeometryError):
        self.index = index
        self.feature_id = feature_id
        self.cause = cause
        where = f"feature {index}"
        if feature_id is not None:
            where += f" (id={feature_id!r})"
        super().__init__(f"{where}: {cause}")


class SchemaViolation(BoundaryDataError, ValueError):
    """Boundary file breaks one or more validation rules."""

    def __init__(self, violations: Iterable[str]):
        self.violations: List[str] = list(violations)
        head = "; ".join(self.violations[:5])
        more = len(self.violations) - 5
        if more > 0:
            head += f" (+{more} more)"
        super().__init__(f"{len(self.violations)} schema violation(s): {head}")
