"""Command-line entry points.

Every command runs with no arguments from the repository root, reading and
writing the files under data/. Failures exit with status 1 and a message on
stderr.
"""
from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional

from .errors import BoundaryDataError
from .formatting import FORMATS
from .io import load_feature_collection, read_text
from .pipeline import Paths, run_all, run_apply_properties, run_format_geojson, run_generate_centroids
from .validate import validate_boundaries


DEFAULT_PATHS = Paths.from_data_dir("data")

# Errors reported as a one-line message instead of a traceback
EXPECTED_ERRORS = (BoundaryDataError, OSError)


def _parser(description: str, centroids_flag: str = "--centroids") -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description=description)
    ap.add_argument("--boundaries", default=str(DEFAULT_PATHS.boundaries), help="Boundary GeoJSON path")
    ap.add_argument(centroids_flag, dest="centroids", default=str(DEFAULT_PATHS.centroids), help="Centroid GeoJSON path")
    ap.add_argument("--format", dest="fmt", choices=FORMATS, default="compact-lines", help="Output layout")
    return ap


def _paths(args: argparse.Namespace) -> Paths:
    return Paths(boundaries=Path(args.boundaries), centroids=Path(args.centroids))


def generate_centroids_main(argv: Optional[List[str]] = None) -> None:
    ap = _parser("Generate one centroid point per neighborhood polygon", centroids_flag="--out")
    ap.add_argument(
        "--merge-properties",
        action="store_true",
        help="Keep only slug/name/color on the centroids instead of every property",
    )
    args = ap.parse_args(argv)
    paths = _paths(args)
    print(f"Reading boundaries: {paths.boundaries}")
    try:
        centroids = run_generate_centroids(paths, fmt=args.fmt, keep="merge" if args.merge_properties else "all")
    except EXPECTED_ERRORS as e:
        raise SystemExit(f"Error generating centroids: {e}")
    print(f"Centroids generated successfully: {paths.centroids}")
    print(f"Generated {len(centroids['features'])} centroid points")


def apply_properties_main(argv: Optional[List[str]] = None) -> None:
    ap = _parser("Copy name/color from the boundary file onto the centroids by slug")
    args = ap.parse_args(argv)
    paths = _paths(args)
    print(f"Reading boundaries: {paths.boundaries}")
    print(f"Reading centroids: {paths.centroids}")
    try:
        result = run_apply_properties(paths, fmt=args.fmt)
    except EXPECTED_ERRORS as e:
        raise SystemExit(f"Error applying properties: {e}")
    print(f"Properties applied successfully: {paths.centroids}")
    print(f"Matched features: {result.matched}")
    print(f"Unmatched features: {result.unmatched}")


def format_geojson_main(argv: Optional[List[str]] = None) -> None:
    ap = _parser("Sort features and write one feature per line")
    args = ap.parse_args(argv)
    targets = [Path(args.boundaries), Path(args.centroids)]
    missing = [p for p in targets if not p.exists()]
    if missing:
        raise SystemExit(f"Error formatting: {', '.join(str(p) for p in missing)} not found")
    for path in targets:
        print(f"Formatting {path.name}...")
        try:
            n = run_format_geojson(path, fmt=args.fmt)
        except EXPECTED_ERRORS as e:
            raise SystemExit(f"Error formatting {path}: {e}")
        print(f"Formatted {n} features")
    print("Done!")


def validate_boundaries_main(argv: Optional[List[str]] = None) -> None:
    ap = argparse.ArgumentParser(description="Check the boundary file against the dataset rules")
    ap.add_argument("--boundaries", default=str(DEFAULT_PATHS.boundaries), help="Boundary GeoJSON path")
    ap.add_argument("--min-features", type=int, default=0, help="Fail unless there are more features than this")
    args = ap.parse_args(argv)
    try:
        collection = load_feature_collection(args.boundaries)
        text = read_text(args.boundaries)
    except EXPECTED_ERRORS as e:
        raise SystemExit(f"Error reading boundaries: {e}")
    errors = validate_boundaries(collection, text=text, min_features=args.min_features)
    if errors:
        listing = "\n".join(f"  - {e}" for e in errors)
        raise SystemExit(f"{len(errors)} problem(s) in {args.boundaries}:\n{listing}")
    print(f"{args.boundaries}: {len(collection['features'])} features OK")


def run_all_main(argv: Optional[List[str]] = None) -> None:
    ap = _parser("Generate centroids, apply properties and format both files")
    args = ap.parse_args(argv)
    paths = _paths(args)
    try:
        centroids, result = run_all(paths, fmt=args.fmt)
    except EXPECTED_ERRORS as e:
        raise SystemExit(f"Error: {e}")
    print(f"Generated {len(centroids['features'])} centroid points")
    print(f"Matched features: {result.matched}")
    print(f"Unmatched features: {result.unmatched}")
    print(f"Wrote {paths.centroids} and {paths.boundaries}")


def quickcheck_map_main(argv: Optional[List[str]] = None) -> None:
    ap = argparse.ArgumentParser(description="Render boundaries and centroids on a Folium map")
    ap.add_argument("--boundaries", default=str(DEFAULT_PATHS.boundaries), help="Boundary GeoJSON path")
    ap.add_argument("--centroids", default=str(DEFAULT_PATHS.centroids), help="Centroid GeoJSON path")
    ap.add_argument("--out", default="outputs/quickcheck_boundaries.html", help="Output HTML path")
    args = ap.parse_args(argv)

    # folium is only needed here
    from .viz import make_quickcheck_map, save_map

    try:
        boundaries = load_feature_collection(args.boundaries)
        centroids = load_feature_collection(args.centroids) if Path(args.centroids).exists() else None
    except EXPECTED_ERRORS as e:
        raise SystemExit(f"Error reading input: {e}")
    save_map(make_quickcheck_map(boundaries, centroids), args.out)
    print(f"Saved map to {args.out}")
