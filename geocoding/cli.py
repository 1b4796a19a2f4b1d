#!/usr/bin/env python3
"""
Command-line interface for the geocoding module.

Usage:
    python -m geocoding.cli --forward "Seftigenstrasse 264, 3084 Wabern" --provider geoadmin
    python -m geocoding.cli --forward "Seftigenstrasse 264, 3084 Wabern" --provider geoadmin --sr 4326
    python -m geocoding.cli --reverse 2.12870 41.40139 --provider openstreetmap
    python -m geocoding.cli --compare "Bundesplatz 3, 3005 Bern"
"""

import argparse
import logging
import sys
from typing import List, Optional

from geocoding.base import GeocodingError, Point
from geocoding.facade import compare_providers, get_geocoder
from geocoding.providers.opencage import Opencage

logger = logging.getLogger(__name__)


def _geocoder_kwargs(provider: str, sr: Optional[str]) -> dict:
    if provider == "geoadmin" and sr:
        return {"sr": sr}
    return {}


def forward_address(address: str, provider: str, sr: Optional[str] = None) -> None:
    """Forward-geocode a single address and print the points."""
    print(f"\nGeocoding: {address}")
    print(f"Provider: {provider}")
    print("-" * 50)

    geocoder = get_geocoder(provider, **_geocoder_kwargs(provider, sr))
    points = geocoder.forward(address)

    if points:
        print(f"✓ {len(points)} match(es)")
        for point in points:
            print(f"  x: {point.x}, y: {point.y}")
    else:
        print("✗ No match found")

    if isinstance(geocoder, Opencage) and geocoder.remaining_calls() is not None:
        print(f"  Remaining calls: {geocoder.remaining_calls()}")


def reverse_point(x: float, y: float, provider: str, sr: Optional[str] = None) -> None:
    """Reverse-geocode a single point and print the address."""
    point = Point(x, y)
    print(f"\nReverse geocoding: {point.x}, {point.y}")
    print(f"Provider: {provider}")
    print("-" * 50)

    address = get_geocoder(provider, **_geocoder_kwargs(provider, sr)).reverse(point)

    if address:
        print(f"✓ {address}")
    else:
        print("✗ No match found")


def compare_address(address: str, providers: Optional[List[str]] = None) -> None:
    """Compare forward-geocoding results from multiple providers."""
    print(f"\nComparing providers for: {address}")
    print("=" * 60)

    results = compare_providers(address, providers)

    for provider, points in results.items():
        print(f"\n{provider.upper()}:")
        if points:
            print(f"  Lon/Lat: {points[0].x:.6f}, {points[0].y:.6f}")
        else:
            print("  No match")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Forward and reverse geocoding from the command line"
    )

    parser.add_argument(
        "--forward", "-f",
        type=str,
        help="Forward-geocode a single address"
    )
    parser.add_argument(
        "--reverse", "-r",
        type=float,
        nargs=2,
        metavar=("X", "Y"),
        help="Reverse-geocode a point given as longitude/easting latitude/northing"
    )
    parser.add_argument(
        "--compare", "-c",
        type=str,
        help="Compare providers for an address"
    )
    parser.add_argument(
        "--provider", "-p",
        type=str,
        default="openstreetmap",
        choices=["geoadmin", "opencage", "openstreetmap"],
        help="Geocoding provider to use"
    )
    parser.add_argument(
        "--sr",
        type=str,
        choices=["2056", "21781", "4326", "3857"],
        help="Spatial reference for GeoAdmin"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()]
    )

    try:
        if args.compare:
            compare_address(args.compare)
        elif args.forward:
            forward_address(args.forward, args.provider, args.sr)
        elif args.reverse:
            reverse_point(args.reverse[0], args.reverse[1], args.provider, args.sr)
        else:
            parser.print_help()
    except (GeocodingError, ValueError) as e:
        logger.error(f"Geocoding failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
