"""Command line interface for location lookups and geo helpers."""

import argparse
import asyncio
import json
import logging
import sys
from dataclasses import asdict

import aiohttp
from pydantic import ValidationError

from location_service.adapters.config import AppConfig
from location_service.adapters.geocoding import StaticReverseGeocoder
from location_service.adapters.geolocation import IpPositionProvider, StaticPositionProvider
from location_service.application.services import (
    LocationService,
    calculate_distance,
    generate_geohash,
    get_location_from_geohash,
    get_mock_cities,
)
from location_service.domain.ports import PositionProvider

logger = logging.getLogger(__name__)


def create_position_provider(
    config: AppConfig, session: aiohttp.ClientSession | None = None
) -> PositionProvider | None:
    """Build the position provider selected by the configuration."""
    if config.position_provider == "static":
        return StaticPositionProvider(config.static_latitude, config.static_longitude)
    if config.position_provider == "ip":
        return IpPositionProvider(session=session, url=config.ip_geolocation_url)
    return None


def create_location_service(
    config: AppConfig, session: aiohttp.ClientSession | None = None
) -> LocationService:
    """Wire a LocationService from configuration."""
    return LocationService(
        position_provider=create_position_provider(config, session),
        reverse_geocoder=StaticReverseGeocoder(config.fallback_city, config.fallback_country),
        timeout_seconds=config.position_timeout_seconds,
    )


async def locate(config: AppConfig, format_json: bool = False) -> int:
    """Print the current location. Returns the process exit code."""
    async with aiohttp.ClientSession() as session:
        service = create_location_service(config, session)
        location = await service.get_current_location()

    if location is None:
        print("No location available", file=sys.stderr)
        return 1

    if format_json:
        print(json.dumps(asdict(location), indent=2, ensure_ascii=False))
    else:
        print(f"{location.city}, {location.country}")
        print(f"  Coordinates: {location.latitude:.4f}, {location.longitude:.4f}")
    return 0


def _build_parser(config: AppConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Geospatial helper tool")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Locate command
    locate_parser = subparsers.add_parser("locate", help="Show the current location")
    locate_parser.add_argument(
        "--provider",
        choices=("none", "static", "ip"),
        help="Position source (overrides POSITION_PROVIDER)",
    )
    locate_parser.add_argument("--json", action="store_true", help="Output as JSON")

    # Encode command
    encode_parser = subparsers.add_parser("encode", help="Encode coordinates as a geohash")
    encode_parser.add_argument("latitude", type=float)
    encode_parser.add_argument("longitude", type=float)
    encode_parser.add_argument(
        "--precision",
        type=int,
        default=config.geohash_precision,
        help=f"Number of geohash characters (default: {config.geohash_precision})",
    )

    # Decode command
    decode_parser = subparsers.add_parser("decode", help="Decode a geohash to coordinates")
    decode_parser.add_argument("geohash")
    decode_parser.add_argument("--json", action="store_true", help="Output as JSON")

    # Distance command
    distance_parser = subparsers.add_parser(
        "distance", help="Great-circle distance between two points in km"
    )
    for name in ("lat1", "lng1", "lat2", "lng2"):
        distance_parser.add_argument(name, type=float)

    # Cities command
    cities_parser = subparsers.add_parser("cities", help="List the sample cities")
    cities_parser.add_argument("--json", action="store_true", help="Output as JSON")

    return parser


async def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return the process exit code."""
    try:
        config = AppConfig()
    except ValidationError as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )

    parser = _build_parser(config)
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        if args.command == "locate":
            if args.provider:
                config = config.model_copy(update={"position_provider": args.provider})
            return await locate(config, format_json=args.json)

        if args.command == "encode":
            print(generate_geohash(args.latitude, args.longitude, args.precision))

        elif args.command == "decode":
            coordinates = get_location_from_geohash(args.geohash)
            if args.json:
                print(json.dumps(asdict(coordinates)))
            else:
                print(f"{coordinates.latitude}, {coordinates.longitude}")

        elif args.command == "distance":
            distance = calculate_distance(args.lat1, args.lng1, args.lat2, args.lng2)
            print(f"{distance:.2f} km")

        elif args.command == "cities":
            cities = get_mock_cities()
            if args.json:
                print(json.dumps([asdict(c) for c in cities], indent=2, ensure_ascii=False))
            else:
                for city in cities:
                    print(f"  {city.city} ({city.country})")
                    print(f"    {city.latitude}, {city.longitude}")

    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 1
    except Exception as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    cli_main()
