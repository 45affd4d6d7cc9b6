"""Command line interface for PTV transfer recommendations."""

import asyncio
import json
import sys
from datetime import datetime
from zoneinfo import ZoneInfo

import aiohttp

from ptv_transfers.adapters.config import AppConfig
from ptv_transfers.adapters.web.serializers import serialize_recommendation
from ptv_transfers.domain.errors import ConfigurationError, UpstreamUnavailableError
from ptv_transfers.domain.models import Itinerary, RecommendationResult, TransferNetwork


def _format_time(instant: datetime, tz: ZoneInfo) -> str:
    return instant.astimezone(tz).strftime("%H:%M")


def _format_itinerary(itinerary: Itinerary, tz: ZoneInfo) -> str:
    live = " (live)" if itinerary.bus_is_realtime else ""
    return (
        f"{itinerary.station_name}: bus {itinerary.route_number} at "
        f"{_format_time(itinerary.bus_departure, tz)}{live}, arrive "
        f"{_format_time(itinerary.destination_arrival, tz)} "
        f"({itinerary.total_minutes} min)"
    )


def format_recommendation(
    result: RecommendationResult, network: TransferNetwork, tz: ZoneInfo
) -> str:
    """Render a recommendation as human readable text."""
    if result.no_upcoming_service:
        return "No upcoming trains."

    lines = ["Next train:"]
    for station_id, arrival in result.station_arrivals.items():
        lines.append(f"  {network.station(station_id).name:<16} {_format_time(arrival, tz)}")

    if result.recommendation is None:
        lines.append(f"\nNo bus connections to {network.destination_name} for this train.")
        return "\n".join(lines)

    lines.append(f"\nRecommended: {_format_itinerary(result.recommendation, tz)}")
    if len(result.options) > 1:
        lines.append("\nAll options:")
        for index, itinerary in enumerate(result.options, 1):
            lines.append(f"  {index}. {_format_itinerary(itinerary, tz)}")
    return "\n".join(lines)


async def recommend(config: AppConfig, as_json: bool) -> int:
    """Fetch the feeds once and print the recommendation."""
    from ptv_transfers.main import build_service, load_network

    network = load_network(config)
    async with aiohttp.ClientSession() as session:
        try:
            service = build_service(config, network, session)
            result = await service.get_recommendation()
        except (ConfigurationError, UpstreamUnavailableError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    if as_json:
        print(json.dumps(serialize_recommendation(result), indent=2))
    else:
        print(format_recommendation(result, service.network, ZoneInfo(config.timezone)))
    return 0


async def main() -> None:
    """Main CLI entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Fastest train-to-bus transfer to your destination",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Recommend a transfer for the next train
  ptv-transfers recommend

  # Same, as JSON
  ptv-transfers recommend --json

  # Run the web server
  ptv-transfers serve
        """,
    )
    parser.add_argument("--config", help="Path to the network TOML file")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    recommend_parser = subparsers.add_parser("recommend", help="Recommend a transfer")
    recommend_parser.add_argument("--json", action="store_true", help="Output as JSON")

    subparsers.add_parser("serve", help="Run the web server")

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    config = AppConfig(config_file=args.config) if args.config else AppConfig()

    try:
        if args.command == "recommend":
            sys.exit(await recommend(config, as_json=args.json))

        elif args.command == "serve":
            from ptv_transfers.main import main as serve

            await serve(config)

    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    asyncio.run(main())


if __name__ == "__main__":
    cli_main()
