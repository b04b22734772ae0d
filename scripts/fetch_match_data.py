#!/usr/bin/env python3
"""
Fetch Match Data Script

Debugging entry point for the data layer: prints the enriched (or verified)
view of a fixture as JSON.

Usage:
    python scripts/fetch_match_data.py --sport nba --home Lakers --away Celtics
    python scripts/fetch_match_data.py --sport soccer --home "Man Utd" --away Spurs --verified
    python scripts/fetch_match_data.py --sport nfl --home Chiefs --away Bills --odds
    python scripts/fetch_match_data.py --list-sports

Credentials come from the environment or .env (API_SPORTS_KEY, THE_ODDS_API_KEY).
"""
import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from datalayer.core.config import settings
from datalayer.core.logging import configure_logging, get_logger
from datalayer.services.data_layer import EnrichOptions, build_data_layer
from datalayer.services.verification import VerifiedMatchService, is_data_sufficient_for_analysis
from datalayer.models.envelope import to_primitive

logger = get_logger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Fetch normalized match data for two teams")
    parser.add_argument("--sport", help="Sport or alias (soccer, nba, nhl, nfl, ...)")
    parser.add_argument("--home", help="Home team name")
    parser.add_argument("--away", help="Away team name")
    parser.add_argument(
        "--verified",
        action="store_true",
        help="Print the verified view with quality grade instead of the enriched match",
    )
    parser.add_argument("--odds", action="store_true", help="Include bookmaker odds")
    parser.add_argument("--no-injuries", action="store_true", help="Skip injury lookups")
    parser.add_argument("--list-sports", action="store_true", help="List sports with a configured provider")
    return parser.parse_args(argv)


async def main(argv=None) -> int:
    args = parse_args(argv)
    # Logs go to stderr so stdout stays valid JSON
    configure_logging(
        level=settings.LOG_LEVEL,
        json_output=settings.LOG_JSON and settings.is_production(),
        handler=logging.StreamHandler(sys.stderr),
    )

    data_layer = build_data_layer(settings)
    try:
        if args.list_sports:
            print(json.dumps([sport.value for sport in data_layer.get_available_sports()], indent=2))
            return 0

        if not (args.sport and args.home and args.away):
            logger.error("--sport, --home and --away are required")
            return 2

        if args.verified:
            service = VerifiedMatchService.from_settings(data_layer, settings)
            response = await service.get_verified_match_data(args.sport, args.home, args.away)
            output = response.to_dict()
            if response.data is not None:
                output["sufficiency"] = to_primitive(is_data_sufficient_for_analysis(response.data))
        else:
            options = EnrichOptions(include_odds=args.odds, include_injuries=not args.no_injuries)
            response = await data_layer.get_enriched_match_data(args.sport, args.home, args.away, options)
            output = response.to_dict()

        print(json.dumps(output, indent=2, default=str))
        return 0 if response.success else 1
    finally:
        await data_layer.close()


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
