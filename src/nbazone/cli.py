"""Command-line interface for browsing and comparing player stats."""

from __future__ import annotations

import argparse
import csv
from pathlib import Path
from typing import Optional, Sequence

from nbazone.client import StatsClient, StatsProvider
from nbazone.config import DEFAULT_STAT, get_stat_config, iter_stat_configs
from nbazone.config_loader import ClientProfile
from nbazone.display import bio_lines, comparison_table, render_table, season_table, series_table
from nbazone.errors import NBAZoneError
from nbazone.stats import season_series
from nbazone.stats.service import Comparison, build_comparison, build_player_report


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Browse and compare NBA player stats")
    parser.add_argument("--base-url", default=None, help="Stats service base URL (overrides profile/env)")
    parser.add_argument("--timeout", type=float, default=None, help="Request timeout in seconds")
    parser.add_argument("--profile", type=Path, default=None, help="Load client profile JSON")
    parser.add_argument("--save-profile", type=Path, default=None, help="Save resolved client profile JSON")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject seasons with negative counters or makes above attempts",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    search = sub.add_parser("search", help="Search players by name")
    search.add_argument("text", help="Free-text search, e.g. LeBron")

    player = sub.add_parser("player", help="Show bio, seasons and career totals")
    player.add_argument("player_id", type=int)
    player.add_argument(
        "--stat",
        default=DEFAULT_STAT.value,
        choices=[config.key for config in iter_stat_configs()],
        help="Rate stat to chart by season",
    )

    compare = sub.add_parser("compare", help="Compare two players season by season")
    compare.add_argument("player_a", type=int)
    compare.add_argument("player_b", type=int)
    compare.add_argument(
        "--stat",
        default=DEFAULT_STAT.value,
        choices=[config.key for config in iter_stat_configs()],
        help="Rate stat to compare",
    )
    compare.add_argument("--output", type=Path, default=None, help="Write aligned rows to CSV")

    serve = sub.add_parser("serve", help="Run the JSON API")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)
    return parser.parse_args(argv)


def _resolve_profile(args: argparse.Namespace) -> ClientProfile:
    base = ClientProfile.load(args.profile) if args.profile else None
    profile = ClientProfile.from_env(base)
    if args.base_url:
        profile.base_url = args.base_url
    if args.timeout is not None:
        profile.timeout = args.timeout
    return profile


def _write_comparison_csv(comparison: Comparison, path: Path) -> None:
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["season", "value_a", "value_b"])
        for row in comparison.rows:
            writer.writerow([
                row.season,
                "" if row.value_a is None else row.value_a,
                "" if row.value_b is None else row.value_b,
            ])


def run(args: argparse.Namespace, provider: StatsProvider) -> None:
    if args.command == "search":
        hits = provider.search_players(args.text)
        if not hits:
            print("No players found.")
            return
        for hit in hits:
            print(f"{hit.id}  {hit.full_name}")
        return

    if args.command == "player":
        report = build_player_report(provider, args.player_id)
        print("\n".join(bio_lines(report.profile)))
        print()
        table = season_table(report.seasons)
        print(render_table(table) if table else "No season data available.")
        print()
        config = get_stat_config(args.stat)
        chart = series_table(season_series(report.seasons, config.key), config.unit)
        if not chart:
            print("No season data available for chart.")
            return
        print(f"{config.title} by season")
        print(render_table(chart))
        return

    if args.command == "compare":
        comparison = build_comparison(provider, args.player_a, args.player_b, args.stat)
        if not comparison.rows:
            print("No season data available to compare.")
            return
        if args.output:
            _write_comparison_csv(comparison, args.output)
            print(f"Wrote {len(comparison.rows)} rows to {args.output}")
            return
        print(f"{comparison.stat.title} by season")
        print(render_table(comparison_table(comparison)))
        return

    raise ValueError(f"Unknown command {args.command!r}")


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    profile = _resolve_profile(args)
    if args.save_profile:
        profile.save(args.save_profile)
        print(f"Saved client profile to {args.save_profile}")

    if args.command == "serve":
        import uvicorn

        from nbazone.api import create_app

        with StatsClient.from_profile(profile, strict=args.strict) as client:
            uvicorn.run(create_app(client), host=args.host, port=args.port)
        return

    with StatsClient.from_profile(profile, strict=args.strict) as client:
        try:
            run(args, client)
        except NBAZoneError as exc:
            raise SystemExit(str(exc)) from exc


if __name__ == "__main__":
    main()
