#!/usr/bin/env python3
"""
LureDB management CLI.

Usage:
    python manage.py serve               Start the API server
    python manage.py colors <query>      Search colors
    python manage.py lures <query>       Search lures
    python manage.py lure <number>       Show a lure with its colors resolved
"""

import argparse
import subprocess
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent


def _services(args: argparse.Namespace):
    from luredb.application.services import build_catalog_services
    from luredb.config import configure_logging, get_settings
    from luredb.infrastructure.catalog import JsonCatalogSource

    configure_logging(level="DEBUG" if args.verbose else "WARNING", stream=sys.stderr)
    settings = get_settings()
    data_path = args.data or settings.catalog.data_path
    return build_catalog_services(
        JsonCatalogSource(data_path),
        use_advisory_indexes=settings.catalog.use_advisory_indexes,
    )


def _years(first: int | None, last: int | None) -> str:
    if first is None and last is None:
        return ""
    return f"{first if first is not None else '?'}-{last if last is not None else '?'}"


def cmd_serve(args: argparse.Namespace) -> None:
    """Run the API server under uvicorn."""
    uvicorn_cmd = [
        sys.executable, "-m", "uvicorn",
        "luredb.api.main:app",
        "--host", args.host,
        "--port", str(args.port),
    ]
    if args.reload:
        uvicorn_cmd.append("--reload")

    print(f"Starting LureDB API on {args.host}:{args.port}...")
    try:
        subprocess.run(uvicorn_cmd, cwd=str(ROOT_DIR))
    except KeyboardInterrupt:
        print("\nServer stopped.")


def cmd_colors(args: argparse.Namespace) -> None:
    """Search colors and print one line per match."""
    results = _services(args).colors.search(args.query)
    if not results:
        print(f'No colors found matching "{args.query}"')
        return

    print(f'Found {len(results)} color(s) matching "{args.query}":')
    for color in results:
        detail = [
            f"Manufacturer: {color.manufacturer_name}",
            f"Company ID: {color.company_id}" if color.company_id else "",
            _years(color.year_introduced, color.year_last_used),
        ]
        print(f"  {color.id:<12} {color.name}  ({' | '.join(d for d in detail if d)})")


def cmd_lures(args: argparse.Namespace) -> None:
    """Search lures and print one line per match."""
    results = _services(args).lures.search(args.query)
    if not results:
        print(f'No lures found matching "{args.query}"')
        return

    print(f'Found {len(results)} lure(s) matching "{args.query}":')
    for lure in results:
        detail = [
            f"Manufacturer: {lure.manufacturer_name}",
            f"Introduced: {lure.year_introduced}" if lure.year_introduced is not None else "",
            f"Colors: {len(lure.colors)}" if lure.colors else "",
        ]
        print(f"  #{lure.number_label:<8} {lure.name}  ({' | '.join(d for d in detail if d)})")


def cmd_lure(args: argparse.Namespace) -> None:
    """Print every lure with this number, colors resolved."""
    services = _services(args)
    lures = services.lures.get_by_number(args.number)
    if not lures:
        print(f"No lure with number {args.number}")
        sys.exit(1)

    for lure in lures:
        sheet = services.resolver.describe_lure(lure)
        print(f"{lure.name} #{lure.number_label} ({lure.manufacturer_name})")
        years = _years(lure.year_introduced, lure.year_last_mfg)
        if years:
            print(f"  Made: {years}")
        for title, resolved in (("Colors", sheet.colors), ("Rare colors", sheet.rare_colors)):
            if not resolved:
                continue
            print(f"  {title} ({len(resolved)}):")
            for c in resolved:
                line = f"    {c.color_id:<12} {c.name}"
                if c.derived_code is not None:
                    line += f" [Lure Code: {c.derived_code}]"
                if c.legacy_code is not None:
                    line += f" (pre-1925: {c.legacy_code})"
                print(line)
        if lure.notes:
            print(f"  Notes: {lure.notes}")


def main() -> None:
    parser = argparse.ArgumentParser(
        description="LureDB management CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--data",
        type=Path,
        default=None,
        help="Catalog JSON file (default: CATALOG_DATA_PATH or data/catalog.json)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log loader and search events to stderr"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # serve
    p_serve = sub.add_parser("serve", help="Start the API server")
    p_serve.add_argument("--host", default="127.0.0.1", help="Bind host (default: 127.0.0.1)")
    p_serve.add_argument("--port", type=int, default=8000, help="Bind port (default: 8000)")
    p_serve.add_argument("--reload", action="store_true", help="Restart on code changes")
    p_serve.set_defaults(func=cmd_serve)

    # colors
    p_colors = sub.add_parser("colors", help="Search colors")
    p_colors.add_argument("query", help="Color name, id, company code or pre-1925 id")
    p_colors.set_defaults(func=cmd_colors)

    # lures
    p_lures = sub.add_parser("lures", help="Search lures")
    p_lures.add_argument("query", help="Lure name, number or manufacturer")
    p_lures.set_defaults(func=cmd_lures)

    # lure
    p_lure = sub.add_parser("lure", help="Show a lure with its colors resolved")
    p_lure.add_argument("number", help="Lure number, e.g. 700")
    p_lure.set_defaults(func=cmd_lure)

    args = parser.parse_args()
    args.func(args)


if __name__ == "__main__":
    main()
