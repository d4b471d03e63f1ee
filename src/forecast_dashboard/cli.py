"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import functools
import http.server
import logging
import sys
from pathlib import Path

from forecast_dashboard import __version__
from forecast_dashboard.config import get_settings
from forecast_dashboard.dashboard import DashboardSession
from forecast_dashboard.errors import ForecastError
from forecast_dashboard.flows.build import build_dashboard
from forecast_dashboard.flows.load import load_forecast, search_forecast


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="forecast-dashboard",
        description="Hourly NWS forecast dashboard with derived comfort and sun metrics",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show application info")

    # 'show' command - load a forecast and build the page
    show_parser = subparsers.add_parser("show", help="Load a forecast and build the dashboard")
    show_parser.add_argument(
        "query",
        nargs="?",
        default=None,
        help="US ZIP code or place name (default: --lat/--lon or settings)",
    )
    show_parser.add_argument("--lat", type=float, default=None, help="Latitude")
    show_parser.add_argument("--lon", type=float, default=None, help="Longitude")
    show_parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output directory (default: site_dir from settings)",
    )

    # 'serve' command - serve built site locally
    serve_parser = subparsers.add_parser("serve", help="Serve site locally")
    serve_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to serve on (default: api_port from settings)",
    )

    return parser


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Default location: ({settings.lat}, {settings.lon})")
    return 0


def cmd_show(args: argparse.Namespace, session: DashboardSession | None = None) -> int:
    """Handle the 'show' command: load a forecast then build the page."""
    settings = get_settings()
    session = session or DashboardSession()
    token = session.begin_load(args.query)

    try:
        if args.query:
            forecast = search_forecast(args.query)
        else:
            lat = args.lat if args.lat is not None else settings.lat
            lon = args.lon if args.lon is not None else settings.lon
            forecast = load_forecast(lat, lon)
    except ForecastError as exc:
        session.fail_load(token, exc)
        print(session.status, file=sys.stderr)
        return 1

    if not session.complete_load(token, forecast):
        print("A newer forecast load superseded this one.", file=sys.stderr)
        return 1

    output = Path(args.output or settings.site_dir)
    result = build_dashboard(forecast, output)
    print(f"{session.status}: {result['hours']} hours -> {result['output']}")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Handle the 'serve' command: serve the built site locally."""
    settings = get_settings()
    port = args.port if args.port is not None else settings.api_port
    site_dir = Path(settings.site_dir)

    if not site_dir.exists():
        print("No site directory found. Run 'forecast-dashboard show' first.", file=sys.stderr)
        return 1

    handler = functools.partial(http.server.SimpleHTTPRequestHandler, directory=str(site_dir))

    with http.server.HTTPServer(("", port), handler) as server:
        print(f"Serving site on http://localhost:{port}/ (Ctrl+C to stop)")
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            print("\nServer stopped.")

    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 0

    configure_logging(args.debug or get_settings().debug)

    commands = {
        "info": cmd_info,
        "show": cmd_show,
        "serve": cmd_serve,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
