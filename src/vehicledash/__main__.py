"""Command-line front end for the vehicle dashboard.

Examples::

    vehicledash --base-url http://localhost:5000 list --filter Active
    vehicledash add "Truck1" --status Active
    vehicledash set-status 64f0c2 Maintenance
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence

from vehicledash.client import VehicleClient
from vehicledash.config import DashboardConfig
from vehicledash.dashboard import VehicleDashboard
from vehicledash.exceptions import DashboardConfigError
from vehicledash.models.vehicle import StatusFilter, VehicleStatus
from vehicledash.notify import ConsoleNotifier
from vehicledash.view import render_dashboard

_STATUS_CHOICES = [status.value for status in VehicleStatus]
_FILTER_CHOICES = [value.value for value in StatusFilter]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="vehicledash", description="Vehicle Management Dashboard")
    parser.add_argument("--base-url", help="Vehicle service origin (default: $VEHICLEDASH_BASE_URL)")
    parser.add_argument("--timeout", type=float, help="Per-request timeout in seconds")
    parser.add_argument(
        "--filter",
        choices=_FILTER_CHOICES,
        default=StatusFilter.ALL.value,
        help="Only show vehicles with this status",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("list", help="Show vehicles")

    add = sub.add_parser("add", help="Add a vehicle")
    add.add_argument("name", help="Vehicle name")
    add.add_argument("--status", choices=_STATUS_CHOICES, default=VehicleStatus.INACTIVE.value)

    set_status = sub.add_parser("set-status", help="Change a vehicle's status")
    set_status.add_argument("vehicle_id", help="Vehicle identifier")
    set_status.add_argument("status", choices=_STATUS_CHOICES)
    return parser


async def run(args: argparse.Namespace, notifier: ConsoleNotifier | None = None) -> int:
    overrides: dict[str, object] = {}
    if args.base_url:
        overrides["base_url"] = args.base_url
    if args.timeout is not None:
        overrides["request_timeout"] = args.timeout
    config = DashboardConfig.from_env(**overrides)
    notifier = notifier or ConsoleNotifier()

    async with VehicleClient(config) as client:
        dashboard = VehicleDashboard(client, notifier)
        try:
            dashboard.set_filter(args.filter)
            ok = await dashboard.mount()
            if args.command == "add":
                dashboard.update_draft(name=args.name, status=args.status)
                ok = await dashboard.add_vehicle() and ok
            elif args.command == "set-status":
                ok = await dashboard.set_status(args.vehicle_id, args.status) and ok
            print(render_dashboard(dashboard))
        finally:
            dashboard.unmount()
    return 0 if ok else 1


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.ERROR)

    try:
        return asyncio.run(run(args))
    except DashboardConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
