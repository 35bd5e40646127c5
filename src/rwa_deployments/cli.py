"""Command line entry point for rwa-deployments."""

import argparse
import json
import logging
import sys
from typing import List, Optional

from .builder import ModuleBuilder
from .config import available_networks, load_environment, load_network_profile
from .deployments import DeploymentPlanner
from .exceptions import DeploymentError
from .modules import declare_project_modules
from .parsers import load_modules_from_dir
from .rpc import verify_network


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rwa-deployments",
        description="Plan RWA contract deployments for an external executor.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    plan = sub.add_parser("plan", help="Resolve modules and render the deployment plan")
    plan.add_argument("--network", required=True, help=f"One of: {', '.join(available_networks())}")
    plan.add_argument(
        "--modules",
        default=None,
        help="Directory of JSON module descriptors (defaults to the built-in project modules)",
    )
    plan.add_argument(
        "--live-escrow",
        action="store_true",
        help="Wire the marketplace to the escrow deployed in this run, not the pinned address",
    )
    plan.add_argument("--output", default=None, help="Write the plan to this file instead of stdout")
    plan.add_argument("--env-file", default=None, help="Path to .env file (default: ./.env)")
    plan.add_argument(
        "--verify-endpoint",
        action="store_true",
        help="Check the endpoint's chain id before planning",
    )
    return parser


def _cmd_plan(args: argparse.Namespace) -> int:
    profile = load_network_profile(args.network, load_environment(args.env_file))

    builder = ModuleBuilder()
    if args.modules:
        load_modules_from_dir(args.modules, builder)
    else:
        declare_project_modules(builder, live_escrow=args.live_escrow)

    planner = DeploymentPlanner(builder.modules())

    if args.verify_endpoint:
        verify_network(profile)

    if args.output:
        path = planner.write_plan(profile, args.output)
        print(path)
    else:
        json.dump(planner.to_dict(profile), sys.stdout, indent=2)
        sys.stdout.write("\n")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.modules and args.live_escrow:
        parser.error("--live-escrow applies to the built-in modules, not --modules")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        return _cmd_plan(args)
    except (DeploymentError, RuntimeError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
