"""evm-deployments CLI: deploy a plan and print verification commands."""

import argparse
import logging
import sys
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from pathlib import Path
from typing import Dict, List, Optional

from .exceptions import DeploymentError
from .orchestrator import build_run
from .paths import get_default_plan_path
from .planner import plan
from .plans import load_plan
from .types import DeploymentReport

logger = logging.getLogger(__name__)


def _parse_overrides(pairs: List[str]) -> Dict[str, str]:
    overrides = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise argparse.ArgumentTypeError(f"Expected KEY=VALUE, got '{pair}'")
        overrides[key] = value
    return overrides


def _output_report(report: DeploymentReport, args_dir: Path) -> None:
    for file_name, source in report.args_files.items():
        path = args_dir / file_name
        path.write_text(source)
        logger.info("Wrote constructor arguments to %s", path)
    for line in report.address_lines:
        print(line)
    for command in report.verify_commands:
        print(command)


def cmd_plan(args: argparse.Namespace) -> int:
    """Print the deployment order without touching the chain."""
    specs = plan(load_plan(args.plan, args.network))
    for spec in specs:
        declared = " ".join(arg.display() for arg in spec.arg_specs)
        print(f"{spec.name} {declared}".rstrip())
    return 0


def cmd_deploy(args: argparse.Namespace) -> int:
    """Run a deployment and print its report."""
    deployment_run = build_run(
        args.network,
        plan_path=args.plan,
        rpc_url=args.rpc_url,
        artifacts_dir=args.artifacts,
        from_address=args.from_address,
        overrides=_parse_overrides(args.set),
    )
    print("Running deploy script", file=sys.stderr)
    try:
        report = deployment_run.run()
    except DeploymentError:
        # Contracts confirmed before the failure stay on-chain; show them
        _output_report(deployment_run.report(), args.args_dir)
        raise
    _output_report(report, args.args_dir)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point for evm-deployments commands."""
    try:
        package_version = get_version("evm-deployments")
    except PackageNotFoundError:
        package_version = "dev"

    parser = argparse.ArgumentParser(
        prog="evm-deployments",
        description="Deploy contracts in dependency order and print verification commands",
    )
    parser.add_argument("--version", action="version", version=f"evm-deployments {package_version}")

    # Common arguments
    parent_parser = argparse.ArgumentParser(add_help=False)
    parent_parser.add_argument(
        "--network",
        required=True,
        help="Target network name (e.g. sepolia, zkSyncSepoliaTestnet)",
    )
    parent_parser.add_argument(
        "--plan",
        type=Path,
        default=None,
        help="Path to deployment plan JSON (default: ./deploy-plan.json)",
    )
    verbosity = parent_parser.add_mutually_exclusive_group()
    verbosity.add_argument("--verbose", action="store_true", help="Log debug output.")
    verbosity.add_argument("--quiet", action="store_true", help="Only log errors.")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    plan_parser = subparsers.add_parser(
        "plan",
        help="Print the deployment order and declared arguments",
        parents=[parent_parser],
    )
    plan_parser.set_defaults(func=cmd_plan)

    deploy_parser = subparsers.add_parser(
        "deploy",
        help="Deploy the plan to a network",
        parents=[parent_parser],
    )
    deploy_parser.add_argument(
        "--artifacts",
        type=Path,
        default=None,
        help="Hardhat artifacts directory (default: ./artifacts)",
    )
    deploy_parser.add_argument(
        "--rpc-url",
        default=None,
        help="JSON-RPC endpoint (default: the network's RPC environment variable)",
    )
    deploy_parser.add_argument(
        "--from",
        dest="from_address",
        default=None,
        help="Deployer account (default: the node's first account)",
    )
    deploy_parser.add_argument(
        "--set",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Configuration value overriding the environment (repeatable)",
    )
    deploy_parser.add_argument(
        "--args-dir",
        type=Path,
        default=Path("."),
        help="Where to write --constructor-args files for array or struct arguments; "
        "run the verify commands from there (default: .)",
    )
    deploy_parser.set_defaults(func=cmd_deploy)

    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return 2

    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    else:
        level = logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    if args.plan is None:
        args.plan = get_default_plan_path()

    try:
        return args.func(args)
    except argparse.ArgumentTypeError as e:
        parser.error(str(e))
    except (DeploymentError, FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
