import argparse
import sys

from rich.console import Console

from . import __version__
from .core import BACKENDS
from .logger import logger, setup_logger
from .modes import report


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vminfo",
        description="vminfo: Compute Engine VM Report & Backup Command Generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Write vm-example_<YYYYMMDD>_info.txt in the current directory
  vminfo my-project vm-example us-east1-b

  # Use the gcloud CLI instead of the client library
  vminfo my-project vm-example us-east1-b --backend gcloud

  # Print the report instead of saving it
  vminfo my-project vm-example us-east1-b --stdout
""",
    )
    parser.add_argument(
        "--version", action="version", version=f"vminfo v{__version__}"
    )

    parser.add_argument("project_id", metavar="PROJECT_ID", help="GCP Project ID")
    parser.add_argument("instance_name", metavar="INSTANCE_NAME", help="VM name")
    parser.add_argument("zone", metavar="ZONE", help="Zone of the VM (e.g. us-east1-b)")

    parser.add_argument(
        "--backend",
        choices=BACKENDS,
        default="api",
        help="How to query Compute Engine (default: api)",
    )
    parser.add_argument(
        "--output-dir",
        default=".",
        help="Directory for the report file (default: current directory)",
    )
    parser.add_argument(
        "--stdout", action="store_true", help="Print the report instead of saving it"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logger(verbose=args.verbose)

    console = Console(stderr=True)

    try:
        report.run_report(args, console)
    except Exception as e:
        logger.error(f"Report Failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        console = Console(stderr=True)
        console.print("\n[bold red]Operation cancelled by user.[/bold red]")
        sys.exit(130)
