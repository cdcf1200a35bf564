import argparse
from datetime import date

from cardcycle.api.app import run as run_api
from cardcycle.config import settings
from cardcycle.logging_config import configure_logging
from cardcycle.reporting.report import main as run_report


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="CardCycle unified entrypoint")
    parser.add_argument(
        "mode",
        nargs="?",
        choices=["api", "report"],
        default="api",
        help="Run mode: api (default), report",
    )
    parser.add_argument(
        "--date",
        type=date.fromisoformat,
        default=None,
        help="Reference date (YYYY-MM-DD) for report mode; defaults to today",
    )
    parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    return parser


def main() -> None:
    args = build_parser().parse_args()
    configure_logging(settings.log_level)

    if args.mode == "api":
        run_api()
        return

    run_report(reference_date=args.date, as_json=args.json)


if __name__ == "__main__":
    main()
