import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from loginsights.cli.commands.generate import handle as handle_generate
from loginsights.cli.commands.ingest import handle as handle_ingest
from loginsights.cli.commands.reference import handle as handle_reference
from loginsights.cli.utils import error_exit
from loginsights.config.options import OUTPUT_FORMATS, VALID_LOG_LEVELS
from loginsights.config.settings import ConfigError, load_config


def main(argv: Optional[Sequence[str]] = None) -> int:
    # Common options shared by top-level and subcommands
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--log-level",
        choices=list(VALID_LOG_LEVELS),
        type=str.upper,
        default=argparse.SUPPRESS,
        help="set logging level (default: WARNING)",
    )
    common.add_argument(
        "--config",
        "-c",
        default=argparse.SUPPRESS,
        help="path to loginsights.yaml (or a directory containing it)",
    )

    parser = argparse.ArgumentParser(
        prog="loginsights",
        description="Ingest log metric uploads into chart-ready daily series.",
        parents=[common],
    )
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_generate = sub.add_parser(
        "generate",
        help="emit a synthetic baseline series",
        parents=[common],
    )
    p_generate.add_argument(
        "--days", "-d", type=int, default=None,
        help="number of daily records (defaults to the configured time range)",
    )
    p_generate.add_argument(
        "--format", "-f", dest="fmt",
        choices=list(OUTPUT_FORMATS),
        default="table",
        help="output format",
    )

    p_ingest = sub.add_parser(
        "ingest",
        help="detect, decode and normalize a CSV or JSON upload",
        parents=[common],
    )
    p_ingest.add_argument("path", help="file to ingest (.csv or .json)")
    p_ingest.add_argument(
        "--format", "-f", dest="fmt",
        choices=list(OUTPUT_FORMATS),
        default="table",
        help="output format",
    )

    p_reference = sub.add_parser(
        "reference",
        help="print the static severity and top-error tables",
        parents=[common],
    )
    p_reference.add_argument(
        "--format", "-f", dest="fmt",
        choices=["table", "json"],
        default="table",
        help="output format",
    )

    args = parser.parse_args(argv)
    config_arg = getattr(args, "config", None)
    cli_level_arg = getattr(args, "log_level", None)

    try:
        config = load_config(Path(config_arg) if config_arg else Path.cwd())
    except ConfigError as exc:
        logging.basicConfig(level=logging.WARNING, format="%(message)s")
        error_exit(str(exc))
        return 2

    base_level_name = (cli_level_arg or config.log_level or "WARNING").upper()
    base_level = logging.getLevelName(base_level_name)
    if not isinstance(base_level, int):
        base_level = logging.WARNING
    logging.basicConfig(level=base_level, format="%(message)s")

    if args.cmd == "generate":
        days = args.days if args.days is not None else config.default_time_range
        handle_generate(days=days, fmt=args.fmt, config=config)
        return 0
    if args.cmd == "ingest":
        handle_ingest(path=args.path, fmt=args.fmt, config=config)
        return 0
    if args.cmd == "reference":
        handle_reference(fmt=args.fmt)
        return 0
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
