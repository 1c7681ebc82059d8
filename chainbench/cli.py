"""Command-line entry point."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from . import logs
from .config import Configuration, LogConfiguration, load_configuration, merge
from .logs import JSON_FORMAT, NORMAL_FORMAT, LogLevel

PROG = "oss-chain-bench"
VERSION = "dev"

# Options that only a scan subcommand defines; absent ones default to empty.
_SCAN_OPTIONS = ("repository_url", "access_token")


def determine_log_level(is_quiet: bool, verbosity: int) -> LogLevel | str:
    """Level chosen by flags; empty when the config file or default should decide."""
    if is_quiet:
        return LogLevel.ERROR
    if verbosity == 0:
        return ""
    if verbosity == 1:
        return LogLevel.DEBUG
    return LogLevel.TRACE


def generate_cli_config(args: argparse.Namespace) -> Configuration:
    """The configuration given by command-line flags."""
    scan_values = {name: getattr(args, name, "") for name in _SCAN_OPTIONS}
    return Configuration(
        log_configuration=LogConfiguration(
            log_file_path=args.log_file,
            log_level=determine_log_level(args.quiet, args.verbose),
            log_format=args.log_format,
            no_color=args.no_color,
        ),
        output_file_path=args.output_file,
        output_template_file_path=args.template,
        **scan_values,
    )


def build_parser(version: str = VERSION) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Run CIS Benchmarks checks against your software supply chain",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s version {version}")
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="silence logs, prints only error messages"
    )
    parser.add_argument(
        "-o",
        "--output-file",
        default="",
        help="the path to a file that will contain the results of the scanning",
    )
    parser.add_argument("--template", default="", help="the path to an output template format file")
    parser.add_argument(
        "-c", "--config-file", default="", help="the path to a local configuration file"
    )
    parser.add_argument("-l", "--log-file", default="", help="set to print logs into a file")
    parser.add_argument(
        "--log-format",
        default="",
        help=f"sets the format of the logs ({NORMAL_FORMAT}, {JSON_FORMAT})",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="set the verbosity level (-v: debug, -vv: trace), default: info",
    )
    parser.add_argument("--no-color", action="store_true", help="disables output color")
    return parser


def _init_logger(configuration: Configuration) -> None:
    log_config = configuration.log_configuration or LogConfiguration()
    try:
        logs.init_logger(
            log_config.log_level,
            log_config.log_format,
            log_config.log_file_path,
            log_config.no_color,
        )
    except (OSError, ValueError) as exc:
        raise ValueError(f"failed to init logger - {exc}") from exc


def main(argv: Sequence[str] | None = None) -> int:
    """Load the configuration, set up logging and show the available commands."""
    parser = build_parser(VERSION)
    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:
        if exc.code is None:
            return 0
        return exc.code if isinstance(exc.code, int) else 1

    try:
        configuration = load_configuration(args.config_file)
        merge(configuration, generate_cli_config(args), override=True)
        _init_logger(configuration)
    except (OSError, ValueError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())