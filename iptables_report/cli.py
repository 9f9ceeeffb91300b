"""iptables Report - Command line interface"""

import argparse
from pathlib import Path

from rich.console import Console

from .analyzer import DenialLogAnalyzer
from .exceptions import IptablesReportError, ReportWriteError
from .logging_config import configure_logging, enable_debug, get_logger
from .output import format_json, print_report
from .patterns import DEFAULT_FORMAT, DEFAULT_TOP_N, JSON_FORMATS, VERSION

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="iptables-report",
        description="Analyze iptables connection denial log entries",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument("-l", "--log-file", required=True, help="Path to the kernel log file")
    parser.add_argument("-f", "--format", default=DEFAULT_FORMAT,
                        help="Output format (text, json)")
    parser.add_argument("-t", "--top", type=int, default=DEFAULT_TOP_N,
                        help="Show top N destination IPs")
    parser.add_argument("-o", "--output", help="Also save the JSON report to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")
    parser.add_argument("--version", action="version", version=f"iptables-report v{VERSION}")
    return parser


def save_report(report, output: str):
    path = Path(output)
    try:
        path.write_text(format_json(report) + "\n", encoding="utf-8")
    except OSError as e:
        raise ReportWriteError(f"Cannot write report: {e.strerror or e}", file_path=str(path)) from e
    logger.info("Report saved to %s", path)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging()
    if args.verbose:
        enable_debug()

    console = Console()
    # Progress goes to stderr and only when it cannot corrupt JSON on stdout
    progress_console = None
    if args.format not in JSON_FORMATS:
        progress_console = Console(stderr=True)

    analyzer = DenialLogAnalyzer(console=progress_console)

    try:
        report = analyzer.analyze_file(args.log_file)
        print_report(report, args.format, max(args.top, 0), console)
        if args.output:
            save_report(report, args.output)
    except IptablesReportError as e:
        logger.error("Error: %s", e)
        return 1

    return 0
