"""iptables Report - Report output"""

import json
from collections import Counter
from typing import Dict, Iterator, List, Tuple

from rich.console import Console

from .exceptions import ReportRenderError
from .models import AnalysisReport
from .patterns import JSON_FORMATS, PORT_SECTION_LIMIT

TITLE = "=== IPTABLES DENIAL REPORT ==="

Section = Tuple[str, List[str]]


def _by_count(distribution: Dict) -> List[Tuple]:
    # most_common is stable, so ties keep first-seen order
    return Counter(distribution).most_common()


def iter_sections(report: AnalysisReport, top_n: int) -> Iterator[Section]:
    """Yield (heading, rows) pairs of the text report in display order."""
    yield f"TOP {top_n} DESTINATION IPs (Attackers):", [
        f"  {ip}: {count} denials" for ip, count in report.top_destinations[:top_n]
    ]

    yield "PROTOCOL DISTRIBUTION:", [
        f"  {protocol}: {count}" for protocol, count in _by_count(report.protocol_distribution)
    ]

    if report.port_distribution:
        ports = _by_count(report.port_distribution)[:PORT_SECTION_LIMIT]
        yield "TOP DESTINATION PORTS:", [f"  {port}: {count} denials" for port, count in ports]

    yield "CHAIN DISTRIBUTION:", [
        f"  {chain}: {count}" for chain, count in _by_count(report.chain_distribution)
    ]

    yield "HOURLY DISTRIBUTION:", [
        f"  {hour:02d}:00: {report.hourly_distribution[hour]} denials"
        for hour in range(24)
        if report.hourly_distribution.get(hour)
    ]


def format_text(report: AnalysisReport, top_n: int) -> str:
    lines = [TITLE, "", f"Total denials: {report.total_count}"]
    for heading, rows in iter_sections(report, top_n):
        lines.append("")
        lines.append(heading)
        lines.extend(rows)
    return "\n".join(lines)


def format_json(report: AnalysisReport) -> str:
    try:
        return json.dumps(report.to_dict(), indent=2)
    except (TypeError, ValueError) as e:
        raise ReportRenderError(f"Cannot encode report as JSON: {e}") from e


def render(report: AnalysisReport, fmt: str, top_n: int) -> str:
    """Render a report; unknown formats fall back to text."""
    if fmt in JSON_FORMATS:
        return format_json(report)
    return format_text(report, top_n)


def _emit(console: Console, text: str = "", style: str = None):
    console.print(text, style=style, markup=False, highlight=False, emoji=False, soft_wrap=True)


def print_report(report: AnalysisReport, fmt: str, top_n: int, console: Console = None):
    if console is None:
        console = Console()

    if fmt in JSON_FORMATS:
        _emit(console, format_json(report))
        return

    _emit(console, TITLE, style="bold cyan")
    _emit(console)
    _emit(console, f"Total denials: {report.total_count}")
    for heading, rows in iter_sections(report, top_n):
        _emit(console)
        _emit(console, heading, style="bold")
        for row in rows:
            _emit(console, row)
