"""iptables Report - Core analysis engine"""

from collections import Counter
from datetime import timezone
from pathlib import Path
from typing import Iterable, List

from rich.progress import Progress, SpinnerColumn, TextColumn

from .exceptions import LogReadError
from .logging_config import get_logger
from .models import AnalysisReport, DenialRecord
from .parser import parse_line, parse_lines

logger = get_logger(__name__)


def analyze(records: Iterable[DenialRecord]) -> AnalysisReport:
    """Aggregate denial records into per-field counts.

    Counters keep first-seen order, so equal counts in ``top_destinations``
    are ordered by the first appearance of each address.
    """
    records = list(records)
    destinations: Counter = Counter()
    protocols: Counter = Counter()
    ports: Counter = Counter()
    chains: Counter = Counter()
    hours: Counter = Counter()

    for record in records:
        destinations[record.destination_address] += 1
        protocols[record.protocol] += 1
        chains[record.chain] += 1
        if record.destination_port is not None:
            ports[record.destination_port] += 1
        hours[record.timestamp.astimezone(timezone.utc).hour] += 1

    return AnalysisReport(
        total_count=len(records),
        top_destinations=destinations.most_common(),
        protocol_distribution=dict(protocols),
        port_distribution=dict(ports),
        chain_distribution=dict(chains),
        hourly_distribution=dict(hours),
        records=records,
    )


class DenialLogAnalyzer:
    """Reads a kernel log file and builds a denial report from it"""

    def __init__(self, console=None):
        self.console = console

    def read_lines(self, filepath: str) -> List[str]:
        path = Path(filepath)
        try:
            with open(path, 'r', encoding='utf-8', errors='ignore') as f:
                return f.readlines()
        except FileNotFoundError as e:
            raise LogReadError("Log file not found", file_path=str(path)) from e
        except OSError as e:
            raise LogReadError(f"Cannot read log file: {e.strerror or e}", file_path=str(path)) from e

    def parse_file(self, filepath: str) -> List[DenialRecord]:
        lines = self.read_lines(filepath)
        records: List[DenialRecord] = []

        if self.console:
            with Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                console=self.console,
                transient=True
            ) as progress:
                task = progress.add_task("Parsing kernel log...", total=len(lines))

                for line in lines:
                    self._process_line(line, records)
                    progress.update(task, advance=1)
        else:
            records = parse_lines(lines)

        logger.debug("Parsed %d denial records from %d lines (%d skipped)",
                     len(records), len(lines), len(lines) - len(records))
        return records

    def _process_line(self, line: str, records: List[DenialRecord]):
        record = parse_line(line)
        if record:
            records.append(record)

    def analyze_file(self, filepath: str) -> AnalysisReport:
        report = analyze(self.parse_file(filepath))
        logger.info("Analyzed %d denials from %s", report.total_count, filepath)
        return report
