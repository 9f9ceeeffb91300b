"""iptables Report - Kernel log line parser"""

import re
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional

from .models import DenialRecord
from .patterns import (
    CHAIN_TOKEN,
    DROP_MARKER,
    FIELD_KEYS,
    KERNEL_MARKER,
    MAX_PORT,
    MIN_TOKENS,
    TIMESTAMP_FORMATS,
    TIMESTAMP_TOKEN,
)

# strptime's %f stops at microseconds
_SUBMICRO_DIGITS = re.compile(r'(\.\d{6})\d+')


def parse_timestamp(token: str) -> datetime:
    """Parse an ISO-8601 timestamp with offset into UTC.

    Unparseable tokens yield the current time so the line still counts.
    """
    token = _SUBMICRO_DIGITS.sub(r'\1', token)
    for fmt in TIMESTAMP_FORMATS:
        try:
            return datetime.strptime(token, fmt).astimezone(timezone.utc)
        except (ValueError, OverflowError):
            continue
    return datetime.now(timezone.utc)


def parse_port(value: str) -> Optional[int]:
    if value.startswith('+'):
        value = value[1:]
    if not (value.isascii() and value.isdigit()):
        return None
    # bound the digit count before int() sees it
    digits = value.lstrip('0') or '0'
    if len(digits) > len(str(MAX_PORT)):
        return None
    port = int(digits)
    return port if port <= MAX_PORT else None


def parse_fields(tokens: Iterable[str]) -> Dict[str, str]:
    """Collect recognized KEY=VALUE tokens, later duplicates win."""
    fields = {}
    for token in tokens:
        if '=' not in token:
            continue
        key, value = token.split('=')[:2]
        if key in FIELD_KEYS:
            fields[FIELD_KEYS[key]] = value
    return fields


def parse_line(line: str) -> Optional[DenialRecord]:
    if KERNEL_MARKER not in line or DROP_MARKER not in line:
        return None

    tokens = line.split()
    if len(tokens) < MIN_TOKENS:
        return None

    fields = parse_fields(tokens[CHAIN_TOKEN + 1:])
    source = fields.get('source_address', '')
    destination = fields.get('destination_address', '')
    protocol = fields.get('protocol', '')
    if not (source and destination and protocol):
        return None

    chain = tokens[CHAIN_TOKEN]
    if chain.endswith(':'):
        chain = chain[:-1]

    port = fields.get('destination_port')
    return DenialRecord(
        timestamp=parse_timestamp(tokens[TIMESTAMP_TOKEN]),
        source_address=source,
        destination_address=destination,
        protocol=protocol,
        chain=chain,
        destination_port=parse_port(port) if port is not None else None,
        outbound_interface=fields.get('outbound_interface') or None,
    )


def parse_lines(lines: Iterable[str]) -> List[DenialRecord]:
    records = []
    for line in lines:
        record = parse_line(line)
        if record:
            records.append(record)
    return records
