"""
Pytest configuration and shared fixtures for iptables report tests.
"""

import os
import sys
from datetime import datetime, timezone

import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from iptables_report.models import DenialRecord


# =============================================================================
# SAMPLE LOG DATA FIXTURES
# =============================================================================

@pytest.fixture
def sample_denial_line():
    """A complete denial line with an empty OUT= field."""
    return (
        "2024-01-15T03:22:10.500+00:00 hostA kernel: INPUT: DROP_IPV4 IN=eth0 OUT= "
        "SRC=203.0.113.7 DST=10.0.0.5 PROTO=TCP SPT=4444 DPT=22"
    )


@pytest.fixture
def sample_log_lines():
    """A mixed kernel log: five denials among irrelevant lines."""
    return [
        "2024-01-15T03:22:10.500+00:00 hostA kernel: INPUT: DROP_IPV4 IN=eth0 OUT= SRC=203.0.113.7 DST=10.0.0.5 PROTO=TCP SPT=4444 DPT=22",
        "2024-01-15T03:25:00.000+00:00 hostA sshd[812]: Accepted publickey for admin from 10.0.0.9",
        "2024-01-15T04:01:02.123+01:00 hostA kernel: FORWARD: DROP_IPV4 IN=eth0 OUT=eth1 SRC=198.51.100.4 DST=10.0.0.6 PROTO=UDP SPT=53 DPT=53",
        "2024-01-15T05:10:00.000+00:00 hostA kernel: INPUT: DROP_IPV4 IN=eth0 OUT= SRC=203.0.113.7 DST=10.0.0.5 PROTO=TCP SPT=4445 DPT=22",
        "2024-01-15T05:11:00.000+00:00 hostA kernel: INPUT: ACCEPT_IPV4 IN=eth0 OUT= SRC=203.0.113.8 DST=10.0.0.5 PROTO=TCP DPT=80",
        "2024-01-15T05:12:00.000+00:00 hostA kernel: INPUT: DROP_IPV4 IN=eth0 OUT= SRC=192.0.2.1 DST=10.0.0.7 PROTO=ICMP TYPE=8 CODE=0",
        "garbage",
        "2024-01-15T23:59:59.999-05:00 hostA kernel: INPUT: DROP_IPV4 IN=eth0 OUT= SRC=192.0.2.2 DST=10.0.0.6 PROTO=TCP SPT=1 DPT=443",
    ]


@pytest.fixture
def make_record():
    """Factory for DenialRecord objects with sensible defaults."""
    def _make(destination="10.0.0.5", protocol="TCP", chain="INPUT", port=22,
              hour=3, source="203.0.113.7"):
        return DenialRecord(
            timestamp=datetime(2024, 1, 15, hour, 0, 0, tzinfo=timezone.utc),
            source_address=source,
            destination_address=destination,
            protocol=protocol,
            chain=chain,
            destination_port=port,
        )
    return _make


# =============================================================================
# TEMPORARY FILE FIXTURES
# =============================================================================

@pytest.fixture
def temp_log_file(tmp_path, sample_log_lines):
    """Create a temporary kernel log file for testing."""
    log_file = tmp_path / "kern.log"
    log_file.write_text("\n".join(sample_log_lines) + "\n")
    return log_file


@pytest.fixture
def empty_log_file(tmp_path):
    """A log file with no denial lines."""
    log_file = tmp_path / "empty.log"
    log_file.write_text("nothing to see here\n")
    return log_file
