"""iptables Report - Data models"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from .patterns import DENIED_ACTION


@dataclass(frozen=True)
class DenialRecord:
    """One dropped packet parsed from a kernel log line"""
    timestamp: datetime
    source_address: str
    destination_address: str
    protocol: str
    chain: str
    destination_port: Optional[int] = None
    outbound_interface: Optional[str] = None
    action: str = DENIED_ACTION

    def to_dict(self) -> Dict[str, Any]:
        return {
            'timestamp': self.timestamp.isoformat(),
            'source_address': self.source_address,
            'destination_address': self.destination_address,
            'destination_port': self.destination_port,
            'protocol': self.protocol,
            'outbound_interface': self.outbound_interface,
            'chain': self.chain,
            'action': self.action,
        }


@dataclass(frozen=True)
class AnalysisReport:
    """Aggregate statistics over a list of denial records"""
    total_count: int
    top_destinations: List[Tuple[str, int]] = field(default_factory=list)
    protocol_distribution: Dict[str, int] = field(default_factory=dict)
    port_distribution: Dict[int, int] = field(default_factory=dict)
    chain_distribution: Dict[str, int] = field(default_factory=dict)
    hourly_distribution: Dict[int, int] = field(default_factory=dict)
    records: List[DenialRecord] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Every field, in a form json can encode without loss."""
        return {
            'total_count': self.total_count,
            'top_destinations': [[ip, count] for ip, count in self.top_destinations],
            'protocol_distribution': dict(self.protocol_distribution),
            'port_distribution': dict(self.port_distribution),
            'chain_distribution': dict(self.chain_distribution),
            'hourly_distribution': dict(self.hourly_distribution),
            'records': [r.to_dict() for r in self.records],
        }
