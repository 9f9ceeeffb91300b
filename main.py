#!/usr/bin/env python3
"""iptables Report - Entry point"""

import sys

from iptables_report.cli import main


if __name__ == "__main__":
    sys.exit(main())
