"""iptables Report - Constants and patterns"""

VERSION = "1.0.0"

# Both markers must appear for a line to be considered a denial
KERNEL_MARKER = "kernel:"
DROP_MARKER = "DROP_IPV4"

DENIED_ACTION = "DENIED"

# Token layout of a denial line
MIN_TOKENS = 6
TIMESTAMP_TOKEN = 0
CHAIN_TOKEN = 3

# 2024-01-15T03:22:10.500+00:00
TIMESTAMP_FORMATS = (
    "%Y-%m-%dT%H:%M:%S.%f%z",
    "%Y-%m-%dT%H:%M:%S%z",
)

# Recognized KEY=VALUE fields
FIELD_KEYS = {
    'SRC': 'source_address',
    'DST': 'destination_address',
    'PROTO': 'protocol',
    'OUT': 'outbound_interface',
    'DPT': 'destination_port',
}

MAX_PORT = 65535

# Report defaults
DEFAULT_FORMAT = 'text'
DEFAULT_TOP_N = 10
PORT_SECTION_LIMIT = 10
JSON_FORMATS = ('json', 'structured')
