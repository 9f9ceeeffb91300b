"""iptables denial report package"""

from .patterns import VERSION
from .models import AnalysisReport, DenialRecord
from .parser import parse_line, parse_lines
from .analyzer import DenialLogAnalyzer, analyze
from .output import format_json, format_text, print_report, render
from .exceptions import IptablesReportError, LogReadError, ReportRenderError, ReportWriteError

__all__ = [
    'VERSION',
    'AnalysisReport',
    'DenialRecord',
    'DenialLogAnalyzer',
    'parse_line',
    'parse_lines',
    'analyze',
    'render',
    'format_json',
    'format_text',
    'print_report',
    'IptablesReportError',
    'LogReadError',
    'ReportRenderError',
    'ReportWriteError',
]
