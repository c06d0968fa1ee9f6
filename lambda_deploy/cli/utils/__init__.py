"""CLI utility functions"""

from .output import (
    console,
    ConsoleReporter,
    format_summary,
    format_contract_report,
    print_error,
    print_warning,
    print_info,
    print_success,
    print_header,
)

__all__ = [
    'console',
    'ConsoleReporter',
    'format_summary',
    'format_contract_report',
    'print_error',
    'print_warning',
    'print_info',
    'print_success',
    'print_header',
]
