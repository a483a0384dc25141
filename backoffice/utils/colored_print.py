"""
Console output helpers used before logging is configured
"""

import sys

GREEN = "\033[92m"
YELLOW = "\033[93m"
RED = "\033[91m"
CYAN = "\033[96m"
BOLD = "\033[1m"
RESET = "\033[0m"


def colored_print(message: str, color: str = '', bold: bool = False, file=None):
    file = file or sys.stdout
    if file.isatty():
        print(f"{BOLD if bold else ''}{color}{message}{RESET}", file=file)
    else:
        print(message, file=file)


def print_warning(message: str):
    colored_print(message, YELLOW)


def print_error(message: str):
    colored_print(message, RED, file=sys.stderr)


def print_step(message: str):
    colored_print(message, CYAN, bold=True)


def print_success(message: str):
    colored_print(f"✅ {message}", GREEN, bold=True)


def print_failure(message: str):
    colored_print(f"❌ {message}", RED, bold=True)
