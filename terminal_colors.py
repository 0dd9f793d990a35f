"""
ANSI color codes for terminal output.

Provides consistent status coloring for route.py and check_route.py.
"""

# Standard ANSI color codes
RED = '\033[91m'
GREEN = '\033[92m'
YELLOW = '\033[93m'
RESET = '\033[0m'


def status_text(found: bool, ok: str = "OK", partial: str = "PARTIAL") -> str:
    """Colored status word for a routed connector."""
    if found:
        return f"{GREEN}{ok}{RESET}"
    return f"{YELLOW}{partial}{RESET}"
