# worksheet/__init__.py
# Runnable notes: small language-feature snippets with receipts.

from .errors import WorksheetError, UnknownSnippetError
from .recursion import factorial, factorial_loop
from .scan import PRIME_LIST, ScanState, scan_until, print_primes
from .fallback import Attempt, parse_int_or_default
from .runner import Runner, run_snippet

__all__ = [
    "WorksheetError",
    "UnknownSnippetError",
    "factorial",
    "factorial_loop",
    "PRIME_LIST",
    "ScanState",
    "scan_until",
    "print_primes",
    "Attempt",
    "parse_int_or_default",
    "Runner",
    "run_snippet",
]

__version__ = "0.1.0"
