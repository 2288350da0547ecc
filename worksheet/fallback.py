# worksheet/fallback.py
import re
from dataclasses import dataclass, asdict
from typing import Any, Callable, Optional

FINALLY_MESSAGE = "This is finally."

# Optional sign, ASCII digits, nothing else (no spaces, underscores or other digit sets).
_INT_TEXT = re.compile(r"[+-]?[0-9]+")

# ----------------------------
# Envelope (always returned)
# ----------------------------
@dataclass
class Attempt:
    status: str           # "ok" | "fallback"
    value: Any            # parsed value or the default
    error: Optional[str]  # captured error message (if any)
    source: str           # "primary" | "default"

    @property
    def degraded(self) -> bool:
        return self.source != "primary"

    def to_receipt(self) -> dict:
        return asdict(self)


def _parse_int(text: Any) -> int:
    # Only decimal integer text; floats and bools are not integers here.
    if isinstance(text, bool) or not isinstance(text, (str, int)):
        raise TypeError(f"cannot parse {type(text).__name__} as int")
    if isinstance(text, str) and not _INT_TEXT.fullmatch(text):
        raise ValueError(f"not a decimal integer: {text!r}")
    return int(text)


# ----------------------------
# Parse with default + cleanup (total, never throws for bad text)
# ----------------------------
def parse_int_or_default(
    text: Any,
    *,
    default: int = 0,
    cleanup: Optional[Callable[[], None]] = None,
) -> Attempt:
    """
    Parse `text` as an int; on failure return `default`.

    `cleanup` runs exactly once in a finally block, after success or failure.
    Without one, FINALLY_MESSAGE is printed.
    """
    try:
        value = _parse_int(text)
        return Attempt(status="ok", value=value, error=None, source="primary")
    except (ValueError, TypeError) as e:
        return Attempt(status="fallback", value=default, error=str(e), source="default")
    finally:
        if cleanup is not None:
            cleanup()
        else:
            print(FINALLY_MESSAGE)
