# worksheet/console.py
# Console lines printed and recorded into a receipt.
from __future__ import annotations

from typing import Any, Dict, Optional


def show_value(value: Any) -> str:
    # Lists and tuples print like the worksheet shows them: List(a, b)
    if isinstance(value, (list, tuple)):
        return "List(" + ", ".join(show_value(v) for v in value) + ")"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class Console:
    def __init__(self, receipt: Optional[Dict[str, Any]] = None, *, echo: bool = True):
        self.echo = bool(echo)
        self.receipt: Dict[str, Any] = receipt if receipt is not None else {"logs": [], "steps": []}
        self.receipt.setdefault("logs", [])
        self.receipt.setdefault("steps", [])

    def emit(self, value: Any) -> None:
        line = show_value(value)
        if self.echo:
            print(line)
        self.receipt["logs"].append(line)

    def bind(self, name: str, value: Any) -> Any:
        """Record `name : value` the way a worksheet echoes a val."""
        self.step({"event": "bind", "name": name, "value": _jsonable(value)})
        self.emit(f"{name}: {show_value(value)}")
        return value

    def step(self, entry: Dict[str, Any]) -> None:
        self.receipt["steps"].append(entry)

    def log(self, level: str, event: str, **fields: Any) -> None:
        self.receipt["logs"].append({"level": level, "event": event, **fields})

    __call__ = emit


def _jsonable(value: Any) -> Any:
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    if isinstance(value, dict):
        return {str(k): _jsonable(v) for k, v in value.items()}
    to_receipt = getattr(value, "to_receipt", None)
    if callable(to_receipt):
        return to_receipt()
    return repr(value)
