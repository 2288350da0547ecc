"""Worksheet runner.

- Looks snippets up by exact name or normalized slug.
- Runs each one against a Console that prints and records its lines.
- Receipts: engine, snippet, logs, steps, result, status. Deterministic content.
- On a snippet failure the receipt is still returned, with status "error"
  and a level-tagged log entry; the caller decides how to surface it.
"""

from __future__ import annotations

import copy
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import jsonschema

from .console import Console, _jsonable
from .errors import UnknownSnippetError
from .names import normalize_snippet_slug, slug_match
from .snippets import SNIPPETS, Snippet

SCHEMA_PATH = Path(__file__).resolve().parent / "schemas" / "worksheet-receipt.schema.json"


def load_receipt_schema(path: Optional[Path] = None) -> Dict[str, Any]:
    return json.loads(Path(path or SCHEMA_PATH).read_text(encoding="utf-8"))


def validate_receipt(receipt: Dict[str, Any], schema: Optional[Dict[str, Any]] = None) -> None:
    """Raise jsonschema.ValidationError if `receipt` does not match the schema."""
    jsonschema.validate(instance=receipt, schema=schema or load_receipt_schema())


@dataclass
class RunOptions:
    echo: bool = True
    validate: bool = False
    selection: List[str] = field(default_factory=list)


class Runner:
    def __init__(self, *, options: Optional[RunOptions] = None, registry: Optional[Dict[str, Snippet]] = None):
        self.options = options or RunOptions()
        self._registry: Dict[str, Snippet] = dict(SNIPPETS if registry is None else registry)
        self._schema: Optional[Dict[str, Any]] = None

    # ---------- lookup
    def names(self) -> List[str]:
        return list(self._registry)

    def lookup(self, name: str) -> Tuple[str, Snippet]:
        if name in self._registry:
            return name, self._registry[name]
        slug = normalize_snippet_slug(name)
        for raw, fn in self._registry.items():
            if normalize_snippet_slug(raw) == slug:
                return raw, fn
        raise UnknownSnippetError(name)

    def select(self, patterns: Optional[List[str]] = None) -> List[str]:
        """Resolve names/slugs (or '*') to registered names, in registry order."""
        patterns = list(patterns if patterns is not None else self.options.selection) or ["*"]
        chosen: List[str] = []
        for pat in patterns:
            found = [raw for raw in self.names() if slug_match(pat, normalize_snippet_slug(raw))]
            if not found:
                raise UnknownSnippetError(pat)
            for raw in found:
                if raw not in chosen:
                    chosen.append(raw)
        order = self.names()
        return sorted(chosen, key=order.index)

    # ---------- execution
    def run(self, name: str) -> Tuple[Any, Dict[str, Any]]:
        raw, fn = self.lookup(name)
        receipt: Dict[str, Any] = {
            "engine": "worksheet",
            "snippet": {"name": raw, "slug": normalize_snippet_slug(raw)},
            "logs": [],
            "steps": [],
            "status": "ok",
            "result": None,
        }
        out = Console(receipt, echo=self.options.echo)
        result = None
        try:
            result = fn(out)
            receipt["result"] = _jsonable(result)
        except Exception as e:
            receipt["status"] = "error"
            receipt["reason"] = str(e)
            out.log("error", "snippet", snippet=raw, error=type(e).__name__, message=str(e))
        if self.options.validate:
            if self._schema is None:
                self._schema = load_receipt_schema()
            validate_receipt(receipt, self._schema)
        return result, copy.deepcopy(receipt)

    def run_all(self, patterns: Optional[List[str]] = None) -> List[Dict[str, Any]]:
        receipts = []
        for raw in self.select(patterns):
            _, receipt = self.run(raw)
            receipts.append(receipt)
        return receipts


def run_snippet(name: str, *, echo: bool = True) -> Tuple[Any, Dict[str, Any]]:
    return Runner(options=RunOptions(echo=echo)).run(name)
