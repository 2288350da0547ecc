# worksheet/cli.py
# CLI for running worksheet snippets; prints console lines and receipts.

from __future__ import annotations

import argparse
import datetime as _dt
import hashlib
import json
import uuid
from pathlib import Path
from typing import Any, Dict, List, Optional

import jsonschema

from . import __version__
from .errors import UnknownSnippetError
from .runner import Runner, RunOptions


def _now_utc_iso() -> str:
    return _dt.datetime.now(_dt.timezone.utc).replace(microsecond=0, tzinfo=None).isoformat() + "Z"


def _snippets_hash() -> str:
    from . import snippets
    h = hashlib.sha256(Path(snippets.__file__).read_bytes()).hexdigest()
    return f"sha256:{h}"


def _write_json(path: Path, obj: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(obj, indent=2, sort_keys=True), encoding="utf-8")


def main(argv: Optional[list[str]] = None) -> int:
    p = argparse.ArgumentParser(
        prog="worksheet",
        description="Run worksheet snippets; print console lines, results, or receipts.",
    )
    p.add_argument("snippets", nargs="*", help="Snippet names or slugs (e.g. 'print primes', factorial).")
    p.add_argument("--all", action="store_true", help="Run every snippet in worksheet order.")
    p.add_argument("--list", action="store_true", help="List snippet names and exit.")
    p.add_argument("--quiet", action="store_true", help="Do not echo console lines while running.")
    p.add_argument("--result-only", action="store_true", help="Print only each snippet's result.")
    p.add_argument("--print-receipt", action="store_true", help="Print receipts as JSON.")
    p.add_argument("--receipt-out", metavar="PATH", help="Write receipts to PATH (JSON).")
    p.add_argument("--validate", action="store_true", help="Validate receipts against the receipt schema.")
    args = p.parse_args(argv)

    quiet = args.quiet or args.result_only or args.print_receipt
    runner = Runner(options=RunOptions(echo=not quiet, validate=args.validate, selection=list(args.snippets)))

    if args.list:
        for name in runner.names():
            print(name)
        return 0

    if not args.snippets and not args.all:
        p.error("snippet name required (or --all / --list)")

    try:
        selected = runner.select(["*"] if args.all else None)
    except UnknownSnippetError as e:
        p.error(str(e))

    base = {
        "run": {"timestamp": _now_utc_iso(), "uuid": str(uuid.uuid4())},
        "worksheet": {"version": __version__, "hash": _snippets_hash()},
    }

    receipts: List[Dict[str, Any]] = []
    failed = False
    for name in selected:
        try:
            result, receipt = runner.run(name)
        except jsonschema.ValidationError as e:
            print(json.dumps({**base, "status": "error", "reason": f"receipt schema: {e.message}",
                              "snippet": {"name": name}}, indent=2, sort_keys=True))
            return 1
        receipt.update(base)
        receipts.append(receipt)
        if receipt["status"] == "error":
            failed = True
        if args.result_only:
            print(json.dumps(receipt["result"], sort_keys=True))

    if args.print_receipt:
        print(json.dumps(receipts if len(receipts) != 1 else receipts[0], indent=2, sort_keys=True))
    elif not args.result_only:
        for r in receipts:
            if r["status"] == "error":
                print(json.dumps({k: r[k] for k in ("snippet", "status", "reason")}, sort_keys=True))

    if args.receipt_out:
        _write_json(Path(args.receipt_out), receipts if len(receipts) != 1 else receipts[0])
        print(f"Wrote receipt: {args.receipt_out}")

    return 1 if failed else 0


if __name__ == "__main__":
    raise SystemExit(main())
