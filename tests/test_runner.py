# tests/test_runner.py
import jsonschema
import pytest

from worksheet.errors import UnknownSnippetError, WorksheetError
from worksheet.runner import Runner, RunOptions, load_receipt_schema, run_snippet, validate_receipt
from worksheet.snippets import SNIPPETS

SCHEMA = load_receipt_schema()

def quiet_runner(**kw):
    return Runner(options=RunOptions(echo=False, **kw))

def test_print_primes_receipt():
    result, receipt = quiet_runner().run("print primes")
    assert result == [1, 2, 3, 5]
    assert receipt["logs"] == ["1", "2", "3", "5"]
    assert receipt["status"] == "ok"
    scan = [s for s in receipt["steps"] if s["event"] == "scan"]
    assert scan and scan[0]["hitSentinel"] is True and scan[0]["state"] == "stopped"

def test_try_catch_finally_receipt():
    result, receipt = quiet_runner().run("try-catch-finally")
    assert result == 0
    assert receipt["logs"].count("This is finally.") == 1
    assert receipt["logs"][-1] == "result_try: 0"
    parse = [s for s in receipt["steps"] if s["event"] == "parse"][0]
    assert parse["source"] == "default"

def test_factorial_lines():
    result, receipt = quiet_runner().run("Factorial")
    assert result == [2, 6]
    assert receipt["logs"] == ["Factorial of 2: 2", "Factorial of 3: 6"]

def test_for_block_lines():
    _, receipt = quiet_runner().run("for block")
    assert receipt["logs"] == [
        "l: List(aaaa, b, c)",
        "aaaa", "b", "c",
        "aaaa",
        "result_for: List(AAAA, B, C)",
    ]

def test_filter_map_and_match():
    assert quiet_runner().run("filter map")[0] == ["AAAA"]
    assert quiet_runner().run("match")[0] == "one"

def test_echo_prints_lines(capsys):
    run_snippet("factorial")
    assert capsys.readouterr().out == "Factorial of 2: 2\nFactorial of 3: 6\n"

def test_quiet_prints_nothing(capsys):
    run_snippet("factorial", echo=False)
    assert capsys.readouterr().out == ""

def test_every_snippet_receipt_matches_schema():
    receipts = quiet_runner(validate=True).run_all()
    assert [r["snippet"]["name"] for r in receipts] == list(SNIPPETS)
    for r in receipts:
        assert r["status"] == "ok", r
        validate_receipt(r, SCHEMA)

def test_select_by_slug_keeps_worksheet_order():
    names = quiet_runner().select(["factorial", "FOR_BLOCK", "for block"])
    assert names == ["for block", "factorial"]

def test_unknown_snippet():
    with pytest.raises(UnknownSnippetError) as ex:
        quiet_runner().run("nope")
    assert "nope" in str(ex.value)
    with pytest.raises(KeyError):
        quiet_runner().select(["nope"])

def test_failing_snippet_gives_error_receipt():
    def boom(out):
        out("before")
        raise WorksheetError("bad input")

    runner = Runner(options=RunOptions(echo=False, validate=True), registry={"boom": boom})
    result, receipt = runner.run("boom")
    assert result is None
    assert receipt["status"] == "error"
    assert receipt["reason"] == "bad input"
    assert receipt["logs"][0] == "before"
    assert receipt["logs"][-1]["level"] == "error"
    assert receipt["logs"][-1]["error"] == "WorksheetError"

def test_schema_rejects_error_without_reason():
    _, receipt = quiet_runner().run("match")
    receipt["status"] = "error"
    with pytest.raises(jsonschema.ValidationError):
        validate_receipt(receipt, SCHEMA)

def test_schema_rejects_unknown_top_level_keys():
    _, receipt = quiet_runner().run("match")
    receipt["extra"] = 1
    with pytest.raises(jsonschema.ValidationError):
        validate_receipt(receipt, SCHEMA)
