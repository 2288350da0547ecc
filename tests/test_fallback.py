import pytest

from worksheet.fallback import FINALLY_MESSAGE, parse_int_or_default

def test_dog_falls_back_to_zero_and_cleans_up_once():
    calls = []
    attempt = parse_int_or_default("Dog", cleanup=lambda: calls.append("finally"))
    assert attempt.value == 0
    assert attempt.status == "fallback"
    assert attempt.source == "default"
    assert attempt.degraded is True
    assert "Dog" in attempt.error
    assert calls == ["finally"]

def test_success_still_runs_cleanup_once():
    calls = []
    attempt = parse_int_or_default("42", cleanup=lambda: calls.append(1))
    assert attempt.value == 42
    assert attempt.status == "ok"
    assert attempt.error is None
    assert attempt.degraded is False
    assert calls == [1]

def test_custom_default():
    assert parse_int_or_default("", default=-1, cleanup=lambda: None).value == -1

def test_non_text_falls_back():
    assert parse_int_or_default(None, cleanup=lambda: None).value == 0
    assert parse_int_or_default(True, cleanup=lambda: None).value == 0

def test_default_cleanup_prints_message(capsys):
    parse_int_or_default("Dog")
    assert capsys.readouterr().out == FINALLY_MESSAGE + "\n"

def test_receipt_shape():
    rec = parse_int_or_default("7", cleanup=lambda: None).to_receipt()
    assert rec == {"status": "ok", "value": 7, "error": None, "source": "primary"}

@pytest.mark.parametrize("text", ["1_000", " 42 ", "１２", "4.2", "+", "0x10", "42\n"])
def test_only_plain_decimal_text_parses(text):
    calls = []
    attempt = parse_int_or_default(text, default=-7, cleanup=lambda: calls.append(1))
    assert attempt.status == "fallback"
    assert attempt.value == -7
    assert calls == [1]

@pytest.mark.parametrize("text,value", [("-12", -12), ("+5", 5), ("007", 7)])
def test_signed_decimal_text_parses(text, value):
    assert parse_int_or_default(text, cleanup=lambda: None).value == value
