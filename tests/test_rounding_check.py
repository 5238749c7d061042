from cashdesk.services import rounding_check
from cashdesk.services.rounding_check import (
    REFERENCE_CASES,
    RoundingCase,
    main,
    run_cases,
)


def test_reference_table_passes():
    lines = []
    report = run_cases(out=lines.append)
    assert report.ok
    assert report.passed == len(REFERENCE_CASES) == 16
    assert "passed: 16/16" in lines
    assert "failed: 0/16" in lines
    assert lines[0].startswith("PASS case 1:")


def test_mismatch_is_reported_not_raised():
    cases = [
        RoundingCase(150.07, 150.10, "good"),
        RoundingCase(150.07, 150.07, "wrong expectation"),
    ]
    lines = []
    report = run_cases(cases, out=lines.append)
    assert (report.passed, report.failed, report.total) == (1, 1, 2)
    assert not report.ok
    assert "FAIL case 2: wrong expectation" in lines
    assert "  input: 150.07 -> result: 150.10 (expected: 150.07)" in lines


def test_exception_in_one_case_does_not_stop_the_run():
    calls = []

    def flaky(amount):
        calls.append(amount)
        if amount == 1.0:
            raise RuntimeError("boom")
        return amount

    cases = [
        RoundingCase(1.0, 1.0, "explodes"),
        RoundingCase(2.0, 2.0, "fine"),
    ]
    lines = []
    report = run_cases(cases, rounding=flaky, out=lines.append)
    assert calls == [1.0, 2.0]
    assert report.failed == 1 and report.passed == 1
    assert any("error: RuntimeError('boom')" in line for line in lines)


def test_non_numeric_result_fails_only_that_case():
    cases = [
        RoundingCase(1.0, 1.0, "returns nothing"),
        RoundingCase(2.0, 2.0, "returns text"),
        RoundingCase(3.0, 3.0, "fine"),
    ]
    results = {1.0: None, 2.0: "abc", 3.0: 3.0}
    lines = []
    report = run_cases(cases, rounding=results.get, out=lines.append)
    assert (report.passed, report.failed) == (1, 2)
    assert "FAIL case 1: returns nothing" in lines
    assert "FAIL case 2: returns text" in lines
    assert "PASS case 3: fine" in lines
    assert "failed: 2/3" in lines


def test_main_exit_codes(monkeypatch, capsys):
    assert main() == 0
    assert "passed: 16/16" in capsys.readouterr().out

    monkeypatch.setattr(rounding_check.money, "apply_rounding", lambda amount: 0.0)
    assert main() == 1


def test_main_returns_one_on_unexpected_error(monkeypatch):
    def broken(*args, **kwargs):
        raise RuntimeError("harness crashed")

    monkeypatch.setattr(rounding_check, "run_cases", broken)
    assert main() == 1
