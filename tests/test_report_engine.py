"""Report engine: execution, aggregation, alignment and sink failures."""

import io
import re
from typing import List

import pytest

from medic.errors import ReportError
from medic.report.engine import column_widths, generate_report, run_checks
from medic.report.models import Check, CheckOutcome, Severity
from medic.report.styling import AnsiStyler, PlainStyler

ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")

EXPECTED_EXAMPLE = (
    "RESULT   CHECK    MESSAGE\n"
    "Ok       Check 1  All good\n"
    "Warning  Check 2  Not so good\n"
    "                  Not at all\n"
    "Fatal    Check 3  Very bad\n"
)


class FailingSink:
    """Text sink that fails after a number of successful writes."""

    def __init__(self, fail_after: int) -> None:
        self.fail_after = fail_after
        self.written: List[str] = []

    def write(self, text: str) -> int:
        if len(self.written) >= self.fail_after:
            raise OSError("disk full")
        self.written.append(text)
        return len(text)

    def flush(self) -> None:
        pass


def _static(severity: Severity, message: str) -> Check:
    return Check(name=f"static-{severity.label}", func=lambda: (severity, message))


def test_generate_report_renders_example_table(example_checks) -> None:
    out = io.StringIO()

    worst = generate_report(out, example_checks, styler=PlainStyler())

    assert worst is Severity.FATAL
    assert out.getvalue() == EXPECTED_EXAMPLE


def test_styled_output_strips_to_plain_table(example_checks) -> None:
    out = io.StringIO()

    generate_report(out, example_checks, styler=AnsiStyler())

    rendered = out.getvalue()
    assert "\x1b[" in rendered
    assert ANSI_RE.sub("", rendered) == EXPECTED_EXAMPLE


def test_empty_check_list_writes_only_header() -> None:
    out = io.StringIO()

    worst = generate_report(out, [], styler=PlainStyler())

    assert worst is Severity.OK
    assert out.getvalue() == "RESULT  CHECK  MESSAGE\n"


def test_returned_severity_is_maximum_of_outcomes() -> None:
    checks = [_static(Severity.INFO, "a"), _static(Severity.ERROR, "b"), _static(Severity.WARNING, "c")]

    assert generate_report(io.StringIO(), checks, styler=PlainStyler()) is Severity.ERROR


def test_failing_check_forces_fatal_and_run_continues() -> None:
    calls = []

    def boom():
        calls.append("boom")
        raise ValueError("probe exploded")

    def after():
        calls.append("after")
        return Severity.OK, "still ran"

    outcomes, worst = run_checks([Check("boom", boom), Check("after", after)])

    assert worst is Severity.FATAL
    assert calls == ["boom", "after"]
    assert outcomes == [
        CheckOutcome(Severity.FATAL, "boom", "probe exploded"),
        CheckOutcome(Severity.OK, "after", "still ran"),
    ]


def test_each_check_runs_exactly_once_in_order() -> None:
    calls = []

    def make(name: str) -> Check:
        def func():
            calls.append(name)
            return Severity.OK, name

        return Check(name, func)

    out = io.StringIO()
    generate_report(out, [make("c"), make("a"), make("b")], styler=PlainStyler())

    assert calls == ["c", "a", "b"]
    names = [line.split()[1] for line in out.getvalue().splitlines()[1:]]
    assert names == ["c", "a", "b"]


@pytest.mark.parametrize(
    "result",
    [None, (Severity.OK,), ("Ok", "message"), (Severity.OK, 42), [Severity.OK, "list"]],
)
def test_malformed_check_result_becomes_fatal(result) -> None:
    outcomes, worst = run_checks([Check("malformed", lambda: result)])

    assert worst is Severity.FATAL
    assert outcomes[0].severity is Severity.FATAL
    assert "expected" in outcomes[0].message


def test_keyboard_interrupt_is_not_absorbed() -> None:
    def interrupted():
        raise KeyboardInterrupt

    with pytest.raises(KeyboardInterrupt):
        run_checks([Check("interrupted", interrupted)])


def test_column_widths_use_headers_as_minimum() -> None:
    assert column_widths([]) == (len("RESULT"), len("CHECK"))
    assert column_widths([CheckOutcome(Severity.OK, "ab", "")]) == (6, 5)


def test_column_widths_never_shrink_when_inputs_grow() -> None:
    base = [CheckOutcome(Severity.INFO, "medium-name", "")]
    wider = base + [CheckOutcome(Severity.WARNING, "a-much-longer-check-name", "")]

    base_status, base_name = column_widths(base)
    wider_status, wider_name = column_widths(wider)

    assert wider_status >= base_status
    assert wider_name >= base_name
    assert (wider_status, wider_name) == (len("Warning"), len("a-much-longer-check-name"))


def test_continuation_indent_matches_column_widths() -> None:
    checks = [
        Check("short", lambda: (Severity.INFO, "one\ntwo\nthree")),
        Check("a-long-check-name", lambda: (Severity.OK, "single")),
    ]
    out = io.StringIO()

    generate_report(out, checks, styler=PlainStyler())

    lines = out.getvalue().splitlines()
    indent = " " * (len("RESULT") + len("a-long-check-name") + 4)
    assert lines[1] == "Info    short              one"
    assert lines[2] == indent + "two"
    assert lines[3] == indent + "three"
    assert lines[4] == "Ok      a-long-check-name  single"


def test_body_line_count_matches_checks_and_line_breaks() -> None:
    messages = ["a", "b\nc", "", "d\ne\nf"]
    checks = [Check(f"check-{i}", lambda m=m: (Severity.OK, m)) for i, m in enumerate(messages)]
    out = io.StringIO()

    generate_report(out, checks, styler=PlainStyler())

    body = out.getvalue().splitlines()[1:]
    assert len(body) == len(messages) + sum(m.count("\n") for m in messages)


def test_report_is_idempotent(example_checks) -> None:
    first, second = io.StringIO(), io.StringIO()

    generate_report(first, example_checks, styler=PlainStyler())
    generate_report(second, example_checks, styler=PlainStyler())

    assert first.getvalue() == second.getvalue()


def test_padding_ignores_escape_sequences() -> None:
    out = io.StringIO()
    checks = [_static(Severity.OK, "x"), _static(Severity.WARNING, "y")]

    generate_report(out, checks, styler=AnsiStyler())

    stripped = ANSI_RE.sub("", out.getvalue()).splitlines()
    assert stripped[1].index("static-Ok") == stripped[2].index("static-Warning") == len("Warning") + 2


def test_sink_failure_raises_report_error_and_stops_writing(example_checks) -> None:
    sink = FailingSink(fail_after=2)

    with pytest.raises(ReportError, match="disk full") as excinfo:
        generate_report(sink, example_checks, styler=PlainStyler())

    assert isinstance(excinfo.value.__cause__, OSError)
    assert len(sink.written) == 2


def test_closed_sink_raises_report_error() -> None:
    out = io.StringIO()
    out.close()

    with pytest.raises(ReportError):
        generate_report(out, [_static(Severity.OK, "x")], styler=PlainStyler())


def test_check_failures_are_not_report_errors() -> None:
    def boom():
        raise OSError("probe could not open file")

    out = io.StringIO()
    worst = generate_report(out, [Check("io-probe", boom)], styler=PlainStyler())

    assert worst is Severity.FATAL
    assert "Fatal   io-probe  probe could not open file" in out.getvalue()


def test_styler_is_selected_from_sink_when_not_given(example_checks) -> None:
    out = io.StringIO()

    generate_report(out, example_checks)

    assert out.getvalue() == EXPECTED_EXAMPLE
