import io

from rich.console import Console

from cli.ui_components import (
    format_payload,
    format_summary_line,
    format_timing_line,
    print_batch_error,
    print_outcome,
    print_report,
)
from core.domain.models import BatchReport, FailureOutcome, SuccessOutcome


def make_console():
    buffer = io.StringIO()
    return Console(file=buffer, width=200, color_system=None), buffer


def test_payload_is_compact_json():
    outcome = SuccessOutcome(index=0, status_code=200, body='{ "namespaces": [ ] }')

    assert format_payload(outcome) == '{"namespaces":[]}'


def test_payload_keeps_non_json_body():
    outcome = SuccessOutcome(index=0, status_code=200, body="pong")

    assert format_payload(outcome) == "pong"


def test_failure_payload_and_summary():
    outcome = FailureOutcome(index=1, error="ConnectError: refused")

    assert format_payload(outcome) == "Error: ConnectError: refused"
    assert format_summary_line(outcome) == "Request 2 failed: ConnectError: refused"


def test_summary_numbering_is_one_based():
    outcome = SuccessOutcome(index=0, status_code=204)

    assert format_summary_line(outcome) == "Request 1 status: 204"


def test_outcome_markup_is_escaped():
    console, buffer = make_console()

    print_outcome(console, SuccessOutcome(index=0, status_code=200, body="[bold]x[/bold]"))

    assert buffer.getvalue() == "[bold]x[/bold]\n"


def test_report_prints_summary_then_timing():
    console, buffer = make_console()
    report = BatchReport(
        requested=2,
        outcomes=[
            SuccessOutcome(index=0, status_code=200),
            FailureOutcome(index=1, error="HTTP 503 Service Unavailable", status_code=503),
        ],
        elapsed_seconds=0.25,
    )

    print_report(console, report)

    assert buffer.getvalue().splitlines() == [
        "Request 1 status: 200",
        "Request 2 failed: HTTP 503 Service Unavailable",
        "Total time for 2 concurrent requests: 0.250s",
    ]
    assert format_timing_line(report) == "Total time for 2 concurrent requests: 0.250s"


def test_empty_report_prints_nothing():
    console, buffer = make_console()

    print_report(console, BatchReport(requested=0))

    assert buffer.getvalue() == ""


def test_failed_batch_prints_no_timing():
    console, buffer = make_console()

    print_report(console, BatchReport(requested=3, error="RuntimeError: boom"))
    print_batch_error(console, "RuntimeError: boom")

    assert buffer.getvalue() == "Error making requests: RuntimeError: boom\n"


def test_payload_too_deep_to_decode_is_printed_raw():
    body = "[" * 200000 + "]" * 200000
    outcome = SuccessOutcome(index=0, status_code=200, body=body)

    assert format_payload(outcome) == body
