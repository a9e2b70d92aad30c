"""Tests for reporters/plain_text.py."""

import io

from castcheck.application.reporters.plain_text import PlainTextReporter
from castcheck.domain.model.check_result import CheckResult
from castcheck.domain.model.enums import Severity
from tests.factories import make_check_result, make_diagnostics


class TestPlainTextReporter:
    """Tests for PlainTextReporter."""

    def test_reports_passed_result(self) -> None:
        """Reports PASSED when nothing was found."""
        output = io.StringIO()
        PlainTextReporter(output).report(CheckResult.empty())

        text = output.getvalue()
        assert "PASSED" in text
        assert "0 type(s) analyzed" in text
        assert "0 error(s), 0 warning(s)" in text

    def test_one_line_per_diagnostic(self) -> None:
        """Each diagnostic is a compiler-style line."""
        output = io.StringIO()
        PlainTextReporter(output).report(make_check_result(make_diagnostics()))

        lines = output.getvalue().splitlines()
        assert lines[0].startswith("/test/Interop.cs:5:0: warning CA2251: The 'Demo.IFooImpl'")
        assert lines[1].startswith(
            "/test/Interop.cs:7:0: warning CA2252: The 'Demo.IFooImpl.Extra()'"
        )
        assert lines[-1] == "Result: PASSED"

    def test_reports_failed_result(self) -> None:
        """Errors fail the result."""
        output = io.StringIO()
        type_level, _ = make_diagnostics()
        result = make_check_result((type_level.with_severity(Severity.ERROR),))

        PlainTextReporter(output).report(result)

        text = output.getvalue()
        assert "error CA2251" in text
        assert "1 error(s), 0 warning(s)" in text
        assert "Result: FAILED" in text

    def test_reports_cancellation(self) -> None:
        """Cancelled passes are called out."""
        output = io.StringIO()
        PlainTextReporter(output).report(make_check_result(cancelled=True))
        assert "cancelled" in output.getvalue()

    def test_summary_counts(self) -> None:
        output = io.StringIO()
        result = make_check_result(make_diagnostics(), types_analyzed=4, candidates_found=2)
        PlainTextReporter(output).report(result)
        assert "4 type(s) analyzed, 2 castable implementation(s)" in output.getvalue()
