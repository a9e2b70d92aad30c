"""Tests for domain/model/check_result.py and domain/model/check_stats.py."""

import pytest

from castcheck.domain.model.check_result import CheckResult
from castcheck.domain.model.check_stats import CheckStats
from castcheck.domain.model.enums import DiagnosticKind, Severity
from tests.factories import make_check_result, make_diagnostics


class TestCheckStats:
    """Tests for CheckStats."""

    def test_empty(self) -> None:
        stats = CheckStats.empty()
        assert stats.types_analyzed == 0
        assert stats.candidates_found == 0
        assert not stats.cancelled

    def test_negative_types_raises(self) -> None:
        with pytest.raises(ValueError, match="types_analyzed"):
            CheckStats(types_analyzed=-1, candidates_found=0, analyzers_run=1, analysis_time_ms=0)

    def test_more_candidates_than_types_raises(self) -> None:
        with pytest.raises(ValueError, match="must not exceed"):
            CheckStats(types_analyzed=1, candidates_found=2, analyzers_run=1, analysis_time_ms=0)

    def test_negative_time_raises(self) -> None:
        with pytest.raises(ValueError, match="analysis_time_ms"):
            CheckStats(types_analyzed=0, candidates_found=0, analyzers_run=1, analysis_time_ms=-1)


class TestCheckResult:
    """Tests for CheckResult."""

    def test_empty_passes(self) -> None:
        result = CheckResult.empty()
        assert result.passed
        assert result.diagnostic_count == 0
        assert result.by_rule() == {}

    def test_warnings_pass(self) -> None:
        result = make_check_result(make_diagnostics())
        assert result.passed
        assert result.warning_count == 2
        assert result.error_count == 0

    def test_errors_fail(self) -> None:
        type_level, member_level = make_diagnostics()
        result = make_check_result((type_level.with_severity(Severity.ERROR), member_level))
        assert not result.passed
        assert result.error_count == 1
        assert result.warning_count == 1

    def test_by_rule(self) -> None:
        result = make_check_result(make_diagnostics())
        assert result.by_rule() == {"CA2251": 1, "CA2252": 1}

    def test_of_kind(self) -> None:
        result = make_check_result(make_diagnostics())
        (found,) = result.of_kind(DiagnosticKind.MEMBER_NOT_SEALED)
        assert found.rule_id == "CA2252"
        assert result.of_kind(DiagnosticKind.UNSUPPORTED_PATTERN) == ()
