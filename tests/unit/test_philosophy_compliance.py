"""Design rule compliance tests.

Cross-cutting checks that hold for the whole domain model:
- FAIL-FIRST validation in constructors
- Immutability of value objects and results
- Every public error derives from CastCheckError
"""

from __future__ import annotations

from pathlib import Path

import pytest

from castcheck.application.descriptors import DESCRIPTORS
from castcheck.domain.exceptions import (
    CastCheckError,
    ConfigError,
    SymbolModelError,
    UnknownRuleError,
)
from castcheck.domain.model.attribute import AttributeData
from castcheck.domain.model.check_result import CheckResult
from castcheck.domain.model.check_stats import CheckStats
from castcheck.domain.model.compilation import Compilation
from castcheck.domain.model.configuration import AnalysisConfig
from castcheck.domain.model.enums import Language
from castcheck.domain.model.location import Location
from castcheck.domain.model.member import MemberSymbol
from tests.factories import (
    abstract_method,
    make_check_result,
    make_compilation,
    make_diagnostics,
    make_interface,
    make_marked_interface,
)

# =============================================================================
# FAIL-FIRST Validation
# =============================================================================


class TestFailFirstValidation:
    """Invalid snapshots are rejected at construction, never repaired.

    WRONG: if not valid: use_default()  # silent fallback
    RIGHT: if not valid: raise ValueError(...)  # immediate failure
    """

    def test_location_zero_line_raises(self) -> None:
        """Location with line 0 raises ValueError."""
        with pytest.raises(ValueError, match="line"):
            Location(file=Path("a.cs"), line=0)

    def test_member_sealed_abstract_raises(self) -> None:
        """A member cannot be sealed and abstract at once."""
        with pytest.raises(ValueError, match="sealed"):
            MemberSymbol(name="M", owning_type="Demo.IA", is_sealed=True, is_abstract=True)

    def test_attribute_empty_class_raises(self) -> None:
        """Empty attribute class is neither resolved nor unresolved."""
        with pytest.raises(ValueError, match="attribute_class"):
            AttributeData(display_name="X", attribute_class="")

    def test_compilation_duplicate_raises(self) -> None:
        """Two types with one FQN raise ValueError."""
        with pytest.raises(ValueError, match="duplicate"):
            Compilation(
                assembly_name="Demo",
                language=Language.CSHARP,
                types=(make_interface("IA"), make_interface("IA")),
            )

    def test_stats_inconsistent_raises(self) -> None:
        """More candidates than analyzed types raises ValueError."""
        with pytest.raises(ValueError, match="candidates_found"):
            CheckStats(types_analyzed=0, candidates_found=1, analyzers_run=1, analysis_time_ms=0)

    def test_config_bad_workers_raises(self) -> None:
        """Zero workers raises ValueError."""
        with pytest.raises(ValueError, match="max_workers"):
            AnalysisConfig(max_workers=0)

    def test_symbol_model_error_has_details(self) -> None:
        """SymbolModelError carries source and reason."""
        error = SymbolModelError(source="model.json", reason="bad")
        assert error.source == "model.json"
        assert error.reason == "bad"
        assert "model.json" in str(error)

    def test_config_error_has_key(self) -> None:
        """ConfigError carries the offending key."""
        error = ConfigError("max_workers", "must be an integer")
        assert error.key == "max_workers"
        assert "max_workers" in str(error)


# =============================================================================
# Immutability
# =============================================================================


class TestImmutability:
    """Snapshots and results are frozen.

    WRONG: type_symbol.members += (m,)  # mutate shared snapshot
    RIGHT: TypeSymbol(..., members=(*old, m))  # new snapshot
    """

    def test_location_frozen(self) -> None:
        """Location is frozen dataclass."""
        loc = Location(file=Path("a.cs"), line=1)
        with pytest.raises(AttributeError):
            loc.line = 2  # type: ignore[misc]

    def test_member_frozen(self) -> None:
        """MemberSymbol is frozen dataclass."""
        member = abstract_method("M", "IA")
        with pytest.raises(AttributeError):
            member.is_sealed = True  # type: ignore[misc]

    def test_type_symbol_frozen(self) -> None:
        """TypeSymbol is frozen dataclass."""
        iface = make_marked_interface("IImpl")
        with pytest.raises(AttributeError):
            iface.attributes = ()  # type: ignore[misc]

    def test_compilation_frozen(self) -> None:
        """Compilation is frozen dataclass."""
        compilation = make_compilation()
        with pytest.raises(AttributeError):
            compilation.types = ()  # type: ignore[misc]

    def test_diagnostic_frozen(self) -> None:
        """Diagnostic is frozen dataclass."""
        diagnostic, _ = make_diagnostics()
        with pytest.raises(AttributeError):
            diagnostic.message_arguments = ()  # type: ignore[misc]

    def test_result_frozen(self) -> None:
        """CheckResult is frozen dataclass."""
        result = make_check_result()
        with pytest.raises(AttributeError):
            result.diagnostics = ()  # type: ignore[misc]

    def test_config_frozen(self) -> None:
        """AnalysisConfig is frozen dataclass."""
        config = AnalysisConfig()
        with pytest.raises(AttributeError):
            config.max_workers = 4  # type: ignore[misc]

    def test_collections_are_tuples(self) -> None:
        """Sequences in snapshots are tuples."""
        iface = make_marked_interface("IImpl", members=(abstract_method("M", "IImpl"),))
        assert isinstance(iface.members, tuple)
        assert isinstance(iface.attributes, tuple)
        assert isinstance(iface.all_interfaces, tuple)
        assert isinstance(CheckResult.empty().diagnostics, tuple)

    def test_descriptor_table_read_only(self) -> None:
        """The descriptor table cannot be modified."""
        with pytest.raises(TypeError):
            del DESCRIPTORS[next(iter(DESCRIPTORS))]  # type: ignore[attr-defined]


# =============================================================================
# Error hierarchy
# =============================================================================


class TestErrorHierarchy:
    """One catch-all root for library errors."""

    @pytest.mark.parametrize(
        ("error", "builtin"),
        [
            (SymbolModelError(source="m.json", reason="bad"), ValueError),
            (ConfigError("key", "bad"), ValueError),
            (UnknownRuleError("CA9999"), KeyError),
        ],
    )
    def test_error_catchable_both_ways(self, error: CastCheckError, builtin: type) -> None:
        """Every error is a CastCheckError and a matching built-in."""
        assert isinstance(error, CastCheckError)
        assert isinstance(error, builtin)
