"""Tests for presentation/cli.py."""

from __future__ import annotations

import io
import json
from typing import TYPE_CHECKING

import pytest

from castcheck import __version__
from castcheck.domain.exceptions import ConfigError
from castcheck.domain.model.configuration import DYNAMIC_INTERFACE_CASTABLE_IMPLEMENTATION_ATTRIBUTE
from castcheck.domain.model.enums import Severity
from castcheck.presentation.cli import (
    EXIT_ERRORS,
    EXIT_OK,
    EXIT_USAGE,
    build_parser,
    main,
    resolve_config,
)

if TYPE_CHECKING:
    from pathlib import Path

MODEL = {
    "assembly": "Demo",
    "types": [
        {
            "name": "IFoo",
            "namespace": "Demo",
            "kind": "interface",
            "members": [{"name": "M", "abstract": True}],
            "location": {"file": "Interop.cs", "line": 1},
        },
        {
            "name": "IFooImpl",
            "namespace": "Demo",
            "kind": "interface",
            "attributes": [DYNAMIC_INTERFACE_CASTABLE_IMPLEMENTATION_ATTRIBUTE],
            "interfaces": ["Demo.IFoo"],
            "location": {"file": "Interop.cs", "line": 5},
        },
    ],
}


@pytest.fixture
def model_path(tmp_path: Path) -> Path:
    """Symbol model with one incomplete castable implementation."""
    path = tmp_path / "model.json"
    path.write_text(json.dumps(MODEL), encoding="utf-8")
    return path


def _run(*argv: str) -> tuple[int, str]:
    output = io.StringIO()
    status = main(list(argv), output=output)
    return status, output.getvalue()


class TestMain:
    """Tests for main()."""

    def test_warnings_exit_ok(self, model_path: Path) -> None:
        status, text = _run(str(model_path), "--workers", "1")
        assert status == EXIT_OK
        assert "warning CA2251" in text
        assert "Result: PASSED" in text

    def test_error_severity_fails(self, model_path: Path) -> None:
        status, text = _run(str(model_path), "--severity", "CA2251=error")
        assert status == EXIT_ERRORS
        assert "error CA2251" in text

    def test_disable(self, model_path: Path) -> None:
        status, text = _run(str(model_path), "--disable", "CA2251", "--severity", "CA2251=error")
        assert status == EXIT_OK
        assert "CA2251" not in text

    def test_json_format(self, model_path: Path) -> None:
        status, text = _run(str(model_path), "--format", "json")
        assert status == EXIT_OK
        data = json.loads(text)
        assert [d["rule_id"] for d in data["diagnostics"]] == ["CA2251"]
        assert data["stats"]["types_analyzed"] == 2

    def test_console_format(self, model_path: Path) -> None:
        status, text = _run(str(model_path), "--format", "console")
        assert status == EXIT_OK
        assert "CASTCHECK RESULT" in text

    def test_config_file(self, model_path: Path, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(
            '[tool.castcheck]\nseverity_overrides = { CA2251 = "error" }\n',
            encoding="utf-8",
        )
        status, _ = _run(str(model_path), "--config", str(pyproject))
        assert status == EXIT_ERRORS

    def test_no_generated(self, tmp_path: Path) -> None:
        generated = {
            **MODEL["types"][1],
            "interfaces": [],
            "members": [{"name": "N", "abstract": True}],
            "generated": True,
        }
        model = {"types": [generated]}
        path = tmp_path / "generated.json"
        path.write_text(json.dumps(model), encoding="utf-8")
        assert "CA2252" in _run(str(path))[1]
        assert "CA2252" not in _run(str(path), "--no-generated")[1]

    def test_missing_model(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        status, text = _run(str(tmp_path / "missing.json"))
        assert status == EXIT_USAGE
        assert text == ""
        assert "file not found" in caplog.text

    def test_unknown_rule(self, model_path: Path) -> None:
        status, _ = _run(str(model_path), "--disable", "CA9999")
        assert status == EXIT_USAGE

    def test_bad_severity_level(self, model_path: Path) -> None:
        status, _ = _run(str(model_path), "--severity", "CA2251=fatal")
        assert status == EXIT_USAGE

    def test_bad_workers(self, model_path: Path) -> None:
        status, _ = _run(str(model_path), "--workers", "0")
        assert status == EXIT_USAGE

    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out


class TestResolveConfig:
    """Tests for resolve_config()."""

    def test_defaults(self, model_path: Path) -> None:
        config = resolve_config(build_parser().parse_args([str(model_path)]))
        assert config.disabled_rules == frozenset()
        assert config.analyze_generated_code

    def test_overrides(self, model_path: Path) -> None:
        args = build_parser().parse_args(
            [str(model_path), "--severity", "CA2252=info", "--workers", "3", "--no-generated"]
        )
        config = resolve_config(args)
        assert config.severity_for("CA2252", Severity.WARNING) is Severity.INFO
        assert config.max_workers == 3
        assert not config.analyze_generated_code

    def test_malformed_severity(self, model_path: Path) -> None:
        args = build_parser().parse_args([str(model_path), "--severity", "CA2252"])
        with pytest.raises(ConfigError, match="expected ID=LEVEL"):
            resolve_config(args)
