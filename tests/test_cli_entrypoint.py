from __future__ import annotations

import importlib

import pytest


def test_console_entrypoint_exposes_app() -> None:
    pytest.importorskip("typer")

    module = importlib.import_module("safe_crystals.main")

    assert hasattr(module, "app")
    assert module.app is not None


def test_simulate_break_uses_configured_plugin(monkeypatch) -> None:
    pytest.importorskip("typer")
    from typer.testing import CliRunner

    module = importlib.import_module("safe_crystals.main")
    monkeypatch.setattr(module.settings, "permission_backend", "regions")
    monkeypatch.setattr(module.settings, "regions_file", None)
    monkeypatch.setattr(module.settings, "end_portal_world", None)

    result = CliRunner().invoke(
        module.app,
        ["simulate-break", "--player", "A", "--world", "main", "--x", "10", "--y", "70", "--z", "10"],
    )

    assert result.exit_code == 0
    assert "'removed': True" in result.output
    assert "end_crystal" in result.output


def test_simulate_break_reports_missing_backend(monkeypatch) -> None:
    pytest.importorskip("typer")
    from typer.testing import CliRunner

    module = importlib.import_module("safe_crystals.main")
    monkeypatch.setattr(module.settings, "permission_backend", None)

    result = CliRunner().invoke(
        module.app,
        ["simulate-break", "--player", "A", "--world", "main", "--x", "0", "--y", "64", "--z", "0"],
    )

    assert result.exit_code == 1
    assert "error" in result.output


def test_simulate_break_accepts_upper_case_block_material(monkeypatch) -> None:
    pytest.importorskip("typer")
    from typer.testing import CliRunner

    module = importlib.import_module("safe_crystals.main")
    monkeypatch.setattr(module.settings, "permission_backend", "regions")
    monkeypatch.setattr(module.settings, "regions_file", None)
    monkeypatch.setattr(module.settings, "end_portal_world", None)

    result = CliRunner().invoke(
        module.app,
        [
            "simulate-break",
            "--player", "A",
            "--world", "world_the_end",
            "--x", "0.5", "--y", "76", "--z", "0.5",
            "--environment", "the_end",
            "--under", "BEDROCK",
        ],
    )

    assert result.exit_code == 0
    assert "'cancelled': False" in result.output
    assert "'removed': False" in result.output
