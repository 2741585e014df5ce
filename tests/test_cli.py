from __future__ import annotations

import logging
from pathlib import Path

import pytest

from hmrc_rates import cli
from hmrc_rates.cli import build_parser, main


@pytest.fixture(autouse=True)
def log_levels(monkeypatch: pytest.MonkeyPatch) -> list[int]:
    levels: list[int] = []
    monkeypatch.setattr(cli, "configure_logging", levels.append)
    return levels


def test_convert_prints_gbp(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["convert", "100.00", "USD", "--date", "2025-08-15"])

    assert exit_code == 0
    assert capsys.readouterr().out.strip() == "£73.85"


def test_convert_unknown_currency_exits_with_error(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["convert", "100.00", "XXX", "--date", "2025-08-15"])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert "Currency not found: 'XXX' for date 2025-08-15." in captured.err


def test_convert_out_of_range(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["convert", "1", "USD", "--date", "2020-01-01"]) == 1
    assert "2020-01-01" in capsys.readouterr().err


def test_rates_lists_period(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["rates", "--date", "2025-08-01"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert "USD 1.3541" in lines
    assert lines == sorted(lines)


def test_xml_option_replaces_bundled_data(
    tmp_path: Path, period_xml, capsys: pytest.CaptureFixture[str]
) -> None:
    xml_path = tmp_path / "exrates-monthly-0125.xml"
    xml_path.write_bytes(period_xml(period="01/Jan/2025 to 31/Jan/2025", rates={"USD": "2"}))

    assert main(["--xml", str(xml_path), "periods"]) == 0
    assert capsys.readouterr().out.splitlines() == ["2025-01-01"]

    assert main(["--xml", str(xml_path), "convert", "10", "usd", "--date", "2025-01-31"]) == 0
    assert capsys.readouterr().out.strip() == "£5.00"


def test_missing_xml_file_reports_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--xml", str(tmp_path / "missing.xml"), "periods"]) == 1
    assert "missing.xml" in capsys.readouterr().err


def test_invalid_date_argument_exits_two() -> None:
    with pytest.raises(SystemExit) as excinfo:
        build_parser().parse_args(["convert", "1", "USD", "--date", "15/08/2025"])

    assert excinfo.value.code == 2


def test_command_is_required() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_logging_is_configured_by_the_cli_only(log_levels: list[int]) -> None:
    assert main(["periods"]) == 0
    assert main(["-v", "periods"]) == 0

    assert log_levels == [logging.WARNING, logging.INFO]
