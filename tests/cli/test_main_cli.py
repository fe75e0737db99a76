from __future__ import annotations

import json
from pathlib import Path

import pytest

from semparse.cli.main import main


def _run(argv: list[str]) -> int:
    with pytest.raises(SystemExit) as info:
        main(argv)
    return info.value.code


def test_parse_prints_canonical_text(capsys) -> None:
    assert _run(["parse", "1.2.3-rc.1+build.5", "2"]) == 0
    assert capsys.readouterr().out.splitlines() == ["1.2.3-rc.1+build.5", "2.0.0"]


def test_parse_json_emits_one_record_per_line(capsys) -> None:
    assert _run(["parse", "1.0.0-alpha.1", "--format", "json"]) == 0

    record = json.loads(capsys.readouterr().out)
    assert record["text"] == "1.0.0-alpha.1"
    assert record["prerelease"] == ["alpha", 1]
    assert record["dialect"] == "standard"


def test_parse_reports_invalid_input_and_keeps_going(capsys) -> None:
    assert _run(["parse", "1.02.0", "1.0.0"]) == 1

    out, err = capsys.readouterr()
    assert out.splitlines() == ["1.0.0"]
    assert "1.02.0: invalid preceding zero in minor" in err


def test_check_text_output(capsys) -> None:
    assert _run(["check", "1.0.0", "1.0.0+bu+ild"]) == 1
    assert capsys.readouterr().out.splitlines() == [
        "1.0.0: ok",
        "1.0.0+bu+ild: invalid_character (build_metadata)",
    ]


def test_check_json_output(capsys) -> None:
    assert _run(["check", "01.0.0", "--format", "json"]) == 1
    assert json.loads(capsys.readouterr().out) == {
        "input": "01.0.0",
        "valid": False,
        "error": {"kind": "invalid_preceding_zero", "part": "major"},
    }


def test_check_all_valid_exits_zero() -> None:
    assert _run(["check", "0.0.0", "1.0.0-0A.is.legal"]) == 0


@pytest.mark.parametrize(
    "left,right,expected",
    [
        ("1.0.1-beta.2", "1.0.1-beta.10", "1.0.1-beta.2 < 1.0.1-beta.10"),
        ("1.0.0+a", "1.0.0+b", "1.0.0+a = 1.0.0+b"),
        ("2.0.0", "1.9.9", "2.0.0 > 1.9.9"),
    ],
)
def test_compare_text(capsys, left: str, right: str, expected: str) -> None:
    assert _run(["compare", left, right]) == 0
    assert capsys.readouterr().out.strip() == expected


def test_compare_json_and_invalid_operand(capsys) -> None:
    assert _run(["compare", "1.0.0-rc.1", "1.0.0", "--format", "json"]) == 0
    assert json.loads(capsys.readouterr().out) == {
        "left": "1.0.0-rc.1",
        "right": "1.0.0",
        "result": -1,
    }

    assert _run(["compare", "1.0.0", "1..0"]) == 1
    assert "1..0: invalid character in minor" in capsys.readouterr().err


def test_sort_orders_by_precedence(capsys) -> None:
    assert _run(["sort", "1.0.0", "1.0.0-alpha", "0.9.9", "1.0.0-alpha.1"]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "0.9.9",
        "1.0.0-alpha",
        "1.0.0-alpha.1",
        "1.0.0",
    ]


def test_sort_reverse_flag_and_env(capsys, monkeypatch) -> None:
    assert _run(["sort", "1.0.0", "2.0.0", "--reverse"]) == 0
    assert capsys.readouterr().out.splitlines() == ["2.0.0", "1.0.0"]

    monkeypatch.setenv("SEMPARSE_REVERSE", "1")
    assert _run(["sort", "1.0.0", "2.0.0"]) == 0
    assert capsys.readouterr().out.splitlines() == ["2.0.0", "1.0.0"]


def test_sort_json(capsys) -> None:
    assert _run(["sort", "1.1.0", "1.0.0", "--format", "json"]) == 0
    records = json.loads(capsys.readouterr().out)
    assert [r["text"] for r in records] == ["1.0.0", "1.1.0"]


def test_sort_fails_on_invalid_input(capsys) -> None:
    assert _run(["sort", "1.0.0", "x"]) == 1
    out, err = capsys.readouterr()
    assert out == ""
    assert "x: invalid character in major" in err


def test_output_format_from_semparse_toml(tmp_path: Path, capsys) -> None:
    (tmp_path / "semparse.toml").write_text('[cli]\noutput_format = "json"\n')

    assert _run(["parse", "3.2.1"]) == 0
    assert json.loads(capsys.readouterr().out)["major"] == 3


def test_flags_override_config(tmp_path: Path, capsys) -> None:
    (tmp_path / "semparse.toml").write_text('[cli]\noutput_format = "json"\n')

    assert _run(["parse", "3.2.1", "--format", "text"]) == 0
    assert capsys.readouterr().out.strip() == "3.2.1"


def test_configuration_errors_exit_two(tmp_path: Path, capsys, monkeypatch) -> None:
    assert _run(["parse", "1.0.0", "--dialect", "npm"]) == 2
    assert "Configuration error" in capsys.readouterr().err

    assert _run(["parse", "1.0.0", "--config", str(tmp_path / "nope.toml")]) == 2
    assert "Config file not found" in capsys.readouterr().err

    monkeypatch.setenv("SEMPARSE_DIALECT", "legacy")
    assert _run(["check", "1.0.0"]) == 2


def test_usage_errors_exit_two(capsys) -> None:
    assert _run([]) == 2
    assert "usage: semparse" in capsys.readouterr().out

    assert _run(["bump", "1.0.0"]) == 2
    assert "Unknown command: bump" in capsys.readouterr().err

    # argparse exits 2 on missing positionals
    assert _run(["compare", "1.0.0"]) == 2
