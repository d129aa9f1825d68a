"""`llog` command-line interface: argument handling and subprocess runs."""

from __future__ import annotations

from pathlib import Path

from llog.cli.main import GlobalOptions, _extract_global_options


def test_print_default_template(run_llog) -> None:
    result = run_llog(["print", "hello", "world"])
    assert result.returncode == 0
    assert result.stdout == "hello world\n"


def test_print_with_preset(run_llog) -> None:
    result = run_llog(["print", "--template", "error", "oops", "7"])
    assert result.returncode == 0
    assert result.stdout == "Error: oops 7\n"


def test_print_with_colors(run_llog) -> None:
    result = run_llog(["--color", "print", "--template", "warning", "slow"])
    assert result.returncode == 0
    assert result.stdout == "\x1b[33mWarning: slow\n\x1b[37m"


def test_print_with_color_override(run_llog) -> None:
    result = run_llog(["--color", "print", "--with-color", "cyan", "note"])
    assert result.returncode == 0
    assert result.stdout == "\x1b[36mnote\n\x1b[37m"


def test_write_then_cat(run_llog, tmp_path: Path) -> None:
    target = tmp_path / "out.log"

    written = run_llog(["--color", "write", str(target), "--template", "message", "saved"])
    shown = run_llog(["cat", str(target)])

    assert written.returncode == 0
    assert written.stdout == ""
    assert target.read_text(encoding="utf-8") == "Message: saved\n"
    assert shown.returncode == 0
    assert shown.stdout == "Message: saved\n"


def test_cat_missing_file_prints_nothing(run_llog, tmp_path: Path) -> None:
    result = run_llog(["cat", str(tmp_path / "missing")])
    assert result.returncode == 0
    assert result.stdout == ""


def test_unknown_template_fails(run_llog) -> None:
    result = run_llog(["print", "--template", "loud", "x"])
    assert result.returncode == 1
    assert result.stdout == ""
    assert "error: Unknown template 'loud'" in result.stderr


def test_invalid_config_fails(run_llog, tmp_path: Path) -> None:
    (tmp_path / "llog.toml").write_text("colors = 'sometimes'\n", encoding="utf-8")
    result = run_llog(["print", "x"])
    assert result.returncode == 1
    assert "expected bool" in result.stderr


def test_config_file_colors_apply(run_llog, tmp_path: Path) -> None:
    config = tmp_path / "custom.toml"
    config.write_text("colors = true\ncolor_mode = 'ansi'\n", encoding="utf-8")

    result = run_llog(["--config", str(config), "print", "--template", "error", "x"])

    assert result.returncode == 0
    assert result.stdout == "\x1b[31mError: x\n\x1b[37m"


def test_no_color_overrides_config(run_llog, tmp_path: Path) -> None:
    (tmp_path / "llog.toml").write_text("colors = true\n", encoding="utf-8")
    result = run_llog(["--no-color", "print", "plain"])
    assert result.returncode == 0
    assert result.stdout == "plain\n"


def test_global_flags_stop_at_command_name() -> None:
    cleaned, options = _extract_global_options(
        ["-v", "--color", "print", "-v", "--no-color", "x"]
    )

    assert cleaned == ["print", "-v", "--no-color", "x"]
    assert options == GlobalOptions(colors=True, verbosity=1)


def test_global_flags_before_separator_only() -> None:
    cleaned, options = _extract_global_options(["--log-json", "--", "--verbose"])
    assert cleaned == ["--", "--verbose"]
    assert options == GlobalOptions(log_json=True)
