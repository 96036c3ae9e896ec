"""Tests for the output formatting system.

Covers:
- OutputFormat resolution (auto -> rich/plain based on TTY)
- NO_COLOR / TERM=dumb color disabling
- stdout vs stderr discipline
- Quiet and verbose modes
- print_table in JSON and plain modes
- Global instance management
- Logging configuration
"""

from __future__ import annotations

import json
import logging

import pytest

from ifacegen.output import (
    OutputFormat,
    OutputManager,
    _should_disable_color,
    configure_logging,
    get_output,
    reset_output,
    set_output,
)


@pytest.fixture(autouse=True)
def _reset_global_output():
    """Ensure the global output instance is reset between tests."""
    reset_output()
    yield
    reset_output()


@pytest.fixture()
def non_tty(monkeypatch):
    """Patch stdout.isatty() to return False."""
    monkeypatch.setattr("ifacegen.output._is_tty", lambda: False)


@pytest.fixture()
def tty(monkeypatch):
    """Patch stdout.isatty() to return True."""
    monkeypatch.setattr("ifacegen.output._is_tty", lambda: True)


class TestOutputFormatResolution:
    def test_auto_resolves_to_plain_when_not_tty(self, non_tty):
        mgr = OutputManager(format=OutputFormat.AUTO)
        assert mgr.format == OutputFormat.PLAIN

    def test_auto_resolves_to_rich_when_tty(self, tty, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.delenv("TERM", raising=False)
        mgr = OutputManager(format=OutputFormat.AUTO)
        assert mgr.format == OutputFormat.RICH

    def test_no_color_flag_forces_plain(self, tty, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        mgr = OutputManager(format=OutputFormat.AUTO, no_color=True)
        assert mgr.format == OutputFormat.PLAIN

    def test_explicit_json_stays_json(self, non_tty):
        assert OutputManager(format=OutputFormat.JSON).format == OutputFormat.JSON


class TestColorDisabling:
    def test_no_color_env_disables_color(self, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "")
        assert _should_disable_color() is True

    def test_term_dumb_disables_color(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.setenv("TERM", "dumb")
        assert _should_disable_color() is True

    def test_normal_term_keeps_color(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.setenv("TERM", "xterm-256color")
        assert _should_disable_color() is False


class TestStreams:
    def test_print_data_goes_to_stdout_verbatim(self, capsys):
        mgr = OutputManager(format=OutputFormat.PLAIN)
        mgr.print_data("interface Foo { a: Array<[x]>, }")
        captured = capsys.readouterr()
        assert captured.out == "interface Foo { a: Array<[x]>, }\n"
        assert captured.err == ""

    def test_diagnostics_go_to_stderr(self, capsys):
        mgr = OutputManager(format=OutputFormat.PLAIN, no_color=True)
        mgr.info("loading")
        mgr.error("broken")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "loading" in captured.err
        assert "Error: broken" in captured.err

    def test_quiet_suppresses_info_but_not_errors(self, capsys):
        mgr = OutputManager(format=OutputFormat.PLAIN, no_color=True, quiet=True)
        mgr.info("loading")
        mgr.success("done")
        mgr.error("broken")
        captured = capsys.readouterr()
        assert "loading" not in captured.err
        assert "done" not in captured.err
        assert "Error: broken" in captured.err

    def test_debug_only_when_verbose(self, capsys):
        OutputManager(format=OutputFormat.PLAIN, no_color=True).debug("hidden")
        OutputManager(format=OutputFormat.PLAIN, no_color=True, verbose=True).debug("shown")
        err = capsys.readouterr().err
        assert "hidden" not in err
        assert "[debug] shown" in err


class TestPrintTable:
    def test_json_mode(self, capsys):
        mgr = OutputManager(format=OutputFormat.JSON)
        mgr.print_table(["Model", "Fields"], [["user", "3"]])
        assert json.loads(capsys.readouterr().out) == [{"Model": "user", "Fields": "3"}]

    def test_plain_mode(self, capsys):
        mgr = OutputManager(format=OutputFormat.PLAIN)
        mgr.print_table(["Model", "Fields"], [["user", "3"], ["order", "1"]])
        assert capsys.readouterr().out == "Model\tFields\nuser\t3\norder\t1\n"


class TestGlobalInstance:
    def test_get_output_creates_default(self):
        assert isinstance(get_output(), OutputManager)

    def test_set_and_reset(self):
        mgr = OutputManager(format=OutputFormat.JSON)
        set_output(mgr)
        assert get_output() is mgr
        reset_output()
        assert get_output() is not mgr


class TestConfigureLogging:
    def test_verbose_enables_debug(self):
        configure_logging(verbose=True)
        assert logging.getLogger("ifacegen").getEffectiveLevel() == logging.DEBUG

    def test_default_is_warning(self):
        configure_logging(verbose=False)
        assert logging.getLogger("ifacegen").getEffectiveLevel() == logging.WARNING

    def test_repeated_calls_keep_one_handler(self):
        configure_logging()
        configure_logging()
        handlers = [
            h for h in logging.getLogger("ifacegen").handlers if getattr(h, "_ifacegen", False)
        ]
        assert len(handlers) == 1
