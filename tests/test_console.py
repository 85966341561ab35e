# Tests for kodebase_config.output.console
# Rich-based console output

from io import StringIO

from rich.console import Console as RichConsole

from kodebase_config.defaults import get_default_config
from kodebase_config.migration import create_deprecation_warning
from kodebase_config.output.console import Console, create_console
from kodebase_config.presets import PRESET_DESCRIPTIONS
from kodebase_config.validation import ConfigValidationIssue, validate_config


def _make_console(verbose: bool = False) -> Console:
    """Create a console with captured output."""
    console = Console(verbose=verbose, colored=False)
    console._console = RichConsole(file=StringIO(), no_color=True, width=120)
    return console


def _get_output(console: Console) -> str:
    """Get captured output from console."""
    console._console.file.seek(0)
    return console._console.file.read()


class TestConsoleBasic:
    """Tests for basic console methods."""

    def test_print(self):
        c = _make_console()
        c.print("hello world")
        assert "hello world" in _get_output(c)

    def test_print_error(self):
        c = _make_console()
        c.print_error("something failed")
        output = _get_output(c)
        assert "Error:" in output
        assert "something failed" in output

    def test_print_error_keeps_brackets(self):
        """Messages containing markup-like text are printed literally."""
        c = _make_console()
        c.print_error("bad value [red]")
        assert "bad value [red]" in _get_output(c)

    def test_print_warning(self):
        c = _make_console()
        c.print_warning("be careful")
        output = _get_output(c)
        assert "Warning:" in output
        assert "be careful" in output

    def test_print_success(self):
        c = _make_console()
        c.print_success("all good")
        assert "all good" in _get_output(c)

    def test_print_info(self):
        c = _make_console()
        c.print_info("fyi")
        assert "fyi" in _get_output(c)


class TestConsoleIssues:
    """Tests for validation issue display."""

    def test_no_issues(self):
        c = _make_console()
        c.print_issues([])
        assert "No validation issues" in _get_output(c)

    def test_issue_table(self):
        c = _make_console()
        c.print_issues(
            [
                ConfigValidationIssue(path="gitOps.hooks.enabled", message="Input should be a valid boolean"),
                ConfigValidationIssue(path="root", message="Input should be a valid dictionary"),
            ]
        )
        output = _get_output(c)
        assert "Validation Issues" in output
        assert "gitOps.hooks.enabled" in output
        assert "Input should be a valid boolean" in output
        assert "root" in output


class TestConsoleDeprecations:
    """Tests for deprecation warning display."""

    def test_warnings_printed(self):
        c = _make_console()
        c.print_deprecations([create_deprecation_warning("gitOps.old", "Use gitOps.new", "1.0")])
        output = _get_output(c)
        assert "Warning:" in output
        assert "[Deprecated in v1.0] gitOps.old: Use gitOps.new" in output

    def test_none_quiet(self):
        c = _make_console()
        c.print_deprecations([])
        assert _get_output(c) == ""

    def test_none_verbose(self):
        c = _make_console(verbose=True)
        c.print_deprecations([])
        assert "No deprecated fields found" in _get_output(c)


class TestConsoleConfig:
    """Tests for configuration display."""

    def test_print_config_tree(self):
        c = _make_console()
        c.print_config(get_default_config(), title="settings.yml")
        output = _get_output(c)
        assert "settings.yml" in output
        assert "gitOps" in output
        assert "post_merge" in output
        assert "'cascade_pr'" in output
        assert "artifactsDir" in output

    def test_print_config_lists(self):
        c = _make_console()
        config = validate_config(
            {"gitOps": {"post_merge": {"cascade_pr": {"labels": ["cascade", "review"]}}, "branches": {}}}
        )
        c.print_config(config)
        output = _get_output(c)
        assert "cascade, review" in output
        assert "(empty)" in output

    def test_print_presets(self):
        c = _make_console()
        c.print_presets(PRESET_DESCRIPTIONS)
        output = _get_output(c)
        assert "Presets" in output
        for name in PRESET_DESCRIPTIONS:
            assert name in output

    def test_print_config_summary(self):
        c = _make_console()
        c.print_config_summary("/tmp/project/.kodebase/config/settings.yml", "solo")
        output = _get_output(c)
        assert "Preset:" in output
        assert "solo" in output


class TestCreateConsole:
    """Tests for the console factory."""

    def test_defaults(self):
        console = create_console()
        assert isinstance(console, Console)
        assert console.verbose is False

    def test_verbose(self):
        assert create_console(verbose=True).verbose is True
