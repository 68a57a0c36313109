"""
Tests for diagnostic rendering and the console channel.
"""

import io
import re
from datetime import date

from rich.console import Console

from ruleguard.rules.diagnostics import (
    ConsoleChannel,
    RendererContext,
    clog,
    render_diagnostic,
    render_fragment,
)
from ruleguard.rules.types import CYCLE_MARKER, UNDEFINED, Kind


def _console_channel(**kwargs) -> tuple[ConsoleChannel, io.StringIO]:
    buffer = io.StringIO()
    console = Console(file=buffer, no_color=True, width=200)
    return ConsoleChannel(console=console, **kwargs), buffer


class TestRenderFragment:
    """Test single fragment rendering."""

    def test_strings_pass_through(self):
        assert render_fragment("should be") == "should be"
        assert render_fragment(Kind.STRING) == "string"

    def test_scalars(self):
        assert render_fragment(30) == "30"
        assert render_fragment(2.5) == "2.5"
        assert render_fragment(None) == "None"
        assert render_fragment(True) == "True"
        assert render_fragment(UNDEFINED) == "undefined"

    def test_nested_strings_are_quoted(self):
        assert render_fragment(["a", 1]) == '["a", 1]'
        assert render_fragment({"k": "v"}) == '{"k": "v"}'
        assert render_fragment(("x",)) == '["x"]'

    def test_cycles_render_with_marker(self):
        a = [1]
        a.append(a)
        assert render_fragment(a) == f'[1, "{CYCLE_MARKER}"]'

    def test_readable_forms(self):
        assert render_fragment(re.compile("a+")) == "re.compile('a+')"
        assert render_fragment(date(2024, 1, 2)) == "2024-01-02"
        assert render_fragment(len) == "<function len>"

    def test_opaque_objects(self):
        assert render_fragment(object()) == "<object>"
        assert render_fragment([object()]) == '["<object>"]'
        assert render_fragment(frozenset({"a"})) == '{"a"}'


class TestRenderDiagnostic:
    """Test fragment joining."""

    def test_join_with_spaces(self):
        fragments = ["age", "should have as type", Kind.INTEGER, "but instead", "is", "30"]
        assert render_diagnostic(fragments) == "age should have as type integer but instead is 30"

    def test_string_input_is_returned(self):
        assert render_diagnostic("already rendered") == "already rendered"


class TestConsoleChannel:
    """Test console output."""

    def test_render_prints_and_returns_false(self):
        channel, buffer = _console_channel(color=False, show_elapsed=False)
        assert channel.render("fn", ["a", "is", [1, "b"]]) is False
        assert buffer.getvalue().strip() == 'fn: a is [1, "b"]'

    def test_elapsed_prefix(self):
        channel, buffer = _console_channel(color=False, show_elapsed=True)
        channel.render("", ["x"])
        assert re.match(r"^\(\d+ms\) x$", buffer.getvalue().strip())

    def test_log_returns_false(self):
        channel, buffer = _console_channel(color=False, show_elapsed=False)
        assert channel.log("value", {"a": 1}) is False
        assert buffer.getvalue().strip() == 'value {"a": 1}'

    def test_defaults_from_config(self, monkeypatch):
        monkeypatch.setenv("RULEGUARD_SHOW_ELAPSED", "false")
        channel, _ = _console_channel()
        assert channel.show_elapsed is False

    def test_clog_uses_default_channel(self, channel):
        assert clog("hello", 1) is False
        assert channel.messages == ["hello 1"]


class TestRendererContext:
    """Test per-channel formatting state."""

    def test_style_rotation(self):
        context = RendererContext(palette=("a", "b"))
        assert [context.next_style() for _ in range(3)] == ["a", "b", "a"]

    def test_contexts_are_independent(self):
        first = RendererContext(palette=("a", "b"))
        second = RendererContext(palette=("a", "b"))
        first.next_style()
        assert second.next_style() == "a"

    def test_elapsed_is_non_negative(self):
        assert RendererContext().elapsed_ms() >= 0
