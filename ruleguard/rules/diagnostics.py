"""
Diagnostic rendering and the console diagnostic channel.

A diagnostic is a list of fragments: message strings interleaved with the
raw values under validation. This module turns those fragments into text and
prints them.

Usage:
    from ruleguard.rules.diagnostics import ConsoleChannel, render_diagnostic

    text = render_diagnostic(["age", "should have as type", "integer"])
    ConsoleChannel().render("create_user", ["age", "should have as type", "integer"])
"""

from __future__ import annotations

import json
import time
from typing import Any

from rich.console import Console
from rich.text import Text

from .classify import classify
from .structural import copy, is_complex
from .types import UNDEFINED, Kind


# =============================================================================
# Text rendering
# =============================================================================

def _render_scalar(value: Any) -> str:
    kind = classify(value)
    if value is UNDEFINED:
        return "undefined"
    if kind == Kind.DATE:
        return value.isoformat()
    if kind == Kind.FUNCTION:
        name = getattr(value, "__qualname__", None) or getattr(value, "__name__", None)
        return f"<function {name}>" if name else repr(value)
    if kind in (Kind.INTEGER, Kind.FLOAT, Kind.NAN, Kind.INFINITY, Kind.BOOLEAN, Kind.NULL):
        return str(value)
    return repr(value)


def _render_nested(value: Any) -> str:
    """Render a value that sits inside a (copied) composite."""
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, list):
        return "[" + ", ".join(_render_nested(v) for v in value) + "]"
    if isinstance(value, dict):
        items = (f"{_render_nested(k)}: {_render_nested(v)}" for k, v in value.items())
        return "{" + ", ".join(items) + "}"
    if isinstance(value, (set, frozenset)):
        return "{" + ", ".join(sorted(_render_nested(v) for v in value)) + "}"
    return _render_scalar(value)


def render_fragment(value: Any) -> str:
    """
    Render a single diagnostic fragment.

    Strings are message text and pass through untouched. Composites are
    copied first, so self-referencing values render with a cycle marker
    instead of recursing forever.
    """
    if isinstance(value, str):
        return value
    if is_complex(value):
        copied = copy(value)
        # Opaque objects copy to a placeholder string
        return copied if isinstance(copied, str) else _render_nested(copied)
    return _render_scalar(value)


def render_diagnostic(fragments: Any) -> str:
    """Join rendered fragments with single spaces."""
    if isinstance(fragments, str):
        return fragments
    return " ".join(render_fragment(f) for f in fragments)


# =============================================================================
# Console channel
# =============================================================================

# Fragment colors, cycled so adjacent fragments are distinguishable
FRAGMENT_PALETTE = ("#00f3ff", "#ff00ff", "#fcee0a", "#00ff41")
LABEL_STYLE = "bold #ff003c"
ELAPSED_STYLE = "dim"


class RendererContext:
    """
    Formatting state owned by a single channel.

    Holds the color rotation and the elapsed-time baseline. Nothing here
    affects validation outcomes.
    """

    def __init__(self, palette: tuple[str, ...] = FRAGMENT_PALETTE):
        self.palette = palette
        self._index = 0
        self.started = time.monotonic()

    def next_style(self) -> str:
        style = self.palette[self._index % len(self.palette)]
        self._index += 1
        return style

    def elapsed_ms(self) -> int:
        return int((time.monotonic() - self.started) * 1000)


class ConsoleChannel:
    """
    Prints diagnostics to stderr through a rich Console.

    render() always returns False so call sites can report and fail in a
    single expression:

        return channel.render("create_user", ["age", "is missing"])
    """

    def __init__(
        self,
        console: Console | None = None,
        color: bool | None = None,
        show_elapsed: bool | None = None,
    ):
        if color is None or show_elapsed is None:
            from ..config import get_config
            render_config = get_config().render
            color = render_config.color if color is None else color
            show_elapsed = render_config.show_elapsed if show_elapsed is None else show_elapsed

        self.console = console or Console(stderr=True, highlight=False, no_color=not color)
        self.show_elapsed = show_elapsed
        self.context = RendererContext()

    def format(self, label: str, fragments: Any) -> Text:
        """Build the styled line for a diagnostic."""
        text = Text()
        if self.show_elapsed:
            text.append(f"({self.context.elapsed_ms()}ms) ", style=ELAPSED_STYLE)
        if label:
            text.append(f"{label}: ", style=LABEL_STYLE)
        if isinstance(fragments, str):
            fragments = [fragments]
        for i, fragment in enumerate(fragments):
            if i:
                text.append(" ")
            text.append(render_fragment(fragment), style=self.context.next_style())
        return text

    def render(self, label: str, fragments: Any) -> bool:
        self.console.print(self.format(label, fragments))
        return False

    def log(self, *fragments: Any) -> bool:
        """Print arbitrary values, one color per fragment. Returns False."""
        return self.render("", list(fragments))


_default_channel: ConsoleChannel | None = None


def get_default_channel() -> ConsoleChannel:
    """Get or create the process-wide console channel."""
    global _default_channel
    if _default_channel is None:
        _default_channel = ConsoleChannel()
    return _default_channel


def set_default_channel(channel: Any) -> None:
    """Replace the process-wide channel (None restores a fresh console channel)."""
    global _default_channel
    _default_channel = channel


def clog(*fragments: Any) -> bool:
    """Print values through the default channel and return False."""
    return get_default_channel().render("", list(fragments))
