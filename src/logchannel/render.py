"""
Renderers turn a record prefix and its message values into one line.

A renderer is any callable ``(prefix, messages) -> str``. The gate writes
the returned text followed by a newline. Pass a different one with
``ChannelGate(renderer=...)`` to change how arbitrary values are shown.
"""

from pathlib import Path
from typing import Any, Callable, Sequence

Renderer = Callable[[str, Sequence[Any]], str]


def render_plain(prefix: str, messages: Sequence[Any]) -> str:
    """Space-join the prefix and str() of each message, like print()."""
    return " ".join([prefix] + [str(m) for m in messages])


def short_repr(value: Any) -> str:
    """repr() with paths tidied and long strings and lists abbreviated."""
    if isinstance(value, Path):
        return f"Path('{value}')"
    if isinstance(value, str) and len(value) > 50:
        return f"'{value[:47]}...'"
    if isinstance(value, (list, tuple)) and len(value) > 3:
        return f"[...{len(value)} items...]"
    return repr(value)


def render_inspect(prefix: str, messages: Sequence[Any]) -> str:
    """Render strings verbatim and every other value via a short repr().

    Closer to how a browser or Deno console shows mixed arguments:
    ``log("net", "got", {"a": 1})`` -> ``[NET] got {'a': 1}``
    """
    parts = [prefix]
    for m in messages:
        parts.append(m if isinstance(m, str) else short_repr(m))
    return " ".join(parts)
