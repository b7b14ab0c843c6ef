"""
ChannelGate — channel-gated console output.

A gate keeps an ordered list of active channel names. Each log call
names a channel; the record is written only if that channel is active:

    gate = from_env()                  # LOG_CHANNELS="default,api"
    gate.log('api', 'request', 42)     # -> stdout: [API] request 42
    gate.error('db', 'timeout')        # 'db' inactive, nothing written
    gate.set_channel(['db'])           # replaces, never merges
    gate.error('db', 'timeout')        # -> stderr: [DB:ERROR] timeout

Membership is an exact string match on the channel argument as given.
set_channel() trims the names it stores, but log()/error()/debug() do
not trim theirs, so ``gate.log(' api', ...)`` never matches an active
'api'. Pass channel names without surrounding whitespace.
"""

import sys
from typing import Any, Mapping, Optional, TextIO, Tuple

from .channels import (
    ChannelInput, DEFAULT_CHANNELS, channels_from_env, normalize_channels,
)
from .levels import DEBUG, ERROR, INFO, format_prefix
from .render import Renderer, render_plain


class ChannelGate:
    """Writes records only for channels in its active set.

    Sinks default to whatever sys.stdout / sys.stderr are at write time,
    so redirection after construction is honored. The active set is held
    as a tuple and replaced in one assignment; each log call reads it
    once.

    Usage::

        gate = ChannelGate(['net'], stderr=buf)
        gate.error('net', 'refused')       # buf: [NET:ERROR] refused
        gate.log('net')                    # no messages, nothing written
    """

    def __init__(
        self,
        channels: ChannelInput = None,
        stdout: TextIO = None,
        stderr: TextIO = None,
        debug_file: TextIO = None,
        renderer: Renderer = None,
    ):
        self._channels: Tuple[str, ...] = DEFAULT_CHANNELS
        if channels is not None:
            self.set_channel(channels)
        self._stdout = stdout
        self._stderr = stderr
        self._debug_file = debug_file
        self.renderer: Renderer = renderer if renderer is not None else render_plain

    def set_channel(self, channels: ChannelInput) -> None:
        """Replace the active channels.

        Args:
            channels: A single name, or an iterable of names. Names are
                trimmed and blank ones dropped; a blank single name
                deactivates everything.
        """
        self._channels = normalize_channels(channels)

    def get_active_channels(self) -> list:
        """Return a copy of the active channels, in order."""
        return list(self._channels)

    def is_active(self, channel: str) -> bool:
        """Check whether records on this channel would be written.

        Useful to skip building an expensive message.
        """
        return channel in self._channels

    def log(self, channel: str, *messages: Any) -> None:
        """Write ``[CHANNEL] messages...`` to stdout if channel is active."""
        self._emit(INFO, channel, messages)

    def error(self, channel: str, *messages: Any) -> None:
        """Write ``[CHANNEL:ERROR] messages...`` to stderr if channel is active."""
        self._emit(ERROR, channel, messages)

    def debug(self, channel: str, *messages: Any) -> None:
        """Write ``[CHANNEL:DEBUG] messages...`` to the debug sink if channel is active."""
        self._emit(DEBUG, channel, messages)

    def _sink(self, kind: str) -> TextIO:
        if kind == ERROR:
            return self._stderr if self._stderr is not None else sys.stderr
        if kind == DEBUG and self._debug_file is not None:
            return self._debug_file
        return self._stdout if self._stdout is not None else sys.stdout

    def _emit(self, kind: str, channel: str, messages: Tuple[Any, ...]) -> None:
        if not messages:
            return
        if channel not in self._channels:
            return
        text = self.renderer(format_prefix(channel, kind), messages)
        print(text, file=self._sink(kind))


def from_env(environ: Mapping[str, str] = None, **kwargs: Any) -> ChannelGate:
    """Build a gate whose active channels come from LOG_CHANNELS.

    Unset, blank, or all-empty values (e.g. " , ") give ['default'].

    Args:
        environ: Mapping to read instead of os.environ
        **kwargs: Passed through to ChannelGate (sinks, renderer)
    """
    return ChannelGate(channels_from_env(environ), **kwargs)


# =============================================================================
# Module-level default gate
# =============================================================================

_gate: Optional[ChannelGate] = None


def init_gate(channels: ChannelInput = None,
              environ: Mapping[str, str] = None,
              **kwargs: Any) -> ChannelGate:
    """Initialize the module-level default gate.

    Explicit channels win over LOG_CHANNELS; with channels=None the
    environment is read.

    Returns:
        The new default gate
    """
    global _gate
    if channels is None:
        _gate = from_env(environ, **kwargs)
    else:
        _gate = ChannelGate(channels, **kwargs)
    return _gate


def get_gate() -> ChannelGate:
    """Get the module-level default gate, creating it from LOG_CHANNELS if needed."""
    global _gate
    if _gate is None:
        _gate = from_env()
    return _gate


def set_channel(channels: ChannelInput) -> None:
    """Replace the default gate's active channels."""
    get_gate().set_channel(channels)


def get_active_channels() -> list:
    """Return a copy of the default gate's active channels."""
    return get_gate().get_active_channels()


def log(channel: str, *messages: Any) -> None:
    """Info record on the default gate."""
    get_gate().log(channel, *messages)


def error(channel: str, *messages: Any) -> None:
    """Error record on the default gate."""
    get_gate().error(channel, *messages)


def debug(channel: str, *messages: Any) -> None:
    """Debug record on the default gate."""
    get_gate().debug(channel, *messages)
