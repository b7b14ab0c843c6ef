"""
Channel list parsing and normalization.

Channels are caller-defined string tags. A gate holds an ordered list of
active channel names; a message is written only when its channel is in
that list.

Two input shapes are accepted:

    LOG_CHANNELS="default,api,worker"     # environment / --channels flag
    set_channel(["api", "worker"])         # programmatic

Both trim whitespace and drop empty names. Duplicates are kept, since
activeness is plain membership and a repeated name changes nothing.

The environment form falls back to DEFAULT_CHANNELS when it parses to
nothing; the programmatic form does not (an empty list means "all off").
"""

import os
from typing import Iterable, Mapping, Optional, Tuple, Union


# Environment variable read by from_env() / the default gate
ENV_VAR = 'LOG_CHANNELS'

# Active set used when the environment gives nothing usable
DEFAULT_CHANNELS = ('default',)

ChannelInput = Union[str, Iterable[str]]


def normalize_channels(channels: ChannelInput) -> Tuple[str, ...]:
    """Normalize set_channel() input into an active-channel tuple.

    A single string becomes a one-element tuple, or an empty tuple when
    it is blank. Any other iterable is trimmed element by element with
    blank elements dropped.

    Args:
        channels: A channel name or an iterable of channel names

    Returns:
        Tuple of trimmed, non-empty names in caller order
    """
    if isinstance(channels, str):
        name = channels.strip()
        return (name,) if name else ()
    return tuple(name for name in (ch.strip() for ch in channels) if name)


def parse_channel_list(value: Optional[str]) -> Tuple[str, ...]:
    """Parse a comma-separated channel list, falling back to the default.

    Examples:
        "a, b ,c"   -> ('a', 'b', 'c')
        " , "       -> ('default',)
        ""          -> ('default',)
        None        -> ('default',)
    """
    if value is None or not value.strip():
        return DEFAULT_CHANNELS
    parsed = normalize_channels(value.split(','))
    return parsed or DEFAULT_CHANNELS


def channels_from_env(environ: Mapping[str, str] = None) -> Tuple[str, ...]:
    """Read and parse LOG_CHANNELS.

    Any failure while reading the environment is treated the same as the
    variable being unset.
    """
    try:
        env = os.environ if environ is None else environ
        value = env.get(ENV_VAR)
    except Exception:
        return DEFAULT_CHANNELS
    return parse_channel_list(value)

