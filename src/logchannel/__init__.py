"""logchannel — channel-gated console output.

Messages are written only when their channel is active. The initial
active channels come from the LOG_CHANNELS environment variable
(comma-separated, e.g. "default,api,worker"), falling back to
['default'].

    import logchannel

    logchannel.set_channel(['api', 'worker'])
    logchannel.log('api', 'This is an API message.')       # [API] ...
    logchannel.error('worker', 'job failed:', job_id)      # [WORKER:ERROR] ...
    logchannel.debug('cache', 'miss')                       # inactive, silent

For independent instances (tests, libraries) build a ChannelGate
directly or with from_env().

Public API:
    ChannelGate          — gate object
    from_env             — gate initialized from LOG_CHANNELS
    init_gate, get_gate  — module-level default gate
    set_channel, log, error, debug, get_active_channels
                         — default-gate shortcuts
    render_plain, render_inspect — message renderers
    trace                — function tracing decorator
    ENV_VAR, DEFAULT_CHANNELS
"""

from logchannel._version import __version__, __app_name__
from logchannel.channels import (
    ENV_VAR, DEFAULT_CHANNELS, normalize_channels, parse_channel_list,
)
from logchannel.gate import (
    ChannelGate, from_env, init_gate, get_gate,
    set_channel, get_active_channels, log, error, debug,
)
from logchannel.render import render_plain, render_inspect
from logchannel.trace import trace

__all__ = [
    '__version__', '__app_name__',
    'ENV_VAR', 'DEFAULT_CHANNELS', 'normalize_channels', 'parse_channel_list',
    'ChannelGate', 'from_env', 'init_gate', 'get_gate',
    'set_channel', 'get_active_channels', 'log', 'error', 'debug',
    'render_plain', 'render_inspect',
    'trace',
]
