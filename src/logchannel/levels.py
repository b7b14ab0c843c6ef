"""
Log kind constants.

There are exactly three kinds. Each one fixes the prefix suffix and the
sink a record goes to:

    kind    prefix              sink
    info    [CHANNEL]           stdout
    error   [CHANNEL:ERROR]     stderr
    debug   [CHANNEL:DEBUG]     debug (stdout unless overridden)
"""

INFO = 'info'
ERROR = 'error'
DEBUG = 'debug'

# Suffix appended after the channel name inside the brackets
SUFFIXES = {
    INFO: None,
    ERROR: 'ERROR',
    DEBUG: 'DEBUG',
}


def format_prefix(channel: str, kind: str = INFO) -> str:
    """Build the bracketed record prefix for a channel and kind.

    The channel is upper-cased for display only.
    """
    suffix = SUFFIXES[kind]
    if suffix:
        return f"[{channel.upper()}:{suffix}]"
    return f"[{channel.upper()}]"
