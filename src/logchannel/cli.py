"""Command-line entry point for logchannel.

A channel-gated echo for shell scripts:

    export LOG_CHANNELS=default,deploy
    logchannel deploy "uploading" "$artifact"     # [DEPLOY] uploading app.tar
    logchannel --error deploy "upload failed"     # stderr: [DEPLOY:ERROR] ...
    logchannel db "connected"                     # 'db' inactive, silent

--channels overrides LOG_CHANNELS for one invocation. The exit code is 0
whether or not the record was written.
"""

import argparse
import sys

from logchannel._version import BASE_VERSION, VERSION
from logchannel.channels import parse_channel_list
from logchannel.gate import from_env, ChannelGate
from logchannel.render import render_inspect, render_plain


def _build_parser():
    """Build the argparse parser."""
    parser = argparse.ArgumentParser(
        prog="logchannel",
        description="logchannel — print a message only if its channel is active",
        epilog=(
            "Active channels come from --channels, then LOG_CHANNELS,\n"
            "then the default channel 'default'."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"logchannel {BASE_VERSION} ({VERSION})",
    )
    parser.add_argument("--channels", metavar="LIST", default=None,
                        help="Comma-separated active channels (overrides LOG_CHANNELS)")
    parser.add_argument("--active", action="store_true", default=False,
                        help="Print the active channels, one per line, and exit")
    parser.add_argument("--inspect", action="store_true", default=False,
                        help="Abbreviate long message values")

    kind = parser.add_mutually_exclusive_group()
    kind.add_argument("--error", action="store_true", default=False,
                      help="Write an error record to stderr")
    kind.add_argument("--debug", action="store_true", default=False,
                      help="Write a debug record")

    parser.add_argument("channel", nargs="?", help="Channel name")
    parser.add_argument("messages", nargs="*", metavar="MESSAGE",
                        help="Message values")
    return parser


def main(argv=None):
    """Main entry point for the logchannel CLI.

    Args:
        argv: Command-line arguments. None means sys.argv[1:].

    Returns:
        Exit code (0 = success).
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = _build_parser()
    args = parser.parse_args(argv)

    renderer = render_inspect if args.inspect else render_plain
    if args.channels is not None:
        gate = ChannelGate(parse_channel_list(args.channels), renderer=renderer)
    else:
        gate = from_env(renderer=renderer)

    if args.active:
        for name in gate.get_active_channels():
            print(name)
        return 0

    if args.channel is None:
        parser.print_help()
        return 0

    if args.error:
        gate.error(args.channel, *args.messages)
    elif args.debug:
        gate.debug(args.channel, *args.messages)
    else:
        gate.log(args.channel, *args.messages)
    return 0


if __name__ == "__main__":
    sys.exit(main())
