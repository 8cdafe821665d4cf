#!/usr/bin/python3 --
#
# Copyright (C) 2026 The screencam developers
# Licensed under the MIT License. See LICENSE file for details.

"""Record the screen into a v4l2loopback virtual camera"""

import argparse
import signal
import sys

from screencam import (
    DiscoveryTimeout,
    ModuleLoadFailure,
    RegionSelectionFailed,
    ScreenCamError,
    SpawnFailure,
    ToolNotFound,
    __version__,
    discovery,
    loopback,
    recorder,
)


class InterruptHandler:
    """SIGINT handler unloading the loopback module before exiting

    Whether to unload is fixed when the handler is created, before it is
    installed, and never changes afterwards.
    """

    def __init__(self, unload_requested: bool, signum=signal.SIGINT):
        self._unload_requested = bool(unload_requested)
        self.signum = signum
        self.handled = False

    @property
    def unload_requested(self) -> bool:
        return self._unload_requested

    def install(self) -> None:
        signal.signal(self.signum, self)

    def __call__(self, signum, frame):
        # pylint: disable=unused-argument
        # one cleanup only, even if the user keeps pressing Ctrl-C
        signal.signal(signum, signal.SIG_IGN)
        self.handled = True
        if self.unload_requested:
            try:
                loopback.unload()
            except ScreenCamError as e:
                print(f"Error: {e}", file=sys.stderr)
            else:
                print("Successfully unloaded module.", file=sys.stderr)
        raise SystemExit(0)


def parse_args(args):
    parser = argparse.ArgumentParser(
        prog="screencam",
        description="Record the screen, or a region of it, into a "
        "v4l2loopback virtual camera.",
    )
    parser.add_argument(
        "-a", "--share-app", action="store_true",
        help="record a region selected with slurp instead of the whole "
        "screen",
    )
    parser.add_argument(
        "-m", "--modprobe", action="store_true",
        help="load the v4l2loopback module before recording",
    )
    parser.add_argument(
        "-u", "--unload", action="store_true",
        help="unload the v4l2loopback module when interrupted",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser.parse_args(args)


def main(argv) -> None:
    args = parse_args(argv[1:])

    handler = InterruptHandler(args.unload)
    handler.install()

    if args.modprobe:
        try:
            loopback.load()
        except ModuleLoadFailure as e:
            # the module may already be loaded, try to find the device anyway
            print(f"An error has occured: {e}", file=sys.stderr)
        else:
            print("Successfully ran modprobe command.", file=sys.stderr)

    file_arg = ""
    try:
        file_arg = discovery.discover()
    except DiscoveryTimeout as e:
        print(f"Error: {e}", file=sys.stderr)

    # TODO: skip recording when no device was found, once nothing relies
    # on wf-recorder being started with an empty device argument
    if args.share_app:
        try:
            recorder.record_region(file_arg)
        except RegionSelectionFailed as e:
            print(e, file=sys.stderr)
            return
    else:
        recorder.record(file_arg)


def entry():
    try:
        main(sys.argv)
    except (ToolNotFound, SpawnFailure) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    entry()
