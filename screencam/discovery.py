# Copyright (C) 2026 The screencam developers
# Licensed under the MIT License. See LICENSE file for details.

"""Find the loopback device in the v4l2-ctl device listing"""

import os
import subprocess
from typing import Optional

from screencam import CARD_LABEL, MAX_RETRIES, DiscoveryTimeout
from screencam.process import run


def parse_device_listing(listing: str,
                         label: str = CARD_LABEL) -> Optional[str]:
    """
    Pick the device node of the first card carrying *label*

    Output from: v4l2-ctl --list-devices

    Each card is a block of lines separated from the next by an empty
    line: the card name first, then its device nodes. The last node of
    the matching block is returned; None means no block matched.
    """
    for block in listing.split("\n\n"):
        if label in block:
            tokens = block.split()
            # a matched block without tokens yields an empty path, which
            # callers get to deal with
            return tokens[-1] if tokens else ""
    return None


def list_devices() -> str:
    proc = run(
        ["v4l2-ctl", "--list-devices"],
        stdout=subprocess.PIPE,
        env=dict(os.environ, LC_ALL="C"),
    )
    # v4l2-ctl exits non-zero when any node fails to open, but the
    # listing is still usable
    return proc.stdout.decode("utf-8", errors="replace")


def discover(max_attempts: int = MAX_RETRIES) -> str:
    """Return the recorder argument for the loopback device.

    The device may not be listed right after the module is loaded, so
    the listing is retried up to *max_attempts* times, without delay.
    """
    if max_attempts < 1:
        raise ValueError("max_attempts must be at least 1")

    for _attempt in range(max_attempts):
        device = parse_device_listing(list_devices())
        if device is not None:
            print(f"Newest virtual device: {device}")
            return "--file=" + device
    raise DiscoveryTimeout(max_attempts)
