# Copyright (C) 2026 The screencam developers
# Licensed under the MIT License. See LICENSE file for details.

"""Loading and unloading of the loopback kernel module"""

import sys

from screencam import (
    CARD_LABEL,
    MODULE_NAME,
    ModuleLoadFailure,
    ModuleUnloadFailure,
)
from screencam.process import run


def load() -> None:
    """Load the loopback module, creating a new labelled video device.

    Runs through sudo, so the child inherits the console for a possible
    password prompt. A second load while the module is already present
    is left to modprobe to accept or reject.
    """
    proc = run(
        [
            "sudo",
            "modprobe",
            MODULE_NAME,
            "exclusive_caps=1",
            "card_label=" + CARD_LABEL,
        ]
    )
    if proc.returncode != 0:
        print(f"modprobe failed with exit code {proc.returncode}",
              file=sys.stderr)
        raise ModuleLoadFailure(proc.returncode)


def unload() -> None:
    proc = run(["sudo", "rmmod", MODULE_NAME])
    if proc.returncode != 0:
        print(f"rmmod failed with exit code {proc.returncode}",
              file=sys.stderr)
        raise ModuleUnloadFailure(proc.returncode)
