# Copyright (C) 2026 The screencam developers
# Licensed under the MIT License. See LICENSE file for details.

"""wf-recorder launching, full screen or a slurp selected region"""

import subprocess
from typing import List, Optional

from screencam import (
    RECORDER_ENCODING,
    RECORDER_PIXEL_FORMAT,
    RegionSelectionFailed,
)
from screencam.process import run


def recorder_command(file_arg: str,
                     geometry: Optional[str] = None) -> List[str]:
    cmd = ["wf-recorder"]
    if geometry is not None:
        cmd += ["-g", geometry]
    return cmd + [*RECORDER_ENCODING, file_arg, *RECORDER_PIXEL_FORMAT]


def select_region() -> str:
    """Let the user draw a rectangle, return its geometry"""
    proc = run(["slurp"], stdout=subprocess.PIPE)
    if proc.returncode != 0:
        raise RegionSelectionFailed(proc.returncode)
    return proc.stdout.decode("utf-8", errors="replace").strip()


def record(file_arg: str) -> int:
    proc = run(recorder_command(file_arg))
    if proc.returncode != 0:
        print("Failed to execute wf-recorder.")
    return proc.returncode


def record_region(file_arg: str) -> int:
    # select first, the recorder must not start if selection is cancelled
    geometry = select_region()
    proc = run(recorder_command(file_arg, geometry))
    if proc.returncode != 0:
        print("Failed to execute wf-recorder and slurp.")
    return proc.returncode
