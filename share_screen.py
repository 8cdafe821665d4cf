#!/usr/bin/python3 --
#
# Copyright (C) 2026 The screencam developers
# Licensed under the MIT License. See LICENSE file for details.

"""Create a v4l2loopback camera and record the whole screen into it

Quick standalone variant of screencam: always loads the module, looks
for the device once and records the full screen. No region selection,
no retries and no cleanup on Ctrl-C.
"""

import subprocess
import sys


def _run(cmd, **kwargs):
    try:
        return subprocess.run(cmd, check=False, **kwargs)
    except FileNotFoundError:
        raise RuntimeError(
            f"Failed to execute {cmd[0]}: command not found"
        ) from None
    except OSError as e:
        raise RuntimeError(f"Failed to execute {cmd[0]}: {e}") from e


def find_device(listing: str):
    for block in listing.split("\n\n"):
        if "VirtualVideoDevice" in block:
            tokens = block.split()
            return tokens[-1] if tokens else ""
    return None


def main(argv):
    if len(argv) != 1:
        raise RuntimeError("Invalid arguments - usage: share_screen.py")

    proc = _run(
        [
            "sudo",
            "modprobe",
            "v4l2loopback",
            "exclusive_caps=1",
            "card_label=VirtualVideoDevice",
        ]
    )
    if proc.returncode != 0:
        print(f"modprobe failed with exit code {proc.returncode}",
              file=sys.stderr)
        return

    print("Successfully created new video device.")

    proc = _run(["v4l2-ctl", "--list-devices"], stdout=subprocess.PIPE)
    device = find_device(proc.stdout.decode("utf-8", errors="replace"))
    if device is None:
        print("No virtual device found")
        raise RuntimeError("No virtual device found")
    print(f"Newest virtual device: {device}")

    file_arg = "--file=" + device
    print(file_arg)

    proc = _run(
        [
            "wf-recorder",
            "--muxer=v4l2",
            "--codec=rawvideo",
            file_arg,
            "-x",
            "yuv420p",
        ]
    )
    if proc.returncode != 0:
        print("Failed to execute wf-recorder.")


def entry():
    main(sys.argv)


if __name__ == "__main__":
    main(sys.argv)
