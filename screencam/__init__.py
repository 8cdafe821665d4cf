# Copyright (C) 2026 The screencam developers
# Licensed under the MIT License. See LICENSE file for details.

"""Screen recording into a v4l2loopback virtual camera"""

__version__ = "1.0.0"

MODULE_NAME = "v4l2loopback"
CARD_LABEL = "VirtualVideoDevice"
MAX_RETRIES = 10

# raw frames through the v4l2 muxer, in a format video clients accept
RECORDER_ENCODING = ("--muxer=v4l2", "--codec=rawvideo")
RECORDER_PIXEL_FORMAT = ("-x", "yuv420p")


class ScreenCamError(Exception):
    pass


class ToolNotFound(ScreenCamError):
    def __init__(self, tool: str):
        super().__init__(
            f"Failed to execute {tool}: command not found. Is it installed?"
        )
        self.tool = tool


class SpawnFailure(ScreenCamError):
    def __init__(self, tool: str, error: OSError):
        super().__init__(f"Failed to execute {tool}: {error.strerror or error}")
        self.tool = tool
        self.error = error


class ModuleLoadFailure(ScreenCamError):
    def __init__(self, returncode: int):
        super().__init__("Could not load modules. Are they installed?")
        self.returncode = returncode


class ModuleUnloadFailure(ScreenCamError):
    def __init__(self, returncode: int):
        super().__init__("Could not unload module. Process closed too fast?")
        self.returncode = returncode


class DiscoveryTimeout(ScreenCamError):
    def __init__(self, attempts: int):
        super().__init__("Max retries reached. Exiting code.")
        self.attempts = attempts


class RegionSelectionFailed(ScreenCamError):
    def __init__(self, returncode: int):
        super().__init__(f"Slurp failed with exit code {returncode}")
        self.returncode = returncode
