# Copyright (C) 2026 The screencam developers
# Licensed under the MIT License. See LICENSE file for details.

import subprocess
from typing import Sequence

from screencam import SpawnFailure, ToolNotFound


def run(cmd: Sequence[str], **kwargs) -> subprocess.CompletedProcess:
    """Run *cmd* to completion and return the finished process.

    A non-zero exit status is left for the caller to inspect. Failing to
    start the program at all raises :class:`ToolNotFound` when the
    executable does not exist, and :class:`SpawnFailure` for any other
    OS error.
    """
    try:
        return subprocess.run(list(cmd), check=False, **kwargs)
    except FileNotFoundError:
        raise ToolNotFound(cmd[0]) from None
    except OSError as e:
        raise SpawnFailure(cmd[0], e) from e
