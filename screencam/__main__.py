# Copyright (C) 2026 The screencam developers
# Licensed under the MIT License. See LICENSE file for details.

from screencam.main import entry

entry()
