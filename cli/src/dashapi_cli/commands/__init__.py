"""
Command modules for dashapi CLI.
"""
# Copyright (c) 2026 Crashwise
#
# Licensed under the MIT License. See the LICENSE file for details.

from . import bugs, config, report

__all__ = ["bugs", "config", "report"]
