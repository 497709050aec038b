"""
dashapi CLI - Command-line interface for the crash dashboard API.

Uploads builds, reports crashes and failed reproductions, and drives
external bug reporting from the shell using the dashapi SDK.
"""
# Copyright (c) 2026 Crashwise
#
# Licensed under the MIT License. See the LICENSE file for details.


__version__ = "0.1.0"
