"""
Constants for the dashapi CLI.
"""
# Copyright (c) 2026 Crashwise
#
# Licensed under the MIT License. See the LICENSE file for details.


# Network constants
DEFAULT_API_TIMEOUT = 30.0
DEFAULT_DASHBOARD_ADDRESS = "http://localhost:8080"

# Configuration locations
PROJECT_CONFIG_DIR = ".dashapi"
CONFIG_FILE_NAME = "config.yaml"
GLOBAL_CONFIG_DIR = ".config/dashapi"

# Environment overrides
ENV_CLIENT = "DASHAPI_CLIENT"
ENV_ADDRESS = "DASHAPI_ADDR"
ENV_KEY = "DASHAPI_KEY"
ENV_TIMEOUT = "DASHAPI_TIMEOUT"

# Display constants
MAX_TITLE_LENGTH = 60
MAX_MAINTAINERS_DISPLAY = 3
REDACTED = "********"

# Repro level emojis
REPRO_EMOJIS = {
    "c": "🧬",
    "syz": "🧪",
    "none": "➖",
}

SETTING_ENV_VARS = {
    "client": ENV_CLIENT,
    "address": ENV_ADDRESS,
    "key": ENV_KEY,
}
