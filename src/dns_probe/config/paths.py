"""Default checks file locations."""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Optional

CONFIG_DIR_NAME = "dns-probe"
CHECKS_FILE_NAMES = ("checks.yaml", "checks.yml")

SYSTEM_CONFIG_DIRS = [
    Path("/etc") / CONFIG_DIR_NAME,
    Path("/usr/local/etc") / CONFIG_DIR_NAME,
]


def external_config_dirs() -> List[Path]:
    """Return directories that may contain a checks file.

    Returns:
        List[Path]: Ordered list of user and system config directories.
    """
    xdg_home = os.environ.get("XDG_CONFIG_HOME")
    if xdg_home:
        user_dir = Path(xdg_home) / CONFIG_DIR_NAME
    else:
        user_dir = Path.home() / ".config" / CONFIG_DIR_NAME
    return [user_dir, *SYSTEM_CONFIG_DIRS]


def find_default_checks_file() -> Optional[Path]:
    """Find the first existing checks file in the default locations.

    Returns:
        Optional[Path]: Path to the checks file, or None when there is none.
    """
    for directory in external_config_dirs():
        for file_name in CHECKS_FILE_NAMES:
            candidate = directory / file_name
            if candidate.is_file():
                return candidate
    return None
