"""Config file discovery.

Walk-up finder locates aockit.toml, similar to how git finds .git/.
Supports the AOCKIT_CONFIG env var; ``--config`` bypasses discovery.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "aockit.toml"
CONFIG_ENV_VAR = "AOCKIT_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the aockit.toml governing *start* (default: cwd), or None.

    A set AOCKIT_CONFIG wins outright, even when it names a missing file.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
