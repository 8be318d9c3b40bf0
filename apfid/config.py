from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from dotenv import load_dotenv

_env_path = Path(__file__).resolve().parents[1] / ".env"
if _env_path.is_file():
    load_dotenv(_env_path, override=False)


@dataclass
class ApfidSettings:
    """Configuration loaded from APFID_* environment variables.

    Only the command line reads these; the library API takes explicit
    arguments.

      APFID_DEFAULT_VERSION=2
      APFID_LOWERCASE=false
      APFID_LOG_LEVEL=INFO
      APFID_COLUMN=apfid
    """

    default_version: Literal[1, 2] = 2
    lowercase: bool = False
    log_level: str = "INFO"

    # Table column holding raw identifiers (normalize command)
    column: str = "apfid"


def _env_bool(name: str, default: str = "false") -> bool:
    return os.environ.get(name, default).lower() in ("true", "1", "yes")


def load_settings() -> ApfidSettings:
    """Load settings from environment variables."""
    version = int(os.environ.get("APFID_DEFAULT_VERSION", "2"))
    if version not in (1, 2):
        raise ValueError(f"APFID_DEFAULT_VERSION must be 1 or 2, got {version}")

    return ApfidSettings(
        default_version=version,
        lowercase=_env_bool("APFID_LOWERCASE"),
        log_level=os.environ.get("APFID_LOG_LEVEL", "INFO"),
        column=os.environ.get("APFID_COLUMN", "apfid"),
    )
