"""
Simple configuration management.

``Settings`` reads its values from environment variables, with a
default for every field. A ``.env`` file in the working directory, if
present, is loaded first so local overrides do not have to be exported
by hand. Use ``Settings.from_env()`` to pick up the current
environment; the module-level ``settings`` instance is read once at
import time.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


def _as_bool(val: Optional[str], default: bool = False) -> bool:
    if val is None:
        return default
    return val.lower() in ("1", "true", "yes", "on")


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = "Library Catalog API"
    api_version: str = "1.0.0"
    host: str = "localhost"
    port: int = 8080
    log_level: str = "INFO"
    # Empty means console logging only.
    log_file: str = ""
    # Start with the three sample books rather than an empty catalog.
    seed_catalog: bool = True
    # Pretty-print JSON responses with a four space indent.
    indent_json: bool = True

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            project_name=os.getenv("PROJECT_NAME", cls.project_name),
            api_version=os.getenv("API_VERSION", cls.api_version),
            host=os.getenv("HOST", cls.host),
            port=int(os.getenv("PORT", str(cls.port))),
            log_level=os.getenv("LOG_LEVEL", cls.log_level),
            log_file=os.getenv("LOG_FILE", cls.log_file),
            seed_catalog=_as_bool(os.getenv("SEED_CATALOG"), cls.seed_catalog),
            indent_json=_as_bool(os.getenv("INDENT_JSON"), cls.indent_json),
        )


settings = Settings.from_env()
