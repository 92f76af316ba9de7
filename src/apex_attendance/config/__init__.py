from __future__ import annotations

import importlib
import os
from dataclasses import dataclass, field

from ..core.constants import DEFAULT_TIMEZONE


def get_settings_module() -> str:
    # APP_ENV picks the environment module; development is the default.
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return f"{__name__}.production"

    if env in {"test", "testing"}:
        return f"{__name__}.testing"

    return f"{__name__}.development"


@dataclass(frozen=True)
class Settings:
    """Process-wide configuration, loaded once at startup and passed down."""

    secret_key: str
    db_config: dict = field(default_factory=dict)
    debug: bool = False
    testing: bool = False
    auto_init_db: bool = False
    default_timezone: str = DEFAULT_TIMEZONE
    log_level: str = "INFO"


def load_settings(module_name: str | None = None) -> Settings:
    module = importlib.import_module(module_name or get_settings_module())
    return Settings(
        secret_key=getattr(module, "SECRET_KEY"),
        db_config=dict(getattr(module, "DB_CONFIG")),
        debug=bool(getattr(module, "DEBUG", False)),
        testing=bool(getattr(module, "TESTING", False)),
        auto_init_db=bool(getattr(module, "AUTO_INIT_DB", False)),
        default_timezone=getattr(module, "DEFAULT_TIMEZONE", DEFAULT_TIMEZONE),
        log_level=str(getattr(module, "LOG_LEVEL", "INFO")).upper(),
    )
