"""Environment settings for the HVAC intake service.

Values come from the process environment, optionally seeded from two files
in the working directory. `.env.local` is loaded after `.env` and wins, so
an OpenAI key or AFUE table path can be kept out of the committed file.
"""

import os
import logging
from pathlib import Path
from typing import List, Optional, Union

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

ENV_FILES = (".env", ".env.local")

_TRUE_VALUES = {"true", "1", "yes", "on"}
_FALSE_VALUES = {"false", "0", "no", "off"}

# Values left in a copied .env template
_PLACEHOLDER_VALUES = {"", "your-api-key-here", "placeholder", "sk-..."}


def load_environment(env_dir: Optional[Union[str, Path]] = None) -> List[str]:
    """Load the .env files found in env_dir (default: cwd); returns their names."""
    base = Path(env_dir) if env_dir is not None else Path.cwd()

    loaded = []
    for name in ENV_FILES:
        path = base / name
        if path.is_file():
            load_dotenv(path, override=True)
            loaded.append(name)

    if loaded:
        logger.info(f"Environment loaded from: {', '.join(loaded)}")
    else:
        logger.debug(f"No .env files in {base}")
    return loaded


def get_env_bool(key: str, default: bool = False) -> bool:
    value = os.getenv(key, "").strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return default


def get_env_int(key: str, default: int = 0) -> int:
    raw = os.getenv(key)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"{key}={raw!r} is not an integer, using {default}")
        return default


def get_env_list(key: str, separator: str = ",", default: Optional[List[str]] = None) -> List[str]:
    """Split a delimited variable such as ALLOWED_ORIGINS; blank entries are dropped."""
    raw = os.getenv(key, "")
    if not raw.strip():
        return list(default or [])
    return [item.strip() for item in raw.split(separator) if item.strip()]


def validate_required_env_vars(required_vars: List[str]) -> List[str]:
    """Return the names in required_vars that are unset or still a template placeholder."""
    return [
        var for var in required_vars
        if (os.getenv(var) or "").strip() in _PLACEHOLDER_VALUES
    ]


def is_production() -> bool:
    return os.getenv("ENV", "development").strip().lower() == "production"


load_environment()
