"""
Model number -> AFUE lookup

Backfills furnace efficiency when the rating plate was unreadable but the
model number was. The table is read-only and handed to the enricher, so
tests and deployments can supply their own entries.
"""

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional, Union

from services.error_types import ConfigurationError

logger = logging.getLogger(__name__)

# Keys are normalized model numbers (trimmed, uppercase). Extend over time.
_SEED_AFUE_TABLE = {
    "AUD2B080A9V3VBA": 80.0,  # Trane / American Standard 80%
    "GMH950703BX": 95.0,      # Goodman 95%
}

DEFAULT_AFUE_TABLE: Mapping[str, float] = MappingProxyType(dict(_SEED_AFUE_TABLE))


def normalize_model_number(raw: Optional[str]) -> str:
    if not raw:
        return ""
    return raw.strip().upper()


def lookup_afue(table: Mapping[str, float], model_number: Optional[str]) -> Optional[float]:
    """Return the tabled AFUE for a model number, or None on a miss"""
    key = normalize_model_number(model_number)
    if not key:
        return None
    return table.get(key)


def load_afue_table(path: Optional[Union[str, Path]] = None) -> Mapping[str, float]:
    """
    Build the lookup table, extending the seed entries from a JSON file.

    Args:
        path: JSON object of {model_number: afue}. None or "" means seed only.

    Returns:
        Read-only mapping keyed by normalized model number

    Raises:
        ConfigurationError: file missing, unreadable, or not a JSON object
    """
    if not path:
        return DEFAULT_AFUE_TABLE

    path = Path(path)
    try:
        raw = json.loads(path.read_text())
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Could not read AFUE table {path}", {"error": str(e)})

    if not isinstance(raw, dict):
        raise ConfigurationError(f"AFUE table {path} must be a JSON object")

    table = dict(_SEED_AFUE_TABLE)
    for model, afue in raw.items():
        key = normalize_model_number(str(model))
        if not key or isinstance(afue, bool) or not isinstance(afue, (int, float)):
            logger.warning(f"Skipping AFUE table entry {model!r}: {afue!r}")
            continue
        table[key] = float(afue)

    logger.info(f"Loaded AFUE table with {len(table)} models from {path}")
    return MappingProxyType(table)
