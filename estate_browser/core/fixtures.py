import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from .exceptions import FixtureError

logger = logging.getLogger(__name__)

BUNDLED_FIXTURES_DIR = Path(__file__).resolve().parent.parent / "fixtures"


def load_fixture(name: str, directory: Optional[Path] = None) -> List[Dict[str, Any]]:
    """Read the seed document ``<name>.json`` as a list of raw records"""
    path = Path(directory or BUNDLED_FIXTURES_DIR) / f"{name}.json"
    try:
        with path.open(encoding="utf-8") as fh:
            data = json.load(fh)
    except FileNotFoundError as e:
        raise FixtureError(f"Fixture file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise FixtureError(f"Fixture file {path} is not valid JSON: {e}") from e
    
    if not isinstance(data, list):
        raise FixtureError(f"Fixture file {path} must contain a list of records")
    
    logger.debug(f"Loaded {len(data)} {name} records from {path}")
    return data
