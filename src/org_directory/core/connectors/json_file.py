"""Connector reading an exported organizations table from a JSON file."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from .base import BaseConnector, ConnectorError

logger = logging.getLogger(__name__)


class JsonFileConnector(BaseConnector):
    """Reads organization rows from a JSON export.

    The file holds either a list of rows or an object with an
    ``"organizations"`` list.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def fetch_raw(self) -> List[Dict[str, Any]]:
        if not self.path.exists():
            raise FileNotFoundError(f"Organizations file not found: {self.path}")

        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ConnectorError(f"Invalid JSON in {self.path}: {exc}") from exc

        if isinstance(payload, dict):
            payload = payload.get("organizations")
        if not isinstance(payload, list):
            raise ConnectorError(f"Expected a list of organizations in {self.path}")

        logger.debug("Read %d rows from %s", len(payload), self.path)
        return payload
