"""
Layer Trace

Records each step a request takes through the CLIENT / API / DOMAIN / DATA
layers so callers can display how a decision was reached. Every entry is
also written to the standard logger.
"""

import logging
from enum import Enum
from typing import Any, List

from pydantic import BaseModel

logger = logging.getLogger(__name__)


class Layer(str, Enum):
    client = "CLIENT"
    api = "API"
    domain = "DOMAIN"
    data = "DATA"


class TraceStatus(str, Enum):
    success = "success"
    error = "error"
    info = "info"


class TraceEntry(BaseModel):
    """A single step of a traced flow"""

    sequence: int
    layer: Layer
    action: str
    details: Any = None
    status: TraceStatus = TraceStatus.info


class LayerTrace:
    """Ordered collection of trace entries for one request"""

    def __init__(self):
        self._entries: List[TraceEntry] = []

    def record(
        self,
        layer: Layer,
        action: str,
        details: Any = None,
        status: TraceStatus = TraceStatus.info,
    ) -> TraceEntry:
        entry = TraceEntry(
            sequence=len(self._entries) + 1,
            layer=layer,
            action=action,
            details=details,
            status=status,
        )
        self._entries.append(entry)

        level = logging.WARNING if status == TraceStatus.error else logging.INFO
        logger.log(level, f"[{layer.value}] {action}: {details}")
        return entry

    @property
    def entries(self) -> List[TraceEntry]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
