"""Comparison traces: frozen snapshots of (model, params) plotted beside the live curve."""
from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from functools import lru_cache
from typing import Callable, List, Optional

import pandas as pd

from .models import ModelKind, RheologyParams
from .settings import get_settings
from .sweeps import evaluate

logger = logging.getLogger(__name__)

SERIES_COLORS: List[str] = [
    "#0f172a",
    "#2563eb",
    "#e11d48",
    "#059669",
    "#7c3aed",
    "#ea580c",
    "#c2410c",
    "#0369a1",
    "#4d7c0f",
    "#be185d",
]

LIVE_TRACE_ID = "live"


@dataclass(frozen=True)
class ComparisonTrace:
    trace_id: str
    name: str
    model: ModelKind
    params: RheologyParams
    color: str


class ComparisonSet:
    """Ordered set of comparison traces; the first color is reserved for the live trace."""

    def __init__(self, colors: Optional[List[str]] = None):
        self.colors = list(colors or SERIES_COLORS)
        self._traces: List[ComparisonTrace] = []

    @property
    def traces(self) -> List[ComparisonTrace]:
        return list(self._traces)

    @property
    def capacity(self) -> int:
        return len(self.colors) - 1

    def is_full(self) -> bool:
        return len(self._traces) >= self.capacity

    def add(self, model: ModelKind, params: RheologyParams) -> Optional[ComparisonTrace]:
        """Snapshot the given state as a new trace; returns None when the set is full."""
        if self.is_full():
            logger.info("Comparison set full (%d traces); trace not added", self.capacity)
            return None
        in_use = {t.name for t in self._traces}
        # slot 0 is the live trace; reuse the lowest slot freed by a removal
        index = next(i for i in range(1, len(self.colors)) if f"Trace {i}" not in in_use)
        trace = ComparisonTrace(
            trace_id=uuid.uuid4().hex[:7],
            name=f"Trace {index}",
            model=model,
            params=params,
            color=self.colors[index],
        )
        self._traces.append(trace)
        return trace

    def remove(self, trace_id: str) -> None:
        self._traces = [t for t in self._traces if t.trace_id != trace_id]

    def clear(self) -> None:
        self._traces = []

    def plotted(self, model: ModelKind, params: RheologyParams) -> List[ComparisonTrace]:
        """Live trace first, then the stored comparison traces."""
        live = ComparisonTrace(
            trace_id=LIVE_TRACE_ID,
            name="Active Simulation",
            model=model,
            params=params,
            color=self.colors[0],
        )
        return [live] + self._traces


@lru_cache(maxsize=1)
def _cached_evaluate() -> Callable[[str, ModelKind, RheologyParams], pd.DataFrame]:
    return lru_cache(maxsize=get_settings().cache_size)(evaluate)


def evaluate_cached(experiment: str, model: ModelKind, params: RheologyParams) -> pd.DataFrame:
    """``sweeps.evaluate`` memoized on (experiment, model, params); returns a private copy."""
    return _cached_evaluate()(experiment, model, params).copy()


def clear_cache() -> None:
    _cached_evaluate.cache_clear()
