"""Color hints and chip labels for rendered boxes."""

from typing import List, Optional

from .model import Barrier

THREAT_COLOR = "#2563eb"       # blue-600
CONSEQUENCE_COLOR = "#dc2626"  # red-600

_BARRIER_COLORS = {
    "active human": "#ef4444",      # red-500
    "active hardware": "#22c55e",   # green-500
    "passive hardware": "#3b82f6",  # blue-500
}
DEFAULT_BARRIER_COLOR = "#94a3b8"   # slate-400


def color_for_type(barrier_type: Optional[str] = None) -> str:
    return _BARRIER_COLORS.get((barrier_type or "").strip().lower(), DEFAULT_BARRIER_COLOR)


def barrier_chips(barrier: Barrier) -> List[str]:
    return [c for c in (barrier.type, barrier.owner) if c]
