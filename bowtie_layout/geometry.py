"""Column and row arithmetic for the bowtie grid.

Chain building only speaks in column offsets and row indexes; everything that
turns those into canvas coordinates lives here.
"""

import logging
from typing import Tuple

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)


class LayoutConfig(BaseModel):
    """Geometric constants of the diagram (canvas units)."""

    model_config = ConfigDict(frozen=True)

    box_width: float = 240
    col_gap: float = 40

    # Column anchors
    col_left: float = 0
    col_center_hazard: float = 520
    col_center_top: float = 520
    col_right_barriers: float = 780
    col_right: float = 1040

    # Rows
    y_start: float = 0
    y_step: float = 140

    # Fixed nodes
    top_size: float = 180
    top_y: float = 120
    hazard_width: float = 260
    hazard_y: float = -140

    @property
    def col_spacing(self) -> float:
        return self.box_width + self.col_gap


DEFAULT_LAYOUT = LayoutConfig()


def _clamp(offset: int, what: str) -> int:
    if offset < 0:
        logger.warning("Negative %s column offset %d clamped to 0", what, offset)
        return 0
    return offset


def row_y(cfg: LayoutConfig, row: int) -> float:
    return cfg.y_start + _clamp(row, "row") * cfg.y_step


def top_event_x(cfg: LayoutConfig) -> float:
    return cfg.col_center_top - cfg.top_size / 2


def top_event_pos(cfg: LayoutConfig) -> Tuple[float, float]:
    return top_event_x(cfg), cfg.top_y


def hazard_pos(cfg: LayoutConfig) -> Tuple[float, float]:
    return cfg.col_center_hazard - cfg.hazard_width / 2, cfg.hazard_y


# ---------- Threat side (left) ----------

def threat_barrier_x(cfg: LayoutConfig, offset: int) -> float:
    """Barrier column ``offset`` steps left of the column that abuts the top event."""
    return top_event_x(cfg) - cfg.col_spacing - _clamp(offset, "threat barrier") * cfg.col_spacing


def threat_x(cfg: LayoutConfig, expanded: bool, n_barriers: int) -> float:
    if not expanded:
        return cfg.col_left
    # One column beyond the left-most barrier; with no barriers, where a single one would sit.
    return threat_barrier_x(cfg, max(n_barriers, 1) - 1) - cfg.col_spacing


# ---------- Consequence side (right) ----------

def consequence_barrier_x(cfg: LayoutConfig, offset: int) -> float:
    """Barrier column ``offset`` steps right of the fixed right-barrier column."""
    return cfg.col_right_barriers + _clamp(offset, "consequence barrier") * cfg.col_spacing


def consequence_x(cfg: LayoutConfig, expanded: bool) -> float:
    """Expanded consequences move one column outward whatever the chain length."""
    if not expanded:
        return cfg.col_right
    return cfg.col_right + cfg.col_spacing
