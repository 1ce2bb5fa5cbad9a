"""Host-side controller tying expansion state, layout and viewport together."""

import logging
from typing import Any, Callable, Optional

from .geometry import LayoutConfig
from .graph import PositionedGraph, ToggleTag
from .layout import compute_graph
from .model import RiskModel
from .reactflow import parse_toggle_event
from .state import ExpansionState

logger = logging.getLogger(__name__)


class BowtieSession:
    """Owns the current graph snapshot for one diagram.

    Every toggle runs the same sequence: mutate state, recompute, replace the
    snapshot, then ask the view to fit. Positions from node drags never come
    back in here; the next snapshot is always fresh engine output.
    """

    def __init__(self, model: RiskModel, state: Optional[ExpansionState] = None,
                 config: Optional[LayoutConfig] = None,
                 on_fit_view: Optional[Callable[[PositionedGraph], None]] = None):
        self.model = model
        self.state = state if state is not None else ExpansionState()
        self.config = config
        self.on_fit_view = on_fit_view
        self.fit_requests = 0
        self.graph = compute_graph(self.model, self.state, self.config)

    def refresh(self) -> PositionedGraph:
        self.graph = compute_graph(self.model, self.state, self.config)
        self.fit_requests += 1
        if self.on_fit_view is not None:
            self.on_fit_view(self.graph)
        return self.graph

    def handle(self, tag: ToggleTag) -> PositionedGraph:
        self.state.toggle(tag.kind, tag.derived_id)
        return self.refresh()

    def handle_raw(self, event: Any) -> Optional[PositionedGraph]:
        """Parse a frontend event and apply it. Returns None if nothing was toggled."""
        tag = parse_toggle_event(event)
        if tag is None:
            return None
        return self.handle(tag)

    def reset(self, model: Optional[RiskModel] = None) -> PositionedGraph:
        """Collapse everything, optionally switching to a new model."""
        if model is not None:
            self.model = model
        self.state.clear()
        logger.info("Session reset (%s)", "new model" if model is not None else "collapse all")
        return self.refresh()
