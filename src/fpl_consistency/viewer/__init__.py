"""Stateful viewer shell around the pool pipeline."""

from .controller import VIEW_CHANGE_MESSAGES, ViewerController, ViewerState, initial_view_mode
from .debounce import Debouncer

__all__ = [
    "Debouncer",
    "VIEW_CHANGE_MESSAGES",
    "ViewerController",
    "ViewerState",
    "initial_view_mode",
]
