from .drag import IDLE, DragSession, DragState, Dragging, DropOutcome, Idle, Resolution

__all__ = [
    "IDLE",
    "DragSession",
    "DragState",
    "Dragging",
    "DropOutcome",
    "Idle",
    "Resolution",
]
