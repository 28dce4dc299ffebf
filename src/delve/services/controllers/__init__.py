"""UI-agnostic controllers for the presentation layer."""

from .session_controller import Listener, SessionController

__all__ = [
    "Listener",
    "SessionController",
]
