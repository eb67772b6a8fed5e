"""Table-driven state machine."""

from .machine import StateMachine, Transition, TransitionTable

__all__ = ["StateMachine", "Transition", "TransitionTable"]
