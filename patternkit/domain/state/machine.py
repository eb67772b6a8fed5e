"""Table-driven finite state machine.

Behaviour that classic implementations spread across one subclass per state
lives here in a single transition table: ``{state: {event: Transition}}``.
A state with no outgoing transitions is terminal.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Generic, Hashable, List, Mapping, Optional, TypeVar

from patternkit.domain.base.events import StatusChangeEvent
from patternkit.domain.base.exceptions import IllegalTransitionError
from patternkit.infrastructure.logging.logger import get_logger

S = TypeVar("S", bound=Hashable)
E = TypeVar("E", bound=Hashable)

logger = get_logger(__name__)


def _label(value: Any) -> str:
    return str(value.value) if isinstance(value, Enum) else str(value)


@dataclass(frozen=True)
class Transition(Generic[S]):
    """Target state of a transition and the message describing it."""
    target: S
    message: str = ""


class TransitionTable(Generic[S, E]):
    """Immutable mapping from (current state, event) to a transition."""

    def __init__(self,
                 transitions: Mapping[S, Mapping[E, Transition[S]]],
                 refusals: Optional[Mapping[S, Mapping[E, str]]] = None):
        """
        Build a transition table.

        Args:
            transitions: Outgoing transitions per state. States that only
                appear as targets are terminal.
            refusals: Optional messages explaining why an event is refused
                in a given state.
        """
        self._transitions: Dict[S, Dict[E, Transition[S]]] = {
            state: dict(events) for state, events in transitions.items()
        }
        self._refusals: Dict[S, Dict[E, str]] = {
            state: dict(events) for state, events in (refusals or {}).items()
        }
        states = list(self._transitions)
        for events in self._transitions.values():
            for transition in events.values():
                if transition.target not in states:
                    states.append(transition.target)
        self._states = states

    @property
    def states(self) -> List[S]:
        """Every state mentioned by the table."""
        return list(self._states)

    def lookup(self, state: S, event: E) -> Optional[Transition[S]]:
        """Transition for (state, event), or None when the event is not allowed."""
        return self._transitions.get(state, {}).get(event)

    def allowed_events(self, state: S) -> List[E]:
        """Events accepted in a state."""
        return list(self._transitions.get(state, {}))

    def is_terminal(self, state: S) -> bool:
        """True when a state has no outgoing transitions."""
        return not self._transitions.get(state)

    def refusal(self, state: S, event: E) -> str:
        """Message explaining why an event is refused in a state."""
        message = self._refusals.get(state, {}).get(event)
        if message:
            return message
        return f"Cannot apply '{_label(event)}' in state {_label(state)}"


@dataclass
class StateMachine(Generic[S, E]):
    """Context object holding the current state of a table-driven machine."""
    table: TransitionTable[S, E]
    state: S
    aggregate_id: str = "state-machine"
    aggregate_type: str = "StateMachine"
    lifecycle_events: List[Dict[str, Any]] = field(default_factory=list)
    _events: List[StatusChangeEvent] = field(default_factory=list, repr=False)

    def transition(self, event: E) -> Transition[S]:
        """
        Apply an event.

        Returns:
            The transition taken.

        Raises:
            IllegalTransitionError: If the table has no entry for the current
                state and event. The state is left unchanged.
        """
        transition = self.table.lookup(self.state, event)
        if transition is None:
            reason = self.table.refusal(self.state, event)
            logger.info(
                "Transition refused",
                aggregate_id=self.aggregate_id,
                state=_label(self.state),
                trigger=_label(event),
            )
            raise IllegalTransitionError(_label(self.state), _label(event), reason)

        old_state = self.state
        self.state = transition.target
        now = datetime.utcnow()

        self.lifecycle_events.append({
            "timestamp": now.isoformat(),
            "event": f"Status changed from {_label(old_state)} to {_label(transition.target)}",
            "trigger": _label(event),
            "message": transition.message,
        })
        self._events.append(
            StatusChangeEvent(
                aggregate_id=self.aggregate_id,
                aggregate_type=self.aggregate_type,
                old_status=_label(old_state),
                new_status=_label(transition.target),
                trigger=_label(event),
                reason=transition.message or None,
            )
        )
        logger.debug(
            "Transition applied",
            aggregate_id=self.aggregate_id,
            old_state=_label(old_state),
            new_state=_label(transition.target),
        )
        return transition

    def can_transition(self, event: E) -> bool:
        """Check whether an event is allowed from the current state."""
        return self.table.lookup(self.state, event) is not None

    def allowed_events(self) -> List[E]:
        """Events accepted from the current state."""
        return self.table.allowed_events(self.state)

    @property
    def is_terminal(self) -> bool:
        """True when no event can leave the current state."""
        return self.table.is_terminal(self.state)

    def pull_events(self) -> List[StatusChangeEvent]:
        """Return and clear the pending status change events."""
        events, self._events = self._events, []
        return events
