from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Dict, Tuple

from ..core.enums import Action, ActionState
from ..core.exceptions import ActionInProgressError

logger = logging.getLogger(__name__)


@dataclass
class _Slot:
    state: ActionState = ActionState.IDLE
    latest_token: int = 0
    last_error: str = ""


class ActionTracker:
    """Per-user state machine for backend-bound actions.

    Each (owner, action) pair moves idle -> pending -> idle | error.
    Mutating actions refuse to start while pending, and every ``begin`` hands
    out a token so a slow response can tell whether a newer one superseded it.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._slots: Dict[Tuple[str, Action], _Slot] = {}

    def _slot(self, owner: str, action: Action) -> _Slot:
        key = (owner, action)
        slot = self._slots.get(key)
        if slot is None:
            slot = _Slot()
            self._slots[key] = slot
        return slot

    def state(self, owner: str, action: Action) -> ActionState:
        with self._lock:
            return self._slot(owner, action).state

    def last_error(self, owner: str, action: Action) -> str:
        with self._lock:
            return self._slot(owner, action).last_error

    def begin(self, owner: str, action: Action, *, exclusive: bool = True) -> int:
        """Move to PENDING and return a fresh request token.

        With ``exclusive`` a second begin while pending raises
        ActionInProgressError; without it the newer request simply wins.
        """
        with self._lock:
            slot = self._slot(owner, action)
            if exclusive and slot.state == ActionState.PENDING:
                raise ActionInProgressError("This action is already in progress, please wait.")
            slot.state = ActionState.PENDING
            slot.latest_token += 1
            slot.last_error = ""
            return slot.latest_token

    def is_current(self, owner: str, action: Action, token: int) -> bool:
        with self._lock:
            return self._slot(owner, action).latest_token == token

    def succeed(self, owner: str, action: Action, token: int) -> bool:
        """Finish successfully; returns False when the token is stale."""
        with self._lock:
            slot = self._slot(owner, action)
            if slot.latest_token != token:
                logger.debug("Discarding stale %s response for %s (token %s)", action.value, owner, token)
                return False
            slot.state = ActionState.IDLE
            return True

    def fail(self, owner: str, action: Action, token: int, message: str) -> bool:
        with self._lock:
            slot = self._slot(owner, action)
            if slot.latest_token != token:
                return False
            slot.state = ActionState.ERROR
            slot.last_error = message
            return True


class ActionTicket:
    """Handed out by track(); ``current`` is set when the block exits."""

    def __init__(self, token: int):
        self.token = token
        self.current = False


class _Tracked:
    def __init__(self, tracker: ActionTracker, owner: str, action: Action, exclusive: bool):
        self._tracker = tracker
        self._owner = owner
        self._action = action
        self._exclusive = exclusive
        self._ticket: ActionTicket | None = None

    def __enter__(self) -> ActionTicket:
        self._ticket = ActionTicket(self._tracker.begin(self._owner, self._action, exclusive=self._exclusive))
        return self._ticket

    def __exit__(self, exc_type, exc, tb) -> bool:
        ticket = self._ticket
        if exc is None:
            ticket.current = self._tracker.succeed(self._owner, self._action, ticket.token)
        else:
            self._tracker.fail(self._owner, self._action, ticket.token, str(exc))
        return False


def track(tracker: ActionTracker, owner: str, action: Action, *, exclusive: bool = True) -> _Tracked:
    """``with track(...) as ticket:`` wrapper around begin/succeed/fail."""
    return _Tracked(tracker, owner, action, exclusive)
