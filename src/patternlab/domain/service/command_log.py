"""Domain service: Command Log.

Executes inventory actions and remembers them in order so they can be
audited and undone last-in-first-out. There is no redo: an undone action
is dropped from the log.
"""

from __future__ import annotations

import logging
import threading

from patternlab.domain.commands import InventoryAction

logger = logging.getLogger(__name__)


class CommandLog:

    def __init__(self) -> None:
        self._actions: list[InventoryAction] = []
        # record/undo_last must not interleave if a host adds threads.
        self._lock = threading.RLock()

    def __len__(self) -> int:
        return len(self._actions)

    def record(self, action: InventoryAction) -> None:
        """Apply ``action`` and append it to the log.

        If ``apply`` raises, nothing is recorded and the error propagates.
        """
        with self._lock:
            action.apply()
            self._actions.append(action)
            logger.debug("Recorded %s (%d in log)", action.describe(), len(self._actions))

    def undo_last(self) -> InventoryAction | None:
        """Revert and discard the most recent action.

        Returns the undone action, or None when the log is empty.
        """
        with self._lock:
            if not self._actions:
                logger.debug("Nothing to undo")
                return None
            action = self._actions[-1]
            # Only drop the entry once the inverse has gone through.
            action.revert()
            self._actions.pop()
            logger.debug("Undid %s (%d in log)", action.describe(), len(self._actions))
            return action

    def entries(self) -> tuple[InventoryAction, ...]:
        """Recorded actions, oldest first."""
        with self._lock:
            return tuple(self._actions)

    def audit_trail(self) -> list[str]:
        return [
            f"{index}. {action.describe()}"
            for index, action in enumerate(self.entries(), start=1)
        ]
