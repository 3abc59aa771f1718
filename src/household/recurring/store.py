#!/usr/bin/env python3
"""
Obligation Store Protocol - conditional updates for recurring obligations.

Two household members can observe the same overdue bill at once. Advancement
is committed with a compare-and-set keyed on the whole obligation that was
read, so only one of them posts the realized entry; the other gets a
ConflictError, re-fetches and retries. The due date alone is not a usable
key: honoring the last occurrence of a series keeps the due date and only
clears the active flag.
"""

import logging
import threading
from collections.abc import Iterable
from datetime import datetime
from typing import Protocol

from ..core.exceptions import ConflictError
from .engine import Honoring, advance, honor
from .models import RecurringObligation

logger = logging.getLogger(__name__)


class ObligationStore(Protocol):
    """
    Storage boundary for recurring obligations.

    Implementations wrap the shared document store. The core only needs a
    read and a conditional write.
    """

    def get(self, obligation_id: str) -> RecurringObligation:
        """
        Load the current snapshot of an obligation.

        Raises:
            KeyError: If no obligation has this id
        """
        ...

    def compare_and_set(
        self, obligation_id: str, expected: RecurringObligation, updated: RecurringObligation
    ) -> None:
        """
        Replace the stored obligation only if it still equals `expected`.

        Raises:
            ConflictError: If the stored obligation differs from `expected`
            KeyError: If no obligation has this id
        """
        ...


class InMemoryObligationStore:
    """Lock-guarded in-process ObligationStore, used by the CLI and tests."""

    def __init__(self, obligations: Iterable[RecurringObligation] = ()):
        self._lock = threading.Lock()
        self._obligations: dict[str, RecurringObligation] = {o.id: o for o in obligations}

    def get(self, obligation_id: str) -> RecurringObligation:
        with self._lock:
            return self._obligations[obligation_id]

    def put(self, obligation: RecurringObligation) -> None:
        """Insert or overwrite unconditionally."""
        with self._lock:
            self._obligations[obligation.id] = obligation

    def all(self) -> list[RecurringObligation]:
        with self._lock:
            return list(self._obligations.values())

    def compare_and_set(
        self, obligation_id: str, expected: RecurringObligation, updated: RecurringObligation
    ) -> None:
        with self._lock:
            current = self._obligations[obligation_id]
            if current != expected:
                raise ConflictError(obligation_id, expected, current)
            self._obligations[obligation_id] = updated


def advance_with_store(store: ObligationStore, obligation_id: str, reference: datetime) -> RecurringObligation:
    """
    Advance a stored obligation at most once for this triggering event.

    Raises:
        ConflictError: If another caller advanced it first
    """
    current = store.get(obligation_id)
    updated = advance(current, reference)
    try:
        store.compare_and_set(obligation_id, current, updated)
    except ConflictError:
        logger.warning(f"Lost advance race for obligation {obligation_id}")
        raise
    return updated


def honor_with_store(
    store: ObligationStore,
    obligation_id: str,
    now: datetime,
    created_by: str | None = None,
) -> Honoring:
    """
    Honor a stored obligation and commit the advance conditionally.

    The returned entry must only be persisted when this call succeeds;
    a ConflictError means someone else already honored this occurrence.

    Raises:
        ConflictError: If another caller honored it first
        ValidationError: If the obligation is inactive
    """
    current = store.get(obligation_id)
    result = honor(current, now, created_by=created_by)
    try:
        store.compare_and_set(obligation_id, current, result.obligation)
    except ConflictError:
        logger.warning(f"Lost honoring race for obligation {obligation_id}; entry {result.entry.id} discarded")
        raise
    return result
