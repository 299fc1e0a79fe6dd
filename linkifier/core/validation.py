from __future__ import annotations

import logging
from typing import Callable

from linkifier.core.row_scanner import LinkOccurrence

LOGGER = logging.getLogger(__name__)


class ValidationGate:
    """Runs a matcher's optional validation callback and drops stale verdicts.

    ``generation`` returns the scheduler's current scan generation. A verdict is
    honoured only when the generation is unchanged since the occurrence was
    found; any newer scan request means the row text may have changed.
    """

    def __init__(self, generation: Callable[[], int]) -> None:
        self._generation = generation

    def submit(
        self,
        occurrence: LinkOccurrence,
        row_text: str,
        accept: Callable[[LinkOccurrence], None],
    ) -> None:
        callback = occurrence.matcher.validation_callback
        if callback is None:
            accept(occurrence)
            return

        token = self._generation()
        settled = False

        def done(is_valid: bool) -> None:
            nonlocal settled
            if settled:
                return
            settled = True
            if self._generation() != token:
                LOGGER.debug(
                    "Discarding stale validation for %r at row %d, column %d",
                    occurrence.text,
                    occurrence.row,
                    occurrence.column,
                )
                return
            if is_valid:
                accept(occurrence)

        # Errors raised by the callback belong to its caller.
        callback(row_text, done)
