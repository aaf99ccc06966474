from __future__ import annotations

import hashlib
import logging
import time
from typing import Callable, Iterator

from observer.services.errors import ExhaustedRetries

LOGGER = logging.getLogger(__name__)


def _now_ms() -> int:
    return int(time.time() * 1000)


def hash_counter(counter: int) -> str:
    return hashlib.md5(str(counter).encode("ascii")).hexdigest()


class TokenGenerator:
    """Derives token values from a millisecond counter.

    The counter is seeded from the wall clock and each value is hashed with
    MD5. Values already present according to ``exists`` are skipped by
    bumping the counter. At most ``max_attempts`` counter values are tried
    per issuance, after which ExhaustedRetries is raised.
    """

    def __init__(
        self,
        exists: Callable[[str], bool],
        max_attempts: int,
        clock: Callable[[], int] = _now_ms,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self._exists = exists
        self._max_attempts = max_attempts
        self._clock = clock

    def candidates(self) -> Iterator[str]:
        counter = self._clock()
        for _ in range(self._max_attempts):
            candidate = hash_counter(counter)
            if not self._exists(candidate):
                yield candidate
            else:
                LOGGER.info("Token collision counter=%s token=%s", counter, candidate)
            counter += 1
        LOGGER.error("Token issuance gave up after %s attempts", self._max_attempts)
        raise ExhaustedRetries(
            f"Unable to find a free token after {self._max_attempts} attempts"
        )

    def generate(self) -> str:
        return next(self.candidates())
