"""
Tests for token value derivation and the collision-avoidance loop.
"""
import hashlib
import re
from unittest.mock import Mock

import pytest

from observer.services.errors import ExhaustedRetries
from observer.services.token_generator import TokenGenerator, hash_counter

TOKEN_PATTERN = re.compile(r"^[0-9a-f]{32}$")


def test_hash_counter_is_md5_of_decimal_counter():
    assert hash_counter(1418000000000) == hashlib.md5(b"1418000000000").hexdigest()
    assert TOKEN_PATTERN.match(hash_counter(0))


class TestTokenGenerator:
    def test_accepts_first_free_value(self):
        exists = Mock(return_value=False)
        generator = TokenGenerator(exists, max_attempts=5, clock=lambda: 1000)

        assert generator.generate() == hash_counter(1000)
        exists.assert_called_once_with(hash_counter(1000))

    def test_skips_taken_values(self):
        taken = {hash_counter(1000), hash_counter(1001), hash_counter(1002)}
        generator = TokenGenerator(taken.__contains__, max_attempts=10, clock=lambda: 1000)

        token = generator.generate()

        assert token == hash_counter(1003)
        assert token not in taken

    def test_candidates_continue_after_the_accepted_value(self):
        generator = TokenGenerator(lambda _: False, max_attempts=3, clock=lambda: 42)
        candidates = generator.candidates()

        assert next(candidates) == hash_counter(42)
        assert next(candidates) == hash_counter(43)

    def test_gives_up_after_max_attempts(self):
        exists = Mock(return_value=True)
        generator = TokenGenerator(exists, max_attempts=3, clock=lambda: 7)

        with pytest.raises(ExhaustedRetries):
            generator.generate()
        assert exists.call_count == 3

    def test_lookup_errors_abort_the_loop(self):
        exists = Mock(side_effect=RuntimeError("store down"))
        generator = TokenGenerator(exists, max_attempts=3, clock=lambda: 7)

        with pytest.raises(RuntimeError, match="store down"):
            generator.generate()
        exists.assert_called_once()

    def test_rejects_non_positive_bound(self):
        with pytest.raises(ValueError):
            TokenGenerator(lambda _: False, max_attempts=0)

    def test_default_clock_is_milliseconds(self):
        generator = TokenGenerator(lambda _: False, max_attempts=1)

        assert TOKEN_PATTERN.match(generator.generate())
