"""Unit tests for token and clock helpers."""

import re
from datetime import timedelta

from breakloop.util.clock import FixedClock
from breakloop.util.tokens import generate_id, generate_token
from tests.conftest import NOW


class TestTokens:
    """Tests for token generation."""

    def test_token_alphabet(self):
        token = generate_token()

        assert len(token) == 24
        assert re.fullmatch(r"[a-z0-9]+", token)

    def test_tokens_differ(self):
        assert len({generate_token() for _ in range(50)}) == 50

    def test_id_carries_prefix_and_millis(self):
        generated = generate_id("inv", NOW)

        prefix, millis, suffix = generated.split("_")
        assert prefix == "inv"
        assert int(millis) == int(NOW.timestamp() * 1000)
        assert len(suffix) == 9


class TestFixedClock:
    """Tests for FixedClock."""

    def test_advance(self):
        clock = FixedClock(NOW)

        assert clock.advance(minutes=5) == NOW + timedelta(minutes=5)
        assert clock.now() == NOW + timedelta(minutes=5)

    def test_set(self):
        clock = FixedClock()
        clock.set(NOW - timedelta(days=1))

        assert clock.now() == NOW - timedelta(days=1)
