import logging
import random

import pytest

from config import settings
from settlement.card import parse_cards
from settlement.evaluator import evaluate_five


@pytest.fixture(autouse=True)
def setup_logging():
    """Automatically disable logging for all tests."""
    logging.disable(logging.CRITICAL)
    yield
    logging.disable(logging.NOTSET)


@pytest.fixture(autouse=True)
def default_settings(monkeypatch):
    """Run every test against the default chip width and remainder policy."""
    monkeypatch.setattr(settings, "chip_bits", 32)
    monkeypatch.setattr(settings, "remainder_policy", "first_eligible")


@pytest.fixture
def cards():
    """Factory turning "A♠ K♠ ..." style labels into Card lists."""
    return parse_cards


@pytest.fixture
def hand_of(cards):
    """Factory evaluating a 5-card label string."""

    def _evaluate(labels):
        return evaluate_five(cards(labels))

    return _evaluate


@pytest.fixture
def rng():
    """Seeded RNG so randomized checks are reproducible."""
    return random.Random(1337)
