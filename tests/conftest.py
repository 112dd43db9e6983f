"""Shared fixtures: hands dealt from a stacked deck."""

import pytest

from unocore.engine import Card, Hand, ReplayingShuffler, create_initial_deck


def stacked_order(front):
    """Full 108-card order starting with ``front``, the rest in deck order."""
    rest = list(create_initial_deck())
    for card in front:
        rest.remove(card)
    return list(front) + rest


def stacked_shuffler(front):
    return ReplayingShuffler([stacked_order(front)])


@pytest.fixture
def stacked_hand():
    """Build a Hand whose players hold ``hands``, with ``top`` on the discard pile.

    ``draw`` lists the first cards of the draw pile. The dealer defaults to
    the last seat so player 0 starts when the top card has no effect.
    """

    def make(hands, top: Card, draw=(), dealer=None) -> Hand:
        front = [c for held in hands for c in held] + [top] + list(draw)
        return Hand(
            [f"p{i}" for i in range(len(hands))],
            len(hands) - 1 if dealer is None else dealer,
            stacked_shuffler(front),
            cards_per_player=len(hands[0]),
        )

    return make
