"""Exceptions raised by the UNO engine.

Everything a caller can trigger with bad input derives from ``UnoError``
(itself a ``ValueError``). ``DeckExhausted`` is the odd one out: it marks a
broken invariant, not a bad call.
"""


class UnoError(ValueError):
    """Base class for rule and input violations."""


class InvalidConfiguration(UnoError):
    """Bad player count, dealer, target score or cards per player."""


class InvalidPlayerIndex(UnoError, IndexError):
    """Player index out of range."""


class IllegalPlay(UnoError):
    """A move the rules do not allow."""


class InvalidCardIndex(IllegalPlay, IndexError):
    """Card index out of range for the current player's hand."""


class RoundEnded(IllegalPlay):
    """Play or draw attempted after the hand was won."""


class HandInProgress(UnoError):
    """Scores requested for a hand that has not ended yet."""


class GameOver(UnoError):
    """The match already has a winner or was ended."""


class DeckExhausted(RuntimeError):
    """Draw and discard piles are both empty when a card is needed."""
