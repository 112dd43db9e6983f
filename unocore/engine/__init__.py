"""Game engine for UNO."""

from unocore.engine.card import Card, CardType, Color
from unocore.engine.deck import Pile, create_empty_pile, create_initial_deck
from unocore.engine.errors import (
    DeckExhausted,
    GameOver,
    HandInProgress,
    IllegalPlay,
    InvalidCardIndex,
    InvalidConfiguration,
    InvalidPlayerIndex,
    RoundEnded,
    UnoError,
)
from unocore.engine.game import Game
from unocore.engine.hand import Hand, LastAction
from unocore.engine.shuffler import (
    RecordingShuffler,
    ReplayingShuffler,
    Shuffler,
    identity_shuffler,
    seeded_shuffler,
    standard_shuffler,
)
from unocore.engine.view import PlayerView
from unocore.engine.actions import (
    Action,
    PlayCard,
    DrawCard,
    get_legal_actions,
    apply_action,
)

__all__ = [
    "Card",
    "CardType",
    "Color",
    "Pile",
    "create_empty_pile",
    "create_initial_deck",
    "UnoError",
    "InvalidConfiguration",
    "InvalidPlayerIndex",
    "InvalidCardIndex",
    "IllegalPlay",
    "RoundEnded",
    "HandInProgress",
    "GameOver",
    "DeckExhausted",
    "Game",
    "Hand",
    "LastAction",
    "Shuffler",
    "standard_shuffler",
    "seeded_shuffler",
    "identity_shuffler",
    "RecordingShuffler",
    "ReplayingShuffler",
    "PlayerView",
    "Action",
    "PlayCard",
    "DrawCard",
    "get_legal_actions",
    "apply_action",
]
