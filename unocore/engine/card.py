"""Card, CardType and Color types for UNO."""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional


class Color(str, Enum):
    """Card colors."""

    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    YELLOW = "yellow"


class CardType(str, Enum):
    """Card kinds."""

    NUMBERED = "numbered"
    SKIP = "skip"
    REVERSE = "reverse"
    DRAW = "draw"
    WILD = "wild"
    WILD_DRAW = "wild_draw"


ACTION_TYPES = (CardType.SKIP, CardType.REVERSE, CardType.DRAW)
WILD_TYPES = (CardType.WILD, CardType.WILD_DRAW)


@dataclass(frozen=True)
class Card:
    """A UNO card.

    Numbered cards carry a color and a number 0-9. Skip, reverse and draw
    cards carry a color only. Wild cards have color=None while held; the copy
    put on the discard pile carries the color chosen by the player.
    """

    type: CardType
    color: Optional[Color] = None
    number: Optional[int] = None

    def __post_init__(self) -> None:
        if self.type == CardType.NUMBERED:
            if self.color is None:
                raise ValueError("Numbered cards must have a color")
            if self.number is None or not 0 <= self.number <= 9:
                raise ValueError(f"Invalid card number: {self.number}")
        elif self.number is not None:
            raise ValueError(f"{self.type.value} cards have no number")
        elif self.type in ACTION_TYPES and self.color is None:
            raise ValueError(f"{self.type.value} cards must have a color")

    @classmethod
    def numbered(cls, color: Color, number: int) -> "Card":
        return cls(CardType.NUMBERED, color, number)

    @classmethod
    def skip(cls, color: Color) -> "Card":
        return cls(CardType.SKIP, color)

    @classmethod
    def reverse(cls, color: Color) -> "Card":
        return cls(CardType.REVERSE, color)

    @classmethod
    def draw(cls, color: Color) -> "Card":
        return cls(CardType.DRAW, color)

    @classmethod
    def wild(cls) -> "Card":
        return cls(CardType.WILD)

    @classmethod
    def wild_draw(cls) -> "Card":
        return cls(CardType.WILD_DRAW)

    @property
    def is_wild(self) -> bool:
        return self.type in WILD_TYPES

    def with_color(self, color: Color) -> "Card":
        """Return the colored copy of a wild card."""
        if not self.is_wild:
            raise ValueError(f"Only wild cards can be colored, got {self}")
        return replace(self, color=color)

    def without_color(self) -> "Card":
        """Return the card as it was before a color was chosen for it."""
        if self.is_wild and self.color is not None:
            return replace(self, color=None)
        return self

    def __str__(self) -> str:
        if self.type == CardType.NUMBERED:
            return f"{self.color.value}_{self.number}"
        if self.color is None:
            return self.type.value
        return f"{self.color.value}_{self.type.value}"
