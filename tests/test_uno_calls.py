"""Unit tests for saying UNO and catching players who forget."""

import pytest
from unocore.engine import (
    Card,
    Color,
    DrawCard,
    InvalidPlayerIndex,
    LastAction,
    PlayCard,
    PlayerView,
    apply_action,
    get_legal_actions,
)

R, G, B, Y = Color.RED, Color.GREEN, Color.BLUE, Color.YELLOW


@pytest.fixture
def hand(stacked_hand):
    hands = [
        [Card.numbered(R, 8), Card.numbered(R, 9)],
        [Card.numbered(B, 1), Card.numbered(B, 2)],
        [Card.numbered(G, 1), Card.numbered(G, 2)],
    ]
    return stacked_hand(hands, Card.numbered(R, 5), draw=[Card.numbered(Y, 7)] * 2)


def test_catch_player_without_uno(hand) -> None:
    hand.play(0)
    assert hand.catch_uno_failure(accuser=1, accused=0)
    assert len(hand.player_hand(0)) == 5
    assert not hand.catch_uno_failure(accuser=1, accused=0)


def test_catch_fails_after_uno(hand) -> None:
    hand.play(0)
    hand.say_uno(0)
    assert hand.has_called_uno(0)
    assert not hand.catch_uno_failure(accuser=2, accused=0)
    assert len(hand.player_hand(0)) == 1


def test_catch_fails_with_more_cards(hand) -> None:
    assert not hand.catch_uno_failure(accuser=0, accused=1)
    assert len(hand.player_hand(1)) == 2


def test_catch_window_closes_when_next_player_acts(hand) -> None:
    hand.play(0)
    hand.draw()
    assert hand.last_action(0) == LastAction.NONE
    assert hand.last_action(1) == LastAction.DREW
    assert not hand.catch_uno_failure(accuser=2, accused=0)
    assert len(hand.player_hand(0)) == 1


def test_say_uno_with_several_cards_is_ignored(hand) -> None:
    hand.say_uno(0)
    assert not hand.has_called_uno(0)


def test_penalty_cards_clear_uno_call(hand) -> None:
    hand.play(0)
    hand.say_uno(0)
    hand.draw()
    hand.draw()
    assert hand.player_in_turn() == 0
    hand.draw()
    assert not hand.has_called_uno(0)


def test_invalid_indices(hand) -> None:
    with pytest.raises(InvalidPlayerIndex):
        hand.say_uno(3)
    with pytest.raises(InvalidPlayerIndex):
        hand.catch_uno_failure(accuser=-1, accused=0)
    with pytest.raises(InvalidPlayerIndex):
        hand.catch_uno_failure(accuser=0, accused=5)


def test_play_action_says_uno(hand) -> None:
    apply_action(hand, PlayCard(card_index=0, say_uno=True))
    assert hand.has_called_uno(0)
    assert not hand.catch_uno_failure(accuser=1, accused=0)


def test_legal_actions(stacked_hand) -> None:
    hands = [
        [Card.wild(), Card.numbered(R, 2), Card.numbered(B, 3)],
        [Card.numbered(G, 1), Card.numbered(Y, 2), Card.numbered(Y, 3)],
    ]
    hand = stacked_hand(hands, Card.numbered(R, 5))
    actions = get_legal_actions(hand)
    wilds = [a for a in actions if isinstance(a, PlayCard) and a.card_index == 0]
    assert {a.chosen_color for a in wilds} == set(Color)
    assert PlayCard(card_index=1) in actions
    assert PlayCard(card_index=2) not in actions
    assert isinstance(actions[-1], DrawCard)


def test_player_view_hides_other_hands(hand) -> None:
    hand.play(0)
    view = PlayerView.from_hand(hand, 2)
    assert view.my_hand == hand.player_hand(2)
    assert view.num_cards_per_player == (1, 2, 2)
    assert view.top_discard == Card.numbered(R, 8)
    assert view.catchable_players() == [0]
    assert PlayerView.from_hand(hand, 0).catchable_players() == []


def test_no_uno_calls_or_catches_after_hand_ends(stacked_hand) -> None:
    hand = stacked_hand([[Card.numbered(R, 8)], [Card.numbered(B, 2)]], Card.numbered(R, 5))
    hand.play(0)
    assert hand.has_ended()

    hand.say_uno(1)
    assert not hand.has_called_uno(1)

    assert not hand.catch_uno_failure(accuser=0, accused=1)
    assert not hand.catch_uno_failure(accuser=1, accused=0)
    assert hand.player_hand(0) == []
    assert hand.player_hand(1) == [Card.numbered(B, 2)]
    assert hand.score() == 2
