"""Unit tests for the match-level score accumulator."""

import pytest
from unocore.engine import (
    Card,
    Color,
    Game,
    GameOver,
    HandInProgress,
    InvalidConfiguration,
    InvalidPlayerIndex,
    seeded_shuffler,
)

from conftest import stacked_shuffler

R, B = Color.RED, Color.BLUE


def _one_card_game(target_score: int) -> Game:
    # Hand 1: p0 holds red 8, p1 blue 3, red 5 on the discard pile
    shuffler = stacked_shuffler([Card.numbered(R, 8), Card.numbered(B, 3), Card.numbered(R, 5)])
    return Game(["p0", "p1"], target_score=target_score, shuffler=shuffler,
                cards_per_player=1, dealer=1)


@pytest.mark.parametrize(
    "players,target,dealer",
    [(["a"], 500, 0), (["a", "b"], 0, 0), (["a", "b"], -5, 0), (["a", "b"], 500, 2)],
)
def test_invalid_configuration(players, target, dealer) -> None:
    with pytest.raises(InvalidConfiguration):
        Game(players, target_score=target, dealer=dealer)


def test_new_game_starts_first_hand() -> None:
    game = Game(["a", "b", "c"], shuffler=seeded_shuffler(3), dealer=2)
    assert game.target_score == 500
    assert game.scores == (0, 0, 0)
    assert len(game.hands) == 1
    assert game.current_hand().dealer == 2
    assert game.winner() is None
    assert not game.has_ended()


def test_random_dealer_is_valid() -> None:
    game = Game(["a", "b", "c", "d"], shuffler=seeded_shuffler(1))
    assert 0 <= game.dealer < 4


def test_update_scores_requires_finished_hand() -> None:
    game = Game(["a", "b"], shuffler=seeded_shuffler(2), dealer=0)
    with pytest.raises(HandInProgress):
        game.update_scores()


def test_update_scores_credits_winner_and_deals_again() -> None:
    game = _one_card_game(target_score=100)
    hand = game.current_hand()
    hand.play(0)
    assert hand.score() == 3

    game.update_scores()
    assert game.scores == (3, 0)
    assert game.score(0) == 3
    assert len(game.hands) == 2
    assert game.current_hand() is not hand
    assert game.dealer == 0
    assert game.winner() is None


def test_reaching_target_ends_match() -> None:
    game = _one_card_game(target_score=3)
    game.current_hand().play(0)
    game.update_scores()
    assert game.winner() == 0
    assert game.has_ended()
    assert len(game.hands) == 1
    with pytest.raises(GameOver):
        game.update_scores()
    with pytest.raises(GameOver):
        game.start_new_hand()


def test_end_game_without_winner() -> None:
    game = Game(["a", "b"], shuffler=seeded_shuffler(4), dealer=0)
    game.end_game()
    assert game.has_ended()
    assert game.winner() is None


def test_start_new_hand_with_dealer() -> None:
    game = Game(["a", "b", "c"], shuffler=seeded_shuffler(5), dealer=0)
    hand = game.start_new_hand(dealer=2)
    assert hand.dealer == 2
    assert game.current_hand() is hand
    with pytest.raises(InvalidConfiguration):
        game.start_new_hand(dealer=3)


def test_player_accessors() -> None:
    game = Game(["a", "b"], shuffler=seeded_shuffler(6), dealer=0)
    assert game.player(1) == "b"
    assert game.player_count == 2
    with pytest.raises(InvalidPlayerIndex):
        game.score(2)
    with pytest.raises(InvalidPlayerIndex):
        game.player(-1)
