import random

import pytest

from klondike.cards import KING, Card, Suit
from klondike.game import (
    GOAL_AREAS,
    HAND,
    HAND_AREA,
    PILE_AREAS,
    RESET_BUTTON,
    SOUND_BUTTON,
    STOCK_AREA,
    Klondike,
    Rect,
    SoundEffect,
)


def make_game(sounds=None):
    def record(effect, enabled):
        if sounds is not None:
            sounds.append((effect, enabled))

    return Klondike(random.Random(1234), record)


def up(suit, value):
    return Card(suit, value, True)


def centre(rect):
    return rect.left + rect.width // 2, rect.top + rect.height // 2


def test_rect_contains_edges():
    rect = Rect(0, 0, 10, 10)
    assert rect.contains(0, 0)
    assert rect.contains(9, 9)
    assert not rect.contains(10, 5)
    assert not rect.contains(5, 10)
    assert not rect.contains(-1, 5)


def test_reset_deals_all_cards():
    game = make_game()
    assert [len(p) for p in game.piles] == list(range(1, 8))
    total = len(game.hand) + sum(len(p) for p in game.piles)
    assert total == 52
    for pile in game.piles:
        assert pile[-1].face_up
        assert not any(card.face_up for card in pile[:-1])
    assert [g[0].suit for g in game.goals] == list(Suit)
    assert all(g[0].value == 0 and len(g) == 1 for g in game.goals)
    assert game.hand_index is None
    assert game.selected is None


def test_same_seed_same_deal():
    a = Klondike(random.Random(7))
    b = Klondike(random.Random(7))
    assert [(c.suit, c.value) for c in a.hand] == [(c.suit, c.value) for c in b.hand]


def test_is_game_won():
    game = make_game()
    assert not game.is_game_won()
    game.goals = [[Card(suit, KING)] for suit in Suit]
    assert game.is_game_won()


def test_show_last_cards():
    game = make_game()
    game.piles[3].append(Card(Suit.CLUBS, 4))
    game.piles[0].clear()
    game.show_last_cards()
    assert game.piles[3][-1].face_up


def test_switch_sound_passes_setting_to_callback():
    sounds = []
    game = make_game(sounds)
    game.hand_next()
    game.switch_sound()
    assert game.sound is False
    game.hand_next()
    assert sounds == [
        (SoundEffect.CARD_SLIDE, True),
        (SoundEffect.CARD_SLIDE, False),
    ]
    game.switch_sound()
    assert game.sound is True


def test_hand_next_cycles_through_stock():
    game = make_game()
    seen = []
    for _ in range(len(game.hand)):
        game.hand_next()
        seen.append(game.hand_index)
    assert seen == list(range(len(game.hand)))
    game.hand_next()
    assert game.hand_index is None
    game.hand_next()
    assert game.hand_index == 0


def test_hand_next_clears_selection():
    game = make_game()
    game.hand_next()
    game.select_hand()
    assert game.selected == HAND
    game.hand_next()
    assert game.selected is None


def test_select_hand_needs_turned_card():
    game = make_game()
    game.select_hand()
    assert game.selected is None
    game.hand_next()
    game.select_hand()
    assert game.selected == HAND
    game.select_hand()
    assert game.selected is None


def test_select_goal_from_hand():
    game = make_game()
    game.hand = [up(Suit.CLUBS, 5), up(Suit.DIAMONDS, 1)]
    game.hand_index = 1
    game.selected = HAND
    game.select_goal(0)
    assert game.goals[0][-1].suit == Suit.DIAMONDS
    assert game.goals[0][-1].value == 1
    assert len(game.hand) == 1
    assert game.hand_index == 0
    assert game.selected is None


def test_select_goal_wrong_suit_keeps_card():
    game = make_game()
    game.hand = [up(Suit.HEARTS, 1)]
    game.hand_index = 0
    game.selected = HAND
    game.select_goal(0)
    assert len(game.goals[0]) == 1
    assert len(game.hand) == 1
    assert game.selected == HAND


def test_select_goal_without_selection_is_silent():
    sounds = []
    game = make_game(sounds)
    game.select_goal(2)
    assert sounds == []
    assert all(len(g) == 1 for g in game.goals)


def test_select_goal_from_pile_top_only():
    game = make_game()
    game.piles[0] = [up(Suit.SPADES, 1), up(Suit.HEARTS, 2)]
    game.selected = 0
    game.selector = 0
    game.select_goal(3)
    assert len(game.goals[3]) == 1
    game.piles[0] = [Card(Suit.CLUBS, 9), up(Suit.SPADES, 1)]
    game.selector = 1
    game.select_goal(3)
    assert game.goals[3][-1].value == 1
    assert len(game.piles[0]) == 1
    assert game.selected is None


def test_hand_to_pile_alternating_colour():
    game = make_game()
    game.piles[2] = [up(Suit.SPADES, 6)]
    game.hand = [up(Suit.HEARTS, 5)]
    game.hand_index = 0
    game.hand_to_pile(2, 0)
    assert [c.value for c in game.piles[2]] == [6, 5]
    assert game.hand == []


def test_hand_to_pile_same_colour_rejected():
    game = make_game()
    game.piles[2] = [up(Suit.SPADES, 6)]
    game.hand = [up(Suit.CLUBS, 5)]
    game.hand_index = 0
    game.hand_to_pile(2, 0)
    assert len(game.piles[2]) == 1
    assert len(game.hand) == 1


def test_hand_to_empty_pile_needs_king():
    game = make_game()
    game.piles[4] = []
    game.hand = [up(Suit.CLUBS, 12), up(Suit.CLUBS, KING)]
    game.hand_index = 0
    game.hand_to_pile(4, 0)
    assert game.piles[4] == []
    game.hand_index = 1
    game.hand_to_pile(4, 0)
    assert game.piles[4][0].value == KING
    assert game.hand_index == 0


def test_pile_to_pile_moves_run():
    game = make_game()
    game.piles[0] = [Card(Suit.CLUBS, 2), up(Suit.HEARTS, 9), up(Suit.SPADES, 8)]
    game.piles[1] = [up(Suit.CLUBS, 10)]
    game.selected = 0
    game.selector = 1
    game.pile_to_pile(1, 0)
    assert [c.value for c in game.piles[1]] == [10, 9, 8]
    assert len(game.piles[0]) == 1


def test_pile_to_pile_requires_top_target():
    game = make_game()
    game.piles[0] = [up(Suit.HEARTS, 9)]
    game.piles[1] = [up(Suit.CLUBS, 10), up(Suit.DIAMONDS, 3)]
    game.selected = 0
    game.selector = 0
    game.pile_to_pile(1, 0)
    assert len(game.piles[1]) == 2
    assert len(game.piles[0]) == 1


def test_king_run_to_empty_pile():
    game = make_game()
    game.piles[0] = [Card(Suit.CLUBS, 2), up(Suit.HEARTS, KING), up(Suit.SPADES, 12)]
    game.piles[6] = []
    game.selected = 0
    game.selector = 1
    game.pile_to_pile(6, 0)
    assert [c.value for c in game.piles[6]] == [KING, 12]
    assert len(game.piles[0]) == 1


def test_action_picks_then_drops():
    sounds = []
    game = make_game(sounds)
    game.action(3, 2)
    assert (game.selected, game.selector) == (3, 2)
    game.piles[3] = [up(Suit.HEARTS, 4)]
    game.selector = 0
    game.piles[5] = [up(Suit.CLUBS, 4)]
    game.action(5, 0)
    assert game.selected is None
    assert game.selector == 0
    assert [e for e, _ in sounds] == [SoundEffect.CARD_SLIDE, SoundEffect.CARD_PLACE]


def test_is_card_valid():
    game = make_game()
    game.piles[1] = [Card(Suit.CLUBS, 3), up(Suit.HEARTS, 2)]
    assert not game.is_card_valid(1, 0)
    assert game.is_card_valid(1, 1)
    assert not game.is_card_valid(1, 2)
    game.selected = HAND
    assert game.is_card_valid(1, 2)


def test_select_pile_by_height():
    game = make_game()
    game.piles[1] = [Card(Suit.CLUBS, 3), up(Suit.HEARTS, 7)]
    game.select_pile(1, 360)
    assert game.selected is None
    game.select_pile(1, 500)
    assert game.selected == 1
    assert game.selector == 1


def test_click_moves_card_between_piles():
    game = make_game()
    game.piles[0] = [up(Suit.HEARTS, 9)]
    game.piles[1] = [Card(Suit.DIAMONDS, 1), up(Suit.SPADES, 10)]
    x0 = centre(PILE_AREAS[0])[0]
    x1 = centre(PILE_AREAS[1])[0]
    game.click(x0, 400)
    assert game.selected == 0
    game.click(x1, 420)
    assert [c.value for c in game.piles[1]] == [1, 10, 9]
    assert game.piles[0] == []
    assert game.selected is None


def test_click_king_to_empty_pile():
    game = make_game()
    game.piles[0] = []
    game.piles[2] = [up(Suit.CLUBS, KING)]
    game.click(centre(PILE_AREAS[2])[0], 400)
    game.click(centre(PILE_AREAS[0])[0], 400)
    assert game.piles[0][0].value == KING
    assert game.piles[2] == []


def test_click_buttons():
    game = make_game()
    game.click(*centre(SOUND_BUTTON))
    assert game.sound is False
    game.click(*centre(STOCK_AREA))
    assert game.hand_index == 0
    game.click(*centre(HAND_AREA))
    assert game.selected == HAND
    game.click(5, 5)
    assert game.selected is None
    game.click(*centre(RESET_BUTTON))
    assert game.hand_index is None
    assert sum(len(p) for p in game.piles) + len(game.hand) == 52


def test_click_goal_area():
    game = make_game()
    game.hand = [up(Suit.HEARTS, 1)]
    game.hand_index = 0
    game.selected = HAND
    game.click(*centre(GOAL_AREAS[2]))
    assert game.goals[2][-1].value == 1
    assert game.hand == []


@pytest.mark.parametrize("pos", range(4))
def test_goal_areas_map_to_suits(pos):
    game = make_game()
    suit = Suit(pos)
    game.hand = [up(suit, 1)]
    game.hand_index = 0
    game.selected = HAND
    game.click(*centre(GOAL_AREAS[pos]))
    assert game.goals[pos][-1].suit == suit
    assert len(game.goals[pos]) == 2