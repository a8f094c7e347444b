from itertools import combinations

import pytest

from data.types.hand_rank import HandRank
from exceptions import InvalidInputError
from settlement.card import Card, parse_cards
from settlement.deck import create_deck, deal, shuffle
from settlement.evaluator import (
    CATEGORY_SCALE,
    calculate_score,
    compare_hands,
    evaluate_best,
    evaluate_cards,
    evaluate_five,
    find_winners,
)


@pytest.fixture
def royal_flush():
    """Royal flush in spades"""
    return parse_cards("A♠ K♠ Q♠ J♠ 10♠")


@pytest.fixture
def straight_flush():
    """9-high straight flush in hearts"""
    return parse_cards("9♥ 8♥ 7♥ 6♥ 5♥")


@pytest.fixture
def four_of_a_kind():
    """Four aces"""
    return parse_cards("A♠ A♥ A♦ A♣ K♠")


@pytest.fixture
def full_house():
    """Kings full of aces, dealt pair first"""
    return parse_cards("A♠ A♥ K♦ K♠ K♥")


@pytest.fixture
def flush():
    """Ace-high flush in diamonds"""
    return parse_cards("2♦ J♦ A♦ 6♦ 8♦")


@pytest.fixture
def straight():
    """Ace-high straight"""
    return parse_cards("A♠ K♥ Q♦ J♣ 10♠")


@pytest.fixture
def three_of_a_kind():
    """Three queens"""
    return parse_cards("4♣ Q♠ Q♥ A♦ Q♦")


@pytest.fixture
def two_pair():
    """Kings and fives"""
    return parse_cards("5♠ K♥ 5♦ K♠ Q♥")


@pytest.fixture
def one_pair():
    """Pair of eights"""
    return parse_cards("A♠ 8♥ K♦ 8♠ J♥")


@pytest.fixture
def high_card():
    """Ace high"""
    return parse_cards("9♥ K♥ Q♦ J♠ A♠")


def test_royal_flush(royal_flush):
    """Test royal flush evaluation"""
    hand = evaluate_five(royal_flush)
    assert hand.rank == HandRank.ROYAL_FLUSH
    assert hand.tiebreakers == (14, 13, 12, 11, 10)
    assert hand.label == "Royal Flush"


def test_royal_flush_in_every_suit():
    """Test that the royal flush does not depend on the suit"""
    for suit in "♣♦♥♠":
        hand = evaluate_five(parse_cards([f"{r}{suit}" for r in ("10", "J", "Q", "K", "A")]))
        assert hand.rank == HandRank.ROYAL_FLUSH


def test_straight_flush(straight_flush):
    """Test straight flush evaluation"""
    hand = evaluate_five(straight_flush)
    assert hand.rank == HandRank.STRAIGHT_FLUSH
    assert hand.tiebreakers == (9, 8, 7, 6, 5)
    assert hand.label == "Straight Flush, 9 high"


def test_four_of_a_kind(four_of_a_kind):
    """Test four of a kind evaluation"""
    hand = evaluate_five(four_of_a_kind)
    assert hand.rank == HandRank.FOUR_OF_KIND
    assert hand.tiebreakers == (14, 14, 14, 14, 13)
    assert hand.label == "Four of a Kind, Aces"


def test_full_house_orders_trips_before_pair(full_house):
    """Test full house evaluation puts the three of a kind first"""
    hand = evaluate_five(full_house)
    assert hand.rank == HandRank.FULL_HOUSE
    assert hand.tiebreakers == (13, 13, 13, 14, 14)
    assert [card.rank.value for card in hand.cards] == [13, 13, 13, 14, 14]
    assert hand.label == "Full House, Kings over Aces"


def test_flush(flush):
    """Test flush evaluation"""
    hand = evaluate_five(flush)
    assert hand.rank == HandRank.FLUSH
    assert hand.tiebreakers == (14, 11, 8, 6, 2)
    assert hand.label == "Flush, Ace high"


def test_straight(straight):
    """Test straight evaluation"""
    hand = evaluate_five(straight)
    assert hand.rank == HandRank.STRAIGHT
    assert hand.tiebreakers == (14, 13, 12, 11, 10)
    assert hand.label == "Straight, Ace high"


def test_three_of_a_kind(three_of_a_kind):
    """Test three of a kind evaluation"""
    hand = evaluate_five(three_of_a_kind)
    assert hand.rank == HandRank.THREE_OF_KIND
    assert hand.tiebreakers == (12, 12, 12, 14, 4)
    assert hand.label == "Three of a Kind, Queens"


def test_two_pair(two_pair):
    """Test two pair evaluation orders high pair, low pair, kicker"""
    hand = evaluate_five(two_pair)
    assert hand.rank == HandRank.TWO_PAIR
    assert hand.tiebreakers == (13, 13, 5, 5, 12)
    assert hand.label == "Two Pair, Kings and 5s"


def test_one_pair(one_pair):
    """Test one pair evaluation puts the pair before the kickers"""
    hand = evaluate_five(one_pair)
    assert hand.rank == HandRank.ONE_PAIR
    assert hand.tiebreakers == (8, 8, 14, 13, 11)
    assert hand.cards[0].rank == hand.cards[1].rank
    assert hand.label == "One Pair, 8s"


def test_high_card(high_card):
    """Test high card evaluation"""
    hand = evaluate_five(high_card)
    assert hand.rank == HandRank.HIGH_CARD
    assert hand.tiebreakers == (14, 13, 12, 11, 9)
    assert hand.label == "High Card, Ace"


def test_ace_low_straight():
    """Test ace-low straight (A,2,3,4,5) ranks by the five"""
    hand = evaluate_five(parse_cards("A♠ 5♥ 4♦ 3♣ 2♠"))
    assert hand.rank == HandRank.STRAIGHT
    assert hand.tiebreakers == (5, 4, 3, 2, 14)
    assert hand.cards[0].rank.value == 5
    assert hand.label == "Straight, 5 high"


def test_ace_low_straight_flush_is_not_royal():
    """Test ace-low straight flush"""
    hand = evaluate_five(parse_cards("A♠ 2♠ 3♠ 4♠ 5♠"))
    assert hand.rank == HandRank.STRAIGHT_FLUSH
    assert hand.tiebreakers[0] == 5
    assert hand.label == "Straight Flush, 5 high"


def test_wheel_loses_to_six_high_straight():
    """Test that the wheel is the lowest straight"""
    wheel = evaluate_five(parse_cards("A♠ 5♥ 4♦ 3♣ 2♠"))
    six_high = evaluate_five(parse_cards("6♠ 5♣ 4♥ 3♦ 2♣"))
    assert compare_hands(six_high, wheel) == 1


def test_non_consecutive_suited_cards_are_a_flush():
    """Test that five suited, non-consecutive cards are only a flush"""
    hand = evaluate_five(parse_cards("A♠ K♠ Q♠ J♠ 9♠"))
    assert hand.rank == HandRank.FLUSH


def test_wrap_around_is_not_a_straight():
    """Test that Q-K-A-2-3 does not count as a straight"""
    hand = evaluate_five(parse_cards("Q♠ K♥ A♦ 2♣ 3♠"))
    assert hand.rank == HandRank.HIGH_CARD


@pytest.mark.parametrize("count", [0, 2, 4, 6])
def test_invalid_hand_size(count):
    """Test error handling for invalid hand size"""
    hand = create_deck()[:count]
    with pytest.raises(InvalidInputError, match="exactly 5 cards"):
        evaluate_five(hand)


def test_duplicate_cards_rejected():
    """Test that the same card twice is rejected"""
    with pytest.raises(InvalidInputError, match="Duplicate"):
        evaluate_five(parse_cards("A♠ A♠ K♦ Q♣ J♥"))


def test_non_card_rejected():
    """Test that evaluation only accepts Card objects"""
    with pytest.raises(InvalidInputError):
        evaluate_five(["A♠", "K♠", "Q♠", "J♠", "10♠"])


def test_score_is_pure_function_of_rank_and_tiebreakers():
    """Two different flushes with identical ranks tie exactly"""
    spades = evaluate_five(parse_cards("A♠ K♠ Q♠ J♠ 9♠"))
    hearts = evaluate_five(parse_cards("A♥ K♥ Q♥ J♥ 9♥"))
    assert spades.score == hearts.score
    assert compare_hands(spades, hearts) == 0
    assert spades.score == calculate_score(HandRank.FLUSH, spades.tiebreakers)


def test_score_layout():
    """Category weight sits above two-digit slots for each tiebreaker"""
    score = calculate_score(HandRank.ONE_PAIR, (8, 8, 14, 13, 11))
    assert score == 2 * CATEGORY_SCALE + 8 * 10**8 + 8 * 10**6 + 14 * 10**4 + 13 * 10**2 + 11


def test_category_dominates_kickers():
    """The best high card still loses to the worst pair"""
    best_high_card = evaluate_five(parse_cards("A♠ K♥ Q♦ J♣ 9♠"))
    worst_pair = evaluate_five(parse_cards("2♠ 2♥ 3♦ 4♣ 5♠"))
    assert worst_pair.score > best_high_card.score
    assert compare_hands(best_high_card, worst_pair) == -1


def test_category_order_over_representative_hands(
    royal_flush,
    straight_flush,
    four_of_a_kind,
    full_house,
    flush,
    straight,
    three_of_a_kind,
    two_pair,
    one_pair,
    high_card,
):
    """Representative hands of each category score in category order"""
    hands = [
        high_card,
        one_pair,
        two_pair,
        three_of_a_kind,
        straight,
        flush,
        full_house,
        four_of_a_kind,
        straight_flush,
        royal_flush,
    ]
    evaluated = [evaluate_five(h) for h in hands]
    assert [h.rank.weight for h in evaluated] == list(range(1, 11))
    scores = [h.score for h in evaluated]
    assert scores == sorted(scores)
    assert len(set(scores)) == len(scores)


def test_kicker_breaks_tie_between_pairs():
    """Test one pair with kicker tiebreaker"""
    hand1 = evaluate_five(parse_cards("A♠ A♥ K♦ Q♠ J♥"))
    hand2 = evaluate_five(parse_cards("A♦ A♣ K♣ Q♦ 10♥"))
    assert compare_hands(hand1, hand2) == 1
    assert compare_hands(hand2, hand1) == -1


def test_two_pair_second_pair_breaks_tie():
    """Test that the second pair outranks the kicker"""
    hand1 = evaluate_five(parse_cards("A♠ A♥ K♦ K♠ 2♥"))
    hand2 = evaluate_five(parse_cards("A♦ A♣ Q♣ Q♦ K♣"))
    assert compare_hands(hand1, hand2) == 1


def test_full_house_trips_break_tie():
    """Aces full should beat kings full"""
    hand1 = evaluate_five(parse_cards("A♠ A♥ A♦ 2♠ 2♥"))
    hand2 = evaluate_five(parse_cards("K♦ K♣ K♥ A♣ A♦"))
    assert compare_hands(hand1, hand2) == 1


def test_best_of_seven_finds_royal_flush():
    """Hole A♠ K♠ with a Q♠ J♠ 10♠ board makes a royal flush"""
    hand = evaluate_best(parse_cards("A♠ K♠"), parse_cards("Q♠ J♠ 10♠ 2♣ 3♣"))
    assert hand.rank == HandRank.ROYAL_FLUSH
    assert set(hand.cards) == set(parse_cards("A♠ K♠ Q♠ J♠ 10♠"))


def test_best_of_seven_prefers_flush_over_straight():
    """A pool holding both a straight and a flush plays the flush"""
    hand = evaluate_best(parse_cards("9♥ 2♥"), parse_cards("8♥ 7♣ 6♥ 5♦ K♥"))
    assert hand.rank == HandRank.FLUSH
    assert hand.tiebreakers == (13, 9, 8, 6, 2)


def test_best_of_six_on_turn():
    """Evaluation works with a four-card board"""
    hand = evaluate_best(parse_cards("Q♣ Q♦"), parse_cards("Q♥ 3♠ 3♦ 9♣"))
    assert hand.rank == HandRank.FULL_HOUSE
    assert hand.tiebreakers == (12, 12, 12, 3, 3)


def test_best_of_five_on_flop():
    """With exactly five cards the only combination is returned"""
    hole, flop = parse_cards("7♣ 2♦"), parse_cards("9♠ J♥ 4♣")
    assert evaluate_best(hole, flop) == evaluate_five(hole + flop)


def test_best_needs_five_cards():
    """Fewer than five cards in the pool is rejected"""
    with pytest.raises(InvalidInputError):
        evaluate_best(parse_cards("A♠ K♠"), parse_cards("Q♠ J♠"))


def test_best_of_pool_dominates_every_subset(rng):
    """The chosen hand scores at least as high as every 5-card subset"""
    for _ in range(50):
        deck = create_deck()
        shuffle(deck, rng)
        pool = deal(deck, rng.choice([5, 6, 7]))
        best = evaluate_cards(pool)
        subset_scores = [evaluate_five(combo).score for combo in combinations(pool, 5)]
        assert best.score == max(subset_scores)
        assert all(card in pool for card in best.cards)


def test_random_hands_are_total(rng):
    """Any five distinct cards evaluate to a defined category with positive score"""
    for _ in range(200):
        deck = create_deck()
        shuffle(deck, rng)
        hand = evaluate_five(deal(deck, 5))
        assert isinstance(hand.rank, HandRank)
        assert hand.score > 0
        assert len(hand.cards) == 5
        assert hand.tiebreakers == tuple(card.rank.value for card in hand.cards)


def test_find_winners_returns_all_tied_players(hand_of):
    """Tied best hands are all returned, in candidate order"""
    hands = {
        "p1": hand_of("A♠ K♥ Q♦ J♣ 9♠"),
        "p2": hand_of("2♠ 2♥ 3♦ 4♣ 5♠"),
        "p3": hand_of("2♦ 2♣ 3♥ 4♦ 5♣"),
    }
    assert find_winners(hands) == ["p2", "p3"]
    assert find_winners(hands, ["p3", "p1", "p2"]) == ["p3", "p2"]
    assert find_winners(hands, ["p1", "ghost"]) == ["p1"]
    assert find_winners(hands, ["ghost"]) == []


def test_card_parsing_variants():
    """Cards parse from symbols, letters and English names"""
    assert Card.parse("Td") == Card.parse("10♦")
    assert Card.parse("as") == Card.of("spades", "ace")
    with pytest.raises(InvalidInputError):
        Card.parse("1x")
    with pytest.raises(InvalidInputError):
        Card.of("stars", "ace")
