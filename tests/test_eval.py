import random

import pytest

from gomoku_ai.config import Settings
from gomoku_ai.eval import Evaluator
from gomoku_ai.pattern import detect_all_patterns
from gomoku_ai.types import Color, Pattern, VALUE_EVAL_MAX, VALUE_EVAL_MIN, WIN_SCORE


@pytest.fixture
def evaluator():
    return Evaluator(Settings())


def test_empty_board_evaluates_to_zero(make_board, evaluator):
    board = make_board()
    assert evaluator.evaluate_board(board, Color.BLACK) == 0
    assert evaluator.evaluate_board(board, Color.WHITE) == 0


def test_opponent_score_is_scaled_by_threat(make_board, evaluator):
    board = make_board(black=[(7, 6), (7, 7), (7, 8)])
    live_three = Settings().weight(Pattern.LIVE_THREE)
    assert evaluator.evaluate_board(board, Color.BLACK) == live_three
    assert evaluator.evaluate_board(board, Color.WHITE) == pytest.approx(-live_three * 1.2)


def test_custom_threat_coefficient(make_board):
    board = make_board(black=[(7, 6), (7, 7), (7, 8)])
    evaluator = Evaluator(Settings(opponent_threat=2.0))
    assert evaluator.evaluate_board(board, Color.WHITE) == -2 * Settings().weight(Pattern.LIVE_THREE)


def test_quick_evaluation_prefers_completing_an_open_four(make_board, evaluator):
    board = make_board(black=[(7, 3), (7, 4), (7, 5), (7, 6)], white=[(0, 14)])
    far_away = evaluator.quick_evaluate_position(board, (12, 12), Color.BLACK)
    live_four = Settings().weight(Pattern.LIVE_FOUR)
    for pos in [(7, 2), (7, 7)]:
        assert evaluator.quick_evaluate_position(board, pos, Color.BLACK) >= far_away + live_four


def test_quick_evaluation_values_blocking(make_board, evaluator):
    # White gains nothing of its own at (7, 7) but denies Black a five there
    board = make_board(black=[(7, 3), (7, 4), (7, 5), (7, 6)])
    score = evaluator.quick_evaluate_position(board, (7, 7), Color.WHITE)
    assert score == pytest.approx(0.8 * Settings().weight(Pattern.FIVE))


def test_evaluation_leaves_board_unchanged(evaluator, make_board):
    rng = random.Random(1234)
    for _ in range(5):
        cells = rng.sample([(r, c) for r in range(15) for c in range(15)], 40)
        board = make_board(black=cells[:20], white=cells[20:])
        before = board.copy()
        evaluator.evaluate_board(board, Color.BLACK)
        for pos in [(r, c) for r in range(15) for c in range(15) if board.is_empty((r, c))][:30]:
            evaluator.quick_evaluate_position(board, pos, Color.WHITE)
        assert board == before


def test_pattern_score_uses_weights(make_board, evaluator):
    board = make_board(black=[(7, 5), (7, 6), (7, 7)])
    counts = detect_all_patterns(board, Color.BLACK)
    assert evaluator.pattern_score(counts) == 3 * Settings().weight(Pattern.LIVE_THREE)


def test_evaluation_stays_below_terminal_scores(make_board, evaluator):
    board = make_board(black=[(7, c) for c in range(3, 8)], white=[(8, 3), (8, 4), (8, 5)])
    assert evaluator.evaluate_board(board, Color.BLACK) == VALUE_EVAL_MAX
    assert evaluator.evaluate_board(board, Color.WHITE) == VALUE_EVAL_MIN
    assert VALUE_EVAL_MAX < WIN_SCORE
