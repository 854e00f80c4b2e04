from colorfall.game_state import GameState
from colorfall.scoring import ScoringRules, award_clear, award_soft_drop


def test_score_of_500_at_level_one_levels_up():
    state = GameState()
    state.score = 470
    assert award_clear(state, 3)
    assert state.score == 500
    assert state.level == 2
    assert state.fall_interval_ms == 900


def test_below_threshold_keeps_level():
    state = GameState()
    state.score = 460
    assert not award_clear(state, 3)
    assert state.level == 1
    assert state.fall_interval_ms == 1000


def test_single_level_per_pass_even_across_thresholds():
    state = GameState()
    state.score = 990
    assert award_clear(state, 3)
    assert state.score == 1020
    assert state.level == 2


def test_fall_interval_floor():
    rules = ScoringRules()
    assert rules.fall_interval_ms(1) == 1000
    assert rules.fall_interval_ms(5) == 600
    assert rules.fall_interval_ms(9) == 200
    assert rules.fall_interval_ms(30) == 200


def test_soft_drop_awards_one_point():
    state = GameState()
    award_soft_drop(state)
    award_soft_drop(state)
    assert state.score == 2


def test_reset_resets_counters():
    state = GameState()
    state.score = 900
    state.level = 3
    state.fall_interval_ms = 800
    state.reset_game()
    assert state.score == 0
    assert state.level == 1
    assert state.fall_interval_ms == 1000
