import pytest

from colorfall.config import GameConfig
from colorfall.game_state import GameState


def test_from_mapping_routes_rule_keys():
    config = GameConfig.from_mapping({"rows": 12, "cols": 6, "level_step": 100})
    assert (config.rows, config.cols) == (12, 6)
    assert config.rules.level_step == 100


def test_from_mapping_rejects_unknown_keys():
    with pytest.raises(ValueError):
        GameConfig.from_mapping({"ghost_piece": True})


@pytest.mark.parametrize("kwargs", [{"rows": 2}, {"cols": 0}, {"colors": 0}, {"chain_delay_ms": -1}])
def test_invalid_config_rejected(kwargs):
    with pytest.raises(ValueError):
        GameConfig(**kwargs)


def test_state_uses_config_dimensions():
    state = GameState(config=GameConfig(rows=8, cols=4, colors=3))
    assert state.board.grid.shape == (8, 4)
    with pytest.raises(ValueError):
        state.board.set_cell(0, 0, 4)
