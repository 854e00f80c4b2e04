import numpy as np
import pytest

from colorfall.gym_env import ColorfallEnv, LEFT, NOOP, SOFT_DROP


def test_reset_returns_observation_and_info():
    env = ColorfallEnv()
    obs, info = env.reset(seed=0)
    assert obs.shape == (200,)
    assert obs.dtype == np.float32
    assert env.observation_space.contains(obs)
    assert info == {"score": 0, "level": 1, "fall_interval_ms": 1000}
    # Active piece is visible in the observation.
    assert obs.reshape(20, 10)[0].any()


def test_step_advances_one_tick():
    env = ColorfallEnv()
    env.reset(seed=0)
    y0 = env.game.state.active.y
    obs, reward, terminated, truncated, info = env.step(NOOP)
    assert env.game.state.active.y == y0 + 1
    assert reward == 0.0
    assert not terminated
    assert not truncated


def test_soft_drop_rewards_point():
    env = ColorfallEnv()
    env.reset(seed=0)
    _, reward, *_ = env.step(SOFT_DROP)
    assert reward == 1.0


def test_max_steps_truncates():
    env = ColorfallEnv(max_steps=2)
    env.reset(seed=1)
    assert not env.step(LEFT)[3]
    assert env.step(LEFT)[3]


def test_episode_terminates_on_game_over():
    env = ColorfallEnv()
    env.reset(seed=2)
    terminated = False
    for _ in range(2000):
        *_, terminated, _, _ = env.step(NOOP)
        if terminated:
            break
    assert terminated
    assert env.game.state.game_over


def test_invalid_action_rejected():
    env = ColorfallEnv()
    env.reset(seed=0)
    with pytest.raises(ValueError):
        env.step(9)


def test_render_ansi_shows_score():
    env = ColorfallEnv()
    env.reset(seed=0)
    text = env.render()
    assert text.splitlines()[-1] == "score=0 level=1"
    assert len(text.splitlines()) == 21
