import json
import math

import numpy as np
import pytest

from evobirds.sim.brain import Brain
from evobirds.sim.config import SimulationConfig
from evobirds.sim.entities import Bird, Food, World, WorldSnapshot
from evobirds.sim.eye import Eye


@pytest.fixture
def config():
    return SimulationConfig(bird_count=4, food_count=6, eye_cells=3)


def test_food_random_in_unit_square():
    rng = np.random.default_rng(0)
    for _ in range(50):
        f = Food.random(rng)
        assert f.position.shape == (2,)
        assert np.all((f.position >= 0.0) & (f.position < 1.0))


def test_food_relocate_moves_food():
    f = Food(np.array([0.5, 0.5]))
    f.relocate(np.random.default_rng(1))
    assert not np.array_equal(f.position, [0.5, 0.5])


def test_bird_random(config):
    bird = Bird.random(np.random.default_rng(2), config)
    assert np.all((bird.position >= 0.0) & (bird.position < 1.0))
    assert 0.0 <= bird.rotation < 2 * math.pi
    assert bird.speed == config.initial_speed
    assert bird.satiation == 0
    assert bird.eye.cells == 3
    assert bird.vision.shape == (3,)


def test_bird_rotation_is_wrapped(config):
    eye = Eye.from_config(config)
    bird = Bird(np.array([0.1, 0.1]), -math.pi / 2, 0.002, eye, Brain.random(np.random.default_rng(0), eye))
    assert bird.rotation == pytest.approx(1.5 * math.pi)
    bird.rotation = 5 * math.pi
    assert bird.rotation == pytest.approx(math.pi)


def test_bird_from_chromosome_keeps_brain(config):
    rng = np.random.default_rng(3)
    parent = Bird.random(rng, config)
    child = Bird.from_chromosome(parent.as_chromosome(), rng, config)
    assert child.as_chromosome() == parent.as_chromosome()
    assert child.satiation == 0
    assert child.speed == config.initial_speed


def test_world_random_sizes(config):
    world = World.random(np.random.default_rng(4), config)
    assert len(world.birds) == 4
    assert len(world.foods) == 6


def test_world_snapshot(config):
    world = World.random(np.random.default_rng(5), config)
    world.birds[0].satiation = 7
    snap = world.snapshot()

    assert isinstance(snap, WorldSnapshot)
    assert len(snap.birds) == 4
    assert len(snap.foods) == 6
    assert snap.birds[0].x == world.birds[0].position[0]
    assert snap.birds[0].rotation == world.birds[0].rotation
    assert snap.birds[0].satiation == 7
    assert snap.birds[0].vision == (0.0, 0.0, 0.0)
    assert snap.foods[2].y == world.foods[2].position[1]


def test_world_snapshot_is_detached(config):
    world = World.random(np.random.default_rng(6), config)
    snap = world.snapshot()
    x_before = snap.birds[0].x
    world.birds[0].position[0] = 0.999
    assert snap.birds[0].x == x_before


def test_world_snapshot_as_dict_is_json_ready(config):
    world = World.random(np.random.default_rng(7), config)
    data = world.snapshot().as_dict()
    assert set(data) == {"birds", "foods"}
    assert set(data["birds"][0]) == {"x", "y", "rotation", "speed", "satiation", "vision"}
    json.dumps(data)
