import numpy as np

from evobirds.core.chromosome import Chromosome
from evobirds.core.individual import Individual
from evobirds.sim.config import SimulationConfig
from evobirds.sim.entities import Bird
from evobirds.sim.individual import BirdIndividual


def test_bird_individual_from_bird():
    config = SimulationConfig(eye_cells=2)
    bird = Bird.random(np.random.default_rng(0), config)
    bird.satiation = 12

    ind = BirdIndividual.from_bird(bird)
    assert isinstance(ind, Individual)
    assert ind.fitness() == 12.0
    assert ind.chromosome() == bird.as_chromosome()


def test_bird_individual_create_has_zero_fitness():
    ind = BirdIndividual.create(Chromosome([1.0, 2.0]))
    assert ind.fitness() == 0.0
    assert ind.chromosome() == Chromosome([1.0, 2.0])


def test_bird_individual_into_bird():
    config = SimulationConfig(eye_cells=2)
    rng = np.random.default_rng(1)
    bird = Bird.random(rng, config)
    child = BirdIndividual.from_bird(bird).into_bird(rng, config)
    assert isinstance(child, Bird)
    assert child.as_chromosome() == bird.as_chromosome()
    assert child.satiation == 0
