import numpy as np

from evobirds.core.chromosome import Chromosome
from evobirds.core.individual import BasicIndividual
from evobirds.engine import GeneticAlgorithm
from evobirds.operators.crossover import UniformCrossover
from evobirds.operators.mutation import GaussianMutation
from evobirds.operators.selection import RouletteWheelSelection
from evobirds.sim.config import SimulationConfig
from evobirds.sim.simulation import Simulation


# Generic GA run: fitness grows with the gene sum, so selection should push it up
def test_gene_sum_integration():
    rng = np.random.default_rng(31)
    ga = GeneticAlgorithm(
        selection=RouletteWheelSelection(),
        crossover=UniformCrossover(),
        mutation=GaussianMutation(chance=0.5, coeff=0.5),
    )

    def evaluate(population):
        return [BasicIndividual(ind.chromosome(), fitness=max(float(ind.chromosome().genes.sum()) + 10.0, 0.0))
                for ind in population]

    population = evaluate(BasicIndividual.create_population(lambda: Chromosome.random(10, rng), 50))
    history = []
    for _ in range(30):
        children, stats = ga.evolve(rng, population)
        history.append(stats)
        population = evaluate(children)

    assert all(s.min_fitness <= s.avg_fitness <= s.max_fitness for s in history)
    assert history[-1].avg_fitness > history[0].avg_fitness + 2.0


# Full foraging run over several generations with a small arena
def test_foraging_integration():
    config = SimulationConfig(bird_count=12, food_count=60, eye_cells=5, generation_length=150, collision_radius=0.08)
    rng = np.random.default_rng(7)
    sim = Simulation.random(rng, config)
    chromosome_length = len(sim.world.birds[0].as_chromosome())

    for generation in range(3):
        stats = sim.train(rng)
        assert stats.size == config.bird_count
        assert 0.0 <= stats.min_fitness <= stats.avg_fitness <= stats.max_fitness
        assert sim.generation == generation + 1

    snapshot = sim.snapshot()
    assert len(snapshot.birds) == config.bird_count
    assert len(snapshot.foods) == config.food_count
    assert all(0.0 <= b.x < 1.0 and 0.0 <= b.y < 1.0 for b in snapshot.birds)
    assert all(len(bird.as_chromosome()) == chromosome_length for bird in sim.world.birds)
