"""
Weight Target Example

This script evolves a population of genomes towards a toy objective that needs
no network simulation: every connection weight should be close to a target
value, and the genome should hold a given number of hidden nodes.

It shows how a caller drives a run: one GenomeContext hands out the initial
genomes and applies mutation and crossover; fitness evaluation and selection
(plain truncation selection here) are the caller's business.

Usage:
    python evolve_weights.py [config_file]
"""

import logging
import sys
from pathlib import Path

from setgenome.genotype import Genome
from setgenome.run      import Config, GenomeContext

logger = logging.getLogger("evolve_weights")

TARGET_WEIGHT       = 0.5
TARGET_HIDDEN_NODES = 3
POPULATION_SIZE     = 50
NUM_GENERATIONS     = 100

def fitness(genome: Genome) -> float:
    weights = list(genome.weights().values())
    if not weights:
        return -2.0
    weight_error = sum(abs(w - TARGET_WEIGHT) for w in weights) / len(weights)
    return -weight_error - 0.05 * abs(len(genome.hidden_nodes) - TARGET_HIDDEN_NODES)

def main(config_file: str) -> Genome:
    context = GenomeContext(Config(config_file))

    population = [context.initialized_genome() for _ in range(POPULATION_SIZE)]
    for genome in population:
        context.mutate(genome)

    for generation in range(NUM_GENERATIONS):
        ranked = sorted(population, key=fitness, reverse=True)
        best   = ranked[0]
        if generation % 10 == 0:
            logger.info("Generation %3d: best fitness %+.4f, %d hidden nodes, %d connections",
                        generation, fitness(best), len(best.hidden_nodes), len(best))

        parents   = ranked[:POPULATION_SIZE // 2]
        offspring = []
        while len(parents) + len(offspring) < POPULATION_SIZE:
            i, j = sorted(context.rng.choice(len(parents), size=2, replace=False))

            # 'parents' is sorted by fitness, so parents[i] is at least as fit
            child = context.crossover(parents[i], parents[j], fitter_parent=parents[i])
            context.mutate(child)
            offspring.append(child)

        population = parents + offspring

    best = max(population, key=fitness)
    logger.info("Best genome (fitness %+.4f):\n%s", fitness(best), best)
    return best

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    default_config = Path(__file__).parent / "config_weights.ini"
    main(sys.argv[1] if len(sys.argv) > 1 else str(default_config))
