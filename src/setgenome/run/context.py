"""
Genome Context Module

This module implements the GenomeContext class, which bundles everything one
evolutionary run needs to create and transform genomes consistently.

Classes:
    GenomeContext: Configuration, identity registry, random source and genome templates of a run
"""

import logging
import numpy as np

from setgenome.genotype.crossover         import crossover
from setgenome.genotype.genome            import Genome
from setgenome.genotype.identity_registry import IdentityRegistry
from setgenome.run.config                 import Config

logger = logging.getLogger(__name__)

class GenomeContext:
    """
    The moving parts shared by all genomes of one evolutionary run.

    A context owns one IdentityRegistry and one random number generator. It builds
    the minimal genome once and hands out copies of it, so all genomes of the run
    have the same input and output nodes and can be recombined with each other.

    Selection, fitness evaluation and population management are left to the caller,
    which typically does something like:

        >>> context = GenomeContext(Config("config.ini"))
        >>> population = [context.initialized_genome() for _ in range(100)]
        >>> for genome in population:
        ...     context.mutate(genome)
        >>> child = context.crossover(population[0], population[1])

    Public Attributes:
        config:   Stores configuration parameters
        registry: Issues identities for all genomes of the run
        rng:      Random number generator used by all operations of the context

    Public Methods:
        uninitialized_genome(): Copy of the minimal genome (no connections)
        initialized_genome():   Copy of the minimal genome with its initial connections
        mutate(genome):         Mutate a genome in place
        crossover(a, b, ...):   Recombine two genomes
        from_dict(d):           Load a genome into this run
    """

    def __init__(self, config: Config | None = None, seed: int | None = None):
        """
        Parameters:
            config: Stores configuration parameters (defaults if None)
            seed:   Seed for the random number generator; if None, 'config.seed' is used

        Raises:
            ValueError: if the configuration is invalid
        """
        self.config = config if config is not None else Config()
        self.config.validate()

        if seed is None:
            seed = self.config.seed

        self.rng      = np.random.default_rng(seed)
        self.registry = IdentityRegistry(self.config.reuse_innovations)

        self._uninitialized_genome = Genome(self.config, self.registry)
        self._initialized_genome   = self._uninitialized_genome.copy()
        self._initialized_genome.initialize(self.rng)

        logger.info("Created genome context: %d inputs, %d outputs, %d initial connections, seed %s",
                    self.config.num_inputs, self.config.num_outputs,
                    len(self._initialized_genome), seed)

    def uninitialized_genome(self) -> Genome:
        return self._uninitialized_genome.copy()

    def initialized_genome(self) -> Genome:
        """
        Copy of the minimal genome in which 'initial_cxn_fraction' of the inputs
        are connected to every output. All copies share weights and identities.
        """
        return self._initialized_genome.copy()

    def mutate(self, genome: Genome) -> None:
        genome.mutate(self.rng)

    def crossover(self, parent_a: Genome, parent_b: Genome, fitter_parent: Genome | None = None) -> Genome:
        return crossover(parent_a, parent_b, self.rng, self.config.disjoint_policy, fitter_parent)

    def from_dict(self, genome_dict: dict) -> Genome:
        """
        Load a genome described by a dictionary (see 'Genome.to_dict') into this run.

        The registry only learns about the genome's identities once it is accepted.

        Raises:
            ValueError: if the genome's input/output nodes differ from those of the run,
                        or the genome is invalid
        """
        fixed_node_ids = {n["id"] for n in genome_dict["nodes"] if n["type"] in ("input", "output")}
        if fixed_node_ids != self._uninitialized_genome.fixed_node_ids:
            raise ValueError("Genome input/output nodes do not match those of this run")
        return Genome.from_dict(genome_dict, self.config, self.registry)
