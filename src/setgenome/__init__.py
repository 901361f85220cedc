"""
SET genome - A set-encoded genome for neuroevolution.

This package provides the representation-and-reproduction layer of a neuroevolution
algorithm: a genome encoding the topology and weights of a neural network as sets of
genes, plus the operators that evolve it (mutation and crossover). Selection, fitness
evaluation and the execution of the encoded network are left to the caller.

Connection weights are not floats but bit patterns of tunable length, whose number of
set bits determines the weight; genes of different genomes are aligned by the identities
issued by a shared registry.

Main components:
- genotype:    Genetic encoding (genomes, genes, weight codec, identity registry, operators)
- run:         Configuration and the per-run genome context
- activations: Activation functions a node may carry

Example:
    >>> from setgenome import Config, GenomeContext
    >>> context = GenomeContext(Config("config.ini"))
    >>> parent_a = context.initialized_genome()
    >>> parent_b = context.initialized_genome()
    >>> context.mutate(parent_a)
    >>> child = context.crossover(parent_a, parent_b)
"""

__version__ = "0.1.0"

from setgenome.run.config                 import Config
from setgenome.run.context                import GenomeContext
from setgenome.genotype.genome            import Genome
from setgenome.genotype.node_gene         import NodeType, NodeGene
from setgenome.genotype.connection_gene   import ConnectionGene
from setgenome.genotype.identity_registry import IdentityRegistry
from setgenome.genotype.weight_codec      import WeightBits
from setgenome.genotype.mutations         import Mutation
from setgenome.genotype.crossover         import DisjointPolicy, crossover

__all__ = [
    "Config",
    "GenomeContext",
    "Genome",
    "NodeType",
    "NodeGene",
    "ConnectionGene",
    "IdentityRegistry",
    "WeightBits",
    "Mutation",
    "DisjointPolicy",
    "crossover",
]
