"""
Genotype Package

This package implements the genetic encoding of a neural network and the
operators transforming it.

A genome consists of two sets of genes, keyed by identity:
- Node genes:       Encode individual neurons (input, hidden, output) and their activation
- Connection genes: Encode directed connections, whose weight is a bit pattern

Modules:
    identity_registry: IdentityRegistry class
    weight_codec:      WeightBits class and the bit pattern <-> weight codec
    node_gene:         NodeType enumeration and NodeGene class
    connection_gene:   ConnectionGene class
    genome:            Genome class
    mutations:         Mutation enumeration and mutation operators
    crossover:         DisjointPolicy enumeration and crossover operator

Exported Classes:
    IdentityRegistry: Issues identities for the genes of a run
    WeightBits:       Bit pattern encoding a connection weight
    NodeType:         Enumeration for node types (INPUT, HIDDEN, OUTPUT)
    NodeGene:         Gene encoding a single network node
    ConnectionGene:   Gene encoding a weighted connection between nodes
    Genome:           Complete genome representing a neural network
    Mutation:         Enumeration of the mutation operators
    DisjointPolicy:   Enumeration of the disjoint gene inheritance policies
"""

from setgenome.genotype.identity_registry import IdentityRegistry
from setgenome.genotype.weight_codec      import WeightBits
from setgenome.genotype.node_gene         import NodeType, NodeGene
from setgenome.genotype.connection_gene   import ConnectionGene
from setgenome.genotype.genome            import Genome
from setgenome.genotype.mutations         import Mutation
from setgenome.genotype.crossover         import DisjointPolicy

__all__ = ['ConnectionGene',
           'DisjointPolicy',
           'Genome',
           'IdentityRegistry',
           'Mutation',
           'NodeGene',
           'NodeType',
           'WeightBits']
