"""
Crossover Module

This module implements the recombination of two genomes into an offspring.

Genes are aligned by identity only: two connection genes with the same innovation
number are the same gene, whatever else they hold.

Classes:
    DisjointPolicy: Which non-matching connection genes the offspring inherits

Functions:
    crossover: Recombine two parent genomes into a new genome
"""

import logging
import numpy as np
from enum   import Enum
from typing import TYPE_CHECKING

from setgenome.genotype.node_gene import NodeType

if TYPE_CHECKING:
    from setgenome.genotype.genome import Genome

logger = logging.getLogger(__name__)

class DisjointPolicy(Enum):
    """
    What happens to disjoint and excess connection genes (present in one parent only).

    INHERIT_ALL:   inherited from whichever parent holds them
    FITTER_PARENT: inherited only from the parent designated as fitter;
                   without a designated parent this behaves like INHERIT_ALL
    """
    INHERIT_ALL   = "inherit_all"
    FITTER_PARENT = "fitter_parent"

def crossover(parent_a     : 'Genome',
              parent_b     : 'Genome',
              rng          : np.random.Generator,
              policy       : DisjointPolicy | str | None = None,
              fitter_parent: 'Genome | None'             = None) -> 'Genome':
    """
    Recombine two genomes into a new offspring genome.

    Crossover rules:
    - Matching connection genes: the offspring inherits the gene once, with the
      weight bit pattern taken, uniformly at random, from one of the two parents
      (never a blend). If the parents disagree on the 'enabled' status, the gene
      is enabled with a 75% chance.
    - Disjoint/excess connection genes: inherited according to 'policy'.
      They are considered in increasing innovation order, and a gene is dropped
      if it would duplicate a (node_in, node_out) pair already inherited, close
      a cycle in feed-forward mode, or form a forbidden self-loop.
    - Recurrent connection genes follow the same rules and stay recurrent; they
      are exempt from the cycle and self-loop checks.
    - Nodes: all input and output nodes, plus every hidden node at an end of an
      inherited connection. A node present in both parents is copied from one of
      them, chosen uniformly at random.

    The parents are not modified; the offspring shares their config and registry.
    Given the same parents and the same state of 'rng', the offspring is the same.

    Parameters:
        parent_a:      first parent genome
        parent_b:      second parent genome
        rng:           random source
        policy:        disjoint gene policy ('disjoint_policy' of parent_a's config if None)
        fitter_parent: which parent is fitter ('parent_a', 'parent_b', or None if equal)

    Returns:
        New offspring genome

    Raises:
        ValueError: if the parents do not have the same input and output nodes, a matching
                    gene has different endpoints or kinds in the two parents, or
                    'fitter_parent' is neither parent
    """
    from setgenome.genotype.genome import Genome

    if parent_a.fixed_node_ids != parent_b.fixed_node_ids:
        raise ValueError("Parents have different input/output nodes; they do not belong to the same run")
    if fitter_parent is not None and fitter_parent is not parent_a and fitter_parent is not parent_b:
        raise ValueError("'fitter_parent' must be one of the two parents")

    if policy is None:
        policy = parent_a.config.disjoint_policy
    policy = DisjointPolicy(policy)

    # Create empty (no node or connection genes) offspring genome
    offspring = Genome._empty(parent_a)

    # Input and output nodes are always present
    for node_id in sorted(parent_a.fixed_node_ids):
        _inherit_node(offspring, node_id, parent_a, parent_b, rng)

    # Get connection innovation numbers from both parents
    innovs_a = set(parent_a.conn_genes.keys())
    innovs_b = set(parent_b.conn_genes.keys())

    # Matching connections: weight pattern randomly from either parent
    for innov in sorted(innovs_a & innovs_b):
        conn_a = parent_a.conn_genes[innov]
        conn_b = parent_b.conn_genes[innov]
        if conn_a.endpoints != conn_b.endpoints:
            raise ValueError(f"Connection {innov} has endpoints {conn_a.endpoints} in one parent "
                             f"and {conn_b.endpoints} in the other")
        if conn_a.recurrent != conn_b.recurrent:
            raise ValueError(f"Connection {innov} is recurrent in one parent only")

        conn_gene = (conn_a if rng.random() < 0.5 else conn_b).copy()

        # Handle 'enabled' status:
        # - if parents disagree on enabled status, 75% chance of being enabled
        # - if parents agree, inherit that status
        if conn_a.enabled != conn_b.enabled:
            conn_gene.enabled = rng.random() < 0.75

        _inherit_connection(offspring, conn_gene, parent_a, parent_b, rng)

    # Disjoint & excess connections
    if policy == DisjointPolicy.FITTER_PARENT and fitter_parent is not None:
        donors = [fitter_parent]
    else:
        donors = [parent_a, parent_b]

    extra_innovs = set()
    for donor in donors:
        extra_innovs |= set(donor.conn_genes.keys()) - (innovs_a & innovs_b)

    for innov in sorted(extra_innovs):
        donor = parent_a if innov in innovs_a else parent_b
        _inherit_connection(offspring, donor.conn_genes[innov].copy(), parent_a, parent_b, rng)

    problems = offspring.check_invariants()
    if problems:
        raise RuntimeError("Crossover produced an invalid genome: " + "; ".join(problems))

    return offspring

def _inherit_node(offspring: 'Genome',
                  node_id  : int,
                  parent_a : 'Genome',
                  parent_b : 'Genome',
                  rng      : np.random.Generator) -> None:
    """
    Copy the node gene 'node_id' into the offspring:
    - matching nodes:     inherit randomly from either parent
    - non-matching nodes: inherit from whichever parent has it
    """
    if node_id in parent_a.node_genes and node_id in parent_b.node_genes:
        node_gene = parent_a.node_genes[node_id] if rng.random() < 0.5 else parent_b.node_genes[node_id]
    elif node_id in parent_a.node_genes:
        node_gene = parent_a.node_genes[node_id]
    elif node_id in parent_b.node_genes:
        node_gene = parent_b.node_genes[node_id]
    else:
        raise RuntimeError(f"node ID {node_id} cannot be found in either parent")
    offspring.node_genes[node_id] = node_gene.copy()

def _inherit_connection(offspring: 'Genome',
                        conn_gene,
                        parent_a : 'Genome',
                        parent_b : 'Genome',
                        rng      : np.random.Generator) -> bool:
    """
    Insert 'conn_gene' into the offspring, together with the hidden nodes at its
    ends, unless this would break an invariant; in that case the gene is dropped.

    Returns:
        whether the gene was inserted
    """
    new_nodes = [nid for nid in (conn_gene.node_in, conn_gene.node_out) if nid not in offspring.node_genes]
    for node_id in dict.fromkeys(new_nodes):
        _inherit_node(offspring, node_id, parent_a, parent_b, rng)

    if offspring.can_connect(conn_gene.node_in, conn_gene.node_out, conn_gene.recurrent):
        offspring.conn_genes[conn_gene.innovation] = conn_gene
        return True

    logger.debug("crossover: dropping connection %d (%d=>%d), it would break the genome invariants",
                 conn_gene.innovation, conn_gene.node_in, conn_gene.node_out)

    # Hidden nodes only belong to the offspring through its connections
    for node_id in dict.fromkeys(new_nodes):
        if offspring.node_genes[node_id].type == NodeType.HIDDEN:
            del offspring.node_genes[node_id]
    return False
