"""
Mutations Module

This module implements the mutation operators acting on a Genome.

Every operator takes the genome (mutated in place) and a random source, and
returns whether it changed the genome. An operator that finds no legal target
(e.g. removing a node from a genome without hidden nodes) is a no-op and returns
False; no operator ever leaves the genome in a state violating its invariants.

Candidates for random choices are always enumerated in identity order, so the
outcome depends only on the genome and the state of the random source.

Classes:
    Mutation: Enumeration of the mutation operators

Functions:
    add_node, remove_node, add_connection, remove_connection,
    add_recurrent_connection, remove_recurrent_connection,
    mutate_weight, duplicate_weight, change_activation: the operators
    mutate: Apply all operators, each with its configured probability
"""

import logging
import numpy as np
from enum   import Enum
from typing import TYPE_CHECKING

from setgenome.genotype.connection_gene import ConnectionGene
from setgenome.genotype.node_gene       import NodeType, NodeGene

if TYPE_CHECKING:
    from setgenome.genotype.genome import Genome

logger = logging.getLogger(__name__)

def add_node(genome: 'Genome', rng: np.random.Generator) -> bool:
    """
    Split an existing connection by adding a new node.

    The connection to split is selected at random among the enabled, non-recurrent
    connections. It is replaced by a new hidden node and two new connections
    (node_in -> new node, new node -> node_out), each with a freshly sampled weight.
    Depending on the 'split_policy' the split connection is removed or disabled.

    The ID of the new node and the innovation numbers of the new connections
    come from the registry; if innovations are reused, splitting the same
    connection in two genomes gives the same IDs.
    """
    candidates = [conn for conn in genome.connections if conn.enabled and not conn.recurrent]
    if not candidates:
        logger.debug("add_node: no enabled connection to split")
        return False
    split_conn = candidates[rng.integers(len(candidates))]

    new_node_id, innov1, innov2 = genome.registry.split_ids(split_conn.innovation,
                                                            split_conn.node_in,
                                                            split_conn.node_out,
                                                            taken=genome.node_genes)
    if new_node_id in genome.conn_genes or genome.holds_identity(innov1) or genome.holds_identity(innov2):
        # Only possible with identities imported from another run
        logger.debug("add_node: cached split identities of connection %d are in use, drawing fresh ones",
                     split_conn.innovation)
        new_node_id = genome.registry.next()
        innov1      = genome.registry.next()
        innov2      = genome.registry.next()

    config = genome.config
    activation_name = config.activation_initial
    if activation_name == 'random':
        activation_name = config.activation_options[rng.integers(len(config.activation_options))]
    genome.node_genes[new_node_id] = NodeGene(new_node_id, NodeType.HIDDEN, activation_name)

    genome.conn_genes[innov1] = ConnectionGene(split_conn.node_in, new_node_id,
                                               genome.new_weight_bits(rng), innov1,
                                               config.weight_scale)
    genome.conn_genes[innov2] = ConnectionGene(new_node_id, split_conn.node_out,
                                               genome.new_weight_bits(rng), innov2,
                                               config.weight_scale)

    if config.split_policy == 'disable':
        split_conn.enabled = False
    else:
        genome._delete_connection(split_conn.innovation)
    return True

def remove_node(genome: 'Genome', rng: np.random.Generator) -> bool:
    """
    Delete a randomly chosen hidden node together with all its connections.
    Input and output nodes are never removed.
    """
    hidden_nodes = genome.hidden_nodes
    if not hidden_nodes:
        logger.debug("remove_node: no hidden node")
        return False

    node_to_delete = hidden_nodes[rng.integers(len(hidden_nodes))]
    genome._delete_node(node_to_delete.id)
    return True

def add_connection(genome: 'Genome', rng: np.random.Generator) -> bool:
    """
    Add a new connection between two existing nodes.

    The pair of nodes is chosen uniformly at random among all pairs that can be
    connected without breaking the genome invariants (see 'Genome.can_connect').
    The new connection gets a freshly sampled weight and an innovation number
    from the registry.
    """
    candidates = _connectable_pairs(genome)
    if not candidates:
        logger.debug("add_connection: no pair of nodes left to connect")
        return False

    node_in, node_out = candidates[rng.integers(len(candidates))]
    genome.add_connection(node_in, node_out, genome.new_weight_bits(rng))
    return True

def add_connection_between(genome  : 'Genome',
                           node_in : int,
                           node_out: int,
                           rng     : np.random.Generator) -> bool:
    """
    Add a new connection node_in -> node_out with a freshly sampled weight.
    A no-op if the connection exists already or would break the genome invariants.
    """
    if genome.add_connection(node_in, node_out, rng=rng) is None:
        logger.debug("add_connection: cannot connect %d=>%d", node_in, node_out)
        return False
    return True

def remove_connection(genome: 'Genome', rng: np.random.Generator) -> bool:
    """
    Delete a randomly chosen non-recurrent connection (either enabled or disabled).
    The nodes at its ends are kept.
    """
    connections = [conn for conn in genome.connections if not conn.recurrent]
    if not connections:
        logger.debug("remove_connection: no connection")
        return False

    connection_to_delete = connections[rng.integers(len(connections))]
    genome._delete_connection(connection_to_delete.innovation)
    return True

def add_recurrent_connection(genome: 'Genome', rng: np.random.Generator) -> bool:
    """
    Add a new recurrent connection between two existing nodes.

    Any node may be the start, any hidden or output node the end (the same
    node included), as long as the pair is not connected yet. The connection
    gets a freshly sampled weight and an innovation number from the registry.
    """
    candidates = _recurrent_connectable_pairs(genome)
    if not candidates:
        logger.debug("add_recurrent_connection: no pair of nodes left to connect")
        return False

    node_in, node_out = candidates[rng.integers(len(candidates))]
    genome.add_connection(node_in, node_out, genome.new_weight_bits(rng), recurrent=True)
    return True

def remove_recurrent_connection(genome: 'Genome', rng: np.random.Generator) -> bool:
    """
    Delete a randomly chosen recurrent connection.
    """
    connections = genome.recurrent_connections
    if not connections:
        logger.debug("remove_recurrent_connection: no recurrent connection")
        return False

    connection_to_delete = connections[rng.integers(len(connections))]
    genome._delete_connection(connection_to_delete.innovation)
    return True

def mutate_weight(genome      : 'Genome',
                  rng         : np.random.Generator,
                  per_bit_rate: float | None = None,
                  mutate_all  : bool  | None = None) -> bool:
    """
    Apply per-bit point mutation to the weight pattern of the connections.

    Parameters:
        genome:       the genome to mutate
        rng:          random source
        per_bit_rate: flip probability of each bit ('weight_bit_flip_rate' if None)
        mutate_all:   mutate every connection, or a single random one
                      ('weight_mutate_all' if None)

    Returns:
        whether the genome has at least one connection
    """
    if per_bit_rate is None:
        per_bit_rate = genome.config.weight_bit_flip_rate
    if mutate_all is None:
        mutate_all = genome.config.weight_mutate_all

    connections = genome.connections
    if not connections:
        logger.debug("mutate_weight: no connection")
        return False

    if not mutate_all:
        connections = [connections[rng.integers(len(connections))]]
    for conn in connections:
        conn.mutate_weight(per_bit_rate, rng)
    return True

def duplicate_weight(genome          : 'Genome',
                     rng             : np.random.Generator,
                     duplication_rate: float | None = None) -> bool:
    """
    Raise the resolution of the weight patterns.

    Every connection's pattern is extended with probability 'duplication_rate'
    ('resolution_duplication_rate' if None), as long as it stays within
    'max_resolution'. The decoded weight is preserved as closely as possible.

    Returns:
        whether any pattern was extended
    """
    config = genome.config
    if duplication_rate is None:
        duplication_rate = config.resolution_duplication_rate

    changed = False
    for conn in genome.connections:
        changed |= conn.mutate_resolution(duplication_rate, config.max_resolution,
                                          config.resolution_growth, rng)
    return changed

def change_activation(genome: 'Genome', rng: np.random.Generator) -> bool:
    """
    Give a randomly chosen hidden or output node a different activation
    function from 'activation_options'.
    """
    candidates = genome.hidden_nodes + genome.output_nodes
    if not candidates:
        logger.debug("change_activation: no hidden or output node")
        return False

    node = candidates[rng.integers(len(candidates))]
    if not node.mutate_activation(genome.config.activation_options, rng):
        logger.debug("change_activation: no alternative activation for node %d", node.id)
        return False
    return True

class Mutation(Enum):
    """
    The closed family of mutation operators.
    """
    ADD_NODE                    = "add_node"
    REMOVE_NODE                 = "remove_node"
    ADD_CONNECTION              = "add_connection"
    REMOVE_CONNECTION           = "remove_connection"
    ADD_RECURRENT_CONNECTION    = "add_recurrent_connection"
    REMOVE_RECURRENT_CONNECTION = "remove_recurrent_connection"
    MUTATE_WEIGHT               = "mutate_weight"
    DUPLICATE_WEIGHT            = "duplicate_weight"
    CHANGE_ACTIVATION           = "change_activation"

    def apply(self, genome: 'Genome', rng: np.random.Generator) -> bool:
        """
        Apply this operator to 'genome' (with configured rates).

        Returns:
            whether the genome changed
        """
        return _OPERATORS[self](genome, rng)

_OPERATORS = {
    Mutation.ADD_NODE                   : add_node,
    Mutation.REMOVE_NODE                : remove_node,
    Mutation.ADD_CONNECTION             : add_connection,
    Mutation.REMOVE_CONNECTION          : remove_connection,
    Mutation.ADD_RECURRENT_CONNECTION   : add_recurrent_connection,
    Mutation.REMOVE_RECURRENT_CONNECTION: remove_recurrent_connection,
    Mutation.MUTATE_WEIGHT              : mutate_weight,
    Mutation.DUPLICATE_WEIGHT           : duplicate_weight,
    Mutation.CHANGE_ACTIVATION          : change_activation,
}

def mutate(genome: 'Genome', rng: np.random.Generator) -> None:
    """
    Apply to the genome all possible mutation operations.

    Structural mutations (add/remove a node, add/remove a connection, add/remove
    a recurrent connection) happen with their configured probabilities; if
    'single_structural_mutation' is set,
    at most one of them is applied, chosen in proportion to these probabilities.
    Then weight mutation happens with probability 'weight_mutate_probability',
    resolution duplication is attempted, and an activation function changes
    with probability 'activation_mutate_probability'.
    """
    config = genome.config
    structural = [(Mutation.ADD_NODE,                    config.node_add_probability),
                  (Mutation.REMOVE_NODE,                 config.node_delete_probability),
                  (Mutation.ADD_CONNECTION,              config.connection_add_probability),
                  (Mutation.REMOVE_CONNECTION,           config.connection_delete_probability),
                  (Mutation.ADD_RECURRENT_CONNECTION,    config.recurrent_connection_add_probability),
                  (Mutation.REMOVE_RECURRENT_CONNECTION, config.recurrent_connection_delete_probability)]

    # Case #1: only one structural mutation is allowed at a time
    if config.single_structural_mutation:
        normalizer = sum(prob for _, prob in structural)
        if normalizer > 0:
            r = rng.random() * normalizer
            cumulative = 0.0
            for mutation, prob in structural:
                cumulative += prob
                if r < cumulative:
                    mutation.apply(genome, rng)
                    break

    # Case #2: multiple structural mutations are allowed at a time
    else:
        selected = [mutation for mutation, prob in structural if rng.random() < prob]
        for mutation in selected:
            mutation.apply(genome, rng)

    if rng.random() < config.weight_mutate_probability:
        mutate_weight(genome, rng)

    if config.resolution_duplication_rate > 0:
        duplicate_weight(genome, rng)

    if rng.random() < config.activation_mutate_probability:
        change_activation(genome, rng)

def _connectable_pairs(genome: 'Genome') -> list[tuple[int, int]]:
    """
    Enumerate, in ID order, every pair of nodes that 'Genome.can_connect' accepts.
    """
    config    = genome.config
    connected = genome.connected_pairs()
    node_ids  = sorted(genome.node_genes)
    allow_self_loops = config.allow_self_loops and not config.feed_forward

    pairs = []
    for node_in in node_ids:
        if config.feed_forward and genome.node_genes[node_in].type == NodeType.OUTPUT:
            continue

        # In feed-forward mode, node_in -> node_out closes a cycle
        # iff node_out already reaches node_in
        ancestors = genome._ancestors(node_in) if config.feed_forward else set()

        for node_out in node_ids:
            if genome.node_genes[node_out].type == NodeType.INPUT:
                continue
            if node_in == node_out and not allow_self_loops:
                continue
            if (node_in, node_out) in connected:
                continue
            if node_out in ancestors:
                continue
            pairs.append((node_in, node_out))
    return pairs

def _recurrent_connectable_pairs(genome: 'Genome') -> list[tuple[int, int]]:
    """
    Enumerate, in ID order, every pair of nodes that 'Genome.can_connect' accepts
    for a recurrent connection.
    """
    connected = genome.connected_pairs()
    node_ids  = sorted(genome.node_genes)
    return [(node_in, node_out)
            for node_in in node_ids
            for node_out in node_ids
            if genome.node_genes[node_out].type != NodeType.INPUT
            and (node_in, node_out) not in connected]
