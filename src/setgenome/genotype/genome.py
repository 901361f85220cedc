"""
Genome Module

This module implements the Genome class, the set-encoded representation of the
topology and weights of one neural network.

Classes:
    Genome: Node genes and connection genes, keyed by identity
"""

import copy
import json
import logging
import math
import numpy as np

from setgenome.run.config                  import Config
from setgenome.genotype                    import weight_codec
from setgenome.genotype.connection_gene    import ConnectionGene
from setgenome.genotype.identity_registry  import IdentityRegistry
from setgenome.genotype.node_gene          import NodeType, NodeGene
from setgenome.genotype.weight_codec       import WeightBits

logger = logging.getLogger(__name__)

class Genome:
    """
    A genome representing a neural network as two sets of genes.

    - Node genes: describe network nodes (input, hidden, output)
    - Connection genes: describe directed, weighted connections between nodes

    Both sets are dictionaries keyed by the identity of their genes; identities are
    issued by the IdentityRegistry shared by all genomes of a run, and are the only
    basis on which genes of different genomes are matched.

    A newly created genome contains only input and output nodes and no connections.
    These input and output nodes stay part of the genome for its whole lifetime;
    hidden nodes and connections come and go through mutation.

    Invariants, holding after every mutation and crossover:
        1. every connection starts and ends at a node of the genome
        2. no two connections share the same (node_in, node_out) pair
        3. every input and output node present at creation is still present
        4. no connection ends at an input node, no node connects to itself unless
           self-loops are allowed, and in feed-forward mode the connections
           (enabled or not) form an acyclic graph

    Recurrent connections are the exception to invariant 4: they may start at
    any node, including an output node or their own end, and are left out of
    the acyclicity check. They still count for invariant 2.

    Attributes:
        node_genes: Dictionary mapping node IDs to NodeGene objects
        conn_genes: Dictionary mapping innovation numbers to ConnectionGene objects

    Public Properties:
        config:       Configuration parameters
        registry:     The IdentityRegistry issuing identities for this genome
        input_nodes:  List of all input node genes
        output_nodes: List of all output node genes
        hidden_nodes: List of all hidden node genes
        connections:  List of all connection genes, sorted by innovation number
        recurrent_connections: List of the recurrent connection genes

    Public Methods:
        new(num_inputs, num_outputs, config, registry): Factory for a minimal genome
        initialize(rng):                                Connect a fraction of the inputs to all outputs
        weights():                                      Decoded weight of every connection
        can_connect(node_in, node_out, recurrent):      Whether a new connection would keep all invariants
        check_invariants() / validate():                Verify the invariants
        mutate(rng):                                    Apply all mutations, each with its configured probability
        crossover(other, rng, ...):                     Recombine with another genome
        distance(other):                                Compatibility distance to another genome
        copy():                                         Independent copy sharing config and registry
        to_dict() / from_dict(...):                     Structured representation
        to_json() / from_json(...):                     JSON representation
    """

    def __init__(self, config: Config, registry: IdentityRegistry | None = None):
        """
        Initialize a minimal Genome.

        A minimal genome describes the smallest possible network: only input and
        output nodes (their number is retrieved from the Config object), and no
        connections. The IDs of the input and output nodes are drawn from the registry.

        Parameters:
            config:   Stores configuration parameters
            registry: Issues identities; if None, a private registry starting
                      at 0 is created. Genomes built on private registries reuse
                      the same identities for unrelated genes and must not be
                      recombined with each other.

        Raises:
            ValueError: if the configuration is invalid
        """
        config.validate()

        self._config  : Config           = config
        self._registry: IdentityRegistry = registry if registry is not None else \
                                           IdentityRegistry(config.reuse_innovations)

        self.node_genes: dict[int, NodeGene]       = {}  # node ID => node gene
        self.conn_genes: dict[int, ConnectionGene] = {}  # innovation number => connection gene

        for _ in range(config.num_inputs):
            node = NodeGene(self._registry.next(), NodeType.INPUT)
            self.node_genes[node.id] = node

        for _ in range(config.num_outputs):
            node = NodeGene(self._registry.next(), NodeType.OUTPUT, config.output_activation)
            self.node_genes[node.id] = node

        self._fixed_node_ids: frozenset[int] = frozenset(self.node_genes)

    @classmethod
    def new(cls,
            num_inputs : int,
            num_outputs: int,
            config     : Config           | None = None,
            registry   : IdentityRegistry | None = None) -> 'Genome':
        """
        Create a minimal genome with the given number of input and output nodes.

        Parameters:
            num_inputs:  Number of input nodes
            num_outputs: Number of output nodes
            config:      Configuration parameters (defaults if None); the node
                         counts it holds are overridden by the arguments
            registry:    Issues identities; pass the run's registry so that
                         genomes can be aligned with each other. If None, a
                         private registry starting at 0 is used, so two genomes
                         created this way get the same input/output IDs although
                         they belong to no common run.

        Returns:
            The new genome
        """
        config = copy.copy(config) if config is not None else Config()
        config.num_inputs  = num_inputs
        config.num_outputs = num_outputs
        return cls(config, registry)

    @classmethod
    def _empty(cls, template: 'Genome') -> 'Genome':
        """
        Create a genome without any genes, sharing config, registry and the
        IDs of its fixed nodes with 'template'.
        """
        genome = cls.__new__(cls)
        genome._config         = template._config
        genome._registry       = template._registry
        genome._fixed_node_ids = template._fixed_node_ids
        genome.node_genes      = {}
        genome.conn_genes      = {}
        return genome

    @property
    def config(self) -> Config:
        return self._config

    @property
    def registry(self) -> IdentityRegistry:
        return self._registry

    @property
    def fixed_node_ids(self) -> frozenset[int]:
        """IDs of the input and output nodes this genome was created with."""
        return self._fixed_node_ids

    @property
    def input_nodes(self) -> list[NodeGene]:
        return sorted(node for node in self.node_genes.values() if node.type == NodeType.INPUT)

    @property
    def output_nodes(self) -> list[NodeGene]:
        return sorted(node for node in self.node_genes.values() if node.type == NodeType.OUTPUT)

    @property
    def hidden_nodes(self) -> list[NodeGene]:
        return sorted(node for node in self.node_genes.values() if node.type == NodeType.HIDDEN)

    @property
    def connections(self) -> list[ConnectionGene]:
        return sorted(self.conn_genes.values())

    @property
    def recurrent_connections(self) -> list[ConnectionGene]:
        return sorted(conn for conn in self.conn_genes.values() if conn.recurrent)

    def weights(self) -> dict[int, float]:
        """
        Decoded (and scaled) weight of every connection, keyed by innovation number.
        """
        return {innov: conn.weight for innov, conn in sorted(self.conn_genes.items())}

    def __len__(self):
        return len(self.conn_genes)

    def initialize(self, rng: np.random.Generator) -> None:
        """
        Connect a randomly chosen subset of the input nodes to every output node.

        The number of connected inputs is ceil(initial_cxn_fraction * num_inputs).
        Connections that already exist are left alone.

        Parameters:
            rng: random source
        """
        inputs = self.input_nodes
        num_connected = math.ceil(self._config.initial_cxn_fraction * len(inputs))
        if num_connected == 0:
            return

        chosen = sorted(rng.choice(len(inputs), size=num_connected, replace=False))
        for index in chosen:
            for output in self.output_nodes:
                self.add_connection(inputs[index].id, output.id, self.new_weight_bits(rng))

    def new_weight_bits(self, rng: np.random.Generator) -> WeightBits:
        """
        Sample a weight for a new connection from the configured normal
        distribution and encode it at the configured resolution.
        """
        value = rng.normal(self._config.weight_init_mean, self._config.weight_init_stdev)
        return weight_codec.encode(value, self._config.bits_per_weight, rng)

    def connected_pairs(self) -> set[tuple[int, int]]:
        return {conn.endpoints for conn in self.conn_genes.values()}

    def holds_identity(self, identity: int) -> bool:
        """Whether a node gene or a connection gene of this genome carries 'identity'."""
        return identity in self.node_genes or identity in self.conn_genes

    def can_connect(self, node_in: int, node_out: int, recurrent: bool = False) -> bool:
        """
        Check whether a new connection node_in -> node_out would keep all invariants.

        A connection cannot be added:
         + if either end is not a node of this genome
         + ending at an INPUT node
         + between two nodes already connected by a direct connection (of either kind)
         + starting at an OUTPUT node, in feed-forward mode
         + from a node to itself, unless self-loops are allowed (never in feed-forward mode)
         + which would create a cycle, in feed-forward mode
        The last three rules do not apply to recurrent connections.

        Parameters:
            node_in:   proposed start of the new connection
            node_out:  proposed end   of the new connection
            recurrent: whether the new connection is a recurrent one

        Returns:
            whether the connection can be added
        """
        if node_in not in self.node_genes or node_out not in self.node_genes:
            return False
        if self.node_genes[node_out].type == NodeType.INPUT:
            return False
        if (node_in, node_out) in self.connected_pairs():
            return False
        if recurrent:
            return True
        if node_in == node_out and not self._self_loops_allowed():
            return False
        if self._config.feed_forward:
            if self.node_genes[node_in].type == NodeType.OUTPUT:
                return False
            # Carry out expensive check last
            if self._would_create_cycle(node_in, node_out):
                return False
        return True

    def add_connection(self,
                       node_in  : int,
                       node_out : int,
                       bits     : WeightBits | None = None,
                       rng      : np.random.Generator | None = None,
                       recurrent: bool = False) -> ConnectionGene | None:
        """
        Add a connection node_in -> node_out, if all invariants allow it.

        The innovation number is obtained from the registry. If 'bits' is None,
        a weight is sampled using 'rng'.

        Returns:
            the new connection gene, or None if the connection cannot be added
        """
        if not self.can_connect(node_in, node_out, recurrent):
            return None
        if bits is None:
            if rng is None:
                raise ValueError("Either a weight bit pattern or a random source is required")
            bits = self.new_weight_bits(rng)

        innovation = self._registry.connection_id(node_in, node_out, recurrent)
        if self.holds_identity(innovation):
            # The pair-keyed identity is held by another gene of this genome
            logger.debug("Identity %d already in use, drawing a fresh one for %d=>%d",
                         innovation, node_in, node_out)
            innovation = self._registry.next()

        conn = ConnectionGene(node_in, node_out, bits, innovation, self._config.weight_scale,
                              recurrent=recurrent)
        self.conn_genes[innovation] = conn
        return conn

    def check_invariants(self) -> list[str]:
        """
        Verify all genome invariants.

        Returns:
            A description of every violated invariant (empty if the genome is valid)
        """
        problems = []

        for node_id, node in self.node_genes.items():
            if node.id != node_id:
                problems.append(f"node gene {node.id} is stored under ID {node_id}")

        for node_id in sorted(self._fixed_node_ids):
            if node_id not in self.node_genes:
                problems.append(f"fixed node {node_id} is missing")
            elif self.node_genes[node_id].type == NodeType.HIDDEN:
                problems.append(f"fixed node {node_id} became a hidden node")

        for node in self.node_genes.values():
            if node.type != NodeType.HIDDEN and node.id not in self._fixed_node_ids:
                problems.append(f"{node.type.name.lower()} node {node.id} was not present at creation")

        seen_pairs = set()
        for innov, conn in sorted(self.conn_genes.items()):
            if conn.innovation != innov:
                problems.append(f"connection gene {conn.innovation} is stored under innovation {innov}")
            if innov in self.node_genes:
                problems.append(f"identity {innov} is used by a node and a connection")

            if conn.node_in not in self.node_genes:
                problems.append(f"connection {innov} starts at missing node {conn.node_in}")
            if conn.node_out not in self.node_genes:
                problems.append(f"connection {innov} ends at missing node {conn.node_out}")
            elif self.node_genes[conn.node_out].type == NodeType.INPUT:
                problems.append(f"connection {innov} ends at input node {conn.node_out}")
            if conn.node_in == conn.node_out and not conn.recurrent and not self._self_loops_allowed():
                problems.append(f"connection {innov} is a self-loop")

            if conn.endpoints in seen_pairs:
                problems.append(f"connection {innov} duplicates the pair {conn.node_in}=>{conn.node_out}")
            seen_pairs.add(conn.endpoints)

        if self._config.feed_forward and self._has_cycle():
            problems.append("connections form a cycle in feed-forward mode")

        return problems

    def validate(self) -> None:
        """
        Raises:
            ValueError: listing every violated invariant
        """
        problems = self.check_invariants()
        if problems:
            raise ValueError("Invalid genome: " + "; ".join(problems))

    def mutate(self, rng: np.random.Generator) -> None:
        """
        Apply to the current genome all possible mutation operations,
        each with its configured probability.
        """
        from setgenome.genotype import mutations
        mutations.mutate(self, rng)

    def crossover(self,
                  other        : 'Genome',
                  rng          : np.random.Generator,
                  policy       = None,
                  fitter_parent: 'Genome | None' = None) -> 'Genome':
        """
        Recombine this genome with 'other' into a new offspring genome.
        See 'setgenome.genotype.crossover.crossover'.
        """
        from setgenome.genotype.crossover import crossover
        return crossover(self, other, rng, policy, fitter_parent)

    def distance(self, other: 'Genome') -> float:
        """
        Calculate the compatibility distance between this genome and another.

        The distance is a weighted average of three components, each in [0, 1]:
           distance = (c_g * D / (M + D) + c_w * W + c_a * A) / (c_g + c_w + c_a)

        Where:
        - M = number of matching connection genes
        - D = number of connection genes present in only one of the genomes
        - W = average absolute difference of the decoded weights of matching
              connection genes, divided by 2 (the largest possible difference)
        - A = fraction of matching hidden nodes whose activation functions differ
        - c_g, c_w, c_a = weight of the various terms (from configuration file)

        Parameters:
            other: the genome relative to which we are calculating the distance

        Returns:
            the compatibility distance between this genome and 'other'
        """
        c_g = self._config.distance_genes_coeff
        c_w = self._config.distance_weights_coeff
        c_a = self._config.distance_activations_coeff
        if c_g + c_w + c_a == 0:
            return 0.0

        innovs1 = set(self.conn_genes.keys())
        innovs2 = set(other.conn_genes.keys())
        matching_innovs     = innovs1 & innovs2
        non_matching_innovs = innovs1 ^ innovs2

        genes_diff = 0.0
        if matching_innovs or non_matching_innovs:
            genes_diff = len(non_matching_innovs) / (len(matching_innovs) + len(non_matching_innovs))

        weights_diff = 0.0
        if matching_innovs:
            weights_diff = sum(abs(weight_codec.decode(self.conn_genes[i].bits) -
                                   weight_codec.decode(other.conn_genes[i].bits))
                               for i in matching_innovs)
            weights_diff /= 2.0 * len(matching_innovs)

        activations_diff = 0.0
        matching_hidden = {n.id for n in self.hidden_nodes} & {n.id for n in other.hidden_nodes}
        if matching_hidden:
            activations_diff = sum(self.node_genes[i].activation_name != other.node_genes[i].activation_name
                                   for i in matching_hidden) / len(matching_hidden)

        return (c_g * genes_diff + c_w * weights_diff + c_a * activations_diff) / (c_g + c_w + c_a)

    def copy(self) -> 'Genome':
        """
        Create an independent copy of this genome.
        Config and registry are shared, genes are copied.
        """
        genome = Genome._empty(self)
        genome.node_genes = {nid: node.copy() for nid, node in self.node_genes.items()}
        genome.conn_genes = {innov: conn.copy() for innov, conn in self.conn_genes.items()}
        return genome

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    @classmethod
    def from_dict(cls,
                  genome_dict: dict,
                  config     : Config           | None = None,
                  registry   : IdentityRegistry | None = None) -> 'Genome':
        """
        Create a Genome from a dictionary description (see 'to_dict' for the format).

        The structure is validated while it is being built: every connection must
        keep all genome invariants. Only once the whole genome is accepted is the
        registry advanced past every identity found in the dictionary, so that it
        never issues them again; a rejected dictionary leaves the registry untouched.

        Parameters:
            genome_dict: Dictionary describing the genome structure
            config:      Configuration parameters (defaults if None); the number of
                         inputs and outputs is taken from the dictionary
            registry:    The run's registry; if None, a private one is created, whose
                         identities are unrelated to those of any other genome

        Returns:
            A new Genome object with the specified structure

        Raises:
            ValueError: If the structure is invalid (duplicate IDs, dangling endpoints, cycles, etc.)
            KeyError:   If required fields are missing from the dictionary
        """
        nodes_data   = genome_dict["nodes"]
        input_nodes  = [n for n in nodes_data if n["type"] == "input"]
        output_nodes = [n for n in nodes_data if n["type"] == "output"]
        hidden_nodes = [n for n in nodes_data if n["type"] == "hidden"]
        if len(input_nodes) + len(output_nodes) + len(hidden_nodes) != len(nodes_data):
            raise ValueError("Node types must be one of 'input', 'hidden', 'output'")

        config = copy.copy(config) if config is not None else Config()
        config.num_inputs  = len(input_nodes)
        config.num_outputs = len(output_nodes)
        config.validate()

        if registry is None:
            registry = IdentityRegistry(config.reuse_innovations)

        genome = cls.__new__(cls)
        genome._config    = config
        genome._registry  = registry
        genome.node_genes = {}
        genome.conn_genes = {}

        for node_data in input_nodes + output_nodes + hidden_nodes:
            ID = node_data["id"]
            if ID in genome.node_genes:
                raise ValueError(f"Duplicate node ID {ID} in node list")
            node_type = NodeType[node_data["type"].upper()]
            genome.node_genes[ID] = NodeGene(ID, node_type, node_data.get("activation"))

        genome._fixed_node_ids = frozenset(n["id"] for n in input_nodes + output_nodes)

        for conn_data in genome_dict.get("connections", []):
            innovation = conn_data["innovation"]
            node_in    = conn_data["from"]
            node_out   = conn_data["to"]
            recurrent  = conn_data.get("recurrent", False)
            bits       = WeightBits.from_string(conn_data["bits"])

            if genome.holds_identity(innovation):
                raise ValueError(f"Duplicate identity {innovation} in connection list")
            if not genome.can_connect(node_in, node_out, recurrent):
                raise ValueError(f"Connection {innovation} from {node_in} to {node_out} violates "
                                 f"the genome invariants (missing node, duplicate, self-loop or cycle)")

            genome.conn_genes[innovation] = ConnectionGene(node_in, node_out, bits, innovation,
                                                           config.weight_scale,
                                                           enabled=conn_data.get("enabled", True),
                                                           recurrent=recurrent)

        registry.register_connections((conn.node_in, conn.node_out, conn.innovation, conn.recurrent)
                                      for conn in genome.connections)
        if genome.node_genes:
            registry.reserve(max(genome.node_genes))

        return genome

    def to_dict(self) -> dict:
        """
        Convert the genome to a dictionary representation.

        This is the inverse operation of from_dict(). Weights are stored as their
        raw bit pattern, so the round trip preserves them exactly, resolution included.

        Returns:
            Dictionary with the following structure:
            {
                "nodes": [
                    {"id": 0, "type": "input"},
                    {"id": 1, "type": "output", "activation": "tanh"},
                    {"id": 7, "type": "hidden", "activation": "relu"}
                ],
                "connections": [
                    {"innovation": 5, "from": 0, "to": 7, "bits": "0110...", "enabled": true, "recurrent": false},
                    {"innovation": 8, "from": 7, "to": 1, "bits": "1100...", "enabled": true, "recurrent": false}
                ]
            }
            A missing "recurrent" entry reads as false in from_dict().
        """
        nodes = []
        for node in self.input_nodes:
            nodes.append({"id": node.id, "type": "input"})
        for node in self.output_nodes + self.hidden_nodes:
            nodes.append({
                "id"        : node.id,
                "type"      : node.type.name.lower(),
                "activation": node.activation_name
            })

        connections = []
        for conn in self.connections:
            connections.append({
                "innovation": conn.innovation,
                "from"      : conn.node_in,
                "to"        : conn.node_out,
                "bits"      : conn.bits.to_string(),
                "enabled"   : conn.enabled,
                "recurrent" : conn.recurrent
            })

        return {
            "nodes"      : nodes,
            "connections": connections
        }

    def to_json(self, **kwargs) -> str:
        return json.dumps(self.to_dict(), **kwargs)

    @classmethod
    def from_json(cls,
                  text    : str,
                  config  : Config           | None = None,
                  registry: IdentityRegistry | None = None) -> 'Genome':
        return cls.from_dict(json.loads(text), config, registry)

    def _self_loops_allowed(self) -> bool:
        return self._config.allow_self_loops and not self._config.feed_forward

    def _delete_node(self, node_id: int) -> None:
        """
        Delete a node from the genome and remove all connections starting or ending at this node.

        Only hidden nodes can be deleted.
        Attempting to delete an input or output node will raise a ValueError.

        Parameters:
            node_id: ID of the node to delete

        Raises:
            ValueError: If the node is not a hidden node
            KeyError:   If the node ID does not exist in the genome
        """
        if node_id not in self.node_genes:
            raise KeyError(f"Node with ID {node_id} does not exist in the genome")
        node = self.node_genes[node_id]

        if node.type != NodeType.HIDDEN:
            raise ValueError(f"Cannot delete node {node_id}: only hidden nodes can be deleted (node type is {node.type.name})")

        # Remove all connections that involve this node
        connections_to_remove = [innov for innov, conn in self.conn_genes.items()
                                 if conn.node_in == node_id or conn.node_out == node_id]
        for innov in connections_to_remove:
            self._delete_connection(innov)

        del self.node_genes[node_id]

    def _delete_connection(self, innovation_number: int) -> None:
        """
        Delete a connection from the genome.

        Raises:
            KeyError: If the innovation number does not exist in the genome
        """
        if innovation_number not in self.conn_genes:
            raise KeyError(f"Connection with innovation number {innovation_number} does not exist in the genome")

        del self.conn_genes[innovation_number]

    def _forward_connections(self) -> list[ConnectionGene]:
        # Enabled and disabled alike; recurrent connections never close a cycle
        return [conn for conn in self.conn_genes.values() if not conn.recurrent]

    def _successors(self) -> dict[int, list[int]]:
        adjacency = {}
        for conn in self._forward_connections():
            adjacency.setdefault(conn.node_in, []).append(conn.node_out)
        return adjacency

    def _would_create_cycle(self, from_node: int, to_node: int) -> bool:
        """
        Check if adding a connection from_node -> to_node would create a cycle.
        Uses DFS to check if there's already a path from 'to_node' back to 'from_node'.
        Considers all non-recurrent connections (both enabled and disabled) to maintain DAG structure.

        Parameters:
            from_node: proposed start of the new connection
            to_node:   proposed end   of the new connections

        Returns:
            whether adding the new connection would create a cycle in the network
        """
        if from_node == to_node:
            return True

        # If we can reach 'from_node' starting at 'to_node', then adding a
        # connection 'from_node' -> 'to_node' would create a network cycle
        adjacency = self._successors()
        visited = set()
        stack = [to_node]

        while stack:
            current = stack.pop()
            if current == from_node:
                return True
            if current in visited:
                continue
            visited.add(current)
            stack.extend(adjacency.get(current, []))

        return False

    def _ancestors(self, node_id: int) -> set[int]:
        """
        All nodes from which 'node_id' can be reached through non-recurrent
        connections (including itself).
        """
        predecessors = {}
        for conn in self._forward_connections():
            predecessors.setdefault(conn.node_out, []).append(conn.node_in)

        reached = set()
        stack = [node_id]
        while stack:
            current = stack.pop()
            if current in reached:
                continue
            reached.add(current)
            stack.extend(predecessors.get(current, []))
        return reached

    def _has_cycle(self) -> bool:
        """
        Whether the non-recurrent connections (enabled and disabled) contain a directed cycle.
        Kahn's algorithm: the graph is acyclic iff every node can be sorted topologically.
        """
        in_degree = {node_id: 0 for node_id in self.node_genes}
        adjacency = self._successors()
        for conn in self._forward_connections():
            in_degree[conn.node_out] = in_degree.get(conn.node_out, 0) + 1
            in_degree.setdefault(conn.node_in, 0)

        ready = [node_id for node_id, degree in in_degree.items() if degree == 0]
        num_sorted = 0
        while ready:
            current = ready.pop()
            num_sorted += 1
            for successor in adjacency.get(current, []):
                in_degree[successor] -= 1
                if in_degree[successor] == 0:
                    ready.append(successor)

        return num_sorted != len(in_degree)

    def __str__(self):
        node_genes_str  = ''.join(str(node) for node in self.input_nodes)
        node_genes_str += ''.join(str(node) for node in self.hidden_nodes)
        node_genes_str += ''.join(str(node) for node in self.output_nodes)
        conn_genes_str  = ''.join(str(conn) for conn in self.connections)
        return f"Nodes: {node_genes_str}\nConns: {conn_genes_str}"

    @staticmethod
    def show_aligned(genome1: 'Genome', genome2: 'Genome') -> None:
        """
        Print two genomes aligning the node and connection genes by identity.
        """

        # Align nodes by ID
        node_ids_all = sorted(set(genome1.node_genes.keys()) | set(genome2.node_genes.keys()))
        node_str1 = ""
        node_str2 = ""
        padding   = ' ' * 10
        for node_id in node_ids_all:
            node_str1 += str(genome1.node_genes[node_id]) if node_id in genome1.node_genes else padding
            node_str2 += str(genome2.node_genes[node_id]) if node_id in genome2.node_genes else padding

        print(f"Nodes:\n{node_str1}\n{node_str2}\n")

        # Align connections by innovation number
        innovs_all = sorted(set(genome1.conn_genes.keys()) | set(genome2.conn_genes.keys()))
        conn_str1 = ""
        conn_str2 = ""
        padding   = ' ' * 19
        for innov in innovs_all:
            conn_str1 += str(genome1.conn_genes[innov]) if innov in genome1.conn_genes else padding
            conn_str2 += str(genome2.conn_genes[innov]) if innov in genome2.conn_genes else padding

        print(f"Connections:\n{conn_str1}\n{conn_str2}\n")
