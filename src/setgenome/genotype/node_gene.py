"""
Node Gene Module.

This module implements the NodeGene class and NodeType enumeration.

Classes:
    NodeType: Enumeration for node types (INPUT, HIDDEN, OUTPUT)
    NodeGene: Gene encoding a single network node
"""

import numpy as np
from enum   import Enum
from typing import Callable

from setgenome.activations import activations, activation_codes

class NodeType(Enum):
    """
    Nodes come in three types: input, hidden, output.
    """
    INPUT  = "I"
    HIDDEN = "H"
    OUTPUT = "O"

class NodeGene:
    """
    A gene describing a node in a Neural Network.

    Node genes are identified by an ID issued by the run's IdentityRegistry, which
    stays the same across structural mutations and crossover. The ID and the type
    of a node never change; input and output nodes are created together with their
    genome and live as long as it does, hidden nodes come and go with mutation.

    Two node genes are equal when their IDs are equal; they sort by ID.

    Public Attributes:
        id:              Unique identifier for this node
        type:            Type of node (INPUT, HIDDEN, or OUTPUT)
        activation_name: Name of the activation function (None for input nodes)

    Public Properties:
        activation_function: The activation function itself (None for input nodes)

    Public Methods:
        mutate_activation(options, rng): Switch to a different activation function
        copy():                          Independent copy of this gene
    """

    __slots__ = ('_id', '_type', 'activation_name')

    def __init__(self,
                 node_id        : int,
                 node_type      : NodeType,
                 activation_name: str | None = None):
        """
        Initialize a node gene.

        Parameters:
            node_id:         Unique identifier for this node
            node_type:       Type of node (INPUT, HIDDEN, or OUTPUT)
            activation_name: Name of the activation function (e.g., 'tanh', 'relu');
                             ignored for INPUT nodes, required for the others
        """
        if node_type == NodeType.INPUT:
            activation_name = None
        elif activation_name not in activations:
            raise ValueError(f"Invalid activation function '{activation_name}' for node {node_id}")

        self._id  : int      = node_id
        self._type: NodeType = node_type
        self.activation_name: str | None = activation_name

    @property
    def id(self) -> int:
        return self._id

    @property
    def type(self) -> NodeType:
        return self._type

    @property
    def activation_function(self) -> Callable | None:
        """
        Get the activation function for this node.

        Returns:
           The activation function for the node (None for INPUT nodes).
        """
        if self.activation_name is None:
            return None
        return activations[self.activation_name]

    def mutate_activation(self, options: list[str], rng: np.random.Generator) -> bool:
        """
        Replace the activation function by a different one chosen at random from 'options'.

        Parameters:
            options: names of the activation functions to choose from
            rng:     random source

        Returns:
            whether the activation function changed (never for INPUT nodes,
            or when 'options' offers no alternative)
        """
        if self._type == NodeType.INPUT:
            return False

        # Remove current activation to ensure we select a NEW activation
        available = [name for name in options if name != self.activation_name]
        if not available:
            return False

        self.activation_name = available[rng.integers(len(available))]
        return True

    def copy(self) -> 'NodeGene':
        return NodeGene(self._id, self._type, self.activation_name)

    def __eq__(self, other):
        if not isinstance(other, NodeGene):
            return NotImplemented
        return self._id == other._id

    def __lt__(self, other):
        if not isinstance(other, NodeGene):
            return NotImplemented
        return self._id < other._id

    def __hash__(self):
        return hash(self._id)

    def __repr__(self):
        return (f"NodeGene(node_id={self._id:03d}, node_type=NodeType.{self._type.name}, "
                f"activation_name={self.activation_name!r})")

    def __str__(self):
        if self._type == NodeType.INPUT:
            return f"[{self._type.value}{self._id}]"
        else:
            # Get the 3-letter activation code
            act_code = activation_codes.get(self.activation_name, "???")
            return f"[{self._type.value}{self._id},{act_code}]"
