"""
Connection Gene Module

This module implements the ConnectionGene class.

Classes:
    ConnectionGene: Gene encoding a weighted, directed connection between nodes
"""

import numpy as np

from setgenome.genotype import weight_codec
from setgenome.genotype.weight_codec import WeightBits

class ConnectionGene:
    """
    A gene describing a weighted connection between two nodes in a Neural Network.

    Each connection gene represents a directed edge in the neural network graph,
    connecting a source node to a destination node. Connection genes are uniquely
    identified by their innovation number, which serves as a historical marker
    enabling gene alignment during crossover. The innovation number and the two
    endpoints never change once the gene exists.

    The weight is held as a WeightBits pattern; 'weight' decodes it and applies
    the scale factor. Only the pattern (and the 'enabled' flag) may change.

    A recurrent connection feeds the previous activation of its source node
    forward; it is exempt from the acyclicity requirement of feed-forward genomes.

    Two connection genes are equal when their innovation numbers are equal; they
    sort by innovation number.

    Public Attributes:
        bits:    Bit pattern encoding the weight
        enabled: Whether this connection is active in the network

    Public Properties:
        innovation: Identity uniquely identifying this connection
        node_in:    ID of the source node
        node_out:   ID of the destination node
        recurrent:  Whether this is a recurrent connection
        weight:     Decoded weight, scaled by 'weight_scale'
        resolution: Length of the bit pattern in units of 64 bits

    Public Methods:
        mutate_weight(per_bit_rate, rng):                     Per-bit point mutation of the weight
        mutate_resolution(rate, max_resolution, growth, rng): Stochastically raise the resolution
        copy():                                               Independent copy of this gene
    """

    __slots__ = ('_innovation', '_node_in', '_node_out', 'bits', 'weight_scale', 'enabled', '_recurrent')

    def __init__(self,
                 node_in     : int,
                 node_out    : int,
                 bits        : WeightBits,
                 innovation  : int,
                 weight_scale: float = 1.0,
                 enabled     : bool  = True,
                 recurrent   : bool  = False):
        """
        Initialize a connection gene.

        Parameters:
            node_in:      ID of the source node
            node_out:     ID of the destination node
            bits:         Bit pattern encoding the weight
            innovation:   Number uniquely and globally identifying this connection
            weight_scale: Factor mapping the decoded pattern to the visible weight
            enabled:      Whether this connection is active in the network
            recurrent:    Whether this connection is a recurrent one
        """
        self._innovation: int        = innovation
        self._node_in   : int        = node_in
        self._node_out  : int        = node_out
        self.bits       : WeightBits = bits
        self.weight_scale: float     = weight_scale
        self.enabled    : bool       = enabled
        self._recurrent : bool       = recurrent

    @property
    def innovation(self) -> int:
        return self._innovation

    @property
    def node_in(self) -> int:
        return self._node_in

    @property
    def node_out(self) -> int:
        return self._node_out

    @property
    def recurrent(self) -> bool:
        return self._recurrent

    @property
    def endpoints(self) -> tuple[int, int]:
        return self._node_in, self._node_out

    @property
    def weight(self) -> float:
        return self.weight_scale * weight_codec.decode(self.bits)

    @property
    def resolution(self) -> float:
        return self.bits.resolution

    def mutate_weight(self, per_bit_rate: float, rng: np.random.Generator) -> None:
        """
        Flip each bit of the weight pattern with probability 'per_bit_rate'.
        """
        self.bits = weight_codec.mutate(self.bits, per_bit_rate, rng)

    def mutate_resolution(self,
                          duplication_rate: float,
                          max_resolution  : int,
                          growth          : str,
                          rng             : np.random.Generator) -> bool:
        """
        With probability 'duplication_rate', extend the weight pattern.

        The pattern is only extended if the result does not exceed 'max_resolution'.

        Returns:
            whether the pattern was extended
        """
        if rng.random() >= duplication_rate:
            return False

        grown_length = 2 * len(self.bits) if growth == 'double' else \
                       len(self.bits) + weight_codec.BITS_PER_RESOLUTION
        if grown_length > max_resolution * weight_codec.BITS_PER_RESOLUTION:
            return False

        self.bits = weight_codec.duplicate(self.bits, growth, rng)
        return True

    def copy(self) -> 'ConnectionGene':
        # WeightBits is immutable, so the pattern can be shared
        return ConnectionGene(self._node_in, self._node_out, self.bits,
                              self._innovation, self.weight_scale, self.enabled, self._recurrent)

    def __eq__(self, other):
        if not isinstance(other, ConnectionGene):
            return NotImplemented
        return self._innovation == other._innovation

    def __lt__(self, other):
        if not isinstance(other, ConnectionGene):
            return NotImplemented
        return self._innovation < other._innovation

    def __hash__(self):
        return hash(self._innovation)

    def __repr__(self):
        return (f"ConnectionGene(node_in={self._node_in:03d}, node_out={self._node_out:03d}, "
                f"weight={self.weight:+.6f}, bits={len(self.bits)}, enabled={self.enabled}, "
                f"recurrent={self._recurrent}, innovation={self._innovation:03d})")

    def __str__(self):
        s  = f"[{self._innovation:03d},{'E' if self.enabled else 'D'},"
        arrow = '~>' if self._recurrent else '=>'
        s += f"{self._node_in:02d}{arrow}{self._node_out:02d},{self.weight:+.02f}]"
        return s
