"""
Weight Codec Module

This module implements the bit-pattern representation of connection weights.

A weight is not stored as a float but as a fixed-length sequence of bits. Its
real value is determined by the number of set bits only:

    w = (ones - mean) / mean,    mean = length / 2

so every pattern decodes to a value in [-1, 1], and the pattern length sets the
step between representable values (2 / length). Patterns are created with a
length of 64 * resolution bits; resolution may grow during evolution through
duplication.

Mutation flips every bit independently with a given rate. Note that as this rate
approaches 0.5 the number of set bits approaches a binomial distribution centred
on 'mean', i.e. the weight drifts towards 0 whatever its previous value was.
Low rates keep weight information across generations, high rates erode it.

Classes:
    WeightBits: Immutable bit pattern encoding a single weight

Functions:
    decode:    bit pattern -> real value in [-1, 1]
    encode:    real value  -> bit pattern of a given length
    mutate:    independent per-bit point mutation
    duplicate: extend a pattern, preserving its value as closely as possible
"""

import numpy as np

# Number of bits making up one unit of resolution
BITS_PER_RESOLUTION = 64

class WeightBits:
    """
    An immutable pattern of bits encoding a connection weight.

    Instances compare equal when their bits are equal (length included), so two
    patterns that decode to the same value are not necessarily equal.

    Public Properties:
        ones:       number of set bits
        value:      decoded value, in [-1, 1]
        resolution: length / 64 (may be fractional for hand-made patterns)
    """

    __slots__ = ('_bits',)

    def __init__(self, bits):
        """
        Parameters:
            bits: sequence of booleans (or 0/1 integers), at least one element
        """
        array = np.array(bits, dtype=bool).ravel()
        if array.size == 0:
            raise ValueError("A weight bit pattern needs at least one bit")
        array.flags.writeable = False
        self._bits = array

    @classmethod
    def zeros(cls, length: int) -> 'WeightBits':
        return cls(np.zeros(length, dtype=bool))

    @classmethod
    def from_string(cls, bit_string: str) -> 'WeightBits':
        """
        Build a pattern from a string of '0' and '1' characters.

        Raises:
            ValueError: if the string is empty or contains other characters
        """
        if not bit_string or set(bit_string) - {'0', '1'}:
            raise ValueError(f"Invalid weight bit string: {bit_string!r}")
        return cls(np.frombuffer(bit_string.encode('ascii'), dtype=np.uint8) == ord('1'))

    def to_string(self) -> str:
        return ''.join('1' if bit else '0' for bit in self._bits)

    @property
    def bits(self) -> np.ndarray:
        """Read-only view of the underlying boolean array."""
        return self._bits

    @property
    def ones(self) -> int:
        return int(np.count_nonzero(self._bits))

    @property
    def value(self) -> float:
        return decode(self)

    @property
    def resolution(self) -> float:
        return len(self) / BITS_PER_RESOLUTION

    def __len__(self):
        return self._bits.size

    def __eq__(self, other):
        if not isinstance(other, WeightBits):
            return NotImplemented
        return np.array_equal(self._bits, other._bits)

    def __hash__(self):
        return hash((len(self), self._bits.tobytes()))

    def __repr__(self):
        return f"WeightBits(length={len(self)}, ones={self.ones}, value={self.value:+.6f})"

def decode(pattern: WeightBits) -> float:
    """
    Decode a bit pattern to its real value, (ones - mean) / mean with mean = length / 2.

    Parameters:
        pattern: the bit pattern

    Returns:
        a value in [-1, 1]
    """
    mean = len(pattern) / 2.0
    return (pattern.ones - mean) / mean

def encode(value: float, length: int, rng: np.random.Generator) -> WeightBits:
    """
    Create a bit pattern of the given length whose decoded value is as close
    as possible to 'value'. Which bits are set is chosen at random.

    Values outside [-1, 1] are clipped. The decoded value of the result differs
    from 'value' by at most half a step (1 / length).

    Parameters:
        value:  the real value to encode
        length: number of bits of the pattern
        rng:    random source choosing the positions of the set bits

    Returns:
        the new bit pattern
    """
    if length < 1:
        raise ValueError(f"A weight bit pattern needs at least one bit, got length {length}")

    mean = length / 2.0
    num_ones = int(round(float(np.clip(value, -1.0, 1.0)) * mean + mean))
    num_ones = min(max(num_ones, 0), length)

    bits = np.zeros(length, dtype=bool)
    bits[rng.choice(length, size=num_ones, replace=False)] = True
    return WeightBits(bits)

def mutate(pattern: WeightBits, per_bit_rate: float, rng: np.random.Generator) -> WeightBits:
    """
    Flip every bit of the pattern independently with probability 'per_bit_rate'.

    Parameters:
        pattern:      the bit pattern to mutate
        per_bit_rate: probability of flipping each bit
        rng:          random source

    Returns:
        the mutated pattern ('pattern' itself if no bit flipped)
    """
    if per_bit_rate <= 0.0:
        return pattern

    flips = rng.random(len(pattern)) < per_bit_rate
    if not flips.any():
        return pattern
    return WeightBits(np.logical_xor(pattern.bits, flips))

def duplicate(pattern: WeightBits, growth: str, rng: np.random.Generator) -> WeightBits:
    """
    Extend a bit pattern to raise its resolution.

    Growth modes:
        "double"    - the pattern is appended to itself; the number of set bits
                      doubles with the length, so the decoded value is unchanged
        "increment" - one block of 64 bits is appended whose number of set bits
                      is proportional to that of the pattern; the decoded value
                      moves by less than one step of the new length

    Parameters:
        pattern: the bit pattern to extend
        growth:  "double" or "increment"
        rng:     random source choosing the set bits of an appended block

    Returns:
        the extended pattern
    """
    if growth == 'double':
        return WeightBits(np.concatenate([pattern.bits, pattern.bits]))

    if growth == 'increment':
        block_ones = int(round(pattern.ones * BITS_PER_RESOLUTION / len(pattern)))
        block = np.zeros(BITS_PER_RESOLUTION, dtype=bool)
        block[rng.choice(BITS_PER_RESOLUTION, size=block_ones, replace=False)] = True
        return WeightBits(np.concatenate([pattern.bits, block]))

    raise ValueError(f"Unknown resolution growth mode: {growth!r}")
