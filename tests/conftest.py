"""Pytest configuration and shared fixtures."""

import pytest
import sys
import numpy as np
from pathlib import Path

# Add the source directory to the Python path
src_dir = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_dir))


@pytest.fixture
def config():
    """Default configuration with 2 inputs and 1 output."""
    from setgenome.run.config import Config
    config = Config()
    config.num_inputs = 2
    config.num_outputs = 1
    return config


@pytest.fixture
def registry():
    """A fresh identity registry reusing innovations."""
    from setgenome.genotype.identity_registry import IdentityRegistry
    return IdentityRegistry()


@pytest.fixture
def rng():
    """Seeded random number generator."""
    return np.random.default_rng(42)


@pytest.fixture
def make_bits():
    """
    Build a deterministic bit pattern decoding as close as possible to 'value':
    the first bits are set, the rest are clear.
    """
    from setgenome.genotype.weight_codec import WeightBits

    def _make_bits(value: float, length: int = 64):
        num_ones = int(round(value * length / 2 + length / 2))
        return WeightBits([True] * num_ones + [False] * (length - num_ones))

    return _make_bits


@pytest.fixture
def build_genome(config, registry, make_bits):
    """
    Build a genome from a compact description.

    Inputs are nodes 0 and 1, the output is node 2 (matching the 'config' fixture).
    'hidden' lists hidden node IDs; 'connections' lists (innovation, from, to, value)
    tuples, where value is a float or a WeightBits pattern; 'recurrent' lists the
    innovations of the recurrent connections among them.
    """
    from setgenome.genotype.genome import Genome
    from setgenome.genotype.weight_codec import WeightBits

    def _build_genome(hidden=(), connections=(), genome_config=None, genome_registry=None, recurrent=()):
        nodes  = [{"id": 0, "type": "input"}, {"id": 1, "type": "input"}]
        nodes += [{"id": 2, "type": "output", "activation": "tanh"}]
        nodes += [{"id": h, "type": "hidden", "activation": "relu"} for h in hidden]
        conns  = []
        for innovation, node_in, node_out, value in connections:
            bits = value if isinstance(value, WeightBits) else make_bits(value)
            conns.append({"innovation": innovation, "from": node_in, "to": node_out,
                          "bits": bits.to_string(), "enabled": True,
                          "recurrent": innovation in recurrent})
        return Genome.from_dict({"nodes": nodes, "connections": conns},
                                genome_config if genome_config is not None else config,
                                genome_registry if genome_registry is not None else registry)

    return _build_genome
