"""
Unit tests for the Genome class.

Tests cover:
- Creation of minimal genomes and their initialization
- The rules deciding whether two nodes can be connected
- Invariant checking
- Compatibility distance
- Copying
- Dictionary and JSON serialization
"""

import copy
import json
import pytest

from setgenome.genotype.genome            import Genome
from setgenome.genotype.identity_registry import IdentityRegistry
from setgenome.genotype.connection_gene   import ConnectionGene
from setgenome.genotype.node_gene         import NodeGene, NodeType
from setgenome.genotype.weight_codec      import WeightBits


# ============================================================================
# Test: creation
# ============================================================================

class TestGenomeInit:
    """Test creation of minimal genomes."""

    def test_minimal_genome(self, config, registry):
        """Test that a new genome holds only input and output nodes."""
        genome = Genome(config, registry)
        assert [n.id for n in genome.input_nodes]  == [0, 1]
        assert [n.id for n in genome.output_nodes] == [2]
        assert genome.hidden_nodes == []
        assert genome.connections == []
        assert len(genome) == 0
        assert genome.fixed_node_ids == frozenset({0, 1, 2})

    def test_output_activation(self, config, registry):
        """Test that output nodes use the configured activation."""
        config.output_activation = 'sigmoid'
        genome = Genome(config, registry)
        assert genome.output_nodes[0].activation_name == 'sigmoid'

    def test_ids_come_from_registry(self, config):
        """Test that genomes sharing a registry get distinct node IDs."""
        registry = IdentityRegistry(start=10)
        genome1  = Genome(config, registry)
        genome2  = Genome(config, registry)
        assert genome1.fixed_node_ids == frozenset({10, 11, 12})
        assert genome1.fixed_node_ids.isdisjoint(genome2.fixed_node_ids)

    def test_private_registry(self, config):
        """Test that a genome without registry gets its own."""
        genome = Genome(config)
        assert isinstance(genome.registry, IdentityRegistry)
        assert genome.fixed_node_ids == frozenset({0, 1, 2})

    def test_private_registries_overlap(self):
        """Test that genomes built without a shared registry reuse the same IDs."""
        genome1 = Genome.new(2, 1)
        genome2 = Genome.new(2, 1)
        assert genome1.registry is not genome2.registry
        assert genome1.fixed_node_ids == genome2.fixed_node_ids

    def test_new(self, registry):
        """Test the factory taking the node counts as arguments."""
        genome = Genome.new(3, 2, registry=registry)
        assert len(genome.input_nodes) == 3
        assert len(genome.output_nodes) == 2
        assert genome.config.num_inputs == 3

    def test_new_does_not_modify_config(self, config, registry):
        """Test that the factory works on a copy of the given config."""
        Genome.new(5, 4, config, registry)
        assert config.num_inputs == 2
        assert config.num_outputs == 1

    def test_invalid_config_raises(self, config):
        """Test that an invalid configuration is rejected."""
        config.num_inputs = 0
        with pytest.raises(ValueError, match="num_inputs"):
            Genome(config)


class TestGenomeInitialize:
    """Test the initial connections of a genome."""

    def test_full_connection(self, config, registry, rng):
        """Test that by default every input connects to every output."""
        genome = Genome.new(3, 2, config, registry)
        genome.initialize(rng)
        assert len(genome) == 6
        pairs = genome.connected_pairs()
        assert pairs == {(i.id, o.id) for i in genome.input_nodes for o in genome.output_nodes}
        assert genome.check_invariants() == []

    def test_partial_connection(self, config, registry, rng):
        """Test that a fraction of the inputs is connected."""
        config.initial_cxn_fraction = 0.5
        genome = Genome.new(4, 1, config, registry)
        genome.initialize(rng)
        assert len(genome) == 2

    def test_no_connection(self, config, registry, rng):
        """Test that a zero fraction leaves the genome unconnected."""
        config.initial_cxn_fraction = 0.0
        genome = Genome(config, registry)
        genome.initialize(rng)
        assert len(genome) == 0

    def test_weight_resolution(self, config, registry, rng):
        """Test that new weights have the configured resolution."""
        config.resolution = 2
        genome = Genome(config, registry)
        genome.initialize(rng)
        assert all(len(conn.bits) == 128 for conn in genome.connections)
        assert all(-1.0 <= w <= 1.0 for w in genome.weights().values())


# ============================================================================
# Test: can_connect / add_connection
# ============================================================================

class TestCanConnect:
    """Test the rules for adding connections."""

    def test_input_to_output(self, build_genome):
        """Test that an input can connect to an output."""
        genome = build_genome()
        assert genome.can_connect(0, 2)

    def test_missing_node(self, build_genome):
        """Test that both ends must exist."""
        genome = build_genome()
        assert not genome.can_connect(0, 99)
        assert not genome.can_connect(99, 2)

    def test_no_connection_into_input(self, build_genome):
        """Test that nothing ends at an input node."""
        genome = build_genome(hidden=[5])
        assert not genome.can_connect(5, 0)
        assert not genome.can_connect(1, 0)

    def test_no_duplicate_pair(self, build_genome):
        """Test that a connected pair cannot be connected again."""
        genome = build_genome(connections=[(10, 0, 2, 0.5)])
        assert not genome.can_connect(0, 2)

    def test_no_cycle_in_feed_forward_mode(self, build_genome):
        """Test that a connection closing a cycle is rejected."""
        genome = build_genome(hidden=[5, 6], connections=[(10, 5, 6, 0.5), (11, 6, 2, 0.5)])
        assert not genome.can_connect(6, 5)
        assert not genome.can_connect(2, 5)
        assert not genome.can_connect(5, 5)

    def test_disabled_connections_count_for_cycles(self, build_genome):
        """Test that disabled connections still take part in the cycle check."""
        genome = build_genome(hidden=[5, 6], connections=[(10, 5, 6, 0.5)])
        genome.conn_genes[10].enabled = False
        assert not genome.can_connect(6, 5)

    def test_recurrent_mode(self, config, build_genome):
        """Test that cycles are allowed when the genome is not feed-forward."""
        config.feed_forward = False
        genome = build_genome(hidden=[5, 6], connections=[(10, 5, 6, 0.5)])
        assert genome.can_connect(6, 5)
        assert genome.can_connect(2, 5)
        assert not genome.can_connect(5, 5)

    def test_self_loops(self, config, build_genome):
        """Test that self-loops need 'allow_self_loops' and recurrent mode."""
        config.allow_self_loops = True
        genome = build_genome(hidden=[5])
        assert not genome.can_connect(5, 5)

        config.feed_forward = False
        genome = build_genome(hidden=[5])
        assert genome.can_connect(5, 5)

    def test_recurrent_connections(self, build_genome):
        """Test that recurrent connections may close cycles in feed-forward mode."""
        genome = build_genome(hidden=[5, 6], connections=[(10, 5, 6, 0.5), (11, 6, 2, 0.5)])
        assert genome.can_connect(6, 5, recurrent=True)
        assert genome.can_connect(2, 5, recurrent=True)
        assert genome.can_connect(5, 5, recurrent=True)

    def test_recurrent_connections_keep_pairs_unique(self, build_genome):
        """Test that recurrent connections still obey the pair and input rules."""
        genome = build_genome(hidden=[5, 6], connections=[(10, 5, 6, 0.5)], recurrent=[10])
        assert not genome.can_connect(5, 6, recurrent=True)
        assert not genome.can_connect(5, 6)
        assert not genome.can_connect(5, 0, recurrent=True)
        assert not genome.can_connect(5, 99, recurrent=True)

    def test_recurrent_connections_ignored_by_cycle_check(self, build_genome):
        """Test that a recurrent connection does not block a feed-forward one."""
        genome = build_genome(hidden=[5, 6], connections=[(10, 6, 5, 0.5)], recurrent=[10])
        assert genome.can_connect(5, 6)


class TestAddConnection:
    """Test adding connections directly."""

    def test_add(self, build_genome, make_bits):
        """Test that a new connection gets its innovation from the registry."""
        genome = build_genome()
        conn = genome.add_connection(0, 2, make_bits(0.25))
        assert conn is not None
        assert conn.innovation == genome.registry.last
        assert genome.conn_genes[conn.innovation] is conn
        assert conn.weight == 0.25

    def test_add_rejected(self, build_genome, make_bits):
        """Test that an invalid connection is not added."""
        genome = build_genome(connections=[(10, 0, 2, 0.5)])
        assert genome.add_connection(0, 2, make_bits(0.25)) is None
        assert len(genome) == 1

    def test_samples_weight(self, build_genome, rng):
        """Test that a weight is sampled when no pattern is given."""
        genome = build_genome()
        conn = genome.add_connection(0, 2, rng=rng)
        assert len(conn.bits) == 64

    def test_needs_weight_or_rng(self, build_genome):
        """Test that either a pattern or a random source is required."""
        genome = build_genome()
        with pytest.raises(ValueError):
            genome.add_connection(0, 2)

    def test_same_pair_same_innovation(self, config, registry, make_bits):
        """Test that two genomes adding the same connection share its innovation."""
        genome1 = Genome(config, registry)
        genome2 = genome1.copy()
        conn1 = genome1.add_connection(0, 2, make_bits(0.1))
        conn2 = genome2.add_connection(0, 2, make_bits(0.9))
        assert conn1.innovation == conn2.innovation

    def test_add_recurrent(self, build_genome, make_bits):
        """Test that a recurrent connection from an output is added and valid."""
        genome = build_genome(hidden=[5], connections=[(10, 0, 5, 0.5), (11, 5, 2, 0.5)])
        conn = genome.add_connection(2, 5, make_bits(0.25), recurrent=True)
        assert conn is not None
        assert conn.recurrent
        assert genome.recurrent_connections == [conn]
        assert genome.check_invariants() == []

    def test_recurrent_and_forward_innovations_differ(self, config, registry, make_bits):
        """Test that the same pair gets different innovations as recurrent and feed-forward connection."""
        genome1 = Genome(config, registry)
        genome2 = genome1.copy()
        conn1 = genome1.add_connection(0, 2, make_bits(0.1))
        conn2 = genome2.add_connection(0, 2, make_bits(0.1), recurrent=True)
        assert conn1.innovation != conn2.innovation

    def test_identity_held_by_node_is_not_reused(self, build_genome, make_bits):
        """Test that a cached innovation equal to a node ID of the genome is replaced."""
        registry = IdentityRegistry()
        registry.register_connections([(1, 2, 4, False)])
        genome = build_genome(hidden=[4], connections=[(3, 0, 4, 0.5), (5, 4, 2, 0.5)],
                              genome_registry=registry)

        conn = genome.add_connection(1, 2, make_bits(0.0))
        assert conn.innovation == 6
        assert genome.check_invariants() == []


# ============================================================================
# Test: invariants
# ============================================================================

class TestCheckInvariants:
    """Test detection of invariant violations."""

    def test_valid_genome(self, build_genome):
        """Test that a valid genome has no problems."""
        genome = build_genome(hidden=[5], connections=[(10, 0, 5, 0.5), (11, 5, 2, 0.5)])
        assert genome.check_invariants() == []
        genome.validate()

    def test_dangling_connection(self, build_genome, make_bits):
        """Test that connections to missing nodes are reported."""
        genome = build_genome()
        genome.conn_genes[10] = ConnectionGene(0, 99, make_bits(0.0), 10)
        assert any("missing node 99" in p for p in genome.check_invariants())
        with pytest.raises(ValueError):
            genome.validate()

    def test_missing_fixed_node(self, build_genome):
        """Test that removing an output node is reported."""
        genome = build_genome()
        del genome.node_genes[2]
        assert genome.check_invariants() == ["fixed node 2 is missing"]

    def test_duplicate_pair(self, build_genome, make_bits):
        """Test that two connections with the same endpoints are reported."""
        genome = build_genome(connections=[(10, 0, 2, 0.5)])
        genome.conn_genes[11] = ConnectionGene(0, 2, make_bits(0.0), 11)
        assert any("duplicates the pair" in p for p in genome.check_invariants())

    def test_cycle(self, build_genome, make_bits):
        """Test that cycles are reported in feed-forward mode."""
        genome = build_genome(hidden=[5, 6], connections=[(10, 5, 6, 0.5)])
        genome.conn_genes[11] = ConnectionGene(6, 5, make_bits(0.0), 11)
        assert "connections form a cycle in feed-forward mode" in genome.check_invariants()

    def test_connection_into_input(self, build_genome, make_bits):
        """Test that connections ending at an input are reported."""
        genome = build_genome()
        genome.conn_genes[10] = ConnectionGene(2, 0, make_bits(0.0), 10)
        assert any("ends at input node 0" in p for p in genome.check_invariants())

    def test_extra_input_node(self, build_genome):
        """Test that input nodes not present at creation are reported."""
        genome = build_genome()
        genome.node_genes[9] = NodeGene(9, NodeType.INPUT)
        assert genome.check_invariants() == ["input node 9 was not present at creation"]

    def test_recurrent_cycle_and_self_loop_allowed(self, build_genome):
        """Test that recurrent cycles and self-loops are valid in feed-forward mode."""
        genome = build_genome(hidden=[5, 6],
                              connections=[(10, 5, 6, 0.5), (11, 6, 5, 0.5), (12, 6, 6, 0.5), (13, 2, 5, 0.5)],
                              recurrent=[11, 12, 13])
        assert genome.check_invariants() == []


# ============================================================================
# Test: node and connection deletion
# ============================================================================

class TestDelete:
    """Test the low-level deletion helpers."""

    def test_delete_hidden_node_cascades(self, build_genome):
        """Test that deleting a node deletes its connections."""
        genome = build_genome(hidden=[5], connections=[(10, 0, 5, 0.5), (11, 5, 2, 0.5), (12, 1, 2, 0.5)])
        genome._delete_node(5)
        assert 5 not in genome.node_genes
        assert set(genome.conn_genes) == {12}

    def test_delete_output_node_raises(self, build_genome):
        """Test that input and output nodes cannot be deleted."""
        genome = build_genome()
        with pytest.raises(ValueError):
            genome._delete_node(2)
        with pytest.raises(ValueError):
            genome._delete_node(0)

    def test_delete_missing_raises(self, build_genome):
        """Test that deleting unknown genes raises KeyError."""
        genome = build_genome()
        with pytest.raises(KeyError):
            genome._delete_node(42)
        with pytest.raises(KeyError):
            genome._delete_connection(42)


# ============================================================================
# Test: distance
# ============================================================================

class TestDistance:
    """Test the compatibility distance."""

    def test_identical_genomes(self, build_genome):
        """Test that a genome has zero distance to itself."""
        genome = build_genome(connections=[(10, 0, 2, 0.5)])
        assert genome.distance(genome.copy()) == 0.0

    def test_genes_only(self, config, build_genome):
        """Test the gene component: 2 of 3 genes do not match."""
        config.distance_genes_coeff   = 2.0
        config.distance_weights_coeff = 0.0
        genome1 = build_genome(connections=[(10, 0, 2, 0.5)])
        genome2 = build_genome(hidden=[5], connections=[(10, 0, 2, 0.5), (11, 1, 5, 0.5), (12, 5, 2, 0.5)])
        assert genome1.distance(genome2) == pytest.approx(2.0 / 3.0)
        assert genome2.distance(genome1) == pytest.approx(2.0 / 3.0)

    def test_weights_only(self, config, build_genome):
        """Test the weight component: weights differ by 1 out of 2."""
        config.distance_genes_coeff   = 0.0
        config.distance_weights_coeff = 2.0
        genome1 = build_genome(connections=[(10, 0, 2, 1.0)])
        genome2 = build_genome(connections=[(10, 0, 2, 0.0)])
        assert genome1.distance(genome2) == pytest.approx(0.5)

    def test_activations_only(self, config, build_genome):
        """Test the activation component over matching hidden nodes."""
        config.distance_genes_coeff       = 0.0
        config.distance_weights_coeff     = 0.0
        config.distance_activations_coeff = 1.0
        genome1 = build_genome(hidden=[5, 6], connections=[(10, 0, 5, 0.5), (11, 1, 6, 0.5)])
        genome2 = genome1.copy()
        genome2.node_genes[5].activation_name = 'sigmoid'
        assert genome1.distance(genome2) == pytest.approx(0.5)

    def test_empty_genomes(self, build_genome):
        """Test that two unconnected genomes have zero distance."""
        assert build_genome().distance(build_genome()) == 0.0

    def test_all_coefficients_zero(self, config, build_genome):
        """Test that zero coefficients give zero distance."""
        config.distance_genes_coeff   = 0.0
        config.distance_weights_coeff = 0.0
        genome1 = build_genome(connections=[(10, 0, 2, 0.5)])
        assert genome1.distance(build_genome()) == 0.0


# ============================================================================
# Test: copy
# ============================================================================

class TestCopy:
    """Test copying of genomes."""

    def test_copy_is_independent(self, build_genome, rng):
        """Test that modifying the copy leaves the original unchanged."""
        genome = build_genome(hidden=[5], connections=[(10, 0, 5, 0.5), (11, 5, 2, 0.5)])
        before = genome.to_dict()

        clone = genome.copy()
        clone.conn_genes[10].enabled = False
        clone.conn_genes[11].mutate_weight(1.0, rng)
        clone.node_genes[5].activation_name = 'sine'
        clone._delete_connection(10)

        assert genome.to_dict() == before

    def test_copy_shares_config_and_registry(self, build_genome):
        """Test that copies belong to the same run."""
        genome = build_genome()
        clone = genome.copy()
        assert clone.config is genome.config
        assert clone.registry is genome.registry
        assert clone.fixed_node_ids == genome.fixed_node_ids

    def test_copy_module(self, build_genome):
        """Test that copy.copy and copy.deepcopy work."""
        genome = build_genome(connections=[(10, 0, 2, 0.5)])
        for clone in (copy.copy(genome), copy.deepcopy(genome)):
            assert clone.to_dict() == genome.to_dict()
            assert clone.registry is genome.registry


# ============================================================================
# Test: serialization
# ============================================================================

class TestFromDict:
    """Test building genomes from dictionaries."""

    def test_round_trip(self, build_genome, rng):
        """Test that to_dict/from_dict preserves the genome exactly."""
        genome = build_genome(hidden=[5], connections=[(10, 0, 5, 0.5), (11, 5, 2, -0.25)])
        genome.conn_genes[10].bits = WeightBits(rng.random(128) < 0.3)
        genome.conn_genes[11].enabled = False

        restored = Genome.from_dict(genome.to_dict(), genome.config, genome.registry)
        assert restored.to_dict() == genome.to_dict()
        assert restored.conn_genes[10].bits == genome.conn_genes[10].bits
        assert restored.conn_genes[10].resolution == 2
        assert not restored.conn_genes[11].enabled

    def test_json_round_trip(self, build_genome):
        """Test that JSON serialization preserves the genome."""
        genome = build_genome(hidden=[5], connections=[(10, 0, 5, 0.5), (11, 5, 2, -0.25)])
        text = genome.to_json()
        assert json.loads(text)["connections"][0]["innovation"] == 10
        restored = Genome.from_json(text, genome.config)
        assert restored.to_dict() == genome.to_dict()

    def test_reserves_identities(self, config):
        """Test that the registry never reissues identities found in the dictionary."""
        registry = IdentityRegistry()
        genome_dict = {
            "nodes": [{"id": 0, "type": "input"},
                      {"id": 30, "type": "output", "activation": "tanh"}],
            "connections": [{"innovation": 57, "from": 0, "to": 30, "bits": "10" * 32}]
        }
        genome = Genome.from_dict(genome_dict, config, registry)
        assert registry.next() == 58
        assert genome.fixed_node_ids == frozenset({0, 30})
        assert genome.conn_genes[57].enabled

    def test_registers_connections(self, build_genome, make_bits):
        """Test that loaded connections are reused by later genomes of the run."""
        genome = build_genome(connections=[(10, 0, 2, 0.5)])
        other  = build_genome()
        assert other.add_connection(0, 2, make_bits(0.0)).innovation == 10

    def test_known_identities_are_not_cached(self, registry, build_genome, make_bits):
        """Test that loaded identities the registry had already issued are not reused for their pair."""
        registry.reserve(20)
        build_genome(connections=[(10, 0, 2, 0.5)])
        other = build_genome()
        assert other.add_connection(0, 2, make_bits(0.0)).innovation == 21

    def test_rejected_dict_leaves_registry_untouched(self, config, registry):
        """Test that a rejected dictionary does not advance or teach the registry."""
        registry.reserve(5)
        genome_dict = {
            "nodes": [{"id": 0, "type": "input"}, {"id": 1, "type": "input"},
                      {"id": 2, "type": "output", "activation": "tanh"}],
            "connections": [{"innovation": 20, "from": 0, "to": 2, "bits": "1" * 64},
                            {"innovation": 21, "from": 2, "to": 0, "bits": "1" * 64}]
        }
        with pytest.raises(ValueError):
            Genome.from_dict(genome_dict, config, registry)

        assert registry.last == 5
        assert registry.connection_id(0, 2) == 6

    def test_recurrent_round_trip(self, build_genome):
        """Test that the recurrent flag survives serialization."""
        genome = build_genome(hidden=[5], connections=[(10, 0, 5, 0.5), (11, 5, 5, -0.25)], recurrent=[11])
        genome_dict = genome.to_dict()
        assert [c["recurrent"] for c in genome_dict["connections"]] == [False, True]

        restored = Genome.from_dict(genome_dict, genome.config, genome.registry)
        assert restored.conn_genes[11].recurrent
        assert not restored.conn_genes[10].recurrent

    def test_recurrent_defaults_to_false(self, config):
        """Test that connections without a recurrent entry load as feed-forward ones."""
        genome_dict = {
            "nodes": [{"id": 0, "type": "input"},
                      {"id": 1, "type": "output", "activation": "tanh"}],
            "connections": [{"innovation": 4, "from": 0, "to": 1, "bits": "1" * 64}]
        }
        genome = Genome.from_dict(genome_dict, config)
        assert not genome.conn_genes[4].recurrent

    def test_node_counts_from_dict(self, config, build_genome):
        """Test that the number of inputs and outputs comes from the dictionary."""
        genome = build_genome()
        assert genome.config.num_inputs == 2
        assert genome.config.num_outputs == 1
        assert genome.config is not config

    @pytest.mark.parametrize("connection", [
        {"innovation": 10, "from": 0, "to": 99, "bits": "1" * 64},   # missing node
        {"innovation": 10, "from": 2, "to": 0,  "bits": "1" * 64},   # into an input
        {"innovation": 0,  "from": 1, "to": 2,  "bits": "1" * 64},   # identity of a node
    ])
    def test_invalid_connection_raises(self, config, connection):
        """Test that connections breaking an invariant are rejected."""
        genome_dict = {
            "nodes": [{"id": 0, "type": "input"}, {"id": 1, "type": "input"},
                      {"id": 2, "type": "output", "activation": "tanh"}],
            "connections": [connection]
        }
        with pytest.raises(ValueError):
            Genome.from_dict(genome_dict, config)

    def test_cycle_raises(self, config):
        """Test that a cyclic structure is rejected in feed-forward mode."""
        genome_dict = {
            "nodes": [{"id": 0, "type": "input"},
                      {"id": 1, "type": "output", "activation": "tanh"},
                      {"id": 2, "type": "hidden", "activation": "relu"},
                      {"id": 3, "type": "hidden", "activation": "relu"}],
            "connections": [{"innovation": 4, "from": 2, "to": 3, "bits": "1" * 64},
                            {"innovation": 5, "from": 3, "to": 2, "bits": "1" * 64}]
        }
        with pytest.raises(ValueError):
            Genome.from_dict(genome_dict, config)

    def test_duplicate_pair_raises(self, config):
        """Test that two connections between the same nodes are rejected."""
        genome_dict = {
            "nodes": [{"id": 0, "type": "input"},
                      {"id": 1, "type": "output", "activation": "tanh"}],
            "connections": [{"innovation": 4, "from": 0, "to": 1, "bits": "1" * 64},
                            {"innovation": 5, "from": 0, "to": 1, "bits": "0" * 64}]
        }
        with pytest.raises(ValueError):
            Genome.from_dict(genome_dict, config)

    def test_duplicate_node_raises(self, config):
        """Test that duplicate node IDs are rejected."""
        genome_dict = {
            "nodes": [{"id": 0, "type": "input"},
                      {"id": 0, "type": "output", "activation": "tanh"}],
        }
        with pytest.raises(ValueError):
            Genome.from_dict(genome_dict, config)

    def test_unknown_node_type_raises(self, config):
        """Test that node types are validated."""
        genome_dict = {"nodes": [{"id": 0, "type": "bias"}]}
        with pytest.raises(ValueError):
            Genome.from_dict(genome_dict, config)

    def test_bad_bits_raise(self, config):
        """Test that malformed bit strings are rejected."""
        genome_dict = {
            "nodes": [{"id": 0, "type": "input"},
                      {"id": 1, "type": "output", "activation": "tanh"}],
            "connections": [{"innovation": 4, "from": 0, "to": 1, "bits": "0.5"}]
        }
        with pytest.raises(ValueError):
            Genome.from_dict(genome_dict, config)

    def test_missing_field_raises(self, config):
        """Test that missing fields raise KeyError."""
        genome_dict = {
            "nodes": [{"id": 0, "type": "input"},
                      {"id": 1, "type": "output", "activation": "tanh"}],
            "connections": [{"innovation": 4, "from": 0, "bits": "1" * 64}]
        }
        with pytest.raises(KeyError):
            Genome.from_dict(genome_dict, config)


# ============================================================================
# Test: string representation
# ============================================================================

class TestGenomeStr:
    """Test printing genomes."""

    def test_str(self, build_genome):
        """Test the compact string representation."""
        genome = build_genome(hidden=[5], connections=[(10, 0, 5, 0.5), (11, 5, 2, 0.5)])
        assert str(genome) == ("Nodes: [I0][I1][H5,RLU][O2,TNH]\n"
                               "Conns: [010,E,00=>05,+0.50][011,E,05=>02,+0.50]")

    def test_show_aligned(self, build_genome, capsys):
        """Test that aligned printing shows the genes of both genomes."""
        genome1 = build_genome(connections=[(10, 0, 2, 0.5)])
        genome2 = build_genome(connections=[(11, 1, 2, 0.5)])
        Genome.show_aligned(genome1, genome2)
        output = capsys.readouterr().out
        assert "[010,E,00=>02,+0.50]" in output
        assert "[011,E,01=>02,+0.50]" in output
