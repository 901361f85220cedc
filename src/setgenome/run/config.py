import configparser
import os
from setgenome.activations import activations

class Config:

    # Allowed values for the enumerated options
    RESOLUTION_GROWTH_OPTIONS = ('double', 'increment')
    SPLIT_POLICY_OPTIONS      = ('remove', 'disable')
    DISJOINT_POLICY_OPTIONS   = ('inherit_all', 'fitter_parent')

    @staticmethod
    def _parse_activation_options(raw_options):
        """
        Parse activation_options from string to list.

        Parameters:
            raw_options: Either "all", a comma-separated list, or already a list

        Returns:
            List of activation function names
        """
        if isinstance(raw_options, list):
            parsed = raw_options
        elif raw_options == 'all':
            return list(activations.keys())
        else:
            # Parse comma-separated list
            parsed = [opt.strip() for opt in raw_options.split(',')]

        for opt in parsed:
            if opt not in activations:
                raise ValueError(f"Invalid activation function '{opt}' in activation_options")
        return parsed

    def __init__(self, config_file: str | None = None):
        """
        Initialize Config by parsing an INI file, or create a default Config.

        Parameters:
            config_file: Path to the INI configuration file.
                         If None, creates a Config holding defaults, suitable
                         for testing and for manual attribute setting.
        """

        # Default config for testing/manual setup
        if config_file is None:

            # Structure
            self.num_inputs           = 1
            self.num_outputs          = 1
            self.initial_cxn_fraction = 1.0
            self.output_activation    = 'tanh'

            # Connection weights
            self.resolution        = 1
            self.max_resolution    = 4
            self.weight_scale      = 1.0
            self.weight_init_mean  = 0.0
            self.weight_init_stdev = 0.5

            # Weight mutation
            self.weight_mutate_probability   = 1.0
            self.weight_bit_flip_rate        = 0.01
            self.weight_mutate_all           = True
            self.resolution_duplication_rate = 0.0
            self.resolution_growth           = 'double'

            # Structural mutations
            self.single_structural_mutation    = False
            self.node_add_probability          = 0.1
            self.node_delete_probability       = 0.0
            self.connection_add_probability    = 0.3
            self.connection_delete_probability = 0.0
            self.recurrent_connection_add_probability    = 0.0
            self.recurrent_connection_delete_probability = 0.0
            self.feed_forward                  = True
            self.allow_self_loops              = False
            self.split_policy                  = 'remove'
            self.reuse_innovations             = True

            # Nodes
            self.activation_initial            = 'tanh'
            self.activation_options            = list(activations.keys())
            self.activation_mutate_probability = 0.0

            # Crossover
            self.disjoint_policy = 'inherit_all'

            # Speciation
            self.distance_genes_coeff       = 1.0
            self.distance_weights_coeff     = 0.4
            self.distance_activations_coeff = 0.0

            # Run
            self.seed = None

            return

        if not os.path.exists(config_file):
            raise FileNotFoundError(f"Configuration file '{config_file}' not found")

        parser = configparser.ConfigParser()
        parser.read(config_file)

        # Sentinel for missing default values
        _NO_DEFAULT = object()

        # Helper function to safely parse values
        def get_value(section, key, value_type, default=_NO_DEFAULT):
            try:
                raw_value = parser.get(section, key)
                if raw_value.lower() == 'none':
                    return None
                if value_type == int:
                    return parser.getint(section, key)
                elif value_type == float:
                    return parser.getfloat(section, key)
                elif value_type == bool:
                    return parser.getboolean(section, key)
                elif value_type == str:
                    return raw_value
            except (configparser.NoSectionError, configparser.NoOptionError):
                if default is not _NO_DEFAULT:
                    return default
                raise

        # [STRUCTURE]

        # The number of input nodes, through which the network receives inputs.
        self.num_inputs = get_value('STRUCTURE', 'num_inputs', int)

        # The number of output nodes, to which the network delivers outputs.
        self.num_outputs = get_value('STRUCTURE', 'num_outputs', int)

        # The fraction of input nodes connected to every output node in an
        # initialized genome. Use 0.0 for genomes without initial connections.
        self.initial_cxn_fraction = get_value('STRUCTURE', 'initial_cxn_fraction', float, default=1.0)

        # Activation function of the output nodes.
        self.output_activation = get_value('STRUCTURE', 'output_activation', str, default='tanh')

        # [CONNECTION]

        # Weights are stored as bit patterns of length 64 * resolution.
        # A higher resolution means a smaller step between representable weights.
        self.resolution = get_value('CONNECTION', 'resolution', int, default=1)

        # Upper bound for the resolution a weight may reach through duplication.
        self.max_resolution = get_value('CONNECTION', 'max_resolution', int, default=4)

        # A decoded bit pattern lies in [-1, 1]; the visible weight is that value times this scale.
        self.weight_scale = get_value('CONNECTION', 'weight_scale', float, default=1.0)

        # The mean and standard deviation of the normal distribution used to
        # sample initial weights (in decoded units, clipped to [-1, 1]).
        self.weight_init_mean  = get_value('CONNECTION', 'weight_init_mean' , float, default=0.0)
        self.weight_init_stdev = get_value('CONNECTION', 'weight_init_stdev', float, default=0.5)

        # [WEIGHT_MUTATION]

        # The probability that a call to 'mutate()' applies bit flips to the weights.
        self.weight_mutate_probability = get_value('WEIGHT_MUTATION', 'weight_mutate_probability', float, default=1.0)

        # Each bit of a mutated weight pattern flips independently with this probability.
        # Rates close to 0.5 drive every weight towards 0.
        self.weight_bit_flip_rate = get_value('WEIGHT_MUTATION', 'weight_bit_flip_rate', float)

        # Whether weight mutation visits every connection or a single random one.
        self.weight_mutate_all = get_value('WEIGHT_MUTATION', 'weight_mutate_all', bool, default=True)

        # The per-connection probability that the weight resolution grows.
        self.resolution_duplication_rate = get_value('WEIGHT_MUTATION', 'resolution_duplication_rate', float, default=0.0)

        # How the resolution grows.
        # Allowed values:
        #   "double"    - the bit pattern is repeated, doubling the resolution
        #   "increment" - one block of 64 bits encoding the same value is appended
        self.resolution_growth = get_value('WEIGHT_MUTATION', 'resolution_growth', str, default='double')

        # [STRUCTURAL MUTATIONS]

        # If this is 'True', only one structural mutation (the addition or removal
        # of a node or connection) will be allowed per genome per generation.
        self.single_structural_mutation = get_value('STRUCTURAL_MUTATIONS', 'single_structural_mutation', bool)

        # The probability that mutation will add a new node by splitting an existing connection.
        self.node_add_probability = get_value('STRUCTURAL_MUTATIONS', 'node_add_probability', float)

        # The probability that mutation will delete a hidden node (and all connections to it).
        self.node_delete_probability = get_value('STRUCTURAL_MUTATIONS', 'node_delete_probability', float)

        # The probability that mutation will add a connection between existing nodes.
        self.connection_add_probability = get_value('STRUCTURAL_MUTATIONS', 'connection_add_probability', float)

        # The probability that mutation will delete an existing connection.
        self.connection_delete_probability = get_value('STRUCTURAL_MUTATIONS', 'connection_delete_probability', float)

        # The probabilities that mutation will add or delete a recurrent connection.
        # Recurrent connections may close cycles even in feed-forward mode.
        self.recurrent_connection_add_probability    = get_value('STRUCTURAL_MUTATIONS', 'recurrent_connection_add_probability'   , float, default=0.0)
        self.recurrent_connection_delete_probability = get_value('STRUCTURAL_MUTATIONS', 'recurrent_connection_delete_probability', float, default=0.0)

        # Whether the connection graph must stay acyclic.
        self.feed_forward = get_value('STRUCTURAL_MUTATIONS', 'feed_forward', bool, default=True)

        # Whether a node may connect to itself (only applicable if 'feed_forward' is 'False').
        self.allow_self_loops = get_value('STRUCTURAL_MUTATIONS', 'allow_self_loops', bool, default=False)

        # What happens to a connection when a node is inserted into it.
        # Allowed values:
        #   "remove"  - the connection gene is deleted
        #   "disable" - the connection gene is kept, but disabled
        self.split_policy = get_value('STRUCTURAL_MUTATIONS', 'split_policy', str, default='remove')

        # Whether the same structural mutation in different genomes of one
        # run receives the same identities.
        self.reuse_innovations = get_value('STRUCTURAL_MUTATIONS', 'reuse_innovations', bool, default=True)

        # [NODE]

        # Activation function of newly created hidden nodes.
        # Use "random" to draw it from 'activation_options'.
        self.activation_initial = get_value('NODE', 'activation_initial', str, default='tanh')

        # Which activation functions are available to hidden nodes and to mutation.
        # Options: "all" or comma-separated list
        raw_options = get_value('NODE', 'activation_options', str, default='all')
        self.activation_options = self._parse_activation_options(raw_options)

        # The probability that mutation will change the activation function of a node.
        self.activation_mutate_probability = get_value('NODE', 'activation_mutate_probability', float, default=0.0)

        # [CROSSOVER]

        # Which disjoint and excess connection genes the offspring inherits.
        # Allowed values:
        #   "inherit_all"   - from both parents
        #   "fitter_parent" - only from the parent designated as fitter
        self.disjoint_policy = get_value('CROSSOVER', 'disjoint_policy', str, default='inherit_all')

        # [SPECIATION]

        # Weights of the three components of the compatibility distance:
        # fraction of non-matching genes, weight difference of matching
        # connections and activation difference of matching hidden nodes.
        self.distance_genes_coeff       = get_value('SPECIATION', 'distance_genes_coeff'      , float, default=1.0)
        self.distance_weights_coeff     = get_value('SPECIATION', 'distance_weights_coeff'    , float, default=0.4)
        self.distance_activations_coeff = get_value('SPECIATION', 'distance_activations_coeff', float, default=0.0)

        # [RUN]

        # Seed for the random number generator of a run ("none" for a random seed).
        self.seed = get_value('RUN', 'seed', int, default=None)

        self.validate()

    def validate(self) -> None:
        """
        Check that every option holds a usable value.

        Raises:
            ValueError: naming the first offending option
        """
        if not isinstance(self.num_inputs, int) or self.num_inputs < 1:
            raise ValueError(f"num_inputs must be a positive integer, got {self.num_inputs!r}")
        if not isinstance(self.num_outputs, int) or self.num_outputs < 1:
            raise ValueError(f"num_outputs must be a positive integer, got {self.num_outputs!r}")
        if not isinstance(self.resolution, int) or self.resolution < 1:
            raise ValueError(f"resolution must be a positive integer, got {self.resolution!r}")
        if not isinstance(self.max_resolution, int) or self.max_resolution < self.resolution:
            raise ValueError(f"max_resolution must be an integer >= resolution ({self.resolution}), "
                             f"got {self.max_resolution!r}")
        if self.weight_scale is None or self.weight_scale <= 0:
            raise ValueError(f"weight_scale must be positive, got {self.weight_scale!r}")
        if self.weight_init_stdev is None or self.weight_init_stdev < 0:
            raise ValueError(f"weight_init_stdev must be non-negative, got {self.weight_init_stdev!r}")

        for name in ('initial_cxn_fraction',
                     'weight_mutate_probability',
                     'weight_bit_flip_rate',
                     'resolution_duplication_rate',
                     'node_add_probability',
                     'node_delete_probability',
                     'connection_add_probability',
                     'connection_delete_probability',
                     'recurrent_connection_add_probability',
                     'recurrent_connection_delete_probability',
                     'activation_mutate_probability'):
            value = getattr(self, name)
            if value is None or not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must lie in [0, 1], got {value!r}")

        for name in ('distance_genes_coeff', 'distance_weights_coeff', 'distance_activations_coeff'):
            value = getattr(self, name)
            if value is None or value < 0:
                raise ValueError(f"{name} must be non-negative, got {value!r}")

        if self.resolution_growth not in self.RESOLUTION_GROWTH_OPTIONS:
            raise ValueError(f"resolution_growth must be one of {self.RESOLUTION_GROWTH_OPTIONS}, "
                             f"got {self.resolution_growth!r}")
        if self.split_policy not in self.SPLIT_POLICY_OPTIONS:
            raise ValueError(f"split_policy must be one of {self.SPLIT_POLICY_OPTIONS}, got {self.split_policy!r}")
        if self.disjoint_policy not in self.DISJOINT_POLICY_OPTIONS:
            raise ValueError(f"disjoint_policy must be one of {self.DISJOINT_POLICY_OPTIONS}, "
                             f"got {self.disjoint_policy!r}")

        if not self.activation_options:
            raise ValueError("activation_options must name at least one activation function")
        for name in self.activation_options:
            if name not in activations:
                raise ValueError(f"Invalid activation function '{name}' in activation_options")
        if self.output_activation not in activations:
            raise ValueError(f"Invalid output_activation '{self.output_activation}'")
        if self.activation_initial != 'random' and self.activation_initial not in activations:
            raise ValueError(f"Invalid activation_initial '{self.activation_initial}'")

    @property
    def bits_per_weight(self) -> int:
        """Length of a newly created weight bit pattern."""
        return 64 * self.resolution

    def __setattr__(self, name, value):
        """
        Override 'setattr' to automatically parse activation_options when set.
        This allows users to write config.activation_options = "relu, tanh" and have it
        automatically converted to a list of activation names.
        """
        if name == 'activation_options':
            value = self._parse_activation_options(value)
        super().__setattr__(name, value)
