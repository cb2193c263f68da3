from .config import SchreierConfig, getConfig, set_config_factory
from .group import CyclicGroup, PermutationGroup, SymmetricGroup
from .permutation import (Cycles, PermutationError, apply, compose,
                          from_mapping, identity, invert,
                          random_permutation, support_of)
from .stabilizer import schreier_generators, stabilizer_generators
from .vector import (NotInOrbit, SchreierVector, build, extend, extend_loop,
                     loop, orbit)
from .version import __version__
from .words import (Forward, GeneratorTables, Inverse, Letter, apply_word,
                    evaluate_word, invert_letter, invert_word, is_reduced,
                    is_subword, orbit_bound, path, prepare_generators,
                    reduce_word, shorten_connecting_word)
