# Copyright 2026 BrainX Ecosystem Limited. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
# ==============================================================================

__version__ = "0.0.1"

from ._base import BaseRandom, GeneratorState
from ._config import algorithm_context, get_default_algorithm, set_default_algorithm
from ._cwg import Cwg64, Cwg128_64, Cwg128
from ._error import *
from ._error import __all__ as _error_all
from ._fastrand import FastRand32, FastRand63
from ._lfib import LFib78, LFib116, LFib668, LFib1340
from ._melg import Melg607, Melg19937, Melg44497
from ._mrg import Mrg287, Mrg1457, Mrg49507
from ._pcg import Pcg64_32, Pcg128_64, Pcg1024_32
from ._registry import (
    get_algorithm,
    get_algorithms_by_family,
    get_all_algorithm_names,
    get_registry,
    new_generator,
)
from ._snapshot import load_state, restore_generator, save_state, state_from_dict, state_to_dict
from ._splitmix import SplitMix31, SplitMix32, SplitMix63, SplitMix64
from ._squares import Squares32, Squares64
from ._well import Well512a, Well1024a, Well19937c, Well44497b
from ._xoroshiro import Xoroshiro256, Xoroshiro512, Xoroshiro1024
from .config import (
    clear_user_defaults,
    get_config_path,
    get_user_default,
    invalidate_cache,
    load_user_defaults,
    save_user_defaults,
    set_user_default,
)

__all__ = [

    # --- generator core --- #
    'BaseRandom',
    'GeneratorState',

    # --- seed expanders --- #
    'SplitMix64',
    'SplitMix63',
    'SplitMix32',
    'SplitMix31',

    # --- algorithms --- #

    # 1. Collatz-Weyl
    'Cwg64', 'Cwg128_64', 'Cwg128',

    # 2. linear congruential
    'FastRand32', 'FastRand63',

    # 3. lagged Fibonacci
    'LFib78', 'LFib116', 'LFib668', 'LFib1340',

    # 4. maximally equidistributed F2-linear
    'Melg607', 'Melg19937', 'Melg44497',

    # 5. multiple recursive
    'Mrg287', 'Mrg1457', 'Mrg49507',

    # 6. permuted congruential
    'Pcg64_32', 'Pcg128_64', 'Pcg1024_32',

    # 7. counter based
    'Squares32', 'Squares64',

    # 8. well-equidistributed
    'Well512a', 'Well1024a', 'Well19937c', 'Well44497b',

    # 9. xoroshiro
    'Xoroshiro256', 'Xoroshiro512', 'Xoroshiro1024',

    # --- algorithm registry --- #
    'get_algorithm',
    'get_algorithms_by_family',
    'get_all_algorithm_names',
    'get_registry',
    'new_generator',
    'algorithm_context',
    'set_default_algorithm',
    'get_default_algorithm',

    # --- state snapshots --- #
    'state_to_dict',
    'state_from_dict',
    'save_state',
    'load_state',
    'restore_generator',

    # --- user configuration --- #
    'load_user_defaults',
    'save_user_defaults',
    'get_user_default',
    'set_user_default',
    'clear_user_defaults',
    'get_config_path',
    'invalidate_cache',

] + list(_error_all)

del _error_all
