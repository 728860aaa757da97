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

"""
Fast linear congruential generators.

Short periods and weak low bits: fine for quick simulations and
tests, not for serious statistics.
"""

from ._base import BaseRandom
from ._bits import MASK32, MASK63
from ._splitmix import SplitMix32, SplitMix63
from ._state import ScalarState

__all__ = [
    'FastRand32',
    'FastRand63',
]


class BaseFastRand(BaseRandom, register=False):
    """``x = (MULT * x + 1) mod 2**OUTPUT_BITS``, seeded with one SplitMix word."""
    FAMILY = 'fastrand'
    MULT: int
    _SPLITMIX = None

    def _new_state(self):
        return ScalarState(bits=self.OUTPUT_BITS)

    def _setstate(self, seed: int):
        self._state.value = self._SPLITMIX(seed)()

    def next(self) -> int:
        st = self._state
        st.value = (self.MULT * st.value + 1) & self._MASK
        return st.value


class FastRand32(BaseFastRand):
    """32-bit LCG with multiplier 69069 (Marsaglia).

    Examples
    --------
    .. code-block:: python

        >>> from prngkit import FastRand32
        >>> hex(FastRand32(1).next())
        '0xd767c1fd'
    """
    OUTPUT_BITS = 32
    MULT = 69069
    _MASK = MASK32
    _SPLITMIX = SplitMix32


class FastRand63(BaseFastRand):
    """63-bit LCG with multiplier ``0x7ff319faa77be975`` (L'Ecuyer)."""
    OUTPUT_BITS = 63
    MULT = 0x7FF3_19FA_A77B_E975
    _MASK = MASK63
    _SPLITMIX = SplitMix63
