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
Maximally Equidistributed Long-period Linear generators (Harase and Kimoto, 2018).

A MELG keeps ``N`` 64-bit words plus one extra word ``L[N]``; each step
mixes the current and next words through an F2-linear recurrence, updates
the extra word, and tempers the result with a lagged word.

=============  ===========  ==========
Generator      state words  period
=============  ===========  ==========
``Melg607``    9 + 1        2**607
``Melg19937``  311 + 1      2**19937
``Melg44497``  695 + 1      2**44497
=============  ===========  ==========
"""

from ._base import BaseRandom
from ._bits import MASK64
from ._state import ListSeedState

__all__ = [
    'Melg607',
    'Melg19937',
    'Melg44497',
]


class BaseMelg(BaseRandom, register=False):
    """MELG recurrence, parametrized by class constants.

    The cursor runs over ``[0, N)``; ``L[N]`` holds the extra word.
    """
    FAMILY = 'melg'
    OUTPUT_BITS = 64

    N: int
    UPPER_MASK: int
    LOWER_MASK: int
    TAP_R: int
    SHIFT_1: int
    SHIFT_2: int
    SHIFT_3: int
    TAP_O: int
    OUTPUT_MASK: int
    A_COND: tuple

    def _new_state(self):
        return ListSeedState(size=self.N + 1, bits=64)

    def _setstate(self, seed: int):
        self._state.seed(seed)

    def _setstate_words(self, words):
        self._state.seed_from_words(words)

    def _cursor_limit(self, fresh) -> int:
        return self.N

    def next(self) -> int:
        st = self._state
        items = st.items
        n = self.N
        i = st.index
        i_1 = (i + 1) % n
        st.index = i_1

        x = (items[i] & self.UPPER_MASK) | (items[i_1] & self.LOWER_MASK)
        s = items[n]
        s = (x >> 1) ^ self.A_COND[x & 1] ^ items[(i + self.TAP_R) % n] ^ s ^ ((s << self.SHIFT_1) & MASK64)
        items[n] = s
        si = x ^ s ^ (s >> self.SHIFT_2)
        items[i] = si
        return (si ^ ((si << self.SHIFT_3) & MASK64) ^ (items[(i + self.TAP_O) % n] & self.OUTPUT_MASK)) & MASK64


class Melg607(BaseMelg):
    """MELG with a 607-bit period.

    Examples
    --------
    .. code-block:: python

        >>> from prngkit import Melg607
        >>> hex(Melg607(1).next())
        '0x89cc9fe3a1f1d1b0'
    """
    N = 9
    UPPER_MASK = 0xFFFF_FFFF_8000_0000
    LOWER_MASK = 0x0000_0000_7FFF_FFFF
    TAP_R = 5
    SHIFT_1 = 13
    SHIFT_2 = 35
    SHIFT_3 = 30
    TAP_O = 3
    OUTPUT_MASK = 0x66ED_C62A_6BF8_C826
    A_COND = (0, 0x81F1_FD68_0123_48BC)


class Melg19937(BaseMelg):
    """MELG with a 19937-bit period."""
    N = 311
    UPPER_MASK = 0xFFFF_FFFE_0000_0000
    LOWER_MASK = 0x0000_0001_FFFF_FFFF
    TAP_R = 81
    SHIFT_1 = 23
    SHIFT_2 = 33
    SHIFT_3 = 16
    TAP_O = 19
    OUTPUT_MASK = 0x6AED_E6FD_97B3_38EC
    A_COND = (0, 0x5C32_E06D_F730_FC42)


class Melg44497(BaseMelg):
    """MELG with a 44497-bit period."""
    N = 695
    UPPER_MASK = 0xFFFF_8000_0000_0000
    LOWER_MASK = 0x0000_7FFF_FFFF_FFFF
    TAP_R = 373
    SHIFT_1 = 37
    SHIFT_2 = 14
    SHIFT_3 = 6
    TAP_O = 95
    OUTPUT_MASK = 0x06FB_BEE2_9AAE_FD91
    A_COND = (0, 0x4FA9_CA36_F293_C9A9)
