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
Well-Equidistributed Long-period Linear generators (Panneton, L'Ecuyer and
Matsumoto, 2006).

All WELL generators keep a circular list of 32-bit words and combine a few
lagged words through the elementary transforms below (named after the
matrices of the original paper). The cursor moves backwards.

===============  ===========  ==========
Generator        state words  period
===============  ===========  ==========
``Well512a``     16           2**512
``Well1024a``    32           2**1024
``Well19937c``   624          2**19937
``Well44497b``   1391         2**44497
===============  ===========  ==========
"""

from ._base import BaseRandom
from ._bits import MASK32
from ._state import ListSeedState

__all__ = [
    'Well512a',
    'Well1024a',
    'Well19937c',
    'Well44497b',
]

_A1 = 0xDA44_2D24
_A7 = 0xB729_FCEC


def _m2_neg(x: int, t: int) -> int:
    return (x << t) & MASK32


def _m2_pos(x: int, t: int) -> int:
    return x >> t


def _m3_neg(x: int, t: int) -> int:
    return (x ^ (x << t)) & MASK32


def _m3_pos(x: int, t: int) -> int:
    return x ^ (x >> t)


def _m5_neg(x: int, t: int, a: int) -> int:
    return x ^ ((x << t) & a)


def _m6(x: int, q: int, t: int, s: int, a: int) -> int:
    y = (((x << q) & MASK32) ^ (x >> (32 - q))) & (MASK32 ^ (1 << s))
    return y ^ a if x & (1 << t) else y


def _tempering(x: int, b: int, c: int) -> int:
    """Matsumoto-Kurita tempering."""
    x ^= (x << 7) & b
    x ^= (x << 15) & c
    return x


class BaseWell(BaseRandom, register=False):
    """WELL state handling: ``SIZE`` words of 32 bits, cursor starting at 0."""
    FAMILY = 'well'
    OUTPUT_BITS = 32
    SIZE: int

    def _new_state(self):
        return ListSeedState(size=self.SIZE, bits=32)

    def _setstate(self, seed: int):
        self._state.seed(seed)

    def _setstate_words(self, words):
        self._state.seed_from_words(words)


class Well512a(BaseWell):
    """WELL512a.

    Examples
    --------
    .. code-block:: python

        >>> from prngkit import Well512a
        >>> hex(Well512a(1).next())
        '0x50e458df'
    """
    SIZE = 16

    def next(self) -> int:
        st = self._state
        items = st.items
        i = st.index
        i_1 = (i - 1) & 0xF

        z0 = items[i_1]
        z1 = _m3_neg(items[i], 16) ^ _m3_neg(items[(i + 13) & 0xF], 15)
        z2 = _m3_pos(items[(i + 9) & 0xF], 11)
        z3 = z1 ^ z2
        items[i] = z3
        items[i_1] = _m3_neg(z0, 2) ^ _m3_neg(z1, 18) ^ _m2_neg(z2, 28) ^ _m5_neg(z3, 5, _A1)
        st.index = i_1
        return z3


class Well1024a(BaseWell):
    """WELL1024a."""
    SIZE = 32

    def next(self) -> int:
        st = self._state
        items = st.items
        i = st.index
        i_1 = (i - 1) & 0x1F

        z0 = items[i_1]
        z1 = items[i] ^ _m3_pos(items[(i + 3) & 0x1F], 8)
        z2 = _m3_neg(items[(i + 24) & 0x1F], 19) ^ _m3_neg(items[(i + 10) & 0x1F], 14)
        z3 = z1 ^ z2
        items[i] = z3
        items[i_1] = _m3_neg(z0, 11) ^ _m3_neg(z1, 7) ^ _m3_neg(z2, 13)
        st.index = i_1
        return z3


class Well19937c(BaseWell):
    """WELL19937c, tempered for maximal equidistribution."""
    SIZE = 624

    def next(self) -> int:
        st = self._state
        items = st.items
        n = self.SIZE
        i = st.index
        i_1 = (i - 1) % n
        i_2 = (i - 2) % n

        z0 = (items[i_1] & 0x0000_0001) ^ (items[i_2] & 0xFFFF_FFFE)
        z1 = _m3_neg(items[i], 25) ^ _m3_pos(items[(i + 70) % n], 27)
        z2 = _m2_pos(items[(i + 179) % n], 9) ^ _m3_pos(items[(i + 449) % n], 1)
        z3 = z1 ^ z2
        items[i] = z3
        items[i_1] = z0 ^ _m3_neg(z1, 9) ^ _m2_neg(z2, 21) ^ _m3_pos(z3, 21)
        st.index = i_1
        return _tempering(z3, 0xE46E_1700, 0x9B86_8000)


class Well44497b(BaseWell):
    """WELL44497b, tempered for maximal equidistribution."""
    SIZE = 1391

    def next(self) -> int:
        st = self._state
        items = st.items
        n = self.SIZE
        i = st.index
        i_1 = (i - 1) % n
        i_2 = (i - 2) % n

        z0 = (items[i_1] & 0x0001_FFFF) ^ (items[i_2] & 0xFFFE_0000)
        z1 = _m3_neg(items[i], 24) ^ _m3_pos(items[(i + 23) % n], 30)
        z2 = _m3_neg(items[(i + 481) % n], 10) ^ _m2_neg(items[(i + 229) % n], 26)
        z3 = z1 ^ z2
        items[i] = z3
        items[i_1] = z0 ^ _m3_pos(z1, 20) ^ _m6(z2, 9, 14, 5, _A7) ^ z3
        st.index = i_1
        return _tempering(z3, 0x93DD_1400, 0xFA11_8000)
