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
Permuted Congruential Generators (O'Neill, 2014).

A PCG advances a plain linear congruential state and outputs a permutation
of the previous state: a xor-shift followed by a state-dependent shift
(``Pcg64_32``) or rotation (``Pcg128_64``). ``Pcg1024_32`` xors the
``Pcg64_32`` output with a 1024-word extension table that is itself
advanced every ``2**32`` steps.

==============  ===========  ===================  ===========
Generator       output bits  state                period
==============  ===========  ===================  ===========
``Pcg64_32``    32           64 bits              2**64
``Pcg128_64``   64           128 bits             2**128
``Pcg1024_32``  32           64 bits + 1024 x 32  2**32830
==============  ===========  ===================  ===========
"""

from ._base import BaseRandom
from ._bits import MASK32, MASK64, MASK128, is_uint128_seed, join128, rot_right
from ._state import ExtendedState, ScalarState

__all__ = [
    'Pcg64_32',
    'Pcg128_64',
    'Pcg1024_32',
]

_MULT_64 = 0x5851_F42D_4C95_7F2D
_INC_64 = 0x1405_7B7E_F767_814F
_MULT_128 = join128(0x2360_ED05_1FC6_5DA4, 0x4385_DF64_9FCC_F645)
_INC_128 = join128(0x5851_F42D_4C95_7F2D, 0x1405_7B7E_F767_814F)


def _pcg64_32_step(state: int):
    """Return ``(new_state, output)`` for one ``Pcg64_32`` step from ``state``."""
    new_state = (_MULT_64 * state + _INC_64) & MASK64
    out = ((state ^ (state >> 22)) >> (22 + (state >> 61))) & MASK32
    return new_state, out


def _invxrs(value: int, bits: int, shift: int) -> int:
    """Invert ``value ^ (value >> shift)`` on a ``bits``-wide word."""
    if 2 * shift >= bits:
        return value ^ (value >> shift)
    nb = bits - shift
    bot_mask = (1 << (bits - 2 * shift)) - 1
    top_mask = ~bot_mask & MASK32
    top = value ^ (value >> shift)
    bot = _invxrs((top | (value & bot_mask)) & ((1 << nb) - 1), nb, shift)
    return (top & top_mask) | (bot & bot_mask)


class BasePcg(BaseRandom, register=False):
    FAMILY = 'pcg'


class Pcg64_32(BasePcg):
    """PCG XSH-RS: 64-bit LCG state, 32-bit output.

    The state is the seed itself; seeds wider than 64 bits keep their low
    word.

    Examples
    --------
    .. code-block:: python

        >>> from prngkit import Pcg64_32
        >>> g = Pcg64_32(1)
        >>> hex(g.next()), hex(g.next())
        ('0x0', '0x2bb70e8f')
    """
    OUTPUT_BITS = 32

    def _new_state(self):
        return ScalarState(bits=64)

    def _setstate(self, seed: int):
        self._state.value = seed & MASK64

    def next(self) -> int:
        self._state.value, out = _pcg64_32_step(self._state.value)
        return out


class Pcg128_64(BasePcg):
    """PCG XSL-RR: 128-bit LCG state, 64-bit output.

    A 64-bit seed ``s`` gives the state ``(s, ~s)`` (high word, low word);
    a wider seed is the state itself.
    """
    OUTPUT_BITS = 64

    def _new_state(self):
        return ScalarState(bits=128)

    def _setstate(self, seed: int):
        if is_uint128_seed(seed):
            self._state.value = seed & MASK128
        else:
            self._state.value = join128(seed, ~seed)

    def next(self) -> int:
        prev = self._state.value
        self._state.value = (_MULT_128 * prev + _INC_128) & MASK128
        hi = prev >> 64
        return rot_right((prev & MASK64) ^ hi, hi >> 58)


class Pcg1024_32(BasePcg):
    """Extended PCG: ``Pcg64_32`` xor-ed with a 1024-word table.

    The table is indexed by bits 22 to 31 of the inner state and is advanced
    each time the low 32 bits of that state reach zero, giving
    ``1024``-dimensional equidistribution.
    """
    OUTPUT_BITS = 32
    TABLE_SIZE = 1024
    _INDEX_SHIFT = 22
    _STEP_MULT = 0xACB8_6D69
    _STEP_MULT_2 = 0x2C92_77B5

    def _new_state(self):
        return ExtendedState(base=ScalarState(bits=64), extended=[0] * self.TABLE_SIZE, extended_bits=32)

    def _setstate(self, seed: int):
        self._state.base.value = seed & MASK64
        self._state.seed_extended(seed, self.TABLE_SIZE)

    def next(self) -> int:
        st = self._state
        cur = st.base.value
        if cur & MASK32 == 0:
            self._advance_table()
        ext = st.extended[(cur >> self._INDEX_SHIFT) & (self.TABLE_SIZE - 1)]
        st.base.value, out = _pcg64_32_step(cur)
        return out ^ ext

    def _advance_table(self):
        carry = False
        for i in range(self.TABLE_SIZE):
            if carry:
                carry = self._external_step(i)
            if self._external_step(i):
                carry = True

    def _external_step(self, i: int) -> bool:
        table = self._state.extended
        v = table[i]
        st = (self._STEP_MULT * (v ^ (v >> 22))) & MASK32
        st = _invxrs(st, 32, 4 + (st >> 28))
        st = (self._STEP_MULT_2 * st + 2 * (i + 1)) & MASK32
        st ^= st >> 16
        table[i] = st
        return st == (st & 3)
