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
Multiple Recursive Generators.

``Mrg287`` is Marsaglia's four-lag additive generator modulo ``2**32``;
``Mrg1457`` and ``Mrg49507`` are L'Ecuyer-style MRGs modulo the Mersenne
prime ``2**31 - 1``, with 31-bit outputs.

=============  ===========  ===========  ==========
Generator      state words  output bits  period
=============  ===========  ===========  ==========
``Mrg287``     256          32           2**287
``Mrg1457``    47           31           2**1457
``Mrg49507``   1597         31           2**49507
=============  ===========  ===========  ==========
"""

from ._base import BaseRandom
from ._bits import MASK32, MASK64
from ._state import ListSeedState

__all__ = [
    'Mrg287',
    'Mrg1457',
    'Mrg49507',
]

_MODULO_31 = 0x7FFF_FFFF


class BaseMrg(BaseRandom, register=False):
    """MRG state handling: a list of ``SIZE`` words of ``OUTPUT_BITS`` bits."""
    FAMILY = 'mrg'
    SIZE: int

    def _new_state(self):
        return ListSeedState(size=self.SIZE, bits=self.OUTPUT_BITS)

    def _setstate(self, seed: int):
        self._state.seed(seed)

    def _setstate_words(self, words):
        self._state.seed_from_words(words)


class Mrg287(BaseMrg):
    """Marsaglia's lagged additive generator, lags 55, 119 and 179.

    Examples
    --------
    .. code-block:: python

        >>> from prngkit import Mrg287
        >>> hex(Mrg287(1).next())
        '0xdf8fa498'
    """
    OUTPUT_BITS = 32
    SIZE = 256

    def next(self) -> int:
        st = self._state
        items = st.items
        i = st.index
        v = (items[(i - 55) & 0xFF] + items[(i - 119) & 0xFF] + items[(i - 179) & 0xFF] + items[i]) & MASK32
        items[i] = v
        st.index = (i + 1) & 0xFF
        return v


class Mrg1457(BaseMrg):
    """MRG of order 47 modulo ``2**31 - 1``."""
    OUTPUT_BITS = 31
    SIZE = 47
    MULT = 0x0408_0000

    def next(self) -> int:
        st = self._state
        items = st.items
        i = st.index
        n = self.SIZE
        v = (self.MULT * (items[(i - 1) % n] + items[(i - 24) % n] + items[i])) % _MODULO_31
        items[i] = v
        st.index = (i + 1) % n
        return v


class Mrg49507(BaseMrg):
    """MRG of order 1597 modulo ``2**31 - 1``.

    The multiplier ``-(2**25 + 2**7)`` is applied as its 64-bit two's
    complement and the product wraps to 64 bits before the reduction.
    """
    OUTPUT_BITS = 31
    SIZE = 1597
    MULT = 0xFFFF_FFFF_FDFF_FF80

    def next(self) -> int:
        st = self._state
        items = st.items
        i = st.index
        n = self.SIZE
        v = ((self.MULT * (items[(i - 7) % n] + items[i])) & MASK64) % _MODULO_31
        items[i] = v
        st.index = (i + 1) % n
        return v
