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
Additive lagged Fibonacci generators.

``x(i) = x(i - SIZE) + x(i - K) mod 2**OUTPUT_BITS``, with lags taken from
Knuth's table of primitive trinomials. The list of the last ``SIZE``
values is kept as a circular buffer.

=============  ==========  ======  ============
Generator      SIZE (=R)   K (=S)  period
=============  ==========  ======  ============
``LFib78``     17          5       ~2**78
``LFib116``    55          24      ~2**116
``LFib668``    607         273     ~2**668
``LFib1340``   1279        861     ~2**1340
=============  ==========  ======  ============
"""

from ._base import BaseRandom
from ._bits import mask_for
from ._state import ListSeedState

__all__ = [
    'BaseLFib',
    'LFib78',
    'LFib116',
    'LFib668',
    'LFib1340',
]


class BaseLFib(BaseRandom, register=False):
    """Lagged Fibonacci recurrence over ``OUTPUT_BITS``-bit words.

    Subclasses set ``SIZE`` (the long lag) and ``K`` (the short lag, with
    ``0 < K < SIZE``). ``OUTPUT_BITS`` defaults to 64 and may be lowered to
    build small instances whose whole period can be enumerated.
    """
    FAMILY = 'lfib'
    OUTPUT_BITS = 64
    SIZE: int
    K: int

    def _new_state(self):
        return ListSeedState(size=self.SIZE, bits=self.OUTPUT_BITS)

    def _setstate(self, seed: int):
        self._state.seed(seed)

    def _setstate_words(self, words):
        self._state.seed_from_words(words)

    def next(self) -> int:
        st = self._state
        items = st.items
        i = st.index
        k = i + self.SIZE - self.K if i < self.K else i - self.K
        v = (items[k] + items[i]) & mask_for(self.OUTPUT_BITS)
        items[i] = v
        st.index = (i + 1) % self.SIZE
        return v


class LFib78(BaseLFib):
    """Lagged Fibonacci generator with lags (17, 5).

    Examples
    --------
    .. code-block:: python

        >>> from prngkit import LFib78
        >>> hex(LFib78(1).next())
        '0x580fd76d4acba81'
    """
    SIZE = 17
    K = 5


class LFib116(BaseLFib):
    """Lagged Fibonacci generator with lags (55, 24)."""
    SIZE = 55
    K = 24


class LFib668(BaseLFib):
    """Lagged Fibonacci generator with lags (607, 273)."""
    SIZE = 607
    K = 273


class LFib1340(BaseLFib):
    """Lagged Fibonacci generator with lags (1279, 861)."""
    SIZE = 1279
    K = 861
