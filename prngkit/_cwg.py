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
Collatz-Weyl generators (Działa, 2022).

The state is a Collatz-like multiplicative recurrence perturbed by a Weyl
sequence of odd increment ``s``; ``a`` accumulates the successive states
and feeds the multiplier and the output mix. Every odd ``s`` gives a
distinct stream.

==============  ===========  ===========  =============
Generator       output bits  state bits   period
==============  ===========  ===========  =============
``Cwg64``       64           4 x 64       >= 2**70
``Cwg128_64``   64           3 x 64 + 128 >= 2**71
``Cwg128``      128          4 x 128      >= 2**135
==============  ===========  ===========  =============
"""

from ._base import BaseRandom
from ._bits import MASK64, MASK128
from ._state import CollatzWeylState

__all__ = [
    'Cwg64',
    'Cwg128_64',
    'Cwg128',
]


class BaseCwg(BaseRandom, register=False):
    """Common seeding of the Collatz-Weyl generators.

    ``a`` and ``weyl`` start at zero; ``s`` (forced odd) and ``state`` are
    drawn from SplitMix64. For the 128-bit states a seed wider than 64 bits
    feeds the high and low halves from two distinct SplitMix64 streams.
    """
    FAMILY = 'cwg'
    VALUE_BITS = 64
    STATE_BITS = 64

    def _new_state(self):
        return CollatzWeylState(value_bits=self.VALUE_BITS, state_bits=self.STATE_BITS)

    def _setstate(self, seed: int):
        self._state.seed(seed)


class Cwg64(BaseCwg):
    """64-bit Collatz-Weyl generator with 64-bit output.

    Examples
    --------
    .. code-block:: python

        >>> from prngkit import Cwg64
        >>> hex(Cwg64(1).next())
        '0xd15981ccf78370af'
    """
    OUTPUT_BITS = 64

    def next(self) -> int:
        st = self._state
        st.a = (st.a + st.state) & MASK64
        st.weyl = (st.weyl + st.s) & MASK64
        st.state = (((st.state >> 1) * (st.a | 1)) ^ st.weyl) & MASK64
        return st.state ^ (st.a >> 48)


class Cwg128_64(BaseCwg):
    """Collatz-Weyl generator with a 128-bit state and 64-bit output."""
    OUTPUT_BITS = 64
    STATE_BITS = 128

    def next(self) -> int:
        st = self._state
        st.a = (st.a + (st.state & MASK64)) & MASK64
        st.weyl = (st.weyl + st.s) & MASK64
        st.state = (((st.state | 1) * (st.a >> 1)) ^ st.weyl) & MASK128
        return (st.state ^ (st.a >> 48)) & MASK64


class Cwg128(BaseCwg):
    """128-bit Collatz-Weyl generator with 128-bit output."""
    OUTPUT_BITS = 128
    VALUE_BITS = 128
    STATE_BITS = 128

    def next(self) -> int:
        st = self._state
        st.a = (st.a + st.state) & MASK128
        st.weyl = (st.weyl + st.s) & MASK128
        st.state = (((st.state >> 1) * (st.a | 1)) ^ st.weyl) & MASK128
        return st.state ^ (st.a >> 96)
