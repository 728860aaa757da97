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
Xoroshiro / xoshiro generators with the ``**`` scrambler (Blackman and Vigna, 2018).

All three scramble the second state word (the moving one for
``Xoroshiro1024``) with ``rotl(w * 5, 7) * 9``.

=================  ===========  ==========
Generator          state words  period
=================  ===========  ==========
``Xoroshiro256``   4            2**256 - 1
``Xoroshiro512``   8            2**512 - 1
``Xoroshiro1024``  16           2**1024 - 1
=================  ===========  ==========
"""

from ._base import BaseRandom
from ._bits import MASK64, rot_left
from ._state import ListSeedState

__all__ = [
    'Xoroshiro256',
    'Xoroshiro512',
    'Xoroshiro1024',
]


def _scramble(w: int) -> int:
    return (rot_left((w * 5) & MASK64, 7) * 9) & MASK64


class BaseXoroshiro(BaseRandom, register=False):
    FAMILY = 'xoroshiro'
    OUTPUT_BITS = 64
    SIZE: int

    def _new_state(self):
        return ListSeedState(size=self.SIZE, bits=64)

    def _setstate(self, seed: int):
        self._state.seed(seed)

    def _setstate_words(self, words):
        self._state.seed_from_words(words)


class Xoroshiro256(BaseXoroshiro):
    """xoshiro256**, the default general-purpose generator.

    Examples
    --------
    .. code-block:: python

        >>> from prngkit import Xoroshiro256
        >>> hex(Xoroshiro256(1).next())
        '0xb3f2af6d0fc710c5'
    """
    SIZE = 4

    def next(self) -> int:
        s = self._state.items
        s1 = s[1]
        out = _scramble(s1)
        t = (s1 << 17) & MASK64
        s[2] ^= s[0]
        s[3] ^= s1
        s[1] ^= s[2]
        s[0] ^= s[3]
        s[2] ^= t
        s[3] = rot_left(s[3], 45)
        return out


class Xoroshiro512(BaseXoroshiro):
    """xoshiro512**."""
    SIZE = 8

    def next(self) -> int:
        s = self._state.items
        s1 = s[1]
        out = _scramble(s1)
        t = (s1 << 11) & MASK64
        s[2] ^= s[0]
        s[5] ^= s1
        s[1] ^= s[2]
        s[7] ^= s[3]
        s[3] ^= s[4]
        s[4] ^= s[5]
        s[0] ^= s[6]
        s[6] ^= s[7]
        s[6] ^= t
        s[7] = rot_left(s[7], 21)
        return out


class Xoroshiro1024(BaseXoroshiro):
    """xoroshiro1024**, a 16-word circular variant with a moving cursor."""
    SIZE = 16

    def next(self) -> int:
        st = self._state
        s = st.items
        p = st.index
        q = (p + 1) & 0xF
        s0 = s[q]
        s15 = s[p]
        out = _scramble(s0)
        s15 ^= s0
        s[p] = rot_left(s0, 25) ^ s15 ^ ((s15 << 27) & MASK64)
        s[q] = rot_left(s15, 36)
        st.index = q
        return out
