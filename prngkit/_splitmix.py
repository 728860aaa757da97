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
SplitMix seed expanders.

SplitMix64 turns one 64-bit seed into an arbitrarily long stream of
well-mixed 64-bit words. Every multi-word generator of prngkit fills its
internal state from that stream; the 63, 32 and 31-bit variants keep the
upper bits of the same words.

Two renditions are provided:

* **Scalar classes** (:class:`SplitMix64`, :class:`SplitMix63`,
  :class:`SplitMix32`, :class:`SplitMix31`): stateful callables working on
  Python integers, used when a handful of words is needed.
* **Bulk kernel** (:func:`splitmix64_fill`): an ``@numba.njit`` kernel
  filling a ``numpy.uint64`` buffer, used by :func:`expand_seed` to seed
  the large state lists (up to 1597 words) in one call.

Both renditions produce the same words for the same seed.
"""

import numba
import numpy as np

from ._bits import MASK64
from ._seed import canonical_seed

__all__ = [
    'SplitMix64',
    'SplitMix63',
    'SplitMix32',
    'SplitMix31',
    'splitmix64_fill',
    'expand_seed',
]

_GOLDEN_GAMMA = 0x9E37_79B9_7F4A_7C15
_MIX_MUL_1 = 0xBF58_476D_1CE4_E5B9
_MIX_MUL_2 = 0x94D0_49BB_1331_11EB


# ──────────────────────────────────────────────────────────────────────
#  Bulk kernel
# ──────────────────────────────────────────────────────────────────────

@numba.njit(inline='always')
def _splitmix64_mix(z):
    """Finalize one SplitMix64 word (all operands ``uint64``)."""
    z = (z ^ (z >> np.uint64(30))) * np.uint64(0xBF58476D1CE4E5B9)
    z = (z ^ (z >> np.uint64(27))) * np.uint64(0x94D049BB133111EB)
    return z ^ (z >> np.uint64(31))


@numba.njit
def splitmix64_fill(seed, out):
    """Fill ``out`` with successive SplitMix64 words.

    Parameters
    ----------
    seed : np.uint64
        Initial SplitMix64 state.
    out : np.ndarray
        A one-dimensional ``uint64`` array, overwritten in place.

    Returns
    -------
    state : np.uint64
        The SplitMix64 state after the last word, so that a fill can be
        resumed.
    """
    state = seed
    for i in range(out.shape[0]):
        state = state + np.uint64(0x9E3779B97F4A7C15)
        out[i] = _splitmix64_mix(state)
    return state


def expand_seed(seed, count: int, bits: int = 64):
    """Expand one seed into ``count`` words of width ``bits``.

    Parameters
    ----------
    seed : int, float or None
        Any seed accepted by :func:`~prngkit._seed.canonical_seed`; only its
        low 64 bits are used.
    count : int
        Number of words to produce.
    bits : int, optional
        Width of the produced words, in ``[1, 64]``; each word keeps the
        upper ``bits`` bits of the SplitMix64 word. Defaults to 64.

    Returns
    -------
    list of int
        ``count`` Python integers, identical to ``count`` successive calls of
        the matching scalar class.

    Examples
    --------
    .. code-block:: python

        >>> from prngkit._splitmix import expand_seed
        >>> [hex(w) for w in expand_seed(1, 2, bits=32)]
        ['0x910a2dec', '0xbeeb8da1']
    """
    if not 1 <= bits <= 64:
        raise ValueError(f'SplitMix words are 1 to 64 bits wide (got {bits}).')
    out = np.empty(count, dtype=np.uint64)
    splitmix64_fill(np.uint64(canonical_seed(seed) & MASK64), out)
    if bits != 64:
        out >>= np.uint64(64 - bits)
    return out.tolist()


# ──────────────────────────────────────────────────────────────────────
#  Scalar expanders
# ──────────────────────────────────────────────────────────────────────

def _mix64(z: int) -> int:
    z = ((z ^ (z >> 30)) * _MIX_MUL_1) & MASK64
    z = ((z ^ (z >> 27)) * _MIX_MUL_2) & MASK64
    return z ^ (z >> 31)


class SplitMix64:
    """SplitMix64 seed expander (Steele, Lea and Flood, 2014).

    Each call advances a 64-bit Weyl counter by the golden gamma
    ``0x9e3779b97f4a7c15`` and returns the counter after two
    multiply-xor-shift rounds.

    Parameters
    ----------
    seed : int, float or None, optional
        Initial seed; ``None`` reads the clock. Negative integers wrap to 64
        bits, wider integers keep their low 64 bits.

    See Also
    --------
    expand_seed : Bulk expansion into a list of words.

    Examples
    --------
    .. code-block:: python

        >>> from prngkit import SplitMix64
        >>> sm = SplitMix64(1)
        >>> hex(sm()), hex(sm())
        ('0x910a2dec89025cc1', '0xbeeb8da1658eec67')
    """
    OUTPUT_BITS = 64

    def __init__(self, seed=None):
        self._state = canonical_seed(seed) & MASK64

    def __call__(self) -> int:
        self._state = (self._state + _GOLDEN_GAMMA) & MASK64
        return _mix64(self._state) >> (64 - self.OUTPUT_BITS)

    def __iter__(self):
        while True:
            yield self()

    def take(self, count: int):
        """Return the next ``count`` words as a list."""
        return [self() for _ in range(count)]

    @classmethod
    def at(cls, seed, index: int) -> int:
        """Return the word of rank ``index`` of the stream seeded with ``seed``.

        The stream is a pure function of seed and index, so any word can be
        recomputed without replaying the words before it.
        """
        state = (canonical_seed(seed) + (index + 1) * _GOLDEN_GAMMA) & MASK64
        return _mix64(state) >> (64 - cls.OUTPUT_BITS)


class SplitMix63(SplitMix64):
    """SplitMix64 words shifted down to 63 bits."""
    OUTPUT_BITS = 63


class SplitMix32(SplitMix64):
    """SplitMix64 words shifted down to 32 bits."""
    OUTPUT_BITS = 32


class SplitMix31(SplitMix64):
    """SplitMix64 words shifted down to 31 bits."""
    OUTPUT_BITS = 31
