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
Counter-based Squares generators (Widynski, 2020).

Each output is a pure function of a 64-bit counter and a 64-bit key: a few
rounds of squaring and half swapping. The generator can therefore jump
anywhere in its stream by moving the counter.
"""

from ._base import BaseRandom
from ._bits import MASK32, MASK64
from ._error import IntegralTypeError, PositiveValueError
from ._state import CounterKeyState

__all__ = [
    'Squares32',
    'Squares64',
]


def _swap_halves(x: int) -> int:
    """Wrap ``x`` to 64 bits, then exchange its 32-bit halves."""
    x &= MASK64
    return ((x >> 32) | (x << 32)) & MASK64


def _three_rounds(counter: int, key: int):
    """Return ``(x, y, z)`` after the three rounds shared by both variants."""
    y = (counter * key) & MASK64
    z = (y + key) & MASK64
    x = _swap_halves(y * y + y)
    x = _swap_halves(x * x + z)
    x = _swap_halves(x * x + y)
    return x, y, z


class BaseSquares(BaseRandom, register=False):
    FAMILY = 'squares'

    def _new_state(self):
        return CounterKeyState()

    def _setstate(self, seed: int):
        self._state.seed(seed)

    def jump(self, n: int):
        """Skip the next ``n`` outputs in constant time."""
        if isinstance(n, bool) or not isinstance(n, int):
            raise IntegralTypeError(n, 'n')
        if n < 0:
            raise PositiveValueError(n)
        self._state.counter = (self._state.counter + n) & MASK64


class Squares32(BaseSquares):
    """Squares with four rounds and a 32-bit output.

    Examples
    --------
    .. code-block:: python

        >>> from prngkit import Squares32
        >>> hex(Squares32(1).next())
        '0xe98228c6'
    """
    OUTPUT_BITS = 32

    def next(self) -> int:
        st = self._state
        st.counter = (st.counter + 1) & MASK64
        x, _, z = _three_rounds(st.counter, st.key)
        return (((x * x + z) & MASK64) >> 32) & MASK32


class Squares64(BaseSquares):
    """Squares with five rounds and a 64-bit output."""
    OUTPUT_BITS = 64

    def next(self) -> int:
        st = self._state
        st.counter = (st.counter + 1) & MASK64
        x, y, z = _three_rounds(st.counter, st.key)
        t = x = (x * x + z) & MASK64
        x = _swap_halves(x)
        return t ^ (((x * x + y) & MASK64) >> 32)
