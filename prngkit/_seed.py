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

"""Seed normalization shared by the seed expanders and the generators."""

import numbers
import time

from ._bits import MASK64, MASK128
from ._error import FloatSeedRangeError, SeedTypeError

__all__ = [
    'clock_seed',
    'canonical_seed',
    'float_to_seed',
]

_TWO_POW_64 = 18446744073709551616.0


def clock_seed() -> int:
    """Return a 64-bit seed derived from the wall clock.

    The nanosecond tick count is read once; its fast-changing low 31 bits
    are moved to the high half of the seed and its four high bytes are
    mirrored into the low half, so that two seeds taken a few nanoseconds
    apart still differ in their high bits.

    Returns
    -------
    int
        An unsigned 64-bit integer.
    """
    ticks = time.time_ns() & MASK64
    return (
        ((ticks & 0x7FFF_FFFF) << 32)
        + ((ticks >> 56) & 0x0000_00FF)
        + ((ticks >> 40) & 0x0000_FF00)
        + ((ticks >> 24) & 0x00FF_0000)
        + ((ticks >> 8) & 0xFF00_0000)
    ) & MASK64


def float_to_seed(seed: float) -> int:
    """Scale a float seed in ``[0.0, 1.0)`` to a 64-bit integer seed.

    Raises
    ------
    FloatSeedRangeError
        If ``seed`` is outside ``[0.0, 1.0)`` or is NaN.
    """
    if not 0.0 <= seed < 1.0:
        raise FloatSeedRangeError(seed)
    return int(seed * _TWO_POW_64)


def canonical_seed(seed) -> int:
    """Map any accepted scalar seed to an unsigned integer below 2**128.

    Parameters
    ----------
    seed : int, float or None
        ``None`` selects :func:`clock_seed`. Negative integers wrap to their
        64-bit two's complement, so ``-1`` and ``0xFFFF_FFFF_FFFF_FFFF``
        seed identically. Integers wider than 128 bits are reduced modulo
        2**128. Floats must lie in ``[0.0, 1.0)``.

    Returns
    -------
    int
        The canonical seed. Values above ``2**64 - 1`` select the 128-bit
        seeding path of the generators that have one.

    Raises
    ------
    FloatSeedRangeError
        For floats outside ``[0.0, 1.0)``.
    SeedTypeError
        For any other type.

    Examples
    --------
    .. code-block:: python

        >>> from prngkit._seed import canonical_seed
        >>> hex(canonical_seed(-2))
        '0xfffffffffffffffe'
        >>> canonical_seed(0.5)
        9223372036854775808
    """
    if seed is None:
        return clock_seed()
    if isinstance(seed, numbers.Integral):
        seed = int(seed)
        if seed < 0:
            return seed & MASK64
        return seed & MASK128
    if isinstance(seed, numbers.Real):
        return float_to_seed(float(seed))
    raise SeedTypeError(seed)
