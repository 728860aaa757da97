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
Fixed-width unsigned integer helpers.

Python integers are unbounded, so every recurrence in prngkit masks its
results explicitly. The masks below give native wrap-around semantics for
31, 32, 63, 64 and 128-bit words; 128-bit values are plain ints whose
high and low 64-bit halves are accessed with :func:`split128`.
"""

from ._error import RotationCountError

__all__ = [
    'MASK31',
    'MASK32',
    'MASK63',
    'MASK64',
    'MASK128',
    'mask_for',
    'rot_left',
    'rot_right',
    'split128',
    'join128',
    'is_uint128_seed',
]

MASK31 = 0x7FFF_FFFF
MASK32 = 0xFFFF_FFFF
MASK63 = 0x7FFF_FFFF_FFFF_FFFF
MASK64 = 0xFFFF_FFFF_FFFF_FFFF
MASK128 = (1 << 128) - 1


def mask_for(bits: int) -> int:
    """Return the all-ones mask of ``bits`` bits."""
    return (1 << bits) - 1


def _check_rotation(count: int, bits: int):
    if count < 0 or count > bits:
        raise RotationCountError(count, bits)


def rot_left(value: int, count: int, bits: int = 64) -> int:
    """Rotate ``value`` left by ``count`` bits within a ``bits``-wide word.

    Parameters
    ----------
    value : int
        Unsigned word; bits above ``bits`` are discarded.
    count : int
        Rotation count, in ``[0, bits]``.
    bits : int, optional
        Word width. Defaults to 64.

    Returns
    -------
    int
        The rotated word.

    Raises
    ------
    RotationCountError
        If ``count`` is negative or greater than ``bits``.

    Examples
    --------
    .. code-block:: python

        >>> from prngkit._bits import rot_left
        >>> hex(rot_left(0x8000_0000_0000_0001, 1))
        '0x3'
    """
    _check_rotation(count, bits)
    mask = (1 << bits) - 1
    value &= mask
    return ((value << count) | (value >> (bits - count))) & mask


def rot_right(value: int, count: int, bits: int = 64) -> int:
    """Rotate ``value`` right by ``count`` bits within a ``bits``-wide word.

    See Also
    --------
    rot_left : The inverse rotation.
    """
    _check_rotation(count, bits)
    mask = (1 << bits) - 1
    value &= mask
    return ((value >> count) | (value << (bits - count))) & mask


def split128(value: int):
    """Return the ``(hi, lo)`` 64-bit halves of a 128-bit word."""
    value &= MASK128
    return value >> 64, value & MASK64


def join128(hi: int, lo: int) -> int:
    """Build a 128-bit word from its 64-bit halves."""
    return ((hi & MASK64) << 64) | (lo & MASK64)


def is_uint128_seed(value: int) -> bool:
    """Tell whether a canonical integer seed needs the 128-bit seeding path."""
    return value > MASK64
