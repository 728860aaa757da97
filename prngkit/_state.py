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
Internal state models of the generators.

Every generator keeps its whole internal state in one of the dataclasses
below. They hold plain Python integers only, compare by value, and convert
to and from JSON-compatible dictionaries (see :mod:`prngkit._snapshot`).

============================  ===================================================
State model                   Used by
============================  ===================================================
:class:`ScalarState`          FastRand32, FastRand63, Pcg64_32, Pcg128_64
:class:`ListSeedState`        LFib*, Melg*, Mrg*, Well*, Xoroshiro*
:class:`CounterKeyState`      Squares32, Squares64
:class:`CollatzWeylState`     Cwg64, Cwg128_64, Cwg128
:class:`ExtendedState`        Pcg1024_32
============================  ===================================================
"""

import numbers
from dataclasses import dataclass, field
from typing import Any, Dict, List

from ._bits import MASK64, is_uint128_seed, join128, mask_for, split128
from ._error import SeedSizeError, SeedTypeError, SnapshotFormatError, ZeroLengthError
from ._seed import canonical_seed
from ._splitmix import SplitMix64, expand_seed

__all__ = [
    'ScalarState',
    'ListSeedState',
    'CounterKeyState',
    'CollatzWeylState',
    'ExtendedState',
    'init_key',
    'model_to_dict',
    'model_from_dict',
]

_NORMALIZE = 2.0 ** -64


def _require(data: Dict[str, Any], *keys):
    missing = [k for k in keys if k not in data]
    if missing:
        raise SnapshotFormatError(f"state dictionary misses key(s) {missing!r}")


@dataclass
class ScalarState:
    """A single ``bits``-wide word.

    Attributes
    ----------
    bits : int
        Word width.
    value : int
        Current word, in ``[0, 2**bits)``.
    """
    bits: int
    value: int = 0

    KIND = 'scalar'

    def geometry(self) -> Dict[str, int]:
        return {'bits': self.bits}

    def to_dict(self) -> Dict[str, Any]:
        return {'kind': self.KIND, 'bits': self.bits, 'value': self.value}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ScalarState':
        _require(data, 'bits', 'value')
        return cls(bits=int(data['bits']), value=int(data['value']) & mask_for(int(data['bits'])))


@dataclass
class ListSeedState:
    """A circular list of ``size`` words of width ``bits`` with a cursor.

    The list is filled from the SplitMix64 stream of the seed; the cursor is
    reset to ``0`` on every reseed. Algorithms that pair the list with an
    extra word (MELG) simply allocate one more word and keep their cursor
    below their own modulus.

    Attributes
    ----------
    size : int
        Number of words.
    bits : int
        Word width, in ``[1, 64]``.
    items : list of int
        The words.
    index : int
        Cursor, always in ``[0, size)``.
    """
    size: int
    bits: int
    items: List[int] = field(default_factory=list)
    index: int = 0

    KIND = 'list'

    def geometry(self) -> Dict[str, int]:
        """Return the shape of the state: its size, word width and word count."""
        return {'size': self.size, 'bits': self.bits, 'words': len(self.items)}

    def seed(self, seed):
        """Fill the list from the SplitMix64 stream of ``seed``.

        Seeds wider than 64 bits contribute their low 64 bits only.
        """
        self.items = expand_seed(canonical_seed(seed) & MASK64, self.size, self.bits)
        self.index = 0

    def seed_from_words(self, words):
        """Fill the list from explicit words.

        The first ``len(words)`` slots take the given words, masked to
        ``bits``; the remaining slots are filled from the SplitMix64 stream
        seeded with the last given word.

        Raises
        ------
        ZeroLengthError
            If ``words`` is empty.
        SeedSizeError
            If ``words`` holds more than ``size`` words.
        SeedTypeError
            If a word is not an integer.
        """
        words = list(words)
        if len(words) == 0:
            raise ZeroLengthError('seed sequence')
        if len(words) > self.size:
            raise SeedSizeError(len(words), self.size)
        for w in words:
            if isinstance(w, bool) or not isinstance(w, numbers.Integral):
                raise SeedTypeError(w)
        mask = mask_for(self.bits)
        head = [int(w) & mask for w in words]
        tail = expand_seed(int(words[-1]) & MASK64, self.size - len(head), self.bits)
        self.items = head + tail
        self.index = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'kind': self.KIND,
            'size': self.size,
            'bits': self.bits,
            'items': list(self.items),
            'index': self.index,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ListSeedState':
        _require(data, 'size', 'bits', 'items', 'index')
        size = int(data['size'])
        items = [int(v) for v in data['items']]
        index = int(data['index'])
        if len(items) != size:
            raise SnapshotFormatError(f"'items' holds {len(items)} words, 'size' says {size}")
        if not 0 <= index < size:
            raise SnapshotFormatError(f"'index' {index} is outside [0, {size})")
        mask = mask_for(int(data['bits']))
        return cls(size=size, bits=int(data['bits']), items=[v & mask for v in items], index=index)


def init_key(seed: int) -> int:
    """Build a Squares key from a 64-bit seed.

    The key is made of sixteen hexadecimal digits drawn from ``1..15``, so
    no digit is zero. The upper eight digits are all different. The ninth
    digit is chosen to differ from the eighth one, and the lower eight
    digits are all different. Every digit comes from the same SplitMix64
    stream. The key is forced odd.

    Parameters
    ----------
    seed : int
        Seed of the SplitMix64 stream the digits are drawn from.

    Returns
    -------
    int
        An odd 64-bit key.
    """
    digits = list(range(1, 16))
    sm = SplitMix64(seed)

    def draw(n: int) -> int:
        return min(int(float(n) * float(sm()) * _NORMALIZE), n - 1)

    key = 0
    for n in range(15, 7, -1):
        i = draw(n)
        key = (key << 4) + digits[i]
        digits[i], digits[n - 1] = digits[n - 1], digits[i]

    # ninth digit: the eighth one is moved out of reach
    digits[7], digits[14] = digits[14], digits[7]
    i = draw(14)
    key = (key << 4) + digits[i]
    digits[i], digits[14] = digits[14], digits[i]

    for m in range(7):
        i = draw(14 - m)
        key = (key << 4) + digits[i]
        digits[i], digits[13 - m] = digits[13 - m], digits[i]

    return (key & MASK64) | 1


@dataclass
class CounterKeyState:
    """A 64-bit counter paired with a 64-bit odd key (Squares generators).

    Reseeding resets the counter to zero and derives the key with
    :func:`init_key`.
    """
    counter: int = 0
    key: int = 0

    KIND = 'counter_key'

    def geometry(self) -> Dict[str, int]:
        return {}

    def seed(self, seed):
        self.counter = 0
        self.key = init_key(canonical_seed(seed) & MASK64)

    def to_dict(self) -> Dict[str, Any]:
        return {'kind': self.KIND, 'counter': self.counter, 'key': self.key}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CounterKeyState':
        _require(data, 'counter', 'key')
        return cls(counter=int(data['counter']) & MASK64, key=int(data['key']) & MASK64)


@dataclass
class CollatzWeylState:
    """State of the Collatz-Weyl generators.

    Attributes
    ----------
    value_bits : int
        Width of ``a``, ``s`` and ``weyl`` (64 or 128).
    state_bits : int
        Width of ``state`` (64 or 128).
    a : int
        Running sum of the successive states.
    s : int
        Odd Weyl increment.
    state : int
        Collatz state.
    weyl : int
        Weyl counter.
    """
    value_bits: int
    state_bits: int
    a: int = 0
    s: int = 0
    state: int = 0
    weyl: int = 0

    KIND = 'collatz_weyl'

    def geometry(self) -> Dict[str, int]:
        return {'value_bits': self.value_bits, 'state_bits': self.state_bits}

    def seed(self, seed):
        """Reset ``a`` and ``weyl`` and draw ``s`` and ``state`` from SplitMix64.

        For 128-bit states, a seed wider than 64 bits feeds the high halves
        from the SplitMix64 stream of its high word and the low halves from
        the stream of its low word. Narrower seeds feed both halves from a
        single stream.
        """
        seed = canonical_seed(seed)
        self.a = 0
        self.weyl = 0
        if self.state_bits == 64:
            sm = SplitMix64(seed & MASK64)
            self.s = sm() | 1
            self.state = sm()
            return

        if is_uint128_seed(seed):
            hi, lo = split128(seed)
            sm_hi, sm_lo = SplitMix64(hi), SplitMix64(lo)
        else:
            sm_hi = sm_lo = SplitMix64(seed)
        if self.value_bits == 64:
            self.s = sm_lo() | 1
            self.state = join128(sm_hi(), sm_lo())
        else:
            self.s = join128(sm_hi(), sm_lo() | 1)
            self.state = join128(sm_hi(), sm_lo())

    def to_dict(self) -> Dict[str, Any]:
        return {
            'kind': self.KIND,
            'value_bits': self.value_bits,
            'state_bits': self.state_bits,
            'a': self.a,
            's': self.s,
            'state': self.state,
            'weyl': self.weyl,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CollatzWeylState':
        _require(data, 'value_bits', 'state_bits', 'a', 's', 'state', 'weyl')
        vmask = mask_for(int(data['value_bits']))
        return cls(
            value_bits=int(data['value_bits']),
            state_bits=int(data['state_bits']),
            a=int(data['a']) & vmask,
            s=int(data['s']) & vmask,
            state=int(data['state']) & mask_for(int(data['state_bits'])),
            weyl=int(data['weyl']) & vmask,
        )


@dataclass
class ExtendedState:
    """A base scalar state paired with an extension table (PCG extended generators).

    Attributes
    ----------
    base : ScalarState
        State of the underlying small generator.
    extended : list of int
        The extension table.
    extended_bits : int
        Width of the table words.
    """
    base: ScalarState
    extended: List[int] = field(default_factory=list)
    extended_bits: int = 32

    KIND = 'extended'

    def geometry(self) -> Dict[str, int]:
        return {
            'base_bits': self.base.bits,
            'extended_bits': self.extended_bits,
            'extended_size': len(self.extended),
        }

    def seed_extended(self, seed, size: int):
        """Fill the extension table with ``size`` words of the SplitMix stream of ``seed``."""
        self.extended = expand_seed(canonical_seed(seed) & MASK64, size, self.extended_bits)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'kind': self.KIND,
            'base': self.base.to_dict(),
            'extended': list(self.extended),
            'extended_bits': self.extended_bits,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ExtendedState':
        _require(data, 'base', 'extended', 'extended_bits')
        base = model_from_dict(data['base'])
        if not isinstance(base, ScalarState):
            raise SnapshotFormatError(f"'base' must be a scalar state (got {base.KIND!r})")
        mask = mask_for(int(data['extended_bits']))
        return cls(
            base=base,
            extended=[int(v) & mask for v in data['extended']],
            extended_bits=int(data['extended_bits']),
        )


_STATE_KINDS = {
    cls.KIND: cls
    for cls in (ScalarState, ListSeedState, CounterKeyState, CollatzWeylState, ExtendedState)
}


def model_to_dict(state) -> Dict[str, Any]:
    """Convert a state model to a JSON-compatible dictionary."""
    return state.to_dict()


def model_from_dict(data):
    """Rebuild a state model from :func:`model_to_dict` output.

    Raises
    ------
    SnapshotFormatError
        If the dictionary has no known ``'kind'`` or misses a field.
    """
    if not isinstance(data, dict):
        raise SnapshotFormatError(f"state must be a dictionary (got {type(data).__name__})")
    kind = data.get('kind')
    if kind not in _STATE_KINDS:
        raise SnapshotFormatError(f"unknown state kind {kind!r}")
    try:
        return _STATE_KINDS[kind].from_dict(data)
    except (TypeError, ValueError) as e:
        if isinstance(e, SnapshotFormatError):
            raise
        raise SnapshotFormatError(f"malformed {kind!r} state: {e}") from e
