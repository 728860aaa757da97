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
Generator core shared by every algorithm.

A concrete generator subclasses :class:`BaseRandom` and provides:

* ``OUTPUT_BITS``, the width of the words returned by ``next()``;
* ``FAMILY``, a lower-case family tag used by the registry;
* ``_new_state()``, returning a fresh, unseeded state model;
* ``_setstate(seed)``, filling that state from a canonical integer seed;
* ``next()``, advancing the state by one step and returning one word.

List-based generators additionally accept sequences of integers as seeds
through ``_setstate_words(words)``.

Concrete subclasses register themselves in the algorithm registry under
their class name; intermediate family classes opt out with
``class BaseFoo(BaseRandom, register=False)``.
"""

import copy
import math
import numbers
from typing import Any, NamedTuple

import numpy as np

from ._error import (
    IntegralTypeError,
    OutOfRangeError,
    RangeIncoherenceError,
    SeedTypeError,
    StateTypeError,
)
from ._registry import register_algorithm
from ._sampler import DistributionSampler, _as_real
from ._seed import canonical_seed
from ._state import ListSeedState

__all__ = [
    'BaseRandom',
    'GeneratorState',
]

_BPF = 53
_RECIP_BPF = 2.0 ** -_BPF


class GeneratorState(NamedTuple):
    """A detached copy of everything a generator needs to resume its stream.

    Attributes
    ----------
    algorithm : str
        Name of the algorithm the state belongs to.
    state : object
        Deep copy of the internal state model.
    gauss_next : float
        Spare normal value cached by ``gauss()``.
    gauss_valid : bool
        Whether ``gauss_next`` is pending.
    """
    algorithm: str
    state: Any
    gauss_next: float
    gauss_valid: bool


class BaseRandom(DistributionSampler):
    """Base class of all prngkit generators.

    Parameters
    ----------
    seed : int, float, sequence of int, GeneratorState or None, optional
        Initial seed. ``None`` (the default) seeds from the clock. An
        integer seeds through the SplitMix64 expander; negative integers
        wrap to 64 bits, and integers wider than 64 bits select the 128-bit
        seeding path where the algorithm has one. A float must lie in
        ``[0.0, 1.0)``. A sequence of integers directly fills list-based
        states. A :class:`GeneratorState` restores that state.

    Examples
    --------
    .. code-block:: python

        >>> import prngkit
        >>> g = prngkit.Xoroshiro256(1)
        >>> hex(g.next())
        '0xb3f2af6d0fc710c5'
        >>> saved = g.get_state()
        >>> a = g.random()
        >>> g.set_state(saved)
        >>> g.random() == a
        True
    """
    OUTPUT_BITS: int = 64
    FAMILY: str = ''
    ALGORITHM: str = ''
    MAX_BITS_WORDS: int = 64

    def __init_subclass__(cls, register: bool = True, **kwargs):
        super().__init_subclass__(**kwargs)
        cls.ALGORITHM = cls.__name__
        if register:
            register_algorithm(cls.ALGORITHM, cls)

    def __init__(self, seed=None):
        self._state = self._new_state()
        self._gauss_next = 0.0
        self._gauss_valid = False
        if isinstance(seed, GeneratorState):
            self.set_state(seed)
        else:
            self.seed(seed)

    def __repr__(self):
        return f'{self.ALGORITHM}(state={self._state!r})'

    # ──────────────────────────────────────────────────────────────────
    #  Algorithm hooks
    # ──────────────────────────────────────────────────────────────────

    def _new_state(self):
        raise NotImplementedError

    def _setstate(self, seed: int):
        raise NotImplementedError

    def _setstate_words(self, words):
        raise SeedTypeError(words)

    def _check_state(self, state):
        """Raise :class:`StateTypeError` unless ``state`` has the kind and shape of a fresh state."""
        fresh = self._new_state()
        if type(state) is not type(fresh):
            raise StateTypeError(self.ALGORITHM, f'{type(state).__name__} model')
        got = state.geometry()
        if got != fresh.geometry():
            shape = ', '.join(f'{k}={v}' for k, v in got.items())
            raise StateTypeError(self.ALGORITHM, f'{state.KIND}({shape})')
        if isinstance(state, ListSeedState) and not 0 <= state.index < self._cursor_limit(fresh):
            raise StateTypeError(self.ALGORITHM, f'list(cursor={state.index})')

    def _cursor_limit(self, fresh) -> int:
        """Exclusive bound of a list cursor, the list size by default."""
        return fresh.size

    def next(self) -> int:
        """Advance the state by one step and return an ``OUTPUT_BITS``-bit word."""
        raise NotImplementedError

    # ──────────────────────────────────────────────────────────────────
    #  Seeding and state
    # ──────────────────────────────────────────────────────────────────

    def seed(self, seed=None):
        """Reset the internal state from ``seed`` and clear the gauss cache.

        See the class docstring for the accepted seed kinds.
        """
        if isinstance(seed, (list, tuple, np.ndarray)):
            self._setstate_words([int(w) if isinstance(w, np.integer) else w for w in seed])
        else:
            self._setstate(canonical_seed(seed))
        self._gauss_next = 0.0
        self._gauss_valid = False

    def get_state(self) -> GeneratorState:
        """Return a detached snapshot of the generator.

        Drawing from the generator afterwards does not alter the snapshot.
        """
        return GeneratorState(
            algorithm=self.ALGORITHM,
            state=copy.deepcopy(self._state),
            gauss_next=self._gauss_next,
            gauss_valid=self._gauss_valid,
        )

    def set_state(self, state: GeneratorState):
        """Restore a snapshot taken by :meth:`get_state`.

        Raises
        ------
        StateTypeError
            If ``state`` is not a :class:`GeneratorState`, was taken from
            another algorithm, or holds a state model whose shape does not
            fit this generator. The generator is left untouched.
        """
        if not isinstance(state, GeneratorState):
            raise StateTypeError(self.ALGORITHM, type(state).__name__)
        if state.algorithm != self.ALGORITHM:
            raise StateTypeError(self.ALGORITHM, state.algorithm)
        self._check_state(state.state)
        self._state = copy.deepcopy(state.state)
        self._gauss_next = float(state.gauss_next)
        self._gauss_valid = bool(state.gauss_valid)

    # ──────────────────────────────────────────────────────────────────
    #  Raw draws
    # ──────────────────────────────────────────────────────────────────

    def next_bits(self, n: int) -> int:
        """Return an ``n``-bit unsigned integer.

        Requests up to ``OUTPUT_BITS`` bits return the upper bits of one
        word. Wider requests concatenate successive words, first word in
        the most significant position.

        Raises
        ------
        OutOfRangeError
            If ``n`` is not in ``[1, OUTPUT_BITS * MAX_BITS_WORDS]``.
        """
        if isinstance(n, bool) or not isinstance(n, numbers.Integral):
            raise IntegralTypeError(n, 'n')
        bits = self.OUTPUT_BITS
        max_bits = bits * self.MAX_BITS_WORDS
        if not 1 <= n <= max_bits:
            raise OutOfRangeError(n, 1, max_bits)
        if n <= bits:
            return self.next() >> (bits - n)
        value = 0
        remaining = n
        while remaining > 0:
            take = min(bits, remaining)
            value = (value << take) | (self.next() >> (bits - take))
            remaining -= take
        return value

    def random(self) -> float:
        """Return a float uniformly distributed in ``[0.0, 1.0)``.

        Generators wider than 53 bits keep the upper 53 bits of one word;
        narrower ones scale the whole word.
        """
        shift = self.OUTPUT_BITS - _BPF
        if shift > 0:
            return (self.next() >> shift) * _RECIP_BPF
        return self.next() / (1 << self.OUTPUT_BITS)

    def uniform(self, *args) -> float:
        """Return a uniform float.

        * ``uniform()``: in ``[0.0, 1.0)``;
        * ``uniform(max)``: in ``[0.0, max)`` if ``max > 0``, in
          ``(max, 0.0]`` if ``max < 0``;
        * ``uniform(min, max)``: in ``[min, max)``.

        Raises
        ------
        RangeIncoherenceError
            If ``max == 0``, ``min >= max``, or the span is not finite.
        NumericTypeError
            If a bound is not a real number.
        """
        if len(args) == 0:
            return self.random()
        if len(args) == 1:
            high = _as_real(args[0], 'max')
            if high == 0.0 or not math.isfinite(high):
                raise RangeIncoherenceError(0.0, args[0])
            x = high * self.random()
            if abs(x) >= abs(high):
                x = math.nextafter(high, 0.0)
            return x
        if len(args) == 2:
            low = _as_real(args[0], 'min')
            high = _as_real(args[1], 'max')
            span = high - low
            if not (low < high and math.isfinite(span)):
                raise RangeIncoherenceError(args[0], args[1])
            x = low + span * self.random()
            if x >= high:
                x = math.nextafter(high, low)
            return x
        raise TypeError(f'uniform() takes at most 2 arguments ({len(args)} given)')

    __call__ = uniform

    # ──────────────────────────────────────────────────────────────────
    #  Bulk draws
    # ──────────────────────────────────────────────────────────────────

    def random_array(self, size: int) -> np.ndarray:
        """Return ``size`` successive :meth:`random` values as a ``float64`` array."""
        return np.fromiter((self.random() for _ in range(size)), dtype=np.float64, count=size)

    def next_array(self, size: int) -> np.ndarray:
        """Return ``size`` successive :meth:`next` words.

        The array is ``uint32`` for generators up to 32 bits, ``uint64`` up
        to 64 bits, and of ``object`` dtype (Python ints) beyond.
        """
        if self.OUTPUT_BITS <= 32:
            return np.fromiter((self.next() for _ in range(size)), dtype=np.uint32, count=size)
        if self.OUTPUT_BITS <= 64:
            return np.fromiter((self.next() for _ in range(size)), dtype=np.uint64, count=size)
        out = np.empty(size, dtype=object)
        for i in range(size):
            out[i] = self.next()
        return out
