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
Distributions and sequence operations shared by every generator.

:class:`DistributionSampler` is a mixin: it only relies on three members of
the class it is mixed into,

* ``random()``, a float uniformly distributed in ``[0.0, 1.0)``;
* ``next_bits(n)``, an ``n``-bit unsigned integer;
* ``_gauss_next`` / ``_gauss_valid``, the spare value cached by
  :meth:`~DistributionSampler.gauss`.

Argument checks run before the first draw, so a rejected call never moves
the generator.
"""

import bisect
import itertools
import math
import numbers

from ._error import (
    AlphaBetaArgsError,
    EmptySequenceError,
    ExponentialLambdaError,
    GaussSigmaError,
    IntegralTypeError,
    KappaError,
    NumericTypeError,
    ParetoArgsError,
    PositiveValueError,
    ProbaOutOfRangeError,
    RangeIncoherenceError,
    RangeSameValuesError,
    RangeZeroStepError,
    SampleCountError,
    SampleSizesError,
    TypeDomainError,
    WeibullArgsError,
    ZeroLengthError,
)

__all__ = [
    'DistributionSampler',
]

NV_MAGICCONST = 4.0 * math.exp(-0.5) / math.sqrt(2.0)
LOG4 = math.log(4.0)
SG_MAGICCONST = 1.0 + math.log(4.5)
TWOPI = 2.0 * math.pi
_GAMMA_EPSILON = 1e-7
_KAPPA_EPSILON = 1e-6


def _as_int(value, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise IntegralTypeError(value, what)
    return int(value)


def _as_real(value, what: str) -> float:
    if not isinstance(value, numbers.Real):
        raise NumericTypeError(value, what)
    return float(value)


class DistributionSampler:
    """Random distributions and sequence helpers, in the manner of :mod:`random`.

    Every method draws from the host generator through ``random()`` and
    ``next_bits()``; none of them touches the generator state directly.
    """

    # ──────────────────────────────────────────────────────────────────
    #  Integers
    # ──────────────────────────────────────────────────────────────────

    def _randbelow(self, n: int) -> int:
        """Return an unbiased integer in ``[0, n)``, ``n > 0``, by rejection."""
        if n == 1:
            return 0
        k = n.bit_length()
        r = self.next_bits(k)
        while r >= n:
            r = self.next_bits(k)
        return r

    def randint(self, a, b) -> int:
        """Return a random integer in ``[a, b]``; the bounds may be given in any order."""
        a = _as_int(a, 'a')
        b = _as_int(b, 'b')
        if a > b:
            a, b = b, a
        return a + self._randbelow(b - a + 1)

    def randrange(self, start, stop=None, step=1) -> int:
        """Return a random item of ``range(start, stop, step)``.

        With a single argument the range is ``range(0, start)``.

        Raises
        ------
        RangeZeroStepError
            If ``step`` is zero.
        RangeSameValuesError
            If ``start == stop``.
        RangeIncoherenceError
            If ``step`` never reaches ``stop`` from ``start``.
        IntegralTypeError
            If an argument is not an integer.
        """
        start = _as_int(start, 'start')
        if stop is None:
            start, stop = 0, start
        stop = _as_int(stop, 'stop')
        step = _as_int(step, 'step')
        if step == 0:
            raise RangeZeroStepError(start, stop)
        if start == stop:
            raise RangeSameValuesError(start, stop)
        if (stop > start) != (step > 0):
            raise RangeIncoherenceError(start, stop, step)
        if step > 0:
            n = (stop - start + step - 1) // step
        else:
            n = (start - stop - step - 1) // -step
        return start + step * self._randbelow(n)

    def randbytes(self, n: int) -> bytes:
        """Return ``n`` random bytes.

        Raises
        ------
        ZeroLengthError
            If ``n`` is zero.
        PositiveValueError
            If ``n`` is negative.
        """
        n = _as_int(n, 'n')
        if n < 0:
            raise PositiveValueError(n)
        if n == 0:
            raise ZeroLengthError('randbytes')
        return bytes(self.next_bits(8) for _ in range(n))

    def binomialvariate(self, n=1, p=0.5) -> int:
        """Number of successes among ``n`` independent trials of probability ``p``."""
        n = _as_int(n, 'n')
        if n < 0:
            raise PositiveValueError(n)
        p = _as_real(p, 'p')
        if not 0.0 <= p <= 1.0:
            raise ProbaOutOfRangeError(p)
        return sum(1 for _ in range(n) if self.random() < p)

    # ──────────────────────────────────────────────────────────────────
    #  Sequences
    # ──────────────────────────────────────────────────────────────────

    def choice(self, seq):
        """Return a random element of the non-empty sequence ``seq``."""
        if len(seq) == 0:
            raise EmptySequenceError()
        return seq[self._randbelow(len(seq))]

    def choices(self, population, weights=None, *, cum_weights=None, k=1):
        """Return ``k`` elements of ``population`` drawn with replacement.

        Parameters
        ----------
        population : sequence
            Candidates.
        weights : sequence of float, optional
            Relative weights, one per candidate.
        cum_weights : sequence of float, optional
            Cumulative weights, one per candidate. Mutually exclusive with
            ``weights``.
        k : int, optional
            Number of draws. Defaults to 1.

        Returns
        -------
        list

        Raises
        ------
        ZeroLengthError
            If ``population`` is empty.
        SampleSizesError
            If the weights and the population differ in length.
        RangeIncoherenceError
            If the total weight is not strictly positive and finite.
        """
        n = len(population)
        if n == 0:
            raise ZeroLengthError('population')
        k = _as_int(k, 'k')
        if k < 0:
            raise PositiveValueError(k)
        if cum_weights is None:
            if weights is None:
                return [population[self._randbelow(n)] for _ in range(k)]
            if len(weights) != n:
                raise SampleSizesError(n, len(weights), 'weights')
            cum_weights = list(itertools.accumulate(_as_real(w, 'weight') for w in weights))
        elif weights is not None:
            raise TypeDomainError('cannot specify both weights and cumulative weights')
        else:
            if len(cum_weights) != n:
                raise SampleSizesError(n, len(cum_weights), 'cum_weights')
            cum_weights = [_as_real(w, 'cumulative weight') for w in cum_weights]
        total = cum_weights[-1]
        if not (total > 0.0 and math.isfinite(total)):
            raise RangeIncoherenceError(
                0.0, total, message=f"total of weights must be greater than zero and finite (got {total!r})"
            )
        hi = n - 1
        return [population[bisect.bisect(cum_weights, self.random() * total, 0, hi)] for _ in range(k)]

    def sample(self, population, k, *, counts=None):
        """Return ``k`` distinct picks from ``population``, without replacement.

        ``counts`` repeats each element of ``population`` as many times, so
        that ``sample(['a', 'b'], 2, counts=[2, 1])`` samples from
        ``['a', 'a', 'b']``.

        Raises
        ------
        SampleCountError
            If ``k`` exceeds the population size.
        SampleSizesError
            If ``counts`` and ``population`` differ in length.
        """
        pool = list(population)
        if counts is not None:
            counts = [_as_int(c, 'count') for c in counts]
            if len(counts) != len(pool):
                raise SampleSizesError(len(pool), len(counts), 'counts')
            for c in counts:
                if c < 0:
                    raise PositiveValueError(c)
            pool = [item for item, c in zip(pool, counts) for _ in range(c)]
        n = len(pool)
        k = _as_int(k, 'k')
        if k < 0:
            raise PositiveValueError(k)
        if k > n:
            raise SampleCountError(k, n)
        result = []
        for i in range(k):
            j = i + self._randbelow(n - i)
            result.append(pool[j])
            pool[i], pool[j] = pool[j], pool[i]
        return result

    def shuffle(self, seq):
        """Shuffle the mutable sequence ``seq`` in place."""
        n = len(seq)
        for i in range(n - 1):
            j = i + self._randbelow(n - i)
            seq[i], seq[j] = seq[j], seq[i]

    # ──────────────────────────────────────────────────────────────────
    #  Continuous distributions
    # ──────────────────────────────────────────────────────────────────

    def gauss(self, mu=0.0, sigma=1.0) -> float:
        """Normal distribution, Marsaglia polar method.

        Each rejection round produces two independent normal values; the
        second one is cached and returned, without any draw, by the next
        call. Reseeding or restoring a state clears the cache.
        """
        mu = _as_real(mu, 'mu')
        sigma = _as_real(sigma, 'sigma')
        if not sigma > 0.0:
            raise GaussSigmaError(sigma)
        if self._gauss_valid:
            self._gauss_valid = False
            return mu + self._gauss_next * sigma
        while True:
            u = 2.0 * self.random() - 1.0
            v = 2.0 * self.random() - 1.0
            s = u * u + v * v
            if 0.0 < s < 1.0:
                break
        f = math.sqrt(-2.0 * math.log(s) / s)
        self._gauss_next = v * f
        self._gauss_valid = True
        return mu + u * f * sigma

    def normalvariate(self, mu=0.0, sigma=1.0) -> float:
        """Normal distribution, Kinderman and Monahan ratio-of-uniforms method."""
        mu = _as_real(mu, 'mu')
        sigma = _as_real(sigma, 'sigma')
        if not sigma > 0.0:
            raise GaussSigmaError(sigma)
        while True:
            u1 = self.random()
            u2 = 1.0 - self.random()
            z = NV_MAGICCONST * (u1 - 0.5) / u2
            if z * z / 4.0 <= -math.log(u2):
                return mu + z * sigma

    def lognormvariate(self, mu=0.0, sigma=1.0) -> float:
        """Log-normal distribution: ``exp`` of a normal variate."""
        return math.exp(self.normalvariate(mu, sigma))

    def expovariate(self, lambd=1.0) -> float:
        """Exponential distribution of rate ``lambd`` (mean ``1 / lambd``)."""
        lambd = _as_real(lambd, 'lambd')
        if not lambd > 0.0:
            raise ExponentialLambdaError(lambd)
        return -math.log(1.0 - self.random()) / lambd

    def gammavariate(self, alpha=1.0, beta=1.0) -> float:
        """Gamma distribution of shape ``alpha`` and scale ``beta`` (mean ``alpha * beta``).

        Cheng's rejection method is used for ``alpha > 1`` and the
        Ahrens-Dieter GS method for ``alpha < 1``.
        """
        alpha = _as_real(alpha, 'alpha')
        beta = _as_real(beta, 'beta')
        if not (alpha > 0.0 and beta > 0.0):
            raise AlphaBetaArgsError(alpha, beta)

        if alpha > 1.0:
            ainv = math.sqrt(2.0 * alpha - 1.0)
            bbb = alpha - LOG4
            ccc = alpha + ainv
            while True:
                u1 = self.random()
                if not _GAMMA_EPSILON < u1 < 1.0 - _GAMMA_EPSILON:
                    continue
                u2 = 1.0 - self.random()
                v = math.log(u1 / (1.0 - u1)) / ainv
                x = alpha * math.exp(v)
                z = u1 * u1 * u2
                r = bbb + ccc * v - x
                if r + SG_MAGICCONST - 4.5 * z >= 0.0 or r >= math.log(z):
                    return x * beta

        if alpha == 1.0:
            return -math.log(1.0 - self.random()) * beta

        b = (math.e + alpha) / math.e
        while True:
            u = self.random()
            p = b * u
            if p <= 1.0:
                x = p ** (1.0 / alpha)
            else:
                x = -math.log((b - p) / alpha)
            u1 = self.random()
            if p > 1.0:
                if u1 <= x ** (alpha - 1.0):
                    break
            elif u1 <= math.exp(-x):
                break
        return x * beta

    def betavariate(self, alpha, beta) -> float:
        """Beta distribution on ``[0, 1]``, built from two gamma variates."""
        alpha = _as_real(alpha, 'alpha')
        beta = _as_real(beta, 'beta')
        if not (alpha > 0.0 and beta > 0.0):
            raise AlphaBetaArgsError(alpha, beta)
        y = self.gammavariate(alpha, 1.0)
        if y == 0.0:
            return 0.0
        return y / (y + self.gammavariate(beta, 1.0))

    def paretovariate(self, alpha) -> float:
        alpha = _as_real(alpha, 'alpha')
        if not alpha > 0.0:
            raise ParetoArgsError(alpha)
        return (1.0 - self.random()) ** (-1.0 / alpha)

    def weibullvariate(self, alpha, beta) -> float:
        """Weibull distribution of scale ``alpha`` and shape ``beta``."""
        alpha = _as_real(alpha, 'alpha')
        beta = _as_real(beta, 'beta')
        if not (alpha > 0.0 and beta > 0.0):
            raise WeibullArgsError(alpha, beta)
        return alpha * (-math.log(1.0 - self.random())) ** (1.0 / beta)

    def triangular(self, low=0.0, high=1.0, mode=None) -> float:
        """Triangular distribution on ``[low, high]`` peaking at ``mode``.

        ``mode`` defaults to the midpoint. When ``low == high`` this value is
        returned without any draw.

        Raises
        ------
        RangeIncoherenceError
            If ``mode`` lies outside the bounds.
        """
        low = _as_real(low, 'low')
        high = _as_real(high, 'high')
        if mode is not None:
            mode = _as_real(mode, 'mode')
            if not min(low, high) <= mode <= max(low, high):
                raise RangeIncoherenceError(
                    low, high, message=f"mode {mode!r} lies outside [{low!r}, {high!r}]"
                )
        if high == low:
            return low
        u = self.random()
        c = 0.5 if mode is None else (mode - low) / (high - low)
        if u > c:
            u = 1.0 - u
            c = 1.0 - c
            low, high = high, low
        return low + (high - low) * math.sqrt(u * c)

    def vonmisesvariate(self, mu, kappa) -> float:
        """Circular distribution of mean angle ``mu`` and concentration ``kappa``.

        Returns an angle in ``[0, 2 * pi)``. A ``kappa`` close to zero gives
        a uniform angle. Based on Best and Fisher (1979).
        """
        mu = _as_real(mu, 'mu')
        kappa = _as_real(kappa, 'kappa')
        if kappa < 0.0:
            raise KappaError(kappa)
        if kappa <= _KAPPA_EPSILON:
            return TWOPI * self.random()

        s = 0.5 / kappa
        r = s + math.sqrt(1.0 + s * s)
        while True:
            u1 = self.random()
            z = math.cos(math.pi * u1)
            d = z / (r + z)
            u2 = self.random()
            if u2 < 1.0 - d * d or u2 <= (1.0 - d) * math.exp(d):
                break

        q = 1.0 / r
        f = (q + z) / (1.0 + q * z)
        if self.random() > 0.5:
            return (mu + math.acos(f)) % TWOPI
        return (mu - math.acos(f)) % TWOPI
