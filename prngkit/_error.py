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

# -*- coding: utf-8 -*-


__all__ = [
    'PRNGError',

    # --- argument-domain violations --- #
    'ArgumentDomainError',
    'GaussSigmaError',
    'ExponentialLambdaError',
    'AlphaBetaArgsError',
    'ParetoArgsError',
    'WeibullArgsError',
    'KappaError',
    'ProbaOutOfRangeError',
    'PositiveValueError',
    'RangeIncoherenceError',
    'RangeSameValuesError',
    'RangeZeroStepError',
    'OutOfRangeError',
    'RotationCountError',
    'FloatSeedRangeError',

    # --- structural violations --- #
    'StructuralError',
    'EmptySequenceError',
    'ZeroLengthError',
    'SampleCountError',
    'SampleSizesError',
    'SeedSizeError',
    'SnapshotFormatError',

    # --- type-domain violations --- #
    'TypeDomainError',
    'NumericTypeError',
    'IntegralTypeError',
    'SeedTypeError',
    'StateTypeError',
]


class PRNGError(Exception):
    """Base exception for every condition reported by prngkit.

    All errors are raised eagerly by the call that receives the invalid
    argument, before any generator state is modified. Catch this class to
    handle any prngkit failure generically, or one of the three taxonomy
    bases (:class:`ArgumentDomainError`, :class:`StructuralError`,
    :class:`TypeDomainError`) to handle a whole kind of failure.

    Parameters
    ----------
    message : str
        A human-readable description of the failure.

    See Also
    --------
    ArgumentDomainError : Invalid numeric argument values.
    StructuralError : Invalid sequence or container shapes.
    TypeDomainError : Arguments of the wrong type.

    Examples
    --------
    .. code-block:: python

        >>> import prngkit
        >>> try:
        ...     prngkit.Xoroshiro256(1).gauss(0.0, -1.0)
        ... except prngkit.PRNGError as e:
        ...     print(type(e).__name__)
        GaussSigmaError
    """
    __module__ = 'prngkit'


# ──────────────────────────────────────────────────────────────────────
#  Argument-domain violations
# ──────────────────────────────────────────────────────────────────────

class ArgumentDomainError(PRNGError, ValueError):
    """Raised when a numeric argument lies outside the domain of an operation.

    Subclasses record the offending value(s) as attributes so that callers
    can report or correct them without parsing the message.
    """
    __module__ = 'prngkit'


class GaussSigmaError(ArgumentDomainError):
    """Raised when a normal-law standard deviation is not strictly positive.

    Parameters
    ----------
    sigma : float
        The rejected standard deviation.

    Examples
    --------
    .. code-block:: python

        >>> import prngkit
        >>> prngkit.Cwg64(1).gauss(0.0, -1.0)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        prngkit.GaussSigmaError: value for argument sigma must be greater than 0.0 (got -1.0)
    """
    __module__ = 'prngkit'

    def __init__(self, sigma):
        self.sigma = sigma
        super().__init__(f"value for argument sigma must be greater than 0.0 (got {sigma!r})")


class ExponentialLambdaError(ArgumentDomainError):
    """Raised when the rate of an exponential law is not strictly positive."""
    __module__ = 'prngkit'

    def __init__(self, lambd):
        self.lambd = lambd
        super().__init__(f"lambda value must be greater than 0.0 (got {lambd!r})")


class AlphaBetaArgsError(ArgumentDomainError):
    """Raised when the shape or scale of a gamma or beta law is not strictly positive."""
    __module__ = 'prngkit'

    def __init__(self, alpha, beta):
        self.alpha = alpha
        self.beta = beta
        super().__init__(
            f"both arguments alpha and beta must be greater than 0.0 (got alpha={alpha!r}, beta={beta!r})"
        )


class ParetoArgsError(ArgumentDomainError):
    """Raised when the shape of a Pareto law is not strictly positive."""
    __module__ = 'prngkit'

    def __init__(self, alpha):
        self.alpha = alpha
        super().__init__(f"shape argument 'alpha' must be greater than 0.0 (got {alpha!r})")


class WeibullArgsError(ArgumentDomainError):
    """Raised when the scale or the shape of a Weibull law is not strictly positive."""
    __module__ = 'prngkit'

    def __init__(self, alpha, beta):
        self.alpha = alpha
        self.beta = beta
        super().__init__(
            f"scale 'alpha' and shape 'beta' must be greater than 0.0 (got alpha={alpha!r}, beta={beta!r})"
        )


class KappaError(ArgumentDomainError):
    """Raised when the concentration of a von Mises law is negative."""
    __module__ = 'prngkit'

    def __init__(self, kappa):
        self.kappa = kappa
        super().__init__(f"'kappa' parameter cannot be negative (got {kappa!r})")


class ProbaOutOfRangeError(ArgumentDomainError):
    """Raised when a probability lies outside ``[0.0, 1.0]``."""
    __module__ = 'prngkit'

    def __init__(self, p):
        self.p = p
        super().__init__(f"probability values must range in [0.0, 1.0] (got {p!r})")


class PositiveValueError(ArgumentDomainError):
    """Raised when an argument that must not be negative is negative."""
    __module__ = 'prngkit'

    def __init__(self, value):
        self.value = value
        super().__init__(f"argument value must not be negative (got {value!r})")


class RangeIncoherenceError(ArgumentDomainError):
    """Raised when the bounds of a range cannot describe a non-empty interval.

    This covers ``uniform(min, max)`` with ``min >= max``, a zero or
    non-finite span, and ``randrange`` calls whose step never reaches
    ``stop``.

    Parameters
    ----------
    start : int or float
        Lower (or starting) bound as given by the caller.
    stop : int or float
        Upper (or stopping) bound as given by the caller.
    step : int or float, optional
        Step of a ``randrange`` call, ``None`` otherwise.
    message : str, optional
        Overrides the default message.

    See Also
    --------
    RangeSameValuesError : Range whose bounds are equal.
    RangeZeroStepError : Range whose step is zero.
    """
    __module__ = 'prngkit'

    def __init__(self, start, stop, step=None, message=None):
        self.start = start
        self.stop = stop
        self.step = step
        if message is None:
            if step is None:
                message = f"range [{start!r}, {stop!r}) is empty or not representable"
            else:
                message = (
                    f"'stop' value {stop!r} will never be reached from 'start' value "
                    f"{start!r} with 'step' {step!r}"
                )
        super().__init__(message)


class RangeSameValuesError(RangeIncoherenceError):
    """Raised when the 'start' and 'stop' bounds of a range are equal."""
    __module__ = 'prngkit'

    def __init__(self, start, stop):
        super().__init__(
            start, stop,
            message=f"'start' and 'stop' arguments must be different (got {start!r} and {stop!r})",
        )


class RangeZeroStepError(RangeIncoherenceError):
    """Raised when the 'step' of a range is zero."""
    __module__ = 'prngkit'

    def __init__(self, start, stop):
        super().__init__(start, stop, 0, message="'step' argument cannot be 0")


class OutOfRangeError(ArgumentDomainError):
    """Raised when a bit count lies outside the range an operation supports.

    Parameters
    ----------
    value : int
        The rejected count.
    low : int
        Smallest accepted count.
    high : int
        Largest accepted count.
    """
    __module__ = 'prngkit'

    def __init__(self, value, low, high, what='bits count'):
        self.value = value
        self.low = low
        self.high = high
        super().__init__(f"{what} must range in [{low}, {high}] (got {value!r})")


class RotationCountError(OutOfRangeError):
    """Raised when a bit rotation count is negative or exceeds the rotated width."""
    __module__ = 'prngkit'

    def __init__(self, value, bits):
        super().__init__(value, 0, bits, what='rotation bits count')


class FloatSeedRangeError(ArgumentDomainError):
    """Raised when a floating-point seed lies outside ``[0.0, 1.0)``."""
    __module__ = 'prngkit'

    def __init__(self, seed):
        self.seed = seed
        super().__init__(f"float seeds must range in [0.0, 1.0) (got {seed!r})")


# ──────────────────────────────────────────────────────────────────────
#  Structural violations
# ──────────────────────────────────────────────────────────────────────

class StructuralError(PRNGError, ValueError):
    """Raised when a sequence or container argument has an unusable shape."""
    __module__ = 'prngkit'


class EmptySequenceError(StructuralError, IndexError):
    """Raised when choosing an element from an empty sequence.

    Examples
    --------
    .. code-block:: python

        >>> import prngkit
        >>> prngkit.Well512a(1).choice([])  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        prngkit.EmptySequenceError: cannot make a choice from an empty sequence
    """
    __module__ = 'prngkit'

    def __init__(self):
        super().__init__("cannot make a choice from an empty sequence")


class ZeroLengthError(StructuralError):
    """Raised when an argument length must not be zero."""
    __module__ = 'prngkit'

    def __init__(self, what='argument'):
        self.what = what
        super().__init__(f"{what} length must not be zero")


class SampleCountError(StructuralError):
    """Raised when sampling more items than the population holds.

    Parameters
    ----------
    k : int
        Requested sample size.
    population_size : int
        Number of items available.
    """
    __module__ = 'prngkit'

    def __init__(self, k, population_size):
        self.k = k
        self.population_size = population_size
        super().__init__(
            f"cannot sample {k!r} items from a population of {population_size!r} items"
        )


class SampleSizesError(StructuralError):
    """Raised when a population and its weights or counts differ in length."""
    __module__ = 'prngkit'

    def __init__(self, population_size, other_size, what='counts'):
        self.population_size = population_size
        self.other_size = other_size
        super().__init__(
            f"sizes of arguments 'population' ({population_size}) and '{what}' "
            f"({other_size}) must be the same"
        )


class SeedSizeError(StructuralError):
    """Raised when a sequence seed holds more words than the internal state."""
    __module__ = 'prngkit'

    def __init__(self, given, size):
        self.given = given
        self.size = size
        super().__init__(f"sequence seed holds {given} words, state holds only {size}")


class SnapshotFormatError(StructuralError):
    """Raised when a persisted state snapshot cannot be decoded.

    The message names the path or the key that could not be understood.
    Unlike configuration files, snapshots are data: a broken snapshot is an
    error, never a warning.
    """
    __module__ = 'prngkit'


# ──────────────────────────────────────────────────────────────────────
#  Type-domain violations
# ──────────────────────────────────────────────────────────────────────

class TypeDomainError(PRNGError, TypeError):
    """Raised when an argument has a type the operation cannot work with."""
    __module__ = 'prngkit'


class NumericTypeError(TypeDomainError):
    """Raised when a bound or a weight is not a real number."""
    __module__ = 'prngkit'

    def __init__(self, value, what='value'):
        self.value = value
        super().__init__(f"{what} must be a real number (got {type(value).__name__})")


class IntegralTypeError(TypeDomainError):
    """Raised when an integer-only operation receives a non-integral value."""
    __module__ = 'prngkit'

    def __init__(self, value, what='value'):
        self.value = value
        super().__init__(f"{what} must be an integer (got {type(value).__name__})")


class SeedTypeError(TypeDomainError):
    """Raised when a seed is neither an integer, a float nor a sequence of integers."""
    __module__ = 'prngkit'

    def __init__(self, seed):
        self.seed = seed
        super().__init__(f"unsupported seed type {type(seed).__name__}")


class StateTypeError(TypeDomainError):
    """Raised when restoring a state snapshot taken from another algorithm.

    Parameters
    ----------
    expected : str
        Algorithm name of the generator being restored.
    got : str
        Algorithm name recorded in the snapshot, or a type name when the
        argument is not a snapshot at all.
    """
    __module__ = 'prngkit'

    def __init__(self, expected, got):
        self.expected = expected
        self.got = got
        super().__init__(f"cannot restore a {got} state into a {expected} generator")
