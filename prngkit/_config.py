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


import threading
import warnings
from contextlib import contextmanager
from typing import Optional

from . import config
from ._registry import get_algorithm, get_all_algorithm_names

__all__ = [
    'DEFAULT_ALGORITHM',
    'algorithm_context',
    'set_default_algorithm',
    'get_default_algorithm',
]

DEFAULT_ALGORITHM = 'Xoroshiro256'


class GeneratorEnvironment(threading.local):
    def __init__(self, *args, **kwargs):
        # default environment settings
        super().__init__(*args, **kwargs)
        self.algorithm: Optional[str] = None


generator_environ = GeneratorEnvironment()


@contextmanager
def algorithm_context(algorithm: str):
    """
    Select the default algorithm of :func:`~prngkit.new_generator` within a block.

    The selection is thread-local and restored on exit.

    Examples
    --------
    .. code-block:: python

        >>> import prngkit
        >>> with prngkit.algorithm_context('Pcg128_64'):
        ...     g = prngkit.new_generator(seed=1)
        >>> g.ALGORITHM
        'Pcg128_64'
    """
    get_algorithm(algorithm)
    old = generator_environ.algorithm
    try:
        generator_environ.algorithm = algorithm
        yield algorithm
    finally:
        generator_environ.algorithm = old


def set_default_algorithm(algorithm: Optional[str]):
    """
    Set the session default algorithm of the current thread.

    ``None`` clears the session value, falling back to the user default and
    then to ``'Xoroshiro256'``.

    Raises
    ------
    KeyError
        If ``algorithm`` is not a registered algorithm name.
    """
    if algorithm is not None:
        get_algorithm(algorithm)
    generator_environ.algorithm = algorithm


def get_default_algorithm() -> str:
    """
    Return the algorithm used when none is named.

    Resolution order: the thread-local session value, the persisted user
    default ``'algorithm'``, then ``'Xoroshiro256'``. A persisted name that
    is not a registered algorithm is ignored with a ``UserWarning``, like
    any other unusable entry of the configuration file.
    """
    if generator_environ.algorithm is not None:
        return generator_environ.algorithm
    name = config.get_user_default('algorithm')
    if name is None:
        return DEFAULT_ALGORITHM
    if not isinstance(name, str) or name not in get_all_algorithm_names():
        warnings.warn(
            f"prngkit: Unknown default algorithm {name!r} in {config.get_config_path()}. "
            f"Using {DEFAULT_ALGORITHM!r}.",
            stacklevel=2,
        )
        return DEFAULT_ALGORITHM
    return name
