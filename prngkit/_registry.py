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

"""Global auto-discovery registry of generator classes.

The registry is populated automatically when a concrete subclass of
:class:`~prngkit._base.BaseRandom` is defined. It avoids importing prngkit
internals to prevent circular dependencies.
"""

from typing import Dict, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from prngkit._base import BaseRandom

__all__ = [
    'register_algorithm',
    'get_registry',
    'get_algorithm',
    'get_algorithms_by_family',
    'get_all_algorithm_names',
    'new_generator',
]

_ALGORITHM_REGISTRY: Dict[str, type] = {}


def register_algorithm(name: str, cls: type):
    """Register a generator class in the global registry.

    Called automatically by ``BaseRandom.__init_subclass__``.

    Parameters
    ----------
    name : str
        The unique algorithm name, e.g. ``'Xoroshiro256'``.
    cls : type
        The generator class.
    """
    _ALGORITHM_REGISTRY[name] = cls


def get_registry() -> Dict[str, type]:
    """Return a copy of the full algorithm registry.

    Returns
    -------
    dict of str to type
        A dictionary mapping algorithm names to generator classes.
    """
    return dict(_ALGORITHM_REGISTRY)


def get_algorithm(name: str) -> type:
    """Return the generator class registered under ``name``.

    Raises
    ------
    KeyError
        If no generator is registered under that name. The message lists
        the known names.
    """
    try:
        return _ALGORITHM_REGISTRY[name]
    except KeyError:
        raise KeyError(
            f"unknown algorithm {name!r}; known algorithms are {get_all_algorithm_names()}"
        ) from None


def get_algorithms_by_family(family: str) -> Dict[str, type]:
    """Return the generators of one family (``'cwg'``, ``'well'``, ...).

    Parameters
    ----------
    family : str
        Family tag, compared case-insensitively.

    Returns
    -------
    dict of str to type
        A dictionary mapping algorithm names to matching classes.
    """
    family = family.lower()
    return {
        name: cls
        for name, cls in _ALGORITHM_REGISTRY.items()
        if getattr(cls, 'FAMILY', None) == family
    }


def get_all_algorithm_names() -> List[str]:
    """Return a sorted list of all registered algorithm names."""
    return sorted(_ALGORITHM_REGISTRY.keys())


def new_generator(algorithm: Optional[str] = None, seed=None) -> 'BaseRandom':
    """Instantiate a generator by name.

    Parameters
    ----------
    algorithm : str, optional
        Algorithm name. When omitted, the default algorithm is used: the one
        selected by :func:`~prngkit.algorithm_context`, else the persisted
        user default, else ``'Xoroshiro256'``.
    seed : optional
        Any seed accepted by the generator constructor.
    """
    if algorithm is None:
        from prngkit._config import get_default_algorithm
        algorithm = get_default_algorithm()
    return get_algorithm(algorithm)(seed)
