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

"""JSON persistence of generator states.

A snapshot is a JSON object::

    {
      "schema_version": 1,
      "algorithm": "Xoroshiro256",
      "gauss_next": 0.0,
      "gauss_valid": false,
      "state": {"kind": "list", "size": 4, "bits": 64, "items": [...], "index": 0}
    }

Words of any width, 128-bit ones included, are plain JSON integers. Files
are written atomically, the same way :mod:`prngkit.config` writes its
defaults. Unlike configuration files, a snapshot that cannot be decoded is
an error.
"""

import json
import os
from typing import Any, Dict, Union

from ._base import BaseRandom, GeneratorState
from ._error import SnapshotFormatError
from ._registry import get_algorithm, get_all_algorithm_names
from ._state import model_from_dict
from .config import _dump_json_atomic

__all__ = [
    'state_to_dict',
    'state_from_dict',
    'save_state',
    'load_state',
    'restore_generator',
]

_SCHEMA_VERSION = 1
_SUPPORTED_SCHEMA_VERSIONS = {1}


def state_to_dict(state: Union[GeneratorState, BaseRandom]) -> Dict[str, Any]:
    """Convert a :class:`GeneratorState` (or a generator's current state) to a dict.

    Parameters
    ----------
    state : GeneratorState or BaseRandom
        The snapshot, or a generator whose :meth:`~BaseRandom.get_state` is
        taken.

    Returns
    -------
    dict
        A JSON-compatible dictionary.
    """
    if isinstance(state, BaseRandom):
        state = state.get_state()
    if not isinstance(state, GeneratorState):
        raise SnapshotFormatError(f"cannot serialize a {type(state).__name__}")
    return {
        'schema_version': _SCHEMA_VERSION,
        'algorithm': state.algorithm,
        'gauss_next': float(state.gauss_next),
        'gauss_valid': bool(state.gauss_valid),
        'state': state.state.to_dict(),
    }


def state_from_dict(data: Dict[str, Any]) -> GeneratorState:
    """Rebuild a :class:`GeneratorState` from :func:`state_to_dict` output.

    Raises
    ------
    SnapshotFormatError
        If a key is missing, the schema version is not supported, or the
        algorithm is unknown.
    """
    if not isinstance(data, dict):
        raise SnapshotFormatError(f"snapshot must be a JSON object (got {type(data).__name__})")
    missing = [k for k in ('schema_version', 'algorithm', 'gauss_next', 'gauss_valid', 'state') if k not in data]
    if missing:
        raise SnapshotFormatError(f"snapshot misses key(s) {missing!r}")
    if data['schema_version'] not in _SUPPORTED_SCHEMA_VERSIONS:
        raise SnapshotFormatError(
            f"snapshot schema version {data['schema_version']!r} is not supported "
            f"(supported: {_SUPPORTED_SCHEMA_VERSIONS})"
        )
    algorithm = data['algorithm']
    if algorithm not in get_all_algorithm_names():
        raise SnapshotFormatError(f"unknown algorithm {algorithm!r} in snapshot")
    return GeneratorState(
        algorithm=algorithm,
        state=model_from_dict(data['state']),
        gauss_next=float(data['gauss_next']),
        gauss_valid=bool(data['gauss_valid']),
    )


def save_state(state: Union[GeneratorState, BaseRandom], path: str):
    """Atomically write a snapshot to ``path`` as JSON.

    Parameters
    ----------
    state : GeneratorState or BaseRandom
        The snapshot, or a generator whose current state is saved.
    path : str or os.PathLike
        Destination file. Its directory is created if needed.

    Examples
    --------
    .. code-block:: python

        >>> import prngkit
        >>> g = prngkit.Well512a(1)
        >>> prngkit.save_state(g, '/tmp/well.json')  # doctest: +SKIP
        >>> h = prngkit.restore_generator('/tmp/well.json')  # doctest: +SKIP
        >>> h.next() == g.next()  # doctest: +SKIP
        True
    """
    data = state_to_dict(state)
    path = os.path.abspath(os.fspath(path))
    os.makedirs(os.path.dirname(path), exist_ok=True)
    _dump_json_atomic(path, data)


def load_state(path: str) -> GeneratorState:
    """Read a snapshot written by :func:`save_state`.

    Raises
    ------
    SnapshotFormatError
        If the file is not valid JSON or not a valid snapshot.
    OSError
        If the file cannot be read.
    """
    path = os.fspath(path)
    with open(path, 'r', encoding='utf-8') as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise SnapshotFormatError(f"snapshot {path} is not valid JSON: {e}") from e
    return state_from_dict(data)


def restore_generator(path: str) -> BaseRandom:
    """Build a generator of the recorded algorithm, restored from a snapshot file."""
    state = load_state(path)
    return get_algorithm(state.algorithm)(state)
