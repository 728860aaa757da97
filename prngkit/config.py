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

"""User-level configuration persistence for prngkit.

Stores user defaults (currently the default ``"algorithm"``) in a JSON file
at a platform-appropriate location. Supports atomic writes, schema
versioning, and cached loading.

Config locations:
    - Linux:   ~/.config/prngkit/defaults.json
    - macOS:   ~/Library/Application Support/prngkit/defaults.json
    - Windows: %APPDATA%/prngkit/defaults.json
"""

import json
import os
import platform
import tempfile
import warnings
from typing import Any, Dict, Optional

__all__ = [
    'load_user_defaults',
    'save_user_defaults',
    'get_user_default',
    'set_user_default',
    'clear_user_defaults',
    'get_config_path',
    'invalidate_cache',
]

_SCHEMA_VERSION = 1
_SUPPORTED_SCHEMA_VERSIONS = {1}
_cache: Optional[Dict[str, Any]] = None


def _empty_config() -> Dict[str, Any]:
    return {'schema_version': _SCHEMA_VERSION, 'defaults': {}}


def get_config_path() -> str:
    """Return the platform-appropriate path for the prngkit config file.

    Returns
    -------
    str
        Absolute path to the ``defaults.json`` configuration file.

    Notes
    -----
    The platform-specific base directories are:

    - **Windows**: ``%APPDATA%/prngkit/defaults.json`` (falls back to
      ``~/prngkit/defaults.json`` if ``APPDATA`` is not set).
    - **macOS**: ``~/Library/Application Support/prngkit/defaults.json``.
    - **Linux / other**: ``$XDG_CONFIG_HOME/prngkit/defaults.json`` (falls
      back to ``~/.config/prngkit/defaults.json`` if ``XDG_CONFIG_HOME`` is
      not set).

    Examples
    --------
    .. code-block:: python

        >>> import prngkit
        >>> path = prngkit.get_config_path()  # doctest: +SKIP
        >>> print(path)  # e.g. '/home/user/.config/prngkit/defaults.json'
    """
    system = platform.system()
    if system == 'Windows':
        base = os.environ.get('APPDATA', os.path.expanduser('~'))
    elif system == 'Darwin':
        base = os.path.join(os.path.expanduser('~'), 'Library', 'Application Support')
    else:
        base = os.environ.get('XDG_CONFIG_HOME', os.path.join(os.path.expanduser('~'), '.config'))
    return os.path.join(base, 'prngkit', 'defaults.json')


def _read_config_file(path: str) -> Dict[str, Any]:
    """Read and validate the JSON configuration file.

    Parameters
    ----------
    path : str
        Absolute path to the configuration file.

    Returns
    -------
    dict of str to any
        The parsed configuration dictionary. Returns an empty default
        structure (with ``schema_version`` and ``defaults`` keys) if the
        file is missing, corrupted, or has an unsupported schema version.
    """
    if not os.path.isfile(path):
        return _empty_config()

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        warnings.warn(
            f"prngkit: Corrupted config file at {path}: {e}. Using built-in defaults.",
            stacklevel=3,
        )
        return _empty_config()

    if not isinstance(data, dict) or not isinstance(data.get('defaults', {}), dict):
        warnings.warn(
            f"prngkit: Corrupted config file at {path}: unexpected layout. Using built-in defaults.",
            stacklevel=3,
        )
        return _empty_config()

    schema_ver = data.get('schema_version', 0)
    if schema_ver not in _SUPPORTED_SCHEMA_VERSIONS:
        warnings.warn(
            f"prngkit: Config file schema version {schema_ver} is not supported "
            f"(supported: {_SUPPORTED_SCHEMA_VERSIONS}). Ignoring user defaults.",
            stacklevel=3,
        )
        return _empty_config()

    data.setdefault('defaults', {})
    return data


def _dump_json_atomic(path: str, data: Dict[str, Any]):
    """Write ``data`` as JSON to ``path`` through a temporary file and ``os.replace``.

    The destination is never left partially written. ``OSError`` propagates;
    the temporary file is removed on failure.
    """
    fd, tmp_path = tempfile.mkstemp(dir=os.path.dirname(path), suffix='.tmp')
    try:
        with os.fdopen(fd, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, sort_keys=True)
            f.write('\n')
        os.replace(tmp_path, path)
    except BaseException:
        try:
            os.unlink(tmp_path)
        except OSError:
            pass
        raise


def _write_config_file(path: str, data: Dict[str, Any]):
    """Persist the configuration dictionary, downgrading I/O failures to warnings.

    Parameters
    ----------
    path : str
        Destination path for the configuration file.
    data : dict of str to any
        The configuration dictionary to serialize as JSON.
    """
    config_dir = os.path.dirname(path)
    try:
        os.makedirs(config_dir, exist_ok=True)
    except OSError as e:
        warnings.warn(
            f"prngkit: Cannot create config directory {config_dir}: {e}. "
            f"The default algorithm is not persisted.",
            stacklevel=3,
        )
        return

    try:
        _dump_json_atomic(path, data)
    except OSError as e:
        warnings.warn(
            f"prngkit: Cannot write config file {path}: {e}. "
            f"The default algorithm is not persisted.",
            stacklevel=3,
        )


def invalidate_cache():
    """Clear the in-memory configuration cache, forcing a re-read on next access.

    Useful after the config file has been modified externally (by another
    process or a manual edit).

    See Also
    --------
    load_user_defaults : Load (and cache) user defaults from the config file.
    clear_user_defaults : Remove all user defaults and delete the config file.
    """
    global _cache
    _cache = None


def load_user_defaults() -> Dict[str, Any]:
    """Load user defaults from the config file.

    Results are cached in memory; subsequent calls return the cached copy
    unless :func:`invalidate_cache` has been called.

    Returns
    -------
    dict of str to any
        The ``defaults`` section, e.g. ``{'algorithm': 'Pcg128_64'}``. An
        empty dict if nothing has been configured.

    Examples
    --------
    .. code-block:: python

        >>> import prngkit
        >>> prngkit.load_user_defaults()  # doctest: +SKIP
        {'algorithm': 'Pcg128_64'}
    """
    global _cache
    if _cache is not None:
        return _cache.get('defaults', {})

    _cache = _read_config_file(get_config_path())
    return _cache.get('defaults', {})


def save_user_defaults(defaults: Dict[str, Any]):
    """Save user defaults to the config file.

    Merges the provided entries with the existing ones on disk and writes
    the result atomically. The in-memory cache is updated to reflect the new
    state.

    Parameters
    ----------
    defaults : dict of str to any
        JSON-compatible entries; existing entries with the same keys are
        overwritten.

    See Also
    --------
    set_user_default : Convenience function to set a single default.
    """
    global _cache
    path = get_config_path()
    existing = _read_config_file(path)
    existing['defaults'].update(defaults)
    existing['schema_version'] = _SCHEMA_VERSION
    _write_config_file(path, existing)
    _cache = existing


def get_user_default(key: str, default: Any = None) -> Any:
    """Return the user default stored under ``key``, or ``default``.

    Examples
    --------
    .. code-block:: python

        >>> import prngkit
        >>> prngkit.get_user_default('algorithm')  # doctest: +SKIP
        'Pcg128_64'
    """
    return load_user_defaults().get(key, default)


def set_user_default(key: str, value: Any):
    """Set and persist one user default.

    This is a convenience wrapper around :func:`save_user_defaults`.

    Examples
    --------
    .. code-block:: python

        >>> import prngkit
        >>> prngkit.set_user_default('algorithm', 'Pcg128_64')  # doctest: +SKIP
    """
    save_user_defaults({key: value})


def clear_user_defaults():
    """Remove all user defaults and delete the config file.

    A ``UserWarning`` is issued if the file cannot be deleted; the in-memory
    cache is cleared in any case.
    """
    global _cache
    path = get_config_path()
    try:
        if os.path.isfile(path):
            os.unlink(path)
    except OSError as e:
        warnings.warn(
            f"prngkit: Cannot delete config file {path}: {e}.",
            stacklevel=3,
        )
    _cache = None
