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

import json
import os
import warnings

import pytest

from prngkit.config import (
    _SCHEMA_VERSION,
    _read_config_file,
    _write_config_file,
    clear_user_defaults,
    get_config_path,
    get_user_default,
    invalidate_cache,
    load_user_defaults,
    save_user_defaults,
    set_user_default,
)


@pytest.fixture(autouse=True)
def isolate_config(tmp_path, monkeypatch):
    """Redirect config to a temp directory and clear cache for each test."""
    config_path = str(tmp_path / 'prngkit' / 'defaults.json')
    monkeypatch.setattr('prngkit.config.get_config_path', lambda: config_path)
    invalidate_cache()
    yield config_path
    invalidate_cache()


class TestGetConfigPath:
    def test_returns_string(self):
        path = get_config_path()
        assert isinstance(path, str)

    def test_ends_with_defaults_json(self):
        path = get_config_path()
        assert path.endswith('defaults.json')


class TestReadConfigFile:
    def test_missing_file_returns_default(self):
        data = _read_config_file('/nonexistent/path/defaults.json')
        assert data['schema_version'] == _SCHEMA_VERSION
        assert data['defaults'] == {}

    def test_corrupted_json(self, isolate_config):
        path = isolate_config
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, 'w') as f:
            f.write('not valid json{{{')
        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter('always')
            data = _read_config_file(path)
            assert any('Corrupted' in str(warning.message) for warning in w)
        assert data['defaults'] == {}

    def test_unexpected_layout(self, isolate_config):
        path = isolate_config
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, 'w') as f:
            json.dump(['algorithm', 'Cwg64'], f)
        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter('always')
            data = _read_config_file(path)
            assert any('unexpected layout' in str(warning.message) for warning in w)
        assert data['defaults'] == {}

    def test_unsupported_schema_version(self, isolate_config):
        path = isolate_config
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, 'w') as f:
            json.dump({'schema_version': 999, 'defaults': {'algorithm': 'Cwg64'}}, f)
        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter('always')
            data = _read_config_file(path)
            assert any('schema version' in str(warning.message) for warning in w)
        assert data['defaults'] == {}

    def test_valid_file(self, isolate_config):
        path = isolate_config
        expected = {'schema_version': 1, 'defaults': {'algorithm': 'Pcg128_64'}}
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, 'w') as f:
            json.dump(expected, f)
        assert _read_config_file(path) == expected


class TestWriteConfigFile:
    def test_creates_directory_and_file(self, isolate_config):
        path = isolate_config
        data = {'schema_version': 1, 'defaults': {}}
        _write_config_file(path, data)
        assert os.path.isfile(path)
        with open(path) as f:
            assert json.load(f) == data

    def test_atomic_write(self, isolate_config):
        path = isolate_config
        _write_config_file(path, {'schema_version': 1, 'defaults': {'algorithm': 'Cwg64'}})
        _write_config_file(path, {'schema_version': 1, 'defaults': {'algorithm': 'Well512a'}})
        with open(path) as f:
            assert json.load(f)['defaults'] == {'algorithm': 'Well512a'}
        assert [p for p in os.listdir(os.path.dirname(path)) if p.endswith('.tmp')] == []

    def test_unwritable_directory_warns(self, tmp_path):
        blocker = tmp_path / 'file'
        blocker.write_text('x')
        path = str(blocker / 'sub' / 'defaults.json')
        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter('always')
            _write_config_file(path, {'schema_version': 1, 'defaults': {}})
            assert any('Cannot create config directory' in str(warning.message) for warning in w)


class TestLoadSaveUserDefaults:
    def test_load_empty(self):
        assert load_user_defaults() == {}

    def test_save_and_load(self):
        save_user_defaults({'algorithm': 'Pcg128_64'})
        invalidate_cache()
        assert load_user_defaults() == {'algorithm': 'Pcg128_64'}

    def test_save_merges(self):
        save_user_defaults({'algorithm': 'Pcg128_64'})
        save_user_defaults({'seed': 42})
        invalidate_cache()
        defaults = load_user_defaults()
        assert defaults['algorithm'] == 'Pcg128_64'
        assert defaults['seed'] == 42

    def test_save_overwrites_key(self):
        save_user_defaults({'algorithm': 'Pcg128_64'})
        save_user_defaults({'algorithm': 'Cwg64'})
        invalidate_cache()
        assert load_user_defaults()['algorithm'] == 'Cwg64'

    def test_caching(self, isolate_config):
        save_user_defaults({'algorithm': 'Cwg64'})
        d1 = load_user_defaults()
        # Edits behind the cache's back stay invisible until invalidation
        with open(isolate_config, 'w') as f:
            json.dump({'schema_version': 1, 'defaults': {'algorithm': 'Mrg287'}}, f)
        assert load_user_defaults() == d1
        invalidate_cache()
        assert load_user_defaults()['algorithm'] == 'Mrg287'


class TestGetSetUserDefault:
    def test_get_missing(self):
        assert get_user_default('algorithm') is None
        assert get_user_default('algorithm', 'Cwg64') == 'Cwg64'

    def test_set_and_get(self):
        set_user_default('algorithm', 'Squares64')
        assert get_user_default('algorithm') == 'Squares64'
        invalidate_cache()
        assert get_user_default('algorithm') == 'Squares64'


class TestClearUserDefaults:
    def test_clear(self, isolate_config):
        set_user_default('algorithm', 'Squares64')
        assert os.path.isfile(isolate_config)
        clear_user_defaults()
        assert not os.path.exists(isolate_config)
        assert load_user_defaults() == {}

    def test_clear_without_file(self):
        clear_user_defaults()
        assert load_user_defaults() == {}
