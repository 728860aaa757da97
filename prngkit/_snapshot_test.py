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

import pytest

import prngkit
from prngkit._error import SnapshotFormatError, StateTypeError
from prngkit._registry import get_registry
from prngkit._snapshot import (
    load_state,
    restore_generator,
    save_state,
    state_from_dict,
    state_to_dict,
)

ALL_GENERATORS = sorted(get_registry().items())
ALL_IDS = [name for name, _ in ALL_GENERATORS]


class TestDictSnapshot:
    """Test conversion of generator states to and from JSON objects."""

    @pytest.mark.parametrize('name, cls', ALL_GENERATORS, ids=ALL_IDS)
    def test_through_json_resumes_stream(self, name, cls):
        g = cls(99)
        for _ in range(5):
            g.next()
        data = json.loads(json.dumps(state_to_dict(g)))
        assert data['algorithm'] == name
        h = cls(state_from_dict(data))
        assert [h.next() for _ in range(30)] == [g.next() for _ in range(30)]

    def test_gauss_cache_survives(self):
        g = prngkit.Melg19937(4)
        g.gauss()
        data = json.loads(json.dumps(state_to_dict(g.get_state())))
        assert data['gauss_valid'] is True
        h = prngkit.Melg19937(state_from_dict(data))
        assert h.gauss() == g.gauss()

    def test_128_bit_words_are_exact(self):
        g = prngkit.Cwg128(1)
        g.next()
        data = json.loads(json.dumps(state_to_dict(g)))
        assert state_from_dict(data) == g.get_state()

    def test_not_a_state(self):
        with pytest.raises(SnapshotFormatError):
            state_to_dict({'algorithm': 'Cwg64'})

    def test_not_a_dict(self):
        with pytest.raises(SnapshotFormatError):
            state_from_dict('Cwg64')

    def test_missing_key(self):
        data = state_to_dict(prngkit.Cwg64(1))
        del data['gauss_next']
        with pytest.raises(SnapshotFormatError, match='gauss_next'):
            state_from_dict(data)

    def test_unsupported_schema(self):
        data = state_to_dict(prngkit.Cwg64(1))
        data['schema_version'] = 999
        with pytest.raises(SnapshotFormatError, match='schema version'):
            state_from_dict(data)

    def test_unknown_algorithm(self):
        data = state_to_dict(prngkit.Cwg64(1))
        data['algorithm'] = 'Mersenne'
        with pytest.raises(SnapshotFormatError, match='Mersenne'):
            state_from_dict(data)

    def test_malformed_model(self):
        data = state_to_dict(prngkit.Cwg64(1))
        data['state'] = {'kind': 'list'}
        with pytest.raises(SnapshotFormatError):
            state_from_dict(data)


class TestSnapshotGeometry:
    """Test that decoded snapshots must fit the recorded algorithm."""

    def test_short_well_list(self):
        data = state_to_dict(prngkit.Well512a(1))
        data['state']['size'] = 4
        data['state']['items'] = data['state']['items'][:4]
        state = state_from_dict(data)
        with pytest.raises(StateTypeError):
            prngkit.Well512a(state)

    def test_melg_cursor_on_extra_word(self):
        g = prngkit.Melg607(1)
        data = state_to_dict(g)
        data['state']['index'] = 9
        with pytest.raises(StateTypeError):
            g.set_state(state_from_dict(data))
        assert g.get_state().state.index == 0

    def test_restore_from_file(self, tmp_path):
        path = tmp_path / 'bad.json'
        data = state_to_dict(prngkit.Well1024a(1))
        data['state']['bits'] = 64
        path.write_text(json.dumps(data))
        with pytest.raises(StateTypeError):
            restore_generator(path)

    def test_base_must_be_scalar(self):
        data = state_to_dict(prngkit.Pcg1024_32(1))
        data['state']['base'] = state_to_dict(prngkit.Cwg64(1))['state']
        with pytest.raises(SnapshotFormatError, match='scalar'):
            state_from_dict(data)


class TestFileSnapshot:
    def test_save_and_restore(self, tmp_path):
        path = tmp_path / 'snapshots' / 'well.json'
        g = prngkit.Well19937c(8)
        g.next()
        save_state(g, path)
        assert os.path.isfile(path)
        h = restore_generator(path)
        assert isinstance(h, prngkit.Well19937c)
        assert [h.next() for _ in range(10)] == [g.next() for _ in range(10)]

    def test_load_state(self, tmp_path):
        path = str(tmp_path / 'pcg.json')
        g = prngkit.Pcg1024_32(3)
        save_state(g.get_state(), path)
        assert load_state(path) == g.get_state()

    def test_overwrite_leaves_no_temporary(self, tmp_path):
        path = tmp_path / 'x.json'
        save_state(prngkit.Cwg64(1), path)
        save_state(prngkit.Cwg64(2), path)
        assert load_state(path) == prngkit.Cwg64(2).get_state()
        assert os.listdir(tmp_path) == ['x.json']

    def test_invalid_json(self, tmp_path):
        path = tmp_path / 'bad.json'
        path.write_text('{not json')
        with pytest.raises(SnapshotFormatError):
            load_state(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            load_state(tmp_path / 'absent.json')
