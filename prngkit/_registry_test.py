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

import pytest

import prngkit
from prngkit._base import BaseRandom
from prngkit._registry import (
    _ALGORITHM_REGISTRY,
    get_algorithm,
    get_algorithms_by_family,
    get_all_algorithm_names,
    get_registry,
    new_generator,
    register_algorithm,
)
from prngkit.config import invalidate_cache


class TestRegistry:
    def test_registry_populated_on_import(self):
        """Importing prngkit should auto-register all generators."""
        assert len(get_registry()) == 27

    def test_known_algorithms_exist(self):
        names = get_all_algorithm_names()
        for name in ('Cwg64', 'Cwg128', 'Melg19937', 'Mrg1457', 'Pcg1024_32',
                     'Squares64', 'Well44497b', 'Xoroshiro1024', 'FastRand63', 'LFib1340'):
            assert name in names

    def test_base_classes_not_registered(self):
        names = get_all_algorithm_names()
        assert 'BaseRandom' not in names
        assert not any(name.startswith('Base') for name in names)

    def test_splitmix_not_registered(self):
        assert 'SplitMix64' not in get_all_algorithm_names()

    def test_get_registry_returns_copy(self):
        """get_registry should return a copy, not the internal dict."""
        r1 = get_registry()
        r2 = get_registry()
        assert r1 is not r2
        assert r1 == r2
        r1.pop('Cwg64')
        assert 'Cwg64' in get_registry()

    def test_get_all_algorithm_names_sorted(self):
        names = get_all_algorithm_names()
        assert names == sorted(names)

    def test_names_match_classes(self):
        for name, cls in get_registry().items():
            assert cls.ALGORITHM == name
            assert issubclass(cls, BaseRandom)

    def test_get_algorithm(self):
        assert get_algorithm('Well512a') is prngkit.Well512a

    def test_get_algorithm_unknown(self):
        with pytest.raises(KeyError, match='Xoroshiro256'):
            get_algorithm('Mersenne')

    def test_by_family(self):
        xoro = get_algorithms_by_family('xoroshiro')
        assert set(xoro) == {'Xoroshiro256', 'Xoroshiro512', 'Xoroshiro1024'}
        assert get_algorithms_by_family('PCG') == get_algorithms_by_family('pcg')
        assert len(get_algorithms_by_family('pcg')) == 3

    def test_by_nonexistent_family(self):
        assert get_algorithms_by_family('nonexistent_family_xyz') == {}

    def test_every_algorithm_has_a_family(self):
        families = {cls.FAMILY for cls in get_registry().values()}
        assert '' not in families
        assert families == {'cwg', 'fastrand', 'lfib', 'melg', 'mrg', 'pcg', 'squares', 'well', 'xoroshiro'}

    def test_register_algorithm_overwrites(self):
        original = _ALGORITHM_REGISTRY['Cwg64']
        try:
            register_algorithm('Cwg64', prngkit.Cwg128)
            assert get_algorithm('Cwg64') is prngkit.Cwg128
        finally:
            register_algorithm('Cwg64', original)


class TestNewGenerator:
    """Test instantiation by name."""

    @pytest.fixture(autouse=True)
    def isolate_config(self, tmp_path, monkeypatch):
        config_path = str(tmp_path / 'prngkit' / 'defaults.json')
        monkeypatch.setattr('prngkit.config.get_config_path', lambda: config_path)
        invalidate_cache()
        yield config_path
        invalidate_cache()

    def test_by_name(self):
        g = new_generator('Mrg287', seed=3)
        assert isinstance(g, prngkit.Mrg287)
        assert g.next() == prngkit.Mrg287(3).next()

    def test_default_algorithm(self):
        assert isinstance(new_generator(seed=1), prngkit.Xoroshiro256)

    def test_within_context(self):
        with prngkit.algorithm_context('Squares32'):
            g = new_generator(seed=1)
        assert isinstance(g, prngkit.Squares32)

    def test_unknown(self):
        with pytest.raises(KeyError):
            new_generator('nope')
