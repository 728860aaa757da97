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

from prngkit._mrg import Mrg287, Mrg1457, Mrg49507
from prngkit._splitmix import SplitMix31, SplitMix32


class TestMrg287:
    def test_seed_1(self):
        g = Mrg287(1)
        assert g.get_state().state.items == SplitMix32(1).take(256)
        assert [g.next() for _ in range(5)] == [
            0xDF8FA498, 0x1056B873, 0x24AADCA6, 0xCF2941D0, 0xE213AE1C,
        ]
        assert g.get_state().state.index == 5

    def test_seed_minus_2(self):
        g = Mrg287(-2)
        assert [g.next() for _ in range(5)] == [
            0xE0147FC3, 0xF9CF8AF4, 0x3CABDDA2, 0xE76C65B3, 0xE1A5A4C5,
        ]

    def test_cursor_wraps(self):
        g = Mrg287(5)
        for _ in range(300):
            g.next()
        assert g.get_state().state.index == 300 % 256


class TestMrg1457:
    def test_seed_1(self):
        g = Mrg1457(1)
        st = g.get_state().state
        assert st.items[1] == 0x5F75C6D0
        assert st.items == SplitMix31(1).take(47)
        assert [g.next() for _ in range(5)] == [
            0x12CE8E15, 0x5EF95E9B, 0x49993CCF, 0x217FFBDC, 0x6FB12F95,
        ]
        assert g.get_state().state.index == 5

    def test_seed_minus_2(self):
        g = Mrg1457(-2)
        assert [g.next() for _ in range(5)] == [
            0x76528F85, 0x251D4DEE, 0x5C0126DE, 0x3316E359, 0x35CC2715,
        ]


class TestMrg49507:
    def test_seeded_list(self):
        st = Mrg49507(1).get_state().state
        assert st.size == 1597
        assert st.items[1] == 0x5F75C6D0

    def test_seed_1(self):
        g = Mrg49507(1)
        assert [g.next() for _ in range(5)] == [
            0x131406EC, 0x4B1D5F0C, 0x6AABCE3B, 0x086E1D9F, 0x5FBF49E1,
        ]
        assert g.get_state().state.index == 5

    def test_seed_minus_2(self):
        g = Mrg49507(-2)
        assert [g.next() for _ in range(5)] == [
            0x312D7672, 0x50DAB381, 0x4A5DCD94, 0x377F84B6, 0x79E8124A,
        ]

    def test_product_wraps_to_64_bits(self):
        g = Mrg49507(11)
        items = list(g.get_state().state.items)
        wrapped = ((0xFFFF_FFFF_FDFF_FF80 * (items[1597 - 7] + items[0])) & (2 ** 64 - 1)) % 0x7FFF_FFFF
        assert g.next() == wrapped


class TestMrgOutputs:
    @pytest.mark.parametrize('cls', [Mrg1457, Mrg49507])
    def test_below_modulus(self, cls):
        g = cls(123)
        assert all(0 <= g.next() < 0x7FFF_FFFF for _ in range(5000))

    @pytest.mark.parametrize('cls', [Mrg287, Mrg1457, Mrg49507])
    def test_random_in_unit_interval(self, cls):
        g = cls(9)
        for _ in range(2000):
            assert 0.0 <= g.random() < 1.0
