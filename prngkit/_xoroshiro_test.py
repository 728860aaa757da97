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

import numpy as np
import pytest

from prngkit._error import SeedSizeError, SeedTypeError, ZeroLengthError
from prngkit._splitmix import SplitMix64
from prngkit._xoroshiro import Xoroshiro256, Xoroshiro512, Xoroshiro1024


class TestXoroshiroStreams:
    """Test the xoroshiro generators against reference streams."""

    def test_xoroshiro256(self):
        g = Xoroshiro256(1)
        assert g.get_state().state.items == SplitMix64(1).take(4)
        assert [g.next() for _ in range(5)] == [
            0xB3F2AF6D0FC710C5, 0x853B559647364CEA, 0x92F89756082A4514,
            0x642E1C7BC266A3A7, 0xB27A48E29A233673,
        ]

    def test_xoroshiro512(self):
        g = Xoroshiro512(1)
        assert [g.next() for _ in range(5)] == [
            0xB3F2AF6D0FC710C5, 0x853B559647364CEA, 0x12B0EBBFE54E43B6,
            0x7DC8A7E8EB0AC06B, 0x616DBF8258A39551,
        ]

    def test_xoroshiro1024(self):
        g = Xoroshiro1024(1)
        assert [g.next() for _ in range(5)] == [
            0xB3F2AF6D0FC710C5, 0xF9D20113EC80C6D5, 0x8253BCF0DEAB787C,
            0xF6F50E5EA678C37C, 0x458DF629D8B843A8,
        ]
        assert g.get_state().state.index == 5

    @pytest.mark.parametrize('cls, expected', [
        (Xoroshiro256, [0x9C0F746BEBF6FD59, 0xE3B62BE9EC055080, 0xF970658BF1EBF2CC,
                        0xC7BB3D47050A7640, 0x6E8A56B72C710F7D]),
        (Xoroshiro512, [0x9C0F746BEBF6FD59, 0xE3B62BE9EC055080, 0xBB45B189C48072E1,
                        0x4318ADC0DC125095, 0xF7206A3CBD6E03B6]),
        (Xoroshiro1024, [0x9C0F746BEBF6FD59, 0xBA1FC6437713A4DA, 0x361F79E7E192D835,
                         0xD89BE545E78C0E0C, 0xF923CC95E2D269FC]),
    ])
    def test_negative_seed(self, cls, expected):
        g = cls(-2)
        assert [g.next() for _ in range(5)] == expected


class TestSequenceSeeds:
    """Test seeding list states from explicit words."""

    def test_full_sequence(self):
        g = Xoroshiro256([1, 2, 3, 4])
        assert g.get_state().state.items == [1, 2, 3, 4]

    def test_partial_sequence_completed_from_last_word(self):
        g = Xoroshiro512([10, 20])
        assert g.get_state().state.items == [10, 20] + SplitMix64(20).take(6)

    def test_tuple_and_array(self):
        a = Xoroshiro256((5, 6)).get_state()
        b = Xoroshiro256(np.array([5, 6], dtype=np.uint64)).get_state()
        assert a == b

    def test_words_masked_to_64_bits(self):
        g = Xoroshiro256([-1, 1 << 64])
        assert g.get_state().state.items[:2] == [0xFFFF_FFFF_FFFF_FFFF, 0]

    def test_empty_sequence(self):
        with pytest.raises(ZeroLengthError):
            Xoroshiro256([])

    def test_too_long(self):
        with pytest.raises(SeedSizeError):
            Xoroshiro256([1, 2, 3, 4, 5])

    def test_non_integer_word(self):
        with pytest.raises(SeedTypeError):
            Xoroshiro256([1, 2.5])

    def test_failed_reseed_keeps_state(self):
        g = Xoroshiro256(1)
        before = g.get_state()
        with pytest.raises(SeedSizeError):
            g.seed([0] * 9)
        assert g.get_state() == before
