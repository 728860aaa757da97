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

import copy
import json

import pytest

from prngkit._error import SeedSizeError, SeedTypeError, SnapshotFormatError, ZeroLengthError
from prngkit._splitmix import SplitMix32, SplitMix64
from prngkit._state import (
    CollatzWeylState,
    CounterKeyState,
    ExtendedState,
    ListSeedState,
    ScalarState,
    model_from_dict,
    model_to_dict,
)


class TestListSeedState:
    """Test list state seeding."""

    def test_seed(self):
        st = ListSeedState(size=5, bits=64)
        st.seed(1)
        assert st.items == SplitMix64(1).take(5)
        assert st.index == 0

    def test_seed_32_bits(self):
        st = ListSeedState(size=3, bits=32)
        st.seed(1)
        assert st.items == SplitMix32(1).take(3)

    def test_reseed_resets_index(self):
        st = ListSeedState(size=5, bits=64)
        st.seed(1)
        st.index = 3
        st.seed(2)
        assert st.index == 0

    def test_wide_seed_uses_low_word(self):
        a = ListSeedState(size=4, bits=64)
        b = ListSeedState(size=4, bits=64)
        a.seed((9 << 64) | 3)
        b.seed(3)
        assert a == b

    def test_seed_from_words(self):
        st = ListSeedState(size=4, bits=32)
        st.seed_from_words([0x1_0000_0001, 2])
        assert st.items[:2] == [1, 2]
        assert st.items[2:] == SplitMix32(2).take(2)

    def test_seed_from_words_errors_keep_state(self):
        st = ListSeedState(size=2, bits=64)
        st.seed(1)
        before = copy.deepcopy(st)
        with pytest.raises(ZeroLengthError):
            st.seed_from_words([])
        with pytest.raises(SeedSizeError):
            st.seed_from_words([1, 2, 3])
        with pytest.raises(SeedTypeError):
            st.seed_from_words(['a'])
        assert st == before


class TestCollatzWeylState:
    def test_64_bit_seed(self):
        st = CollatzWeylState(value_bits=64, state_bits=64)
        st.seed(1)
        assert (st.a, st.weyl) == (0, 0)
        assert st.s == 0x910A2DEC89025CC1
        assert st.state == 0xBEEB8DA1658EEC67

    def test_reseed_clears_accumulators(self):
        st = CollatzWeylState(value_bits=64, state_bits=64, a=5, weyl=7)
        st.seed(1)
        assert (st.a, st.weyl) == (0, 0)


class TestCounterKeyState:
    def test_seed(self):
        st = CounterKeyState(counter=12)
        st.seed(1)
        assert st.counter == 0
        assert st.key == 0x9BD658AE46C9D5E3


class TestDictConversion:
    """Test conversion of every state model to JSON-compatible dicts."""

    @pytest.mark.parametrize('state', [
        ScalarState(bits=64, value=0xFFFF_FFFF_FFFF_FFFF),
        ScalarState(bits=128, value=(1 << 127) | 5),
        ListSeedState(size=3, bits=32, items=[1, 2, 3], index=2),
        CounterKeyState(counter=4, key=0x9BD658AE46C9D5E3),
        CollatzWeylState(value_bits=128, state_bits=128, a=1 << 100, s=3, state=7, weyl=9),
        ExtendedState(base=ScalarState(bits=64, value=1), extended=[4, 5, 6], extended_bits=32),
    ])
    def test_through_json(self, state):
        data = json.loads(json.dumps(model_to_dict(state)))
        assert model_from_dict(data) == state

    def test_unknown_kind(self):
        with pytest.raises(SnapshotFormatError):
            model_from_dict({'kind': 'nope'})

    def test_missing_field(self):
        with pytest.raises(SnapshotFormatError):
            model_from_dict({'kind': 'list', 'size': 2, 'bits': 64, 'items': [1, 2]})

    def test_inconsistent_list(self):
        with pytest.raises(SnapshotFormatError):
            model_from_dict({'kind': 'list', 'size': 3, 'bits': 64, 'items': [1, 2], 'index': 0})
        with pytest.raises(SnapshotFormatError):
            model_from_dict({'kind': 'list', 'size': 2, 'bits': 64, 'items': [1, 2], 'index': 2})

    def test_malformed_value(self):
        with pytest.raises(SnapshotFormatError):
            model_from_dict({'kind': 'scalar', 'bits': 64, 'value': 'x'})

    def test_not_a_dict(self):
        with pytest.raises(SnapshotFormatError):
            model_from_dict([1, 2])
