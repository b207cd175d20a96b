"""Tests for the Absent sentinel."""

import copy
import pickle
from typing import get_args

from payloadguard.types import Absent, AbsentType, MaybeAbsent, is_absent


class TestAbsent:
    def test_singleton_identity(self):
        assert AbsentType() is Absent

    def test_falsy(self):
        assert not Absent
        assert bool(Absent) is False

    def test_representation(self):
        assert repr(Absent) == "Absent"
        assert str(Absent) == "Absent"

    def test_copy_preserves_identity(self):
        assert copy.copy(Absent) is Absent
        assert copy.deepcopy({"v": Absent})["v"] is Absent

    def test_pickle_preserves_identity(self):
        assert pickle.loads(pickle.dumps(Absent)) is Absent

    def test_distinct_from_none(self):
        assert Absent is not None
        assert is_absent(Absent)
        assert not is_absent(None)
        assert not is_absent({})

    def test_maybe_absent_alias(self):
        assert get_args(MaybeAbsent[int]) == (int, AbsentType)
