"""LazyVector - one-shot vs restartable sources, counting, deferred map"""
import warnings

import pytest
from py_matrix import ConsumptionState, LazyVector, Vector
from py_matrix.errors import (
    ImmutableContainerError,
    PyMatrixTypeError,
    QuantityTypeError,
    UnsupportedOperationError,
)


SAMPLE = [1, 2, 3, 3, 3, 4, 5, 6, 7]


def _gen(values):
    yield from values


class TestCreation:

    def test_from_generator(self):
        v = LazyVector(_gen(SAMPLE))
        assert isinstance(v, LazyVector)
        assert list(iter(v)) == SAMPLE

    def test_from_factory(self):
        v = LazyVector(lambda: _gen(SAMPLE))
        assert v.restartable
        assert v.values() == SAMPLE

    def test_create_from_list_is_restartable(self):
        v = LazyVector.create(SAMPLE)
        assert v.restartable
        assert v.values() == SAMPLE
        assert v.values() == SAMPLE

    def test_create_snapshots_list(self):
        data = [1, 2, 3]
        v = LazyVector.create(data)
        data.append(4)
        assert v.values() == [1, 2, 3]

    def test_create_from_vector_is_restartable(self):
        v = LazyVector.create(Vector(SAMPLE))
        assert v.values() == SAMPLE
        assert v.values() == SAMPLE

    def test_create_from_generator_is_one_shot(self):
        v = LazyVector.create(_gen(SAMPLE))
        assert not v.restartable

    def test_create_from_one_shot_vector_is_one_shot(self):
        v = LazyVector.create(LazyVector(_gen([1, 2, 3])))
        assert not v.restartable
        assert v.values() == [1, 2, 3]
        with pytest.warns(RuntimeWarning, match="exhausted"):
            assert v.values() == []

    def test_create_empty_is_allowed(self):
        assert LazyVector.create([]).values() == []

    def test_rejects_non_iterable(self):
        with pytest.raises(PyMatrixTypeError):
            LazyVector(42)

    def test_non_quantity_fails_on_consumption(self):
        v = LazyVector.create([1, "x"])
        with pytest.raises(QuantityTypeError):
            v.values()


class TestOneShot:
    """A one-shot source is consumed once"""

    def test_state_machine(self):
        v = LazyVector(_gen([1, 2, 3]))
        assert v.state is ConsumptionState.FRESH
        it = iter(v)
        next(it)
        assert v.state is ConsumptionState.PARTIAL
        list(it)
        assert v.state is ConsumptionState.EXHAUSTED

    def test_second_pass_is_empty_and_warns(self):
        v = LazyVector(_gen([1, 2, 3]))
        assert v.values() == [1, 2, 3]
        with pytest.warns(RuntimeWarning, match="exhausted"):
            assert v.values() == []

    def test_partial_consumption_resumes(self):
        v = LazyVector(_gen([1, 2, 3, 4]))
        it = iter(v)
        assert next(it) == 1
        assert next(it) == 2
        assert v.values() == [3, 4]

    def test_count_keeps_vector_consumable(self):
        v = LazyVector(_gen(SAMPLE))
        assert v.count() == 9
        assert v.state is ConsumptionState.FRESH
        assert v.values() == SAMPLE

    def test_count_is_repeatable(self):
        v = LazyVector(_gen(SAMPLE))
        assert v.count() == 9
        assert v.count() == 9
        assert len(v) == 9
        assert v.values() == SAMPLE


class TestRestartable:
    """Factory-backed vectors re-run the factory on every pass"""

    def test_many_passes(self):
        v = LazyVector(lambda: _gen(SAMPLE))
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            for _ in range(3):
                assert v.values() == SAMPLE
        assert v.state is ConsumptionState.FRESH

    def test_count_then_iterate(self):
        v = LazyVector(lambda: _gen(SAMPLE))
        assert v.count() == len(SAMPLE)
        assert v.values() == SAMPLE

    def test_factory_called_per_pass(self):
        calls = []

        def factory():
            calls.append(1)
            return [1, 2]
        v = LazyVector(factory)
        assert calls == []
        v.values()
        v.values()
        assert len(calls) == 2


class TestAccess:

    @pytest.mark.parametrize("index", [0, 1, -1, "a"])
    def test_getitem_unsupported(self, index):
        v = LazyVector.create(SAMPLE)
        with pytest.raises(UnsupportedOperationError):
            _ = v[index]

    def test_get_unsupported(self):
        with pytest.raises(UnsupportedOperationError):
            LazyVector.create(SAMPLE).get(0)

    def test_setitem_immutable(self):
        v = LazyVector.create(SAMPLE)
        with pytest.raises(ImmutableContainerError):
            v[0] = 1

    def test_delitem_immutable(self):
        v = LazyVector.create(SAMPLE)
        with pytest.raises(ImmutableContainerError):
            del v[0]


class TestMap:

    def test_map_is_deferred(self):
        seen = []

        def record(x, i):
            seen.append(i)
            return x * 2
        v = LazyVector.create([1, 2, 3]).map(record)
        assert seen == []
        assert isinstance(v, LazyVector)
        assert v.values() == [2, 4, 6]
        assert seen == [0, 1, 2]

    def test_map_extra_args(self):
        v = LazyVector.create([1, 2, 3]).map(lambda x, i, k: x + i + k, 10)
        assert v.values() == [11, 13, 15]

    def test_map_over_restartable_is_restartable(self):
        v = LazyVector.create([1, 2, 3]).map(lambda x, i: x * x)
        assert v.values() == [1, 4, 9]
        assert v.values() == [1, 4, 9]

    def test_map_leaves_source_untouched(self):
        src = LazyVector.create([1, 2, 3])
        src.map(lambda x, i: 0).values()
        assert src.values() == [1, 2, 3]

    def test_map_over_one_shot_is_one_shot(self):
        v = LazyVector(_gen([1, 2, 3])).map(lambda x, i: x)
        assert not v.restartable
        assert v.values() == [1, 2, 3]
        with pytest.warns(RuntimeWarning, match="exhausted"):
            assert v.values() == []
