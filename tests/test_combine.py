from __future__ import annotations

import threading

import pytest

from tinycps import ApPolicy, Emission, ap, collect, lift, merge, never, of, of_n
from sources import ManualSource, Recorder, scripted


class TestAp:
    def test_pairs_value_and_function(self):
        assert collect(ap(of(lambda x: x * 2))(of(5))) == [Emission(0, (10,))]

    @pytest.mark.parametrize("function_first", [True, False])
    def test_pairing_regardless_of_order(self, function_first):
        values, functions = ManualSource(), ManualSource()
        cb = Recorder()
        ap(functions)(values)(cb)
        if function_first:
            functions.emit(0, lambda x: x * 2)
            assert cb.calls == []
            values.emit(0, 5)
        else:
            values.emit(0, 5)
            assert cb.calls == []
            functions.emit(0, lambda x: x * 2)
        assert cb.calls == [(10,)]

    def test_whole_tuple_applied(self):
        assert collect(ap(of(lambda a, b: a - b))(of(10, 3))) == [Emission(0, (7,))]

    def test_combine_latest(self):
        values, functions = ManualSource(), ManualSource()
        cb = Recorder()
        ap(functions)(values)(cb)
        values.emit(0, 1)
        values.emit(0, 2)
        functions.emit(0, lambda x: x + 100)
        values.emit(0, 3)
        functions.emit(0, lambda x: x * -1)
        assert cb.calls == [(102,), (103,), (-3,)]

    def test_unpaired_slot_never_fires(self):
        cb = Recorder()
        ap(never)(of(1))(cb)
        assert cb.calls == []

    def test_slots_without_function_source_pass_through(self):
        source = scripted([(0, (2,)), (1, ("err",))])
        assert collect(ap(of(str))(source)) == [Emission(1, ("err",)), Emission(0, ("2",))]

    def test_function_source_errors_forwarded(self):
        functions = of_n(1)("no function")
        assert collect(ap(functions)(of(1))) == [Emission(1, ("no function",))]

    def test_function_source_per_slot(self):
        source = scripted([(0, (2,)), (1, (3,))])
        result = collect(ap(of(lambda x: x + 1), of(lambda x: x * 10))(source))
        assert sorted(result, key=lambda e: e.slot) == [Emission(0, (3,)), Emission(1, (30,))]

    def test_cache_is_per_full_call(self):
        values, functions = ManualSource(), ManualSource()
        cb1, cb2 = Recorder(), Recorder()
        combined = ap(functions)(values)
        combined(cb1)
        combined(cb2)
        values.emit(0, 1, call=0)
        functions.emit(0, lambda x: x + 1, call=1)
        assert cb1.calls == []
        assert cb2.calls == []
        functions.emit(0, lambda x: x - 1, call=0)
        assert cb1.calls == [(0,)]
        assert cb2.calls == []

    def test_threadsafe_policy_same_results(self):
        combined = ap(of(lambda x: x * 3), policy=ApPolicy(threadsafe=True))(of(3))
        assert collect(combined) == [Emission(0, (9,))]

    def test_threadsafe_policy_under_contention(self):
        values, functions = ManualSource(), ManualSource()
        cb = Recorder()
        double = lambda x: x * 2
        ap(functions, policy=ApPolicy(threadsafe=True))(values)(cb)
        values.emit(0, 0)
        functions.emit(0, double)

        def emit_values(start):
            for value in range(start, start + 100):
                values.emit(0, value)

        def emit_functions():
            for _ in range(100):
                functions.emit(0, double)

        threads = [
            threading.Thread(target=emit_values, args=(1,)),
            threading.Thread(target=emit_values, args=(101,)),
            threading.Thread(target=emit_functions),
            threading.Thread(target=emit_functions),
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        results = [args[0] for args in cb.calls]
        # every emission after the first pairing fires exactly once
        assert len(results) == 1 + 400
        assert all(result % 2 == 0 and 0 <= result <= 400 for result in results)
        assert {value * 2 for value in range(201)} <= set(results)

    def test_function_source_extra_arguments_ignored(self):
        functions = lambda cb: cb(lambda x: x + 1, "ignored")
        assert collect(ap(functions)(of(1))) == [Emission(0, (2,))]


class TestLift:
    def test_single_source(self):
        assert collect(lift(lambda x: x + 1)(of(1))) == [Emission(0, (2,))]

    def test_many_sources(self):
        assert collect(lift(lambda a, b, c: a + b * c)(of(1), of(2), of(3))) == [Emission(0, (7,))]

    def test_tuples_are_concatenated(self):
        combined = lift(lambda *args: args)(of(1, 2), of(), of(3))
        assert collect(combined) == [Emission(0, ((1, 2, 3),))]

    def test_latest_from_each_source(self):
        a, b = ManualSource(), ManualSource()
        cb = Recorder()
        lift(lambda x, y: f"{x}{y}")(a, b)(cb)
        a.emit(0, "a1")
        a.emit(0, "a2")
        assert cb.calls == []
        b.emit(0, "b1")
        a.emit(0, "a3")
        assert cb.calls == [("a2b1",), ("a3b1",)]

    def test_errors_of_every_source_forwarded(self):
        first = of_n(1)("first failed")
        second = of_n(1)("second failed")
        result = collect(lift(lambda x, y: x + y)(first, second))
        assert sorted(e.args for e in result) == [("first failed",), ("second failed",)]

    def test_no_sources(self):
        with pytest.raises(ValueError):
            lift(lambda: None)()


class TestMerge:
    def test_union_of_emissions_in_source_order(self):
        a = scripted([(0, (1,)), (1, ("a",))])
        b = scripted([(0, (2,))])
        assert collect(merge(a, b)) == [Emission(0, (1,)), Emission(1, ("a",)), Emission(0, (2,))]

    def test_mixed_arities(self):
        one_slot = lambda cb: cb("one")
        two_slots = lambda ok, err: err("two")
        assert collect(merge(one_slot, two_slots)) == [Emission(0, ("one",)), Emission(1, ("two",))]

    def test_interleaving_follows_sources(self):
        a, b = ManualSource(), ManualSource()
        cb = Recorder()
        merge(a, b)(cb)
        b.emit(0, "b")
        a.emit(0, "a")
        b.emit(0, "b")
        assert cb.calls == [("b",), ("a",), ("b",)]

    def test_empty_merge_is_never(self):
        assert collect(merge()) == collect(never) == []

    def test_same_source_twice(self):
        source = of(1)
        assert collect(merge(source, source)) == [Emission(0, (1,)), Emission(0, (1,))]
