"""
Algebraic laws checked over arbitrary two-slot emission scripts.

Two CPS functions are equal when they produce the same emission sequence.
"""

from __future__ import annotations

from collections import Counter

from hypothesis import given, strategies as st

from tinycps import ap, collect, flat_map, lift, map_, merge, never, of, of_n
from tinycps._helpers import identity
from sources import arg_tuples, scripted, scripts, values


def f(*args):
    return (len(args), sum(args))


def h(pair):
    return pair[0] - pair[1]


def to_pair_cps(*args):
    return scripted([(0, (sum(args),)), (1, args)])


def to_len_cps(*args):
    return scripted([(0, (len(args),)), (0, args)])


def reemit_error(*args):
    return of_n(1)(*args)


class TestFunctor:
    @given(scripts)
    def test_identity(self, script):
        g = scripted(script)
        assert collect(map_()(g)) == collect(g)
        assert collect(map_(None, None)(g)) == collect(g)

    @given(scripts)
    def test_identity_on_single_arguments(self, script):
        g = scripted([(index, args[:1]) for index, args in script if args])
        assert collect(map_(identity, identity)(g)) == collect(g)

    @given(scripts)
    def test_composition(self, script):
        g = scripted(script)
        assert collect(map_(h)(map_(f)(g))) == collect(map_(lambda *a: h(f(*a)))(g))

    @given(scripts)
    def test_composition_with_missing_slots(self, script):
        g = scripted(script)
        left = map_(None, f)(map_(f)(g))
        right = map_(f, f)(g)
        assert collect(left) == collect(right)


class TestMonad:
    @given(arg_tuples)
    def test_left_identity(self, args):
        assert collect(flat_map(to_pair_cps)(of(*args))) == collect(to_pair_cps(*args))

    @given(scripts)
    def test_right_identity(self, script):
        g = scripted(script)
        assert collect(flat_map(of, reemit_error)(g)) == collect(g)

    @given(scripts)
    def test_associativity(self, script):
        g = scripted(script)
        left = flat_map(to_len_cps)(flat_map(to_pair_cps)(g))
        right = flat_map(lambda *a: flat_map(to_len_cps)(to_pair_cps(*a)))(g)
        assert collect(left) == collect(right)


class TestApplicative:
    @given(values)
    def test_identity(self, x):
        assert collect(ap(of(identity))(of(x))) == collect(of(x))

    @given(values)
    def test_homomorphism(self, x):
        assert collect(ap(of(h))(of((x, 3)))) == collect(of(h((x, 3))))

    @given(values)
    def test_interchange(self, y):
        u = of(lambda n: n * 7)
        assert collect(ap(u)(of(y))) == collect(ap(of(lambda fn: fn(y)))(u))

    @given(values, values)
    def test_lift_is_ap_of(self, x, y):
        add = lambda a, b: a + b
        assert collect(lift(add)(of(x), of(y))) == collect(of(add(x, y)))


class TestMonoid:
    @given(scripts)
    def test_identity(self, script):
        g = scripted(script)
        assert collect(merge(g, never)) == collect(g)
        assert collect(merge(never, g)) == collect(g)

    @given(scripts, scripts, scripts)
    def test_associativity(self, a, b, c):
        g1, g2, g3 = scripted(a), scripted(b), scripted(c)
        assert collect(merge(merge(g1, g2), g3)) == collect(merge(g1, merge(g2, g3)))

    @given(scripts, scripts)
    def test_commutativity(self, a, b):
        g1, g2 = scripted(a), scripted(b)
        assert Counter(collect(merge(g1, g2))) == Counter(collect(merge(g2, g1)))

    @given(st.lists(scripts, max_size=4))
    def test_emission_count_is_sum(self, many):
        assert len(collect(merge(*map(scripted, many)))) == sum(map(len, many))
