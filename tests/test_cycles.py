import numpy as np
import pytest

from schreier.permutation import (Cycles, PermutationError, apply, compose,
                                  from_mapping, invert, random_permutation,
                                  support_of)


def test_init():
    c = Cycles((1, 2, 3), (4, 5))
    assert c._cycles == ((1, 2, 3), (4, 5))
    assert c._support == (1, 2, 3, 4, 5)
    assert c == Cycles(1, 2, 3) * Cycles(4, 5)
    assert Cycles((3, 1, 2)) == Cycles(1, 2, 3)
    assert Cycles().is_identity()
    assert Cycles((4, )).is_identity()


def test_replace():
    c = Cycles((1, 2, 3), (4, 5))
    assert c.replace(1) == 2
    assert c.replace(2) == 3
    assert c.replace(3) == 1
    assert c.replace(4) == 5
    assert c.replace(5) == 4
    assert c.replace(6) == 6
    assert c.replace([1, 4, 6]) == [2, 5, 6]
    assert c.replace((3, 5)) == (1, 4)


def test_inv():
    c = Cycles((1, 2, 3), (4, 5))
    assert c.inv() == Cycles((1, 3, 2), (4, 5))
    assert (c * c.inv()).is_identity()
    assert invert(c) == c.inv()


def test_from_mapping():
    assert from_mapping([(1, 2), (2, 3), (3, 1), (4, 4)]) == Cycles(1, 2, 3)
    assert from_mapping({5: 6, 6: 5}) == Cycles(5, 6)
    assert from_mapping([]) == Cycles()
    c = Cycles((1, 4), (2, 7, 3))
    assert from_mapping({x: c.replace(x) for x in c.support}) == c


@pytest.mark.parametrize("pairs", [
    [(1, 2), (1, 3)],
    [(1, 3), (2, 3)],
    [(1, 2)],
    [(1, 1), (1, 2), (2, 1)],
])
def test_from_mapping_rejects_non_bijections(pairs):
    with pytest.raises(PermutationError):
        from_mapping(pairs)


def test_compose_applies_right_argument_first():
    s = Cycles(1, 2)
    t = Cycles(2, 3)
    assert apply(compose(t, s), 1) == 3
    assert apply(compose(s, t), 1) == 2
    assert compose(t, s) == s * t


def test_apply_fixes_unmoved_points():
    c = Cycles(1, 2)
    assert apply(c, 2) == 1
    assert apply(c, 100) == 100
    assert apply(Cycles(), 5) == 5


def test_support_of():
    assert support_of([]) == []
    assert support_of([Cycles(3, 1), Cycles(2, 3), Cycles()]) == [1, 2, 3]


def test_random_permutation():
    rng = np.random.default_rng(1234)
    for _ in range(20):
        p = random_permutation(6, rng)
        assert set(p.support) <= set(range(1, 7))
        assert sorted(p.replace(list(range(1, 7)))) == list(range(1, 7))
