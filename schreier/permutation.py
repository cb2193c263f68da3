from __future__ import annotations

import functools
from typing import Iterable

import numpy as np


class PermutationError(ValueError):
    pass


@functools.total_ordering
class Cycles():

    __slots__ = ('_cycles', '_support', '_mapping')

    def __init__(self, *cycles):
        self._mapping = {}
        if len(cycles) == 0:
            self._cycles = ()
            self._support = ()
            return

        if not isinstance(cycles[0], (list, tuple)):
            cycles = (cycles, )

        support = set()
        ret = []
        for cycle in cycles:
            if len(cycle) <= 1:
                continue
            support.update(cycle)
            i = cycle.index(min(cycle))
            cycle = tuple(cycle[i:]) + tuple(cycle[:i])
            ret.append(cycle)
            for i in range(len(cycle) - 1):
                self._mapping[cycle[i]] = cycle[i + 1]
            self._mapping[cycle[-1]] = cycle[0]
        self._cycles = tuple(sorted(ret))
        self._support = tuple(sorted(support))

    @classmethod
    def from_mapping(cls, pairs: dict[int, int] | Iterable[tuple[int, int]]) -> Cycles:
        """Build a permutation from an explicit point -> image association.

        Pairs mapping a point to itself are dropped. Any point that does not
        appear is fixed.

        Raises:
            PermutationError: if the association is not a bijection.
        """
        if isinstance(pairs, dict):
            pairs = pairs.items()
        mapping = {}
        sources = set()
        images = set()
        for a, b in pairs:
            if a in sources:
                raise PermutationError(f"point {a!r} is mapped twice")
            if b in images:
                raise PermutationError(f"point {b!r} is the image of two points")
            sources.add(a)
            images.add(b)
            if a != b:
                mapping[a] = b
        if set(mapping) != set(mapping.values()):
            raise PermutationError(
                f"{dict(mapping)!r} does not close up into cycles")
        return cls._from_sorted_mapping(
            {k: mapping[k]
             for k in sorted(mapping, reverse=True)})

    def __hash__(self):
        return hash(self._cycles)

    def is_identity(self):
        return len(self._cycles) == 0

    def __eq__(self, value) -> bool:
        if not isinstance(value, Cycles):
            return NotImplemented
        return self._cycles == value._cycles

    def __lt__(self, value: Cycles) -> bool:
        return self._cycles < value._cycles

    def __mul__(self, other: Cycles) -> Cycles:
        """Returns the product of two permutations.

        The product of permutations a, b is understood to be the permutation
        resulting from applying a, then b.
        """
        support = sorted(set(self.support + other.support), reverse=True)
        mapping = {
            a: b
            for a, b in zip(support, other.replace(self.replace(support)))
            if a != b
        }
        return Cycles._from_sorted_mapping(mapping)

    @staticmethod
    def _from_sorted_mapping(mapping: dict[int, int]) -> Cycles:
        c = Cycles()
        if not mapping:
            return c

        c._support = tuple(reversed(mapping.keys()))
        c._mapping = mapping.copy()

        cycles = []
        while mapping:
            k, el = mapping.popitem()
            cycle = [k]
            while k != el:
                cycle.append(el)
                el = mapping.pop(el)
            cycles.append(tuple(cycle))
        c._cycles = tuple(cycles)

        return c

    def inv(self) -> Cycles:
        c = Cycles()
        if len(self._cycles) == 0:
            return c
        c._cycles = tuple(
            sorted((cycle[0], ) + tuple(reversed(cycle[1:]))
                   for cycle in self._cycles))
        c._support = self._support
        c._mapping = {v: k for k, v in self._mapping.items()}
        return c

    @property
    def support(self):
        """Returns the support of the permutation.

        The support of a permutation is the set of points that are moved by
        the permutation.
        """
        return self._support

    def __len__(self):
        return len(self._support)

    def __repr__(self):
        return f'Cycles{tuple(self._cycles)!r}'

    def replace(self, expr):
        """replaces each point in expr by its image under the permutation."""
        if isinstance(expr, (tuple, list)):
            return type(expr)(self.replace(e) for e in expr)
        else:
            return self._replace(expr)

    def _replace(self, x: int) -> int:
        return self._mapping.get(x, x)




def random_permutation(n: int, rng: np.random.Generator | None = None,
                       start: int = 1) -> Cycles:
    """return a random permutation of the points start, ..., start + n - 1"""
    if rng is None:
        rng = np.random.default_rng()
    perm = rng.permutation(n) + start
    return Cycles.from_mapping(
        (i + start, int(p)) for i, p in enumerate(perm))


def identity() -> Cycles:
    return Cycles()


def apply(perm: Cycles, point: int) -> int:
    """Image of point under perm; points outside the support are fixed."""
    return perm._replace(point)


def compose(a: Cycles, b: Cycles) -> Cycles:
    """Function composition: apply b first, then a."""
    return b * a


def invert(a: Cycles) -> Cycles:
    return a.inv()


def from_mapping(pairs) -> Cycles:
    return Cycles.from_mapping(pairs)


def support_of(generators: Iterable[Cycles]) -> list[int]:
    """Sorted union of the supports of all generators."""
    support = set()
    for g in generators:
        support.update(g.support)
    return sorted(support)
