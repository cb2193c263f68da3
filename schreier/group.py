from __future__ import annotations

from typing import Iterator

from .permutation import Cycles, support_of
from .stabilizer import stabilizer_generators
from .vector import SchreierVector, build


class PermutationGroup():

    def __init__(self, generators: list[Cycles]):
        self.generators = list(generators)
        self._support = None
        self._elements = None
        self._orbits = None

    def __repr__(self) -> str:
        return f"PermutationGroup({self.generators})"

    def is_trivial(self):
        """Test if the group is the trivial group.

        This is true if the group contains only the identity permutation.
        """
        return all(g.is_identity() for g in self.generators)

    @property
    def support(self):
        if self._support is None:
            self._support = support_of(self.generators)
        return self._support

    def schreier_vector(self,
                        alpha: int,
                        bound: int | None = None) -> SchreierVector:
        return build(self.generators, alpha, bound)

    def orbit(self, alpha: int) -> list[int]:
        return sorted(self.schreier_vector(alpha).orbit())

    def orbits(self) -> list[list[int]]:
        """Orbits of the moved points, ordered by their least point."""
        if self._orbits is None:
            orbits = []
            seen = set()
            for alpha in self.support:
                if alpha in seen:
                    continue
                orbit = self.orbit(alpha)
                seen.update(orbit)
                orbits.append(orbit)
            self._orbits = orbits
        return self._orbits

    def stabilizer(self, alpha: int) -> PermutationGroup:
        """Return the stabilizer subgroup of ``alpha``."""
        return PermutationGroup(
            stabilizer_generators(self.generators, alpha))

    def generate(self) -> Iterator[Cycles]:
        """Yield every group element, breadth first in word length.

        Only meant for small groups.
        """
        e = Cycles()
        yield e
        seen = {e}
        frontier = [e]
        while frontier:
            new = []
            for a in frontier:
                for g in self.generators:
                    c = a * g
                    if c not in seen:
                        seen.add(c)
                        new.append(c)
                        yield c
            frontier = new

    @property
    def elements(self) -> set[Cycles]:
        if self._elements is None:
            self._elements = set(self.generate())
        return self._elements

    def order(self):
        return len(self.elements)

    def __contains__(self, perm: Cycles):
        if perm.is_identity() or perm in self.generators:
            return True
        if not set(perm.support) <= set(self.support):
            return False
        return perm in self.elements


class SymmetricGroup(PermutationGroup):

    def __init__(self, N: int):
        if N < 2:
            super().__init__([])
        elif N == 2:
            super().__init__([Cycles((1, 2))])
        else:
            super().__init__([Cycles((1, 2)), Cycles(tuple(range(1, N + 1)))])
        self.N = N

    def __repr__(self) -> str:
        return f"SymmetricGroup({self.N})"


class CyclicGroup(PermutationGroup):

    def __init__(self, N: int):
        if N < 2:
            super().__init__([])
        else:
            super().__init__([Cycles(tuple(range(1, N + 1)))])
        self.N = N

    def __repr__(self) -> str:
        return f"CyclicGroup({self.N})"
