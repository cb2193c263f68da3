from __future__ import annotations

import logging
from typing import Iterator, Sequence

from .config import getConfig
from .permutation import Cycles, apply, compose
from .words import Forward, Letter, orbit_bound

logger = logging.getLogger(__name__)


class NotInOrbit(KeyError):
    pass


class SchreierVector():
    """Transporters of the points discovered in the orbit of ``base``.

    Maps every discovered point ``i`` to a product of generators taking
    ``base`` to ``i``. Entries are only ever added: the first transporter
    recorded for a point is kept. Next to the transporter the vector keeps
    the edge that discovered the point, i.e. the predecessor point and the
    1-based index of the generator, which together form a Schreier tree.
    """

    __slots__ = ('base', '_transversal', '_edges', 'rounds', 'closed')

    def __init__(self, base: int):
        self.base = base
        self._transversal: dict[int, Cycles] = {base: Cycles()}
        self._edges: dict[int, tuple[int, int]] = {}
        self.rounds = 0
        self.closed = False

    def __repr__(self):
        return f'SchreierVector({self.base!r}, {self._transversal!r})'

    def __eq__(self, other) -> bool:
        if not isinstance(other, SchreierVector):
            return NotImplemented
        return (self.base == other.base
                and self._transversal == other._transversal)

    def __len__(self):
        return len(self._transversal)

    def __iter__(self) -> Iterator[int]:
        return iter(self._transversal)

    def __contains__(self, point) -> bool:
        return point in self._transversal

    def __getitem__(self, point: int) -> Cycles:
        return self._transversal[point]

    def get(self, point: int, default=None):
        return self._transversal.get(point, default)

    def keys(self):
        return self._transversal.keys()

    def values(self):
        return self._transversal.values()

    def items(self):
        return self._transversal.items()

    def insert(self, point: int, transporter: Cycles,
               edge: tuple[int, int]) -> bool:
        """Records point unless it is already known.

        ``edge`` is the predecessor point and the 1-based index of the
        generator taking it to ``point``. Returns True if the point was new.
        """
        if self._transversal.setdefault(point, transporter) is not transporter:
            return False
        self._edges[point] = edge
        return True

    def transporter(self, point: int) -> Cycles:
        try:
            return self._transversal[point]
        except KeyError:
            raise NotInOrbit(
                f'{point!r} is not in the orbit of {self.base!r}') from None

    def word(self, point: int) -> list[Letter]:
        """Generator word leading from the base point to point.

        The word follows the recorded Schreier tree, so it never visits a
        point twice.
        """
        if point not in self._transversal:
            raise NotInOrbit(
                f'{point!r} is not in the orbit of {self.base!r}')
        word = []
        while point != self.base:
            point, index = self._edges[point]
            word.append(Forward(index))
        word.reverse()
        return word

    def orbit(self) -> set[int]:
        return set(self._transversal)


def extend(point: int, transporter: Cycles, generators: Sequence[Cycles],
           vector: SchreierVector,
           new: list[int]) -> tuple[SchreierVector, list[int]]:
    """Records the images of point under every generator.

    A point already in the vector is skipped, whichever generator or
    predecessor found it first.
    """
    for index, gen in enumerate(generators, 1):
        j = apply(gen, point)
        if j in vector:
            continue
        if vector.insert(j, compose(gen, transporter), (point, index)):
            new.append(j)
    return vector, new


def extend_loop(generators: Sequence[Cycles], vector: SchreierVector,
                frontier: Sequence[int],
                new: list[int]) -> tuple[SchreierVector, list[int]]:
    for point in frontier:
        transporter = vector.get(point)
        if transporter is None:
            continue
        vector, new = extend(point, transporter, generators, vector, new)
    return vector, new


def loop(generators: Sequence[Cycles], vector: SchreierVector,
         frontier: Sequence[int], max_rounds: int) -> SchreierVector:
    """Expands the frontier round by round.

    Stops after ``max_rounds`` rounds or as soon as a round finds no new
    point, in which case ``vector.closed`` is set.
    """
    log_rounds = getConfig().log_rounds
    for _ in range(max_rounds):
        vector, new = extend_loop(generators, vector, frontier, [])
        vector.rounds += 1
        if log_rounds:
            logger.debug("Schreier vector of %s: round %d, %d new, %d total",
                         vector.base, vector.rounds, len(new), len(vector))
        if not new:
            vector.closed = True
            break
        frontier = new
    else:
        logger.debug(
            "Schreier vector of %s: budget of %d rounds spent "
            "with %d points known", vector.base, max_rounds, len(vector))
    return vector


def build(generators: Sequence[Cycles],
          k: int,
          bound: int | None = None) -> SchreierVector:
    """Builds the Schreier vector of ``k``.

    The result is always sound. It holds the whole orbit of ``k`` when
    ``bound`` is at least ``orbit_bound(generators)``, which is what is used
    when no bound is given and no ``max_rounds`` is configured. A smaller
    bound is allowed and may leave the orbit incomplete.
    """
    if bound is None:
        bound = getConfig().max_rounds
        if bound is None:
            bound = orbit_bound(generators)
    if bound < 0:
        raise ValueError(f'round bound must not be negative, got {bound}')
    return loop(generators, SchreierVector(k), [k], bound)


def orbit(vector: SchreierVector) -> set[int]:
    return vector.orbit()
