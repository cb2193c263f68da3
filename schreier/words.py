"""Words over a generating set.

A word is a list of letters. A letter names a generator by its 1-based
position in the generator list, either as the generator itself
(``Forward(i)``) or as its inverse (``Inverse(i)``), so words can be inverted
and reduced without touching any permutation.

Words act on points from left to right: the first letter is applied to the
point first. This matches the product of ``Cycles``, where ``a * b`` applies
``a`` and then ``b``, so the permutation of ``[l1, l2, l3]`` is
``g(l1) * g(l2) * g(l3)``.

Functions that only need the action of a word also accept words made of
``Cycles`` directly. Such words need no generator tables and ``None`` may be
passed instead.
"""
from __future__ import annotations

import functools
import operator
from typing import NamedTuple, Sequence, Union

from .permutation import Cycles, apply, support_of


class Letter(NamedTuple):
    index: int
    inverse: bool = False

    def __repr__(self):
        if self.inverse:
            return f'Inverse({self.index})'
        return f'Forward({self.index})'


def Forward(index: int) -> Letter:
    return Letter(index, False)


def Inverse(index: int) -> Letter:
    return Letter(index, True)


Word = list[Union[Letter, Cycles]]


def invert_letter(letter: Letter) -> Letter:
    return Letter(letter.index, not letter.inverse)


def invert_word(word: Sequence[Letter]) -> list[Letter]:
    """Returns the word of the inverse permutation."""
    return [invert_letter(letter) for letter in reversed(word)]


def reduce_word(word: Sequence[Letter]) -> list[Letter]:
    """Cancels adjacent letter / inverse pairs.

    One pass with an output stack: a letter that inverts the top of the
    stack pops it, any other letter is pushed. The result is freely reduced
    and represents the same permutation.
    """
    ret = []
    for letter in word:
        if ret and ret[-1] == invert_letter(letter):
            ret.pop()
        else:
            ret.append(letter)
    return ret


def is_reduced(word: Sequence[Letter]) -> bool:
    return all(b != invert_letter(a) for a, b in zip(word, word[1:]))


def is_subword(sub: Sequence, word: Sequence) -> bool:
    """True if sub is obtained from word by deleting letters."""
    it = iter(word)
    return all(any(x == y for y in it) for x in sub)


class GeneratorTables():
    """Generators and their inverses keyed by 1-based position."""

    __slots__ = ('forward', 'inverse')

    def __init__(self, forward: dict[int, Cycles], inverse: dict[int,
                                                                 Cycles]):
        self.forward = forward
        self.inverse = inverse

    def __len__(self):
        return len(self.forward)

    def __repr__(self):
        return f'GeneratorTables({list(self.forward.values())!r})'

    def lookup(self, letter: Letter) -> Cycles:
        table = self.inverse if letter.inverse else self.forward
        try:
            return table[letter.index]
        except KeyError:
            raise IndexError(
                f'{letter!r} refers to no generator, '
                f'there are {len(self.forward)}.') from None


def prepare_generators(generators: Sequence[Cycles]) -> GeneratorTables:
    forward = {i: g for i, g in enumerate(generators, 1)}
    inverse = {i: g.inv() for i, g in forward.items()}
    return GeneratorTables(forward, inverse)


def _action(tables: GeneratorTables | None, x) -> Cycles:
    if isinstance(x, Cycles):
        return x
    if tables is None:
        raise TypeError(f'{x!r} needs generator tables to be evaluated.')
    return tables.lookup(x)


def apply_word(tables: GeneratorTables | None, word: Word, point: int) -> int:
    """Image of point under the word, without composing permutations."""
    for x in word:
        point = apply(_action(tables, x), point)
    return point


def evaluate_word(tables: GeneratorTables | None, word: Word) -> Cycles:
    """The permutation the word represents."""
    return functools.reduce(operator.mul, (_action(tables, x) for x in word),
                            Cycles())


def path(tables: GeneratorTables | None, word: Word, start: int) -> list[int]:
    """Points reached after each non-empty prefix of the word."""
    ret = []
    for x in word:
        start = apply(_action(tables, x), start)
        ret.append(start)
    return ret


def shorten_connecting_word(tables: GeneratorTables | None, word: Word,
                            start: int) -> Word:
    """Deletes closed sub-paths until the path of the word visits no point
    twice.

    The result is a subword of ``word`` taking ``start`` to the same point.
    Each pass finds the first point the path revisits and removes the letters
    between its two visits, so the word gets strictly shorter every pass.
    """
    word = list(word)
    while True:
        seen = {}
        for i, p in enumerate(path(tables, word, start)):
            if p in seen:
                break
            seen[p] = i
        else:
            return word
        word = word[:seen[p] + 1] + word[i + 1:]


def orbit_bound(generators: Sequence[Cycles]) -> int:
    """Round budget after which an orbit closure is certainly complete.

    A point of an orbit is reached by a word whose path never repeats a
    point, and such a path only visits moved points and the start.
    """
    return len(support_of(generators)) + 1
