from __future__ import annotations

import logging
from typing import Sequence

from .config import getConfig
from .permutation import Cycles, apply, compose, invert
from .vector import SchreierVector, build

logger = logging.getLogger(__name__)


def schreier_generators(vector: SchreierVector,
                        generators: Sequence[Cycles]) -> list[Cycles]:
    """Schreier generators of the stabilizer of ``vector.base``.

    For every generator ``s`` and every transporter ``u`` of the vector,
    ``s u`` takes the base point to some ``j``; with ``w`` the transporter
    of ``j`` the permutation ``w^-1 s u`` fixes the base point. If the
    vector is complete for ``generators``, these permutations generate the
    stabilizer (Schreier's Lemma).

    The list keeps repetitions and identities. A point missing from the
    vector is treated as having the identity as transporter.
    """
    ret = []
    identity = Cycles()
    for gen in generators:
        for u in vector.values():
            su = compose(gen, u)
            w = vector.get(apply(su, vector.base), identity)
            ret.append(compose(invert(w), su))
    return ret


def stabilizer_generators(generators: Sequence[Cycles],
                          k: int,
                          bound: int | None = None,
                          unique: bool | None = None) -> list[Cycles]:
    """Generators of the stabilizer of ``k`` in the group generated by
    ``generators``.
    """
    if unique is None:
        unique = getConfig().unique_generators
    vector = build(generators, k, bound)
    gens = schreier_generators(vector, generators)
    if not vector.closed:
        logger.debug(
            "stabilizer of %s taken from an orbit closure that did not "
            "reach its fixpoint", k)
    if not unique:
        return gens
    ret = []
    seen = set()
    for g in gens:
        if g.is_identity() or g in seen:
            continue
        seen.add(g)
        ret.append(g)
    return ret
