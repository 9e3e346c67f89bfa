"""
Bounded forward-chaining closure.

Pure functions over EqualitySets: one-step consequence, marginal
incompatibility pruning, and a fixed point capped by a reasoning budget.
None of them mutate their arguments.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from gogar.scorekeeping.equality_set import EqualitySet
from gogar.scorekeeping.rules import IncompatibilitySet, Inference, Sentence


def consequences_once(
    inferences: Iterable[Inference],
    basis: EqualitySet[Sentence],
) -> EqualitySet[Sentence]:
    """
    Apply every rule once.

    Returns ``basis`` plus the conclusion of each inference whose premises
    are all in ``basis``.
    """
    conclusions: EqualitySet[Sentence] = EqualitySet()
    for inference in inferences:
        if inference.premise_set <= basis:
            conclusions.add(inference.conclusion)
    return basis | conclusions


def compatible_with(
    incompatibilities: IncompatibilitySet,
    commitments: EqualitySet[Sentence],
    sentence: Sentence,
) -> bool:
    """
    Check whether ``sentence`` sits compatibly with ``commitments``.

    A sentence is ruled out only if it is what completes some incompatibility
    set: the set must be contained in ``commitments`` plus the sentence, and
    must stop being contained once the sentence is taken away again.
    """
    everything = commitments | [sentence]
    without = everything - [sentence]
    return not any(
        incompatible <= everything and not incompatible <= without
        for incompatible in incompatibilities
    )


def remove_incompatibles(
    candidates: Iterable[Sentence],
    commitments: EqualitySet[Sentence],
    incompatibilities: IncompatibilitySet,
) -> EqualitySet[Sentence]:
    """Keep the candidates that are compatible with ``commitments``."""
    return EqualitySet(
        s for s in candidates if compatible_with(incompatibilities, commitments, s)
    )


def consequences_once_and_prune(
    inferences: Iterable[Inference],
    base: EqualitySet[Sentence],
    commitments: EqualitySet[Sentence],
    incompatibilities: IncompatibilitySet,
) -> EqualitySet[Sentence]:
    return remove_incompatibles(
        consequences_once(inferences, base), commitments, incompatibilities
    )


def fixed_point(
    initial: EqualitySet[Sentence],
    max_iterations: int,
    step: Callable[[EqualitySet[Sentence]], EqualitySet[Sentence]],
) -> EqualitySet[Sentence]:
    """
    Apply ``step`` until the set stops changing or the budget runs out.

    The budget models an agent's reasoning depth, so with a small budget
    the result can fall short of the true closure.
    """
    current = initial
    for _ in range(max(max_iterations, 0)):
        following = step(current)
        if following == current:
            break
        current = following
    return current


def expand_entitlements(
    commitments: EqualitySet[Sentence],
    entitlements: EqualitySet[Sentence],
    incompatibilities: IncompatibilitySet,
    committive: Iterable[Inference],
    permissive: Iterable[Inference],
) -> EqualitySet[Sentence]:
    """
    One round of entitlement expansion.

    Committive rules carry entitlement as well as commitment. Permissive
    rules fire only from premises that are both entitled and committed.
    """
    via_committive = consequences_once_and_prune(
        committive, entitlements, commitments, incompatibilities
    )
    via_permissive = consequences_once_and_prune(
        permissive, entitlements & commitments, commitments, incompatibilities
    )
    return via_committive | via_permissive
