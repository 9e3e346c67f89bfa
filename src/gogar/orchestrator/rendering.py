"""
Text rendering of scores and agent descriptions.

Produces the plain-text listings shown at the terminal prompt and on the
web page, wrapped at a fixed column.
"""

import re
from collections.abc import Iterable

from gogar.scorekeeping.rules import Inference
from gogar.scorekeeping.schemas import AgentDescription, ChallengeView, Score

_ITEM_SEPARATOR = re.compile(r"; |, ")


def wrap(text: str, width: int = 78, indent: str = "  ") -> str:
    """
    Wrap a listing at ``width`` columns.

    The text is broken at "; " and ", " separators and rejoined with ", ".
    Continuation lines start with ``indent``.
    """
    sep = ", "
    out: list[str] = []
    pos = 0
    for piece in _ITEM_SEPARATOR.split(text):
        if pos != 0 and pos + len(piece) + len(sep) > width:
            out.append("\n" + indent)
            pos = len(indent)
        out.append(piece + sep)
        pos += len(piece) + len(sep)
    return "".join(out)[: -len(sep)]


def render_set(items: Iterable[str]) -> str:
    return "{" + ", ".join(items) + "}"


def render_incompatibilities(sets: Iterable[Iterable[str]]) -> str:
    return "; ".join(render_set(s) for s in sets)


def render_inference(inference: Inference) -> str:
    return f"{render_set(inference.premises)} |- {inference.conclusion}"


def render_challenge(challenge: ChallengeView) -> str:
    target = challenge.target_name or "a departed agent"
    return f'challenged {target}\'s entitlement to "{challenge.sentence}"'


def render_score(score: Score, width: int = 78) -> str:
    """Render one score as the three wrapped Commitments/Entitlements/Incompatibles lines."""
    return (
        wrap(f"\nCommitments:  {render_set(score.commitments)}", width)
        + wrap(f"\nEntitlements: {render_set(score.entitlements)}", width)
        + wrap(f"\nIncompatibles: {render_incompatibilities(score.incompatibles)}", width)
        + "\n\n"
    )


def render_score_all(scores: Iterable[Score], width: int = 78) -> str:
    return "".join(
        f"{s.scorekeeper}'s score on {s.other}" + render_score(s, width) for s in scores
    )


def render_agent(description: AgentDescription, width: int = 78) -> str:
    """Render an agent's full rule and commitment state."""
    committive = "; ".join(render_inference(i) for i in description.committive_inferences)
    permissive = "; ".join(render_inference(i) for i in description.permissive_inferences)
    challenges = "; ".join(render_challenge(c) for c in description.challenges_issued)
    return (
        description.name
        + f"\nIntelligence = {description.intelligence}"
        + wrap(f"\nCommitments avowed: {render_set(description.commitments_avowed)}", width)
        + wrap(
            f"\nSets taken to be incompatible: "
            f"{render_incompatibilities(description.incompatibilities)}",
            width,
        )
        + wrap(f"\nCommittive inferences accepted: {committive}", width)
        + wrap(f"\nPermissive inferences accepted: {permissive}", width)
        + wrap(f"\nChallenges issued: {challenges}", width)
        + "\n"
    )
