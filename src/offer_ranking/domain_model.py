"""Deterministic domain model — what a job offer is judged on.

Three layers, all plain data and pure functions:
  1. Identity and eligibility: which dimensions take part in scoring at all.
  2. The built-in dimension catalog: defaults every board starts with, plus
     optional dimensions the user can switch on.
  3. Option auto-scoring: the evenly spaced scores an option editor assigns
     when a select dimension's choices are added, removed or reordered.

The scoring core only ever reads ``DimensionOption.score``; layer 3 is for
whoever edits the option list.
"""

from __future__ import annotations

import math

from src.offer_ranking.models import Dimension, DimensionOption

# ---------------------------------------------------------------------------
# Layer 1 — Identity and eligibility
# ---------------------------------------------------------------------------

# Label-only dimension; excluded by id whatever its kind or active flag.
IDENTITY_DIMENSION_ID = "company"


def is_scoring_eligible(dimension: Dimension) -> bool:
    return (
        dimension.active
        and dimension.id != IDENTITY_DIMENSION_ID
        and dimension.kind != "text"
    )


# ---------------------------------------------------------------------------
# Layer 2 — Built-in dimension catalog
# ---------------------------------------------------------------------------

def _options(*triples: tuple[str, str, float]) -> list[DimensionOption]:
    return [
        DimensionOption(value=value, label=label, score=score)
        for value, label, score in triples
    ]


_YES_NO_UNSURE = (
    ("yes", "Yes", 100),
    ("no", "No", 0),
    ("unsure", "Not sure", 50),
)

_FIT_UNFIT = (
    ("fit", "Suits me", 100),
    ("unfit", "Does not suit me", 20),
    ("unknown", "Don't know", 50),
)

DEFAULT_DIMENSIONS: list[Dimension] = [
    Dimension(
        id=IDENTITY_DIMENSION_ID, name="Company", kind="text",
        is_default=True, active=True,
    ),
    Dimension(
        id="jobTitleValue", name="Job title value", kind="select",
        is_default=True, active=True,
        description="1-5; higher means a more valuable title or endorsement",
        options=_options(
            ("5", "5", 100), ("4", "4", 80), ("3", "3", 60),
            ("2", "2", 40), ("1", "1", 20),
        ),
    ),
    Dimension(
        id="location", name="Location", kind="location",
        is_default=True, active=True,
        description="City plus how well it matches what you want",
        options=_options(
            ("met", "Matches", 100),
            ("indifferent", "Don't mind", 50),
            ("unmet", "Does not match", 20),
        ),
    ),
    Dimension(
        id="salary", name="Compensation", kind="salary",
        is_default=True, active=True,
    ),
    Dimension(
        id="isCore", name="Core business", kind="select",
        is_default=True, active=True,
        options=_options(
            ("yes", "Yes", 100), ("no", "No", 30), ("unsure", "Not sure", 50),
        ),
    ),
    Dimension(
        id="workload", name="Working hours", kind="workload",
        is_default=True, active=True,
    ),
    Dimension(
        id="pua", name="Manipulative boss", kind="select",
        is_default=True, active=True, is_penalty=True,
        options=_options(
            ("yes", "Yes", -100), ("unsure", "Not sure", -50), ("no", "No", 0),
        ),
    ),
]

OPTIONAL_DIMENSIONS: list[Dimension] = [
    Dimension(
        id="abilityImprovement", name="Skill growth", kind="select",
        active=False,
        options=_options(
            ("high", "A lot", 100), ("medium", "Some", 60),
            ("none", "Almost none", 20), ("unsure", "Not sure", 50),
        ),
    ),
    Dimension(
        id="mainJobEmpowersSide", name="Helps future side business",
        kind="select", active=False,
        options=_options(
            ("v_high", "Very helpful", 100), ("high", "Somewhat helpful", 70),
            ("none", "Unrelated", 20), ("unsure", "Not sure", 50),
        ),
    ),
    Dimension(
        id="annualLeave", name="Annual leave", kind="numeric", active=False,
        description="Days per year",
    ),
    Dimension(
        id="leadership", name="Leadership style", kind="select", active=False,
        options=_options(*_FIT_UNFIT),
    ),
    Dimension(
        id="atmosphere", name="Team atmosphere", kind="select", active=False,
        options=_options(*_FIT_UNFIT),
    ),
    Dimension(
        id="outlook", name="Business outlook", kind="select", active=False,
        options=_options(
            ("growth", "Growing", 100), ("mature", "Mature / flat", 60),
            ("decline", "Declining", 20), ("unsure", "Not sure", 50),
        ),
    ),
    Dimension(
        id="turnover", name="Team turnover", kind="numeric", active=False,
        description="Departures in the last six months",
    ),
    Dimension(
        id="promotion", name="Promotion prospects", kind="select", active=False,
        options=_options(
            ("high", "Plenty of room", 100), ("slow", "Possible but slow", 70),
            ("none", "Practically none", 30), ("unsure", "Not sure", 50),
        ),
    ),
    Dimension(
        id="salaryIncrease", name="Yearly raise", kind="numeric", active=False,
        description="Percent per year; 10% scores full marks",
    ),
    Dimension(
        id="exitDifficulty", name="Easy to move on later", kind="select",
        active=False, options=_options(*_YES_NO_UNSURE),
    ),
    Dimension(
        id="sideHustle", name="Time for a side business", kind="select",
        active=False, options=_options(*_YES_NO_UNSURE),
    ),
    Dimension(
        id="personalTime", name="Personal time", kind="select", active=False,
        options=_options(*_YES_NO_UNSURE),
    ),
]


def initial_dimensions() -> list[Dimension]:
    return [*DEFAULT_DIMENSIONS, *OPTIONAL_DIMENSIONS]


# ---------------------------------------------------------------------------
# Layer 3 — Option auto-scoring
# ---------------------------------------------------------------------------

def _round_half_away(x: float) -> int:
    return int(math.copysign(math.floor(abs(x) + 0.5), x))


def auto_score_options(
    options: list[DimensionOption], is_penalty: bool,
) -> list[DimensionOption]:
    """Re-score *options* evenly by position.

    The first option gets the extreme score (100, or -100 on a penalty
    dimension) and the last gets 0.
    """
    m = len(options)
    if m == 0:
        return []
    top = -100.0 if is_penalty else 100.0
    if m == 1:
        return [options[0].model_copy(update={"score": top})]
    return [
        opt.model_copy(
            update={"score": float(_round_half_away(top * (m - 1 - i) / (m - 1)))},
        )
        for i, opt in enumerate(options)
    ]
