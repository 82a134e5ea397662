"""
Popularity blending. Deterministic, no I/O.

External usage (share of imported projects that use a technology) is
weighted 70/30 against the baseline score. Technologies the baseline
doesn't know get their raw usage share.
"""

import math
from collections import Counter
from collections.abc import Iterable, Mapping

from popularity.table import BASELINE_POPULARITY

EXTERNAL_WEIGHT = 0.7
BASELINE_WEIGHT = 0.3


def _round_half_up(value: float) -> int:
    """Python's round() is banker's rounding; scores round .5 up."""
    return math.floor(value + 0.5)


def blend(
    project_tech_lists: Iterable[Iterable[str]],
    baseline: Mapping[str, int] = BASELINE_POPULARITY,
) -> dict[str, int]:
    """
    Merge technology usage observed in external projects into `baseline`.

    Returns a new dict; `baseline` is never modified. An empty
    `project_tech_lists` returns a plain copy of `baseline`.
    """
    updated = dict(baseline)
    projects = [set(techs) for techs in project_tech_lists]
    if not projects:
        return updated

    total = len(projects)
    counts = Counter(tech for techs in projects for tech in techs)

    for tech, count in counts.items():
        usage_pct = count / total * 100
        if tech in updated:
            updated[tech] = _round_half_up(
                usage_pct * EXTERNAL_WEIGHT + updated[tech] * BASELINE_WEIGHT
            )
        else:
            updated[tech] = _round_half_up(usage_pct)

    return updated


def popularity_for(tech: str, table: Mapping[str, int] = BASELINE_POPULARITY) -> int:
    return table.get(tech, 0)


def top_technologies(table: Mapping[str, int], limit: int | None = None) -> list[tuple[str, int]]:
    """(tech, score) pairs, highest first, ties by name."""
    ranked = sorted(table.items(), key=lambda kv: (-kv[1], kv[0]))
    return ranked if limit is None else ranked[:limit]
