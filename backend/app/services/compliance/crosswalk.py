"""
Cross-Jurisdiction Crosswalk

Pure table lookup: a mapping row produces an overlap when both of its
requirements are in the respective applicable lists. Each requirement is
paired at most once, strongest overlap first, so the overlap count never
exceeds the size of the smaller list.
"""
from decimal import Decimal
from typing import Dict, Iterable, List, Optional

from ...models.domain import CrosswalkEntry, EffortType, OverlapRequirement, Requirement
from .scoring import round_half_up

WEEKS_SAVED: Dict[EffortType, float] = {
    EffortType.SINGLE_IMPLEMENTATION: 3.0,
    EffortType.PARTIAL_OVERLAP: 1.5,
    EffortType.SEPARATE_EFFORT: 0.0,
}

EFFORT_RANK = {
    EffortType.SINGLE_IMPLEMENTATION: 0,
    EffortType.PARTIAL_OVERLAP: 1,
    EffortType.SEPARATE_EFFORT: 2,
}


def crosswalk(
    requirements_a: Iterable[Requirement],
    requirements_b: Iterable[Requirement],
    mapping: Iterable[CrosswalkEntry],
) -> List[OverlapRequirement]:
    by_id_a = {r.id: r for r in requirements_a}
    by_id_b = {r.id: r for r in requirements_b}

    # Stable sort keeps table order within an effort type
    ranked = sorted(mapping, key=lambda e: EFFORT_RANK[e.effort_type])

    used_a = set()
    used_b = set()
    overlaps = []
    for entry in ranked:
        if entry.source_id in by_id_a and entry.target_id in by_id_b:
            id_a, id_b = entry.source_id, entry.target_id
        elif entry.target_id in by_id_a and entry.source_id in by_id_b:
            id_a, id_b = entry.target_id, entry.source_id
        else:
            continue
        if id_a in used_a or id_b in used_b:
            continue
        used_a.add(id_a)
        used_b.add(id_b)
        overlaps.append(OverlapRequirement(
            requirement_a=id_a,
            requirement_b=id_b,
            jurisdiction_a=by_id_a[id_a].jurisdiction,
            jurisdiction_b=by_id_b[id_b].jurisdiction,
            effort_type=entry.effort_type,
            weeks_saved=WEEKS_SAVED[entry.effort_type],
            description=entry.description,
        ))
    return overlaps


def summarize_overlap(overlaps: List[OverlapRequirement], total_requirements: Optional[int] = None) -> dict:
    """
    Counts per effort type, weeks saved and the share of work avoided.

    savings_percent = (single + 0.5 * partial) / total * 100, where total
    defaults to the number of overlaps.
    """
    counts = {effort.value: 0 for effort in EffortType}
    for overlap in overlaps:
        counts[overlap.effort_type.value] += 1

    total = len(overlaps) if total_requirements is None else total_requirements
    single = counts[EffortType.SINGLE_IMPLEMENTATION.value]
    partial = counts[EffortType.PARTIAL_OVERLAP.value]
    savings = round_half_up((Decimal(single) + Decimal(partial) / 2) * 100 / Decimal(total)) if total else 0

    return {
        "overlap_count": len(overlaps),
        "by_effort_type": counts,
        "weeks_saved": sum(o.weeks_saved for o in overlaps),
        "savings_percent": savings,
    }
