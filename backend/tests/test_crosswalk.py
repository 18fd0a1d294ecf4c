"""
Tests for the Cross-Jurisdiction Crosswalk.

1. Only pairs applicable on both sides produce overlaps
2. Either mapping orientation is accepted
3. Each requirement is paired at most once (count <= min(|A|, |B|))
4. Weeks saved and savings summary
"""
import pytest

from app.models.domain import (
    Category,
    CrosswalkEntry,
    EffortType,
    Jurisdiction,
    OperatorProfile,
    OperatorType,
    OrbitRegime,
    Requirement,
    SizeClass,
)
from app.services.catalog import CROSSWALK_TABLES, get_catalog, get_mapping
from app.services.compliance.applicability import resolve
from app.services.compliance.crosswalk import WEEKS_SAVED, crosswalk, summarize_overlap

SINGLE = EffortType.SINGLE_IMPLEMENTATION
PARTIAL = EffortType.PARTIAL_OVERLAP
SEPARATE = EffortType.SEPARATE_EFFORT


def nis2(req_id):
    return Requirement(id=req_id, jurisdiction=Jurisdiction.NIS2, article_ref="NIS2",
                       title=req_id, category=Category.CYBERSECURITY)


def eu(req_id):
    return Requirement(id=req_id, jurisdiction=Jurisdiction.EU_SPACE_ACT, article_ref="EUSA",
                       title=req_id, category=Category.CYBERSECURITY)


class TestCrosswalk:

    def test_only_applicable_pairs_overlap(self):
        mapping = [
            CrosswalkEntry("n1", "e1", SINGLE),
            CrosswalkEntry("n2", "e2", PARTIAL),
        ]

        overlaps = crosswalk([nis2("n1"), nis2("n2")], [eu("e1")], mapping)

        assert len(overlaps) == 1
        assert overlaps[0].requirement_a == "n1"
        assert overlaps[0].requirement_b == "e1"
        assert overlaps[0].weeks_saved == 3.0

    def test_reverse_orientation(self):
        mapping = [CrosswalkEntry("n1", "e1", PARTIAL)]

        overlaps = crosswalk([eu("e1")], [nis2("n1")], mapping)

        assert len(overlaps) == 1
        assert overlaps[0].requirement_a == "e1"
        assert overlaps[0].jurisdiction_a == Jurisdiction.EU_SPACE_ACT
        assert overlaps[0].requirement_b == "n1"
        assert overlaps[0].weeks_saved == 1.5

    def test_each_requirement_paired_once_strongest_first(self):
        """Two NIS2 requirements map to one EU article; the single-implementation row wins."""
        mapping = [
            CrosswalkEntry("n2", "e1", PARTIAL),
            CrosswalkEntry("n1", "e1", SINGLE),
        ]

        overlaps = crosswalk([nis2("n1"), nis2("n2")], [eu("e1")], mapping)

        assert [(o.requirement_a, o.effort_type) for o in overlaps] == [("n1", SINGLE)]

    def test_no_overlap_without_mapping(self):
        assert crosswalk([nis2("n1")], [eu("e1")], []) == []

    def test_weeks_saved_constants(self):
        assert WEEKS_SAVED == {SINGLE: 3.0, PARTIAL: 1.5, SEPARATE: 0.0}

    @pytest.mark.parametrize("pair", list(CROSSWALK_TABLES))
    def test_count_bounded_by_smaller_side(self, pair):
        profile = OperatorProfile(
            operator_type=OperatorType.SPACECRAFT,
            size_class=SizeClass.LARGE,
            orbit_type=OrbitRegime.LEO,
            mass_kg=5,
            is_eu_established=True,
            has_uk_nexus=True,
            has_us_nexus=True,
            is_constellation=True,
        )
        a, b = pair
        applicable_a = resolve(profile, get_catalog(a))
        applicable_b = resolve(profile, get_catalog(b))

        overlaps = crosswalk(applicable_a, applicable_b, get_mapping(a, b))

        assert 0 < len(overlaps) <= min(len(applicable_a), len(applicable_b))
        assert len({o.requirement_a for o in overlaps}) == len(overlaps)
        assert len({o.requirement_b for o in overlaps}) == len(overlaps)


class TestMappingLookup:

    def test_mapping_either_order(self):
        assert get_mapping(Jurisdiction.NIS2, Jurisdiction.EU_SPACE_ACT) is \
            get_mapping(Jurisdiction.EU_SPACE_ACT, Jurisdiction.NIS2)

    def test_unmapped_pair_raises(self):
        with pytest.raises(ValueError):
            get_mapping(Jurisdiction.UK_SIA, Jurisdiction.US)


class TestSummary:

    def test_summary_counts_and_savings(self):
        mapping = [
            CrosswalkEntry("n1", "e1", SINGLE),
            CrosswalkEntry("n2", "e2", PARTIAL),
            CrosswalkEntry("n3", "e3", SEPARATE),
        ]
        overlaps = crosswalk(
            [nis2("n1"), nis2("n2"), nis2("n3")],
            [eu("e1"), eu("e2"), eu("e3")],
            mapping,
        )

        summary = summarize_overlap(overlaps, total_requirements=4)

        assert summary["overlap_count"] == 3
        assert summary["by_effort_type"] == {
            "single_implementation": 1,
            "partial_overlap": 1,
            "separate_effort": 1,
        }
        assert summary["weeks_saved"] == 4.5
        assert summary["savings_percent"] == 38  # (1 + 0.5) / 4 = 37.5%

    def test_summary_empty(self):
        summary = summarize_overlap([], total_requirements=0)

        assert summary["overlap_count"] == 0
        assert summary["weeks_saved"] == 0
        assert summary["savings_percent"] == 0
