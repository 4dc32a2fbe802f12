"""Unit tests for document distribution aggregations."""

from datetime import date, datetime

import pytest

from sdn_map.lib.colors import color_for
from sdn_map.lib.statistics import (
    DocumentRecord,
    category_distribution,
    month_label,
    monthly_distribution,
    province_distribution,
    summarize,
    zone_distribution,
)
from sdn_map.lib.zones import HealthZone, ZoneClassifier

PROVINCES = ["ชลบุรี", "ชลบุรี", "ระยอง", "เชียงใหม่", "กรุงเทพมหานคร", "ชลบุรี"]


class TestProvinceDistribution:
    def test_counts_sorted_by_name(self) -> None:
        rows = province_distribution(PROVINCES)
        names = [row.name for row in rows]
        assert names == sorted(names)
        counts = {row.name: row.count for row in rows}
        assert counts["ชลบุรี"] == 3
        assert counts["ระยอง"] == 1

    def test_zone_filter(self) -> None:
        rows = province_distribution(PROVINCES, zone=HealthZone.EAST)
        assert {row.name for row in rows} == {"ชลบุรี", "ระยอง"}

    def test_empty(self) -> None:
        assert province_distribution([]) == []


class TestZoneDistribution:
    def test_largest_first_and_non_zero_only(self) -> None:
        """Zones are sorted by count; ties keep display order."""
        rows = zone_distribution(PROVINCES)
        assert [row.zone for row in rows] == [HealthZone.EAST, HealthZone.NORTH_UPPER, HealthZone.BANGKOK]
        east = rows[0]
        assert east.count == 4
        assert east.name == "ตะวันออก"
        assert east.color.startswith("#")

    def test_unknown_province_counts_as_central(self) -> None:
        rows = zone_distribution(["Atlantis"])
        assert len(rows) == 1
        assert rows[0].zone == HealthZone.CENTRAL

    def test_custom_classifier(self) -> None:
        classifier = ZoneClassifier({"Chonburi": HealthZone.EAST})
        rows = zone_distribution(["Chonburi", "Chonburi"], classifier)
        assert [(row.zone, row.count) for row in rows] == [(HealthZone.EAST, 2)]


class TestCategoryDistribution:
    def test_lists_every_category(self) -> None:
        rows = category_distribution({1: "Policy", 2: "Report", 3: "Plan"}, [1, 1, 3, None, 99])
        assert [(row.id, row.count) for row in rows] == [(1, 2), (2, 0), (3, 1)]
        assert rows[0].color == color_for(1).primary


class TestSummarize:
    def test_summary(self) -> None:
        documents = [
            DocumentRecord(province="ชลบุรี", category_id=1),
            DocumentRecord(province="ชลบุรี", category_id=2),
            DocumentRecord(province="สงขลา"),
        ]
        summary = summarize(documents, {1: "Policy", 2: "Report"})
        assert summary.total_documents == 3
        assert summary.provinces_with_documents == 2
        assert [row.zone for row in summary.by_zone] == [HealthZone.EAST, HealthZone.SOUTH_LOWER]
        assert [row.count for row in summary.by_category] == [1, 1]

    def test_empty_summary(self) -> None:
        summary = summarize([])
        assert summary.total_documents == 0
        assert summary.by_province == []
        assert summary.by_zone == []
        assert summary.by_category == []
        assert summary.published_documents == 0
        assert len(summary.by_month) == 6


class TestMonthlyDistribution:
    def test_window_ends_at_current_month(self) -> None:
        created = [date(2025, 3, 1), datetime(2025, 3, 31, 23, 59), date(2024, 12, 15), date(2024, 9, 30), None]
        rows = monthly_distribution(created, months=6, today=date(2025, 3, 18))
        assert [(row.year, row.month) for row in rows] == [
            (2024, 10),
            (2024, 11),
            (2024, 12),
            (2025, 1),
            (2025, 2),
            (2025, 3),
        ]
        assert [row.count for row in rows] == [0, 0, 1, 0, 0, 2]

    def test_thai_label_uses_buddhist_era(self) -> None:
        assert month_label(2025, 1) == "มกราคม 2568"
        rows = monthly_distribution([], months=1, today=date(2024, 12, 5))
        assert rows[0].label == "ธันวาคม 2567"

    def test_months_must_be_positive(self) -> None:
        with pytest.raises(ValueError):
            monthly_distribution([], months=0)


class TestOverviewCounts:
    def test_published_and_category_totals(self) -> None:
        documents = [
            DocumentRecord(province="ชลบุรี", is_published=True, created_at=date(2025, 3, 2)),
            DocumentRecord(province="ระยอง", is_published=False, created_at=date(2025, 2, 2)),
            DocumentRecord(province="ระยอง", is_published=True),
        ]
        summary = summarize(documents, {1: "Policy", 2: "Report", 3: "Plan"}, months=2, today=date(2025, 3, 20))
        assert summary.published_documents == 2
        assert summary.unpublished_documents == 1
        assert summary.total_categories == 3
        assert [row.count for row in summary.by_month] == [1, 1]
