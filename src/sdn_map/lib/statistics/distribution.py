"""Document distribution by province, health zone, category, and month.

Pure aggregations behind the dashboard charts. Inputs are plain province
names, category ids, publish flags and creation dates so callers can feed
rows from any store.
"""

from collections import Counter
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import date

from sdn_map.lib.colors import color_for
from sdn_map.lib.zones import DEFAULT_CLASSIFIER, HealthZone, ZoneClassifier, all_zones, zone_color, zone_display_name

THAI_MONTHS = (
    "มกราคม",
    "กุมภาพันธ์",
    "มีนาคม",
    "เมษายน",
    "พฤษภาคม",
    "มิถุนายน",
    "กรกฎาคม",
    "สิงหาคม",
    "กันยายน",
    "ตุลาคม",
    "พฤศจิกายน",
    "ธันวาคม",
)

# Buddhist Era year = Gregorian year + 543
BUDDHIST_ERA_OFFSET = 543

DEFAULT_TIMELINE_MONTHS = 6


@dataclass(frozen=True)
class DocumentRecord:
    """Minimal view of a document for aggregation."""

    province: str
    category_id: int | None = None
    is_published: bool = False
    created_at: date | None = None


@dataclass(frozen=True)
class ProvinceCount:
    name: str
    count: int


@dataclass(frozen=True)
class ZoneCount:
    zone: HealthZone
    name: str
    count: int
    color: str


@dataclass(frozen=True)
class CategoryCount:
    id: int
    name: str
    count: int
    color: str


@dataclass(frozen=True)
class MonthCount:
    """Documents created in one calendar month."""

    year: int
    month: int
    label: str
    count: int


@dataclass(frozen=True)
class DistributionSummary:
    total_documents: int
    published_documents: int
    unpublished_documents: int
    total_categories: int
    provinces_with_documents: int
    by_province: list[ProvinceCount] = field(default_factory=list)
    by_zone: list[ZoneCount] = field(default_factory=list)
    by_category: list[CategoryCount] = field(default_factory=list)
    by_month: list[MonthCount] = field(default_factory=list)


def province_distribution(
    provinces: Iterable[str],
    zone: HealthZone | str | None = None,
    classifier: ZoneClassifier = DEFAULT_CLASSIFIER,
) -> list[ProvinceCount]:
    """Count documents per province, sorted by province name.

    Args:
        provinces: Province name of each document.
        zone: Only count provinces classified into this zone. None counts all.
        classifier: Zone classifier used for the filter.
    """
    counts = Counter(provinces)
    names = classifier.filter_provinces(sorted(counts), zone)
    return [ProvinceCount(name=name, count=counts[name]) for name in names]


def zone_distribution(
    provinces: Iterable[str],
    classifier: ZoneClassifier = DEFAULT_CLASSIFIER,
) -> list[ZoneCount]:
    """Count documents per health zone, largest first, omitting empty zones.

    Zones with equal counts keep their display order.
    """
    counts = Counter(classifier.zone_of(name) for name in provinces)
    rows = [
        ZoneCount(zone=zone, name=zone_display_name(zone), count=counts[zone], color=zone_color(zone))
        for zone in all_zones()
        if counts[zone] > 0
    ]
    return sorted(rows, key=lambda row: row.count, reverse=True)


def category_distribution(
    categories: Mapping[int, str],
    category_ids: Iterable[int | None],
) -> list[CategoryCount]:
    """Count documents per category.

    Every category in ``categories`` is listed, including those with no
    documents. Documents whose category is unknown are not counted.
    """
    counts = Counter(cid for cid in category_ids if cid is not None)
    return [
        CategoryCount(id=cid, name=name, count=counts[cid], color=color_for(cid).primary)
        for cid, name in categories.items()
    ]


def month_label(year: int, month: int) -> str:
    """Thai month name with the Buddhist Era year, e.g. ``มกราคม 2568``."""
    return f"{THAI_MONTHS[month - 1]} {year + BUDDHIST_ERA_OFFSET}"


def monthly_distribution(
    created: Iterable[date | None],
    months: int = DEFAULT_TIMELINE_MONTHS,
    today: date | None = None,
) -> list[MonthCount]:
    """Count documents created in each of the last ``months`` calendar months.

    The window ends with the month of ``today`` and is returned oldest first.
    Documents without a creation date or outside the window are not counted.

    Raises:
        ValueError: If ``months`` is less than 1.
    """
    if months < 1:
        msg = "months must be at least 1"
        raise ValueError(msg)

    today = today or date.today()
    counts = Counter((d.year, d.month) for d in created if d is not None)

    rows: list[MonthCount] = []
    for offset in range(months - 1, -1, -1):
        index = today.year * 12 + (today.month - 1) - offset
        year, month = divmod(index, 12)
        month += 1
        rows.append(MonthCount(year=year, month=month, label=month_label(year, month), count=counts[(year, month)]))
    return rows


def summarize(
    documents: Iterable[DocumentRecord],
    categories: Mapping[int, str] | None = None,
    classifier: ZoneClassifier = DEFAULT_CLASSIFIER,
    *,
    months: int = DEFAULT_TIMELINE_MONTHS,
    today: date | None = None,
) -> DistributionSummary:
    """Build every dashboard figure from the documents and categories."""
    docs = list(documents)
    categories = categories or {}
    provinces = [doc.province for doc in docs]
    published = sum(1 for doc in docs if doc.is_published)
    by_province = province_distribution(provinces, classifier=classifier)
    return DistributionSummary(
        total_documents=len(docs),
        published_documents=published,
        unpublished_documents=len(docs) - published,
        total_categories=len(categories),
        provinces_with_documents=len(by_province),
        by_province=by_province,
        by_zone=zone_distribution(provinces, classifier),
        by_category=category_distribution(categories, (doc.category_id for doc in docs)),
        by_month=monthly_distribution((doc.created_at for doc in docs), months, today),
    )
