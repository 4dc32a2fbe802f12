"""Statistics library — document distributions for dashboard charts.

Public API:
    - summarize: All distributions for a set of documents
    - province_distribution / zone_distribution / category_distribution
    - monthly_distribution: Creation timeline over the last few months
    - DocumentRecord, ProvinceCount, ZoneCount, CategoryCount, MonthCount, DistributionSummary
"""

from sdn_map.lib.statistics.distribution import (
    CategoryCount,
    DistributionSummary,
    DocumentRecord,
    MonthCount,
    ProvinceCount,
    ZoneCount,
    category_distribution,
    month_label,
    monthly_distribution,
    province_distribution,
    summarize,
    zone_distribution,
)

__all__ = [
    "CategoryCount",
    "DistributionSummary",
    "DocumentRecord",
    "MonthCount",
    "ProvinceCount",
    "ZoneCount",
    "category_distribution",
    "month_label",
    "monthly_distribution",
    "province_distribution",
    "summarize",
    "zone_distribution",
]
