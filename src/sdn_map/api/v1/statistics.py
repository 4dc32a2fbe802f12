"""Statistics API endpoints — document distributions for dashboard charts."""

from typing import Annotated

from fastapi import APIRouter, Depends

from sdn_map.core.dependencies import get_zone_classifier
from sdn_map.lib.statistics import DocumentRecord, summarize
from sdn_map.lib.zones import ZoneClassifier
from sdn_map.schemas.statistics import DistributionRequest, DistributionSummaryResponse

statistics_router = APIRouter(prefix="/statistics", tags=["statistics"])


@statistics_router.post(
    "/distribution",
    response_model=DistributionSummaryResponse,
)
async def document_distribution(
    request: DistributionRequest,
    classifier: Annotated[ZoneClassifier, Depends(get_zone_classifier)],
) -> DistributionSummaryResponse:
    """Aggregate documents by province, health zone, category, and creation month."""
    documents = (
        DocumentRecord(
            province=doc.province,
            category_id=doc.category_id,
            is_published=doc.is_published,
            created_at=doc.created_at,
        )
        for doc in request.documents
    )
    summary = summarize(
        documents,
        {cat.id: cat.name for cat in request.categories},
        classifier,
        months=request.months,
        today=request.as_of,
    )
    return DistributionSummaryResponse.model_validate(summary)
