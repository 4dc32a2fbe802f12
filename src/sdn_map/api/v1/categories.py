"""Category color API endpoints."""

from fastapi import APIRouter, Query

from sdn_map.lib.colors import color_for, color_for_name
from sdn_map.schemas.color import CategoryColorResponse

categories_router = APIRouter(prefix="/categories", tags=["categories"])


@categories_router.get(
    "/color",
    response_model=CategoryColorResponse,
)
async def get_color_by_name(
    name: str = Query(..., min_length=1, max_length=200, description="Category name"),  # noqa: B008
) -> CategoryColorResponse:
    """Return the color scheme for a category known only by name."""
    return CategoryColorResponse.model_validate(color_for_name(name))


@categories_router.get(
    "/{category_id}/color",
    response_model=CategoryColorResponse,
)
async def get_color(category_id: int) -> CategoryColorResponse:
    """Return the color scheme of a category id."""
    return CategoryColorResponse.model_validate(color_for(category_id))
