"""
Search suggestions for the storefront search box
"""
import logging
from fastapi import APIRouter, Depends, HTTPException, Query
from typing import Optional

from stylehub.core.rate_limit import suggestions_rate_limit
from stylehub.services.search_suggestion_service import SearchSuggestionService, DEFAULT_LIMIT

logger = logging.getLogger(__name__)

router = APIRouter()


def get_suggestion_service() -> SearchSuggestionService:
    return SearchSuggestionService()


@router.get("/search-suggestions", dependencies=[Depends(suggestions_rate_limit)])
async def get_search_suggestions(
    q: Optional[str] = Query(None, description="Text typed so far"),
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=50),
    service: SearchSuggestionService = Depends(get_suggestion_service)
):
    """
    Ranked suggestions; queries shorter than two characters return nothing
    """
    try:
        suggestions = service.suggest(q, limit=limit)
        return {"status": "success", "count": len(suggestions), "data": suggestions}

    except Exception as e:
        logger.error(f"Error fetching search suggestions for '{q}': {e}")
        raise HTTPException(status_code=500, detail=f"Error fetching suggestions: {str(e)}")
