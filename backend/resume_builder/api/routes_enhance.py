"""
Stateless endpoints: enhance a posted résumé, or render it as HTML.
"""
import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, JSONResponse

from ..enhancer import ResumeEnhancer, get_enhancer
from ..errors import EnhancementError
from ..preview import render_preview
from ..schemas import ResumeDocument, EnhanceSuccess, EnhanceFailure

logger = logging.getLogger(__name__)

router = APIRouter(tags=["enhance"])


def failure_response(error: str, status_code: int, details: str = None) -> JSONResponse:
    body = EnhanceFailure(
        error=error,
        details=details,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
    return JSONResponse(status_code=status_code, content=body.model_dump())


def enhancement_failure(e: EnhancementError) -> JSONResponse:
    return failure_response(e.message, e.status_code, e.details)


def unexpected_failure(e: Exception) -> JSONResponse:
    logger.exception(f"Unexpected enhancement failure: {e}")
    return failure_response("Failed to process resume", 500, str(e))


@router.post("/enhance", response_model=EnhanceSuccess)
async def enhance(doc: ResumeDocument, enhancer: ResumeEnhancer = Depends(get_enhancer)):
    try:
        enhanced = await enhancer.enhance(doc)
    except EnhancementError as e:
        return enhancement_failure(e)
    except Exception as e:
        return unexpected_failure(e)
    return EnhanceSuccess(content=enhanced)


@router.post("/preview", response_class=HTMLResponse)
def preview(doc: ResumeDocument):
    return HTMLResponse(render_preview(doc))
