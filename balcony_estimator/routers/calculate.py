import logging
from fastapi import APIRouter, Depends, Header, Response
from typing import List, Optional
from .. import schemas
from ..deps import get_engine
from ..estimate_engine import EstimateEngine
from ..models import TabName, get_subcategories

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/calculate", tags=["calculate"])


@router.post("", response_model=schemas.CalculationResult, response_model_exclude_none=True)
def calculate(
    body: schemas.CalculationRequest,
    response: Response,
    authorization: Optional[str] = Header(default=None),
    engine: EstimateEngine = Depends(get_engine),
):
    """
    Run one tab calculation. Credentials are passed through untouched;
    only their presence is logged.
    """
    logger.info(
        "Received calculation request for %r (auth %s)",
        body.tabName, "[provided]" if authorization else "[missing]",
    )
    result = engine.compute(body.tabName, body.data)
    if not result["success"]:
        response.status_code = 400
    return result


@router.get("/tabs", response_model=List[schemas.TabInfo])
def list_tabs():
    """Tabs and their selectable sub-categories, in display order."""
    return [{"tab": tab.value, "subcategories": get_subcategories(tab)} for tab in TabName]
