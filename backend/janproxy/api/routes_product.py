from typing import Optional

from fastapi import APIRouter, HTTPException

from janproxy.core.lookup import InvalidJanCodeError, lookup_product
from janproxy.schemas.product import ErrorDetail, ProductLookupResponse

router = APIRouter(prefix="/api", tags=["product"])

USAGE_HINT = "?jan_code=4901234567890"


@router.get("/bihinkanri-proxy", response_model=ProductLookupResponse)
async def bihinkanri_proxy(jan_code: Optional[str] = None, debug: bool = False):
    """
    Looks up product specs for a JAN code.

    Always answers 200 with product data once the code is valid; upstream
    failures come back as synthesized data tagged with dataSource.
    """
    if jan_code is None or not jan_code.strip():
        # Handled here rather than as a required param so the body carries a usage hint, not a 422
        raise HTTPException(
            status_code=400,
            detail=ErrorDetail(error="JANコードが必要です", usage=USAGE_HINT).model_dump(exclude_none=True),
        )

    try:
        return await lookup_product(jan_code, include_raw=debug)
    except InvalidJanCodeError as e:
        raise HTTPException(
            status_code=400,
            detail=ErrorDetail(error=str(e), received=e.received).model_dump(exclude_none=True),
        )
