import logging
import re
from datetime import datetime, timezone
from typing import Any, Optional

from janproxy.core.bihinkanri import UpstreamError, fetch_spec_form
from janproxy.core.normalizer import has_usable_data, transform_api_data
from janproxy.core.synthesizer import generate_mock_product
from janproxy.schemas.product import CanonicalProduct, DataSource, ProductLookupResponse

logger = logging.getLogger(__name__)

VALID_JAN_LENGTHS = (8, 13)


class InvalidJanCodeError(ValueError):
    def __init__(self, received: str):
        super().__init__("JANコードは8桁または13桁の数字である必要があります")
        self.received = received


def normalize_jan_code(raw: str) -> str:
    code = re.sub(r"\D", "", raw or "")
    if len(code) not in VALID_JAN_LENGTHS:
        raise InvalidJanCodeError(raw)
    return code


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _response(
    raw_code: str,
    code: str,
    data: CanonicalProduct,
    source: DataSource,
    message: Optional[str] = None,
    raw: Optional[Any] = None,
) -> ProductLookupResponse:
    return ProductLookupResponse(
        success=True,
        jan_code=raw_code,
        normalized_jan_code=code,
        data=data,
        data_source=source,
        message=message,
        raw=raw,
        timestamp=_now_iso(),
    )


async def lookup_product(raw_code: str, *, include_raw: bool = False) -> ProductLookupResponse:
    """
    Resolves a JAN code to a CanonicalProduct.

    Real API data is preferred. When the API answers without usable data the
    result is synthesized ("mock"); when the call itself fails it is also
    synthesized ("fallback"). Only a malformed code raises.
    """
    code = normalize_jan_code(raw_code)

    try:
        payload = await fetch_spec_form(code)
    except UpstreamError as e:
        logger.warning("Spec-form lookup failed, using fallback data: JAN=%s error=%s", code, e.message)
        return _response(raw_code, code, generate_mock_product(code), "fallback", message=e.message)

    raw = payload if include_raw else None

    if has_usable_data(payload):
        product = transform_api_data(payload)
        if not product.is_empty():
            logger.info("Spec-form data found: JAN=%s", code)
            return _response(raw_code, code, product, "api", raw=raw)

    logger.warning("Spec-form API returned no usable data, using mock data: JAN=%s", code)
    return _response(
        raw_code,
        code,
        generate_mock_product(code),
        "mock",
        message="APIから製品データが取得できなかったため、生成データを返しています",
        raw=raw,
    )
