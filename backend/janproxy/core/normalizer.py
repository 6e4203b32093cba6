"""
Normalizes spec-form API payloads into CanonicalProduct.

Upstream has changed its field names across versions, so each canonical
field is read from an ordered list of candidate names. Order matters:
explicit names (manufacturer_name) are checked before generic ones
(manufacturer).
"""

from typing import Any, Dict, Optional, Sequence, Tuple

from janproxy.schemas.product import CanonicalProduct

# canonical field -> upstream candidates, first match wins
FIELD_CANDIDATES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("name", ("name", "product_name", "productName", "title")),
    ("manufacturer_name", ("manufacturer_name", "manufacturer", "maker", "company", "brand")),
    ("model_name", ("model_name", "model", "modelName", "model_number")),
)

# Tried in order when there is neither a specs object nor a keys list
SPEC_FALLBACK_FIELDS: Tuple[str, ...] = ("specifications", "spec_data", "attributes", "details")

# Never treated as ad-hoc spec entries
RESERVED_FIELDS = frozenset({"name", "manufacturer", "model", "keys"})

KEY_ITEM_PREFIX = "項目"
DETAIL_KEY = "詳細"


def _clean_str(v: Any) -> Optional[str]:
    if isinstance(v, str) and v.strip():
        return v.strip()
    return None


def unwrap_payload(raw: Any) -> Any:
    """
    Upstream sometimes wraps the record in a list. Use the first element of a
    non-empty list, otherwise the payload itself.
    """
    if isinstance(raw, list) and raw:
        return raw[0]
    return raw


def extract_value(target: Dict[str, Any], candidates: Sequence[str]) -> Optional[str]:
    for k in candidates:
        v = _clean_str(target.get(k))
        if v is not None:
            return v
    return None


def has_usable_data(raw: Any) -> bool:
    """
    Permissive check: when in doubt the payload counts as real data.

    True if the record has a non-empty keys list, any known name/maker/model
    field, or simply more than 2 fields.
    """
    target = unwrap_payload(raw)
    if not isinstance(target, dict):
        return False

    keys = target.get("keys")
    if isinstance(keys, list) and keys:
        return True

    for _, candidates in FIELD_CANDIDATES:
        if extract_value(target, candidates) is not None:
            return True

    return len(target) > 2


def _specs_from_keys(keys: list) -> Optional[Dict[str, str]]:
    out: Dict[str, str] = {}
    for i, item in enumerate(keys, start=1):
        v = _clean_str(item)
        if v is not None:
            out[f"{KEY_ITEM_PREFIX}{i}"] = v
    return out or None


def extract_specs(target: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """
    Priority:
      1) "specs" object, verbatim
      2) "keys" list -> {"項目1": ..., "項目2": ...}
      3) first of SPEC_FALLBACK_FIELDS holding an object (or text -> {"詳細": text})
      4) every other non-empty text field
    """
    specs = target.get("specs")
    if isinstance(specs, dict):
        return specs

    keys = target.get("keys")
    if isinstance(keys, list):
        return _specs_from_keys(keys)

    for k in SPEC_FALLBACK_FIELDS:
        v = target.get(k)
        if isinstance(v, dict):
            return v
        text = _clean_str(v)
        if text is not None:
            return {DETAIL_KEY: text}

    adhoc: Dict[str, str] = {}
    for k, v in target.items():
        if k in RESERVED_FIELDS:
            continue
        text = _clean_str(v)
        if text is not None:
            adhoc[k] = text
    return adhoc or None


def transform_api_data(target: Any) -> CanonicalProduct:
    target = unwrap_payload(target)
    if not isinstance(target, dict):
        return CanonicalProduct()

    fields: Dict[str, Any] = {
        field: extract_value(target, candidates) for field, candidates in FIELD_CANDIDATES
    }
    fields["specs"] = extract_specs(target)
    return CanonicalProduct(**fields)
