from __future__ import annotations

import re
from typing import Any, Dict, List

from janproxy.schemas.product import CanonicalProduct

# Every table below is indexed by a digit of the JAN code.
# Changing an entry or its position changes the output for existing codes.
PRODUCT_TYPES: List[str] = [
    "液晶モニター",
    "ワイヤレスマウス",
    "USBハブ",
    "キーボード",
    "外付けSSD",
    "Webカメラ",
    "ヘッドセット",
    "ドッキングステーション",
    "ポータブルHDD",
    "USBメモリ",
]

BRAND_TAGS: List[str] = ["Pro", "Lite", "Plus", "Max", "Neo"]

MANUFACTURERS: List[str] = [
    "エレコム",
    "バッファロー",
    "サンワサプライ",
    "アイ・オー・データ",
    "ロジクール",
    "パナソニック",
    "ソニー",
    "シャープ",
    "富士通",
    "NEC",
]

SERIES_PREFIXES: List[str] = ["EX", "HD", "LX", "PX", "ZR"]
SUFFIX_LETTERS: List[str] = ["A", "B", "C", "S", "X"]

RESOLUTIONS: List[str] = ["1920x1080", "2560x1440", "3840x2160"]
CONNECTIONS: List[str] = ["USB Type-A", "USB Type-C", "Bluetooth"]
TRANSFER_SPEEDS: List[str] = ["USB 2.0", "USB 3.0", "USB 3.2 Gen2"]
CAPACITIES_GB: List[int] = [256, 512, 1024, 2048]
INTERFACES: List[str] = ["USB 3.2 Gen2", "USB Type-C", "Thunderbolt 3"]

MIN_DIGITS = 6


def _digits(jan_code: str) -> str:
    code = re.sub(r"\D", "", jan_code or "")
    if len(code) < MIN_DIGITS:
        raise ValueError(f"JAN code needs at least {MIN_DIGITS} digits: {jan_code!r}")
    return code


def _display_specs(last: int, second_last: int) -> Dict[str, Any]:
    return {
        "画面サイズ": f"{20 + last % 15}インチ",
        "リフレッシュレート": f"{60 + second_last * 15}Hz",
        "解像度": RESOLUTIONS[second_last % 3],
        "応答速度": f"{1 + last % 5}ms",
        "重量（g）": str(3000 + last * 250),
    }


def _peripheral_specs(last: int, second_last: int) -> Dict[str, Any]:
    return {
        "接続方式": CONNECTIONS[second_last % 3],
        "転送速度": TRANSFER_SPEEDS[(last + second_last) % 3],
        "ポート数": str(2 + last % 4),
        "重量（g）": str(50 + last * 10 + second_last),
        "ケーブル長": f"{0.5 * (second_last % 4 + 1):.1f}m",
    }


def _storage_specs(last: int, second_last: int) -> Dict[str, Any]:
    return {
        "容量": f"{CAPACITIES_GB[second_last % 4]}GB",
        "読込速度": f"{500 + last * 100}MB/s",
        "書込速度": f"{450 + second_last * 50}MB/s",
        "インターフェース": INTERFACES[last % 3],
        "重量（g）": str(40 + second_last * 5),
    }


# last digit % 3 -> template family
_SPEC_TEMPLATES = (_display_specs, _peripheral_specs, _storage_specs)


def generate_mock_product(jan_code: str) -> CanonicalProduct:
    """
    Builds a plausible placeholder product from the JAN code digits alone.

    Pure: the same code always yields the same record, so clients can rely on
    the placeholder staying stable between calls.
    """
    code = _digits(jan_code)
    d = [int(c) for c in code]
    last, second_last = d[-1], d[-2]

    name = f"{PRODUCT_TYPES[d[0] % 10]} {BRAND_TAGS[d[1] % 5]} {code[-4:]}"
    manufacturer = MANUFACTURERS[d[2] % 10]
    model = f"{SERIES_PREFIXES[d[3] % 5]}-{code[-6:-2]}{SUFFIX_LETTERS[d[4] % 5]}"
    specs = _SPEC_TEMPLATES[last % 3](last, second_last)

    return CanonicalProduct(
        name=name,
        manufacturer_name=manufacturer,
        model_name=model,
        specs=specs,
    )
