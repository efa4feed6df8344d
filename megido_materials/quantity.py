"""소재명×개수 파싱"""

from __future__ import annotations

import logging
from typing import Tuple

from .config import QUANTITY_SEPARATOR

logger = logging.getLogger(__name__)


def parse_quantity(text: str) -> Tuple[str, int]:
    """
    셀 텍스트를 (소재명, 개수)로 분리

    "銀鉱石×3" → ("銀鉱石", 3), "銀鉱石" → ("銀鉱石", 1).
    개수가 양의 정수로 읽히지 않으면 1로 간주하되, 원본 사이트의
    입력 실수일 수 있으므로 ERROR로 남긴다.
    """
    parts = text.split(QUANTITY_SEPARATOR)
    name = parts[0].strip()
    if len(parts) < 2 or not parts[1].strip():
        return name, 1

    raw_count = parts[1].strip()
    try:
        count = int(raw_count)
    except ValueError:
        count = 0
    if count < 1:
        logger.error("개수 해석 실패, 1로 간주: %r", text)
        return name, 1
    return name, count
