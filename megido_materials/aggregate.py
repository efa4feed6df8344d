"""소재 테이블 집계"""

from __future__ import annotations

import logging
from typing import Dict, List

from bs4 import Tag

from .cells import Fallback, resolve_row, row_candidates
from .quantity import parse_quantity

logger = logging.getLogger(__name__)


def table_rows(table: Tag) -> List[Tag]:
    """테이블 바로 아래(또는 thead/tbody/tfoot 아래)의 tr. 셀 안 중첩 테이블 행은 제외"""
    rows = []
    for child in table.find_all(['thead', 'tbody', 'tfoot', 'tr'], recursive=False):
        if child.name == 'tr':
            rows.append(child)
        else:
            rows.extend(child.find_all('tr', recursive=False))
    return rows


def count_table(table: Tag) -> Dict[str, int]:
    """
    소재 테이블에서 소재별 필요 개수 집계

    합성 전용 소재는 합성 후 소재로 센다. 같은 소재가 여러 행에 나오면
    개수를 합산한다. th만 있는 헤더 행은 건너뛴다.

    Returns:
        소재명 → 필요 개수
    """
    counts: Dict[str, int] = {}
    for row in table_rows(table):
        candidates = row_candidates(row)
        if not candidates:
            continue

        resolution = resolve_row(candidates)
        if isinstance(resolution, Fallback):
            logger.warning("모든 후보 셀이 rowspan, 가장 오른쪽 셀로 간주: %r", resolution.text)

        name, count = parse_quantity(resolution.text)
        counts[name] = counts.get(name, 0) + count
    return counts
