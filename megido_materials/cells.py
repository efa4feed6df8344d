# -*- coding: utf-8 -*-
"""
병합 셀 해석

소재 테이블의 각 행은 마지막 3개 셀 중 하나에만 "소재명×개수"가 들어 있다.
합성 전용 소재는 합성 전 소재 셀이 rowspan으로 아래 행까지 이어지므로,
rowspan 속성이 없는 첫 셀이 그 행의 실제 소재(합성 후 소재)이다.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Union

from bs4 import Tag

from .config import MERGE_ATTRIBUTE

# 소재 후보로 보는 행 끝 셀 수
CANDIDATE_CELLS = 3


@dataclass(frozen=True)
class Owned:
    """rowspan 없는 셀을 찾은 경우"""
    text: str
    index: int


@dataclass(frozen=True)
class Fallback:
    """모든 후보에 rowspan이 있어 가장 오른쪽 셀을 가정한 경우"""
    text: str
    index: int


CellResolution = Union[Owned, Fallback]


def is_merged(cell: Tag) -> bool:
    return cell.has_attr(MERGE_ATTRIBUTE)


def resolve_row(candidates: Sequence[Tag]) -> CellResolution:
    """
    후보 셀 중 행의 소재 셀 선택

    왼쪽부터 보며 rowspan이 없는 첫 셀을 고른다. 전부 rowspan이면
    가장 오른쪽 셀을 고르지만, 이 경우는 실제 데이터로 확인된 적이 없는
    가정이므로 Fallback으로 구분해 반환한다.

    Args:
        candidates: 행의 마지막 셀들 (보통 3개, 왼쪽→오른쪽)

    Returns:
        Owned 또는 Fallback
    """
    if not candidates:
        raise ValueError("후보 셀이 없습니다")

    for index, cell in enumerate(candidates):
        if not is_merged(cell):
            return Owned(cell.get_text(), index)

    index = len(candidates) - 1
    return Fallback(candidates[index].get_text(), index)


def row_candidates(row: Tag) -> Sequence[Tag]:
    """행의 td 중 마지막 CANDIDATE_CELLS 개"""
    return row.find_all('td', recursive=False)[-CANDIDATE_CELLS:]
