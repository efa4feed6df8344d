# -*- coding: utf-8 -*-
"""
스프레드시트용 포맷

소재 순서(OrderSpec)에 맞춰 필요 개수를 탭 구분 행으로 만든다.
순서에 없는 소재는 빠뜨린 것이므로 반드시 WARNING으로 알린다.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Sequence, Tuple

FIELD_SEPARATOR = "\t"
ROW_SEPARATOR = "\n"


def level_label(level: float) -> str:
    """진화도 → 별 표기 (1.5 → ★☆, 3.0 → ★★★)"""
    whole = int(level)
    label = "★" * whole
    if level - whole >= 0.5:
        label += "☆"
    return label


def project_counts(
    order: Sequence[str],
    counts: Mapping[str, int],
) -> Tuple[List[int], Dict[str, int]]:
    """
    필요 개수를 소재 순서에 투영

    빈 순서 항목은 항상 0이며 어떤 소재와도 매칭되지 않는다.
    counts는 변경하지 않는다.

    Returns:
        (컬럼별 개수, 순서에 없는 소재 → 개수)
    """
    columns = [counts.get(name, 0) if name else 0 for name in order]
    known = {name for name in order if name}
    unhandled = {name: count for name, count in counts.items() if name not in known}
    return columns, unhandled


def format_row(prefix: Sequence[str], columns: Sequence[int]) -> str:
    return FIELD_SEPARATOR.join([*prefix, *(str(c) for c in columns)])


class MaterialFormatter:
    """스프레드시트용 포맷터"""

    def __init__(self, order: Sequence[str]):
        self.order = tuple(order)
        self.logger = logging.getLogger(self.__class__.__name__)

    def format_counts(self, prefix: Sequence[str], counts: Mapping[str, int]) -> Tuple[str, Dict[str, int]]:
        """한 행 포맷. (행 텍스트, 순서에 없는 소재)"""
        columns, unhandled = project_counts(self.order, counts)
        return format_row(prefix, columns), unhandled

    def format_megido_gifts(
        self,
        name: str,
        number: str,
        gifts: Mapping[float, Mapping[str, int]],
    ) -> str:
        """
        메기도 진화 소재 포맷

        Args:
            name: 메기도명
            number: 메기도 No
            gifts: 진화도 → (소재명 → 필요 개수)

        Returns:
            진화도가 높은 순으로 한 행씩, 스프레드시트에 붙여넣는 형식
        """
        rows = []
        not_handled: List[str] = []
        for level in sorted(gifts, reverse=True):
            row, unhandled = self.format_counts([number, name, level_label(level)], gifts[level])
            rows.append(row)
            not_handled.extend(n for n in unhandled if n not in not_handled)

        self._warn_not_handled(f"format_megido_gifts {name}", not_handled)
        return ROW_SEPARATOR.join(rows)

    def format_reiho_recipe(self, name: str, recipe: Mapping[str, int]) -> str:
        """
        영보 레시피 포맷

        Args:
            name: 영보명
            recipe: 소재명 → 필요 개수
        """
        row, unhandled = self.format_counts([name], recipe)
        self._warn_not_handled(f"format_reiho_recipe {name}", list(unhandled))
        return row

    def _warn_not_handled(self, context: str, names: Sequence[str]) -> None:
        if names:
            self.logger.warning("%s: 순서에 없는 소재: %s", context, ", ".join(names))
