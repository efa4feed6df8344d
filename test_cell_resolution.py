#!/usr/bin/env python3
"""
병합 셀 해석 테스트

테스트 항목:
1. rowspan 없는 행 → 첫 후보
2. 앞 두 셀이 rowspan → 세 번째 후보 (Owned)
3. 전부 rowspan → 세 번째 후보 (Fallback)
4. 행 끝 3셀만 후보
"""

import sys

import pytest
from bs4 import BeautifulSoup

from megido_materials.cells import Fallback, Owned, resolve_row, row_candidates


def make_row(cells_html: str):
    soup = BeautifulSoup(f"<table><tr>{cells_html}</tr></table>", "html.parser")
    return soup.find("tr")


def test_no_merged_cells_selects_first():
    row = make_row("<td>銀の鉱石×3</td><td>金の鉱石</td><td>ルビー×2</td>")
    result = resolve_row(row_candidates(row))
    assert result == Owned("銀の鉱石×3", 0)


def test_second_cell_selected_when_first_merged():
    row = make_row('<td rowspan="2">ハーブ×5</td><td>リンゴ×1</td><td>ルビー</td>')
    result = resolve_row(row_candidates(row))
    assert result == Owned("リンゴ×1", 1)


def test_first_two_merged_selects_third():
    row = make_row('<td rowspan="2">ハーブ×5</td><td rowspan="3">リンゴ</td><td>ルビー×2</td>')
    result = resolve_row(row_candidates(row))
    assert isinstance(result, Owned)
    assert result.text == "ルビー×2"
    assert result.index == 2


def test_all_merged_falls_back_to_last():
    row = make_row('<td rowspan="2">ハーブ</td><td rowspan="2">リンゴ</td><td rowspan="2">ルビー×2</td>')
    result = resolve_row(row_candidates(row))
    assert isinstance(result, Fallback)
    assert not isinstance(result, Owned)
    assert result == Fallback("ルビー×2", 2)


def test_only_trailing_three_cells_are_candidates():
    row = make_row("<td>No.1</td><td>説明</td><td>銀の鉱石×3</td><td>金の鉱石</td><td>ルビー</td>")
    candidates = row_candidates(row)
    assert [c.get_text() for c in candidates] == ["銀の鉱石×3", "金の鉱石", "ルビー"]
    assert resolve_row(candidates) == Owned("銀の鉱石×3", 0)


def test_short_row_uses_available_cells():
    row = make_row('<td rowspan="2">ハーブ</td><td>リンゴ×4</td>')
    assert resolve_row(row_candidates(row)) == Owned("リンゴ×4", 1)


def test_empty_candidates_rejected():
    with pytest.raises(ValueError):
        resolve_row([])


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
