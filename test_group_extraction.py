#!/usr/bin/env python3
"""
진화도 그룹 추출 / 소재 집계 테스트

테스트 항목:
1. 별 헤더 판별, 진화도 숫자 (마지막 숫자)
2. 헤더 뒤 div 안의 테이블
3. 진화도/테이블 없는 헤더 오류
4. 같은 소재 합산, 헤더 행 건너뛰기, Fallback 로그
5. 다음 헤더에서 테이블 탐색 중단, 중첩 테이블 무시
"""

import logging
import sys

import pytest
from bs4 import BeautifulSoup

from megido_materials.aggregate import count_table
from megido_materials.errors import GroupExtractionError
from megido_materials.groups import iter_group_results, iter_groups, parse_level


def table_html(*rows: str) -> str:
    body = "".join(f"<tr>{row}</tr>" for row in rows)
    return f"<table><tbody><tr><th>素材</th><th>合成</th><th>必要数</th></tr>{body}</tbody></table>"


def page(*sections: str) -> BeautifulSoup:
    return BeautifulSoup(f"<html><body>{''.join(sections)}</body></html>", "html.parser")


@pytest.mark.parametrize("text, level", [
    ("★★ (Lv.2.0)", 2.0),
    ("3. 進化度★★☆ (2.5)", 2.5),
    ("★☆ 1.5", 1.5),
    ("★★★★★★ 6", 6.0),
])
def test_parse_level_uses_last_number(text, level):
    assert parse_level(text) == level


def test_parse_level_without_number():
    with pytest.raises(GroupExtractionError):
        parse_level("★★☆")


def test_groups_in_document_order():
    soup = page(
        "<h2>目次</h2><div><table><tr><td>x</td></tr></table></div>",
        "<h2>★☆ (1.5)</h2>", "<div>", table_html("<td>ハーブ×2</td><td></td><td></td>"), "</div>",
        "<h2>★★★ (3.0)</h2>", "<div>", table_html("<td>リンゴ</td><td></td><td></td>"), "</div>",
    )
    groups = list(iter_groups(soup))
    assert [g.key for g in groups] == [1.5, 3.0]
    assert groups[0].header == "★☆ (1.5)"
    assert "ハーブ×2" in groups[0].table.get_text()
    assert "リンゴ" in groups[1].table.get_text()


def test_table_found_in_later_sibling_div():
    soup = page(
        "<h2>★★ (2.0)</h2>",
        "<div><p>説明</p></div>",
        "<div>", table_html("<td>ルビー×1</td><td></td><td></td>"), "</div>",
    )
    (group,) = list(iter_groups(soup))
    assert "ルビー×1" in group.table.get_text()


def test_header_without_table():
    soup = page("<h2>★★ (2.0)</h2><p>準備中</p>")
    with pytest.raises(GroupExtractionError) as excinfo:
        list(iter_groups(soup))
    assert excinfo.value.context["header"] == "★★ (2.0)"


def test_group_results_continue_after_failure():
    soup = page(
        "<h2>★★☆</h2>", "<div>", table_html("<td>ハーブ</td><td></td><td></td>"), "</div>",
        "<h2>★★★ (3.0)</h2>", "<div>", table_html("<td>リンゴ</td><td></td><td></td>"), "</div>",
    )
    results = list(iter_group_results(soup))
    assert results[0][0] is None
    assert isinstance(results[0][1], GroupExtractionError)
    assert results[1][0].key == 3.0
    assert results[1][1] is None


def test_count_table_sums_repeated_names():
    soup = page(table_html(
        "<td>Silver Ore×3</td><td></td><td></td>",
        "<td>Silver Ore×2</td><td></td><td></td>",
        "<td>Gem</td><td></td><td></td>",
    ))
    assert count_table(soup.find("table")) == {"Silver Ore": 5, "Gem": 1}


def test_count_table_counts_synthesized_material():
    # 합성 전 소재(ハーブ)가 rowspan으로 두 행에 걸침
    soup = page(table_html(
        '<td rowspan="2">ハーブ×4</td><td>ハーブティー×1</td><td>必要</td>',
        "<td>ペガサスの羽根×2</td><td></td>",
        "<td>リンゴ×3</td><td></td><td></td>",
    ))
    assert count_table(soup.find("table")) == {
        "ハーブティー": 1,
        "ペガサスの羽根": 2,
        "リンゴ": 3,
    }


def test_count_table_logs_fallback(caplog):
    soup = page(table_html(
        '<td rowspan="2">ハーブ</td><td rowspan="2">リンゴ</td><td rowspan="2">ルビー×2</td>',
    ))
    with caplog.at_level(logging.WARNING, logger="megido_materials.aggregate"):
        counts = count_table(soup.find("table"))
    assert counts == {"ルビー": 2}
    assert any("ルビー×2" in r.getMessage() for r in caplog.records)


def test_count_table_is_pure():
    soup = page(table_html("<td>Ore×2</td><td></td><td></td>"))
    table = soup.find("table")
    assert count_table(table) == count_table(table)


def test_table_lookup_stops_at_next_header():
    soup = page(
        "<h2>★★★ (3.0)</h2><p>準備中</p>",
        "<h2>★★ (2.0)</h2>", "<div>", table_html("<td>Ore×2</td><td></td><td></td>"), "</div>",
    )
    results = list(iter_group_results(soup))
    assert len(results) == 2
    assert results[0][0] is None
    assert results[0][1].context["header"] == "★★★ (3.0)"
    assert results[1][0].key == 2.0
    assert "Ore×2" in results[1][0].table.get_text()

    with pytest.raises(GroupExtractionError):
        list(iter_groups(soup))


def test_table_nested_below_div_child_is_ignored():
    soup = page(
        "<h2>★★ (2.0)</h2>",
        "<div><section>", table_html("<td>Ore×2</td><td></td><td></td>"), "</section></div>",
    )
    with pytest.raises(GroupExtractionError):
        list(iter_groups(soup))


def test_count_table_ignores_nested_table_rows():
    nested = "<table><tr><td>Dust×9</td><td></td><td></td></tr></table>"
    soup = page(table_html(
        f"<td>Ore×2</td><td>{nested}</td><td></td>",
        "<td>Gem</td><td></td><td></td>",
    ))
    assert count_table(soup.find("table")) == {"Ore": 2, "Gem": 1}


def test_count_table_without_tbody():
    soup = page("<table><tr><td>Ore×2</td><td></td><td></td></tr><tr><td>Gem</td></tr></table>")
    assert count_table(soup.find("table")) == {"Ore": 2, "Gem": 1}


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
