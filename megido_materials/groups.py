# -*- coding: utf-8 -*-
"""
진화도 그룹 추출

소재 Wiki 페이지에서 별(☆/★)이 들어간 헤더가 진화도별 소재 목록이다.
헤더 텍스트의 마지막 숫자가 진화도이고, 헤더 뒤에 오는 div 안의 첫
테이블이 그 진화도의 소재 테이블이다.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence

from bs4 import BeautifulSoup, Tag

from .config import GROUP_HEADER_TAG, STAR_GLYPHS
from .errors import GroupExtractionError

# 정수 또는 소수 ("Lv.2.0"의 "."는 포함하지 않음)
LEVEL_REGEXP = re.compile(r'\d+(?:\.\d+)?')


@dataclass(frozen=True)
class Group:
    """진화도 하나 분량의 소재 테이블"""
    key: float
    header: str
    table: Tag


def is_group_header(header: Tag, star_glyphs: Sequence[str] = STAR_GLYPHS) -> bool:
    text = header.get_text()
    return any(glyph in text for glyph in star_glyphs)


def parse_level(text: str) -> float:
    """
    헤더 텍스트에서 진화도 추출

    앞쪽의 절 번호 등은 무시하고 마지막 숫자를 쓴다.
    "3. 進化度★★☆ (2.5)" → 2.5
    """
    matches = LEVEL_REGEXP.findall(text)
    if not matches:
        raise GroupExtractionError("진화도 숫자를 찾을 수 없음", context={'header': text.strip()})
    return float(matches[-1])


def find_following_table(header: Tag, nth: int = 0) -> Optional[Tag]:
    """
    헤더 뒤 형제 div 바로 아래 테이블 중 nth 번째

    같은 태그의 다음 헤더까지만 보고, 그때까지 없으면 None.
    """
    tables = []
    for sibling in header.find_next_siblings():
        if sibling.name == header.name:
            break
        if sibling.name != 'div':
            continue
        tables.extend(sibling.find_all('table', recursive=False))
        if len(tables) > nth:
            return tables[nth]
    return None


def iter_groups(
    soup: BeautifulSoup,
    star_glyphs: Sequence[str] = STAR_GLYPHS,
    header_tag: str = GROUP_HEADER_TAG,
) -> Iterator[Group]:
    """
    문서 순서대로 진화도 그룹 생성

    헤더마다 진화도와 테이블을 찾아 Group을 만든다. 진화도 숫자나
    테이블이 없는 헤더는 GroupExtractionError를 던지므로, 그룹 단위로
    건너뛰려면 iter_group_results()를 쓴다.
    """
    for group, error in iter_group_results(soup, star_glyphs, header_tag):
        if error is not None:
            raise error
        yield group


def iter_group_results(
    soup: BeautifulSoup,
    star_glyphs: Sequence[str] = STAR_GLYPHS,
    header_tag: str = GROUP_HEADER_TAG,
):
    """(Group, None) 또는 (None, GroupExtractionError)를 문서 순서대로 생성"""
    for header in soup.find_all(header_tag):
        if not is_group_header(header, star_glyphs):
            continue
        text = header.get_text().strip()
        try:
            key = parse_level(text)
        except GroupExtractionError as e:
            yield None, e
            continue
        table = find_following_table(header)
        if table is None:
            yield None, GroupExtractionError("소재 테이블을 찾을 수 없음", context={'header': text})
            continue
        yield Group(key=key, header=text, table=table), None
