# -*- coding: utf-8 -*-
"""
페이지별 추출기

- MegidoGiftExtractor: 메기도 No(공략 Wiki), 진화도별 소재(소재 Wiki)
- ReihoRecipeExtractor: 영보 레시피(소재 Wiki)
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Dict, Optional, Union

from bs4 import BeautifulSoup

from .aggregate import count_table
from .config import Config
from .errors import NumberNotFoundError, RecipeNotFoundError
from .fetching import PageFetcher, page_url
from .groups import find_following_table, iter_group_results

PageCache = Optional[Union[str, Path]]

# "祖12", "祖-12" → ("祖", "12")
NUMBER_REGEXP = re.compile(r'\A(.+?)-?(\d+)\Z')
# 리제네 등 괄호가 붙은 별 버전
REINCARNATION_MARK = "（"


def format_number(raw: str, megido_name: str) -> str:
    """
    메기도 No 정형화

    "祖1" → "祖-001". 메기도명에 전각 괄호가 있으면 끝에 R을 붙인다.
    """
    match = NUMBER_REGEXP.match(raw.strip())
    if not match:
        raise NumberNotFoundError("메기도 No 형식이 아님", context={'name': megido_name, 'text': raw})
    prefix, number_id = match.groups()
    number = f"{prefix}-{int(number_id):03d}"
    if REINCARNATION_MARK in megido_name:
        number += "R"
    return number


class _FetcherMixin:
    """페이지 취득기는 처음 쓸 때 만든다"""

    @property
    def fetcher(self) -> PageFetcher:
        if self._fetcher is None:
            self._fetcher = PageFetcher(self.config)
        return self._fetcher


class MegidoGiftExtractor(_FetcherMixin):
    """메기도 진화 소재 추출기"""

    def __init__(self, megido_name: str, fetcher: Optional[PageFetcher] = None, config: Optional[Config] = None):
        self.name = megido_name
        self.config = config or (fetcher.config if fetcher else Config())
        self._fetcher = fetcher
        self.capture_url = page_url(self.config.capture_wiki_url, megido_name)
        self.material_url = page_url(self.config.material_wiki_url, megido_name)
        self.logger = logging.getLogger(self.__class__.__name__)

    def get_number(self, page_cache: PageCache = None) -> str:
        """
        공략 Wiki에서 메기도 No 취득

        Example:
            MegidoGiftExtractor("アスモデウス").get_number()  # => "祖-001"
        """
        html = self.fetcher.get_html(self.capture_url, page_cache=page_cache)
        return self.parse_number(html)

    def parse_number(self, html: BeautifulSoup) -> str:
        # 두 번째 div.ie5 테이블의 첫 셀
        boxes = html.find_all('div', class_='ie5')
        cell = None
        if len(boxes) >= 2:
            table = boxes[1].find('table')
            cell = table.find('td') if table else None
        if cell is None:
            raise NumberNotFoundError("메기도 No 셀을 찾을 수 없음", context={'url': self.capture_url})
        return format_number(cell.get_text(), self.name)

    def get_gifts(self, page_cache: PageCache = None) -> Dict[float, Dict[str, int]]:
        """
        소재 Wiki에서 진화도별 소재 수 취득

        Returns:
            진화도 → (소재명 → 필요 개수)
        """
        html = self.fetcher.get_html(self.material_url, page_cache=page_cache)
        return self.parse_gifts(html)

    def parse_gifts(self, html: BeautifulSoup) -> Dict[float, Dict[str, int]]:
        gifts: Dict[float, Dict[str, int]] = {}
        for group, error in iter_group_results(html, self.config.star_glyphs, self.config.group_header_tag):
            if error is not None:
                # 해당 진화도만 건너뛴다
                self.logger.error("%s: 진화도 추출 실패, 건너뜀: %s [%s]", self.name, error, self.material_url)
                continue
            counts = count_table(group.table)
            if group.key in gifts:
                self.logger.warning("%s: 진화도 %s 중복, 합산", self.name, group.key)
                for material, count in counts.items():
                    gifts[group.key][material] = gifts[group.key].get(material, 0) + count
            else:
                gifts[group.key] = counts

        if not gifts:
            self.logger.error("%s: 진화도 소재 목록이 없음 [%s]", self.name, self.material_url)
        return gifts


class ReihoRecipeExtractor(_FetcherMixin):
    """영보 레시피 추출기"""

    # 레시피 헤더 뒤 테이블 중 레시피 테이블 위치 (첫 번째는 효과 테이블)
    RECIPE_TABLE_INDEX = 1

    def __init__(self, reiho_name: str, fetcher: Optional[PageFetcher] = None, config: Optional[Config] = None):
        self.name = reiho_name
        self.config = config or (fetcher.config if fetcher else Config())
        self._fetcher = fetcher
        self.page_url = page_url(self.config.material_wiki_url, self.config.reiho_page_name)

    def get_recipe(self, page_cache: PageCache = None) -> Dict[str, int]:
        """
        레시피 취득

        Returns:
            소재명 → 필요 개수
        """
        html = self.fetcher.get_html(self.page_url, page_cache=page_cache)
        return self.parse_recipe(html)

    def parse_recipe(self, html: BeautifulSoup) -> Dict[str, int]:
        header = next((h4 for h4 in html.find_all('h4') if self.name in h4.get_text()), None)
        if header is None:
            raise RecipeNotFoundError("영보 헤더를 찾을 수 없음", context={'name': self.name, 'url': self.page_url})
        table = find_following_table(header, nth=self.RECIPE_TABLE_INDEX)
        if table is None:
            raise RecipeNotFoundError("레시피 테이블을 찾을 수 없음", context={'name': self.name, 'url': self.page_url})
        return count_table(table)
