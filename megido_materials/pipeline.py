# -*- coding: utf-8 -*-
"""
실행 흐름

페이지 취득 → 진화도 그룹 추출 → 집계 → 포맷 순으로 한 대상을 처리한다.
페이지 I/O 없이 파싱된 문서만으로 돌리는 render_gifts()가 핵심이고,
run_megido() / run_reiho()는 캐시 경로와 취득을 붙인 래퍼이다.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional

from bs4 import BeautifulSoup

from .config import Config
from .extractors import MegidoGiftExtractor, ReihoRecipeExtractor
from .fetching import PageFetcher
from .formatter import MaterialFormatter

logger = logging.getLogger(__name__)

MODES = ("megido", "reiho")


def render_gifts(
    html: BeautifulSoup,
    name: str,
    number: str,
    formatter: MaterialFormatter,
    config: Optional[Config] = None,
) -> str:
    """
    파싱된 소재 Wiki 페이지 → 진화도가 높은 순의 탭 구분 행

    같은 문서에 대해서는 항상 같은 텍스트를 반환한다.
    """
    extractor = MegidoGiftExtractor(name, config=config or Config())
    gifts = extractor.parse_gifts(html)
    return formatter.format_megido_gifts(name, number, gifts)


def cache_path(config: Config, mode: str, file_name: str) -> Optional[Path]:
    """모드별 페이지 캐시 경로. 캐시를 쓰지 않으면 None"""
    if not config.cache_dir:
        return None
    return Path(config.cache_dir) / mode / file_name


def cache_files(mode: str, name: str) -> List[str]:
    if mode == "megido":
        return [f"{name}-capture.html", f"{name}-material.html"]
    # 영보 레시피는 모든 영보가 한 페이지
    return ["reiho.html"]


def clear_caches(config: Config, mode: str, names: Iterable[str]) -> int:
    """
    --reload 용. 대상들의 페이지 캐시를 실행 시작 시 한 번만 삭제

    Returns:
        삭제한 파일 수
    """
    removed = 0
    file_names = {f for name in names for f in cache_files(mode, name)}
    for file_name in sorted(file_names):
        path = cache_path(config, mode, file_name)
        if path is not None and path.is_file():
            logger.info("캐시 삭제: %s", path)
            path.unlink()
            removed += 1
    return removed


def run_megido(name: str, formatter: MaterialFormatter, fetcher: PageFetcher) -> str:
    """메기도 한 명 분량 처리"""
    config = fetcher.config
    extractor = MegidoGiftExtractor(name, fetcher=fetcher)
    number = extractor.get_number(page_cache=cache_path(config, "megido", f"{name}-capture.html"))
    gifts = extractor.get_gifts(page_cache=cache_path(config, "megido", f"{name}-material.html"))
    logger.info("%s (%s): 진화도 %d개", name, number, len(gifts))
    return formatter.format_megido_gifts(name, number, gifts)


def run_reiho(name: str, formatter: MaterialFormatter, fetcher: PageFetcher) -> str:
    """영보 하나 분량 처리"""
    extractor = ReihoRecipeExtractor(name, fetcher=fetcher)
    recipe = extractor.get_recipe(page_cache=cache_path(fetcher.config, "reiho", "reiho.html"))
    logger.info("%s: 소재 %d종", name, len(recipe))
    return formatter.format_reiho_recipe(name, recipe)


RUNNERS = {
    "megido": run_megido,
    "reiho": run_reiho,
}


def run(mode: str, name: str, formatter: MaterialFormatter, fetcher: PageFetcher) -> str:
    if mode not in RUNNERS:
        raise ValueError(f"알 수 없는 모드: {mode}")
    return RUNNERS[mode](name, formatter, fetcher)
