# -*- coding: utf-8 -*-
"""
설정 및 로깅
============

메기도 소재 추출기의 실행 설정을 한 곳에 모은다.

- 사용자 설정 상수 (Wiki URL, 경로, 네트워크)
- Config 데이터클래스 / build_config()
- 소재 순서 파일(OrderSpec) 로드
- 로깅 설정 (CLI 전용)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Tuple, Union


# =============================================================================
# [1] Wiki 설정
# =============================================================================
# 공략 Wiki (메기도 No 취득용)
CAPTURE_WIKI_URL = "https://megido72wiki.com/index.php"
# 소재 Wiki (진화 소재 / 영보 레시피)
MATERIAL_WIKI_URL = "https://megido72material.swiki.jp/index.php"
# 영보 레시피 페이지명
REIHO_PAGE_NAME = "霊宝レシピ"

# =============================================================================
# [2] 페이지 구조 설정
# =============================================================================
# 진화도 헤더 판별 문자 (둘 중 하나라도 포함되면 진화도 헤더)
STAR_GLYPHS = ("☆", "★")
# 진화도 헤더 태그
GROUP_HEADER_TAG = "h2"
# 소재명과 필요 개수 구분자 (U+00D7, ASCII x 아님)
QUANTITY_SEPARATOR = "×"
# 셀 병합 판별 속성
MERGE_ATTRIBUTE = "rowspan"

# =============================================================================
# [3] 경로 설정
# =============================================================================
DEFAULT_ORDER_PATH = "data/material_order.txt"
DEFAULT_CACHE_DIR = "cache"
DEFAULT_RESULT_DIR = "result"

# =============================================================================
# [4] 네트워크 설정
# =============================================================================
REQUEST_TIMEOUT_SEC = 30
# 소재 Wiki 인증서 문제로 기본은 검증 비활성화
VERIFY_SSL = False
USER_AGENT = "megido-materials/1.0"


# =============================================================================
# 로깅 설정
# =============================================================================
LOG_FORMAT = '[%(levelname)s] %(asctime)s - %(name)s - %(message)s'
LOG_DATEFMT = '%H:%M:%S'


def setup_logging(level: int = logging.INFO, log_path: Optional[str] = None) -> None:
    """루트 로거 설정 (CLI에서만 호출)"""
    root = logging.getLogger()
    root.setLevel(level)
    for h in list(root.handlers):
        root.removeHandler(h)
    fmt = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)
    ch = logging.StreamHandler()
    ch.setFormatter(fmt)
    root.addHandler(ch)
    if log_path:
        Path(log_path).parent.mkdir(parents=True, exist_ok=True)
        fh = RotatingFileHandler(log_path, maxBytes=5*1024*1024, backupCount=3, encoding='utf-8')
        fh.setFormatter(fmt)
        root.addHandler(fh)


# =============================================================================
# Config 데이터클래스
# =============================================================================

@dataclass
class Config:
    """설정 데이터클래스"""
    # Wiki
    capture_wiki_url: str = CAPTURE_WIKI_URL
    material_wiki_url: str = MATERIAL_WIKI_URL
    reiho_page_name: str = REIHO_PAGE_NAME

    # 페이지 구조
    star_glyphs: Tuple[str, ...] = STAR_GLYPHS
    group_header_tag: str = GROUP_HEADER_TAG

    # 경로
    order_path: str = DEFAULT_ORDER_PATH
    cache_dir: Optional[str] = DEFAULT_CACHE_DIR
    result_dir: str = DEFAULT_RESULT_DIR
    reload: bool = False

    # 네트워크
    request_timeout: int = REQUEST_TIMEOUT_SEC
    verify_ssl: bool = VERIFY_SSL
    user_agent: str = USER_AGENT


def build_config(**overrides) -> Config:
    """사용자 설정을 Config 객체로 변환 (None인 항목은 기본값 유지)"""
    values = {k: v for k, v in overrides.items() if v is not None}
    return replace(Config(), **values)


# =============================================================================
# 소재 순서 (OrderSpec)
# =============================================================================

def load_order(path: Union[str, Path]) -> Tuple[str, ...]:
    """
    소재 순서 파일 로드

    한 줄에 소재명 하나. 각 줄은 strip 하고, 빈 줄은 구분용 빈 컬럼으로
    그대로 남긴다.

    Args:
        path: 순서 파일 경로 (UTF-8)

    Returns:
        출력 컬럼 순서대로의 소재명 튜플
    """
    text = Path(path).read_text(encoding='utf-8')
    order = tuple(line.strip() for line in text.splitlines())
    logging.getLogger(__name__).debug("소재 순서 로드: %s (%d 컬럼)", path, len(order))
    return order
