"""
Megido72 Material Extractor

소재 Wiki의 진화도별 소재 테이블을 스프레드시트 붙여넣기용 탭 구분 행으로 변환
"""

from .aggregate import count_table
from .cells import Fallback, Owned, resolve_row
from .config import Config, build_config, load_order
from .errors import (
    ExtractionError,
    FetchError,
    GroupExtractionError,
    NumberNotFoundError,
    RecipeNotFoundError,
)
from .extractors import MegidoGiftExtractor, ReihoRecipeExtractor
from .fetching import PageFetcher, parse_page
from .formatter import MaterialFormatter, level_label, project_counts
from .groups import Group, iter_groups
from .pipeline import render_gifts, run
from .quantity import parse_quantity

__all__ = [
    'count_table',
    'Fallback',
    'Owned',
    'resolve_row',
    'Config',
    'build_config',
    'load_order',
    'ExtractionError',
    'FetchError',
    'GroupExtractionError',
    'NumberNotFoundError',
    'RecipeNotFoundError',
    'MegidoGiftExtractor',
    'ReihoRecipeExtractor',
    'PageFetcher',
    'parse_page',
    'MaterialFormatter',
    'level_label',
    'project_counts',
    'Group',
    'iter_groups',
    'render_gifts',
    'run',
    'parse_quantity',
]
