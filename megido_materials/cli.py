"""
메기도 소재 추출 CLI

Usage:
    # 메기도 진화 소재 (result/megido/アスモデウス.txt)
    megido-materials megido アスモデウス

    # 여러 명 한 번에
    megido-materials megido アスモデウス バエル

    # 영보 레시피, 캐시 무시하고 다시 취득
    megido-materials reiho -r 魔剣レーヴァテイン
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from tqdm import tqdm

from .config import DEFAULT_CACHE_DIR, DEFAULT_ORDER_PATH, DEFAULT_RESULT_DIR, build_config, load_order, setup_logging
from .errors import ExtractionError
from .fetching import PageFetcher
from .formatter import MaterialFormatter
from .pipeline import MODES, clear_caches, run

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="megido-materials",
        description="메기도72 소재 Wiki에서 필요 소재 수를 스프레드시트용으로 추출",
    )
    parser.add_argument("mode", choices=MODES, help="megido: 진화 소재, reiho: 영보 레시피")
    parser.add_argument("names", nargs="+", metavar="NAME", help="메기도명 또는 영보명")
    parser.add_argument("--order", type=str, default=DEFAULT_ORDER_PATH,
                        help=f"소재 순서 파일 (default: {DEFAULT_ORDER_PATH})")
    parser.add_argument("--cache-dir", type=str, default=DEFAULT_CACHE_DIR,
                        help=f"페이지 캐시 폴더 (default: {DEFAULT_CACHE_DIR})")
    parser.add_argument("--no-cache", action="store_true", help="페이지 캐시 사용 안 함")
    parser.add_argument("--result-dir", type=str, default=DEFAULT_RESULT_DIR,
                        help=f"결과 폴더 (default: {DEFAULT_RESULT_DIR})")
    parser.add_argument("-r", "--reload", action="store_true", help="캐시가 있어도 페이지를 다시 취득")
    parser.add_argument("--log-path", type=str, default=None, help="로그 파일")
    parser.add_argument("-v", "--verbose", action="store_true", help="DEBUG 로그 출력")
    return parser


def write_result(result_dir: str, mode: str, name: str, text: str) -> Path:
    path = Path(result_dir) / mode / f"{name}.txt"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO, args.log_path)

    config = build_config(
        order_path=args.order,
        cache_dir="" if args.no_cache else args.cache_dir,
        result_dir=args.result_dir,
        reload=args.reload,
    )
    try:
        order = load_order(config.order_path)
    except OSError as e:
        logger.error("소재 순서 파일 로드 실패: %s", e)
        return 1

    formatter = MaterialFormatter(order)
    fetcher = PageFetcher(config)
    if config.reload:
        clear_caches(config, args.mode, args.names)

    failed = []
    for name in tqdm(args.names, desc=args.mode, disable=len(args.names) < 2):
        try:
            text = run(args.mode, name, formatter, fetcher)
        except ExtractionError as e:
            logger.error("%s 처리 실패: %s", name, e)
            failed.append(name)
            continue
        path = write_result(config.result_dir, args.mode, name, text)
        logger.info("저장: %s", path)

    if failed:
        logger.error("실패: %s", ", ".join(failed))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
