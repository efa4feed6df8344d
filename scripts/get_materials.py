#!/usr/bin/env python3
"""
소재 추출 스크립트 (설치 없이 실행용)

Usage:
    python scripts/get_materials.py megido アスモデウス
    python scripts/get_materials.py reiho --reload 魔剣レーヴァテイン
"""

import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from megido_materials.cli import main


if __name__ == "__main__":
    sys.exit(main())
