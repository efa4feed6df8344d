"""추출 파이프라인 예외"""

from __future__ import annotations

from typing import Any, Dict, Optional


class ExtractionError(Exception):
    """추출 관련 예외의 기반 클래스"""

    def __init__(self, message: str, *, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}

    def __str__(self) -> str:
        message = super().__str__()
        if not self.context:
            return message
        details = ", ".join(f"{k}={v}" for k, v in self.context.items())
        return f"{message} ({details})"


class FetchError(ExtractionError):
    """페이지 취득 실패 (네트워크 오류, 2xx 이외 응답)"""


class GroupExtractionError(ExtractionError):
    """진화도 헤더에서 진화도 또는 소재 테이블을 찾지 못함"""


class RecipeNotFoundError(ExtractionError):
    """영보 레시피 헤더 또는 테이블이 없음"""


class NumberNotFoundError(ExtractionError):
    """공략 Wiki에서 메기도 No를 찾지 못함"""
