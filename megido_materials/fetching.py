"""페이지 취득 및 파싱"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union
from urllib.parse import quote

import requests
import urllib3
from bs4 import BeautifulSoup

from .config import Config
from .errors import FetchError


def page_url(base_url: str, page_name: str) -> str:
    """PukiWiki 형식 페이지 URL (index.php?<페이지명>)"""
    return base_url + "?" + quote(page_name)


def parse_page(page: Union[bytes, str]) -> BeautifulSoup:
    """페이지 내용 파싱 (bytes는 UTF-8로 해석)"""
    if isinstance(page, bytes):
        return BeautifulSoup(page, 'html.parser', from_encoding='utf-8')
    return BeautifulSoup(page, 'html.parser')


class PageFetcher:
    """
    페이지 취득기

    캐시 파일이 있으면 그 내용을 쓰고, 없으면 받아서 캐시에 저장한다.
    재시도는 하지 않는다.
    """

    def __init__(self, config: Optional[Config] = None, session: Optional[requests.Session] = None):
        self.config = config or Config()
        self.session = session or requests.Session()
        self.session.headers['User-Agent'] = self.config.user_agent
        self.logger = logging.getLogger(self.__class__.__name__)
        if not self.config.verify_ssl:
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

    def fetch_page(self, url: str) -> bytes:
        """페이지 원문(bytes) 취득"""
        self.logger.info("페이지 취득: %s", url)
        try:
            response = self.session.get(
                url,
                timeout=self.config.request_timeout,
                verify=self.config.verify_ssl,
            )
        except requests.exceptions.RequestException as e:
            raise FetchError(f"페이지 취득 실패: {e}", context={'url': url}) from e

        if not 200 <= response.status_code < 300:
            raise FetchError(
                f"페이지 응답 오류: {response.status_code}",
                context={'url': url, 'status': response.status_code},
            )
        return response.content

    def get_html(self, url: str, page_cache: Optional[Union[str, Path]] = None) -> BeautifulSoup:
        """
        페이지 HTML을 파싱해서 반환

        Args:
            url: 페이지 URL
            page_cache: 페이지 캐시 파일. 있으면 여기서 읽고, 없으면 취득 후 저장
        """
        cache = Path(page_cache) if page_cache else None
        if cache is not None and cache.is_file():
            self.logger.debug("캐시 사용: %s", cache)
            page = cache.read_bytes()
        else:
            page = self.fetch_page(url)
            if cache is not None:
                cache.parent.mkdir(parents=True, exist_ok=True)
                cache.write_bytes(page)
                self.logger.debug("캐시 저장: %s", cache)
        return parse_page(page)
