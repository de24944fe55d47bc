"""
上游 feed 抓取与解析服务

使用 httpx 抓取，feedparser 解析 RSS/Atom 并归一化为 SourceFeed
"""

import io
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from urllib.parse import urlparse

import feedparser
import httpx

from ..core.config import config
from ..core.exceptions import FetchError, ParseError
from ..models.feed import Author, SourceFeed, SourceItem

logger = logging.getLogger(__name__)


class FeedFetcherService:
    """上游 feed 抓取服务，每次调用只请求一次，不重试"""

    def __init__(
        self,
        timeout: Optional[float] = None,
        user_agent: Optional[str] = None,
        follow_redirects: Optional[bool] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        fetch_config = config.get_fetch_config()
        self.timeout = timeout if timeout is not None else fetch_config["timeout_seconds"]
        self.user_agent = user_agent or fetch_config["user_agent"]
        self.follow_redirects = (
            follow_redirects if follow_redirects is not None
            else fetch_config["follow_redirects"]
        )
        # 测试时注入 MockTransport
        self.transport = transport

    async def fetch_feed(self, url: str) -> SourceFeed:
        """抓取并解析 feed"""
        response = await self._download(url)
        return self.parse_feed(response.content, self._response_headers(response))

    async def _download(self, url: str) -> httpx.Response:
        """发送 GET 请求，传输失败或非 2xx 状态码抛出 FetchError"""
        scheme = urlparse(url).scheme.lower()
        if scheme not in ("http", "https"):
            raise FetchError(f"unsupported URL scheme {scheme!r} in {url!r}")

        logger.info(f"开始抓取 feed: {url}")

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=self.follow_redirects,
                headers={"User-Agent": self.user_agent},
                transport=self.transport,
            ) as client:
                response = await client.get(url)
        except httpx.HTTPError as e:
            logger.error(f"请求失败: {url}, 错误: {e}")
            raise FetchError(f"fetching {url}: {e}") from e

        if not response.is_success:
            logger.error(f"上游返回错误状态码: {url}, 状态码: {response.status_code}")
            raise FetchError(
                f"fetching {url}: http error {response.status_code} "
                f"{response.reason_phrase}"
            )

        logger.info(f"抓取完成: {url}, 长度: {len(response.content)} 字节")
        return response

    @staticmethod
    def _response_headers(response: httpx.Response) -> Dict[str, str]:
        """只保留 feedparser 需要的响应头"""
        headers = {"content-location": str(response.url)}
        content_type = response.headers.get("content-type")
        if content_type:
            headers["content-type"] = content_type
        return headers

    def parse_feed(
        self, content: bytes, response_headers: Optional[Dict[str, str]] = None
    ) -> SourceFeed:
        """解析 feed 文档，无法识别时抛出 ParseError"""
        # 传入文件对象：字节串可能被 feedparser 当作本地路径打开
        # 关闭 HTML 清洗和相对链接解析，条目内容原样保留
        parsed = feedparser.parse(
            io.BytesIO(content),
            response_headers=response_headers or {},
            sanitize_html=False,
            resolve_relative_uris=False,
        )

        if not parsed.get("version"):
            if parsed.get("bozo"):
                reason = parsed.get("bozo_exception")
                raise ParseError(f"failed to parse feed: {reason}")
            raise ParseError("failed to detect feed type")

        if parsed.get("bozo"):
            logger.warning(f"feed 格式不规范，继续处理: {parsed.get('bozo_exception')}")

        feed = parsed.get("feed", {})
        source_feed = SourceFeed(
            title=feed.get("title", ""),
            link=feed.get("link", ""),
            description=feed.get("subtitle") or feed.get("description") or "",
            author=_parse_author(feed),
            items=[_parse_entry(entry) for entry in parsed.get("entries", [])],
        )

        logger.info(
            f"解析完成: 格式={parsed.version}, 标题={source_feed.title}, "
            f"条目数={len(source_feed.items)}"
        )
        return source_feed


def _parse_entry(entry: Dict[str, Any]) -> SourceItem:
    """把 feedparser 条目转换为 SourceItem"""
    return SourceItem(
        title=entry.get("title", ""),
        link=entry.get("link", ""),
        description=entry.get("summary") or entry.get("description") or "",
        author=_parse_author(entry),
        published=_parse_published(entry),
    )


def _parse_author(node: Dict[str, Any]) -> Optional[Author]:
    """提取作者信息，没有作者时返回 None"""
    detail = node.get("author_detail")
    if detail:
        name = detail.get("name", "")
        email = detail.get("email", "")
        if name or email:
            return Author(name=name, email=email)

    name = node.get("author")
    if name:
        return Author(name=name)
    return None


def _parse_published(entry: Dict[str, Any]) -> Optional[datetime]:
    """发布时间，缺失时回退到更新时间 (Atom 常见)"""
    parsed_time = entry.get("published_parsed") or entry.get("updated_parsed")
    if not parsed_time:
        return None
    # feedparser 的 struct_time 已转换为 UTC
    return datetime(*parsed_time[:6], tzinfo=timezone.utc)
