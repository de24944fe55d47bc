from pathlib import Path
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse, Response

from ..core.constants import RSS_MEDIA_TYPE
from ..core.dependencies import get_feed_fetcher
from ..core.exceptions import MissingURL
from ..core.logging import get_logger
from ..services.feed_fetcher_service import FeedFetcherService
from ..services.feed_filter_service import filter_feed
from ..services.predicate_service import FilterPredicate, build_predicate
from ..services.rss_writer_service import render_rss

feed_logger = get_logger("feedproxy.feed")

INDEX_HTML_PATH = Path(__file__).resolve().parent.parent / "static" / "index.html"

# 创建路由器
router = APIRouter()


class FeedController:
    """Feed 过滤控制器"""

    def __init__(self):
        self._index_html: Optional[bytes] = None

    @property
    def index_html(self) -> bytes:
        """首页内容，首次访问时读取"""
        if self._index_html is None:
            self._index_html = INDEX_HTML_PATH.read_bytes()
        return self._index_html

    async def filtered_feed(
        self,
        fetcher: FeedFetcherService,
        url: Optional[str],
        pattern: Optional[str],
        skip_words: Optional[List[str]],
    ) -> bytes:
        """校验参数 -> 构建过滤条件 -> 抓取 -> 过滤 -> 渲染 RSS"""
        if url is None:
            raise MissingURL()

        # 参数错误在抓取前抛出
        predicate: FilterPredicate = build_predicate(pattern, skip_words)

        feed_logger.info(f"过滤请求: url={url}, 模式={predicate.mode.value}")

        source = await fetcher.fetch_feed(url)
        output = filter_feed(source, predicate)

        # 完整渲染后再返回，失败时不会输出部分内容
        return render_rss(output)


# 创建控制器实例
feed_controller = FeedController()


@router.get("/", summary="过滤 feed", tags=["Feed"])
async def index(
    request: Request,
    url: Optional[str] = Query(None, description="上游 RSS/Atom 地址"),
    pattern: Optional[str] = Query(None, alias="re", description="保留匹配该正则的条目"),
    skip: Optional[List[str]] = Query(None, description="丢弃标题包含这些词的条目，可重复"),
    fetcher: FeedFetcherService = Depends(get_feed_fetcher),
):
    """
    无查询参数时返回首页；否则返回过滤后的 RSS

    - url: 上游 feed 地址（必填）
    - re: 正则模式，优先于 skip
    - skip: 屏蔽词模式，可重复
    """
    if not request.query_params:
        return HTMLResponse(feed_controller.index_html)

    content = await feed_controller.filtered_feed(fetcher, url, pattern, skip)
    return Response(content=content, media_type=RSS_MEDIA_TYPE)
