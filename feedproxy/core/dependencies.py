"""
公共依赖项

定义在控制器中使用的依赖项，测试时可通过 app.dependency_overrides 替换
"""

from ..services.feed_fetcher_service import FeedFetcherService


def get_feed_fetcher() -> FeedFetcherService:
    """获取 feed 抓取服务依赖项，每个请求独立实例"""
    return FeedFetcherService()
