import os
from pathlib import Path

# 必须在导入 feedproxy 之前设置，全局配置在导入时加载
os.environ.setdefault(
    "FEEDPROXY_CONFIG", str(Path(__file__).resolve().parent / "config.test.yaml")
)

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from feedproxy.core.app import create_app  # noqa: E402
from feedproxy.core.dependencies import get_feed_fetcher  # noqa: E402
from feedproxy.models.feed import SourceFeed  # noqa: E402
from feedproxy.services.feed_fetcher_service import FeedFetcherService  # noqa: E402

from .feeds import SAMPLE_RSS, RecordingFetcher  # noqa: E402


@pytest.fixture
def source_feed() -> SourceFeed:
    return FeedFetcherService().parse_feed(SAMPLE_RSS)


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def recording_fetcher(app, source_feed) -> RecordingFetcher:
    fetcher = RecordingFetcher(source_feed)
    app.dependency_overrides[get_feed_fetcher] = lambda: fetcher
    return fetcher
