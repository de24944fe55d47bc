"""Tests for the filtered feed endpoint."""

import feedparser

from feedproxy.core.dependencies import get_feed_fetcher
from feedproxy.models.feed import SourceFeed, SourceItem

from .feeds import FEED_URL, SAMPLE_RSS, make_fetcher, serve


def entry_titles(response):
    return [entry.title for entry in feedparser.parse(response.content).entries]


class TestLandingPage:

    def test_index_without_query(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "feedproxy" in response.text

    def test_unknown_path(self, client):
        response = client.get("/nope")

        assert response.status_code == 404


class TestValidation:

    def test_missing_url(self, client, recording_fetcher):
        response = client.get("/", params={"skip": "recall"})

        assert response.status_code == 400
        assert "url" in response.text
        assert recording_fetcher.calls == []

    def test_missing_filter(self, client, recording_fetcher):
        response = client.get("/", params={"url": FEED_URL})

        assert response.status_code == 400
        assert "skip" in response.text
        assert "re" in response.text
        assert recording_fetcher.calls == []

    def test_invalid_regex_is_rejected_before_fetch(self, client, recording_fetcher):
        response = client.get("/", params={"url": FEED_URL, "re": "(Beta"})

        assert response.status_code == 400
        assert response.headers["content-type"].startswith("text/plain")
        assert recording_fetcher.calls == []


class TestFiltering:

    def test_skip_words(self, client, recording_fetcher):
        response = client.get("/", params={"url": FEED_URL, "skip": ["recall"]})

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/xml")
        assert entry_titles(response) == ["Alpha launch", "Gamma update"]
        assert recording_fetcher.calls == [FEED_URL]

    def test_repeated_skip_words(self, client, recording_fetcher):
        response = client.get("/", params={"url": FEED_URL, "skip": ["recall", "update"]})

        assert response.status_code == 200
        assert entry_titles(response) == ["Alpha launch"]

    def test_regex(self, client, recording_fetcher):
        response = client.get("/", params={"url": FEED_URL, "re": "^Beta"})

        assert response.status_code == 200
        assert entry_titles(response) == ["Beta recall"]

    def test_regex_wins_over_skip(self, client, recording_fetcher):
        response = client.get("/", params={"url": FEED_URL, "re": "^Beta", "skip": "recall"})

        assert response.status_code == 200
        assert entry_titles(response) == ["Beta recall"]

    def test_channel_metadata(self, client, recording_fetcher):
        response = client.get("/", params={"url": FEED_URL, "re": ""})

        parsed = feedparser.parse(response.content)
        assert parsed.feed.title == "Example News"
        assert parsed.feed.link == "https://news.example.com/"
        assert parsed.feed.subtitle == "Launches, recalls and updates"
        assert len(parsed.entries) == 3


class TestUpstreamFailures:

    def test_upstream_404(self, app, client):
        app.dependency_overrides[get_feed_fetcher] = lambda: make_fetcher(
            serve(b"gone", status_code=404, content_type="text/plain"))

        response = client.get("/", params={"url": FEED_URL, "skip": "recall"})

        assert response.status_code == 500
        assert "404" in response.text
        assert "<rss" not in response.text

    def test_upstream_not_a_feed(self, app, client):
        app.dependency_overrides[get_feed_fetcher] = lambda: make_fetcher(
            serve(b"<html><body>hello</body></html>", content_type="text/html"))

        response = client.get("/", params={"url": FEED_URL, "re": "."})

        assert response.status_code == 500
        assert response.text

    def test_kept_item_without_date(self, app, client, recording_fetcher):
        recording_fetcher.feed = SourceFeed(title="t", items=[SourceItem(title="undated")])

        response = client.get("/", params={"url": FEED_URL, "re": "."})

        assert response.status_code == 500
        assert "undated" in response.text
        assert "<rss" not in response.text

    def test_end_to_end_with_mock_upstream(self, app, client):
        requested = []

        def handler(request):
            requested.append(str(request.url))
            return serve(SAMPLE_RSS)(request)

        app.dependency_overrides[get_feed_fetcher] = lambda: make_fetcher(handler)

        response = client.get("/", params={"url": FEED_URL, "skip": "recall"})

        assert response.status_code == 200
        assert requested == [FEED_URL]
        assert entry_titles(response) == ["Alpha launch", "Gamma update"]
