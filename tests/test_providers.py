"""
Tests for the answer cache, the NYT client and the answer provider.
"""

from datetime import date

import orjson
import pytest
import requests

from daily_wordle.providers import (
    AnswerFetchError,
    DailyAnswerProvider,
    DateWordCache,
    NYTWordleClient,
)

from conftest import FakeAnswerClient, FakeHttp, FakeResponse

DAY = date(2024, 3, 1)

SUCCESS = {
    "id": 1234,
    "solution": "fable",
    "print_date": "2024-03-01",
    "days_since_launch": 985,
    "editor": "Tracy Bennett",
}
FAILURE = {"status": "ERROR", "errors": ["Not Found"], "results": []}


class TestDateWordCache:
    """Tests for the per-day answer cache."""

    def test_get_when_missing_then_returns_none(self, tmp_path):
        assert DateWordCache(tmp_path).get(DAY) is None

    def test_put_when_stored_then_get_returns_word(self, tmp_path):
        cache = DateWordCache(tmp_path)
        cache.put(DAY, "fable")
        assert cache.get(DAY) == "fable"
        assert DAY in cache
        assert (tmp_path / "2024-03-01").read_text() == "fable"

    def test_put_when_directory_missing_then_created(self, tmp_path):
        cache = DateWordCache(tmp_path / "nested" / "cache")
        cache.put(DAY, "fable")
        assert cache.get(DAY) == "fable"

    def test_get_when_trailing_newline_then_stripped(self, tmp_path):
        (tmp_path / "2024-03-01").write_text("fable\n")
        assert DateWordCache(tmp_path).get(DAY) == "fable"

    def test_put_when_entry_exists_then_raises(self, tmp_path):
        cache = DateWordCache(tmp_path)
        cache.put(DAY, "fable")
        with pytest.raises(FileExistsError):
            cache.put(DAY, "cable")
        assert cache.get(DAY) == "fable"

    @pytest.mark.parametrize("content", ["", "\n", "FAB1E", "fab"])
    def test_get_when_entry_empty_or_malformed_then_miss(self, tmp_path, content):
        (tmp_path / "2024-03-01").write_text(content)
        cache = DateWordCache(tmp_path)
        assert cache.get(DAY) is None
        assert DAY not in cache

    def test_put_when_entry_malformed_then_replaced(self, tmp_path):
        (tmp_path / "2024-03-01").write_text("")
        cache = DateWordCache(tmp_path)
        cache.put(DAY, "fable")
        assert cache.get(DAY) == "fable"

    def test_put_when_stored_then_no_temp_files_left(self, tmp_path):
        DateWordCache(tmp_path).put(DAY, "fable")
        assert [p.name for p in tmp_path.iterdir()] == ["2024-03-01"]

    def test_put_when_write_fails_then_entry_not_created(self, tmp_path, monkeypatch):
        def broken_replace(src, dst):
            raise OSError("disk full")

        monkeypatch.setattr("os.replace", broken_replace)
        cache = DateWordCache(tmp_path)
        with pytest.raises(OSError, match="disk full"):
            cache.put(DAY, "fable")
        assert list(tmp_path.iterdir()) == []
        assert cache.get(DAY) is None


class TestNYTWordleClient:
    """Tests for NYTWordleClient.fetch_solution."""

    def test_fetch_when_published_then_returns_solution(self):
        http = FakeHttp(FakeResponse(orjson.dumps(SUCCESS)))
        client = NYTWordleClient(session=http, timeout=3)
        solution = client.fetch_solution(DAY)
        assert solution.solution == "fable"
        assert solution.id == 1234
        assert solution.days_since_launch == 985
        assert http.calls == [("https://www.nytimes.com/svc/wordle/v2/2024-03-01.json", 3)]

    def test_fetch_when_not_published_then_returns_none(self):
        http = FakeHttp(FakeResponse(orjson.dumps(FAILURE), status_code=404))
        assert NYTWordleClient(session=http).fetch_solution(DAY) is None

    def test_fetch_when_custom_template_then_date_substituted(self):
        http = FakeHttp(FakeResponse(orjson.dumps(SUCCESS)))
        client = NYTWordleClient(session=http, url_template="http://localhost/{date}")
        client.fetch_solution(DAY)
        assert http.calls[0][0] == "http://localhost/2024-03-01"

    def test_fetch_when_solution_uppercase_then_lowercased(self):
        http = FakeHttp(FakeResponse(orjson.dumps({**SUCCESS, "solution": "FABLE\n"})))
        assert NYTWordleClient(session=http).fetch_solution(DAY).solution == "fable"

    def test_fetch_when_body_not_json_then_raises_fetch_error(self):
        http = FakeHttp(FakeResponse(b"<html>oops</html>"))
        with pytest.raises(AnswerFetchError, match="Invalid JSON"):
            NYTWordleClient(session=http).fetch_solution(DAY)

    def test_fetch_when_unknown_shape_then_raises_fetch_error(self):
        http = FakeHttp(FakeResponse(orjson.dumps({"hello": "world"})))
        with pytest.raises(AnswerFetchError, match="Unexpected payload"):
            NYTWordleClient(session=http).fetch_solution(DAY)

    def test_fetch_when_connection_drops_once_then_retried(self, monkeypatch):
        monkeypatch.setattr("time.sleep", lambda s: None)
        http = FakeHttp(
            requests.ConnectionError("reset"),
            FakeResponse(orjson.dumps(SUCCESS)),
        )
        assert NYTWordleClient(session=http).fetch_solution(DAY).solution == "fable"
        assert len(http.calls) == 2

    def test_fetch_when_connection_keeps_failing_then_reraises(self, monkeypatch):
        monkeypatch.setattr("time.sleep", lambda s: None)
        http = FakeHttp(*[requests.ConnectionError("down")] * 3)
        with pytest.raises(requests.ConnectionError):
            NYTWordleClient(session=http).fetch_solution(DAY)
        assert len(http.calls) == 3


class TestDailyAnswerProvider:
    """Tests for cache-then-fetch answer resolution."""

    def test_get_answer_when_cached_then_client_not_called(self, tmp_path):
        cache = DateWordCache(tmp_path)
        cache.put(DAY, "fable")
        client = FakeAnswerClient({})
        assert DailyAnswerProvider(cache, client).get_answer(DAY) == "fable"
        assert client.calls == []

    def test_get_answer_when_not_cached_then_fetched_and_stored(self, tmp_path):
        cache = DateWordCache(tmp_path)
        client = FakeAnswerClient({DAY: "fable"})
        provider = DailyAnswerProvider(cache, client)
        assert provider.get_answer(DAY) == "fable"
        assert cache.get(DAY) == "fable"
        assert provider.get_answer(DAY) == "fable"
        assert client.calls == [DAY]

    def test_get_answer_when_cache_entry_empty_then_refetched(self, tmp_path):
        (tmp_path / "2024-03-01").write_text("")
        cache = DateWordCache(tmp_path)
        client = FakeAnswerClient({DAY: "fable"})
        assert DailyAnswerProvider(cache, client).get_answer(DAY) == "fable"
        assert client.calls == [DAY]
        assert cache.get(DAY) == "fable"

    def test_prefetch_when_cache_entry_empty_and_unpublished_then_not_counted(self, tmp_path):
        (tmp_path / "2024-03-01").write_text("")
        provider = DailyAnswerProvider(DateWordCache(tmp_path), FakeAnswerClient({}))
        assert provider.prefetch(DAY) == []

    def test_get_answer_when_not_published_then_none_and_not_cached(self, tmp_path):
        cache = DateWordCache(tmp_path)
        provider = DailyAnswerProvider(cache, FakeAnswerClient({}))
        assert provider.get_answer(DAY) is None
        assert DAY not in cache

    def test_prefetch_when_three_days_published_then_stops_at_fourth(self, tmp_path):
        words = {
            date(2024, 3, 1): "fable",
            date(2024, 3, 2): "cable",
            date(2024, 3, 3): "table",
            date(2024, 3, 5): "sable",
        }
        seen = []
        provider = DailyAnswerProvider(DateWordCache(tmp_path), FakeAnswerClient(words))
        days = provider.prefetch(DAY, on_day=seen.append)
        assert days == [date(2024, 3, 1), date(2024, 3, 2), date(2024, 3, 3)]
        assert seen == days
        assert sorted(p.name for p in tmp_path.iterdir()) == [
            "2024-03-01", "2024-03-02", "2024-03-03",
        ]

    def test_prefetch_when_start_unpublished_then_empty(self, tmp_path):
        provider = DailyAnswerProvider(DateWordCache(tmp_path), FakeAnswerClient({}))
        assert provider.prefetch(DAY) == []
