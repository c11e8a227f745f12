"""Tests for wren.http.query — immutable query string parameters."""

import pytest

from wren.http.query import QueryParams


class TestQueryParams:
    def test_single_value(self) -> None:
        q = QueryParams("page=2")
        assert q["page"] == "2"

    def test_first_value_wins(self) -> None:
        q = QueryParams("tag=a&tag=b")
        assert q["tag"] == "a"
        assert q.get_list("tag") == ["a", "b"]

    def test_blank_values_kept(self) -> None:
        q = QueryParams("flag=&other=1")
        assert q["flag"] == ""
        assert "flag" in q

    def test_percent_decoding(self) -> None:
        q = QueryParams("q=hello%20world&plus=a+b")
        assert q["q"] == "hello world"
        assert q["plus"] == "a b"

    def test_missing_key_raises(self) -> None:
        with pytest.raises(KeyError):
            QueryParams("a=1")["b"]

    def test_get_default(self) -> None:
        q = QueryParams("a=1")
        assert q.get("b") is None
        assert q.get("b", "x") == "x"

    def test_get_list_missing(self) -> None:
        assert QueryParams("").get_list("a") == []

    def test_len_and_iter(self) -> None:
        q = QueryParams("a=1&b=2&a=3")
        assert len(q) == 2
        assert list(q) == ["a", "b"]

    def test_empty(self) -> None:
        q = QueryParams()
        assert len(q) == 0
        assert q.raw == ""

    def test_raw_preserved(self) -> None:
        assert QueryParams("a=1&b=%20").raw == "a=1&b=%20"

    def test_repr(self) -> None:
        assert repr(QueryParams("a=1")) == "QueryParams({'a': '1'})"
