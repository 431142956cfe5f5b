"""Tests for switchyard.http.query — QueryParams."""

from switchyard.http.query import QueryParams


class TestQueryParams:
    def test_first_value(self) -> None:
        query = QueryParams("a=1&a=2&b=3")
        assert query["a"] == "1"
        assert query.get_list("a") == ["1", "2"]
        assert len(query) == 2

    def test_bytes_input(self) -> None:
        query = QueryParams(b"id=test")
        assert query["id"] == "test"
        assert query.raw == "id=test"

    def test_blank_values_kept(self) -> None:
        query = QueryParams("flag=&x=1")
        assert query["flag"] == ""
        assert "flag" in query

    def test_missing(self) -> None:
        query = QueryParams("")
        assert query.get("x") is None
        assert query.get("x", "d") == "d"
        assert query.get_list("x") == []
        assert "x" not in query

    def test_to_dict(self) -> None:
        assert QueryParams("a=1&b=2&b=3").to_dict() == {"a": "1", "b": ["2", "3"]}

    def test_plus_and_percent_decoding(self) -> None:
        query = QueryParams("q=a+b%26c")
        assert query["q"] == "a b&c"

    def test_repr(self) -> None:
        assert repr(QueryParams("a=1")) == "QueryParams({'a': '1'})"
