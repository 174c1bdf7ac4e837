"""Unit tests – list-query compiler."""
from __future__ import annotations

import pytest

from dokuflow.query import (
    Filter,
    ListOptions,
    Pagination,
    QueryOptions,
    Sort,
    SortBy,
    compile_query,
    compile_query_string,
)

BASE = "https://lax.dokuflow.com/acme/tasks?apiKey=k"


def _q(**kwargs) -> str:
    return compile_query_string(ListOptions(**kwargs))


# ---------------------------------------------------------------------------
# Individual clauses
# ---------------------------------------------------------------------------


class TestFilterClause:
    def test_filters_joined_with_ampersand(self) -> None:
        qs = _q(filters=[Filter.eq("count", 5), Filter.in_("tag", ["a", "b", "c"])])
        assert qs == "&$$count=EQ||5&$$tag=IN||a|b|c"

    def test_empty_filters_omitted(self) -> None:
        assert _q(filters=[]) == ""


class TestSelectClause:
    def test_comma_joined_in_given_order(self) -> None:
        assert _q(selections=["title", "ID", "count"]) == "&select=title,ID,count"

    def test_duplicates_kept(self) -> None:
        assert _q(selections=["a", "a"]) == "&select=a,a"

    def test_empty_selections_omitted(self) -> None:
        assert _q(selections=[]) == ""


class TestPaginationClause:
    def test_skip_only(self) -> None:
        qs = _q(pagination=Pagination(skip=10))
        assert "&skip=10" in qs
        assert "take=" not in qs

    def test_take_only(self) -> None:
        qs = _q(pagination=Pagination(take=3))
        assert qs == "&take=3"

    def test_skip_before_take(self) -> None:
        assert _q(pagination=Pagination(take=5, skip=20)) == "&skip=20&take=5"

    def test_empty_pagination_emits_nothing(self) -> None:
        assert _q(pagination=Pagination()) == ""

    def test_zero_is_emitted_unlike_a_truthiness_check(self) -> None:
        # skip=0 and take=0 are sent; a falsy check would drop them
        assert _q(pagination=Pagination(skip=0, take=0)) == "&skip=0&take=0"


class TestRelationsClause:
    def test_relations_comma_joined(self) -> None:
        assert _q(relations=["owner", "project"]) == "&relations=owner,project"

    def test_empty_relations_still_emitted(self) -> None:
        assert _q(relations=[]) == "&relations="

    def test_absent_relations_omitted(self) -> None:
        assert "relations=" not in _q(selections=["title"])


class TestSortClauses:
    @pytest.mark.parametrize(
        ("sort", "expected"),
        [(Sort.EARLIEST_FIRST, "&sort=earliest_first"), (Sort.LATEST_FIRST, "&sort=latest_first")],
    )
    def test_preset(self, sort: Sort, expected: str) -> None:
        assert _q(sort=sort) == expected

    def test_preset_given_as_plain_string(self) -> None:
        assert _q(sort="latest_first") == "&sort=latest_first"

    def test_sort_by_ascending(self) -> None:
        assert _q(sort_by=SortBy("createdAt")) == "&sort=createdAt"

    def test_sort_by_desc(self) -> None:
        assert _q(sort_by=SortBy("createdAt", desc=True)) == "&sort=createdAt||desc"

    def test_both_sorts_emit_two_clauses(self) -> None:
        qs = _q(sort=Sort.LATEST_FIRST, sort_by=SortBy("createdAt", desc=True))
        assert qs == "&sort=latest_first&sort=createdAt||desc"


# ---------------------------------------------------------------------------
# Whole query
# ---------------------------------------------------------------------------


class TestCompileQuery:
    def test_no_options_returns_base(self) -> None:
        assert compile_query(BASE) == BASE
        assert compile_query(BASE, ListOptions()) == BASE

    def test_clauses_start_with_ampersand(self) -> None:
        url = compile_query(BASE, ListOptions(selections=["title"]))
        assert url == BASE + "&select=title"
        assert url.count("?") == 1

    def test_full_clause_order(self) -> None:
        options = ListOptions(
            sort_by=SortBy("createdAt", desc=True),
            sort=Sort.EARLIEST_FIRST,
            relations=["owner"],
            pagination=Pagination(skip=1, take=2),
            selections=["title", "count"],
            filters=[Filter.like("title", "x"), Filter.eq("count", 3)],
        )
        assert compile_query(BASE, options) == (
            BASE
            + "&$$title=LIKE||x&$$count=EQ||3"
            + "&select=title,count"
            + "&skip=1&take=2"
            + "&relations=owner"
            + "&sort=earliest_first"
            + "&sort=createdAt||desc"
        )

    def test_idempotent(self) -> None:
        options = ListOptions(
            filters=[Filter.in_("tag", ["a", "b"])],
            relations=[],
            pagination=Pagination(take=10),
        )
        assert compile_query(BASE, options) == compile_query(BASE, options)

    def test_options_are_not_mutated(self) -> None:
        selections = ["title"]
        options = ListOptions(selections=selections, pagination=Pagination(skip=1))
        compile_query(BASE, options)
        assert selections == ["title"]
        assert options.pagination == Pagination(skip=1)


class TestListOptionsFromQuery:
    def test_copies_fields_and_sets_pagination(self) -> None:
        query = QueryOptions(selections=["title"], sort=Sort.LATEST_FIRST, relations=[])
        options = ListOptions.from_query(query, Pagination(take=1))
        assert options.selections == ["title"]
        assert options.sort is Sort.LATEST_FIRST
        assert options.relations == []
        assert options.pagination == Pagination(take=1)

    def test_overrides_existing_pagination(self) -> None:
        original = ListOptions(pagination=Pagination(skip=5, take=50))
        options = ListOptions.from_query(original, Pagination(take=1))
        assert compile_query_string(options) == "&take=1"
