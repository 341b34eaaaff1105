"""Unit tests for pagination value objects."""

import pytest

from lostfound.domain.value import Page, PageRequest, paginate


class TestPaginate:
    """Tests for the paginate function."""

    @pytest.mark.parametrize(
        "page,limit,total,skip,page_count",
        [
            (1, 10, 0, 0, 0),
            (1, 10, 10, 0, 1),
            (2, 10, 11, 10, 2),
            (3, 2, 5, 4, 3),
            (7, 5, 3, 30, 1),
        ],
    )
    def test_window(self, page, limit, total, skip, page_count):
        window = paginate(page, limit, total)

        assert window.skip == skip
        assert window.take == limit
        assert window.page_count == page_count

    @pytest.mark.parametrize("page,limit", [(0, 10), (1, 0), (-1, 5)])
    def test_rejects_non_positive(self, page, limit):
        with pytest.raises(ValueError):
            paginate(page, limit, 5)

    def test_rejects_negative_total(self):
        with pytest.raises(ValueError):
            paginate(1, 10, -1)


class TestPageRequestParse:
    """Raw query values are normalized, never rejected."""

    def test_defaults(self):
        request = PageRequest.parse()

        assert request.page == 1
        assert request.limit == 10

    def test_numeric_strings(self):
        request = PageRequest.parse("3", " 20 ")

        assert request.page == 3
        assert request.limit == 20

    @pytest.mark.parametrize("raw", ["abc", "0", "-2", "1.5", "", True])
    def test_invalid_values_fall_back(self, raw):
        request = PageRequest.parse(raw, raw)

        assert request.page == 1
        assert request.limit == 10

    def test_limit_is_clamped(self):
        assert PageRequest.parse(1, 1000).limit == 100
        assert PageRequest.parse(1, 1000, max_limit=25).limit == 25

    def test_configured_default_limit(self):
        assert PageRequest.parse(None, None, default_limit=5).limit == 5


class TestPage:
    def test_built_from_window(self):
        window = paginate(1, 2, 5)

        page = Page[str](
            items=["a", "b"], total=5, page=1, limit=2, pages=window.page_count
        )

        assert page.count == 2
        assert page.pages == 3

    def test_empty(self):
        window = paginate(1, 10, 0)

        page = Page[str](items=[], total=0, page=1, limit=10, pages=window.page_count)

        assert page.count == 0
        assert page.pages == 0
