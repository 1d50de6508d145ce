import pytest

from src.domain.pagination import clamp_offset, paginate

ITEMS = list(range(42))


class TestClampOffset:
    @pytest.mark.parametrize(
        ("offset", "total", "expected"),
        [(-5, 10, 0), (0, 10, 0), (7, 10, 7), (10, 10, 10), (99, 10, 10), (3, 0, 0)],
    )
    def test_clamps_into_range(self, offset: int, total: int, expected: int) -> None:
        assert clamp_offset(offset, total) == expected


class TestPaginate:
    def test_tail_page_is_short(self) -> None:
        page, total = paginate(ITEMS, limit=10, offset=35)
        assert page == list(range(35, 42))
        assert total == 42

    def test_offset_at_end_is_empty(self) -> None:
        assert paginate(ITEMS, limit=10, offset=42) == ([], 42)

    def test_offset_past_end_is_empty(self) -> None:
        assert paginate(ITEMS, limit=10, offset=1000) == ([], 42)

    def test_zero_limit_is_empty(self) -> None:
        assert paginate(ITEMS, limit=0, offset=0) == ([], 42)

    def test_negative_inputs_are_clamped(self) -> None:
        page, _ = paginate(ITEMS, limit=3, offset=-4)
        assert page == [0, 1, 2]
        assert paginate(ITEMS, limit=-1, offset=0) == ([], 42)

    @pytest.mark.parametrize("limit", [0, 1, 5, 20, 50])
    @pytest.mark.parametrize("offset", [0, 1, 20, 41, 42, 60])
    def test_page_never_exceeds_limit_or_remaining(self, limit: int, offset: int) -> None:
        page, total = paginate(ITEMS, limit=limit, offset=offset)
        assert len(page) <= limit
        assert len(page) <= total - clamp_offset(offset, total)

    def test_returns_copy(self) -> None:
        page, _ = paginate(ITEMS, limit=2, offset=0)
        page.append(99)
        assert len(ITEMS) == 42
