import pytest

from trackboard.interface.tui_viewport import (
    DocumentViewport,
    LinearViewport,
    MultilineViewport,
    normalize_line_counts,
)


def _flatten(counts):
    return [(idx, line) for idx, count in enumerate(counts) for line in range(max(1, count))]


def _reconstruct(counts, first, last, line_offset, height):
    rows = []
    for idx in range(first, last + 1):
        start = line_offset if idx == first else 0
        rows.extend((idx, line) for line in range(start, max(1, counts[idx])))
    return rows[:height]


class TestLinearViewport:
    def test_selection_always_visible(self):
        for total in range(0, 13):
            for height in range(1, 6):
                for selected in range(total):
                    vp = LinearViewport(height)
                    vp.offset = total  # stale offset from a longer list
                    vp.ensure_visible(total, selected)
                    assert vp.offset <= selected < vp.offset + height
                    assert 0 <= vp.offset <= max(0, total - height)

    def test_empty_list(self):
        vp = LinearViewport(5)
        vp.offset = 7
        vp.ensure_visible(0, 3)
        assert vp.offset == 0
        assert vp.visible_range(0) == (0, 0)

    def test_height_floor(self):
        vp = LinearViewport(0)
        assert vp.height == 1
        vp.set_height(-4)
        assert vp.height == 1

    def test_out_of_range_selection_is_clamped(self):
        vp = LinearViewport(3)
        vp.ensure_visible(5, 99)
        assert vp.offset == 2
        vp.ensure_visible(5, -3)
        assert vp.offset == 0

    def test_visible_range_after_list_shrinks(self):
        vp = LinearViewport(5)
        vp.offset = 15
        assert vp.visible_range(3) == (0, 3)
        assert vp.offset == 15  # read only

    def test_page_down_moves_full_page(self):
        vp = LinearViewport(5)
        assert vp.page_down(20, 0) == 5
        assert vp.offset == 1
        assert vp.page_down(20, 17) == 19
        assert vp.offset == 15

    def test_page_up_steps_back_from_offset(self):
        vp = LinearViewport(5)
        vp.offset = 10
        assert vp.page_up(20) == 5
        assert vp.offset == 5
        vp.offset = 2
        assert vp.page_up(20) == 0
        assert vp.offset == 0

    def test_paging_empty_list(self):
        vp = LinearViewport(5)
        assert vp.page_down(0, 3) == 0
        assert vp.page_up(0) == 0
        assert vp.offset == 0

    def test_ensure_visible_is_idempotent(self):
        vp = LinearViewport(4)
        vp.ensure_visible(30, 17)
        first = vp.offset
        vp.ensure_visible(30, 17)
        assert vp.offset == first


class TestMultilineViewport:
    def test_scenario_tall_item(self):
        vp = MultilineViewport(4)
        counts = [1, 1, 5, 1]
        vp.ensure_visible(counts, 2)
        assert vp.offset == 3
        assert vp.visible_range(counts) == (2, 2, 1)

    def test_empty_list(self):
        vp = MultilineViewport(4)
        vp.offset = 9
        vp.ensure_visible([], 0)
        assert vp.offset == 0
        assert vp.visible_range([]) == (0, -1, 0)

    @pytest.mark.parametrize(
        "counts,height",
        [
            ([1, 1, 5, 1], 4),
            ([3, 1, 1, 4, 2, 1, 6], 5),
            ([1] * 12, 3),
            ([2, 2, 2], 10),
            ([7], 3),
        ],
    )
    def test_reconstruction_and_visibility(self, counts, height):
        flat = _flatten(counts)
        for selected in range(len(counts)):
            vp = MultilineViewport(height)
            vp.ensure_visible(counts, selected)
            assert 0 <= vp.offset <= max(0, sum(counts) - height)
            start = sum(counts[:selected])
            end = start + counts[selected]
            assert start < vp.offset + height and end > vp.offset
            first, last, line_offset = vp.visible_range(counts)
            assert 0 <= line_offset < counts[first]
            assert _reconstruct(counts, first, last, line_offset, height) == flat[vp.offset : vp.offset + height]

    def test_ensure_visible_is_idempotent(self):
        counts = [2, 1, 4, 1, 3]
        vp = MultilineViewport(3)
        vp.ensure_visible(counts, 3)
        first = vp.offset
        vp.ensure_visible(counts, 3)
        assert vp.offset == first

    def test_expanding_keeps_start_visible_when_it_fits(self):
        vp = MultilineViewport(6)
        collapsed = [1, 1, 1, 1, 1, 1, 1, 1, 1, 1]
        vp.ensure_visible(collapsed, 3)
        expanded = list(collapsed)
        expanded[3] = 6
        vp.ensure_visible(expanded, 3)
        assert vp.offset <= 3 < vp.offset + vp.height

    def test_expanding_in_short_viewport_still_intersects(self):
        vp = MultilineViewport(3)
        counts = [1, 1, 1, 6, 1]
        vp.ensure_visible(counts, 3)
        assert vp.offset < 3 + 6
        assert vp.offset + vp.height > 3

    def test_line_counts_are_normalized(self):
        assert normalize_line_counts([0, -2, 3]) == [1, 1, 3]
        vp = MultilineViewport(2)
        vp.ensure_visible([0, -1, 2], 2)
        assert vp.offset == 2
        assert vp.total_lines([0, -1, 2]) == 4


class TestDocumentViewport:
    def test_scroll_position_labels(self):
        vp = DocumentViewport(10)
        assert vp.scroll_position(10) == "All"
        assert vp.scroll_position(20) == "Top"
        vp.offset = 10
        assert vp.scroll_position(20) == "Bot"
        vp.offset = 5
        assert vp.scroll_position(20) == "50%"

    def test_percentage_stays_between_one_and_ninety_nine(self):
        vp = DocumentViewport(10)
        vp.offset = 1
        assert vp.scroll_position(1010) == "1%"
        vp.offset = 999
        assert vp.scroll_position(1010) == "99%"

    def test_page_scroll_keeps_one_line_overlap(self):
        vp = DocumentViewport(10)
        vp.scroll_page_down(100)
        assert vp.offset == 9
        vp.scroll_page_up(100)
        assert vp.offset == 0

    def test_single_line_viewport_pages_by_one(self):
        vp = DocumentViewport(1)
        vp.scroll_page_down(5)
        assert vp.offset == 1

    def test_line_scroll_clamps(self):
        vp = DocumentViewport(10)
        vp.scroll_line_up(100)
        assert vp.offset == 0
        vp.scroll_to_end(100)
        assert vp.offset == 90
        vp.scroll_line_down(100)
        assert vp.offset == 90
        vp.scroll_to_start()
        assert vp.offset == 0

    def test_clamp_after_rewrap(self):
        vp = DocumentViewport(10)
        vp.scroll_to_end(100)
        vp.clamp(30)
        assert vp.offset == 20
        assert vp.visible_range(30) == (20, 30)

    def test_empty_document(self):
        vp = DocumentViewport(10)
        vp.scroll_page_down(0)
        assert vp.offset == 0
        assert vp.visible_range(0) == (0, 0)
        assert vp.scroll_position(0) == "All"
