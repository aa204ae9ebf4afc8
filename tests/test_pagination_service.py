"""Tests for the Paginator recompute and navigation behavior."""

import logging

import pytest

from config import ELLIPSIS
from services.pagination_service import Paginator


def numeric_pages(paginator):
    return [page for page in paginator.pages if page != ELLIPSIS]


class TestRecompute:
    def test_defaults_show_every_page_and_clamp_page_zero(self):
        paginator = Paginator(collection_size=55)
        assert paginator.page_count == 6
        assert paginator.page == 1
        assert paginator.pages == [1, 2, 3, 4, 5, 6]
        assert paginator.is_valid

    def test_rotation_with_ellipses(self):
        paginator = Paginator(collection_size=200, page=10, max_size=5, rotate=True)
        assert paginator.pages == [1, ELLIPSIS, 8, 9, 10, 11, 12, ELLIPSIS, 20]

    def test_rotation_pinned_to_both_edges(self):
        paginator = Paginator(collection_size=200, page=1, max_size=5, rotate=True, ellipses=False)
        assert paginator.pages == [1, 2, 3, 4, 5]
        paginator.update(page=20)
        assert paginator.pages == [16, 17, 18, 19, 20]

    def test_pagination_blocks(self):
        paginator = Paginator(collection_size=100, page=4, max_size=3, ellipses=False)
        assert paginator.pages == [4, 5, 6]

    def test_pagination_blocks_last_partial_block(self):
        paginator = Paginator(collection_size=100, page=10, max_size=3)
        assert paginator.pages == [1, ELLIPSIS, 10]

    def test_no_windowing_when_max_size_covers_all_pages(self):
        paginator = Paginator(collection_size=50, max_size=5, rotate=True)
        assert paginator.pages == [1, 2, 3, 4, 5]

    def test_recompute_is_idempotent(self):
        paginator = Paginator(collection_size=200, page=10, max_size=5, rotate=True)
        first = list(paginator.pages)
        paginator.recompute()
        assert paginator.pages == first

    @pytest.mark.parametrize("rotate", [True, False])
    @pytest.mark.parametrize("ellipses", [True, False])
    def test_window_bounds_numeric_markers(self, rotate, ellipses):
        max_size = 4
        extra = 2 if ellipses else 0
        for page in range(1, 16):
            paginator = Paginator(collection_size=150, page=page, max_size=max_size, rotate=rotate, ellipses=ellipses)
            assert len(numeric_pages(paginator)) <= max_size + extra
            assert page in paginator.pages

    def test_boundary_page_never_repeated_after_ellipsis(self):
        for page in range(1, 21):
            paginator = Paginator(collection_size=200, page=page, max_size=5, rotate=True)
            pages = paginator.pages
            if pages[1] == ELLIPSIS:
                assert pages[2] > 1
            if pages[-2] == ELLIPSIS:
                assert pages[-3] < 20
            assert pages.count(1) == 1
            assert pages.count(20) == 1

    def test_page_reclamped_when_collection_shrinks(self):
        paginator = Paginator(collection_size=200, page=15)
        paginator.update(collection_size=30)
        assert paginator.page == 3
        assert paginator.pages == [1, 2, 3]

    def test_update_rejects_unknown_option(self):
        paginator = Paginator(collection_size=10)
        with pytest.raises(TypeError, match="colour"):
            paginator.update(colour="red")

    def test_empty_collection(self):
        paginator = Paginator(collection_size=0)
        assert paginator.page_count == 0
        assert paginator.page == 1
        assert paginator.pages == []
        assert paginator.is_valid


class TestInvalidConfiguration:
    """Invalid inputs give an empty but safe state and are reported."""

    def test_zero_page_size(self, caplog):
        with caplog.at_level(logging.WARNING):
            paginator = Paginator(collection_size=100, page_size=0)
        assert paginator.page_count == 0
        assert paginator.page == 1
        assert paginator.pages == []
        assert paginator.errors == ["page_size must be greater than 0."]
        assert "page_size must be greater than 0." in caplog.text

    def test_negative_collection_size(self):
        paginator = Paginator(collection_size=-10)
        assert paginator.page_count == 0
        assert paginator.pages == []
        assert not paginator.is_valid

    def test_errors_survive_repeated_recompute(self):
        paginator = Paginator(collection_size=-10)
        paginator.recompute()
        paginator.recompute()
        assert paginator.errors == ["collection_size cannot be negative."]
        assert paginator.collection_size == -10
        assert paginator.pages == []

    def test_errors_survive_navigation(self):
        paginator = Paginator(collection_size=100, max_size=-3)
        paginator.select_page(2)
        paginator.select_page(3)
        assert paginator.page == 3
        assert paginator.errors == ["max_size cannot be negative."]
        assert paginator.max_size == -3
        assert paginator.pages == list(range(1, 11))

    def test_invalid_size_keeps_input_and_resolves_to_default(self):
        paginator = Paginator(collection_size=100, size="huge")
        paginator.recompute()
        assert paginator.size == "huge"
        assert paginator.display_size is None
        assert paginator.errors == ["size must be one of: sm, lg."]

    def test_size_alias_resolved_for_display(self):
        paginator = Paginator(collection_size=100, size="small")
        assert paginator.size == "small"
        assert paginator.display_size == "sm"
        assert paginator.is_valid

    def test_recovers_once_configuration_is_fixed(self):
        paginator = Paginator(collection_size=100, page_size=0)
        paginator.update(page_size=20)
        assert paginator.is_valid
        assert paginator.pages == [1, 2, 3, 4, 5]


class TestNavigation:
    def test_has_previous_and_has_next(self):
        paginator = Paginator(collection_size=30, page=1)
        assert not paginator.has_previous()
        assert paginator.has_next()
        paginator.select_page(3)
        assert paginator.has_previous()
        assert not paginator.has_next()

    def test_nothing_to_navigate_when_empty(self):
        paginator = Paginator(collection_size=0)
        assert not paginator.has_previous()
        assert not paginator.has_next()

    def test_select_page_notifies_once_with_new_page(self):
        paginator = Paginator(collection_size=100)
        received = []
        paginator.subscribe(received.append)
        paginator.select_page(4)
        assert paginator.page == 4
        assert received == [4]

    def test_select_current_page_does_not_notify(self):
        paginator = Paginator(collection_size=100, page=4)
        received = []
        paginator.subscribe(received.append)
        paginator.select_page(4)
        assert received == []

    def test_previous_on_first_page_is_a_clamped_no_op(self):
        paginator = Paginator(collection_size=100, page=1)
        received = []
        paginator.subscribe(received.append)
        paginator.select_page(paginator.page - 1)
        assert paginator.page == 1
        assert received == []

    def test_out_of_range_target_is_clamped(self):
        paginator = Paginator(collection_size=100, page=2)
        received = []
        paginator.subscribe(received.append)
        paginator.select_page(99)
        assert paginator.page == 10
        assert received == [10]

    def test_select_page_recomputes_window(self):
        paginator = Paginator(collection_size=200, page=1, max_size=5, rotate=True)
        paginator.select_page(10)
        assert paginator.pages == [1, ELLIPSIS, 8, 9, 10, 11, 12, ELLIPSIS, 20]

    def test_non_numeric_target_keeps_page(self):
        paginator = Paginator(collection_size=100, page=3)
        received = []
        paginator.subscribe(received.append)
        paginator.select_page("next")
        assert paginator.page == 3
        assert received == []

    def test_unsubscribe_stops_notifications(self):
        paginator = Paginator(collection_size=100)
        received = []
        unsubscribe = paginator.subscribe(received.append)
        unsubscribe()
        paginator.select_page(5)
        assert received == []

    def test_instances_do_not_share_state(self):
        first = Paginator(collection_size=100)
        second = Paginator(collection_size=100)
        received = []
        first.subscribe(received.append)
        second.select_page(6)
        assert first.page == 1
        assert received == []
