"""Tests for the match cursor and auto-scroll controller."""

from __future__ import annotations

import pytest

from armanlegal.viewer.navigator import AutoScrollController, MatchNavigator, ScrollMode


class TestMatchNavigator:
    """Circular navigation over the match set."""

    def test_reset_with_query_points_at_first_match(self) -> None:
        nav = MatchNavigator()
        assert nav.reset(3, query_active=True) == 0

    def test_reset_without_matches(self) -> None:
        nav = MatchNavigator()
        assert nav.reset(0, query_active=True) == -1

    def test_reset_without_query(self) -> None:
        nav = MatchNavigator()
        assert nav.reset(3, query_active=False) == -1

    @pytest.mark.parametrize("total", [1, 2, 5, 13])
    def test_total_nexts_return_to_start(self, total: int) -> None:
        nav = MatchNavigator()
        nav.reset(total, query_active=True)
        for _ in range(total):
            nav.next()
        assert nav.index == 0

    def test_next_wraps(self) -> None:
        nav = MatchNavigator()
        nav.reset(2, query_active=True)
        assert nav.next() == 1
        assert nav.next() == 0

    def test_previous_wraps(self) -> None:
        nav = MatchNavigator()
        nav.reset(3, query_active=True)
        assert nav.previous() == 2
        assert nav.previous() == 1

    def test_navigation_without_matches_is_noop(self) -> None:
        nav = MatchNavigator()
        nav.reset(0, query_active=True)
        assert nav.next() == -1
        assert nav.previous() == -1


class TestAutoScrollController:
    """Follow-the-end only while streaming with search closed."""

    def test_idle_before_start(self) -> None:
        ctrl = AutoScrollController()
        assert ctrl.mode is ScrollMode.IDLE
        assert ctrl.on_append() is False

    def test_streaming_scrolls(self) -> None:
        ctrl = AutoScrollController()
        ctrl.start()
        assert ctrl.mode is ScrollMode.STREAMING
        assert ctrl.on_append() is True

    def test_open_search_stops_following(self) -> None:
        ctrl = AutoScrollController()
        ctrl.start()
        ctrl.open_search()
        assert ctrl.mode is ScrollMode.IDLE
        assert ctrl.on_append() is False

    def test_closing_search_does_not_resume_following(self) -> None:
        ctrl = AutoScrollController()
        ctrl.start()
        ctrl.open_search()
        ctrl.close_search()
        assert ctrl.on_append() is False

    def test_complete_goes_idle(self) -> None:
        ctrl = AutoScrollController()
        ctrl.start()
        ctrl.complete()
        assert ctrl.mode is ScrollMode.IDLE

    def test_start_closes_search(self) -> None:
        ctrl = AutoScrollController()
        ctrl.open_search()
        ctrl.start()
        assert ctrl.search_open is False
