from termcrawl.domain.crawl_result import CrawlResult
from termcrawl.domain.crawl_state import CrawlState


def test_new_state_starts_at_level_one_with_nothing_visited():
    state = CrawlState()
    assert state.level == 1
    assert state.visited_count == 0
    assert not state.has_next_level


def test_enqueue_next_skips_known_urls():
    state = CrawlState()
    state.mark_visited("https://seed.test/")
    assert not state.enqueue_next("https://seed.test/")
    assert state.enqueue_next("https://seed.test/a")
    assert not state.enqueue_next("https://seed.test/a")
    assert state.next_level == ["https://seed.test/a"]


def test_promote_keeps_discovery_order_and_clears_next_level():
    state = CrawlState()
    for url in ("https://seed.test/c", "https://seed.test/a", "https://seed.test/b"):
        state.enqueue_next(url)
    level = state.promote_next_level()
    assert level == ["https://seed.test/c", "https://seed.test/a", "https://seed.test/b"]
    assert state.current_level == level
    assert state.next_level == []


def test_current_level_urls_are_not_requeued():
    state = CrawlState()
    state.enqueue_next("https://seed.test/a")
    state.promote_next_level()
    assert state.is_known("https://seed.test/a")
    assert not state.enqueue_next("https://seed.test/a")


def test_visited_url_leaves_pending_queue_and_never_returns():
    state = CrawlState()
    state.enqueue_next("https://seed.test/a")
    state.promote_next_level()
    state.mark_visited("https://seed.test/a")
    assert state.current_level == []
    assert state.visited == ["https://seed.test/a"]
    assert not state.enqueue_next("https://seed.test/a")


def test_counters_only_increase():
    state = CrawlState()
    assert state.record_visit() == 1
    assert state.record_visit() == 2
    assert state.advance_level() == 2


def test_exit_codes():
    assert CrawlResult.NO_MORE_PAGES.exit_code == 0
    assert CrawlResult.DEPTH_LIMIT_REACHED.exit_code == 1
    assert CrawlResult.VISIT_LIMIT_REACHED.exit_code == 2
    assert CrawlResult.CONSTRUCTION_FAILED.exit_code == -1
