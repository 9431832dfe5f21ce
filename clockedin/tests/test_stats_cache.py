from clockedin.domain.schemas.meeting import StatsSummary
from clockedin.services.meetings.stats_cache import StatsCache


def _make_cache(ttl: float = 300.0):
    now = [1000.0]
    cache = StatsCache(ttl_seconds=ttl, time_fn=lambda: now[0])
    return cache, now


def test_put_then_get_within_ttl_returns_same_summary() -> None:
    cache, now = _make_cache()
    summary = StatsSummary(count=3, hours=1, remainder_minutes=15)

    cache.put("p1", summary)
    now[0] += 299.0

    assert cache.get("p1") is summary


def test_get_after_ttl_is_a_miss_but_keeps_entry() -> None:
    cache, now = _make_cache()
    cache.put("p1", StatsSummary(count=1))

    now[0] += 300.0

    assert cache.get("p1") is None
    assert "p1" in cache


def test_put_overwrites_and_refreshes_timestamp() -> None:
    cache, now = _make_cache()
    cache.put("p1", StatsSummary(count=1))
    now[0] += 250.0
    fresh = StatsSummary(count=2)
    cache.put("p1", fresh)
    now[0] += 250.0

    assert cache.get("p1") is fresh


def test_entries_are_independent_per_principal() -> None:
    cache, _ = _make_cache()
    cache.put("p1", StatsSummary(count=1))
    cache.put("p2", StatsSummary(count=2))

    cache.invalidate("p1")

    assert cache.get("p1") is None
    assert cache.get("p2").count == 2


def test_invalidate_missing_key_is_noop() -> None:
    cache, _ = _make_cache()

    cache.invalidate("nobody")

    assert len(cache) == 0


def test_clear_empties_cache() -> None:
    cache, _ = _make_cache()
    cache.put("p1", StatsSummary())
    cache.put("p2", StatsSummary())

    cache.clear()

    assert len(cache) == 0
