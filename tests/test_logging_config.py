import logging

import pytest

from foodrag.logging_config import QueryMetrics, log_latency


def test_rejected_queries_do_not_lower_average_latency():
    metrics = QueryMetrics()
    metrics.record_query(True, 100.0)
    metrics.record_query(False, 300.0)
    metrics.record_rejected()

    stats = metrics.get_stats()

    assert stats["total_queries"] == 3
    assert stats["rejected_queries"] == 1
    assert stats["avg_latency_ms"] == 200.0


def test_empty_metrics():
    assert QueryMetrics().get_stats()["avg_latency_ms"] == 0


@log_latency("op.lookup", expected=(KeyError,))
def lookup(table, key):
    return table[key]


def test_log_latency_levels(caplog):
    with caplog.at_level(logging.INFO, logger=__name__):
        assert lookup({"a": 1}, "a") == 1
        with pytest.raises(KeyError):
            lookup({}, "a")
        with pytest.raises(TypeError):
            lookup(None, "a")

    records = [r for r in caplog.records if r.getMessage().startswith("op.lookup")]
    assert [r.levelno for r in records] == [logging.INFO, logging.WARNING, logging.ERROR]
    assert "status=rejected" in records[1].getMessage()
    assert "status=error" in records[2].getMessage()
