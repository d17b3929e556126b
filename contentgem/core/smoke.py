"""
Smoke-check module.

This module runs a sequence of read-only calls against a live API and
reports which of them succeeded, along with run statistics.
"""

import logging
import time
from datetime import datetime, timedelta
from typing import Any, Callable, List, Optional, Sequence, Tuple

from ..api.errors import ContentGemError
from ..models import SmokeCheckResult, SmokeStats, is_success

logger = logging.getLogger(__name__)

SmokeCheck = Tuple[str, Callable[[], Any]]


def default_smoke_checks(client) -> List[SmokeCheck]:
    """Read-only checks that exercise every resource family."""
    return [
        ("Health Check", client.health_check),
        ("Get Publications", lambda: client.get_publications(1, 5)),
        ("Get Company Info", client.get_company_info),
        ("Get Subscription Status", client.get_subscription_status),
        ("Get Subscription Plans", client.get_subscription_plans),
        ("Get Subscription Limits", client.get_subscription_limits),
        ("Get Statistics Overview", client.get_statistics_overview),
        ("Get Images", lambda: client.get_images(1, 5)),
        ("Get Publication Stats", client.get_publication_statistics),
    ]


def run_smoke_check(name: str, call: Callable[[], Any]) -> SmokeCheckResult:
    """
    Run one check.

    A check fails when the call raises a client error or returns an
    envelope without ``success: true``.
    """
    logger.info(f"--- {name} ---")
    start_time = time.time()
    try:
        result = call()
    except ContentGemError as e:
        duration = time.time() - start_time
        logger.error(f"❌ {name} failed: {e}")
        return SmokeCheckResult(name=name, passed=False, duration=duration, error=str(e))

    duration = time.time() - start_time
    if is_success(result):
        logger.info(f"✅ {name} succeeded ({duration:.2f}s)")
        return SmokeCheckResult(name=name, passed=True, duration=duration)

    error = None
    if isinstance(result, dict):
        error = result.get("message") or result.get("error")
    error = error or "Response did not report success"
    logger.error(f"❌ {name} failed: {error}")
    return SmokeCheckResult(name=name, passed=False, duration=duration, error=error)


def calculate_smoke_stats(
    results: Sequence[SmokeCheckResult],
    start_time: float,
    end_time: float,
) -> SmokeStats:
    """
    Calculate statistics for a smoke-check run.

    Args:
        results: Results of every executed check
        start_time: Run start timestamp
        end_time: Run end timestamp

    Returns:
        SmokeStats object with calculated statistics
    """
    total_checks = len(results)
    passed_checks = sum(1 for result in results if result.passed)
    total_duration = end_time - start_time
    avg_time_per_check = total_duration / total_checks if total_checks > 0 else 0

    return SmokeStats(
        total_checks=total_checks,
        passed_checks=passed_checks,
        failed_checks=total_checks - passed_checks,
        start_time=start_time,
        end_time=end_time,
        total_duration=total_duration,
        avg_time_per_check=avg_time_per_check,
    )


def log_smoke_summary(stats: SmokeStats, results: Sequence[SmokeCheckResult]):
    """
    Log smoke-check summary with statistics.

    Args:
        stats: Run statistics to log
        results: Individual check results
    """
    end_datetime = datetime.fromtimestamp(stats.end_time)

    logger.info("=" * 70)
    logger.info("SMOKE CHECK SUMMARY")
    logger.info("=" * 70)
    logger.info(f"End time: {end_datetime.strftime('%Y-%m-%d %H:%M:%S')}")
    logger.info(
        f"Total duration: {stats.total_duration:.2f} seconds ({timedelta(seconds=int(stats.total_duration))})"
    )
    logger.info(f"  Passed: {stats.passed_checks}")
    logger.info(f"  Failed: {stats.failed_checks}")
    logger.info(f"  Total: {stats.total_checks}")
    logger.info(f"  Average time per check: {stats.avg_time_per_check:.2f}s")
    logger.info("=" * 70)

    for result in results:
        if not result.passed:
            logger.warning(f"⚠️  {result.name}: {result.error}")

    if stats.failed_checks == 0:
        logger.info("🎉 All smoke checks passed!")


def run_smoke_checks(
    client,
    checks: Optional[Sequence[SmokeCheck]] = None,
) -> Tuple[List[SmokeCheckResult], SmokeStats]:
    """
    Run smoke checks sequentially and log a summary.

    Args:
        client: ContentGemClient to exercise
        checks: Optional (name, callable) pairs; defaults to the read-only set

    Returns:
        Tuple of (individual results, aggregate statistics)
    """
    if checks is None:
        checks = default_smoke_checks(client)

    logger.info(f"🚀 Starting {len(checks)} smoke checks against {client.config.base_url}")
    start_time = time.time()
    results = [run_smoke_check(name, call) for name, call in checks]
    stats = calculate_smoke_stats(results, start_time, time.time())
    log_smoke_summary(stats, results)
    return results, stats
