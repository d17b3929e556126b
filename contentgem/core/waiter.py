"""
Concurrent wait coordination module.

This module awaits several independent generation sessions at once. Each
session runs its own sequential polling loop on a worker thread; the loops
share nothing but the client's immutable configuration.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Dict, Sequence, Union

from ..api.errors import ContentGemError
from ..constants import GENERATION_MAX_ATTEMPTS, GENERATION_POLL_DELAY
from ..models import GenerationStatus

logger = logging.getLogger(__name__)

WaitOutcome = Union[GenerationStatus, ContentGemError]


def wait_for_generations_concurrent(
    client,
    session_ids: Sequence[str],
    max_workers: int = 4,
    max_attempts: int = GENERATION_MAX_ATTEMPTS,
    delay: float = GENERATION_POLL_DELAY,
) -> Dict[str, WaitOutcome]:
    """
    Wait for several generation sessions in parallel.

    Args:
        client: ContentGemClient used for status checks
        session_ids: Sessions to await
        max_workers: Maximum number of concurrent polling loops
        max_attempts: Iteration budget for each loop
        delay: Seconds between checks within each loop

    Returns:
        Mapping of session id to its completed snapshot, or to the
        ContentGemError that ended its wait
    """
    outcomes: Dict[str, WaitOutcome] = {}
    if not session_ids:
        return outcomes

    workers = max(1, min(max_workers, len(session_ids)))
    logger.info(f"Waiting for {len(session_ids)} generation sessions with {workers} workers")

    with ThreadPoolExecutor(max_workers=workers) as executor:
        future_to_session = {
            executor.submit(client.wait_for_generation, session_id, max_attempts, delay): session_id
            for session_id in session_ids
        }
        for future in as_completed(future_to_session):
            session_id = future_to_session[future]
            try:
                outcomes[session_id] = future.result()
                logger.info(f"✅ Generation {session_id} completed")
            except ContentGemError as e:
                outcomes[session_id] = e
                logger.warning(f"❌ Generation {session_id} did not complete: {e}")

    return outcomes
