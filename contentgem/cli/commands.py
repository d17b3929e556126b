"""
CLI command handlers.

Each handler takes the client, the parsed arguments and the loaded Env,
performs one operation, and returns a JSON-serializable result for the
CLI to print.
"""

import logging
from typing import Any, Dict

from ..api.errors import JobFailedError, JobTimeoutError
from ..constants import BULK_MAX_ATTEMPTS, BULK_POLL_DELAY
from ..core import run_smoke_checks, wait_for_generations_concurrent
from ..models import is_success

logger = logging.getLogger(__name__)


def _generation_settings(args) -> Dict[str, Any]:
    settings: Dict[str, Any] = {}
    if args.keywords:
        settings["keywords"] = args.keywords
    company_info = {}
    if args.company_name:
        company_info["name"] = args.company_name
    if args.company_description:
        company_info["description"] = args.company_description
    if company_info:
        settings["company_info"] = company_info
    return settings


def cmd_health(client, args, env):
    return client.health_check()


def cmd_smoke(client, args, env):
    results, stats = run_smoke_checks(client)
    return {
        "success": stats.failed_checks == 0,
        "passed": stats.passed_checks,
        "failed": stats.failed_checks,
        "total": stats.total_checks,
        "checks": [result._asdict() for result in results],
    }


def cmd_generate(client, args, env):
    request = {"prompt": args.prompt}
    request.update(_generation_settings(args))
    response = client.generate_publication(request)
    if not args.wait or not is_success(response):
        return response

    session_id = response["data"]["sessionId"]
    logger.info(f"Generation started: publication {response['data']['publicationId']}, session {session_id}")
    return client.wait_for_generation(
        session_id,
        max_attempts=env.CONTENTGEM_POLL_MAX_ATTEMPTS,
        delay=env.CONTENTGEM_POLL_INTERVAL,
    )


def cmd_generation_status(client, args, env):
    return client.check_generation_status(args.session_id)


def cmd_wait(client, args, env):
    """
    Wait for several sessions and report each outcome.

    Any failed session raises JobFailedError; when every unfinished session
    timed out, JobTimeoutError. Either error carries the per-session summary.
    """
    outcomes = wait_for_generations_concurrent(
        client,
        args.session_ids,
        max_workers=args.max_workers,
        max_attempts=env.CONTENTGEM_POLL_MAX_ATTEMPTS,
        delay=env.CONTENTGEM_POLL_INTERVAL,
    )
    sessions = {}
    unfinished = []
    for session_id in args.session_ids:
        outcome = outcomes[session_id]
        if isinstance(outcome, Exception):
            sessions[session_id] = {"success": False, "error": str(outcome)}
            unfinished.append(session_id)
        else:
            sessions[session_id] = outcome
    summary = {
        "success": all(is_success(result) for result in sessions.values()),
        "sessions": sessions,
    }

    failed = [sid for sid in unfinished if isinstance(outcomes[sid], JobFailedError)]
    if failed:
        raise JobFailedError(
            f"Generation failed for {len(failed)} of {len(args.session_ids)} sessions",
            job_id=",".join(failed),
            snapshot=summary,
        )
    if unfinished and all(isinstance(outcomes[sid], JobTimeoutError) for sid in unfinished):
        raise JobTimeoutError(
            f"Generation timeout for {len(unfinished)} of {len(args.session_ids)} sessions",
            job_id=",".join(unfinished),
            snapshot=summary,
        )
    return summary


def cmd_bulk_generate(client, args, env):
    request: Dict[str, Any] = {"prompts": args.prompts}
    settings = _generation_settings(args)
    if settings:
        request["settings"] = settings
    response = client.bulk_generate_publications(request)
    if not args.wait or not is_success(response):
        return response

    publication_ids = [publication["id"] for publication in response["data"]["publications"]]
    if not publication_ids:
        logger.warning("Bulk generation started no publications, nothing to wait for")
        return response
    return client.wait_for_bulk_generation(
        publication_ids, max_attempts=BULK_MAX_ATTEMPTS, delay=BULK_POLL_DELAY
    )


def cmd_publications_list(client, args, env):
    return client.get_publications(
        page=args.page, limit=args.limit, search=args.search, status=args.status, type=args.type
    )


def cmd_publications_get(client, args, env):
    return client.get_publication(args.id)


def cmd_publications_create(client, args, env):
    return client.create_publication(args.data)


def cmd_publications_update(client, args, env):
    return client.update_publication(args.id, args.data)


def cmd_publications_delete(client, args, env):
    return client.delete_publication(args.id)


def cmd_publications_publish(client, args, env):
    return client.publish_publication(args.id)


def cmd_publications_archive(client, args, env):
    return client.archive_publication(args.id)


def cmd_publications_download(client, args, env):
    return client.download_publication(args.id, format=args.format)


def cmd_images_list(client, args, env):
    return client.get_images(
        page=args.page, limit=args.limit, search=args.search, publication_id=args.publication_id
    )


def cmd_images_get(client, args, env):
    return client.get_image(args.id)


def cmd_images_upload(client, args, env):
    return client.upload_image(args.path, publication_id=args.publication_id)


def cmd_images_generate(client, args, env):
    return client.generate_image(args.prompt, style=args.style, size=args.size)


def cmd_images_delete(client, args, env):
    return client.delete_image(args.id)


def cmd_company_get(client, args, env):
    return client.get_company_info()


def cmd_company_update(client, args, env):
    return client.update_company_info(args.data)


def cmd_company_parse(client, args, env):
    response = client.parse_company_website(args.url)
    if not args.wait or not is_success(response):
        return response
    return client.wait_for_company_parsing()


def cmd_company_parsing_status(client, args, env):
    return client.get_company_parsing_status()


def cmd_subscription_status(client, args, env):
    return client.get_subscription_status()


def cmd_subscription_limits(client, args, env):
    return client.get_subscription_limits()


def cmd_subscription_plans(client, args, env):
    return client.get_subscription_plans()


def cmd_statistics_overview(client, args, env):
    return client.get_statistics_overview()


def cmd_statistics_publications(client, args, env):
    return client.get_publication_statistics()


def cmd_statistics_images(client, args, env):
    return client.get_image_statistics()
