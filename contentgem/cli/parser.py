"""
CLI argument parser module.

Global options are generated from the configuration schema; each API
operation is exposed as a subcommand bound to its handler.
"""

import argparse
import json

from ..config.loader import ConfigLoader
from ..constants import DEFAULT_PAGE, DEFAULT_PAGE_SIZE, DOWNLOAD_FORMATS
from . import commands


def json_object(value: str) -> dict:
    """argparse type for inline JSON objects."""
    try:
        parsed = json.loads(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid JSON: {e}")
    if not isinstance(parsed, dict):
        raise argparse.ArgumentTypeError("expected a JSON object")
    return parsed


def _add_pagination(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--page", type=int, default=DEFAULT_PAGE, help=f"Page number (default: {DEFAULT_PAGE})")
    parser.add_argument("--limit", type=int, default=DEFAULT_PAGE_SIZE, help=f"Page size (default: {DEFAULT_PAGE_SIZE})")
    parser.add_argument("--search", help="Free-text filter")


def _add_generation_settings(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--keyword", action="append", dest="keywords", help="Keyword to target (repeatable)")
    parser.add_argument("--company-name", help="Company name to write for")
    parser.add_argument("--company-description", help="Company description")
    parser.add_argument("--wait", action="store_true", help="Poll until generation finishes")


def _add_publication_commands(subparsers) -> None:
    publications = subparsers.add_parser("publications", help="Manage publications")
    actions = publications.add_subparsers(dest="action", required=True)

    list_parser = actions.add_parser("list", help="List publications")
    _add_pagination(list_parser)
    list_parser.add_argument("--status", help="Filter by status (draft, published, archived)")
    list_parser.add_argument("--type", help="Filter by type (blog, review)")
    list_parser.set_defaults(handler=commands.cmd_publications_list)

    create = actions.add_parser("create", help="Create a publication")
    create.add_argument("--data", type=json_object, required=True, help="Publication fields as JSON")
    create.set_defaults(handler=commands.cmd_publications_create)

    update = actions.add_parser("update", help="Update a publication")
    update.add_argument("id")
    update.add_argument("--data", type=json_object, required=True, help="Fields to change as JSON")
    update.set_defaults(handler=commands.cmd_publications_update)

    for name, handler, help_text in (
        ("get", commands.cmd_publications_get, "Show a publication"),
        ("delete", commands.cmd_publications_delete, "Delete a publication"),
        ("publish", commands.cmd_publications_publish, "Publish a publication"),
        ("archive", commands.cmd_publications_archive, "Archive a publication"),
    ):
        action = actions.add_parser(name, help=help_text)
        action.add_argument("id")
        action.set_defaults(handler=handler)

    download = actions.add_parser("download", help="Get a download link")
    download.add_argument("id")
    download.add_argument("--format", choices=DOWNLOAD_FORMATS, default="pdf")
    download.set_defaults(handler=commands.cmd_publications_download)


def _add_image_commands(subparsers) -> None:
    images = subparsers.add_parser("images", help="Manage images")
    actions = images.add_subparsers(dest="action", required=True)

    list_parser = actions.add_parser("list", help="List images")
    _add_pagination(list_parser)
    list_parser.add_argument("--publication-id", help="Only images attached to this publication")
    list_parser.set_defaults(handler=commands.cmd_images_list)

    for name, handler, help_text in (
        ("get", commands.cmd_images_get, "Show an image"),
        ("delete", commands.cmd_images_delete, "Delete an image"),
    ):
        action = actions.add_parser(name, help=help_text)
        action.add_argument("id")
        action.set_defaults(handler=handler)

    upload = actions.add_parser("upload", help="Upload an image file")
    upload.add_argument("path")
    upload.add_argument("--publication-id", help="Attach the image to a publication")
    upload.set_defaults(handler=commands.cmd_images_upload)

    generate = actions.add_parser("generate", help="Generate an AI image")
    generate.add_argument("prompt")
    generate.add_argument("--style", default="realistic")
    generate.add_argument("--size", default="1024x1024")
    generate.set_defaults(handler=commands.cmd_images_generate)


def _add_company_commands(subparsers) -> None:
    company = subparsers.add_parser("company", help="Company profile")
    actions = company.add_subparsers(dest="action", required=True)

    actions.add_parser("get", help="Show the company profile").set_defaults(handler=commands.cmd_company_get)

    update = actions.add_parser("update", help="Update the company profile")
    update.add_argument("--data", type=json_object, required=True, help="Profile fields as JSON")
    update.set_defaults(handler=commands.cmd_company_update)

    parse = actions.add_parser("parse", help="Extract the profile from a website")
    parse.add_argument("url")
    parse.add_argument("--wait", action="store_true", help="Poll until parsing finishes")
    parse.set_defaults(handler=commands.cmd_company_parse)

    actions.add_parser("parsing-status", help="Show website parsing status").set_defaults(
        handler=commands.cmd_company_parsing_status
    )


def _add_readonly_group(subparsers, name: str, help_text: str, action_handlers) -> None:
    group = subparsers.add_parser(name, help=help_text)
    actions = group.add_subparsers(dest="action", required=True)
    for action_name, handler in action_handlers:
        actions.add_parser(action_name).set_defaults(handler=handler)


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="contentgem",
        description="Command-line client for the ContentGem content generation API",
        epilog="""
Examples:
  contentgem health
  contentgem generate "Write about AI in business" --keyword ai --wait
  contentgem publications list --page 1 --limit 5 --status published
  contentgem images upload ./cover.jpg --publication-id pub_123
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    ConfigLoader.add_schema_arguments(parser)
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging (DEBUG level)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("health", help="Check API liveness").set_defaults(handler=commands.cmd_health)
    subparsers.add_parser("smoke", help="Run read-only checks against the live API").set_defaults(
        handler=commands.cmd_smoke
    )

    generate = subparsers.add_parser("generate", help="Generate a publication from a prompt")
    generate.add_argument("prompt")
    _add_generation_settings(generate)
    generate.set_defaults(handler=commands.cmd_generate)

    status = subparsers.add_parser("generation-status", help="Check a generation session")
    status.add_argument("session_id")
    status.set_defaults(handler=commands.cmd_generation_status)

    wait = subparsers.add_parser("wait", help="Wait for one or more generation sessions")
    wait.add_argument("session_ids", nargs="+")
    wait.add_argument("--max-workers", type=int, default=4, help="Concurrent polling loops (default: 4)")
    wait.set_defaults(handler=commands.cmd_wait)

    bulk = subparsers.add_parser("bulk-generate", help="Generate one publication per prompt")
    bulk.add_argument("prompts", nargs="+")
    _add_generation_settings(bulk)
    bulk.set_defaults(handler=commands.cmd_bulk_generate)

    _add_publication_commands(subparsers)
    _add_image_commands(subparsers)
    _add_company_commands(subparsers)
    _add_readonly_group(subparsers, "subscription", "Subscription and plan details", (
        ("status", commands.cmd_subscription_status),
        ("limits", commands.cmd_subscription_limits),
        ("plans", commands.cmd_subscription_plans),
    ))
    _add_readonly_group(subparsers, "statistics", "Usage statistics", (
        ("overview", commands.cmd_statistics_overview),
        ("publications", commands.cmd_statistics_publications),
        ("images", commands.cmd_statistics_images),
    ))

    return parser
