#!/usr/bin/env python3
"""
Common API Models

This module contains the response envelope shared by every endpoint and the
structural helpers reused across resource models.
"""

from typing import Any, Dict, List, TypedDict, Union


# Free-form JSON payloads (metadata, structure, plan features) are kept as-is
JsonValue = Union[None, bool, int, float, str, List[Any], Dict[str, Any]]
JsonObject = Dict[str, JsonValue]


class _EnvelopeBase(TypedDict):
    success: bool


class Envelope(_EnvelopeBase, total=False):
    """
    Uniform wrapper returned by every API endpoint.

    A ``success: False`` envelope is a normal result, not an exception;
    callers inspect ``success`` themselves.
    """

    message: str
    error: str


class DeleteResponse(Envelope, total=False):
    pass


class Pagination(TypedDict):
    currentPage: int
    totalPages: int
    totalItems: int
    itemsPerPage: int


class Feature(TypedDict):
    name: str
    description: str
    included: bool


class HealthResponse(Envelope, total=False):
    timestamp: str
    version: str
    user: JsonValue
    limits: JsonValue
    data: JsonObject


def is_success(envelope: Any) -> bool:
    """Return True when ``envelope`` is a mapping carrying ``success: true``."""
    return isinstance(envelope, dict) and envelope.get("success") is True
