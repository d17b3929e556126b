#!/usr/bin/env python3
"""
Statistics Models

This module contains usage statistics returned by the statistics endpoints.
"""

from typing import TypedDict

from .common import Envelope, JsonValue
from .image import ImageStats
from .publication import PublicationStats, UserLimits


class ApiKeyStats(TypedDict):
    totalKeys: int
    activeKeys: int
    totalRequests: int


class Overview(TypedDict, total=False):
    publications: PublicationStats
    images: ImageStats
    apiKeys: ApiKeyStats
    userLimits: UserLimits


class StatisticsOverview(Envelope, total=False):
    data: Overview


class StatisticsResponse(Envelope, total=False):
    data: JsonValue
