#!/usr/bin/env python3
"""
Data Models Module

This module contains all data structures and type definitions used
throughout the ContentGem client.
"""

from .common import (
    JsonValue,
    JsonObject,
    Envelope,
    DeleteResponse,
    HealthResponse,
    Pagination,
    Feature,
    is_success,
)
from .config import ClientConfig
from .generation import (
    CompanyInfo,
    ContentPreferences,
    GenerationRequest,
    GenerationResponse,
    GenerationStatus,
    BulkGenerationRequest,
    BulkGenerationResponse,
    BulkStatusRequest,
    BulkStatusResponse,
)
from .publication import (
    Publication,
    PublicationsResponse,
    PublicationResponse,
    DownloadResponse,
)
from .image import Image, ImagesResponse, ImageResponse
from .company import (
    CompanyData,
    CompanyResponse,
    CompanyParsingRequest,
    CompanyParsingResponse,
    CompanyParsingStatus,
)
from .subscription import (
    SubscriptionStatus,
    Plan,
    PlansResponse,
    ApiLimitsResponse,
)
from .statistics import StatisticsOverview, StatisticsResponse
from .polling import JobState, BulkProgress
from .stats import SmokeCheckResult, SmokeStats

__all__ = [
    "JsonValue",
    "JsonObject",
    "Envelope",
    "DeleteResponse",
    "HealthResponse",
    "Pagination",
    "Feature",
    "is_success",
    "ClientConfig",
    "CompanyInfo",
    "ContentPreferences",
    "GenerationRequest",
    "GenerationResponse",
    "GenerationStatus",
    "BulkGenerationRequest",
    "BulkGenerationResponse",
    "BulkStatusRequest",
    "BulkStatusResponse",
    "Publication",
    "PublicationsResponse",
    "PublicationResponse",
    "DownloadResponse",
    "Image",
    "ImagesResponse",
    "ImageResponse",
    "CompanyData",
    "CompanyResponse",
    "CompanyParsingRequest",
    "CompanyParsingResponse",
    "CompanyParsingStatus",
    "SubscriptionStatus",
    "Plan",
    "PlansResponse",
    "ApiLimitsResponse",
    "StatisticsOverview",
    "StatisticsResponse",
    "JobState",
    "BulkProgress",
    "SmokeCheckResult",
    "SmokeStats",
]
