#!/usr/bin/env python3
"""
Generation Models

This module contains request and response shapes for single and bulk
publication generation, including the status snapshots polled while a
generation job runs.
"""

from typing import List, TypedDict

from .common import Envelope, JsonValue


class ContentPreferences(TypedDict, total=False):
    length: str  # short | medium | long
    style: str  # educational | conversational | professional | casual
    include_examples: bool
    include_statistics: bool
    include_images: bool
    include_custom_templates: bool


class CompanyInfo(TypedDict, total=False):
    name: str
    description: str
    industry: str
    target_audience: str
    content_preferences: ContentPreferences
    tone: str  # professional | casual | friendly | formal
    services: List[str]
    expertise: List[str]
    values: List[str]
    mission: str
    vision: str
    website: str
    socialMedia: dict


class _GenerationRequestBase(TypedDict):
    prompt: str


class GenerationRequest(_GenerationRequestBase, total=False):
    company_info: CompanyInfo
    keywords: List[str]


class GenerationStarted(TypedDict):
    publicationId: str
    sessionId: str
    status: str


class GenerationResponse(Envelope, total=False):
    data: GenerationStarted


class _GenerationStatusDataBase(TypedDict):
    publicationId: str
    sessionId: str
    status: str  # generating | in_progress | completed | failed


class GenerationStatusData(_GenerationStatusDataBase, total=False):
    stepName: str
    content: str
    blogTopic: str
    metadata: JsonValue
    timestamp: str


class GenerationStatus(Envelope, total=False):
    data: GenerationStatusData


class BulkSettings(TypedDict, total=False):
    company_info: CompanyInfo
    keywords: List[str]


class _BulkGenerationRequestBase(TypedDict):
    prompts: List[str]


class BulkGenerationRequest(_BulkGenerationRequestBase, total=False):
    settings: BulkSettings


class BulkPublicationHandle(TypedDict):
    id: str
    sessionId: str


class BulkGenerationStarted(TypedDict):
    totalPrompts: int
    successCount: int
    errorCount: int
    publications: List[BulkPublicationHandle]


class BulkGenerationResponse(Envelope, total=False):
    data: BulkGenerationStarted


class BulkStatusRequest(TypedDict):
    publicationIds: List[str]


class _PublicationStatusBase(TypedDict):
    id: str
    status: str
    created_at: str


class PublicationStatus(_PublicationStatusBase, total=False):
    sessionId: str
    stepName: str
    title: str
    topic: str
    content: str
    metadata: JsonValue


class _BulkStatusDataBase(TypedDict):
    publicationStatuses: List[PublicationStatus]
    totalChecked: int
    completedCount: int
    failedCount: int
    inProgressCount: int
    createdCount: int


class BulkStatusData(_BulkStatusDataBase, total=False):
    status: str


class BulkStatusResponse(Envelope, total=False):
    data: BulkStatusData
