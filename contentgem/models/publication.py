#!/usr/bin/env python3
"""
Publication Models

This module contains data structures for publications and the paginated
listing returned by the publications endpoints.
"""

from typing import List, TypedDict

from .common import Envelope, JsonValue, Pagination


class _PublicationBase(TypedDict):
    id: str
    title: str
    content: str
    type: str  # blog | review
    status: str  # draft | published | archived
    contentLength: int
    imagesCount: int
    createdAt: str
    updatedAt: str


class Publication(_PublicationBase, total=False):
    metaTitle: str
    metaDescription: str
    companyName: str
    companyDescription: str
    companyIndustry: str
    companyTargetAudience: str
    topic: str
    structure: JsonValue
    images: List[JsonValue]
    qualityScore: float
    generationTimeSeconds: float
    sessionId: str
    initialPrompt: str
    generatedBy: str  # web | api
    publishedAt: str


class _PublicationStatsBase(TypedDict):
    total: int
    published: int
    draft: int
    archived: int
    thisMonth: int


class PublicationStats(_PublicationStatsBase, total=False):
    averageQualityScore: float
    totalContentLength: int


class UserLimits(TypedDict, total=False):
    postsUsed: int
    postsRemaining: int
    planName: str
    planSlug: str
    postsPerMonth: int
    features: List[JsonValue]


class PublicationsPage(TypedDict, total=False):
    publications: List[Publication]
    pagination: Pagination
    stats: PublicationStats
    userLimits: UserLimits


class PublicationsResponse(Envelope, total=False):
    data: PublicationsPage


class PublicationData(TypedDict):
    publication: Publication


class PublicationResponse(Envelope, total=False):
    data: PublicationData


class DownloadData(TypedDict):
    url: str


class DownloadResponse(Envelope, total=False):
    data: DownloadData
