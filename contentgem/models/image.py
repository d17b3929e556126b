#!/usr/bin/env python3
"""
Image Models

This module contains data structures for stored and AI-generated images.
"""

from typing import List, TypedDict

from .common import Envelope, Pagination


class Dimensions(TypedDict):
    width: int
    height: int


class _ImageBase(TypedDict):
    id: str
    filename: str
    originalName: str
    mimeType: str
    size: int
    url: str
    createdAt: str


class Image(_ImageBase, total=False):
    publicUrl: str
    prompt: str
    sectionTitle: str
    tags: List[str]
    publicationId: str
    sessionId: str
    fileSize: int
    dimensions: Dimensions
    isMainImage: bool


class ImageStats(TypedDict):
    totalImages: int
    totalSize: int
    averageSize: float


class ImagesPage(TypedDict, total=False):
    images: List[Image]
    pagination: Pagination
    stats: ImageStats


class ImagesResponse(Envelope, total=False):
    data: ImagesPage


class ImageData(TypedDict):
    image: Image


class ImageResponse(Envelope, total=False):
    data: ImageData
