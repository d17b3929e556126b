#!/usr/bin/env python3
"""
Company Models

This module contains the company profile shape and the website-parsing job
that extracts a profile from a company's site.
"""

from typing import TypedDict

from .common import Envelope, JsonObject
from .generation import CompanyInfo


class CompanyData(CompanyInfo, total=False):
    id: str
    createdAt: str
    updatedAt: str


class CompanyResponse(Envelope, total=False):
    data: CompanyData


class CompanyParsingRequest(TypedDict):
    website_url: str


class CompanyParsingStarted(TypedDict, total=False):
    status: str
    website_url: str
    sessionId: str


class CompanyParsingResponse(Envelope, total=False):
    data: CompanyParsingStarted


class _CompanyParsingStateBase(TypedDict):
    status: str  # idle | parsing | completed | failed


class CompanyParsingState(_CompanyParsingStateBase, total=False):
    progress: int
    website_url: str
    extractedData: JsonObject
    error: str
    updatedAt: str


class CompanyParsingStatus(Envelope, total=False):
    data: CompanyParsingState
