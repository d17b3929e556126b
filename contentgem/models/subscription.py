#!/usr/bin/env python3
"""
Subscription Models

This module contains data structures for plans, the caller's current
subscription and the rate/plan limits attached to it.
"""

from typing import List, TypedDict

from .common import Envelope, Feature, JsonValue
from .publication import UserLimits


class Subscription(TypedDict, total=False):
    planName: str
    planSlug: str
    price: float
    currency: str
    interval: str
    postsPerMonth: int
    postsUsed: int
    postsRemaining: int
    status: str
    currentPeriodStart: str
    currentPeriodEnd: str
    cancelAtPeriodEnd: bool
    features: List[Feature]


class SubscriptionData(TypedDict):
    subscription: Subscription


class SubscriptionStatus(Envelope, total=False):
    data: SubscriptionData


class Plan(TypedDict, total=False):
    _id: str
    name: str
    slug: str
    description: str
    price: float
    currency: str
    interval: str
    postsPerMonth: int
    features: List[Feature]
    isActive: bool
    isPopular: bool
    sortOrder: int
    version: int
    stripePriceId: str
    stripeProductId: str


class PlansResponse(Envelope, total=False):
    data: List[Plan]


class SubscriptionLimit(TypedDict, total=False):
    name: str
    slug: str
    postsPerMonth: int
    price: float
    currency: str
    interval: str
    hasApiAccess: bool
    features: List[Feature]


class ApiLimits(TypedDict, total=False):
    rateLimits: JsonValue
    subscriptionLimits: List[SubscriptionLimit]
    userLimits: UserLimits


class ApiLimitsResponse(Envelope, total=False):
    data: ApiLimits
