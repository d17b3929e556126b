"""
Subscription operations module.

This module maps the subscription endpoints onto client methods. All of
them are read-only GET requests.
"""

from ..models import ApiLimitsResponse, PlansResponse, SubscriptionStatus


class SubscriptionOperations:
    """Plan, subscription and limit introspection."""

    def get_subscription_status(self) -> SubscriptionStatus:
        return self._transport.request("GET", "/subscription/status")

    def get_subscription_limits(self) -> ApiLimitsResponse:
        return self._transport.request("GET", "/subscription/limits")

    def get_subscription_plans(self) -> PlansResponse:
        return self._transport.request("GET", "/subscription/plans")
