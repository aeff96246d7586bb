"""Python client and test data for the storefront fixture API."""

from .factory import FIXTURE_PASSWORD, TestDataFactory
from .storefront import StoreApiError, StoreClient

__all__ = ["FIXTURE_PASSWORD", "StoreApiError", "StoreClient", "TestDataFactory"]
