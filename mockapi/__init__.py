"""In-memory storefront fixture API used as a stand-in backend for e2e tests."""

__version__ = "1.0.0"
