"""Service orchestrators."""

from .listing_service import ListingService

__all__ = ["ListingService"]
