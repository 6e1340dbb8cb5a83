from .organisation import organisation_service
from .search import search_service

__all__ = ["organisation_service", "search_service"]
