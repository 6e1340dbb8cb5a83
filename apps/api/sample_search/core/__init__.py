"""Core configuration, constants, and shared infrastructure."""

from sample_search.core.config import Settings, get_settings
from sample_search.core.constants import (
    PAGE_SIZE,
    EXTENDED_FIELDS_ORG_NAME,
    SAMPLE_RESOURCE_TYPE,
    PROFILE_RESOURCE_TYPE,
    ORGANISATION_RESOURCE_TYPE,
)
from sample_search.core.limiter import limiter

__all__ = [
    "Settings",
    "get_settings",
    "PAGE_SIZE",
    "EXTENDED_FIELDS_ORG_NAME",
    "SAMPLE_RESOURCE_TYPE",
    "PROFILE_RESOURCE_TYPE",
    "ORGANISATION_RESOURCE_TYPE",
    "limiter",
]
