"""
Requirement Catalog

Static per-jurisdiction requirement tables and cross-framework mappings.
Loaded at process start, never reloaded.
"""

from .registry import (
    CATALOG_VERSION,
    CATALOGS,
    get_catalog,
    get_full_catalog,
    get_requirement,
    requirement_ids,
)
from .crosswalk_map import (
    CROSSWALK_TABLES,
    NIS2_EU_SPACE_ACT_MAPPING,
    UK_EU_SPACE_ACT_MAPPING,
    US_EU_SPACE_ACT_MAPPING,
    get_mapping,
)

__all__ = [
    'CATALOG_VERSION',
    'CATALOGS',
    'get_catalog',
    'get_full_catalog',
    'get_requirement',
    'requirement_ids',
    'CROSSWALK_TABLES',
    'NIS2_EU_SPACE_ACT_MAPPING',
    'UK_EU_SPACE_ACT_MAPPING',
    'US_EU_SPACE_ACT_MAPPING',
    'get_mapping',
]
