"""
Requirement catalog registry.

Catalogs are assembled once at import. CATALOG_VERSION identifies the
regulatory text the tables reflect and is stamped onto every scored
assessment; bump it whenever a requirement is added, removed or changed.
"""
from typing import Dict, Iterable, List, Optional, Tuple

from ...models.domain import Jurisdiction, Requirement
from .eu_space_act import EU_SPACE_ACT_REQUIREMENTS
from .nis2 import NIS2_REQUIREMENTS
from .uk_sia import UK_SIA_REQUIREMENTS
from .us_regulations import US_REQUIREMENTS

CATALOG_VERSION = "2025.1"

CATALOGS: Dict[Jurisdiction, Tuple[Requirement, ...]] = {
    Jurisdiction.EU_SPACE_ACT: EU_SPACE_ACT_REQUIREMENTS,
    Jurisdiction.NIS2: NIS2_REQUIREMENTS,
    Jurisdiction.UK_SIA: UK_SIA_REQUIREMENTS,
    Jurisdiction.US: US_REQUIREMENTS,
}


def _build_index() -> Dict[str, Requirement]:
    index: Dict[str, Requirement] = {}
    for jurisdiction, requirements in CATALOGS.items():
        for req in requirements:
            if req.id in index:
                raise ValueError(f"Duplicate requirement id in catalog: {req.id}")
            if req.jurisdiction != jurisdiction:
                raise ValueError(
                    f"Requirement {req.id} is filed under {jurisdiction.value} "
                    f"but declares {req.jurisdiction.value}"
                )
            index[req.id] = req
    return index


_INDEX = _build_index()


def get_catalog(jurisdiction: Jurisdiction) -> List[Requirement]:
    return list(CATALOGS[jurisdiction])


def get_full_catalog(jurisdictions: Optional[Iterable[Jurisdiction]] = None) -> List[Requirement]:
    """
    Concatenate catalogs in the order given (default: every jurisdiction).

    Duplicate jurisdictions are only included once.
    """
    selected = list(jurisdictions) if jurisdictions is not None else list(CATALOGS)
    result: List[Requirement] = []
    seen = set()
    for jurisdiction in selected:
        if jurisdiction in seen:
            continue
        seen.add(jurisdiction)
        result.extend(CATALOGS[jurisdiction])
    return result


def get_requirement(requirement_id: str) -> Optional[Requirement]:
    return _INDEX.get(requirement_id)


def requirement_ids() -> List[str]:
    return list(_INDEX)
