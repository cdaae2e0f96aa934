# console/services/plans/category_grouper.py

from typing import Dict, Iterable, List

from .catalog import PlatformFeature

# Display order of the known categories follows this table
CATEGORY_LABELS = {
    "core_business": "Core Business Limits",
    "communication": "Communication Limits",
    "collaboration": "Collaboration",
    "advanced": "Advanced Features",
    "integration": "API & Integration",
    "customization": "Customization & Branding",
    "support": "Support Level",
}


def category_label(category: str) -> str:
    return CATEGORY_LABELS.get(category, category)


def _category_sort_key(category: str):
    known = list(CATEGORY_LABELS)
    if category in CATEGORY_LABELS:
        return (0, known.index(category), "")
    return (1, 0, category)


def group_by_category(features: Iterable[PlatformFeature]) -> Dict[str, List[PlatformFeature]]:
    """
    Partition features by category tag. Categories with no features are
    omitted; each list is ordered by (display_order, feature_id).
    """
    groups: Dict[str, List[PlatformFeature]] = {}
    for feature in features:
        groups.setdefault(feature.category, []).append(feature)

    return {
        category: sorted(groups[category], key=lambda f: (f.display_order, f.feature_id))
        for category in sorted(groups, key=_category_sort_key)
    }
