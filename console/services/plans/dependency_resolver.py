# console/services/plans/dependency_resolver.py

from typing import FrozenSet, List

from .catalog import Catalog, ConfigSnapshot, PlatformFeature


def _dependency_met(dependency_id: str, catalog: Catalog, snapshot: ConfigSnapshot) -> bool:
    dependency = catalog.get(dependency_id)
    if dependency is None:
        return False
    return snapshot.is_enabled(dependency.config_key)


def unmet_dependencies(feature: PlatformFeature, catalog: Catalog, snapshot: ConfigSnapshot) -> List[str]:
    """
    Direct dependencies of `feature` that are missing from the catalog or
    globally disabled. Only the first hop is inspected.
    """
    return [
        dependency_id
        for dependency_id in feature.depends_on
        if not _dependency_met(dependency_id, catalog, snapshot)
    ]


def is_assignable(feature: PlatformFeature, catalog: Catalog, snapshot: ConfigSnapshot) -> bool:
    if not snapshot.is_enabled(feature.config_key):
        return False
    return not unmet_dependencies(feature, catalog, snapshot)


def resolve_assignable(catalog: Catalog, snapshot: ConfigSnapshot) -> FrozenSet[PlatformFeature]:
    """
    Features an admin may configure on a plan right now.

    A feature qualifies when its own flag is not explicitly False and every
    direct dependency is present in the catalog with its flag not explicitly
    False. A missing flag counts as enabled; a missing dependency fails closed.
    """
    return frozenset(
        feature for feature in catalog if is_assignable(feature, catalog, snapshot)
    )
