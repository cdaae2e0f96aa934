# console/services/plans/catalog_loader.py

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Optional, Tuple

from flask import current_app, has_app_context
from pymongo.errors import PyMongoError

from ...constants.service_code import DEFAULT_SYSTEM_CONFIG_ID
from ...models.platform_feature_model import PlatformFeatureModel
from ...models.system_config_model import SystemConfigModel
from ...utils.logger import Log
from .catalog import Catalog, ConfigSnapshot, PlatformFeature


class LoadError(Exception):
    """The feature catalog or the system config could not be fetched."""


@dataclass(frozen=True)
class CatalogLoad:
    catalog: Catalog
    snapshot: ConfigSnapshot
    available: bool = True
    error: Optional[str] = None


def _default_config_id() -> str:
    if has_app_context():
        return current_app.config.get("SYSTEM_CONFIG_ID", DEFAULT_SYSTEM_CONFIG_ID)
    return DEFAULT_SYSTEM_CONFIG_ID


def _fetch_features() -> Catalog:
    log_tag = "[catalog_loader.py][_fetch_features]"
    features = []
    for doc in PlatformFeatureModel.get_all_active():
        if not doc.get("featureId"):
            Log.warning(f"{log_tag} skipping feature document without featureId: {doc.get('_id')}")
            continue
        try:
            features.append(PlatformFeature.from_document(doc))
        except (TypeError, ValueError) as e:
            Log.warning(f"{log_tag} skipping malformed feature document {doc.get('featureId')}: {e}")
    return Catalog(features)


def _fetch_flags(config_id: str) -> ConfigSnapshot:
    return ConfigSnapshot(SystemConfigModel.get_feature_flags(config_id))


def load_catalog(config_id: Optional[str] = None, max_workers: int = 2) -> Tuple[Catalog, ConfigSnapshot]:
    """
    Fetch the active feature catalog and the global feature flags.
    Both fetches run concurrently; the call returns once both are done.

    Raises LoadError when either fetch fails.
    """
    config_id = config_id or _default_config_id()
    log_tag = f"[catalog_loader.py][load_catalog][{config_id}]"

    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        features_future = pool.submit(_fetch_features)
        flags_future = pool.submit(_fetch_flags, config_id)

        try:
            catalog = features_future.result()
            snapshot = flags_future.result()
        except (PyMongoError, RuntimeError) as e:
            Log.error(f"{log_tag} catalog load failed: {e}")
            raise LoadError(f"Feature catalog unavailable: {e}") from e

    Log.info(f"{log_tag} loaded {len(catalog)} active features, {len(snapshot.flags)} flags")
    return catalog, snapshot


def load_catalog_or_empty(config_id: Optional[str] = None, max_workers: int = 2) -> CatalogLoad:
    """
    Same as load_catalog() but never raises: on LoadError the editing surface
    gets an empty catalog and `available=False`.
    """
    try:
        catalog, snapshot = load_catalog(config_id, max_workers=max_workers)
    except LoadError as e:
        Log.warning(f"[catalog_loader.py][load_catalog_or_empty] degraded to empty catalog: {e}")
        return CatalogLoad(Catalog.empty(), ConfigSnapshot.empty(), available=False, error=str(e))

    return CatalogLoad(catalog, snapshot)
