# console/services/plans/catalog.py
"""
Immutable snapshots of the platform feature catalog and the global feature
flags, plus the value types stored in a plan's features/limits maps.

A feature's storage location is resolved once, when the catalog document is
loaded, into a slot:

  ToggleSlot(plan_key)              -> plan["features"][plan_key] = bool
  LimitSlot(plan_key, toggleable)   -> plan["limits"][plan_key]   = Limit (or bool if toggleable)
  None                              -> informational feature, never written to a plan
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union

from ...constants.service_code import UNLIMITED_SENTINEL

PLAN_TYPE_BOOLEAN = "boolean"
PLAN_TYPE_NUMBER = "number"


# -------------------------------------------------------------------
# Limit values
# -------------------------------------------------------------------

class Limit(ABC):
    """Base type for a usage limit: either Finite(n) or UNLIMITED."""

    @staticmethod
    def parse(raw: Any) -> "Limit":
        """
        Convert a payload/document value into a Limit.
        Accepts non-negative ints, digit strings and the "unlimited" sentinel.
        """
        if isinstance(raw, Limit):
            return raw
        if isinstance(raw, bool):
            raise ValueError("A limit must be a number or 'unlimited', not a boolean")
        if isinstance(raw, int):
            return Finite(raw)
        if isinstance(raw, float) and raw.is_integer():
            return Finite(int(raw))
        if isinstance(raw, str):
            value = raw.strip().lower()
            if value == UNLIMITED_SENTINEL:
                return UNLIMITED
            if value.isdigit():
                return Finite(int(value))
        raise ValueError(f"Invalid limit value: {raw!r}")

    @abstractmethod
    def to_document(self) -> Union[int, str]:
        """Store form: the int for Finite, the sentinel string for UNLIMITED."""


@dataclass(frozen=True)
class Finite(Limit):
    value: int

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError("Finite limit must be an int")
        if self.value < 0:
            raise ValueError("Finite limit must be >= 0")

    def to_document(self) -> int:
        return self.value


@dataclass(frozen=True)
class _Unlimited(Limit):

    def to_document(self) -> str:
        return UNLIMITED_SENTINEL

    def __repr__(self):
        return "UNLIMITED"


UNLIMITED = _Unlimited()


# -------------------------------------------------------------------
# Slots
# -------------------------------------------------------------------

@dataclass(frozen=True)
class ToggleSlot:
    plan_key: str
    map_name = "features"


@dataclass(frozen=True)
class LimitSlot:
    plan_key: str
    toggleable: bool = False
    map_name = "limits"


FeatureSlot = Union[ToggleSlot, LimitSlot]


def resolve_slot(plan_key: Optional[str], plan_type: str, has_usage_limit: bool) -> Optional[FeatureSlot]:
    if not plan_key:
        return None
    if plan_type == PLAN_TYPE_NUMBER:
        return LimitSlot(plan_key)
    if has_usage_limit:
        return LimitSlot(plan_key, toggleable=True)
    return ToggleSlot(plan_key)


# -------------------------------------------------------------------
# Catalog entries
# -------------------------------------------------------------------

def _text(value: Any, default: Any = "") -> Any:
    if isinstance(value, str):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return default


def _dependency_ids(value: Any) -> Tuple[str, ...]:
    if value is None:
        return ()
    if not isinstance(value, (list, tuple)) or not all(isinstance(v, str) for v in value):
        raise ValueError(f"dependsOn must be a list of feature ids, got {value!r}")
    return tuple(value)


@dataclass(frozen=True)
class PlatformFeature:
    feature_id: str
    config_key: str
    category: str
    plan_type: str = PLAN_TYPE_BOOLEAN
    plan_key: Optional[str] = None
    depends_on: Tuple[str, ...] = ()
    has_usage_limit: bool = False
    default_limit: Optional[Limit] = None
    usage_limit_unit: Optional[str] = None
    display_order: int = 0
    name: str = ""
    display_name: str = ""
    description: str = ""
    tier: Optional[str] = None
    slot: Optional[FeatureSlot] = field(default=None, compare=False)

    def __post_init__(self):
        if self.slot is None:
            object.__setattr__(
                self, "slot", resolve_slot(self.plan_key, self.plan_type, self.has_usage_limit)
            )

    @property
    def is_assignable_to_plan(self) -> bool:
        return self.slot is not None

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "PlatformFeature":
        """
        Build a catalog entry from a platformFeatures document. Text fields of
        the wrong type are blanked; a dependsOn that is not a list of feature
        ids raises ValueError.
        """
        plan_type = doc.get("planType") or PLAN_TYPE_BOOLEAN
        if plan_type not in (PLAN_TYPE_BOOLEAN, PLAN_TYPE_NUMBER):
            plan_type = PLAN_TYPE_BOOLEAN

        default_limit = None
        if doc.get("defaultLimit") is not None:
            try:
                default_limit = Limit.parse(doc["defaultLimit"])
            except (TypeError, ValueError):
                default_limit = None

        try:
            display_order = int(doc.get("displayOrder") or 0)
        except (TypeError, ValueError, OverflowError):
            display_order = 0

        return cls(
            feature_id=str(doc["featureId"]),
            config_key=_text(doc.get("configKey")),
            category=_text(doc.get("category")),
            plan_type=plan_type,
            plan_key=_text(doc.get("planKey"), None) or None,
            depends_on=_dependency_ids(doc.get("dependsOn")),
            has_usage_limit=bool(doc.get("hasUsageLimit", False)),
            default_limit=default_limit,
            usage_limit_unit=_text(doc.get("usageLimitUnit"), None),
            display_order=display_order,
            name=_text(doc.get("name")),
            display_name=_text(doc.get("displayName")) or _text(doc.get("name")),
            description=_text(doc.get("description")),
            tier=_text(doc.get("tier"), None),
        )

    def to_summary(self) -> Dict[str, Any]:
        """JSON shape used by the feature-catalog endpoint."""
        if isinstance(self.slot, ToggleSlot):
            control = "toggle"
        elif isinstance(self.slot, LimitSlot):
            control = "toggle_with_limit" if self.slot.toggleable else "limit"
        else:
            control = "info"

        return {
            "featureId": self.feature_id,
            "displayName": self.display_name,
            "description": self.description,
            "category": self.category,
            "configKey": self.config_key,
            "planKey": self.plan_key,
            "planType": self.plan_type,
            "control": control,
            "dependsOn": list(self.depends_on),
            "hasUsageLimit": self.has_usage_limit,
            "defaultLimit": self.default_limit.to_document() if self.default_limit else None,
            "usageLimitUnit": self.usage_limit_unit,
            "displayOrder": self.display_order,
        }


# -------------------------------------------------------------------
# Snapshots
# -------------------------------------------------------------------

class Catalog:
    """Active platform features keyed by featureId. Read-only."""

    def __init__(self, features: Iterable[PlatformFeature] = ()):
        by_id: Dict[str, PlatformFeature] = {}
        for feature in features:
            by_id[feature.feature_id] = feature
        self._by_id = MappingProxyType(by_id)

    def __iter__(self):
        return iter(self._by_id.values())

    def __len__(self):
        return len(self._by_id)

    def __contains__(self, feature_id):
        return feature_id in self._by_id

    def get(self, feature_id: str) -> Optional[PlatformFeature]:
        return self._by_id.get(feature_id)

    @classmethod
    def empty(cls) -> "Catalog":
        return cls(())


class ConfigSnapshot:
    """Global feature flags (configKey -> bool) as loaded for one session."""

    def __init__(self, flags: Optional[Mapping[str, Any]] = None):
        self._flags = MappingProxyType(dict(flags or {}))

    @property
    def flags(self) -> Mapping[str, Any]:
        return self._flags

    def is_enabled(self, config_key: str) -> bool:
        # Only an explicit False disables a feature
        return self._flags.get(config_key) is not False

    @classmethod
    def empty(cls) -> "ConfigSnapshot":
        return cls({})
