from __future__ import annotations

from typing import Dict, List, Optional

from ..base import ConnectorProperty, OverrideKeys
from .format import FALLBACK_ENTITIES, MetadataEntity

PROPERTY_PREFIX = "snowflake.metadata"

OVERRIDABLE_ENTITIES = FALLBACK_ENTITIES + (MetadataEntity.TABLE_STORAGE_METRICS,)

OVERRIDE_KEYS: Dict[MetadataEntity, OverrideKeys] = {
    entity: OverrideKeys.for_entity(PROPERTY_PREFIX, entity.value) for entity in OVERRIDABLE_ENTITIES
}


def override_keys(entity: MetadataEntity) -> Optional[OverrideKeys]:
    """Override settings for ``entity``; None for the non-overridable SHOW commands."""
    return OVERRIDE_KEYS.get(entity)


def connector_properties() -> List[ConnectorProperty]:
    return [prop for entity in OVERRIDABLE_ENTITIES for prop in OVERRIDE_KEYS[entity]]
