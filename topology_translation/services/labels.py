"""
Label synchronization.

Fills in the zone/region labels of a volume from its node affinity.
Labels that are already present are left as they are.
"""

import logging

from topology_translation.keys import LABEL_MULTI_ZONE_DELIMITER
from topology_translation.models import PersistentVolume
from topology_translation.services.extractor import get_topology_values

logger = logging.getLogger(__name__)


def _sync_label(pv: PersistentVolume, key: str) -> bool:
    if key in pv.labels:
        return False
    values = get_topology_values(pv, key)
    if not values:
        return False
    pv.labels[key] = LABEL_MULTI_ZONE_DELIMITER.join(values)
    logger.debug(f"Set label {key}={pv.labels[key]}")
    return True


def sync_zone_label(pv: PersistentVolume, zone_key: str) -> bool:
    """Set the zone label from node affinity if missing. Returns True if set."""
    return _sync_label(pv, zone_key)


def sync_region_label(pv: PersistentVolume, region_key: str) -> bool:
    """Set the region label from node affinity if missing. Returns True if set."""
    return _sync_label(pv, region_key)
