"""
Topology value extraction.

Reads topology values for a key from a volume's node affinity or from its
label map. Nothing here mutates the record.
"""

from typing import Dict, List, Optional, Tuple

from topology_translation.keys import (
    LABEL_FAILURE_DOMAIN_BETA_REGION,
    LABEL_FAILURE_DOMAIN_BETA_ZONE,
    LABEL_MULTI_ZONE_DELIMITER,
    LABEL_TOPOLOGY_REGION,
    LABEL_TOPOLOGY_ZONE,
)
from topology_translation.models import PersistentVolume, VolumeNodeAffinity


def get_topology_values(pv: PersistentVolume, key: str) -> List[str]:
    """
    Collect every value constrained under `key` across all terms.

    Terms are OR-combined, so values from different terms are unioned.
    The result is de-duplicated and sorted; an empty list means the key is
    absent from the affinity.
    """
    terms = pv.node_selector_terms()
    if not terms:
        return []

    values = set()
    for term in terms:
        for requirement in term.match_expressions:
            if requirement.key == key:
                values.update(requirement.values)
    return sorted(values)


def topology_key_exists(key: str, node_affinity: Optional[VolumeNodeAffinity]) -> bool:
    if node_affinity is None or node_affinity.required is None:
        return False

    for term in node_affinity.required.node_selector_terms:
        for requirement in term.match_expressions:
            if requirement.key == key:
                return True
    return False


def get_label_values(labels: Optional[Dict[str, str]], key: str) -> List[str]:
    """Split a (possibly multi-zone) label value into its parts."""
    if not labels or key not in labels:
        return []
    parts = labels[key].split(LABEL_MULTI_ZONE_DELIMITER)
    return [part.strip() for part in parts if part.strip()]


def get_topology_label(pv: PersistentVolume) -> Tuple[str, str]:
    """
    Pick the zone/region key pair the volume already uses.

    Order:
    1. GA zone key in node affinity
    2. Beta zone key in node affinity
    3. GA zone label
    4. Beta zone label
    Defaults to the GA pair when nothing is set.
    """
    affinity = pv.spec.node_affinity
    if topology_key_exists(LABEL_TOPOLOGY_ZONE, affinity):
        return LABEL_TOPOLOGY_ZONE, LABEL_TOPOLOGY_REGION
    if topology_key_exists(LABEL_FAILURE_DOMAIN_BETA_ZONE, affinity):
        return LABEL_FAILURE_DOMAIN_BETA_ZONE, LABEL_FAILURE_DOMAIN_BETA_REGION
    if LABEL_TOPOLOGY_ZONE in pv.labels:
        return LABEL_TOPOLOGY_ZONE, LABEL_TOPOLOGY_REGION
    if LABEL_FAILURE_DOMAIN_BETA_ZONE in pv.labels:
        return LABEL_FAILURE_DOMAIN_BETA_ZONE, LABEL_FAILURE_DOMAIN_BETA_REGION
    return LABEL_TOPOLOGY_ZONE, LABEL_TOPOLOGY_REGION
