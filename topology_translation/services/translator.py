"""
Topology Translation
Rewrites a persistent volume between the plugin topology key and the cluster
zone/region keys, and translates storage-class allowed topologies.

Every function works on the caller's record in place and keeps no reference
to it afterwards. Errors are raised before the sub-structure they guard is
changed; earlier steps of the same call are not rolled back.
"""

import logging
from typing import List, Optional, Union

from topology_translation.errors import UnsupportedKeyError
from topology_translation.keys import (
    LABEL_FAILURE_DOMAIN_BETA_REGION,
    LABEL_TOPOLOGY_REGION,
    ZONE_KEYS,
)
from topology_translation.models import (
    PersistentVolume,
    StorageClass,
    TopologySelectorLabelRequirement,
    TopologySelectorTerm,
)
from topology_translation.services.affinity import add_topology, remove_topology, replace_topology
from topology_translation.services.extractor import (
    get_label_values,
    get_topology_label,
    get_topology_values,
    topology_key_exists,
)
from topology_translation.services.labels import sync_region_label, sync_zone_label
from topology_translation.services.region import RegionDeriver, RegionParserFn, as_region_deriver

logger = logging.getLogger(__name__)

# ============================================================================
# PLUGIN -> CLUSTER
# ============================================================================

def translate_topology_from_csi_to_in_tree(
    pv: PersistentVolume,
    csi_topology_key: str,
    region_parser: Union[None, RegionParserFn, RegionDeriver] = None,
) -> PersistentVolume:
    """
    Replace the plugin topology key with the cluster zone (and region) keys.

    Steps:
    1. Pick the GA or beta key pair already used by the volume
    2. Remove the plugin key from node affinity, keeping its zones
    3. Add a zone requirement unless one exists (plugin zones, else zone label)
    4. Set the zone label if missing
    5. With a region parser: add a region requirement unless one exists and
       set the region label if missing

    Multiple single-zone plugin terms collapse into one term with one
    multi-valued zone requirement.

    Args:
        pv: Volume to rewrite in place
        csi_topology_key: Plugin topology key, e.g. GCE_PD_TOPOLOGY_KEY
        region_parser: zone -> region function, RegionDeriver, or None to
            skip region handling

    Returns:
        The same volume
    """
    deriver = as_region_deriver(region_parser)
    zone_key, region_key = get_topology_label(pv)

    zones = get_topology_values(pv, csi_topology_key)
    remove_topology(pv, csi_topology_key)

    zones_from_labels = False
    if not topology_key_exists(zone_key, pv.spec.node_affinity):
        if not zones:
            zones = get_label_values(pv.labels, zone_key)
            zones_from_labels = True
        if zones:
            add_topology(pv, zone_key, zones)

    sync_zone_label(pv, zone_key)

    if not deriver.enabled:
        logger.debug(f"No region parser for {pv.metadata.name or 'volume'}, skipping region topology")
        return pv

    zone_values = get_topology_values(pv, zone_key)
    if not zone_values:
        return pv

    if not topology_key_exists(region_key, pv.spec.node_affinity):
        regions = []
        if zones_from_labels:
            regions = get_label_values(pv.labels, region_key)
        if not regions:
            regions = deriver.derive(zone_values)
        if regions:
            add_topology(pv, region_key, regions)

    sync_region_label(pv, region_key)
    return pv

# ============================================================================
# CLUSTER -> PLUGIN
# ============================================================================

def translate_topology_from_in_tree_to_csi(pv: PersistentVolume, csi_topology_key: str) -> PersistentVolume:
    """
    Replace the cluster zone key (GA or beta) with the plugin topology key.

    Zone requirements in node affinity take precedence over the zone label.
    A beta region requirement is renamed to the GA region key so the volume
    still schedules on nodes that only carry GA labels. Labels are not
    changed.
    """
    zone_key, region_key = get_topology_label(pv)

    if get_topology_values(pv, zone_key):
        replace_topology(pv, zone_key, csi_topology_key)
    else:
        zones = get_label_values(pv.labels, zone_key)
        if zones:
            add_topology(pv, csi_topology_key, zones)

    if region_key == LABEL_FAILURE_DOMAIN_BETA_REGION:
        replace_topology(pv, region_key, LABEL_TOPOLOGY_REGION)

    return pv

# ============================================================================
# ALLOWED TOPOLOGIES
# ============================================================================

def translate_allowed_topologies(
    terms: Optional[List[TopologySelectorTerm]], key: str
) -> Optional[List[TopologySelectorTerm]]:
    """
    Rekey cluster zone requirements of allowed topologies to `key`.

    Returns new terms; the input is not modified. Requirements already using
    `key` are kept as they are.

    Raises:
        UnsupportedKeyError: a requirement uses any other key
    """
    if terms is None:
        return None

    translated = []
    for term in terms:
        expressions = []
        for expression in term.match_label_expressions:
            if expression.key not in ZONE_KEYS and expression.key != key:
                logger.warning(f"Cannot translate allowed topology key {expression.key}")
                raise UnsupportedKeyError(expression.key)
            expressions.append(
                TopologySelectorLabelRequirement(key=key, values=list(expression.values))
            )
        translated.append(TopologySelectorTerm(match_label_expressions=expressions))
    return translated


def translate_storage_class_topologies(sc: StorageClass, key: str) -> StorageClass:
    """Translate a storage class's allowed topologies in place."""
    sc.allowed_topologies = translate_allowed_topologies(sc.allowed_topologies, key)
    return sc


def generate_topology_selectors(key: str, values: List[str]) -> List[TopologySelectorTerm]:
    return [
        TopologySelectorTerm(
            match_label_expressions=[TopologySelectorLabelRequirement(key=key, values=list(values))]
        )
    ]
