"""Zone/region label synchronization."""

from topology_translation.keys import LABEL_TOPOLOGY_REGION, LABEL_TOPOLOGY_ZONE
from topology_translation.services.labels import sync_region_label, sync_zone_label

from builders import make_pv, req, term


def test_zone_label_joins_sorted_values():
    pv = make_pv([term(req(LABEL_TOPOLOGY_ZONE, "us-east1-c", "us-east1-a"))])
    assert sync_zone_label(pv, LABEL_TOPOLOGY_ZONE)
    assert pv.labels == {LABEL_TOPOLOGY_ZONE: "us-east1-a__us-east1-c"}


def test_existing_label_is_not_overwritten():
    pv = make_pv(
        [term(req(LABEL_TOPOLOGY_ZONE, "us-east1-a"), req(LABEL_TOPOLOGY_REGION, "us-east1"))],
        labels={LABEL_TOPOLOGY_ZONE: "existingZone", LABEL_TOPOLOGY_REGION: "existingRegion", "app": "db"},
    )
    assert not sync_zone_label(pv, LABEL_TOPOLOGY_ZONE)
    assert not sync_region_label(pv, LABEL_TOPOLOGY_REGION)
    assert pv.labels == {LABEL_TOPOLOGY_ZONE: "existingZone", LABEL_TOPOLOGY_REGION: "existingRegion", "app": "db"}


def test_no_affinity_value_leaves_labels_alone():
    pv = make_pv([term(req(LABEL_TOPOLOGY_ZONE, "us-east1-a"))], labels={"app": "db"})
    assert not sync_region_label(pv, LABEL_TOPOLOGY_REGION)
    assert pv.labels == {"app": "db"}


def test_region_label_added_next_to_unrelated_labels():
    pv = make_pv([term(req(LABEL_TOPOLOGY_REGION, "us-east1"))], labels={"app": "db"})
    assert sync_region_label(pv, LABEL_TOPOLOGY_REGION)
    assert pv.labels == {"app": "db", LABEL_TOPOLOGY_REGION: "us-east1"}
