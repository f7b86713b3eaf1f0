"""Record builders shared by the test modules."""

from topology_translation.keys import (
    LABEL_FAILURE_DOMAIN_BETA_REGION,
    LABEL_FAILURE_DOMAIN_BETA_ZONE,
    LABEL_TOPOLOGY_REGION,
    LABEL_TOPOLOGY_ZONE,
)
from topology_translation.models import (
    NodeSelector,
    NodeSelectorRequirement,
    NodeSelectorTerm,
    ObjectMeta,
    PersistentVolume,
    PersistentVolumeSpec,
    VolumeNodeAffinity,
)


def req(key, *values):
    return NodeSelectorRequirement(key=key, operator="In", values=list(values))


def term(*requirements):
    return NodeSelectorTerm(match_expressions=list(requirements))


def make_pv(terms=None, labels=None, name="gcepd"):
    spec = PersistentVolumeSpec()
    if terms is not None:
        spec = PersistentVolumeSpec(
            node_affinity=VolumeNodeAffinity(required=NodeSelector(node_selector_terms=list(terms)))
        )
    return PersistentVolume(
        metadata=ObjectMeta(name=name, namespace="myns", labels=dict(labels or {})),
        spec=spec,
    )


def useast1a_ga_labels():
    return {LABEL_TOPOLOGY_ZONE: "us-east1-a", LABEL_TOPOLOGY_REGION: "us-east1"}


def useast1a_ga_terms():
    return [term(req(LABEL_TOPOLOGY_ZONE, "us-east1-a"), req(LABEL_TOPOLOGY_REGION, "us-east1"))]


def uswest2b_beta_labels():
    return {LABEL_FAILURE_DOMAIN_BETA_ZONE: "us-west2-b", LABEL_FAILURE_DOMAIN_BETA_REGION: "us-west2"}


def uswest2b_beta_terms():
    return [
        term(req(LABEL_FAILURE_DOMAIN_BETA_ZONE, "us-west2-b"), req(LABEL_FAILURE_DOMAIN_BETA_REGION, "us-west2"))
    ]
