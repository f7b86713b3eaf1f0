"""
Topology key vocabulary.

Cluster-scheme keys (GA and beta) are used both as node-affinity requirement
keys and as persistent-volume label keys. Plugin keys are the single
vendor-specific topology key each storage backend publishes.
"""

# ============================================================================
# CLUSTER SCHEME
# ============================================================================

LABEL_TOPOLOGY_ZONE = "topology.kubernetes.io/zone"
LABEL_TOPOLOGY_REGION = "topology.kubernetes.io/region"

# Beta keys are accepted as input only; the plugin -> cluster path keeps them
# when already in use, the cluster -> plugin path normalizes them away.
LABEL_FAILURE_DOMAIN_BETA_ZONE = "failure-domain.beta.kubernetes.io/zone"
LABEL_FAILURE_DOMAIN_BETA_REGION = "failure-domain.beta.kubernetes.io/region"

ZONE_KEYS = (LABEL_TOPOLOGY_ZONE, LABEL_FAILURE_DOMAIN_BETA_ZONE)

# ============================================================================
# PLUGIN SCHEME
# ============================================================================

GCE_PD_TOPOLOGY_KEY = "topology.gke.io/zone"
AWS_EBS_TOPOLOGY_KEY = "topology.ebs.csi.aws.com/zone"
AZURE_DISK_TOPOLOGY_KEY = "topology.disk.csi.azure.com/zone"
CINDER_TOPOLOGY_KEY = "topology.cinder.csi.openstack.org/zone"

# Several zones collapsed into one label value, e.g. "us-east1-a__us-east1-c"
LABEL_MULTI_ZONE_DELIMITER = "__"
