from typing import Dict, List, Optional
import enum

from pydantic import BaseModel, Field

# ============================================================================
# ENUM DEFINITIONS
# ============================================================================

class NodeSelectorOperator(str, enum.Enum):
    """Match operator of a node selector requirement"""
    IN = "In"
    NOT_IN = "NotIn"
    EXISTS = "Exists"
    DOES_NOT_EXIST = "DoesNotExist"
    GT = "Gt"
    LT = "Lt"

# ============================================================================
# NODE AFFINITY
# ============================================================================

class NodeSelectorRequirement(BaseModel):
    """Single key/operator/values constraint; values are semantically a set"""
    key: str
    operator: NodeSelectorOperator = NodeSelectorOperator.IN
    values: List[str] = Field(default_factory=list)


class NodeSelectorTerm(BaseModel):
    """AND-combined requirements"""
    match_expressions: List[NodeSelectorRequirement] = Field(default_factory=list, alias="matchExpressions")
    match_fields: List[NodeSelectorRequirement] = Field(default_factory=list, alias="matchFields")

    model_config = {
        "populate_by_name": True,
    }

    def is_empty(self) -> bool:
        return not self.match_expressions and not self.match_fields


class NodeSelector(BaseModel):
    """OR-combined terms; an empty list means no constraint"""
    node_selector_terms: List[NodeSelectorTerm] = Field(default_factory=list, alias="nodeSelectorTerms")

    model_config = {
        "populate_by_name": True,
    }


class VolumeNodeAffinity(BaseModel):
    required: Optional[NodeSelector] = None

# ============================================================================
# PERSISTENT VOLUME
# ============================================================================

class ObjectMeta(BaseModel):
    name: str = ""
    namespace: str = ""
    labels: Dict[str, str] = Field(default_factory=dict)


class PersistentVolumeSpec(BaseModel):
    node_affinity: Optional[VolumeNodeAffinity] = Field(default=None, alias="nodeAffinity")

    model_config = {
        "populate_by_name": True,
    }


class PersistentVolume(BaseModel):
    """Volume record whose labels and node affinity get translated in place"""
    metadata: ObjectMeta = Field(default_factory=ObjectMeta)
    spec: PersistentVolumeSpec = Field(default_factory=PersistentVolumeSpec)

    @property
    def labels(self) -> Dict[str, str]:
        return self.metadata.labels

    def node_selector_terms(self) -> Optional[List[NodeSelectorTerm]]:
        """Live term list of the required node affinity, or None when unset."""
        affinity = self.spec.node_affinity
        if affinity is None or affinity.required is None:
            return None
        return affinity.required.node_selector_terms

    def ensure_required_affinity(self) -> NodeSelector:
        if self.spec.node_affinity is None:
            self.spec.node_affinity = VolumeNodeAffinity()
        if self.spec.node_affinity.required is None:
            self.spec.node_affinity.required = NodeSelector()
        return self.spec.node_affinity.required

# ============================================================================
# ALLOWED TOPOLOGIES
# ============================================================================

class TopologySelectorLabelRequirement(BaseModel):
    key: str
    values: List[str] = Field(default_factory=list)


class TopologySelectorTerm(BaseModel):
    match_label_expressions: List[TopologySelectorLabelRequirement] = Field(
        default_factory=list, alias="matchLabelExpressions"
    )

    model_config = {
        "populate_by_name": True,
    }


class StorageClass(BaseModel):
    """Storage class carrying the allowed topologies for provisioning"""
    metadata: ObjectMeta = Field(default_factory=ObjectMeta)
    provisioner: str = ""
    allowed_topologies: Optional[List[TopologySelectorTerm]] = Field(default=None, alias="allowedTopologies")

    model_config = {
        "populate_by_name": True,
    }
