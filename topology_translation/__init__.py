"""
Topology Translation - The Migration Step

Keeps a persistent volume's topology consistent while it moves between the
plugin topology key and the cluster zone/region keys.
Responsibilities:
- Extract topology values from node affinity and labels
- Derive regions from zones (optional)
- Rewrite node affinity requirements (remove, add, rename)
- Fill in zone/region labels without clobbering existing ones
- Translate storage-class allowed topologies
"""
