"""
Node affinity rewriting.

Removes, adds and renames topology requirements on a volume's required
node affinity. All changes are made in place on the term list the volume
already holds.
"""

import logging
from typing import Iterable

from topology_translation.errors import InvalidInputError
from topology_translation.models import (
    NodeSelectorOperator,
    NodeSelectorRequirement,
    NodeSelectorTerm,
    PersistentVolume,
)

logger = logging.getLogger(__name__)


def remove_topology(pv: PersistentVolume, topology_key: str) -> bool:
    """
    Drop every requirement keyed `topology_key` from every term.

    Terms left empty by the removal are dropped. Returns True if anything
    was removed, False if the key was not present.
    """
    terms = pv.node_selector_terms()
    if not terms:
        return False

    found = False
    kept = []
    for term in terms:
        remaining = [r for r in term.match_expressions if r.key != topology_key]
        if len(remaining) == len(term.match_expressions):
            kept.append(term)
            continue
        found = True
        term.match_expressions[:] = remaining
        if not term.is_empty():
            kept.append(term)

    terms[:] = kept
    if found:
        logger.debug(f"Removed topology key {topology_key} from node affinity")
    return found


def add_topology(pv: PersistentVolume, topology_key: str, zones: Iterable[str]) -> None:
    """
    Constrain the volume to `zones` under `topology_key`.

    Blank and duplicate zones are discarded and the rest sorted. The
    requirement goes into the first term when that term has no requirement
    for the key yet, otherwise into a new term.

    Raises:
        InvalidInputError: no valid zone is left; the record is untouched
    """
    filtered = sorted({zone.strip() for zone in (zones or []) if zone and zone.strip()})
    if not filtered:
        logger.warning(f"Rejected empty zone set for topology key {topology_key}")
        raise InvalidInputError("there are no valid zones to add to pv")

    required = pv.ensure_required_affinity()
    requirement = NodeSelectorRequirement(
        key=topology_key,
        operator=NodeSelectorOperator.IN,
        values=filtered,
    )

    terms = required.node_selector_terms
    if terms and all(r.key != topology_key for r in terms[0].match_expressions):
        terms[0].match_expressions.append(requirement)
    else:
        terms.append(NodeSelectorTerm(match_expressions=[requirement]))
    logger.debug(f"Added topology {topology_key} in {filtered}")


def replace_topology(pv: PersistentVolume, old_key: str, new_key: str) -> bool:
    """
    Rename requirement keys from `old_key` to `new_key`, values untouched.

    An existing `new_key` requirement in the same term is not merged with the
    renamed one.
    """
    terms = pv.node_selector_terms()
    if not terms:
        return False

    replaced = False
    for term in terms:
        for requirement in term.match_expressions:
            if requirement.key == old_key:
                requirement.key = new_key
                replaced = True
    if replaced:
        logger.debug(f"Replaced topology key {old_key} with {new_key}")
    return replaced
