"""
Region derivation from zone names.

A RegionDeriver wraps an optional zone -> region function. The disabled
variant stands for "no parser configured": callers skip region handling
entirely instead of failing.
"""

import logging
from typing import Callable, Iterable, List, Optional, Union

from topology_translation.errors import InvalidInputError

logger = logging.getLogger(__name__)

RegionParserFn = Callable[[str], str]


def gce_region_parser(zone: str) -> str:
    """us-east1-a -> us-east1 (zone format {locale}-{region}-{zone})"""
    parts = zone.split("-")
    if len(parts) != 3 or not all(parts):
        raise InvalidInputError(
            f"zone in unexpected format, expected: {{locale}}-{{region}}-{{zone}}, got: {zone}"
        )
    return "-".join(parts[:2])


def azure_region_parser(zone: str) -> str:
    """westus2-1 -> westus2 (zone format {region}-{number})"""
    region, sep, number = zone.rpartition("-")
    if not sep or not region or not number.isdigit():
        raise InvalidInputError(
            f"zone in unexpected format, expected: {{region}}-{{number}}, got: {zone}"
        )
    return region


class RegionDeriver:
    """Maps zones to their containing regions, or does nothing when disabled."""

    def __init__(self, parser: Optional[RegionParserFn] = None):
        self._parser = parser

    @classmethod
    def disabled(cls) -> "RegionDeriver":
        return cls(None)

    @property
    def enabled(self) -> bool:
        return self._parser is not None

    def derive(self, zones: Iterable[str]) -> List[str]:
        """Sorted, de-duplicated regions of the given zones; [] when disabled."""
        if self._parser is None:
            return []
        regions = set()
        for zone in zones:
            region = self._parser(zone)
            logger.debug(f"Derived region {region} from zone {zone}")
            regions.add(region)
        return sorted(regions)


def as_region_deriver(value: Union[None, RegionParserFn, RegionDeriver]) -> RegionDeriver:
    if value is None:
        return RegionDeriver.disabled()
    if isinstance(value, RegionDeriver):
        return value
    return RegionDeriver(value)
