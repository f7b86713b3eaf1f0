"""Region derivation."""

import pytest

from topology_translation.errors import InvalidInputError
from topology_translation.services.region import (
    RegionDeriver,
    as_region_deriver,
    azure_region_parser,
    gce_region_parser,
)


@pytest.mark.parametrize(
    "zone,region",
    [("us-east1-a", "us-east1"), ("europe-west4-b", "europe-west4")],
)
def test_gce_region_parser(zone, region):
    assert gce_region_parser(zone) == region


@pytest.mark.parametrize("zone", ["existingZone", "us-east1", "a-b-c-d", "us--a"])
def test_gce_region_parser_rejects_malformed(zone):
    with pytest.raises(InvalidInputError):
        gce_region_parser(zone)


def test_azure_region_parser():
    assert azure_region_parser("westus2-1") == "westus2"
    with pytest.raises(InvalidInputError):
        azure_region_parser("westus2")


def test_derive_unions_regions():
    deriver = RegionDeriver(gce_region_parser)
    assert deriver.enabled
    assert deriver.derive(["us-east1-c", "us-west1-a", "us-east1-a"]) == ["us-east1", "us-west1"]


def test_disabled_deriver():
    deriver = RegionDeriver.disabled()
    assert not deriver.enabled
    assert deriver.derive(["us-east1-a"]) == []


def test_as_region_deriver():
    assert not as_region_deriver(None).enabled
    wrapped = as_region_deriver(gce_region_parser)
    assert wrapped.derive(["us-east1-a"]) == ["us-east1"]
    existing = RegionDeriver(azure_region_parser)
    assert as_region_deriver(existing) is existing
