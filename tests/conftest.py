import logging

import pytest

from topology_translation.services.region import RegionDeriver, gce_region_parser


@pytest.fixture
def gce_deriver():
    return RegionDeriver(gce_region_parser)


@pytest.fixture(autouse=True)
def _debug_logging(caplog):
    caplog.set_level(logging.DEBUG, logger="topology_translation")
