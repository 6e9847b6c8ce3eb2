# pylint: disable=missing-module-docstring,missing-function-docstring
import pytest

from regenlens.analytics.random_source import FixedSequence
from regenlens.services.regions import SAMPLE_REGIONS, get_region
from regenlens.services.report import build_analysis_report


def test_catalogue_contents():
    assert [r.id for r in SAMPLE_REGIONS] == [1, 2, 3, 4, 5]
    sahel = get_region("sahel region, niger")
    assert sahel.coordinate.lat == 13.5116
    assert sahel.to_dict()["degradationLevel"] == "severe"


def test_unknown_region():
    with pytest.raises(KeyError):
        get_region("Atlantis")


@pytest.mark.parametrize("region", SAMPLE_REGIONS, ids=lambda r: r.name)
def test_every_sample_region_can_be_analysed(region):
    result = build_analysis_report(region.coordinate, region.name, rng=FixedSequence([0.4]))
    assert len(result.ndvi_trend) == 4
    assert 0 <= result.degradation_score <= 1
