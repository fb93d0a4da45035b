"""
tests/core/region/test_region_data.py - Region data tests

Consistency of the region catalog offered by the region selector.
"""

import re

import pytest

from ddbconsole.core import region
from ddbconsole.core.region.data import ALL_REGIONS, DEFAULT_REGION, REGION_NAMES, REGION_NAMES_EN, get_region_name


class TestAllRegions:
    def test_unique_and_sorted(self):
        assert len(ALL_REGIONS) == len(set(ALL_REGIONS))
        assert ALL_REGIONS == sorted(ALL_REGIONS)

    def test_region_format(self):
        pattern = re.compile(r"^[a-z]{2,3}-[a-z]+-[0-9]+$")
        for code in ALL_REGIONS:
            assert pattern.match(code), f"Invalid region format: {code}"

    def test_default_region_offered(self):
        assert DEFAULT_REGION in ALL_REGIONS

    def test_every_region_has_names(self):
        assert set(REGION_NAMES) == set(ALL_REGIONS)
        assert set(REGION_NAMES_EN) == set(ALL_REGIONS)


class TestRegionName:
    @pytest.mark.parametrize("lang,name", [("en", "Seoul"), ("ko", "서울")])
    def test_languages(self, lang, name):
        assert get_region_name("ap-northeast-2", lang) == name

    def test_unknown_region(self):
        assert get_region_name("xx-nowhere-9", "en") == ""


class TestLazyPackage:
    def test_attributes(self):
        assert region.ALL_REGIONS is ALL_REGIONS
        assert region.get_region_name is get_region_name

    def test_unknown_attribute(self):
        with pytest.raises(AttributeError):
            region.NOT_A_NAME  # noqa: B018
