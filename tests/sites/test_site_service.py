from __future__ import annotations

import pytest

from apex_attendance.core.exceptions import NotFoundError, ValidationError
from apex_attendance.sites.service import SiteService


@pytest.fixture
def svc(sites_repo):
    return SiteService(sites_repo)


def valid(**overrides):
    values = dict(
        site_id="S2",
        name="Busan Port",
        latitude=35.1796,
        longitude=129.0756,
        radius_meters=120,
        checkin_start="07:30",
        checkin_end="10:00",
    )
    values.update(overrides)
    return values


def test_create_site_defaults_timezone(svc, sites_repo):
    site = svc.create(**valid())
    assert site.timezone == "Asia/Seoul"
    assert str(site.checkin_start) == "07:30"
    assert sites_repo.get_by_id("S2") == site


def test_create_rejects_duplicate_id(svc):
    with pytest.raises(ValidationError):
        svc.create(**valid(site_id="S1"))


@pytest.mark.parametrize(
    "overrides",
    [
        {"site_id": "  "},
        {"name": ""},
        {"latitude": 91},
        {"longitude": -181},
        {"latitude": "north"},
        {"radius_meters": 0},
        {"radius_meters": -5},
        {"checkin_start": "7am"},
        {"checkin_end": "24:00"},
        {"checkin_start": "22:00", "checkin_end": "02:00"},
        {"timezone": "Mars/Olympus"},
        {"is_active": "false"},
        {"is_active": 0},
    ],
)
def test_create_validation(svc, overrides):
    with pytest.raises(ValidationError):
        svc.create(**valid(**overrides))


def test_update_partial(svc):
    site = svc.update("S1", radius_meters=75, checkin_end="19:30")
    assert site.radius_meters == 75
    assert str(site.checkin_end) == "19:30"
    assert site.name == "City Hall"


def test_update_unknown_site(svc):
    with pytest.raises(NotFoundError):
        svc.update("nope", name="x")


def test_update_unknown_field(svc):
    with pytest.raises(ValidationError):
        svc.update("S1", colour="blue")


def test_list_sites_sorted_by_name(svc):
    svc.create(**valid(site_id="S0", name="Aaa"))
    assert [s.name for s in svc.list_sites()] == ["Aaa", "City Hall"]


def test_update_rejects_string_is_active(svc, sites_repo):
    with pytest.raises(ValidationError):
        svc.update("S1", is_active="false")
    assert sites_repo.get_by_id("S1").is_active is True
