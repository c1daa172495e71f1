"""Sun path graphs, local time offsets and panel exposure series."""

import math

import pytest

import sunpath.graph
from sunpath.config import DEFAULT_CALENDAR_DAYS
from sunpath.compute import solar_coordinates
from sunpath.graph import local_time_info, panel_exposure, solar_position_graph
from sunpath.models import CalendarMoment, GeoLocation, MonthDay, PlaneOrientation

SUMMER = MonthDay(6, 21)
WINTER = MonthDay(12, 21)
EQUINOX = MonthDay(3, 20)


class TestLocalTimeInfo:
    def test_summer_time(self):
        info = local_time_info(2021, 6, 21, 12.923, "Europe/Berlin")
        assert info.offset == 7200
        assert info.local_offset == -498
        assert info.local_offset_utc == 7200 - 498

    def test_winter_time(self):
        info = local_time_info(2021, 12, 21, 12.923, "Europe/Berlin")
        assert info.offset == 3600
        assert info.local_offset_utc == 3600 - 498

    def test_west_of_greenwich(self):
        info = local_time_info(2021, 1, 15, -73.9, "America/New_York")
        assert info.offset == -5 * 3600
        # -73.9° is 1.1° east of the -75° meridian
        assert info.local_offset == 264

    def test_half_hour_zone(self):
        info = local_time_info(2021, 6, 21, 88.36, "Asia/Kolkata")
        assert info.offset == 5 * 3600 + 1800


class TestSolarPositionGraph:
    @pytest.fixture
    def graph(self, chemnitz):
        return solar_position_graph(chemnitz, 2021, DEFAULT_CALENDAR_DAYS)

    def test_only_positions_above_horizon(self, graph):
        assert set(graph.sun_paths) == set(DEFAULT_CALENDAR_DAYS)
        for points in graph.sun_paths.values():
            assert points
            assert all(p.y > 0 for p in points)
        for points in graph.timed_positions.values():
            assert all(p.y > 0 for p in points)

    def test_summer_days_are_longer(self, graph):
        assert len(graph.sun_paths[SUMMER]) > len(graph.sun_paths[WINTER])
        # 04:00 to 20:00 true solar time at 50.8° N
        assert len(graph.sun_paths[SUMMER]) == 17
        assert len(graph.sun_paths[WINTER]) == 7

    def test_solar_noon_is_south(self, graph):
        noon = [p for p in graph.sun_paths[EQUINOX] if p in graph.timed_positions[12]]
        assert len(noon) == 1
        assert abs(noon[0].x) < 5.0
        assert noon[0].y == pytest.approx(90 - 50.836, abs=1.0)

    def test_timed_positions_regroup_sun_paths(self, graph):
        regrouped = sorted((p.x, p.y) for points in graph.timed_positions.values() for p in points)
        original = sorted((p.x, p.y) for points in graph.sun_paths.values() for p in points)
        assert regrouped == original
        assert list(graph.timed_positions) == sorted(graph.timed_positions)

    def test_solar_noon_ignores_longitude(self, chemnitz):
        elsewhere = GeoLocation(lat_deg=chemnitz.lat_deg, lon_deg=-100.0)
        a = solar_position_graph(chemnitz, 2021, [SUMMER])
        b = solar_position_graph(elsewhere, 2021, [SUMMER])
        assert a.sun_paths == b.sun_paths

    def test_civil_time_requires_zone(self, chemnitz):
        with pytest.raises(ValueError):
            solar_position_graph(chemnitz, 2021, [SUMMER], use_solar_noon=False)

    def test_civil_time_noon_shifted_by_daylight_saving(self, chemnitz):
        graph = solar_position_graph(
            chemnitz, 2021, [SUMMER, WINTER], use_solar_noon=False, tz_name="Europe/Berlin"
        )
        assert not graph.use_solar_noon
        summer_top = max(graph.sun_paths[SUMMER], key=lambda p: p.y)
        winter_top = max(graph.sun_paths[WINTER], key=lambda p: p.y)
        assert summer_top in graph.timed_positions[13]
        assert winter_top in graph.timed_positions[12]
        assert summer_top.y == pytest.approx(62.6, abs=0.5)

    def test_civil_time_samples_whole_minutes(self, chemnitz, monkeypatch):
        """Sample moments carry no seconds, which sidereal time would ignore."""
        moments = []

        def recording(moment, location):
            moments.append(moment)
            return solar_coordinates(moment, location)

        monkeypatch.setattr(sunpath.graph, "solar_coordinates", recording)
        # 12.923° E is 498 s behind the zone meridian, the offset rounds to 1:52 / 0:52
        solar_position_graph(
            chemnitz, 2021, [SUMMER, WINTER], use_solar_noon=False, tz_name="Europe/Berlin"
        )
        assert len(moments) == 48
        assert all(m.second == 0 for m in moments)
        assert {m.minute for m in moments} == {8}


class TestPanelExposure:
    def test_flat_panel_matches_elevation(self, chemnitz):
        samples = panel_exposure(
            chemnitz, PlaneOrientation(0.0, 0.0), 2021, 6, 21, hours=range(24), utc_offset_seconds=7200
        )
        assert [s.hour for s in samples] == list(range(24))
        for s in samples:
            assert s.relative_elevation_deg == pytest.approx(s.elevation_deg, abs=1e-9)
            assert s.efficiency == pytest.approx(math.sin(math.radians(s.elevation_deg)))

    def test_south_panel_gains_at_noon(self, chemnitz):
        panel = PlaneOrientation.from_compass(30, 180)
        samples = {s.hour: s for s in panel_exposure(chemnitz, panel, 2021, 12, 21, utc_offset_seconds=3600)}
        noon = samples[12]
        assert noon.relative_elevation_deg > noon.elevation_deg
        assert noon.relative_elevation_deg == pytest.approx(noon.elevation_deg + 30, abs=2.0)

    def test_default_hours(self, chemnitz):
        samples = panel_exposure(chemnitz, PlaneOrientation(0.5, 0.0), 2021, 6, 21)
        assert [s.hour for s in samples] == list(range(5, 22))

    def test_half_hour_zone_samples_exact_local_time(self):
        """12:00 IST is 06:30 UTC, not 07:00 or 06:00."""
        kolkata = GeoLocation(lat_deg=22.57, lon_deg=88.36)
        info = local_time_info(2021, 6, 21, kolkata.lon_deg, "Asia/Kolkata")
        (noon,) = panel_exposure(
            kolkata,
            PlaneOrientation(0.0, 0.0),
            2021,
            6,
            21,
            hours=[12],
            utc_offset_seconds=info.offset,
        )
        expected = solar_coordinates(CalendarMoment(2021, 6, 21, 6, 30), kolkata)
        whole_hour = solar_coordinates(CalendarMoment(2021, 6, 21, 6, 0), kolkata)
        assert noon.elevation_deg == pytest.approx(expected.elevation_deg, abs=1e-9)
        assert noon.azimuth_deg == pytest.approx(expected.azimuth_deg, abs=1e-9)
        assert abs(noon.elevation_deg - whole_hour.elevation_deg) > 1.0
