"""
Unit tests for request structure helpers.
"""

import datetime

import geofox


class TestHelpers:
    """Test structure helpers."""

    def test_coordinate(self):
        assert geofox.coordinate(53.5511, 9.9937) == {"x": 53.5511, "y": 9.9937, "type": "EPSG_4326"}
        assert geofox.coordinate(1, 2, "EPSG_31467")["type"] == "EPSG_31467"

    def test_bounding_box(self):
        lower = geofox.coordinate(9.9, 53.5)
        upper = geofox.coordinate(10.1, 53.6)

        assert geofox.bounding_box(lower, upper) == {"lowerLeft": lower, "upperRight": upper}

    def test_gti_time(self):
        assert geofox.gti_time("15.01.2024", "14:30") == {"date": "15.01.2024", "time": "14:30"}

    def test_gti_time_from_datetime(self):
        value = datetime.datetime(2024, 1, 15, 14, 30, 59, tzinfo=datetime.timezone.utc)

        assert geofox.gti_time_from_datetime(value) == {"date": "15.01.2024", "time": "14:30"}

    def test_station(self):
        assert geofox.station("Hauptbahnhof", "Master:1") == {
            "name": "Hauptbahnhof",
            "id": "Master:1",
            "type": "STATION",
        }

    def test_station_drops_unset_fields(self):
        station = geofox.station("Airport", type="POI", city="Hamburg", has_station_information=False)

        assert station == {
            "name": "Airport",
            "type": "POI",
            "city": "Hamburg",
            "hasStationInformation": False,
        }
        assert "id" not in station

    def test_station_camel_case(self):
        coord = geofox.coordinate(10.0, 53.55)
        station = geofox.station(
            "Jungfernstieg",
            "Master:10950",
            combined_name="Jungfernstieg",
            global_id="de:02000:10950",
            coordinate=coord,
            service_types=["u", "s"],
        )

        assert station["combinedName"] == "Jungfernstieg"
        assert station["globalId"] == "de:02000:10950"
        assert station["coordinate"] == coord
        assert station["serviceTypes"] == ["u", "s"]

    def test_gti_time_from_datetime_pads_fields(self):
        value = datetime.datetime(2024, 3, 5, 7, 4)

        assert geofox.gti_time_from_datetime(value) == {"date": "05.03.2024", "time": "07:04"}
