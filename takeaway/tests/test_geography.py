from takeaway.analytics.geography import city_distribution, dead_zones
from takeaway.data_ingestion.schema import Location, LocationLink
from takeaway.data_ingestion.snapshot import Snapshot


def test_city_distribution_counts_distinct_restaurants(snapshot):
    cities = city_distribution(snapshot)

    assert [(c.city, c.restaurant_count) for c in cities] == [
        ("Amsterdam", 5),
        ("Rotterdam", 2),
        ("Utrecht", 2),
    ]
    assert [c.market_share_pct for c in cities] == [55.56, 22.22, 22.22]


def test_restaurant_linked_to_many_locations_in_one_city_counts_once():
    snapshot = Snapshot.from_records(
        locations=[
            Location(id=str(i), postal_code=f"10{i:02d}", city="Amsterdam") for i in range(4)
        ],
        location_links=[LocationLink(location_id=str(i), restaurant_id="chain") for i in range(4)],
    )
    cities = city_distribution(snapshot)
    assert len(cities) == 1
    assert cities[0].restaurant_count == 1
    assert cities[0].market_share_pct == 100.0


def test_locations_without_city_are_ignored(snapshot):
    cities = {c.city for c in city_distribution(snapshot)}
    assert None not in cities
    zones = {z.postal_code for z in dead_zones(snapshot)}
    assert "9999" not in zones


def test_dead_zones_include_postal_codes_without_restaurants(snapshot):
    zones = dead_zones(snapshot)

    assert [(z.city, z.postal_code, z.restaurant_count) for z in zones] == [
        ("Utrecht", "3512", 0),
        ("Amsterdam", "1012", 2),
        ("Rotterdam", "3011", 2),
        ("Utrecht", "3511", 2),
    ]


def test_dead_zone_threshold_is_inclusive(snapshot):
    zones = dead_zones(snapshot, max_restaurants=2)
    assert max(z.restaurant_count for z in zones) == 2
    zones = dead_zones(snapshot, max_restaurants=0)
    assert [(z.postal_code, z.restaurant_count) for z in zones] == [("3512", 0)]


def test_well_served_areas_are_not_dead_zones(snapshot):
    assert "1011" not in {z.postal_code for z in dead_zones(snapshot)}


def test_empty_snapshot(empty_snapshot):
    assert city_distribution(empty_snapshot) == []
    assert dead_zones(empty_snapshot) == []
