import httpx
import pytest
from pydantic import ValidationError

from tripsim.config import Settings
from tripsim.schemas.geo import Coordinate, ResolvedPlace
from tripsim.services.geo_resolver import TableGeoResolver, build_geo_resolver, haversine_km, static_map_url
from tripsim.services.nominatim_client import NominatimGeoResolver

from tests.factories import RIO, SALVADOR, SAO_PAULO

POINTS = [
    SALVADOR,
    RIO,
    SAO_PAULO,
    Coordinate(latitude=0, longitude=0),
    Coordinate(latitude=89.9, longitude=179.9),
    Coordinate(latitude=-45.5, longitude=-179.99),
]


@pytest.mark.parametrize("point", POINTS)
def test_distance_to_self_is_zero(point, table_geo):
    assert table_geo.distance(point, point) == pytest.approx(0.0, abs=1e-9)


@pytest.mark.parametrize("a", POINTS)
@pytest.mark.parametrize("b", POINTS)
def test_distance_is_symmetric(a, b):
    assert haversine_km(a, b) == pytest.approx(haversine_km(b, a), abs=1e-9)


def test_salvador_to_rio_distance(table_geo):
    assert abs(table_geo.distance(SALVADOR, RIO) - 1206) <= 5


def test_antipodal_points_stay_finite():
    d = haversine_km(Coordinate(latitude=0, longitude=0), Coordinate(latitude=0, longitude=180))
    assert d == pytest.approx(6371 * 3.141592653589793, rel=1e-6)


@pytest.mark.parametrize("lat, lng", [(91, 0), (-90.5, 0), (0, 180.1), (0, -181)])
def test_coordinate_rejects_out_of_range(lat, lng):
    with pytest.raises(ValidationError):
        Coordinate(latitude=lat, longitude=lng)


def test_coordinate_is_immutable():
    with pytest.raises(ValidationError):
        SALVADOR.latitude = 0


@pytest.mark.parametrize(
    "query, expected",
    [
        ("Salvador", SALVADOR),
        ("salvador, BA", SALVADOR),
        ("RIO DE JANEIRO", RIO),
        ("São Paulo", SAO_PAULO),
        ("sao paulo - SP", SAO_PAULO),
    ],
)
async def test_resolve_known_cities(table_geo, query, expected):
    assert await table_geo.resolve(query) == expected


async def test_resolve_first_table_match_wins(table_geo):
    assert await table_geo.resolve("Rio de Janeiro to Salvador") == SALVADOR


@pytest.mark.parametrize("query", ["Atlantis", "", "   "])
async def test_resolve_unknown_is_none(table_geo, query):
    assert await table_geo.resolve(query) is None


async def test_resolve_place_wraps_coordinate(table_geo):
    place = await table_geo.resolve_place("Recife")
    assert isinstance(place, ResolvedPlace)
    assert place.query == "Recife"
    assert place.coordinate.latitude == pytest.approx(-8.0476)
    assert await table_geo.resolve_place("Gotham") is None


async def test_nearby_orders_by_distance(table_geo):
    hits = await table_geo.nearby(SALVADOR, "beach", 20000)
    assert [p.id for p in hits] == ["sal-porto-da-barra", "sal-itapua"]
    distances = [table_geo.distance(SALVADOR, p.coordinate) for p in hits]
    assert distances == sorted(distances)


async def test_nearby_matches_type_tags_case_insensitively(table_geo):
    hits = await table_geo.nearby(SALVADOR, "ATTRACTION", 5000)
    ids = {p.id for p in hits}
    assert "sal-pelourinho" in ids  # category culture, tagged attraction
    assert "sal-museu-afro" not in ids


@pytest.mark.parametrize("radius", [0, -50])
async def test_nearby_non_positive_radius_uses_default(table_geo, radius):
    hits = await table_geo.nearby(SALVADOR, "culture", radius)
    # Farol da Barra is ~4.5 km away, outside the 1 km default
    assert [p.id for p in hits] == ["sal-pelourinho", "sal-museu-afro"]


async def test_nearby_default_radius(table_geo):
    assert [p.id for p in await table_geo.nearby(SALVADOR, "culture")] == [
        "sal-pelourinho",
        "sal-museu-afro",
    ]


async def test_nearby_nothing_qualifies(table_geo):
    assert await table_geo.nearby(SALVADOR, "ski", 50000) == []
    assert await table_geo.nearby(Coordinate(latitude=0, longitude=0), "beach", 50000) == []


async def test_custom_tables():
    geo = TableGeoResolver(
        cities=[{"name": "Lisboa", "latitude": 38.7223, "longitude": -9.1393}],
        places=[],
    )
    assert await geo.resolve("Lisboa, Portugal") == Coordinate(latitude=38.7223, longitude=-9.1393)
    assert await geo.resolve("Salvador") is None


def test_build_geo_resolver_picks_backend():
    assert isinstance(build_geo_resolver(Settings(geocoder_backend="table")), TableGeoResolver)
    assert isinstance(build_geo_resolver(Settings(geocoder_backend="Nominatim")), NominatimGeoResolver)
    assert isinstance(build_geo_resolver(Settings(geocoder_backend="carrier-pigeon")), TableGeoResolver)


class TestStaticMapUrl:
    def test_center_zoom_and_size(self):
        url = httpx.URL(static_map_url(SALVADOR, base_url="https://maps.test/staticmap"))
        assert url.host == "maps.test"
        assert url.params["center"] == "-12.9711,-38.5108"
        assert url.params["zoom"] == "13"
        assert url.params["size"] == "600x300"
        assert "markers" not in url.params

    def test_markers_are_pipe_joined(self):
        url = httpx.URL(static_map_url(SALVADOR, [SALVADOR, RIO], zoom=10, width=320, height=200))
        assert url.params["markers"] == "-12.9711,-38.5108|-22.9068,-43.1729"
        assert url.params["zoom"] == "10"
        assert url.params["size"] == "320x200"
        assert str(url).startswith(Settings().static_map_base_url)
