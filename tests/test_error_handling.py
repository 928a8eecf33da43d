"""
Error handling and edge case tests for the adapters and exceptions.

This test suite covers:
- NetworkError for transport failures, bad statuses and undecodable bodies
- TheMealDB "meals": null responses
- Wikimedia responses missing query/pages/imageinfo
- exception payloads and the shared client lifecycle
"""

import httpx
import pytest

from adapters import http_adapter
from adapters.mealdb_adapter import MealDBAdapter
from adapters.wikimedia_adapter import WikimediaAdapter
from app.exceptions import EmptyResultError, FetchError, NetworkError, NotFoundError
from test_fixtures import FakeUpstream, make_meal


def _client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


# =============================================================================
# HTTP ADAPTER
# =============================================================================


@pytest.mark.anyio
async def test_get_json_bad_status():
    async with _client(lambda request: httpx.Response(503)) as client:
        with pytest.raises(NetworkError) as exc_info:
            await http_adapter.get_json(client, "https://example.org/api")

    assert exc_info.value.code == "HTTP_STATUS"
    assert exc_info.value.details["status"] == 503
    assert "503" in str(exc_info.value)


@pytest.mark.anyio
async def test_get_json_transport_error():
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    async with _client(handler) as client:
        with pytest.raises(NetworkError) as exc_info:
            await http_adapter.get_json(client, "https://example.org/api")

    assert exc_info.value.code == "TRANSPORT"


@pytest.mark.anyio
async def test_get_json_invalid_body():
    async with _client(lambda request: httpx.Response(200, text="<html>")) as client:
        with pytest.raises(NetworkError) as exc_info:
            await http_adapter.get_json(client, "https://example.org/api")

    assert exc_info.value.code == "INVALID_PAYLOAD"


@pytest.mark.anyio
async def test_probe_status_codes():
    statuses = {"/ok.jpg": 200, "/moved.jpg": 204, "/gone.jpg": 404, "/err.jpg": 500}

    def handler(request):
        return httpx.Response(statuses[request.url.path])

    async with _client(handler) as client:
        assert await http_adapter.probe(client, "https://img.example.org/ok.jpg")
        assert await http_adapter.probe(client, "https://img.example.org/moved.jpg")
        assert not await http_adapter.probe(client, "https://img.example.org/gone.jpg")
        assert not await http_adapter.probe(client, "https://img.example.org/err.jpg")


@pytest.mark.anyio
async def test_connect_and_close_shared_client():
    client = http_adapter.connect(transport=httpx.MockTransport(lambda r: httpx.Response(200)))
    assert http_adapter.get_client() is client

    await http_adapter.close()

    assert client.is_closed
    assert http_adapter.get_client() is not client
    await http_adapter.close()


# =============================================================================
# MEALDB ADAPTER
# =============================================================================


@pytest.mark.anyio
async def test_mealdb_null_listing_is_empty():
    upstream = FakeUpstream()
    async with upstream.client() as client:
        assert await MealDBAdapter(client).list_by_category("Nothing") == []


@pytest.mark.anyio
async def test_mealdb_lookup_unknown_is_none():
    upstream = FakeUpstream()
    async with upstream.client() as client:
        assert await MealDBAdapter(client).lookup("1") is None


@pytest.mark.anyio
async def test_mealdb_lookup_tolerates_extra_fields():
    upstream = FakeUpstream()
    upstream.add_meal(make_meal(strCreativeCommonsConfirmed=None, strImageSource=None))

    async with upstream.client() as client:
        meal = await MealDBAdapter(client).lookup("52768")

    assert meal.id == "52768"
    assert meal.slot(1) == ("digestive biscuits", "175g/6oz")


@pytest.mark.anyio
async def test_mealdb_malformed_listing_is_network_error():
    payload = {"meals": [{"strMeal": "no id"}]}
    async with _client(lambda request: httpx.Response(200, json=payload)) as client:
        with pytest.raises(NetworkError) as exc_info:
            await MealDBAdapter(client, base_url="https://mealdb.test/").list_by_category("Dessert")

    assert exc_info.value.code == "INVALID_PAYLOAD"


@pytest.mark.anyio
async def test_mealdb_base_url_override():
    seen = []

    def handler(request):
        seen.append(str(request.url))
        return httpx.Response(200, json={"meals": None})

    async with _client(handler) as client:
        await MealDBAdapter(client, base_url="https://mealdb.test/v2/").lookup("5")

    assert seen == ["https://mealdb.test/v2/lookup.php?i=5"]


# =============================================================================
# WIKIMEDIA ADAPTER
# =============================================================================


@pytest.mark.anyio
@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"query": {}},
        {"query": {"pages": {}}},
        {"query": {"pages": {"-1": {"title": "File:x.jpg", "missing": ""}}}},
        {"query": {"pages": {"12": {"imageinfo": []}}}},
        {"query": {"pages": {"12": {"imageinfo": [{"descriptionurl": "d"}]}}}},
    ],
)
async def test_wikimedia_file_url_missing_parts(payload):
    async with _client(lambda request: httpx.Response(200, json=payload)) as client:
        assert await WikimediaAdapter(client).file_url("File:x.jpg") is None


@pytest.mark.anyio
async def test_wikimedia_search_skips_untitled_hits():
    payload = {"query": {"search": [{"ns": 6}, {"title": "File:a.jpg"}]}}
    async with _client(lambda request: httpx.Response(200, json=payload)) as client:
        assert await WikimediaAdapter(client).search_files("cake food") == ["File:a.jpg"]


# =============================================================================
# EXCEPTIONS
# =============================================================================


def test_exception_payloads():
    err = NotFoundError("Recipe not found", details={"meal_id": "1"}, code="NOT_FOUND")
    assert err.http_status == 404
    assert err.to_dict() == {
        "message": "Recipe not found",
        "code": "NOT_FOUND",
        "details": {"meal_id": "1"},
    }

    empty = EmptyResultError()
    assert isinstance(empty, NotFoundError)
    assert str(empty) == "No results"

    assert NetworkError().http_status == 502
    assert FetchError().to_dict() == {
        "message": "Failed to fetch recipe. Please try again.",
        "code": "FETCH_ERROR",
    }
