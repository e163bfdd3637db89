try:
    from . import _bootstrap  # noqa: F401
except Exception:  # pragma: no cover - fallback for direct execution
    import _bootstrap  # type: ignore # noqa: F401

import httpx
import pytest
import pytest_asyncio

from watchscan.core.errors import AnalysisError, AnalysisErrorKind
from watchscan.main import app
from watchscan.schemas import WatchAnalysis
from watchscan.services import ImageEncoder

WATCH_DATA_URI = "data:image/jpeg;base64,/9j/4AAQSkZJRgABAQ=="


class ConfigurableAnalysisService:
    def __init__(self) -> None:
        self.outcomes: list = []
        self.calls: list[tuple[str, str | None]] = []

    async def analyze(self, image_ref: str, language: str | None = None):
        self.calls.append((image_ref, language))
        if not self.outcomes:
            raise AssertionError("No analysis outcome configured")
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


@pytest.fixture()
def service():
    from watchscan import dependencies

    stub = ConfigurableAnalysisService()
    app.dependency_overrides.clear()
    app.dependency_overrides[dependencies.get_watch_analysis_service] = lambda: stub
    app.dependency_overrides[dependencies.get_image_encoder] = lambda: ImageEncoder(
        allow_local=False, allow_remote=False
    )

    yield stub

    app.dependency_overrides.clear()


@pytest_asyncio.fixture()
async def client(service):
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app),
        base_url="http://testserver",
    ) as test_client:
        yield test_client


@pytest.mark.asyncio
async def test_health(client):
    response = await client.get("/api/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


@pytest.mark.asyncio
async def test_analysis_returns_camel_case_report(service, client, submariner_payload):
    service.outcomes.append(WatchAnalysis.model_validate(submariner_payload))

    response = await client.post(
        "/api/analysis",
        json={"imageUri": WATCH_DATA_URI, "language": "fr"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["brand"] == "Rolex"
    assert body["estimatedValue"] == {"min": 9500, "max": 45000, "currency": "USD"}
    assert body["authenticity"]["authenticityIndicators"] == ["Ceramic bezel"]
    assert service.calls == [(WATCH_DATA_URI, "fr")]


@pytest.mark.asyncio
async def test_analysis_converts_currency(service, client, submariner_payload):
    service.outcomes.append(WatchAnalysis.model_validate(submariner_payload))

    response = await client.post(
        "/api/analysis",
        json={"imageUri": WATCH_DATA_URI, "currency": "GBP"},
    )

    assert response.status_code == 200
    assert response.json()["estimatedValue"] == {
        "min": 7505,
        "max": 35550,
        "currency": "GBP",
    }


@pytest.mark.asyncio
async def test_analysis_rejects_unknown_currency(service, client, submariner_payload):
    service.outcomes.append(WatchAnalysis.model_validate(submariner_payload))

    response = await client.post(
        "/api/analysis",
        json={"imageUri": WATCH_DATA_URI, "currency": "XYZ"},
    )

    assert response.status_code == 400


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("kind", "status"),
    [
        (AnalysisErrorKind.EMPTY_INPUT, 400),
        (AnalysisErrorKind.IMAGE_READ_FAILURE, 422),
        (AnalysisErrorKind.RESPONSE_PARSE_FAILURE, 502),
        (AnalysisErrorKind.EMPTY_RESULT, 502),
        (AnalysisErrorKind.RATE_LIMITED, 429),
        (AnalysisErrorKind.TIMEOUT, 504),
        (AnalysisErrorKind.NETWORK_FAILURE, 503),
        (AnalysisErrorKind.UNCLASSIFIED, 500),
    ],
)
async def test_analysis_errors_map_to_status(service, client, kind, status):
    service.outcomes.append(AnalysisError(kind, "upstream detail"))

    response = await client.post("/api/analysis", json={"imageUri": WATCH_DATA_URI})

    assert response.status_code == status
    detail = response.json()["detail"]
    assert detail["kind"] == kind.value
    assert detail["message"]


@pytest.mark.asyncio
async def test_analysis_refuses_server_file_paths(service, client, tmp_path):
    secret = tmp_path / "secret.txt"
    secret.write_text("DB_PASSWORD=hunter2")

    for reference in (str(secret), secret.as_uri()):
        response = await client.post("/api/analysis", json={"imageUri": reference})

        assert response.status_code == 400
        detail = response.json()["detail"]
        assert detail["kind"] == "image_read_failure"
        assert "data URI" in detail["message"]
    assert service.calls == []


@pytest.mark.asyncio
async def test_analysis_refuses_remote_urls_by_default(service, client):
    response = await client.post(
        "/api/analysis", json={"imageUri": "http://169.254.169.254/latest/meta-data"}
    )

    assert response.status_code == 400
    assert response.json()["detail"]["kind"] == "image_read_failure"
    assert service.calls == []


@pytest.mark.asyncio
async def test_analysis_accepts_remote_urls_when_enabled(service, client, submariner_payload):
    from watchscan import dependencies

    app.dependency_overrides[dependencies.get_image_encoder] = lambda: ImageEncoder(
        allow_local=False, allow_remote=True
    )
    service.outcomes.append(WatchAnalysis.model_validate(submariner_payload))

    response = await client.post(
        "/api/analysis", json={"imageUri": "https://example.com/watch.jpg"}
    )

    assert response.status_code == 200
    assert service.calls == [("https://example.com/watch.jpg", None)]


@pytest.mark.asyncio
async def test_catalog_reference_lookup(client):
    response = await client.get("/api/catalog/references/126610LN")

    assert response.status_code == 200
    body = response.json()
    assert body["brand"] == "Rolex"
    assert body["model"] == "Submariner"
    assert body["priceRange"] == {"min": 9500, "max": 45000}


@pytest.mark.asyncio
async def test_catalog_reference_lookup_not_found(client):
    response = await client.get("/api/catalog/references/NOPE-000")

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_catalog_brand_listing(client):
    response = await client.get("/api/catalog/brands/tudor")

    assert response.status_code == 200
    assert [item["model"] for item in response.json()] == ["Black Bay", "Pelagos"]
