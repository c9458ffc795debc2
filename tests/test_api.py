"""测试 HTTP API 端点."""

from collections.abc import AsyncGenerator, Callable

import httpx
import pytest
from httpx import AsyncClient

from irembocare.api.deps import get_ai_doctor
from irembocare.config import Settings
from irembocare.core.ai_doctor import DEMO_NOTE, AIDoctorClient
from irembocare.core.retry import RetryExecutor
from irembocare.main import app


class TestSystemEndpoints:
    """测试系统端点."""

    async def test_health(self, client: AsyncClient) -> None:
        response = await client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["service"] == "IremboCare+"
        assert data["version"] == "1.3.0"
        for key in ("uptime", "memory", "environment", "timestamp"):
            assert key in data

    async def test_ready(self, client: AsyncClient) -> None:
        response = await client.get("/ready")
        assert response.status_code == 200
        assert response.json()["status"] == "ready"

    async def test_metrics(self, client: AsyncClient) -> None:
        data = (await client.get("/metrics")).json()
        assert {"uptime", "memory", "timestamp"} <= set(data)

    async def test_unknown_endpoint(self, client: AsyncClient) -> None:
        response = await client.get("/api/nonexistent")
        assert response.status_code == 404


class TestNewsEndpoints:
    """测试新闻端点（演示数据）."""

    async def test_health_news(self, client: AsyncClient) -> None:
        response = await client.get("/api/health-news", params={"pageSize": 3})
        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["is_mock_data"] is True
        assert data["count"] == 3
        first = data["data"][0]
        assert {"id", "relevance_score", "health_category"} <= set(first)

    async def test_category(self, client: AsyncClient) -> None:
        response = await client.get("/api/health-news/category/malaria")
        data = response.json()
        assert data["category"] == "malaria"
        assert data["count"] == len(data["data"]) == 1
        assert data["data"][0]["health_category"] == "Malaria & Vector Control"

    async def test_trending(self, client: AsyncClient) -> None:
        data = (await client.get("/api/health-news/trending")).json()
        assert data["success"] is True
        assert sum(topic["count"] for topic in data["data"]) == 5


class TestWeatherEndpoint:
    """测试天气端点."""

    async def test_defaults_to_kigali(self, client: AsyncClient) -> None:
        data = (await client.get("/api/weather-health-tips")).json()
        assert data["success"] is True
        assert data["location"] == "Kigali"
        assert data["data"]["weather"]["is_mock_data"] is True

    async def test_unknown_location_still_succeeds(self, client: AsyncClient) -> None:
        response = await client.get("/api/weather-health-tips", params={"location": "Test"})
        assert response.status_code == 200
        assert response.json()["data"]["location"] == "Test"


class TestHealthServicesEndpoints:
    """测试医疗机构端点."""

    async def test_location_required(self, client: AsyncClient) -> None:
        response = await client.get("/api/health-services")
        assert response.status_code == 400

    async def test_unknown_district(self, client: AsyncClient) -> None:
        data = (await client.get("/api/health-services", params={"location": "Atlantis"})).json()
        assert data["data"] == []
        assert "Bugesera" in data["availableDistricts"]

    async def test_list(self, client: AsyncClient) -> None:
        data = (await client.get("/api/health-services", params={"location": "Muhanga"})).json()
        assert data["count"] == 5

    async def test_search(self, client: AsyncClient) -> None:
        response = await client.get(
            "/api/health-services/search",
            params={"location": "Bugesera", "type": "Private", "sort": "name"},
        )
        data = response.json()
        assert data["filters"]["type"] == "Private"
        names = [h["name"] for h in data["data"]]
        assert names == sorted(names)
        assert len(names) == 3

    async def test_search_location_required(self, client: AsyncClient) -> None:
        response = await client.get("/api/health-services/search")
        assert response.status_code == 400
        assert response.json()["detail"]["success"] is False

    async def test_telemedicine_request(self, client: AsyncClient) -> None:
        response = await client.post(
            "/api/telemedicine-request",
            json={
                "patientName": "Eric",
                "district": "Burera",
                "symptoms": "cough",
                "hospitalName": "Butaro District Hospital",
                "contactMethod": "video",
                "urgency": "urgent",
            },
        )
        assert response.status_code == 200
        record = response.json()["data"]
        assert record["id"].startswith("TMC-")
        assert record["estimated_response_time"] == "15-30 minutes"

    async def test_telemedicine_missing_fields(self, client: AsyncClient) -> None:
        response = await client.post("/api/telemedicine-request", json={"district": "Burera"})
        assert response.status_code == 422

    async def test_telemedicine_unknown_hospital(self, client: AsyncClient) -> None:
        response = await client.post(
            "/api/telemedicine-request",
            json={
                "patientName": "Eric",
                "district": "Burera",
                "symptoms": "cough",
                "hospitalName": "Nowhere",
                "contactMethod": "phone",
            },
        )
        assert response.status_code == 404


class TestMedicationEndpoints:
    """测试药品和急救端点."""

    async def test_medication(self, client: AsyncClient) -> None:
        data = (await client.get("/api/medication", params={"disease": "fever"})).json()
        assert data["count"] == 2
        assert "disclaimer" in data

    async def test_medication_limit_out_of_range(self, client: AsyncClient) -> None:
        response = await client.get("/api/medication", params={"limit": 100})
        assert response.status_code == 422

    async def test_search_echoes_query(self, client: AsyncClient) -> None:
        data = (
            await client.get(
                "/api/medication/search",
                params={"disease": "malaria", "sort": "name", "limit": 3},
            )
        ).json()
        assert data["query"]["limit"] == 3
        assert len(data["data"]) <= 3
        brands = [m["openfda"]["brand_name"][0] for m in data["data"]]
        assert brands == sorted(brands)

    async def test_search_invalid_limit_falls_back(self, client: AsyncClient) -> None:
        data = (await client.get("/api/medication/search", params={"limit": "abc"})).json()
        assert data["query"]["limit"] == 10

    async def test_first_aid(self, client: AsyncClient) -> None:
        data = (await client.get("/api/first-aid", params={"condition": "burn"})).json()
        assert [tip["condition"] for tip in data["data"]] == ["Burns"]


class TestAuthEndpoints:
    """测试账户端点."""

    REGISTER = {
        "email": "jane@example.rw",
        "password": "secret",
        "firstName": "Jane",
        "lastName": "Uwase",
    }

    async def _login(self, client: AsyncClient) -> dict[str, str]:
        await client.post("/api/register", json=self.REGISTER)
        response = await client.post(
            "/api/login", json={"email": "jane@example.rw", "password": "secret"}
        )
        return {"Authorization": f"Bearer {response.json()['token']}"}

    async def test_register_and_duplicate(self, client: AsyncClient) -> None:
        first = await client.post("/api/register", json=self.REGISTER)
        assert first.status_code == 201
        assert "password" not in first.json()["user"]

        second = await client.post("/api/register", json=self.REGISTER)
        assert second.status_code == 409

    async def test_register_validation(self, client: AsyncClient) -> None:
        response = await client.post("/api/register", json={"email": "x@y.rw"})
        assert response.status_code == 422

    async def test_login_wrong_password(self, client: AsyncClient) -> None:
        await client.post("/api/register", json=self.REGISTER)
        response = await client.post(
            "/api/login", json={"email": "jane@example.rw", "password": "nope"}
        )
        assert response.status_code == 401

    async def test_profile_requires_token(self, client: AsyncClient) -> None:
        assert (await client.get("/api/profile")).status_code == 401
        response = await client.get("/api/profile", headers={"Authorization": "Bearer bogus"})
        assert response.status_code == 401

    async def test_profile_get_and_update(self, client: AsyncClient) -> None:
        headers = await self._login(client)

        profile = (await client.get("/api/profile", headers=headers)).json()["user"]
        assert profile["email"] == "jane@example.rw"

        response = await client.put(
            "/api/profile", headers=headers, json={"district": "Musanze"}
        )
        assert response.json()["user"]["district"] == "Musanze"

    async def test_health_records(self, client: AsyncClient) -> None:
        headers = await self._login(client)

        response = await client.post(
            "/api/health-records",
            headers=headers,
            json={"type": "symptoms", "data": {"symptom": "headache"}},
        )
        assert response.status_code == 201

        records = (await client.get("/api/health-records", headers=headers)).json()["data"]
        assert [r["symptom"] for r in records["symptoms"]] == ["headache"]

    async def test_health_record_camel_case_type(self, client: AsyncClient) -> None:
        headers = await self._login(client)

        response = await client.post(
            "/api/health-records",
            headers=headers,
            json={"type": "emergencyContacts", "data": {"name": "Alice", "phone": "0788"}},
        )
        assert response.status_code == 201

        records = (await client.get("/api/health-records", headers=headers)).json()["data"]
        assert [r["name"] for r in records["emergency_contacts"]] == ["Alice"]

    async def test_health_record_unknown_type(self, client: AsyncClient) -> None:
        headers = await self._login(client)
        response = await client.post(
            "/api/health-records", headers=headers, json={"type": "dreams", "data": {}}
        )
        assert response.status_code == 422

    async def test_logout(self, client: AsyncClient) -> None:
        headers = await self._login(client)
        assert (await client.post("/api/logout", headers=headers)).status_code == 200
        assert (await client.get("/api/profile", headers=headers)).status_code == 401


class TestAIDoctorEndpoint:
    """测试 AI 医生端点."""

    @pytest.fixture
    def use_upstream(
        self, executor: RetryExecutor
    ) -> Callable[[Callable[[httpx.Request], httpx.Response]], None]:
        """让端点使用指定的模拟上游."""

        def install(handler: Callable[[httpx.Request], httpx.Response]) -> None:
            async def override() -> AsyncGenerator[AIDoctorClient, None]:
                doctor = AIDoctorClient(
                    Settings(_env_file=None, rapidapi_key="rkey"),
                    client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
                    executor=executor,
                )
                yield doctor
                await doctor.close()

            app.dependency_overrides[get_ai_doctor] = override

        return install

    async def test_demo_without_key(self, client: AsyncClient) -> None:
        data = (await client.post("/api/ai-doctor", json={"message": "fever"})).json()
        assert data["success"] is True
        assert data["note"] == DEMO_NOTE

    async def test_empty_message(self, client: AsyncClient) -> None:
        response = await client.post("/api/ai-doctor", json={"message": ""})
        assert response.status_code == 422

    async def test_success(self, client: AsyncClient, use_upstream) -> None:
        use_upstream(lambda request: httpx.Response(200, json={"response": "Rest"}))
        data = (await client.post("/api/ai-doctor", json={"message": "tired"})).json()
        assert data["data"] == {"response": "Rest"}
        assert "note" not in data

    async def test_rate_limited(self, client: AsyncClient, use_upstream) -> None:
        use_upstream(lambda request: httpx.Response(429))
        response = await client.post("/api/ai-doctor", json={"message": "hi"})
        assert response.status_code == 429

    async def test_network_failure(self, client: AsyncClient, use_upstream) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        use_upstream(handler)
        response = await client.post("/api/ai-doctor", json={"message": "hi"})
        assert response.status_code == 503

    async def test_other_errors_return_demo(self, client: AsyncClient, use_upstream) -> None:
        use_upstream(lambda request: httpx.Response(500))
        data = (await client.post("/api/ai-doctor", json={"message": "hi"})).json()
        assert data["note"] == DEMO_NOTE
