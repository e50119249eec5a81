"""앱 공통 엔드포인트 테스트.

Application-level endpoint tests — health check, API index, OpenAPI.
"""

from httpx import AsyncClient


class TestAppEndpoints:
    """헬스 체크 및 인덱스 테스트."""

    async def test_health(self, client: AsyncClient):
        res = await client.get("/health")
        assert res.status_code == 200
        assert res.json() == {"status": "ok"}

    async def test_api_index(self, client: AsyncClient):
        res = await client.get("/api/")
        assert res.status_code == 200
        assert res.json() == "Hello world!"

    async def test_openapi_operation_ids(self, client: AsyncClient):
        """리소스마다 6개 작업이 고유한 operation_id로 문서화됨."""
        res = await client.get("/openapi.json")
        assert res.status_code == 200
        operation_ids = {
            op["operationId"]
            for path in res.json()["paths"].values()
            for op in path.values()
        }
        for singular, plural in [
            ("Institute", "Institutes"),
            ("Department", "Departments"),
            ("StudyDirection", "StudyDirections"),
            ("Applicant", "Applicants"),
            ("Building", "Buildings"),
            ("Dormitory", "Dormitorys"),
        ]:
            assert {
                f"find{plural}",
                f"find{singular}ById",
                f"create{singular}",
                f"modify{singular}",
                f"replace{singular}",
                f"delete{singular}",
            } <= operation_ids

    async def test_validation_error_shape(self, client: AsyncClient):
        """검증 오류는 400 + detail 목록."""
        res = await client.post("/api/buildings/", json={"name": "B"})
        assert res.status_code == 400
        detail = res.json()["detail"]
        assert isinstance(detail, list)
        assert detail[0]["loc"][-1] == "address"
