from task_api.config import normalize_database_url, parse_origins
from task_api.utils import validate_task_data


class TestHealth:
    def test_health_check(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "OK", "message": "Server is running"}

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["message"] == "Task API"


class TestRequestBodies:
    def test_json_content_type_required_fields(self, client, model):
        model["create_task"].return_value = 1

        response = client.post(
            "/tasks",
            content='{"task": "Hello World", "status": "pending"}',
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 200
        assert response.json() == 1

    def test_malformed_json_is_rejected(self, client, model):
        response = client.post(
            "/tasks",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 422
        model["create_task"].assert_not_awaited()


class TestConfig:
    def test_postgres_url_gets_async_driver(self):
        assert normalize_database_url("postgresql://u:p@h/db") == "postgresql+asyncpg://u:p@h/db"
        assert normalize_database_url("postgres://u:p@h/db") == "postgresql+asyncpg://u:p@h/db"

    def test_other_urls_untouched(self):
        url = "sqlite+aiosqlite:///tasks.db"
        assert normalize_database_url(url) == url

    def test_origins(self):
        assert parse_origins("*") == ["*"]
        assert parse_origins("http://a.test, http://b.test,") == ["http://a.test", "http://b.test"]


class TestValidation:
    def test_valid(self):
        assert validate_task_data({"task": "t", "status": "s"}) == (True, "")

    def test_missing(self):
        assert validate_task_data({"task": "t", "status": None}) == (False, "Please provide task/status")
