"""API tests for the health check."""

from tests.harness import create_client_fixture

client = create_client_fixture()


class TestHealth:
    def test_health(self, client):
        # Act
        response = client.get("/health")

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["environment"] == "test"
