from fastapi.testclient import TestClient
from employee_api.main import app


def test_health_ok():
    """Test health check endpoint"""
    client = TestClient(app)
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"
    assert r.json()["database"] == "sqlite"


def test_root_endpoint():
    """Test root endpoint"""
    client = TestClient(app)
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Employee API"
    assert data["status"] == "ok"
    assert data["docs"] == "/docs"
    assert data["health"] == "/health"
    assert data["endpoints"] == [
        "/employee",
        "/employee/highestSalary",
        "/employee/salaryRangeCount",
        "/employee/youngestEmployees",
        "/employee/{email}",
    ]
