"""
Integration Tests - HTTP API
"""
import structlog
from fastapi.testclient import TestClient

from src.serving.api import create_api_app
from src.storage import RecordStore

GOOD_CONTACT = {
    "name": "Jane Doe",
    "email": "jane@example.com",
    "message": "Do you ship the lamp abroad?",
}


class TestReadEndpoints:
    """Tests for health, landing and product endpoints"""

    def test_root(self, client):
        """Test the root lists endpoints"""
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["endpoints"]["products"] == "/api/products"

    def test_health(self, client):
        """Test health check"""
        response = client.get("/api/health")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"
        assert response.json()["seed_loaded"] is True

    def test_landing(self, client):
        """Test landing content pass-through"""
        response = client.get("/api/landing")

        assert response.status_code == 200
        assert response.json()["hero"]["title"] == "Welcome"

    def test_list_products(self, client):
        """Test listing returns assembled products with stock status"""
        response = client.get("/api/products")

        assert response.status_code == 200
        products = response.json()
        assert len(products) == 5
        assert products[0]["stockStatus"] == "In Stock"
        assert products[0]["imageUrl"] == "https://img.example.com/1.jpg"

    def test_list_products_with_criteria(self, client):
        """Test featured, search, limit and tax query parameters"""
        response = client.get(
            "/api/products",
            params={"featured": "true", "q": "lamp", "limit": "2", "tax": "true"},
        )

        products = response.json()
        assert [p["id"] for p in products] == [2, 4]
        assert products[0]["priceWithTax"] == 67.85

    def test_unparsable_limit(self, client):
        """Test limit=abc is ignored"""
        response = client.get("/api/products", params={"limit": "abc"})

        assert response.status_code == 200
        assert len(response.json()) == 5

    def test_get_product(self, client):
        """Test product detail with promo and tax"""
        response = client.get("/api/products/1", params={"tax": "true"})

        assert response.status_code == 200
        product = response.json()
        assert product["promoLabel"] == "⭐ Featured"
        assert product["priceWithTax"] == 115.0
        assert product["stockStatus"] == "In Stock"

    def test_product_not_found(self, client):
        """Test unknown ids map to 404 with the error envelope"""
        for path in ("/api/products/99", "/api/products/abc"):
            response = client.get(path)

            assert response.status_code == 404
            assert response.json() == {
                "error": {"code": "NOT_FOUND", "message": "Product not found"},
            }

    def test_unknown_endpoint(self, client):
        """Test unknown routes use the error envelope"""
        response = client.get("/api/nope")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND"

    def test_unsupported_method(self, client):
        """Test a wrong method on a known route is a client error, not internal"""
        response = client.post("/api/products")

        assert response.status_code == 405
        assert response.json()["error"]["code"] == "NOT_FOUND"

    def test_request_id_header(self, client):
        """Test request logging middleware headers"""
        response = client.get("/api/health", headers={"X-Request-ID": "abc-123"})

        assert response.headers["X-Request-ID"] == "abc-123"
        assert "X-Response-Time" in response.headers

    def test_request_id_generated(self, client):
        """Test a request id is assigned when the caller sends none"""
        response = client.get("/api/health")

        assert len(response.headers["X-Request-ID"]) == 32

    def test_request_context_bound(self, store):
        """Test handlers see the request id in the log context"""
        app = create_api_app(store=store)

        @app.get("/context")
        async def context():
            return structlog.contextvars.get_contextvars()

        response = TestClient(app).get("/context", headers={"X-Request-ID": "ctx-1"})

        assert response.json() == {"request_id": "ctx-1", "method": "GET", "path": "/context"}


class TestContactEndpoint:
    """Tests for POST /api/contact"""

    def test_accepted(self, client):
        """Test a valid submission returns 201 with id and status only"""
        response = client.post("/api/contact", json=GOOD_CONTACT)

        assert response.status_code == 201
        assert response.json() == {"id": 1, "status": "received"}

    def test_sequential_ids(self, client):
        """Test ids increase across accepted submissions only"""
        client.post("/api/contact", json={"name": "A"})
        client.post("/api/contact", json=GOOD_CONTACT)
        response = client.post("/api/contact", json=GOOD_CONTACT)

        assert response.json()["id"] == 2

    def test_validation_error(self, client):
        """Test every failed rule is reported"""
        response = client.post(
            "/api/contact",
            json={"name": "A", "email": "bad", "message": "short"},
        )

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert [d["field"] for d in error["details"]] == ["name", "email", "message"]

    def test_empty_body(self, client):
        """Test an empty body is invalid input"""
        for kwargs in ({"json": {}}, {"content": b""}, {"content": b"{oops"}):
            response = client.post("/api/contact", **kwargs)

            assert response.status_code == 400
            assert response.json()["error"]["code"] == "INVALID_INPUT"


class TestSeedUnavailable:
    """Tests for serving without seed data"""

    def test_lifespan_survives_missing_seed(self, tmp_path):
        """Test the app starts and serves empty results when the seed is missing"""
        from src.main import lifespan

        app = create_api_app(store=RecordStore(tmp_path / "missing.json"), lifespan=lifespan)

        with TestClient(app) as client:
            assert client.get("/api/health").json()["seed_loaded"] is False
            assert client.get("/api/products").json() == []

    def test_lifespan_loads_seed(self, seed_file):
        """Test the lifespan loads the store once on startup"""
        from src.main import lifespan

        app = create_api_app(store=RecordStore(seed_file), lifespan=lifespan)

        with TestClient(app) as client:
            assert len(client.get("/api/products").json()) == 5
