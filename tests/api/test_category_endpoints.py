"""
HTTP tests for /api/category.
"""

from app.domain.entities import Category


class TestCreateCategory:
    """POST /api/category/category"""

    def test_creates_category(self, client, category_repo):
        res = client.post("/api/category/category", json={"name": "Test Category"})

        assert res.status_code == 201
        body = res.json()
        assert body["statusCode"] == 201
        assert body["message"] == "category created"
        assert body["data"]["name"] == "Test Category"
        assert category_repo.get_by_name("Test Category") is not None

    def test_missing_name(self, client):
        res = client.post("/api/category/category", json={})

        assert res.status_code == 400
        assert res.json() == {"statusCode": 400, "data": {}, "message": "Name is required"}

    def test_missing_body(self, client):
        res = client.post("/api/category/category")

        assert res.status_code == 400
        assert res.json()["message"] == "Name is required"

    def test_duplicate_name(self, client, category_repo):
        category_repo.save(Category.create_new("Existing Category"))

        res = client.post("/api/category/category", json={"name": "Existing Category"})

        assert res.status_code == 409
        assert res.json()["message"] == "Category is already exists"
        assert len(category_repo.get_by_names(["Existing Category"])) == 1

    def test_wrong_type_is_bad_request(self, client):
        res = client.post("/api/category/category", json={"name": ["not", "a", "string"]})

        assert res.status_code == 400
        body = res.json()
        assert body["message"] == "Invalid request payload"
        assert body["data"]["errors"]


class TestListCategories:
    """GET /api/category/categories"""

    def test_lists_each_created_category_once(self, client):
        names = ["Category 1", "Category 2", "Category 3"]
        for name in names:
            client.post("/api/category/category", json={"name": name})

        res = client.get("/api/category/categories")

        assert res.status_code == 200
        body = res.json()
        assert body["message"] == "all categories retrieved"
        returned = [c["name"] for c in body["data"]]
        assert returned == names
        assert all("id" in c and "createdAt" in c for c in body["data"])

    def test_empty_store(self, client):
        res = client.get("/api/category/categories")

        assert res.status_code == 200
        assert res.json()["data"] == []
