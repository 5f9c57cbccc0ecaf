class TestCategoryRoutes:

    async def test_create_list_and_get(self, client):
        resp = await client.post("/api/v1/categories", json={"category_name": "Garden"})
        assert resp.status_code == 201
        category_id = resp.json()["id"]

        resp = await client.get("/api/v1/categories")
        assert [c["category_name"] for c in resp.json()] == ["Garden"]

        resp = await client.get(f"/api/v1/categories/{category_id}")
        assert resp.json()["category_name"] == "Garden"

    async def test_duplicate_name_is_400(self, client, electronics):
        resp = await client.post("/api/v1/categories", json={"category_name": "Electronics"})

        assert resp.status_code == 400
        assert resp.json()["code"] == "bad_request"

    async def test_delete_referenced_category_is_400(self, client, create_product, electronics):
        await create_product()

        resp = await client.delete(f"/api/v1/categories/{electronics.id}")

        assert resp.status_code == 400
        assert (await client.get(f"/api/v1/categories/{electronics.id}")).status_code == 200

    async def test_delete_unknown_category_is_404(self, client):
        resp = await client.delete("/api/v1/categories/404")
        assert resp.status_code == 404
