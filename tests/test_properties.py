from conftest import error_code


class TestProperties:

    def test_list_newest_first_with_details(self, client, lister, create_listing):
        create_listing(address1="1 First St")
        create_listing(address1="2 Second St")

        resp = client.get("/properties")

        assert resp.status_code == 200
        properties = resp.get_json()
        assert [p["address1"] for p in properties] == ["2 Second St", "1 First St"]
        listing = properties[0]["listings"][0]
        assert listing["lister"]["id"] == lister.id
        assert "passwordHash" not in listing["lister"]
        assert [img["sortOrder"] for img in properties[0]["images"]] == [0, 1]

    def test_reads_are_idempotent(self, client, investor, create_listing, buy_primary):
        """Reading twice with no writes in between gives identical bodies."""
        created = create_listing()
        buy_primary(investor, created["property"]["id"], 750)
        url = f"/properties/{created['property']['id']}"

        first = client.get(url).get_json()
        second = client.get(url).get_json()

        assert first == second
        assert first["shareClass"]["sharesAvailable"] == 9250

    def test_unknown_property(self, client):
        resp = client.get("/properties/00000000-0000-4000-8000-000000000000")

        assert resp.status_code == 404
        assert resp.get_json()["error"]["message"] == "Property not found"


class TestAppShell:

    def test_health(self, client):
        resp = client.get("/health")

        assert resp.status_code == 200
        assert resp.get_json() == {"ok": True, "db": True}

    def test_banner(self, client):
        resp = client.get("/")

        assert resp.status_code == 200
        assert resp.data == b"Fractional Property API"

    def test_unknown_route_uses_error_shape(self, client):
        resp = client.get("/nowhere")

        assert resp.status_code == 404
        assert error_code(resp) == "NOT_FOUND"

    def test_wrong_method(self, client):
        resp = client.delete("/properties")

        assert resp.status_code == 405
        assert error_code(resp) == "METHOD_NOT_ALLOWED"
