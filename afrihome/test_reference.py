"""
Tests for lookup lists, financing intake and the shared error envelope.
"""

from afrihome.main import field_errors

FINANCING = {
    "fullName": "Ngozi Eze",
    "email": "ngozi@example.com",
    "city": "Abuja",
    "country": "Nigeria",
    "salary": 50000,
    "jobTitle": "Engineer",
    "loanAmount": 120000,
    "monthlyPayment": 1500,
    "preferredCurrency": "NGN",
}


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_countries(client):
    countries = client.get("/api/countries").json()
    assert len(countries) == 15
    assert {"Nigeria", "Kenya", "South Africa"} <= set(countries)


def test_currencies(client):
    currencies = client.get("/api/currencies").json()
    assert currencies[0] == {"code": "USD", "name": "US Dollar"}
    assert "NGN" in {c["code"] for c in currencies}


def test_feature_options(client):
    options = client.get("/api/features").json()
    assert "Pool" in options
    assert len(options) == len(set(options))


class TestFinancing:

    def test_submit_without_login(self, client, store):
        resp = client.post("/api/financing", json=FINANCING)
        assert resp.status_code == 201
        assert resp.json() == {"id": 1, "success": True}
        assert store.get_financing_request(1).loan_amount == 120000

    def test_ids_increase(self, client):
        client.post("/api/financing", json=FINANCING)
        assert client.post("/api/financing", json=FINANCING).json()["id"] == 2

    def test_optional_fields(self, client, store):
        body = {**FINANCING, "phoneNumber": "+234 800 000 0000", "additionalComments": "Prefer 20 years"}
        client.post("/api/financing", json=body)
        stored = store.get_financing_request(1)
        assert stored.phone_number == "+234 800 000 0000"
        assert stored.additional_comments == "Prefer 20 years"

    def test_invalid_request(self, client, store):
        body = {**FINANCING, "email": "nope", "loanAmount": -1}
        resp = client.post("/api/financing", json=body)
        assert resp.status_code == 400
        assert resp.json()["detail"] == "Invalid financing request"
        assert {"email", "loanAmount"} <= {e["field"] for e in resp.json()["errors"]}
        assert store.get_financing_request(1) is None


class TestFieldErrors:

    def test_strips_location_prefix(self):
        errors = field_errors([
            {"loc": ("body", "minPrice"), "msg": "Input should be a valid number", "type": "float_parsing"},
            {"loc": ("query", "features", 0), "msg": "bad", "type": "string_type"},
        ])
        assert errors == [
            {"field": "minPrice", "message": "Input should be a valid number", "type": "float_parsing"},
            {"field": "features.0", "message": "bad", "type": "string_type"},
        ]

    def test_whole_body_error(self):
        assert field_errors([{"loc": ("body",), "msg": "Field required", "type": "missing"}])[0]["field"] == "body"
