"""
HTTP-level tests: routes, Outcome-to-response mapping and structural
validation errors.
"""

import pytest
from fastapi.testclient import TestClient

from bankflow.api.deps import settings_from_request
from bankflow.app import create_app
from bankflow.config import Settings
from bankflow.services.store import DEMO_ACCOUNTS, InMemoryBank

from conftest import ALICE, BOB


class TestHealth:
    def test_health(self, client):
        resp = client.get("/api/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "healthy"}


class TestAccountRoutes:
    def test_lookup(self, client):
        resp = client.post("/api/v1/accounts", json=ALICE)
        assert resp.status_code == 200
        body = resp.json()
        assert body["owner_name"] == "Alice Johnson"
        assert body["current_balance"] == 50.0
        assert body["transactions"] == []

    def test_lookup_blank_sort_code(self, client, settings):
        resp = client.post("/api/v1/accounts", json={"sort_code": " ", "account_number": "73084635"})
        assert resp.status_code == 400
        assert resp.json() == {"message": settings.messages.invalid_search_criteria}

    def test_lookup_missing(self, client, settings):
        resp = client.post("/api/v1/accounts", json={"sort_code": "99-99-99", "account_number": "00000000"})
        assert resp.status_code == 404
        assert resp.json() == {"message": settings.messages.no_account_found}

    def test_create(self, client):
        resp = client.put("/api/v1/accounts", json={"bank_name": "Monzo", "owner_name": "Carol King"})
        assert resp.status_code == 201
        created = resp.json()
        assert created["bank_name"] == "Monzo"
        assert created["current_balance"] == 0.0

        lookup = client.post(
            "/api/v1/accounts",
            json={"sort_code": created["sort_code"], "account_number": created["account_number"]},
        )
        assert lookup.status_code == 200
        assert lookup.json()["account_id"] == created["account_id"]

    def test_create_short_owner(self, client, settings):
        resp = client.put("/api/v1/accounts", json={"bank_name": "Monzo", "owner_name": "Al"})
        assert resp.status_code == 400
        assert resp.json() == {"message": settings.messages.owner_name_too_short}

    def test_create_rejects_symbols_in_name(self, client, settings):
        resp = client.put("/api/v1/accounts", json={"bank_name": "Monzo", "owner_name": "<script>"})
        assert resp.status_code == 400
        assert resp.json() == {"message": settings.messages.invalid_create_criteria}

    def test_settings_dependency_can_be_overridden(self, bank):
        app = create_app(Settings(), bank)
        app.dependency_overrides[settings_from_request] = lambda: Settings(min_name_length=12)
        resp = TestClient(app).put(
            "/api/v1/accounts", json={"bank_name": "Monzo Bank Ltd", "owner_name": "Carol King"}
        )
        assert resp.status_code == 400
        assert resp.json() == {"message": Settings().messages.owner_name_too_short}


class TestTransactionRoutes:
    def test_withdraw_insufficient(self, client, settings):
        resp = client.post("/api/v1/withdraw", json={**ALICE, "amount": 100.0})
        assert resp.status_code == 422
        assert resp.json() == {"message": settings.messages.insufficient_account_balance}

    def test_deposit_rounds_amount(self, client, settings):
        resp = client.post(
            "/api/v1/deposit", json={"target_account_no": ALICE["account_number"], "amount": 10.555}
        )
        assert resp.status_code == 200
        assert resp.json() == {"message": settings.messages.success}

        balance = client.post("/api/v1/accounts", json=ALICE).json()["current_balance"]
        assert balance == 60.56

    def test_deposit_unknown_account(self, client):
        resp = client.post("/api/v1/deposit", json={"target_account_no": "00000000", "amount": 5})
        assert resp.status_code == 404

    def test_deposit_amount_too_large(self, client):
        resp = client.post(
            "/api/v1/deposit", json={"target_account_no": ALICE["account_number"], "amount": 1e9}
        )
        assert resp.status_code == 400
        assert "1000000.00" in resp.json()["message"]

    def test_transfer(self, client):
        resp = client.post(
            "/api/v1/transactions",
            json={"source_account": BOB, "target_account": ALICE, "amount": 250, "reference": "rent"},
        )
        assert resp.status_code == 200
        assert resp.json() is True

        alice = client.post("/api/v1/accounts", json=ALICE).json()
        assert alice["current_balance"] == 300.0
        assert alice["transactions"][0]["reference"] == "rent"
        assert alice["transactions"][0]["amount"] == 250.0

    def test_transfer_rejected(self, client, settings):
        resp = client.post(
            "/api/v1/transactions",
            json={"source_account": ALICE, "target_account": BOB, "amount": 75},
        )
        assert resp.status_code == 422
        assert resp.json() == {"message": settings.messages.invalid_transaction}


class TestStructuralValidation:
    def test_missing_fields_map(self, client):
        resp = client.post("/api/v1/withdraw", json={"sort_code": "53-68-92"})
        assert resp.status_code == 400
        body = resp.json()
        assert set(body) == {"account_number", "amount"}

    def test_nested_field_path(self, client):
        resp = client.post(
            "/api/v1/transactions",
            json={"source_account": {"sort_code": "53-68-92"}, "target_account": BOB, "amount": 1},
        )
        assert resp.status_code == 400
        assert "source_account.account_number" in resp.json()

    def test_wrong_type(self, client):
        resp = client.post("/api/v1/deposit", json={"target_account_no": "73084635", "amount": "lots"})
        assert resp.status_code == 400
        assert "amount" in resp.json()

    @pytest.mark.parametrize("amount", [True, "12.5"])
    def test_amount_is_not_coerced(self, client, amount):
        resp = client.post(
            "/api/v1/deposit", json={"target_account_no": ALICE["account_number"], "amount": amount}
        )
        assert resp.status_code == 400
        assert "amount" in resp.json()

        balance = client.post("/api/v1/accounts", json=ALICE).json()["current_balance"]
        assert balance == 50.0

    def test_withdraw_rejects_boolean_amount(self, client):
        resp = client.post("/api/v1/withdraw", json={**ALICE, "amount": False})
        assert resp.status_code == 400
        assert set(resp.json()) == {"amount"}

    def test_integer_amount_still_accepted(self, client, settings):
        resp = client.post(
            "/api/v1/deposit", json={"target_account_no": ALICE["account_number"], "amount": 10}
        )
        assert resp.status_code == 200
        assert resp.json() == {"message": settings.messages.success}


class TestSeeding:
    def test_demo_accounts_seeded_once(self):
        bank = InMemoryBank()
        client = TestClient(create_app(Settings(seed_demo_data=True), bank))
        demo = DEMO_ACCOUNTS[0]
        resp = client.post(
            "/api/v1/accounts",
            json={"sort_code": demo["sort_code"], "account_number": demo["account_number"]},
        )
        assert resp.status_code == 200
        assert bank.seed_demo() == 0
        assert len(bank.accounts) == len(DEMO_ACCOUNTS)
