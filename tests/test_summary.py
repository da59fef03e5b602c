"""Dashboard and reports aggregation over a month of transactions."""

import pytest


def add(client, headers, amount, type="expense", date="2024-03-10", **extra):
    payload = {"description": extra.pop("description", "item"), "amount": amount, "type": type, "date": date}
    payload.update(extra)
    response = client.post("/api/transactions", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def new_category(client, headers, name, type="expense"):
    return client.post("/api/categories", json={"name": name, "type": type}, headers=headers).json()


def new_merchant(client, headers, name):
    return client.post("/api/merchants", json={"name": name}, headers=headers).json()


class TestDashboard:

    def test_empty_month(self, client, auth):
        body = client.get("/api/dashboard?month=2024-03", headers=auth).json()
        assert body["month"] == "2024-03"
        assert body["income"] == 0
        assert body["expense"] == 0
        assert body["balance"] == 0
        assert body["trend"] == []
        assert body["topCategories"] == []
        assert body["topMerchants"] == []
        assert body["recentTransactions"] == []
        assert body["alerts"] == []

    def test_defaults_to_current_month(self, client, auth):
        response = client.get("/api/dashboard", headers=auth)
        assert response.status_code == 200
        assert len(response.json()["month"]) == 7

    def test_invalid_month(self, client, auth):
        response = client.get("/api/dashboard?month=2024-3", headers=auth)
        assert response.status_code == 400
        assert response.json()["message"] == "Invalid month format. Use YYYY-MM"

    def test_totals_and_balance(self, client, auth):
        add(client, auth, 3000, type="income", date="2024-03-01")
        add(client, auth, 120.25, date="2024-03-02")
        add(client, auth, 79.75, date="2024-03-31")
        add(client, auth, 500, date="2024-04-01")  # next month

        body = client.get("/api/dashboard?month=2024-03", headers=auth).json()
        assert body["income"] == 3000
        assert body["expense"] == 200
        assert body["balance"] == body["income"] - body["expense"]

    def test_trend_is_net_per_day_in_date_order(self, client, auth):
        add(client, auth, 50, date="2024-03-05")
        add(client, auth, 100, type="income", date="2024-03-02")
        add(client, auth, 30, date="2024-03-02")

        trend = client.get("/api/dashboard?month=2024-03", headers=auth).json()["trend"]
        assert trend == [
            {"date": "2024-03-02", "value": 70},
            {"date": "2024-03-05", "value": -50},
        ]

    def test_top_categories_sorted_and_capped(self, client, auth):
        for index, amount in enumerate([10, 70, 30, 60, 20, 50, 40]):
            category = new_category(client, auth, f"Cat {index}")
            add(client, auth, amount, categoryId=category["id"])

        top = client.get("/api/dashboard?month=2024-03", headers=auth).json()["topCategories"]
        assert len(top) == 5
        assert [c["value"] for c in top] == [70, 60, 50, 40, 30]
        assert top[0]["name"] == "Cat 1"

    def test_top_lists_only_count_expenses(self, client, auth):
        salary = new_category(client, auth, "Salary", type="income")
        food = new_category(client, auth, "Food")
        employer = new_merchant(client, auth, "Employer")
        add(client, auth, 5000, type="income", categoryId=salary["id"], merchantId=employer["id"])
        add(client, auth, 15, categoryId=food["id"])
        add(client, auth, 5)  # no category, no merchant

        body = client.get("/api/dashboard?month=2024-03", headers=auth).json()
        assert body["topCategories"] == [{"id": food["id"], "name": "Food", "value": 15}]
        assert body["topMerchants"] == []

    def test_top_merchants_group_amounts(self, client, auth):
        diner = new_merchant(client, auth, "Diner")
        market = new_merchant(client, auth, "Market")
        add(client, auth, 10, merchantId=diner["id"])
        add(client, auth, 15, merchantId=diner["id"])
        add(client, auth, 20, merchantId=market["id"])

        top = client.get("/api/dashboard?month=2024-03", headers=auth).json()["topMerchants"]
        assert [(m["name"], m["value"]) for m in top] == [("Diner", 25), ("Market", 20)]

    def test_recent_transactions_capped_at_ten(self, client, auth):
        for day in range(1, 13):
            add(client, auth, day, date=f"2024-03-{day:02d}", description=f"day {day}")

        recent = client.get("/api/dashboard?month=2024-03", headers=auth).json()["recentTransactions"]
        assert len(recent) == 10
        assert recent[0]["date"] == "2024-03-12"
        assert recent[-1]["date"] == "2024-03-03"
        assert recent[0]["category"] == "Uncategorized"

    def test_other_users_data_is_invisible(self, client, auth, other_auth):
        add(client, other_auth, 999)
        body = client.get("/api/dashboard?month=2024-03", headers=auth).json()
        assert body["expense"] == 0
        assert body["recentTransactions"] == []
        assert body["alerts"] == []

    def test_requires_auth(self, client):
        assert client.get("/api/dashboard?month=2024-03").status_code == 401


class TestReports:

    @pytest.fixture
    def month_data(self, client, auth):
        categories = [new_category(client, auth, f"Cat {i}") for i in range(6)]
        for category, amount in zip(categories, [5, 15, 25, 35, 45, 55]):
            add(client, auth, amount, categoryId=category["id"])
        shop = new_merchant(client, auth, "Shop")
        add(client, auth, 12, merchantId=shop["id"])
        add(client, auth, 1000, type="income")
        return categories

    def test_categories_are_not_capped(self, client, auth, month_data):
        body = client.get("/api/reports?month=2024-03", headers=auth).json()
        values = [c["value"] for c in body["categories"]]
        assert len(values) == 6
        assert values == sorted(values, reverse=True)

    def test_merchants_and_totals(self, client, auth, month_data):
        body = client.get("/api/reports?month=2024-03", headers=auth).json()
        assert body["merchants"] == [{"id": body["merchants"][0]["id"], "name": "Shop", "value": 12}]
        assert body["balance"] == body["income"] - body["expense"]
        assert body["expense"] == 192

    def test_deleted_merchant_drops_out(self, client, auth, month_data):
        merchant_id = client.get("/api/merchants", headers=auth).json()[0]["id"]
        client.delete(f"/api/merchants/{merchant_id}", headers=auth)

        body = client.get("/api/reports?month=2024-03", headers=auth).json()
        assert body["merchants"] == []
