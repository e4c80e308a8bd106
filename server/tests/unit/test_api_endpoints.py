"""Integration tests for API endpoints."""

from datetime import date, timedelta
from uuid import uuid4

import pytest


@pytest.mark.asyncio
async def test_accommodation_endpoints(test_client, sample_accommodation_data):
    """Test accommodation create, list, update and delete over HTTP."""
    response = await test_client.post("/v1/accommodation/create", json=sample_accommodation_data)

    assert response.status_code == 200
    created = response.json()
    assert created["name"] == "길조호텔"
    assert len(created["rooms"]) == 2
    assert created["created_at"] is not None

    response = await test_client.post("/v1/accommodation/list", json={})
    assert response.status_code == 200
    assert [a["id"] for a in response.json()["items"]] == [created["id"]]

    response = await test_client.post(
        "/v1/accommodation/update",
        json={"id": created["id"], "details": "조식 포함"}
    )
    assert response.status_code == 200
    assert response.json()["details"] == "조식 포함"

    response = await test_client.post("/v1/accommodation/delete", json={"id": created["id"]})
    assert response.status_code == 200
    assert response.json() == {"id": created["id"], "deleted": True}

    response = await test_client.post("/v1/accommodation/get", json={"id": created["id"]})
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_room_endpoints(test_client):
    """Test adding and updating a room type."""
    response = await test_client.post("/v1/accommodation/create", json={"name": "길조호텔"})
    accommodation_id = response.json()["id"]

    response = await test_client.post(
        "/v1/room/add",
        json={"accommodation_id": accommodation_id, "name": "스탠다드", "price": 120000}
    )
    assert response.status_code == 200
    room = response.json()
    assert room["capacity"] == 2

    response = await test_client.post("/v1/room/update", json={"id": room["id"], "capacity": 3})
    assert response.status_code == 200
    assert response.json()["capacity"] == 3

    response = await test_client.post("/v1/room/delete", json={"id": room["id"]})
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_accommodation_name_too_short(test_client):
    """Test validation errors are Problem Details with violations."""
    response = await test_client.post("/v1/accommodation/create", json={"name": "a"})

    assert response.status_code == 422
    data = response.json()
    assert data["status"] == 422
    assert response.headers["content-type"].startswith("application/problem+json")
    assert any(v["path"].endswith("name") for v in data["violations"])


@pytest.mark.asyncio
async def test_ticket_endpoints(test_client, sample_ticket_data):
    """Test ticket create, update and list over HTTP."""
    response = await test_client.post("/v1/ticket/create", json=sample_ticket_data)
    assert response.status_code == 200
    ticket = response.json()

    response = await test_client.post("/v1/ticket/update", json={"id": ticket["id"], "price": 60000})
    assert response.json()["price"] == 60000

    response = await test_client.post("/v1/ticket/list", json={})
    assert response.json()["items"][0]["name"] == "종일권"

    response = await test_client.post("/v1/ticket/delete", json={"id": ticket["id"]})
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_reservation_endpoints(test_client, sample_reservation_data, sample_ticket_data):
    """Test the reservation lifecycle over HTTP."""
    ticket = (await test_client.post("/v1/ticket/create", json=sample_ticket_data)).json()

    payload = {**sample_reservation_data, "ticket_id": ticket["id"], "accommodation_id": "", "balance": 1}
    response = await test_client.post("/v1/reservation/create", json=payload)

    assert response.status_code == 200
    reservation = response.json()
    assert reservation["balance"] == 200000
    assert reservation["ticket_name"] == "종일권"
    assert reservation["accommodation_id"] is None
    assert reservation["date"] == sample_reservation_data["date"]

    response = await test_client.post("/v1/reservation/search", json={})
    assert response.status_code == 200
    data = response.json()
    assert [r["id"] for r in data["items"]] == [reservation["id"]]
    assert data["date_from"] == date.today().isoformat()
    assert data["date_to"] == (date.today() + timedelta(days=7)).isoformat()
    assert data["sort"] == {"key": "reservation_type", "direction": "asc"}

    response = await test_client.post(
        "/v1/reservation/update",
        json={"id": reservation["id"], "total_amount": 350000}
    )
    assert response.json()["balance"] == 250000

    response = await test_client.post(
        "/v1/reservation/status",
        json={"id": reservation["id"], "status": "completed"}
    )
    assert response.json()["status"] == "completed"

    response = await test_client.post("/v1/reservation/linkable", json={})
    assert response.json()["items"][0]["customer_name"] == "홍길동"

    response = await test_client.post("/v1/reservation/delete", json={"id": reservation["id"]})
    assert response.status_code == 200

    response = await test_client.post("/v1/reservation/get", json={"id": reservation["id"]})
    assert response.status_code == 404
    data = response.json()
    assert data["resource_type"] == "reservation"


@pytest.mark.asyncio
async def test_reservation_invalid_status(test_client, sample_reservation_data):
    """Test an unknown status is rejected."""
    response = await test_client.post(
        "/v1/reservation/create",
        json={**sample_reservation_data, "status": "pending"}
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_reservation_invalid_sort_key(test_client):
    """Test sorting by an unknown column is rejected."""
    response = await test_client.post(
        "/v1/reservation/search",
        json={"sort": {"key": "phone", "direction": "asc"}}
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_sale_endpoints(test_client, sample_sale_data):
    """Test recording and listing sales over HTTP."""
    response = await test_client.post(
        "/v1/sale/create",
        json={**sample_sale_data, "reservation_id": "none"}
    )
    assert response.status_code == 200
    sale = response.json()
    assert sale["reservation_id"] is None
    assert sale["customer_name"] is None

    await test_client.post(
        "/v1/sale/create",
        json={"item_name": "식사", "amount": 30000, "category": "food"}
    )

    response = await test_client.post("/v1/sale/list", json={})
    data = response.json()
    assert len(data["items"]) == 2
    assert data["total_amount"] == 75000

    response = await test_client.post("/v1/sale/delete", json={"id": sale["id"]})
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_sale_negative_amount(test_client):
    """Test negative amounts are rejected."""
    response = await test_client.post("/v1/sale/create", json={"item_name": "환불", "amount": -100})

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_dashboard_endpoint(test_client):
    """Test the dashboard statistics endpoint."""
    await test_client.post(
        "/v1/sale/create",
        json={"item_name": "리프트권", "amount": 70000, "category": "ski", "created_at": "2026-10-19T10:00:00"}
    )

    response = await test_client.post(
        "/v1/dashboard/stats",
        json={"view_mode": "weekly", "reference_date": "2026-10-19"}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["start"] == "2026-10-18"
    assert data["end"] == "2026-10-24"
    assert data["label"] == "Oct 18 - Oct 24"
    assert data["total_sales"] == 70000
    assert data["visitor_count"] == 1
    assert len(data["chart"]) == 7


@pytest.mark.asyncio
async def test_profile_me_without_profile(test_client, auth_headers):
    """A verified caller without a profile row is an employee."""
    user_id = uuid4()

    response = await test_client.post("/v1/profile/me", json={}, headers=auth_headers(user_id, "new@example.com"))

    assert response.status_code == 200
    data = response.json()
    assert data["id"] == str(user_id)
    assert data["role"] == "employee"
    assert data["email"] == "new@example.com"


@pytest.mark.asyncio
async def test_profile_me_staff_member(test_client, admin_headers, auth_headers):
    """A registered staff member sees their own name and stored role."""
    response = await test_client.post(
        "/v1/profile/create",
        json={"email": "desk@example.com", "name": "박프런트"},
        headers=admin_headers
    )
    staff = response.json()
    staff_headers = auth_headers(staff["id"], staff["email"])

    response = await test_client.post("/v1/profile/me", json={}, headers=staff_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["id"] == staff["id"]
    assert data["name"] == "박프런트"
    assert data["role"] == "employee"

    response = await test_client.post(
        "/v1/profile/update",
        json={"id": staff["id"], "role": "admin"},
        headers=admin_headers
    )
    assert response.status_code == 200

    response = await test_client.post("/v1/profile/me", json={}, headers=staff_headers)
    assert response.json()["role"] == "admin"


@pytest.mark.asyncio
async def test_profile_me_missing_auth(test_client):
    """Test the identity endpoint without a token."""
    response = await test_client.post("/v1/profile/me", json={})

    assert response.status_code == 401
    data = response.json()
    assert data["status"] == 401
    assert "authorization" in data["title"].lower()


@pytest.mark.asyncio
async def test_profile_admin_flow(test_client, admin_profile, admin_headers):
    """Admins can register, update and remove staff."""
    response = await test_client.post("/v1/profile/me", json={}, headers=admin_headers)
    assert response.json()["role"] == "admin"

    response = await test_client.post(
        "/v1/profile/create",
        json={"email": "staff@example.com", "name": "김직원"},
        headers=admin_headers
    )
    assert response.status_code == 200
    staff = response.json()
    assert staff["role"] == "employee"

    response = await test_client.post(
        "/v1/profile/create",
        json={"email": "staff@example.com", "name": "중복"},
        headers=admin_headers
    )
    assert response.status_code == 409

    response = await test_client.post(
        "/v1/profile/update",
        json={"id": staff["id"], "phone": "010-5555-6666"},
        headers=admin_headers
    )
    assert response.json()["phone"] == "010-5555-6666"

    response = await test_client.post("/v1/profile/list", json={}, headers=admin_headers)
    assert {p["email"] for p in response.json()["items"]} == {"admin@example.com", "staff@example.com"}

    response = await test_client.post("/v1/profile/delete", json={"id": staff["id"]}, headers=admin_headers)
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_profile_create_requires_admin(test_client, test_session, auth_headers):
    """Employees cannot manage staff accounts."""
    from resort_desk.models.profile import Profile

    employee = Profile(email="employee@example.com", name="직원", role="employee")
    test_session.add(employee)
    await test_session.commit()

    response = await test_client.post(
        "/v1/profile/create",
        json={"email": "other@example.com", "name": "다른직원"},
        headers=auth_headers(employee.id, employee.email)
    )

    assert response.status_code == 403
    assert response.json()["required_role"] == "admin"


@pytest.mark.asyncio
async def test_invalid_token_rejected(test_client, auth_headers):
    """Tokens signed with another secret are rejected."""
    response = await test_client.post(
        "/v1/profile/list",
        json={},
        headers=auth_headers(uuid4(), secret="a-different-secret-of-sufficient-length")
    )

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_reservation_search_inverted_range(test_client):
    """Test that an inverted date range is a 400 Problem."""
    response = await test_client.post(
        "/v1/reservation/search",
        json={"date_from": "2026-10-20", "date_to": "2026-10-19"}
    )

    assert response.status_code == 400
    data = response.json()
    assert data["title"] == "Validation Error"
    assert data["errors"]["date_from"] == "2026-10-20"


@pytest.mark.asyncio
async def test_reservation_search_toggle(test_client):
    """Clicking the active column header flips the direction."""
    response = await test_client.post(
        "/v1/reservation/search",
        json={"show_all": True, "sort": {"key": "date", "direction": "asc"}, "toggle": "date"}
    )

    assert response.status_code == 200
    assert response.json()["sort"] == {"key": "date", "direction": "desc"}

    response = await test_client.post(
        "/v1/reservation/search",
        json={"show_all": True, "sort": {"key": "date", "direction": "desc"}, "toggle": "status"}
    )
    assert response.json()["sort"] == {"key": "status", "direction": "asc"}
