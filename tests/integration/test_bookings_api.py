"""Integration tests for the /api/bookings endpoints."""

import pytest
from bson import ObjectId


async def _plans(api):
    return (await api.get("/api/plans")).json()


async def _book(api, headers, plan_id, date="2026-11-02", time="10:00 AM", **extra):
    body = {"plan": plan_id, "date": date, "time": time, **extra}
    return await api.post("/api/bookings", headers=headers, json=body)


class TestCreateBooking:
    async def test_requires_authentication(self, api, db):
        plan = (await _plans(api))[0]
        resp = await _book(api, {}, plan["_id"])
        assert resp.status_code == 401
        assert await db["bookings"].count_documents({}) == 0

    async def test_created_and_confirmed(self, api, sign_in):
        headers, user = await sign_in()
        plan = (await _plans(api))[1]
        resp = await _book(api, headers, plan["_id"], specialRequests="Quiet corner please")
        assert resp.status_code == 201
        body = resp.json()
        assert body["_id"]
        assert body["status"] == "confirmed"
        assert body["date"] == "2026-11-02"
        assert body["time"] == "10:00 AM"
        assert body["specialRequests"] == "Quiet corner please"
        assert body["createdAt"] is not None

    async def test_plan_and_user_expanded(self, api, sign_in):
        headers, user = await sign_in()
        plan = (await _plans(api))[0]
        body = (await _book(api, headers, plan["_id"])).json()
        assert body["plan"] == plan
        assert body["user"]["_id"] == user["_id"]
        assert body["user"]["email"] == user["email"]

    async def test_special_requests_optional(self, api, sign_in):
        headers, _ = await sign_in()
        plan = (await _plans(api))[0]
        body = (await _book(api, headers, plan["_id"])).json()
        assert body["specialRequests"] is None

    @pytest.mark.parametrize("missing", ["plan", "date", "time"])
    async def test_missing_field(self, api, sign_in, missing):
        headers, _ = await sign_in()
        plan = (await _plans(api))[0]
        body = {"plan": plan["_id"], "date": "2026-11-02", "time": "10:00 AM"}
        del body[missing]
        resp = await api.post("/api/bookings", headers=headers, json=body)
        assert resp.status_code == 400
        assert resp.json()["code"] == "validation_error"

    async def test_blank_field(self, api, sign_in):
        headers, _ = await sign_in()
        plan = (await _plans(api))[0]
        resp = await _book(api, headers, plan["_id"], time="  ")
        assert resp.status_code == 400

    async def test_unknown_plan(self, api, db, sign_in):
        headers, _ = await sign_in()
        resp = await _book(api, headers, str(ObjectId()))
        assert resp.status_code == 404
        assert resp.json()["field"] == "plan"
        assert await db["bookings"].count_documents({}) == 0

    async def test_malformed_plan_id(self, api, sign_in):
        headers, _ = await sign_in()
        resp = await _book(api, headers, "plan-a")
        assert resp.status_code == 400
        assert resp.json()["field"] == "plan"


class TestListBookings:
    async def test_requires_authentication(self, api):
        resp = await api.get("/api/bookings/user")
        assert resp.status_code == 401

    async def test_empty(self, api, sign_in):
        headers, _ = await sign_in()
        resp = await api.get("/api/bookings/user", headers=headers)
        assert resp.status_code == 200
        assert resp.json() == []

    async def test_newest_first_with_plan_expanded(self, api, sign_in):
        headers, user = await sign_in()
        plans = await _plans(api)
        first = (await _book(api, headers, plans[0]["_id"], date="2026-11-02")).json()
        second = (await _book(api, headers, plans[2]["_id"], date="2026-11-05")).json()

        resp = await api.get("/api/bookings/user", headers=headers)
        assert resp.status_code == 200
        listed = resp.json()
        assert [b["_id"] for b in listed] == [second["_id"], first["_id"]]
        assert listed[0]["plan"]["name"] == "Plan C"
        assert listed[1]["plan"]["name"] == "Plan A"
        assert listed[0]["user"] == user["_id"]

    async def test_only_own_bookings(self, api, sign_in):
        alice, _ = await sign_in("alice@example.com")
        bob, _ = await sign_in("bob@example.com")
        plan = (await _plans(api))[0]
        await _book(api, alice, plan["_id"])

        assert len((await api.get("/api/bookings/user", headers=alice)).json()) == 1
        assert (await api.get("/api/bookings/user", headers=bob)).json() == []


class TestCancelBooking:
    async def test_cancels(self, api, sign_in):
        headers, _ = await sign_in()
        plan = (await _plans(api))[0]
        booking = (await _book(api, headers, plan["_id"])).json()

        resp = await api.put(f"/api/bookings/{booking['_id']}/cancel", headers=headers)
        assert resp.status_code == 200
        assert resp.json()["status"] == "cancelled"
        assert resp.json()["plan"]["_id"] == plan["_id"]

        listed = (await api.get("/api/bookings/user", headers=headers)).json()
        assert listed[0]["status"] == "cancelled"

    async def test_cancelling_twice_is_idempotent(self, api, sign_in):
        headers, _ = await sign_in()
        plan = (await _plans(api))[0]
        booking = (await _book(api, headers, plan["_id"])).json()

        first = await api.put(f"/api/bookings/{booking['_id']}/cancel", headers=headers)
        second = await api.put(f"/api/bookings/{booking['_id']}/cancel", headers=headers)
        assert first.status_code == second.status_code == 200
        assert second.json()["status"] == "cancelled"

    async def test_other_users_booking(self, api, db, sign_in):
        alice, _ = await sign_in("alice@example.com")
        bob, _ = await sign_in("bob@example.com")
        plan = (await _plans(api))[0]
        booking = (await _book(api, alice, plan["_id"])).json()

        resp = await api.put(f"/api/bookings/{booking['_id']}/cancel", headers=bob)
        assert resp.status_code == 404
        stored = await db["bookings"].find_one({"_id": ObjectId(booking["_id"])})
        assert stored["status"] == "confirmed"

    @pytest.mark.parametrize("booking_id", [str(ObjectId()), "nope"], ids=["unknown", "malformed"])
    async def test_not_found(self, api, sign_in, booking_id):
        headers, _ = await sign_in()
        resp = await api.put(f"/api/bookings/{booking_id}/cancel", headers=headers)
        assert resp.status_code == 404

    async def test_requires_authentication(self, api):
        resp = await api.put(f"/api/bookings/{ObjectId()}/cancel")
        assert resp.status_code == 401
