from sqlalchemy import select

from app import models
from app.models.enums import NotificationEvent, UserRole, WorkSpaceType
from tests.conftest import auth_headers

LOCATION_PAYLOAD = {
    "name": "The Loft",
    "address": "1 Old Street",
    "optionalAddress": "Floor 3",
    "latitude": 51.5264,
    "longitude": -0.0878,
    "town": "London",
    "postcode": "EC1V 9HL",
    "description": "Bright loft space with skylights",
    "area": "shoreditch",
    "workSpaceTypes": "desk, private-office",
}


async def test_create_location_and_view_it(client, seller, area, notifier):
    response = await client.post("/api/seller/location", json=LOCATION_PAYLOAD, headers=auth_headers(seller))
    assert response.status_code == 201
    location_id = response.json()["id"]

    response = await client.get(f"/api/seller/location/{location_id}", headers=auth_headers(seller))
    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "The Loft"
    assert body["optionalAddress"] == "Floor 3"
    assert body["area"] == "Shoreditch"
    assert body["postcode"] == "EC1V 9HL"
    assert body["workSpaceTypes"] == ["desk", "private-office"]

    assert notifier.events() == [NotificationEvent.LOCATION_ADDED]
    recipient_id, _, context = notifier.emails[0]
    assert recipient_id == seller.id
    assert str(location_id) in context["adminLink"]


async def test_create_location_reports_missing_fields(client, seller, area, notifier):
    payload = {k: v for k, v in LOCATION_PAYLOAD.items() if k not in ("name", "postcode")}
    response = await client.post("/api/seller/location", json=payload, headers=auth_headers(seller))
    assert response.status_code == 400
    attributes = {error["attribute"] for error in response.json()["errors"]}
    assert attributes == {"name", "postcode"}
    assert notifier.emails == []


async def test_create_location_rejects_unknown_area(client, seller, area, db):
    payload = dict(LOCATION_PAYLOAD, area="atlantis")
    response = await client.post("/api/seller/location", json=payload, headers=auth_headers(seller))
    assert response.status_code == 400
    assert response.json() == {"errors": [{"attribute": "area", "details": "This value do not exist"}]}

    result = await db.execute(select(models.Location))
    assert result.scalars().all() == []


async def test_create_location_with_empty_body(client, seller):
    response = await client.post("/api/seller/location", content=b"", headers=auth_headers(seller))
    assert response.status_code == 400
    assert response.json() == {"message": "Requested data is empty"}


async def test_buyer_cannot_create_location(client, buyer, area):
    response = await client.post("/api/seller/location", json=LOCATION_PAYLOAD, headers=auth_headers(buyer))
    assert response.status_code == 403


async def test_requests_without_token_are_rejected(client):
    response = await client.get("/api/seller/locations")
    assert response.status_code == 401


async def test_update_location_changes_only_given_fields(client, seller, make_location, fetch):
    location = await make_location(seller)
    response = await client.put(
        f"/api/seller/location/{location.id}",
        json={"name": "The Attic", "area": None},
        headers=auth_headers(seller),
    )
    assert response.status_code == 200
    assert response.json() == {"message": "Location successfully updated"}

    stored = await fetch(models.Location, location.id)
    assert stored.name == "The Attic"
    assert stored.address == "1 Old Street"
    assert stored.area_id == location.area_id


async def test_update_location_moves_to_another_area(client, seller, make_location, db, fetch):
    location = await make_location(seller)
    other = models.Area(name="Camden", slug="camden")
    db.add(other)
    await db.commit()

    response = await client.put(
        f"/api/seller/location/{location.id}", json={"area": "camden"}, headers=auth_headers(seller)
    )
    assert response.status_code == 200
    assert (await fetch(models.Location, location.id)).area_id == other.id


async def test_update_location_rejects_invalid_values(client, seller, make_location, fetch):
    location = await make_location(seller)
    response = await client.put(
        f"/api/seller/location/{location.id}",
        json={"latitude": 123, "postcode": "X" * 11},
        headers=auth_headers(seller),
    )
    assert response.status_code == 400
    attributes = {error["attribute"] for error in response.json()["errors"]}
    assert attributes == {"latitude", "postcode"}
    assert (await fetch(models.Location, location.id)).latitude == location.latitude


async def test_update_location_rejects_unknown_area(client, seller, make_location):
    location = await make_location(seller)
    response = await client.put(
        f"/api/seller/location/{location.id}", json={"area": "atlantis"}, headers=auth_headers(seller)
    )
    assert response.status_code == 400
    assert response.json()["errors"][0]["attribute"] == "area"


async def test_foreign_location_looks_missing(client, seller, make_user, make_location, notifier, fetch):
    other_seller = await make_user(UserRole.SELLER)
    location = await make_location(other_seller)
    expected = {"message": f"Location with id {location.id} was not found"}

    response = await client.get(f"/api/seller/location/{location.id}", headers=auth_headers(seller))
    assert (response.status_code, response.json()) == (400, expected)

    response = await client.put(
        f"/api/seller/location/{location.id}", json={"name": "Mine now"}, headers=auth_headers(seller)
    )
    assert (response.status_code, response.json()) == (400, expected)

    response = await client.delete(f"/api/seller/location/{location.id}", headers=auth_headers(seller))
    assert (response.status_code, response.json()) == (400, expected)

    response = await client.get("/api/seller/location/9999", headers=auth_headers(seller))
    assert response.json() == {"message": "Location with id 9999 was not found"}

    assert notifier.emails == []
    assert (await fetch(models.Location, location.id)).name == "The Loft"


async def test_delete_location_cascades_to_workspaces(
    client, seller, buyer, make_location, make_workspace, make_viewing, notifier, fetch
):
    location = await make_location(seller)
    workspace = await make_workspace(location)
    viewing = await make_viewing(workspace, buyer)

    response = await client.delete(f"/api/seller/location/{location.id}", headers=auth_headers(seller))
    assert response.status_code == 204

    assert await fetch(models.Location, location.id) is None
    assert await fetch(models.WorkSpace, workspace.id) is None
    assert await fetch(models.Viewing, viewing.id) is None
    assert notifier.events() == [NotificationEvent.LOCATION_DELETED]


async def test_add_workspace_to_location(client, seller, make_location, fetch):
    location = await make_location(seller)
    payload = {
        "type": "private-office",
        "quantity": 2,
        "price": 1200,
        "description": "Two-person office",
        "size": 15,
        "capacity": 2,
        "minContractLength": 3,
        "availableFrom": 1767225600,
        "opensFrom": "08:00",
        "closesAt": "19:30",
    }
    response = await client.post(
        f"/api/seller/location/{location.id}/workspace", json=payload, headers=auth_headers(seller)
    )
    assert response.status_code == 201

    workspace = await fetch(models.WorkSpace, response.json()["id"])
    assert workspace.location_id == location.id
    assert workspace.status == "active"
    assert workspace.min_contract_length == 3
    assert workspace.available_from is not None


async def test_add_workspace_requires_fields_for_its_type(client, seller, make_location):
    location = await make_location(seller)
    payload = {"type": "private-office", "quantity": 1, "price": 900, "description": "Office"}
    response = await client.post(
        f"/api/seller/location/{location.id}/workspace", json=payload, headers=auth_headers(seller)
    )
    assert response.status_code == 400
    attributes = [error["attribute"] for error in response.json()["errors"]]
    assert attributes == ["size", "capacity", "minContractLength", "availableFrom"]


async def test_add_monthly_desk_requires_contract_length(client, seller, make_location):
    location = await make_location(seller)
    payload = {
        "type": "desk",
        "deskType": "monthly_fixed_desk",
        "quantity": 5,
        "price": 250,
        "description": "Fixed desks",
    }
    response = await client.post(
        f"/api/seller/location/{location.id}/workspace", json=payload, headers=auth_headers(seller)
    )
    assert response.status_code == 400
    assert response.json()["errors"] == [
        {"attribute": "minContractLength", "details": "This value should not be blank."}
    ]


async def test_seller_locations_grouped_by_type(
    client, seller, buyer, make_user, make_location, make_workspace, make_viewing
):
    location = await make_location(seller)
    office = await make_workspace(location, type=WorkSpaceType.PRIVATE_OFFICE.value, size=30)
    room = await make_workspace(location, type=WorkSpaceType.MEETING_ROOM.value, size=12)
    desk = await make_workspace(location, type=WorkSpaceType.DESK.value, desk_type="hourly_hot_desk", quantity=8)
    await make_workspace(location, type="podcast-booth")
    await make_viewing(office, buyer)
    await make_viewing(office, buyer)

    other_seller = await make_user(UserRole.SELLER)
    await make_location(other_seller, name="Not mine")

    response = await client.get("/api/seller/locations", headers=auth_headers(seller))
    assert response.status_code == 200
    locations = response.json()["locations"]
    assert len(locations) == 1

    entry = locations[0]
    assert entry["name"] == "The Loft"
    assert [row["id"] for row in entry["privateOffices"]] == [office.id]
    assert [row["id"] for row in entry["meetingRooms"]] == [room.id]
    assert [row["id"] for row in entry["desks"]] == [desk.id]
    assert entry["privateOffices"][0]["viewing"] == 2
    assert entry["privateOffices"][0]["bookings"] == 0
    assert entry["privateOffices"][0]["size"] == 30
    assert entry["desks"][0]["type"] == "hourly_hot_desk"
    assert entry["desks"][0]["quantity"] == 8


async def test_seller_without_locations_gets_empty_list(client, seller):
    response = await client.get("/api/seller/locations", headers=auth_headers(seller))
    assert response.json() == {"locations": []}


async def test_add_workspace_of_unknown_type(client, seller, make_location):
    location = await make_location(seller)
    payload = {"type": "podcast-booth", "quantity": 1, "price": 40, "description": "Booth"}
    response = await client.post(
        f"/api/seller/location/{location.id}/workspace", json=payload, headers=auth_headers(seller)
    )
    assert response.status_code == 400
    assert [error["attribute"] for error in response.json()["errors"]] == ["type"]


async def test_update_location_with_blank_area_keeps_area(client, seller, make_location, fetch):
    location = await make_location(seller)
    response = await client.put(
        f"/api/seller/location/{location.id}",
        json={"area": "", "town": "Hackney"},
        headers=auth_headers(seller),
    )
    assert response.status_code == 200

    stored = await fetch(models.Location, location.id)
    assert stored.area_id == location.area_id
    assert stored.town == "Hackney"


async def test_add_workspace_available_from_beyond_calendar(client, seller, make_location, db):
    location = await make_location(seller)
    payload = {
        "type": "private-office",
        "quantity": 1,
        "price": 900,
        "description": "Corner office",
        "size": 12,
        "capacity": 2,
        "minContractLength": 6,
        "availableFrom": 10**15,
    }
    response = await client.post(
        f"/api/seller/location/{location.id}/workspace", json=payload, headers=auth_headers(seller)
    )
    assert response.status_code == 400
    assert [error["attribute"] for error in response.json()["errors"]] == ["availableFrom"]

    result = await db.execute(select(models.WorkSpace))
    assert result.scalars().all() == []
