from app.crud import crud_user
from app.models.enums import UserRole


async def test_login_returns_bearer_token(client, db):
    await crud_user.create_user(db, email="seller@example.com", password="s3cret-pass", role=UserRole.SELLER)

    response = await client.post(
        "/api/auth/login", data={"username": "seller@example.com", "password": "s3cret-pass"}
    )
    assert response.status_code == 200
    token = response.json()["access_token"]
    assert response.json()["token_type"] == "bearer"

    response = await client.get("/api/seller/locations", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 200


async def test_login_with_wrong_password(client, db):
    await crud_user.create_user(db, email="buyer@example.com", password="right-pass", role=UserRole.BUYER)

    response = await client.post("/api/auth/login", data={"username": "buyer@example.com", "password": "nope"})
    assert response.status_code == 401


async def test_garbage_token_is_rejected(client):
    response = await client.get("/api/seller/locations", headers={"Authorization": "Bearer not.a.jwt"})
    assert response.status_code == 401
