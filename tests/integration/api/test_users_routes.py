"""
Integration tests for admin user management routes.
"""

from uuid import uuid4

from helpers import auth_header, make_email


class TestUsersRoutes:
    """Integration tests for /api/users."""

    async def test_non_admin_forbidden(self, client, register_user):
        account = await register_user()

        response = await client.get(
            "/api/users", headers=auth_header(account["token"])
        )

        assert response.status_code == 403
        assert response.json()["error"] == "FORBIDDEN"

    async def test_requires_authentication(self, client):
        response = await client.get("/api/users")

        assert response.status_code == 401

    async def test_list_users(self, client, admin, register_user):
        await register_user()
        await register_user()

        response = await client.get(
            "/api/users",
            headers=auth_header(admin["token"]),
            params={"page": 1, "limit": 2},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["results"] == 2
        assert body["pagination"] == {
            "total": 3,
            "page": 1,
            "pages": 2,
            "limit": 2,
        }

    async def test_limit_out_of_range(self, client, admin):
        response = await client.get(
            "/api/users",
            headers=auth_header(admin["token"]),
            params={"limit": 500},
        )

        assert response.status_code == 422

    async def test_get_user(self, client, admin, register_user):
        account = await register_user()

        response = await client.get(
            f"/api/users/{account['user']['id']}",
            headers=auth_header(admin["token"]),
        )

        assert response.status_code == 200
        assert response.json()["email"] == account["email"]

    async def test_get_missing_user(self, client, admin):
        response = await client.get(
            f"/api/users/{uuid4()}", headers=auth_header(admin["token"])
        )

        assert response.status_code == 404

    async def test_update_user_role_and_email(self, client, admin, register_user):
        account = await register_user()
        new_email = make_email("renamed")

        response = await client.patch(
            f"/api/users/{account['user']['id']}",
            headers=auth_header(admin["token"]),
            json={"role": "admin", "email": new_email},
        )

        assert response.status_code == 200
        assert response.json()["role"] == "admin"
        assert response.json()["email"] == new_email

        # Role is read from storage, so the old token now has admin access
        listing = await client.get(
            "/api/users", headers=auth_header(account["token"])
        )
        assert listing.status_code == 200

    async def test_delete_user(self, client, admin, register_user):
        account = await register_user()
        user_id = account["user"]["id"]

        response = await client.delete(
            f"/api/users/{user_id}", headers=auth_header(admin["token"])
        )
        assert response.status_code == 204

        lookup = await client.get(
            f"/api/users/{user_id}", headers=auth_header(admin["token"])
        )
        assert lookup.status_code == 404

        # Token of a deleted account is no longer usable
        me = await client.get("/api/auth/me", headers=auth_header(account["token"]))
        assert me.status_code == 401

    async def test_delete_missing_user(self, client, admin):
        response = await client.delete(
            f"/api/users/{uuid4()}", headers=auth_header(admin["token"])
        )

        assert response.status_code == 404
