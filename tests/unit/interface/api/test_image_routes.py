"""API tests for image routes."""

from uuid import uuid4

from tests.unit.interface.api.helpers import create_article, register

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32


def upload(client, user, article_id, filename="cover.png", mimetype="image/png"):
    return client.post(
        "/images/upload",
        files={"file": (filename, PNG_BYTES, mimetype)},
        data={"article_id": article_id},
        headers=user["headers"],
    )


class TestImageRoutes:
    """Tests for /images."""

    def test_upload_list_and_delete(self, client):
        alice = register(client, "alice")
        article = create_article(client, alice)

        response = upload(client, alice, article["id"])
        assert response.status_code == 201
        image = response.json()
        assert image["original_filename"] == "cover.png"
        assert image["size"] == len(PNG_BYTES)
        assert image["article_id"] == article["id"]

        assert client.get(f"/images/{image['id']}").json()["id"] == image["id"]
        listed = client.get("/images", params={"article_id": article["id"]}).json()
        assert [i["id"] for i in listed["images"]] == [image["id"]]
        assert [
            i["id"] for i in client.get(f"/articles/{article['id']}").json()["images"]
        ] == [image["id"]]

        deleted = client.delete(f"/images/{image['id']}", headers=alice["headers"])
        assert deleted.json() == {"id": image["id"], "deleted": True}
        assert client.get(f"/images/{image['id']}").status_code == 404

    def test_rejects_unsupported_type(self, client):
        alice = register(client, "alice")
        article = create_article(client, alice)

        response = upload(
            client, alice, article["id"], filename="notes.txt", mimetype="text/plain"
        )

        assert response.status_code == 400

    def test_non_owner_cannot_upload(self, client):
        alice = register(client, "alice")
        bob = register(client, "bob")
        article = create_article(client, alice)

        assert upload(client, bob, article["id"]).status_code == 403

    def test_unknown_article_is_404(self, client):
        alice = register(client, "alice")

        assert upload(client, alice, str(uuid4())).status_code == 404

    def test_upload_requires_auth(self, client):
        response = client.post(
            "/images/upload",
            files={"file": ("cover.png", PNG_BYTES, "image/png")},
            data={"article_id": str(uuid4())},
        )

        assert response.status_code == 401
