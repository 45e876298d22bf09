# tests/test_blog_api.py

def _create(client, headers, title="Hello World", content="First post"):
    res = client.post("/api/blog", headers=headers, json={"title": title, "content": content})
    assert res.status_code == 200
    return res.json()["data"]


def test_blog_requires_authentication(client):
    for method, path in [
        ("get", "/api/blog"),
        ("post", "/api/blog"),
        ("get", "/api/blog/1"),
        ("post", "/api/blog/1"),
        ("delete", "/api/blog/1"),
        ("get", "/api/blog/search/x"),
    ]:
        res = getattr(client, method)(path)
        assert res.status_code == 401, path
        assert res.json()["status"] == "failed"


def test_index_empty(client, auth_headers):
    res = client.get("/api/blog", headers=auth_headers)
    assert res.status_code == 200
    assert res.json() == {"status": "failed", "message": "No blog posts found!", "data": None}


def test_store_and_index_newest_first(client, auth_headers):
    first = _create(client, auth_headers, title="First")
    second = _create(client, auth_headers, title="Second")

    res = client.get("/api/blog", headers=auth_headers)
    body = res.json()
    assert body["status"] == "success"
    assert body["message"] == "Blog posts are retrieved successfully."
    assert [p["id"] for p in body["data"]] == [second["id"], first["id"]]


def test_store_validation(client, auth_headers):
    res = client.post("/api/blog", headers=auth_headers, json={"title": "x" * 251})
    assert res.status_code == 403
    assert res.json()["data"] == {
        "title": ["The title field must not be greater than 250 characters."],
        "content": ["The content field is required."],
    }


def test_show(client, auth_headers):
    post = _create(client, auth_headers)

    res = client.get(f"/api/blog/{post['id']}", headers=auth_headers)
    assert res.json()["message"] == "Blog post is retrieved successfully."
    assert res.json()["data"]["content"] == "First post"

    res = client.get("/api/blog/999", headers=auth_headers)
    assert res.status_code == 200
    assert res.json()["status"] == "failed"
    assert res.json()["message"] == "Blog post is not found!"


def test_update(client, auth_headers):
    post = _create(client, auth_headers)

    res = client.post(f"/api/blog/{post['id']}", headers=auth_headers, json={"title": "Edited", "content": "New body"})
    assert res.status_code == 200
    body = res.json()
    assert body["message"] == "Blog post is updated successfully."
    assert body["data"]["title"] == "Edited"
    assert body["data"]["created_at"] == post["created_at"]

    res = client.post("/api/blog/999", headers=auth_headers, json={"title": "Edited", "content": "New body"})
    assert res.json()["message"] == "Blog post is not found!"


def test_update_validates_before_lookup(client, auth_headers):
    res = client.post("/api/blog/999", headers=auth_headers, json={"title": ""})
    assert res.status_code == 403
    assert set(res.json()["data"]) == {"title", "content"}


def test_destroy(client, auth_headers):
    post = _create(client, auth_headers)

    res = client.delete(f"/api/blog/{post['id']}", headers=auth_headers)
    assert res.json() == {"status": "success", "message": "Blog post is deleted successfully.", "data": None}

    res = client.delete(f"/api/blog/{post['id']}", headers=auth_headers)
    assert res.json()["message"] == "Blog post is not found!"


def test_search_substring(client, auth_headers):
    _create(client, auth_headers, title="Hello World")
    _create(client, auth_headers, title="Say hello again")
    _create(client, auth_headers, title="Goodbye")

    res = client.get("/api/blog/search/hello", headers=auth_headers)
    titles = [p["title"] for p in res.json()["data"]]
    assert titles == ["Say hello again", "Hello World"]

    res = client.get("/api/blog/search/nothing", headers=auth_headers)
    assert res.json() == {"status": "failed", "message": "No blog posts found!", "data": None}


def test_search_treats_wildcards_literally(client, auth_headers):
    _create(client, auth_headers, title="100% real")
    _create(client, auth_headers, title="plain")

    res = client.get("/api/blog/search/%25", headers=auth_headers)
    assert [p["title"] for p in res.json()["data"]] == ["100% real"]

    res = client.get("/api/blog/search/_", headers=auth_headers)
    assert res.json()["status"] == "failed"


def test_non_numeric_id_is_a_validation_error(client, auth_headers):
    res = client.get("/api/blog/abc", headers=auth_headers)
    assert res.status_code == 403
    assert "id" in res.json()["data"]
