# app/services/api.py

import os
from urllib.parse import quote
import requests
from dotenv import load_dotenv


load_dotenv()

# Base URL of the FastAPI backend
FASTAPI_URL = os.getenv("FASTAPI_URL", "http://localhost:8000")


def _auth_headers(access_token):
    return {"Authorization": f"Bearer {access_token}"}


def _call(method, path, access_token=None, **kwargs):
    """
    Sends a request to the backend and returns its response envelope.
    Transport failures are reported as a failed envelope so the UI has a single shape to handle.
    """
    headers = _auth_headers(access_token) if access_token else {}
    try:
        res = requests.request(method, f"{FASTAPI_URL}{path}", headers=headers, timeout=10, **kwargs)
    except requests.RequestException as e:
        return {"status": "failed", "message": f"Server unreachable: {e}", "data": None}

    try:
        return res.json()
    except ValueError:
        return {"status": "failed", "message": f"Unexpected response ({res.status_code})", "data": None}


# -------------------------------
# Authentication-related functions
# -------------------------------

def register_user(name, email, password, password_confirmation):
    """
    Registers a new account. On success `data` holds the token and the user.
    """
    return _call("POST", "/api/register", json={
        "name": name,
        "email": email,
        "password": password,
        "password_confirmation": password_confirmation,
    })


def login_user(email, password):
    """
    Logs in a user. On success `data` holds the token and the user.
    """
    return _call("POST", "/api/login", json={"email": email, "password": password})


def logout_user(access_token):
    """
    Revokes every token of the logged-in user.
    """
    return _call("POST", "/api/logout", access_token)


def get_user_info(access_token):
    return _call("GET", "/api/user", access_token)


# -------------------------
# Blog posts
# -------------------------

def list_posts(access_token):
    """
    Returns all posts, newest first.
    """
    res = _call("GET", "/api/blog", access_token)
    if res.get("status") == "success":
        return res["data"]
    return []


def search_posts(access_token, title):
    res = _call("GET", f"/api/blog/search/{quote(title, safe='')}", access_token)
    if res.get("status") == "success":
        return res["data"]
    return []


def get_post(access_token, post_id):
    return _call("GET", f"/api/blog/{post_id}", access_token)


def create_post(access_token, title, content):
    return _call("POST", "/api/blog", access_token, json={"title": title, "content": content})


def update_post(access_token, post_id, title, content):
    return _call("POST", f"/api/blog/{post_id}", access_token, json={"title": title, "content": content})


def delete_post(access_token, post_id):
    return _call("DELETE", f"/api/blog/{post_id}", access_token)
