# app/ui/login.py

import os
import streamlit as st
from dotenv import load_dotenv
from streamlit_cookies_manager import EncryptedCookieManager
from services.api import login_user, logout_user, register_user

load_dotenv()

COOKIE_PASSWORD = os.getenv("COOKIE_PASSWORD", "change-me-cookie-password")

cookies = EncryptedCookieManager(password=COOKIE_PASSWORD)
if not cookies.ready():
    st.stop()


def _remember(result):
    data = result["data"]
    st.session_state["access_token"] = data["token"]
    st.session_state["username"] = data["user"]["name"]
    cookies["access_token"] = data["token"]
    cookies["username"] = data["user"]["name"]
    cookies.save()


def _show_errors(result):
    st.error(f"❌ {result.get('message', 'Request failed')}")
    errors = result.get("data")
    if isinstance(errors, dict):
        for field, messages in errors.items():
            for message in messages:
                st.caption(f"{field}: {message}")


def logout():
    token = st.session_state.get("access_token")
    if token:
        logout_user(token)
    cookies.clear()
    cookies.save()


def login_page():
    st.title("🔐 Login")

    if "access_token" not in st.session_state:
        if cookies.get("access_token"):
            st.session_state["access_token"] = cookies["access_token"]
            st.session_state["username"] = cookies.get("username", "")
            st.rerun()

    if "show_register" not in st.session_state:
        st.session_state["show_register"] = False

    if st.session_state["show_register"]:
        show_register_form()
    else:
        show_login_form()


def show_login_form():
    with st.form("login_form"):
        email = st.text_input("Email")
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Log in")

    if submitted:
        with st.spinner("Logging in..."):
            result = login_user(email, password)
            if result.get("status") == "success":
                _remember(result)
                st.success("✅ Logged in!")
                st.rerun()
            else:
                _show_errors(result)

    if st.button("Create an account"):
        st.session_state["show_register"] = True
        st.rerun()


def show_register_form():
    st.subheader("📝 Register")

    with st.form("register_form"):
        name = st.text_input("Name")
        email = st.text_input("Email")
        password = st.text_input("Password", type="password")
        confirmation = st.text_input("Confirm password", type="password")
        submitted = st.form_submit_button("Register")

    if submitted:
        with st.spinner("Creating account..."):
            result = register_user(name, email, password, confirmation)
            if result.get("status") == "success":
                _remember(result)
                st.session_state["show_register"] = False
                st.success("🎉 Account created!")
                st.rerun()
            else:
                _show_errors(result)

    if st.button("← Back to login"):
        st.session_state["show_register"] = False
        st.rerun()
