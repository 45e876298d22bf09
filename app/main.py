# app/main.py

import streamlit as st
from dotenv import load_dotenv
from services.api import get_user_info
from ui.login import login_page, logout
from ui.blog import blog_page


load_dotenv()


def main_page():
    me = get_user_info(st.session_state["access_token"])
    if me.get("status") != "success":
        # token revoked elsewhere (logout on another device)
        logout()
        st.session_state.clear()
        st.rerun()

    st.sidebar.markdown(f"## 👋 {me['data']['name']}")

    if st.sidebar.button("🔓 Log out"):
        logout()
        st.session_state.clear()
        st.rerun()

    blog_page()


if "access_token" not in st.session_state:
    login_page()
else:
    main_page()
