# app/ui/blog.py

import streamlit as st
from services.api import (
    list_posts,
    search_posts,
    create_post,
    update_post,
    delete_post,
)


def blog_page():
    st.title("📝 Blog posts")

    token = st.session_state["access_token"]

    if st.button("➕ New post"):
        st.session_state["show_new_post"] = not st.session_state.get("show_new_post", False)

    if st.session_state.get("show_new_post"):
        handle_create(token)

    query = st.text_input("🔎 Search by title")
    posts = search_posts(token, query) if query.strip() else list_posts(token)

    if not posts:
        st.info("No blog posts found.")
        return

    for post in posts:
        render_post(token, post)


def handle_create(token):
    with st.form("new_post_form", clear_on_submit=True):
        title = st.text_input("Title")
        content = st.text_area("Content")
        submitted = st.form_submit_button("Publish")

    if submitted:
        result = create_post(token, title, content)
        if result.get("status") == "success":
            st.session_state["show_new_post"] = False
            st.success("Post published.")
            st.rerun()
        else:
            st.error(result.get("message"))
            for field, messages in (result.get("data") or {}).items():
                st.caption(f"{field}: {', '.join(messages)}")


def render_post(token, post):
    with st.expander(f"{post['title']}  ·  {post['created_at'][:16].replace('T', ' ')}"):
        st.markdown(post["content"])

        editing_key = f"editing_{post['id']}"
        col_edit, col_delete = st.columns(2)
        if col_edit.button("✏️ Edit", key=f"edit_{post['id']}"):
            st.session_state[editing_key] = not st.session_state.get(editing_key, False)
        if col_delete.button("🗑️ Delete", key=f"delete_{post['id']}"):
            result = delete_post(token, post["id"])
            if result.get("status") == "success":
                st.rerun()
            st.error(result.get("message"))

        if st.session_state.get(editing_key):
            with st.form(f"edit_form_{post['id']}"):
                title = st.text_input("Title", value=post["title"])
                content = st.text_area("Content", value=post["content"])
                saved = st.form_submit_button("Save")
            if saved:
                result = update_post(token, post["id"], title, content)
                if result.get("status") == "success":
                    st.session_state[editing_key] = False
                    st.rerun()
                st.error(result.get("message"))
