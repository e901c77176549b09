from __future__ import annotations

import streamlit as st

from config import AppConfig
from data import auth
from data.connection import create_session_client


def _sign_in_forms(cfg: AppConfig, client) -> None:
    tab_in, tab_up, tab_reset = st.tabs(["Sign in", "Sign up", "Reset password"])

    with tab_in, st.form("sign_in"):
        email = st.text_input("Email")
        password = st.text_input("Password", type="password")
        if st.form_submit_button("Sign in"):
            try:
                auth.sign_in(client, email, password)
            except Exception as e:
                st.error(str(e))
            else:
                st.session_state["auth_user"] = auth.get_current_user(client)
                st.rerun()

    with tab_up, st.form("sign_up"):
        full_name = st.text_input("Full name")
        email = st.text_input("Email", key="signup_email")
        password = st.text_input("Password", type="password", key="signup_password")
        if st.form_submit_button("Create account"):
            try:
                auth.sign_up(client, email, password, full_name=full_name)
            except Exception as e:
                st.error(str(e))
            else:
                st.success("Check your inbox to confirm the account.")

    with tab_reset, st.form("reset"):
        email = st.text_input("Email", key="reset_email")
        if st.form_submit_button("Send reset link"):
            try:
                auth.reset_password(client, email, redirect_to=cfg.password_reset_redirect_url)
            except Exception as e:
                st.error(str(e))
            else:
                st.success("Reset link sent.")


def _profile_form(cfg: AppConfig, client, user) -> None:
    profile = auth.get_user_profile(client, user.id)
    st.caption(f"Signed in as **{user.email}**")
    if profile and profile.avatar_url:
        st.image(profile.avatar_url, width=96)

    with st.form("profile"):
        full_name = st.text_input("Full name", value=(profile.full_name if profile else "") or "")
        username = st.text_input("Username", value=(profile.username if profile else "") or "")
        website = st.text_input("Website", value=(profile.website if profile else "") or "")
        avatar = st.file_uploader("Avatar", type=["png", "jpg", "jpeg", "webp"])
        if st.form_submit_button("Save profile"):
            updates = {"email": user.email, "full_name": full_name, "username": username, "website": website}
            try:
                if avatar is not None:
                    updates["avatar_url"] = auth.upload_avatar(
                        client, user.id, avatar.getvalue(), avatar.name,
                        bucket=cfg.avatar_bucket, content_type=avatar.type,
                    )
                auth.update_user_profile(client, user.id, updates)
            except Exception as e:
                st.error(str(e))
            else:
                st.success("Profile updated successfully!")

    with st.form("password"):
        new_password = st.text_input("New password", type="password")
        if st.form_submit_button("Update password"):
            try:
                auth.update_password(client, new_password)
            except Exception as e:
                st.error(str(e))
            else:
                st.success("Password updated.")

    if st.button("Sign out"):
        try:
            auth.sign_out(client)
        except Exception as e:
            st.error(str(e))
        else:
            st.session_state.pop("auth_user", None)
            st.rerun()


def _session_client(cfg: AppConfig):
    # One auth client per browser session; the shared read client never holds a login.
    client = st.session_state.get("auth_client")
    if client is None:
        client = create_session_client(cfg)
        st.session_state["auth_client"] = client
    return client


def render(cfg: AppConfig, use_mock: bool) -> None:
    st.title("Settings")

    client = _session_client(cfg)
    if client is None:
        st.info("Supabase not configured: profile and account settings are unavailable in demo mode.")
        return

    user = st.session_state.get("auth_user") or auth.get_current_user(client)
    if user is None:
        _sign_in_forms(cfg, client)
    else:
        _profile_form(cfg, client, user)
