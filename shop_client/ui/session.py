# shop_client/ui/session.py

import os
import streamlit as st
from dotenv import load_dotenv
from streamlit_cookies_manager import EncryptedCookieManager
from shop_client.services.api import get_me


load_dotenv()

COOKIE_PASSWORD = os.getenv("COOKIE_PASSWORD")

if not COOKIE_PASSWORD:
    st.error("COOKIE_PASSWORD is not set")
    st.stop()

cookies = EncryptedCookieManager(prefix="shop/", password=COOKIE_PASSWORD)
if not cookies.ready():
    st.stop()


def restore_session():
    """
    Brings a token saved in a previous visit back into the session.
    """
    if "token" in st.session_state or not cookies.get("token"):
        return

    me = get_me(cookies["token"])
    if me is None:
        # expired or signed with an old secret
        logout()
        return
    st.session_state["token"] = cookies["token"]
    st.session_state["username"] = me["username"]


def save_session(token, username=""):
    st.session_state["token"] = token
    st.session_state["username"] = username
    cookies["token"] = token
    cookies["username"] = username
    cookies.save()


def logout():
    st.session_state.pop("token", None)
    st.session_state.pop("username", None)
    cookies["token"] = ""
    cookies["username"] = ""
    cookies.save()


def go(page):
    st.session_state["page"] = page
    st.rerun()
