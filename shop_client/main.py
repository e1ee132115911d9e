# shop_client/main.py

import streamlit as st
from dotenv import load_dotenv
from shop_client.ui.products import products_page
from shop_client.ui.session import go, logout, restore_session
from shop_client.ui.signin import signin_page
from shop_client.ui.signup import signup_page


load_dotenv()


PAGES = {
    "signin": signin_page,
    "signup": signup_page,
    "products": products_page,
}


def sidebar():
    st.sidebar.markdown("## Menu")

    if st.sidebar.button("Products"):
        go("products")

    if "token" in st.session_state:
        st.sidebar.write(f"Signed in as {st.session_state.get('username', '')}")
        if st.sidebar.button("Sign Out"):
            logout()
            go("signin")
    else:
        if st.sidebar.button("Sign In"):
            go("signin")
        if st.sidebar.button("Sign Up"):
            go("signup")


restore_session()
sidebar()

page = st.session_state.get("page", "products")
PAGES.get(page, products_page)()
