# shop_client/ui/signin.py

import streamlit as st
from shop_client.services.api import signin
from shop_client.ui.session import go, save_session


def signin_page():
    st.title("Sign In")

    with st.form("signin_form"):
        email = st.text_input("Email")
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Sign In")

    if submitted:
        with st.spinner("Signing in..."):
            result = signin(email, password)
        if result.get("error"):
            st.error(result["error"])
        else:
            save_session(result["token"], result["user"]["username"])
            go("products")

    if st.button("Need an account? Sign Up"):
        go("signup")
