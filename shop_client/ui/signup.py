# shop_client/ui/signup.py

import streamlit as st
from shop_client.services.api import signup
from shop_client.ui.session import go, save_session


def signup_page():
    st.title("Sign Up")

    with st.form("signup_form"):
        username = st.text_input("Username")
        email = st.text_input("Email")
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Sign Up")

    if submitted:
        with st.spinner("Creating account..."):
            result = signup(username, email, password)
        if result.get("error"):
            st.error(result["error"])
        else:
            save_session(result["token"], username)
            go("products")

    if st.button("← Back to Sign In"):
        go("signin")
