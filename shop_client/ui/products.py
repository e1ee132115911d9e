# shop_client/ui/products.py

import streamlit as st
from shop_client.services.api import create_product, fetch_products


def products_page():
    st.title("Products")

    token = st.session_state.get("token")
    products = fetch_products(token)
    if isinstance(products, dict) and products.get("error"):
        st.error("Please sign in to view products")
        return

    if token and st.button("➕ Add product"):
        st.session_state["show_add_product"] = not st.session_state.get("show_add_product", False)

    if st.session_state.get("show_add_product"):
        handle_product_create(token)

    if not products:
        st.info("No products yet.")
        return

    for product in products:
        with st.container(border=True):
            st.subheader(product["name"])
            st.write(product["description"])
            st.markdown(f"**Price:** ${product['price']}")
            st.markdown(f"**Stock:** {product['stock']}")
            if product.get("imageUrl"):
                st.image(product["imageUrl"], caption=product["name"], width=200)


def handle_product_create(token):
    with st.form("add_product_form"):
        name = st.text_input("Name")
        price = st.number_input("Price", min_value=0.0, step=0.01, format="%.2f")
        description = st.text_area("Description")
        image_url = st.text_input("Image URL")
        stock = st.number_input("Stock", min_value=0, step=1)
        submitted = st.form_submit_button("Save")

    if submitted:
        result = create_product(token, name, price, description, image_url, int(stock))
        if result.get("error"):
            st.error(result["error"])
        else:
            st.success(result["message"])
            st.session_state["show_add_product"] = False
            st.rerun()
