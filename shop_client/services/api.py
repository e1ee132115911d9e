# shop_client/services/api.py

import os
import requests
from dotenv import load_dotenv


load_dotenv()

# Base URL of the storefront backend
SHOP_API_URL = os.getenv("SHOP_API_URL", "http://localhost:5000")
TIMEOUT = 10


def _error_message(response, default):
    """
    Pulls a readable message out of an error response: the backend's
    `message`, or the first itemized field error for validation failures.
    """
    try:
        data = response.json()
    except ValueError:
        return default
    if not isinstance(data, dict):
        return default
    errors = data.get("errors")
    if errors:
        return errors[0].get("message", default)
    return data.get("message", default)


def _auth_headers(token):
    return {"Authorization": f"Bearer {token}"} if token else {}


# -------------------------------
# Authentication-related functions
# -------------------------------

def signup(username, email, password):
    """
    Creates an account. Returns {"token", "message"} or {"error"}.
    """
    try:
        res = requests.post(
            f"{SHOP_API_URL}/api/users/signup",
            json={"username": username, "email": email, "password": password},
            timeout=TIMEOUT,
        )
    except requests.RequestException as e:
        return {"error": str(e)}
    if res.status_code == 201:
        return res.json()
    return {"error": _error_message(res, "Error signing up")}


def signin(email, password):
    """
    Signs in. Returns {"token", "user"} or {"error"}.
    """
    try:
        res = requests.post(
            f"{SHOP_API_URL}/api/users/signin",
            json={"email": email, "password": password},
            timeout=TIMEOUT,
        )
    except requests.RequestException as e:
        return {"error": str(e)}
    if res.status_code == 200:
        return res.json()
    return {"error": _error_message(res, "Error signing in")}


def get_me(token):
    try:
        res = requests.get(f"{SHOP_API_URL}/api/users/me", headers=_auth_headers(token), timeout=TIMEOUT)
    except requests.RequestException:
        return None
    return res.json() if res.status_code == 200 else None


# -------------------------
# Products
# -------------------------

def fetch_products(token):
    """
    Lists every product. The token is always sent; the backend decides
    whether it is required.
    """
    try:
        res = requests.get(f"{SHOP_API_URL}/api/products", headers=_auth_headers(token), timeout=TIMEOUT)
    except requests.RequestException as e:
        return {"error": str(e)}
    if res.status_code == 200:
        return res.json()
    return {"error": _error_message(res, "Error fetching products")}


def create_product(token, name, price, description, image_url, stock):
    payload = {
        "name": name,
        "price": price,
        "description": description,
        "imageUrl": image_url,
        "stock": stock,
    }
    try:
        res = requests.post(
            f"{SHOP_API_URL}/api/products",
            json=payload,
            headers=_auth_headers(token),
            timeout=TIMEOUT,
        )
    except requests.RequestException as e:
        return {"error": str(e)}
    if res.status_code == 201:
        return res.json()
    return {"error": _error_message(res, "Error adding product")}
