# shop_server/api/schemas.py

from typing import Annotated
from pydantic import BaseModel, ConfigDict, Field, StringConstraints


# Deliberately loose, the same check the frontend applies.
EMAIL_PATTERN = r"^.+@.+\..+$"
# passlib's bcrypt rejects NUL bytes in a password
NO_NUL_PATTERN = r"^[^\x00]*$"
# largest value a 64-bit integer column holds
MAX_STOCK = 2**63 - 1


# -------------------------------
# Users
# -------------------------------

class SignupRequest(BaseModel):
    username: str = Field(..., min_length=3, max_length=30)
    email: str = Field(..., pattern=EMAIL_PATTERN)
    password: str = Field(..., min_length=6, pattern=NO_NUL_PATTERN)


class SigninRequest(BaseModel):
    email: str = Field(..., pattern=EMAIL_PATTERN)
    password: str = Field(..., min_length=1, pattern=NO_NUL_PATTERN)


class PublicUser(BaseModel):
    id: str
    username: str
    email: str


class SignupResponse(BaseModel):
    token: str
    message: str


class SigninResponse(BaseModel):
    token: str
    user: PublicUser


# -------------------------------
# Products
# -------------------------------

class ProductCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
    price: float = Field(..., ge=0, allow_inf_nan=False, strict=True)
    description: str = Field(..., min_length=10)
    image_url: str = Field(..., alias="imageUrl", min_length=1)
    stock: int = Field(..., ge=0, le=MAX_STOCK, strict=True)


class ProductOut(BaseModel):
    id: str
    name: str
    price: float
    description: str
    imageUrl: str
    stock: int


class ProductCreated(BaseModel):
    message: str
    product: ProductOut


# -------------------------------
# Field error messages, per endpoint
# -------------------------------

VALIDATION_MESSAGES = {
    ("POST", "/api/users/signup"): {
        "username": "Username must be 3-30 characters",
        "email": "Valid email required",
        "password": "Password must be 6+ characters",
        "password:string_pattern_mismatch": "Password must not contain NUL characters",
    },
    ("POST", "/api/users/signin"): {
        "email": "Valid email required",
        "password": "Password is required",
        "password:string_pattern_mismatch": "Password must not contain NUL characters",
    },
    ("POST", "/api/products"): {
        "name": "Name is required",
        "price": "Price must be a positive number",
        "description": "Description must be 10+ characters",
        "imageUrl": "Image URL is required",
        "stock": "Stock must be a non-negative number",
    },
}


def field_errors(method: str, path: str, errors) -> list[dict]:
    """
    Flatten pydantic errors into `[{"field", "message"}]`, one entry per field,
    using the endpoint's own wording where it has one. A `field:error_type`
    key overrides the plain field message for that kind of error.
    """
    messages = VALIDATION_MESSAGES.get((method, path.rstrip("/") or "/"), {})
    result = []
    seen = set()
    for err in errors:
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        field = loc[0] if loc and err.get("type") != "json_invalid" else "body"
        if field in seen:
            continue
        seen.add(field)
        message = messages.get(f"{field}:{err.get('type')}")
        if message is None:
            message = messages.get(field, err.get("msg", "Invalid value"))
        result.append({"field": field, "message": message})
    return result
