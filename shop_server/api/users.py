# shop_server/api/users.py

from fastapi import APIRouter, Depends, status
from shop_server.api.deps import get_user_service, require_user_id
from shop_server.api.schemas import (
    PublicUser,
    SigninRequest,
    SigninResponse,
    SignupRequest,
    SignupResponse,
)
from shop_server.core.users import UserService


router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("/signup", response_model=SignupResponse, status_code=status.HTTP_201_CREATED)
def signup(req: SignupRequest, users: UserService = Depends(get_user_service)):
    token = users.signup(req.username, req.email, req.password)
    return {"token": token, "message": "User created successfully"}


@router.post("/signin", response_model=SigninResponse)
def signin(req: SigninRequest, users: UserService = Depends(get_user_service)):
    token, user = users.signin(req.email, req.password)
    return {"token": token, "user": user.to_public()}


@router.get("/me", response_model=PublicUser)
def read_users_me(
    user_id: str = Depends(require_user_id),
    users: UserService = Depends(get_user_service),
):
    return users.get_user(user_id).to_public()
