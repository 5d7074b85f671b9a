# storefront/api/routers/auth.py
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from storefront.api.deps import get_access_token, get_identity_client
from storefront.data.database import get_db
from storefront.domain.schemas import SignInIn, SignUpIn, ProfileOut
from storefront.services.auth_service import AuthService
from storefront.services.identity_client import IdentityClient
from storefront.utils.errors import IdentityError

router = APIRouter(prefix="/auth", tags=["auth"])
profiles_router = APIRouter(prefix="/profiles", tags=["auth"])


def get_service(db: Session = Depends(get_db), identity: IdentityClient = Depends(get_identity_client)):
    return AuthService(db, identity)


def _to_http(e: IdentityError, default: int) -> HTTPException:
    status = e.status_code if e.status_code and 400 <= e.status_code < 500 else default
    return HTTPException(status_code=status, detail=str(e))


@router.post("/signup")
def sign_up(payload: SignUpIn, svc: AuthService = Depends(get_service)):
    try:
        return svc.sign_up(payload.email, payload.password, payload.full_name)
    except IdentityError as e:
        raise _to_http(e, 400)


@router.post("/signin")
def sign_in(payload: SignInIn, svc: AuthService = Depends(get_service)):
    try:
        return svc.sign_in(payload.email, payload.password)
    except IdentityError as e:
        raise _to_http(e, 401)


@router.post("/signout", status_code=204)
def sign_out(token: str = Depends(get_access_token), svc: AuthService = Depends(get_service)):
    try:
        svc.sign_out(token)
    except IdentityError as e:
        raise _to_http(e, 400)


@router.get("/user")
def current_user(token: str = Depends(get_access_token), svc: AuthService = Depends(get_service)):
    try:
        user = svc.get_current_user(token)
    except IdentityError as e:
        raise _to_http(e, 502)
    if not user:
        raise HTTPException(status_code=401, detail="Not signed in")
    return user


@profiles_router.get("/{user_id}", response_model=ProfileOut)
def get_profile(user_id: str, svc: AuthService = Depends(get_service)):
    profile = svc.get_profile(user_id)
    if not profile:
        raise HTTPException(status_code=404, detail="Profile not found")
    return profile
