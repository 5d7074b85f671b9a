# storefront/api/deps.py
from fastapi import Depends, Header, HTTPException, Request

from storefront.services.identity_client import IdentityClient
from storefront.services.notification_service import NotificationService
from storefront.services.payment_client import PaymentClient
from storefront.utils.errors import IdentityError


def get_identity_client(request: Request) -> IdentityClient:
    return request.app.state.identity_client


def get_payment_client(request: Request) -> PaymentClient:
    return request.app.state.payment_client


def get_notification_service(request: Request) -> NotificationService:
    return request.app.state.notification_service


def get_access_token(authorization: str | None = Header(None)) -> str:
    if not authorization or not authorization.lower().startswith("bearer "):
        raise HTTPException(status_code=401, detail="Missing bearer token")
    return authorization.split(" ", 1)[1].strip()


def get_current_user_id(
    token: str = Depends(get_access_token),
    identity: IdentityClient = Depends(get_identity_client),
) -> str:
    """Id of the signed-in user behind the bearer token."""
    try:
        user = identity.get_user(token)
    except IdentityError as e:
        # provider unreachable vs. provider said no
        raise HTTPException(status_code=502 if e.status_code is None else 401, detail=str(e))
    if not user or not user.get("id"):
        raise HTTPException(status_code=401, detail="Not signed in")
    return user["id"]
