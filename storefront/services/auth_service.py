# storefront/services/auth_service.py
from typing import Any, Dict

from sqlalchemy.orm import Session

from storefront.data.models.profile import ProfileModel
from storefront.domain.schemas import ProfileOut
from storefront.repos.profile_repo import ProfileRepo
from storefront.services.identity_client import IdentityClient
from storefront.utils.errors import DuplicateKeyError
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class AuthService:
    """
    Credentials live with the identity provider, this service keeps the
    profiles table in step with it.
    """

    def __init__(self, db: Session, identity: IdentityClient):
        self.repo = ProfileRepo(db)
        self.identity = identity

    def _insert_profile(self, user: Dict[str, Any], full_name: str):
        try:
            self.repo.create_profile(
                ProfileModel(id=user["id"], email=user.get("email", ""), full_name=full_name)
            )
            logger.info(f"Profile created for user {user['id']}")
        except DuplicateKeyError:
            # a concurrent sign-up/sign-in already created it
            logger.info(f"Profile for user {user['id']} already exists")

    def sign_up(self, email: str, password: str, full_name: str) -> Dict[str, Any]:
        data = self.identity.sign_up(email, password, full_name)
        user = data.get("user")
        if user:
            self._insert_profile(user, full_name)
        return data

    def sign_in(self, email: str, password: str) -> Dict[str, Any]:
        data = self.identity.sign_in(email, password)
        user = data.get("user")
        if user and self.repo.get_profile(user["id"]) is None:
            metadata = user.get("user_metadata") or {}
            self._insert_profile(user, metadata.get("full_name") or "")
        return data

    def sign_out(self, access_token: str) -> None:
        self.identity.sign_out(access_token)

    def get_current_user(self, access_token: str) -> Dict[str, Any] | None:
        return self.identity.get_user(access_token)

    def get_profile(self, user_id: str) -> ProfileOut | None:
        profile = self.repo.get_profile(user_id)
        if not profile:
            return None
        return ProfileOut.model_validate(profile)
