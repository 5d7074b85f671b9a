# storefront/services/address_service.py
from typing import List

from sqlalchemy.orm import Session

from storefront.data.models.address import AddressModel
from storefront.domain.schemas import AddressIn, AddressOut
from storefront.repos.address_repo import AddressRepo
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class AddressService:
    def __init__(self, db: Session):
        self.repo = AddressRepo(db)

    def list_addresses(self, user_id: str) -> List[AddressOut]:
        return [AddressOut.model_validate(a) for a in self.repo.get_addresses(user_id)]

    def add_address(self, user_id: str, payload: AddressIn) -> AddressOut:
        created = self.repo.create_address(AddressModel(user_id=user_id, **payload.model_dump()))
        logger.info(f"Address {created.id} saved for user {user_id} (default={created.is_default})")
        return AddressOut.model_validate(created)

    def get_default_address(self, user_id: str) -> AddressOut | None:
        address = self.repo.get_default_address(user_id)
        if not address:
            return None
        return AddressOut.model_validate(address)
