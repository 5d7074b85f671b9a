# storefront/repos/address_repo.py
from sqlalchemy import select, update

from storefront.data.models.address import AddressModel
from storefront.repos.base import BaseRepo


class AddressRepo(BaseRepo):
    def get_addresses(self, user_id: str) -> list[AddressModel]:
        stmt = (
            select(AddressModel)
            .where(AddressModel.user_id == user_id)
            .order_by(AddressModel.is_default.desc(), AddressModel.created_at.desc())
        )
        with self.guard("fetching addresses"):
            return list(self.db.execute(stmt).scalars().all())

    def get_default_address(self, user_id: str) -> AddressModel | None:
        stmt = select(AddressModel).where(
            AddressModel.user_id == user_id,
            AddressModel.is_default.is_(True),
        )
        with self.guard("fetching default address"):
            return self.db.execute(stmt).scalars().first()

    def create_address(self, address: AddressModel) -> AddressModel:
        with self.guard("creating address"):
            if address.is_default:
                # only one default per user
                self.db.execute(
                    update(AddressModel)
                    .where(AddressModel.user_id == address.user_id)
                    .values(is_default=False)
                )
            self.db.add(address)
            self.db.commit()
            self.db.refresh(address)
        return address
