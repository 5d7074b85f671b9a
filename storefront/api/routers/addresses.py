# storefront/api/routers/addresses.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from storefront.api.deps import get_current_user_id
from storefront.data.database import get_db
from storefront.domain.schemas import AddressIn, AddressOut
from storefront.services.address_service import AddressService

router = APIRouter(prefix="/addresses", tags=["addresses"])


@router.get("", response_model=List[AddressOut])
def list_addresses(user_id: str = Depends(get_current_user_id), db: Session = Depends(get_db)):
    return AddressService(db).list_addresses(user_id)


@router.post("", response_model=AddressOut, status_code=201)
def add_address(
    payload: AddressIn,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    return AddressService(db).add_address(user_id, payload)
