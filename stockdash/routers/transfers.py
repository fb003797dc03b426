from typing import List

from fastapi import APIRouter, Depends, Response, status

from stockdash.dependencies import store_dependency
from stockdash.schemas.transfer import Transfer, TransferCreate
from stockdash.services.transfer_service import create_transfer, delete_transfer, list_transfers

router = APIRouter(prefix="/transfers", tags=["Transfers"])


@router.get("", response_model=List[Transfer])
def get_transfers(store=Depends(store_dependency)):
    return list_transfers(store)


@router.post("/create", response_model=Transfer, status_code=status.HTTP_201_CREATED)
def post_transfer(payload: TransferCreate, store=Depends(store_dependency)):
    return create_transfer(
        store,
        payload.product_id,
        payload.from_warehouse_id,
        payload.to_warehouse_id,
        payload.quantity,
        payload.reason,
    )


@router.delete("/{transfer_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_transfer(transfer_id: str, store=Depends(store_dependency)):
    delete_transfer(store, transfer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


__all__ = ["router"]
