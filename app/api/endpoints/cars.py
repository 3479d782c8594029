from typing import List
from fastapi import APIRouter, Depends, HTTPException, status

import logging

from app.api.deps import body_docs, validated_body
from app.db.session import get_store
from app.db.store import RecordStore
from app.schemas.car import CarCreate, CarResponse, CarUpdate
from app.schemas.common import MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter()

def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Car not found")

@router.get("", response_model=List[CarResponse])
def list_cars(store: RecordStore = Depends(get_store)):
    """
    List every car in the fleet. Filtering and sorting are left to the client.
    """
    return store.cars.all()

@router.post("", response_model=CarResponse, status_code=status.HTTP_201_CREATED, openapi_extra=body_docs(CarCreate))
def create_car(
    car_data: CarCreate = Depends(validated_body(CarCreate, "Invalid car data")),
    store: RecordStore = Depends(get_store),
):
    """
    Register a new car.

    make, model, year, licensePlate, owner and status are required. The
    license plate is not checked for duplicates.
    """
    car = store.cars.create(car_data.model_dump())
    logger.info(f"Registered car {car.id} ({car.licensePlate})")
    return car

@router.get("/{car_id}", response_model=CarResponse)
def get_car(car_id: str, store: RecordStore = Depends(get_store)):
    car = store.cars.get(car_id)
    if car is None:
        raise _not_found()
    return car

@router.put("/{car_id}", response_model=CarResponse, openapi_extra=body_docs(CarUpdate))
def update_car(
    car_id: str,
    changes: CarUpdate = Depends(validated_body(CarUpdate, "Invalid car data")),
    store: RecordStore = Depends(get_store),
):
    car = store.cars.update(car_id, changes.changes())
    if car is None:
        raise _not_found()
    return car

@router.delete("/{car_id}", response_model=MessageResponse)
def delete_car(car_id: str, store: RecordStore = Depends(get_store)):
    if not store.cars.delete(car_id):
        raise _not_found()

    logger.info(f"Deleted car {car_id}")
    return MessageResponse(message="Car deleted successfully")
