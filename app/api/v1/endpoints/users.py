from typing import List
from uuid import UUID
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from app.api import deps
from app.crud import user
from app.schemas.user import UserCreate, UserMessage, UserSummary, UserUpdate, UserUpdateMessage
from app.services import users as user_service

router = APIRouter()


@router.post("/", response_model=UserMessage, status_code=status.HTTP_201_CREATED)
def create_user(
    *,
    db: Session = Depends(deps.get_db),
    user_in: UserCreate,
):
    """
    Crear un nuevo usuario en el sistema.

    Args:
        `db`: Sesión de base de datos
        `user_in`: Datos del usuario a crear

    Returns:
        `UserMessage`: ID y nombre del usuario creado

    Raises:
        `HTTPException`: 400 si ya existe un usuario con el mismo email
    """
    created_user = user_service.register_user(db, user_in)
    return {"message": "User created successfully.", "user": created_user}


@router.get("/", response_model=List[UserSummary])
def list_users(
    db: Session = Depends(deps.get_db),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
):
    return user.get_multi(db, skip=skip, limit=limit)


@router.put("/{user_id}", response_model=UserUpdateMessage)
def update_user(
    *,
    db: Session = Depends(deps.get_db),
    user_id: UUID,
    user_in: UserUpdate,
):
    """
    Actualizar los datos de un usuario.

    Raises:
        `HTTPException`: 404 si el usuario no existe
        `HTTPException`: 400 si el nuevo email ya está en uso
    """
    updated_user = user_service.update_user(db, user_id, user_in)
    return {"message": "User updated successfully.", "user": updated_user}


@router.delete("/{user_id}")
def delete_user(
    *,
    db: Session = Depends(deps.get_db),
    user_id: UUID,
):
    user_service.delete_user(db, user_id)
    return {"message": "User removed successfully."}
