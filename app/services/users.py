from uuid import UUID
from sqlalchemy.orm import Session
from app import crud
from app.core.exceptions import EmailAlreadyRegistered, InvalidUserData, UserNotFound
from app.models.user import User
from app.schemas.user import UserCreate, UserUpdate
from app.services.validation import validate_new_user
import logging

logger = logging.getLogger(__name__)


def register_user(db: Session, user_in: UserCreate) -> User:
    """
    Crea un usuario verificando antes que el email no esté registrado.
    """
    validation = validate_new_user(user_in.name, user_in.email, user_in.password)
    if not validation.ok:
        raise InvalidUserData(validation.errors)

    if crud.user.get_by_email(db, email=user_in.email):
        raise EmailAlreadyRegistered(user_in.email)

    created = crud.user.create(db, obj_in=user_in)
    logger.info(f"Usuario creado: {created.id}")
    return created


def update_user(db: Session, user_id: UUID, user_in: UserUpdate) -> User:
    db_user = crud.user.get(db, id=user_id)
    if db_user is None:
        raise UserNotFound(user_id)

    if user_in.email and user_in.email != db_user.email:
        if crud.user.get_by_email(db, email=user_in.email):
            raise EmailAlreadyRegistered(user_in.email)

    return crud.user.update(db, db_obj=db_user, obj_in=user_in)


def delete_user(db: Session, user_id: UUID) -> User:
    deleted = crud.user.delete(db, id=user_id)
    if deleted is None:
        raise UserNotFound(user_id)
    return deleted
