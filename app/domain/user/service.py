from sqlalchemy.orm import Session
from passlib.context import CryptContext
from app.exceptions import ValidationError
from . import models, schemas
import logging

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=['bcrypt'], deprecated='auto')

MIN_PASSWORD_LENGTH = 6

def hash_password(password: str) -> str:
    return pwd_context.hash(password)

def verify_password(password: str, hashed_password: str) -> bool:
    return pwd_context.verify(password, hashed_password)

def get_user(db: Session, user_id: int):
    return db.query(models.User).filter(models.User.id == user_id).first()

def get_user_by_email(db: Session, email: str):
    return db.query(models.User).filter(models.User.email == email.lower()).first()

def get_user_by_email_and_password(db: Session, email: str, password: str):
    user = get_user_by_email(db, email)
    if user and verify_password(password, user.hashed_password):
        return user
    return None

def create_user(db: Session, user: schemas.UserCreate, role: models.UserRole = models.UserRole.CITIZEN) -> models.User:
    if len(user.password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")

    if get_user_by_email(db, user.email):
        raise ValidationError("User already exists")

    db_user = models.User(
        name=user.name,
        email=user.email.lower(),
        hashed_password=hash_password(user.password),
        role=role
    )
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    return db_user

def ensure_admin(db: Session, name: str, email: str, password: str) -> models.User:
    """
    Creates the configured administrator or promotes an existing account with
    the same email. The password of an existing account is left untouched.
    """

    if db_user := get_user_by_email(db, email):
        if db_user.role != models.UserRole.ADMIN:
            db_user.role = models.UserRole.ADMIN
            db.commit()
            db.refresh(db_user)
            logger.info(f"Promoted {db_user.email} to admin")
        return db_user

    db_user = create_user(db, schemas.UserCreate(name=name, email=email, password=password), role=models.UserRole.ADMIN)
    logger.info(f"Created admin account {db_user.email}")
    return db_user
