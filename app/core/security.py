import hashlib
from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    # Pre-hash with SHA256 to ensure we never exceed bcrypt's 72-byte limit
    password_sha256 = hashlib.sha256(plain_password.encode("utf-8")).hexdigest()
    return pwd_context.verify(password_sha256, hashed_password)


def get_password_hash(password: str) -> str:
    password_sha256 = hashlib.sha256(password.encode("utf-8")).hexdigest()
    return pwd_context.hash(password_sha256)
