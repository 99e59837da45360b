import bcrypt
import hashlib


def _prehash(password: str) -> bytes:
    return hashlib.sha256(password.encode('utf-8')).digest()


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return bcrypt.checkpw(_prehash(plain_password), hashed_password.encode('utf-8'))
    except ValueError:
        return False


def get_password_hash(password: str) -> str:
    # Always pre-hash password with SHA-256, then bcrypt the digest
    hashed = bcrypt.hashpw(_prehash(password), bcrypt.gensalt())
    return hashed.decode('utf-8')
