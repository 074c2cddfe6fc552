"""
Password hashing with bcrypt.
"""
import bcrypt
from fastapi.concurrency import run_in_threadpool

# bcrypt ignores (or rejects) anything past this many bytes
MAX_PASSWORD_BYTES = 72


def hash_password(password: str, rounds: int = 12) -> str:
    """Hash a password with a fresh salt."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    """Check a password against a stored hash."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        # Malformed stored hash or oversized password
        return False


async def hash_password_async(password: str, rounds: int = 12) -> str:
    return await run_in_threadpool(hash_password, password, rounds)


async def verify_password_async(password: str, hashed: str) -> bool:
    return await run_in_threadpool(verify_password, password, hashed)
