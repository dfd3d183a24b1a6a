import logging
import bcrypt

logger = logging.getLogger(__name__)


def hash_pin(pin: str) -> bytes:
    """
    Hashes an admin PIN with bcrypt.

    Args:
        pin (str): The raw PIN.

    Returns:
        bytes: The bcrypt hash, salt included.
    """
    return bcrypt.hashpw(pin.encode('utf-8'), bcrypt.gensalt())


def verify_admin_pin(entered_pin: str, pin_hash: bytes) -> bool:
    """
    Compares an entered PIN against the configured admin PIN hash.

    Args:
        entered_pin (str): PIN typed at the console.
        pin_hash (bytes): bcrypt hash from the settings.

    Returns:
        bool: True if the PIN matches, False otherwise (including a bad hash).
    """
    try:
        return bcrypt.checkpw(entered_pin.encode('utf-8'), pin_hash)
    except ValueError as e:
        logger.error("Configured admin PIN hash is invalid: %s", e)
        return False
