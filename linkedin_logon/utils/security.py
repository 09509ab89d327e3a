# linkedin_logon/utils/security.py
import logging
from typing import Optional
from cryptography.fernet import Fernet, InvalidToken
from base64 import urlsafe_b64decode

logger = logging.getLogger(__name__)


def generate_fernet_key() -> str:
    """Generates a new Fernet key and returns it as a string."""
    key_bytes = Fernet.generate_key()
    return key_bytes.decode('utf-8')


def mask_token(token: Optional[str]) -> str:
    """Shows only the first characters of a credential for log lines."""
    if not token:
        return "<none>"
    return f"{token[:4]}…" if len(token) > 4 else "****"


class FernetEncryptor:
    """Handles encryption and decryption using Fernet symmetric encryption."""

    def __init__(self, encryption_key: Optional[str]):
        """
        Initialize the encryptor with a Fernet-compatible key.

        Without a key an ephemeral one is generated, which means encrypted
        values do not survive a restart nor work across several workers.

        Args:
            encryption_key: Base64-encoded Fernet key string, or None

        Raises:
            ValueError: if the key does not decode to 32 bytes
        """
        if not encryption_key:
            logger.critical(
                "CRITICAL: LINKEDIN_LOGON_STATE_COOKIE_KEY is not set. "
                "Using an ephemeral key, state cookies are only valid for this process."
            )
            encryption_key = generate_fernet_key()

        key_bytes = encryption_key.encode('utf-8')
        try:
            decoded_key_bytes = urlsafe_b64decode(key_bytes)
        except ValueError as e:
            raise ValueError(f"Invalid Fernet key, not urlsafe base64: {e}") from e
        if len(decoded_key_bytes) != 32:
            raise ValueError(
                f"Invalid Fernet key length after base64 decoding. "
                f"Expected 32 bytes, got {len(decoded_key_bytes)}."
            )
        self.fernet_instance = Fernet(key_bytes)

    def encrypt(self, data: str) -> str:
        """Encrypt a string, returning the Fernet token as text."""
        return self.fernet_instance.encrypt(data.encode('utf-8')).decode('utf-8')

    def decrypt(self, encrypted_data: str, ttl: Optional[int] = None) -> Optional[str]:
        """
        Decrypt a Fernet-encrypted string.

        Args:
            encrypted_data: Encrypted data string to decrypt
            ttl: Maximum age in seconds of the token, None for no limit

        Returns:
            Decrypted plain text string, or None if the token is invalid or expired
        """
        try:
            return self.fernet_instance.decrypt(encrypted_data.encode('utf-8'), ttl=ttl).decode('utf-8')
        except InvalidToken:
            logger.warning(
                "Decryption failed: invalid or expired token. "
                "This may be due to a rotated key, tampering or an old cookie."
            )
            return None
