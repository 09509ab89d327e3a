# linkedin_logon/utils/__init__.py

"""
Utility module initialization file.

Exposes the encryption helpers used for the state cookie and for the
pending signup identity.
"""

from .security import FernetEncryptor, generate_fernet_key, mask_token

__all__ = ["FernetEncryptor", "generate_fernet_key", "mask_token"]
