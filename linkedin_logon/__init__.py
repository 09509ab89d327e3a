# linkedin_logon/__init__.py
"""LinkedIn OAuth2 logon: the redirect handler completing the authorization code flow."""

__version__ = "0.1.0"
