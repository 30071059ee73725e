# ideabank/deps/auth.py
from typing import Optional

from fastapi import Header

from ideabank.utils.token_utils import TokenClaims, verify_token


async def get_current_claims(authorization: Optional[str] = Header(None)) -> TokenClaims:
    """
    Identity embedded in the bearer token. Only the signature and expiry are
    checked here; routes that need the user row look it up themselves.
    """
    return verify_token(authorization)
