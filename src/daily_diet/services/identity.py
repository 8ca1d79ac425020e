"""Anonymous caller identity tokens."""

import logging
from dataclasses import dataclass
from uuid import uuid4

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CallerIdentity:
    """The token scoping every meal query, and whether it was just issued."""

    token: str
    minted: bool = False


def mint_identity_token() -> str:
    """Return a fresh random identity token."""
    return str(uuid4())


def resolve_caller(token: str | None) -> CallerIdentity:
    """Reuse a presented token or mint a new one."""
    if token:
        return CallerIdentity(token=token)
    _logger.info("Minted new identity token")
    return CallerIdentity(token=mint_identity_token(), minted=True)
