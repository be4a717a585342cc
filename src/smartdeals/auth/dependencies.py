"""FastAPI auth dependencies: the access gate.

Learn: These are used as Depends() in route handlers. get_principal is
the "hard" auth dependency: it resolves the bearer token to a verified
Principal or raises Unauthorized before the handler (and the store) is
ever reached. require_own_email layers an ownership check on top for
routes that accept an ?email= filter.

The verifier itself lives on app.state so tests can swap it out.
"""

from typing import Optional

import structlog
from fastapi import Depends, Header, Query, Request

from smartdeals.auth.verifier import IdentityVerifier, Principal
from smartdeals.errors import Forbidden, Unauthorized

logger = structlog.get_logger()


def get_verifier(request: Request) -> IdentityVerifier:
    return request.app.state.verifier


async def get_principal(
    authorization: Optional[str] = Header(None),
    verifier: IdentityVerifier = Depends(get_verifier),
) -> Principal:
    """Extract and verify the bearer token (required: 401 if absent/invalid)."""
    try:
        if not authorization:
            raise Unauthorized("missing authorization header")
        scheme, _, token = authorization.partition(" ")
        token = token.strip()
        if scheme.lower() != "bearer" or not token:
            raise Unauthorized("malformed authorization header")
        return await verifier.verify(token)
    except Unauthorized as e:
        logger.info("auth.token_rejected", reason=e.reason)
        raise


async def require_own_email(
    email: Optional[str] = Query(None),
    principal: Principal = Depends(get_principal),
) -> Optional[str]:
    """Allow an ?email= filter only when it names the caller.

    Returns the filter to apply. With no filter the gate still passes
    and the caller gets an unscoped listing. That is kept as the admin read path.
    """
    if email and email != principal.email:
        logger.info(
            "auth.scope_denied", requested=email, principal=principal.email
        )
        raise Forbidden(f"{principal.email} asked for {email}")
    return email
