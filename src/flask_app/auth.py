from __future__ import annotations

import logging
from typing import Optional

import jwt
from flask import g, request
from sqlalchemy.exc import SQLAlchemyError

from flask_app.db import get_db_app_session
from flask_app.settings import secret_key, token_cookie_name

from fleet_profile.application.errors import StoreError, UnauthorizedError
from fleet_profile.domain.access_keys import UnknownRoleError, get_access_keys
from fleet_profile.domain.account import AuthenticatedAccount
from fleet_profile.infrastructure.persistence.admin_repo import get_admin_role

_ALGORITHMS = ["HS256"]


def _token_from_request() -> Optional[str]:
    header = request.headers.get("Authorization", "")
    if header.lower().startswith("bearer "):
        token = header[7:].strip()
        if token:
            return token
    return request.cookies.get(token_cookie_name()) or None


def decode_account_id(token: str) -> int:
    try:
        claims = jwt.decode(token, secret_key(), algorithms=_ALGORITHMS, options={"require": ["sub"]})
        return int(claims["sub"])
    except (jwt.InvalidTokenError, ValueError) as e:
        logging.info("Rejected session token: %s", e)
        raise UnauthorizedError("Invalid or expired session token") from e


def issue_token(character_id: int, *, key: Optional[str] = None) -> str:
    """Sign a session token for `character_id` (used by tooling and tests)."""
    return jwt.encode({"sub": str(int(character_id))}, key or secret_key(), algorithm=_ALGORITHMS[0])


def current_account() -> AuthenticatedAccount:
    """Return the caller for this request, loading their access keys once."""
    account = getattr(g, "_account", None)
    if account is not None:
        return account

    token = _token_from_request()
    if token is None:
        raise UnauthorizedError()
    account_id = decode_account_id(token)

    try:
        role = get_admin_role(get_db_app_session(), account_id)
    except SQLAlchemyError as e:
        raise StoreError(f"Failed to load access for account {account_id}") from e

    access: frozenset[str] = frozenset()
    if role is not None:
        try:
            access = get_access_keys(role)
        except UnknownRoleError as e:
            logging.warning("Account %s has an unrecognised admin role %r; granting no access", account_id, e.role)

    account = AuthenticatedAccount(id=account_id, access=access)
    g._account = account
    return account
