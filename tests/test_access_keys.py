from __future__ import annotations

import pytest

from fleet_profile.application.errors import ForbiddenError
from fleet_profile.domain.access_keys import (
    ACCESS_LEVELS,
    HQ_FC_KEY,
    TRAINEE_KEY,
    UnknownRoleError,
    get_access_keys,
)
from fleet_profile.domain.account import AuthenticatedAccount


def test_trainee_has_trainee_tag_only() -> None:
    keys = get_access_keys("trainee")

    assert TRAINEE_KEY in keys
    assert HQ_FC_KEY not in keys


def test_higher_roles_inherit_hq_fc_tag() -> None:
    for role in ("hq-fc", "instructor", "leadership", "council", "admin"):
        assert HQ_FC_KEY in get_access_keys(role), role


def test_fc_is_not_tagged() -> None:
    keys = get_access_keys("fc")

    assert HQ_FC_KEY not in keys
    assert TRAINEE_KEY not in keys
    assert "fleet-configure" in keys


def test_every_role_expands() -> None:
    for role in ACCESS_LEVELS:
        assert isinstance(get_access_keys(role), frozenset)


def test_unknown_role_raises() -> None:
    with pytest.raises(UnknownRoleError) as exc:
        get_access_keys("grand-admiral")

    assert exc.value.role == "grand-admiral"
    assert "grand-admiral" in str(exc.value)


def test_account_require_access() -> None:
    account = AuthenticatedAccount(id=1, access=get_access_keys("hq-fc"))
    account.require_access(HQ_FC_KEY)

    with pytest.raises(ForbiddenError):
        AuthenticatedAccount(id=2).require_access(HQ_FC_KEY)
