"""
Tests for the member store.
"""
from unittest.mock import Mock

import pytest
from sqlalchemy import create_engine, func, select
from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.orm import Session

from heimdall.members import Member
from heimdall.models.members import MemberRow
from heimdall.services import member_service
from heimdall.services.member_service import MemberNotFound


def count_members(session):
    return session.execute(select(func.count()).select_from(MemberRow)).scalar_one()


def test_insert_then_get_returns_equal_member(session):
    """Every field survives a write and read back."""
    member = Member(
        uid=7,
        can_manage_users=True,
        ban_time=1700000000,
        last_open_attempt=1600000000,
        max_auto_inactive=600,
        last_enter_time=1650000000,
        last_leave_time=1650003600,
    )
    member_service.insert(session, member)

    assert member_service.get(session, 7) == member


def test_get_missing_member_returns_none(session):
    assert member_service.get(session, 1) is None


def test_insert_duplicate_uid_fails(session, member):
    member_service.insert(session, member)

    with pytest.raises(IntegrityError):
        member_service.insert(session, member)

    # Session is still usable after the failed insert
    assert count_members(session) == 1


def test_replace_twice_keeps_single_row(session, member):
    member_service.replace(session, member)
    member_service.replace(session, member)

    assert count_members(session) == 1
    assert member_service.get(session, member.uid) == member


def test_replace_overwrites_every_field(session, member):
    member_service.insert(session, member)
    changed = member.model_copy(update={"can_manage_users": True, "ban_time": 123, "max_auto_inactive": 60})

    member_service.replace(session, changed)

    assert member_service.get(session, member.uid) == changed


def test_update_existing_member(session, member):
    member_service.insert(session, member)
    changed = member.model_copy(update={"last_enter_time": 1000, "last_leave_time": 2000})

    member_service.update(session, changed)

    assert member_service.get(session, member.uid) == changed


def test_update_missing_member_raises(session, member):
    with pytest.raises(MemberNotFound) as exc_info:
        member_service.update(session, member)

    assert exc_info.value.uid == 42
    assert count_members(session) == 0


def test_delete_is_idempotent(session, member):
    member_service.insert(session, member)
    member_service.insert(session, member.model_copy(update={"uid": 43}))

    assert member_service.delete(session, member) is True
    assert member_service.delete(session, member) is False
    assert count_members(session) == 1

    member_service.insert(session, member)
    assert member_service.delete(session, member) is True


def test_replace_on_unsupported_dialect_raises_value_error(member):
    session = Mock()
    session.get_bind.return_value.dialect.name = "oracle"

    with pytest.raises(ValueError, match="oracle"):
        member_service.replace(session, member)

    session.execute.assert_not_called()


def test_get_rolls_back_on_storage_error():
    engine = create_engine("sqlite://")
    with Session(engine) as session:
        with pytest.raises(OperationalError):
            member_service.get(session, 42)

        assert not session.in_transaction()
