from typing import Callable
from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from heimdall.members import Member
from heimdall.models.members import MemberRow
from heimdall.models.tags import TagRow
from heimdall.logs import main_logger

logger = main_logger.getChild('identification_service')

# Проверяет дополнительные данные метки. Отказ - любое исключение.
Authenticator = Callable[[int, bytes], None]


class IdentificationError(Exception):
    """Не удалось идентифицировать пользователя по метке."""

    description = 'failed to identify user'

    def __init__(self, error: Exception | None = None):
        super().__init__(error)
        self.error = error

    def __str__(self) -> str:
        return f'{self.description}: {self.error}'


class DatabaseError(IdentificationError):
    """Ошибка при чтении из базы."""


class TagAuthenticationError(IdentificationError):
    """Дополнительная аутентификация метки не прошла."""


class TagNotFound(IdentificationError):
    """Метки нет в базе (или нет ее владельца)."""

    def __str__(self) -> str:
        return f'{self.description}: tag not found.'


def _identify_query(tag_id: bytes):
    return (
        select(
            TagRow.auth_method,
            TagRow.auth_data,
            MemberRow.uid,
            MemberRow.manager,
            MemberRow.ban_time,
            MemberRow.last_attempt,
            MemberRow.max_auto,
            MemberRow.last_enter,
            MemberRow.last_leave,
        )
        .join(MemberRow, TagRow.uid == MemberRow.uid)
        .where(TagRow.tag_id == tag_id)
    )


def identify_user(session: Session, tag_id: bytes, authenticate: Authenticator) -> Member:
    """
    Находит участника по метке и, если у метки есть `auth_data`, проверяет ее через `authenticate`.

    Args:
        session: сессия БД
        tag_id: идентификатор считанной метки
        authenticate: вызывается не более одного раза как `authenticate(auth_method, auth_data)`

    Returns:
        Участник со всеми полями как в базе. Бан и авто-режим здесь не проверяются.

    Raises:
        DatabaseError: ошибка базы или некорректная строка
        TagAuthenticationError: `authenticate` выбросил исключение
        TagNotFound: метки (или ее владельца) нет в базе
    """
    opened_transaction = not session.in_transaction()
    try:
        row = session.execute(_identify_query(tag_id)).first()
    except SQLAlchemyError as e:
        logger.error(f"Database error while identifying tag {tag_id.hex()}: {e}", exc_info=True)
        raise DatabaseError(e) from e
    finally:
        # Колбэк может долго ходить по сети, не держим транзакцию открытой
        if opened_transaction:
            session.rollback()

    if row is None:
        logger.info(f"Unknown tag {tag_id.hex()}")
        raise TagNotFound()

    # Без auth_data метка аутентифицируется самим фактом владения
    if row.auth_data is not None:
        try:
            authenticate(row.auth_method, row.auth_data)
        except Exception as e:
            logger.warning(f"Authentication of tag {tag_id.hex()} (method {row.auth_method}) rejected: {e}")
            raise TagAuthenticationError(e) from e

    try:
        member = Member.from_row(row)
    except ValidationError as e:
        logger.error(f"Malformed member row for tag {tag_id.hex()}: {e}", exc_info=True)
        raise DatabaseError(e) from e

    logger.info(f"Tag {tag_id.hex()} identified as member {member.uid}")
    return member
