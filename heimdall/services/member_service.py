from typing import Optional
from sqlalchemy import delete as sql_delete, insert as sql_insert, select, update as sql_update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from heimdall.members import Member
from heimdall.models.members import MemberRow
from heimdall.logs import main_logger
from heimdall.services._upsert import upsert

logger = main_logger.getChild('member_service')

members_table = MemberRow.__table__


class MemberNotFound(LookupError):
    """Участника с таким uid нет в базе."""

    def __init__(self, uid: int):
        super().__init__(uid)
        self.uid = uid

    def __str__(self) -> str:
        return f'member {self.uid} not found'


def _execute(session: Session, stmt, action: str, uid: int):
    try:
        result = session.execute(stmt)
        session.commit()
        return result
    except SQLAlchemyError as e:
        session.rollback()
        logger.error(f"SQLAlchemy error while {action} member {uid}: {e}", exc_info=True)
        raise


def insert(session: Session, member: Member) -> None:
    """
    Добавляет участника. Падает с IntegrityError, если участник с таким uid уже есть.
    """
    _execute(session, sql_insert(members_table).values(**member.to_row()), 'inserting', member.uid)
    logger.info(f"Member inserted: uid={member.uid}")


def replace(session: Session, member: Member) -> None:
    """
    Добавляет участника или полностью перезаписывает существующего одной командой.
    """
    _execute(session, upsert(session, members_table, member.to_row()), 'replacing', member.uid)
    logger.info(f"Member replaced: uid={member.uid}")


def update(session: Session, member: Member) -> None:
    """
    Перезаписывает все поля существующего участника.

    Raises:
        MemberNotFound: если строки с таким uid нет
    """
    values = member.to_row()
    del values['uid']
    stmt = sql_update(members_table).where(members_table.c.uid == member.uid).values(**values)
    result = _execute(session, stmt, 'updating', member.uid)
    if result.rowcount == 0:
        logger.warning(f"Member {member.uid} not found, nothing updated")
        raise MemberNotFound(member.uid)
    logger.info(f"Member updated: uid={member.uid}")


def delete(session: Session, member: Member) -> bool:
    """
    Удаляет участника.

    Returns:
        True если строка была удалена, False если участника и так не было
    """
    stmt = sql_delete(members_table).where(members_table.c.uid == member.uid)
    result = _execute(session, stmt, 'deleting', member.uid)
    deleted = result.rowcount == 1
    if deleted:
        logger.info(f"Member deleted: uid={member.uid}")
    return deleted


def get(session: Session, uid: int) -> Optional[Member]:
    """
    Читает участника по uid. Транзакцию, открытую для чтения, сразу закрывает.
    """
    opened_transaction = not session.in_transaction()
    try:
        row = session.execute(select(members_table).where(members_table.c.uid == uid)).first()
    except SQLAlchemyError as e:
        session.rollback()
        logger.error(f"SQLAlchemy error while reading member {uid}: {e}", exc_info=True)
        raise
    if opened_transaction:
        session.rollback()
    return Member.from_row(row) if row is not None else None
