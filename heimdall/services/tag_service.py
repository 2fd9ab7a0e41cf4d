from typing import List
from sqlalchemy import delete as sql_delete, insert as sql_insert, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from heimdall.tags import Tag
from heimdall.models.tags import TagRow
from heimdall.logs import main_logger
from heimdall.services._upsert import upsert

logger = main_logger.getChild('tag_service')

tags_table = TagRow.__table__


def _execute(session: Session, stmt, action: str, tag: Tag):
    try:
        result = session.execute(stmt)
        session.commit()
        return result
    except SQLAlchemyError as e:
        session.rollback()
        logger.error(f"SQLAlchemy error while {action} tag {tag.id.hex()}: {e}", exc_info=True)
        raise


def insert(session: Session, tag: Tag) -> None:
    """Регистрирует метку. Падает с IntegrityError, если метка уже привязана."""
    _execute(session, sql_insert(tags_table).values(**tag.to_row()), 'inserting', tag)
    logger.info(f"Tag {tag.id.hex()} assigned to member {tag.uid}")


def replace(session: Session, tag: Tag) -> None:
    _execute(session, upsert(session, tags_table, tag.to_row()), 'replacing', tag)
    logger.info(f"Tag {tag.id.hex()} assigned to member {tag.uid}")


def delete(session: Session, tag: Tag) -> bool:
    stmt = sql_delete(tags_table).where(tags_table.c.tag_id == tag.id)
    result = _execute(session, stmt, 'deleting', tag)
    return result.rowcount == 1


def list_for_member(session: Session, uid: int) -> List[Tag]:
    stmt = select(tags_table).where(tags_table.c.uid == uid).order_by(tags_table.c.tag_id)
    opened_transaction = not session.in_transaction()
    try:
        rows = session.execute(stmt).all()
    except SQLAlchemyError as e:
        session.rollback()
        logger.error(f"SQLAlchemy error while listing tags of member {uid}: {e}", exc_info=True)
        raise
    if opened_transaction:
        session.rollback()
    return [Tag.from_row(row) for row in rows]
