from sqlalchemy import Table
from sqlalchemy.dialects import mysql, postgresql, sqlite


def upsert(session, table: Table, values: dict):
    """
    Строит один INSERT, который перезаписывает все поля существующей строки по первичному ключу.
    Поддерживаются sqlite, postgresql и mysql.
    """
    dialect = session.get_bind().dialect.name
    keys = [c.name for c in table.primary_key.columns]
    updated = [name for name in values if name not in keys]

    if dialect == 'mysql':
        stmt = mysql.insert(table).values(**values)
        return stmt.on_duplicate_key_update({name: stmt.inserted[name] for name in updated})

    if dialect == 'sqlite':
        stmt = sqlite.insert(table).values(**values)
    elif dialect == 'postgresql':
        stmt = postgresql.insert(table).values(**values)
    else:
        raise ValueError(f'Upsert is not supported for dialect {dialect!r}')
    return stmt.on_conflict_do_update(
        index_elements=keys,
        set_={name: stmt.excluded[name] for name in updated}
    )
