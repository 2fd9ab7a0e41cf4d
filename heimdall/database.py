from typing import Optional, Iterator
from pydantic import BaseModel
from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker, declarative_base
from contextlib import contextmanager

from heimdall import configs
from heimdall.logs import main_logger

class DatabaseConfig(BaseModel):
    url: str = 'sqlite:///heimdall.db'
    echo: bool = False

config: Optional[DatabaseConfig] = None

logger = main_logger.getChild('database')

engine: Optional[Engine] = None
LocalSession: Optional[sessionmaker[Session]] = None

Base = declarative_base()


def start() -> None:
    """
    Инициализация подключения к БД. Должна вызываться до любых операций с участниками и метками.
    """
    global config, engine, LocalSession
    logger.info('Starting database...')

    config = DatabaseConfig.model_validate(configs.get('database'))

    logger.info('Initializing engine...')
    engine = create_engine(
        url=config.url,
        echo=config.echo
    )
    logger.info('Engine initialized')

    logger.info('Initializing session maker...')
    LocalSession = sessionmaker(engine, expire_on_commit=False)
    logger.info('Session maker initialized')

    logger.info('Database started')


@contextmanager
def get_session() -> Iterator[Session]:
    """
    Контекст-менеджер для получения сессии.
    Используйте: `with get_session() as session:`
    """
    if LocalSession is None:
        raise RuntimeError('Database session maker is not initialized. Call heimdall.database.start() first.')
    with LocalSession() as session:
        yield session


def create_tables(target: Engine) -> None:
    """
    Создает таблицы `tags` и `members`, если их еще нет.
    Выполняется в одной транзакции, поэтому повторный запуск безопасен.
    """
    from heimdall import models  # noqa: F401

    with target.begin() as conn:
        Base.metadata.create_all(conn, checkfirst=True)


def update_models() -> None:
    logger.info('Updating models...')

    if engine is None:
        raise RuntimeError('Engine is not initialized. Call heimdall.database.start() first.')

    create_tables(engine)
    logger.info('Models updated')


def stop() -> None:
    global engine, LocalSession
    logger.info('Stopping database...')
    if engine is not None:
        engine.dispose()
    engine = None
    LocalSession = None
    logger.info('Database stopped')
