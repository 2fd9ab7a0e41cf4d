from typing import Optional
from sqlalchemy import BigInteger, Boolean
from sqlalchemy.orm import mapped_column, Mapped

from heimdall.database import Base


class MemberRow(Base):
    __tablename__ = 'members'

    uid: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=False)
    manager: Mapped[bool] = mapped_column(Boolean, nullable=False)
    ban_time: Mapped[Optional[int]] = mapped_column(BigInteger)
    last_attempt: Mapped[Optional[int]] = mapped_column(BigInteger)
    max_auto: Mapped[int] = mapped_column(BigInteger, nullable=False)
    last_enter: Mapped[Optional[int]] = mapped_column(BigInteger)
    last_leave: Mapped[Optional[int]] = mapped_column(BigInteger)
