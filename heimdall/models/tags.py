from typing import Optional
from sqlalchemy import BigInteger, LargeBinary
from sqlalchemy.dialects.mysql import VARBINARY
from sqlalchemy.orm import mapped_column, Mapped

from heimdall.database import Base


class TagRow(Base):
	__tablename__ = 'tags'

	tag_id: Mapped[bytes] = mapped_column(LargeBinary(32).with_variant(VARBINARY(32), "mysql"), primary_key=True)
	# Без ForeignKey: метка без участника просто не находится при идентификации
	uid: Mapped[int] = mapped_column(BigInteger, nullable=False, index=True)
	auth_method: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
	auth_data: Mapped[Optional[bytes]] = mapped_column(LargeBinary)
