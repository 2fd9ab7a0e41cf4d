from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class Member(BaseModel):
	"""
	Участник спейса и его текущее состояние доступа.
	Все временные поля хранятся как Unix timestamp (секунды).
	"""
	model_config = ConfigDict(frozen=True)

	uid: int = Field(ge=0, le=0xFFFFFFFF)
	# Может добавлять и удалять других участников
	can_manage_users: bool = False
	# До какого момента вход запрещен. None - бана нет
	ban_time: Optional[int] = None
	# Последняя неудачная попытка войти
	last_open_attempt: Optional[int] = None
	# Автоматический режим отключается, если не использовался последние `max_auto_inactive` секунд
	max_auto_inactive: int
	last_enter_time: Optional[int] = None
	last_leave_time: Optional[int] = None

	def to_row(self) -> dict:
		return {
			'uid': self.uid,
			'manager': self.can_manage_users,
			'ban_time': self.ban_time,
			'last_attempt': self.last_open_attempt,
			'max_auto': self.max_auto_inactive,
			'last_enter': self.last_enter_time,
			'last_leave': self.last_leave_time,
		}

	@classmethod
	def from_row(cls, row) -> 'Member':
		return cls(
			uid=row.uid,
			can_manage_users=row.manager,
			ban_time=row.ban_time,
			last_open_attempt=row.last_attempt,
			max_auto_inactive=row.max_auto,
			last_enter_time=row.last_enter,
			last_leave_time=row.last_leave,
		)
