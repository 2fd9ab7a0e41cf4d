from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class Tag(BaseModel):
	"""
	Физическая метка (карта, брелок) участника.
	`auth_method` - сырой код схемы дополнительной аутентификации, намеренно не enum.
	`auth_data` равный None означает, что дополнительная аутентификация не нужна.
	"""
	model_config = ConfigDict(frozen=True)

	id: bytes = Field(min_length=1, max_length=32)
	uid: int = Field(ge=0, le=0xFFFFFFFF)
	auth_method: int = Field(default=0, ge=0, le=0xFFFFFFFF)
	auth_data: Optional[bytes] = None

	def to_row(self) -> dict:
		return {
			'tag_id': self.id,
			'uid': self.uid,
			'auth_method': self.auth_method,
			'auth_data': self.auth_data,
		}

	@classmethod
	def from_row(cls, row) -> 'Tag':
		return cls(id=row.tag_id, uid=row.uid, auth_method=row.auth_method, auth_data=row.auth_data)
