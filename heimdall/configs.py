from typing import Any, Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	"""
	Настройки Heimdall. Каждая секция валидируется своей моделью в модуле-потребителе.
	Пример: `HEIMDALL_DATABASE__URL=sqlite:///heimdall.db`
	"""
	model_config = SettingsConfigDict(
		env_prefix='HEIMDALL_',
		env_nested_delimiter='__',
		env_file='.env',
		extra='ignore'
	)

	database: dict[str, Any] = Field(default_factory=dict)
	logging: dict[str, Any] = Field(default_factory=dict)

settings: Optional[Settings] = None


def load_configs() -> None:
	global settings
	settings = Settings()


def get(section: str) -> dict[str, Any]:
	if settings is None:
		raise RuntimeError('Configs are not loaded. Call heimdall.configs.load_configs() first.')
	return getattr(settings, section)
