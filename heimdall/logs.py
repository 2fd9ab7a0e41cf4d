import logging
from typing import Optional
from pydantic import BaseModel

from heimdall import configs


class LoggingConfig(BaseModel):
	level: str = 'INFO'
	format: str = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'

config: Optional[LoggingConfig] = None

main_logger = logging.getLogger('heimdall')


def setup() -> None:
	global config
	config = LoggingConfig.model_validate(configs.get('logging'))
	logging.basicConfig(level=config.level.upper(), format=config.format)
	main_logger.setLevel(config.level.upper())
