# Импортируем все модели для автоматического создания таблиц
from .members import MemberRow
from .tags import TagRow
