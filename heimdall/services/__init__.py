from . import member_service
from . import tag_service
from . import identification_service

__all__ = [
    'member_service',
    'tag_service',
    'identification_service'
]
