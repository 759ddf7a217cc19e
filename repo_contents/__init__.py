from .errors import InvalidArgument
from .schemas import (
    CommitRequest,
    ContentChange,
    CreateFileRequest,
    DeleteFileRequest,
    Signature,
    UpdateFileRequest,
    describe,
    parse_change,
)

__all__ = [
    'CommitRequest',
    'ContentChange',
    'CreateFileRequest',
    'DeleteFileRequest',
    'InvalidArgument',
    'Signature',
    'UpdateFileRequest',
    'describe',
    'parse_change',
]
