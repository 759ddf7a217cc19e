from collections.abc import Mapping
from datetime import datetime
from typing import Annotated, Any, Literal

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
)

from .errors import InvalidArgument

KINDS = ('create', 'update', 'delete')
_UNSET: Any = object()


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError('must not be empty')
    return value


NonBlankStr = Annotated[str, AfterValidator(_not_blank)]


def _invalid_argument(err: ValidationError) -> InvalidArgument:
    error = err.errors()[0]
    # models built inside a union run their own __init__ and fail there
    inner = error.get('ctx', {}).get('error')
    if isinstance(inner, InvalidArgument):
        return inner
    loc = [str(part) for part in error['loc'] if part not in KINDS]
    return InvalidArgument(loc[0] if loc else 'kind', error['msg'])


def _given(**values: Any) -> dict[str, Any]:
    return {name: value for name, value in values.items() if value is not _UNSET}


class Signature(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    email: str
    date: datetime | None = None


class CommitRequest(BaseModel):
    """Commit envelope shared by every contents request.

    ``branch`` left as ``None`` targets the repository default branch,
    ``committer`` and ``author`` left as ``None`` use the API defaults.
    Instances are frozen; use :meth:`replace` to derive a changed copy.
    """

    model_config = ConfigDict(frozen=True, extra='forbid')

    message: NonBlankStr
    branch: str | None = None
    committer: Signature | None = None
    author: Signature | None = None

    def __init__(self, message: str = _UNSET, **data: Any) -> None:
        if type(self) is CommitRequest:
            raise TypeError('CommitRequest is abstract')
        try:
            super().__init__(**_given(message=message), **data)
        except ValidationError as err:
            raise _invalid_argument(err) from err

    def replace(self, **changes: Any) -> 'CommitRequest':
        fields = {name: getattr(self, name) for name in type(self).model_fields}
        fields.update(changes)
        return type(self)(**fields)

    def payload(self) -> dict[str, Any]:
        """Request body for the contents endpoint, without unset fields."""
        return self.model_dump(mode='json', exclude={'kind'}, exclude_none=True)

    def __str__(self) -> str:
        return describe(self)


class CreateFileRequest(CommitRequest):
    kind: Literal['create'] = 'create'
    content: str

    def __init__(
        self, message: str = _UNSET, content: str = _UNSET, **data: Any,
    ) -> None:
        super().__init__(message, **_given(content=content), **data)


class UpdateFileRequest(CommitRequest):
    """Replaces the file whose current blob is ``sha`` with ``content``."""

    kind: Literal['update'] = 'update'
    content: str
    sha: NonBlankStr

    def __init__(
        self,
        message: str = _UNSET,
        content: str = _UNSET,
        sha: str = _UNSET,
        **data: Any,
    ) -> None:
        super().__init__(message, **_given(content=content, sha=sha), **data)


class DeleteFileRequest(CommitRequest):
    kind: Literal['delete'] = 'delete'
    sha: NonBlankStr

    def __init__(
        self, message: str = _UNSET, sha: str = _UNSET, **data: Any,
    ) -> None:
        super().__init__(message, **_given(sha=sha), **data)


ContentChange = Annotated[
    CreateFileRequest | UpdateFileRequest | DeleteFileRequest,
    Field(discriminator='kind'),
]

_content_change = TypeAdapter(ContentChange)


def parse_change(data: Mapping[str, Any]) -> ContentChange:
    try:
        return _content_change.validate_python(dict(data))
    except ValidationError as err:
        raise _invalid_argument(err) from err


def describe(change: CommitRequest) -> str:
    if isinstance(change, CreateFileRequest):
        return f'Message: {change.message} Content: {change.content}'
    if isinstance(change, (UpdateFileRequest, DeleteFileRequest)):
        # content is left out, it is usually large base64
        return f'SHA: {change.sha} Message: {change.message}'
    raise TypeError(f'Unsupported content change: {type(change).__name__}')
