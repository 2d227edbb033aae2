"""Pydantic integration for filename rules.

``filename(system)`` returns an ``Annotated[str, ...]`` type that can be used
as a model field or with ``TypeAdapter``; rejected names surface through
pydantic's normal ValidationError with the rule's message.

    class Upload(BaseModel):
        name: filename("windows")
"""

from types import SimpleNamespace
from typing import Annotated, Any

from pydantic import AfterValidator

from .matcher import FilenameValidator, build_validator


def _refine(validator: FilenameValidator):
    def check_filename(value: str) -> str:
        result = validator.check(value)
        if not result.accepted:
            raise ValueError(result.message)
        return value

    return check_filename


def filename(system: Any = None) -> Any:
    """Build a pydantic string type refined by a system's filename rule.

    Raises:
        UnsupportedSystemError: If the system is unknown or has no rule
    """
    validator = build_validator(system)
    if validator.rule is None:
        return str
    return Annotated[str, AfterValidator(_refine(validator))]


# Namespace mirroring the `zfn.filename(...)` entry point
zfn = SimpleNamespace(filename=filename)
