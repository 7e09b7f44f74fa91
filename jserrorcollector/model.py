from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, Mapping

from pydantic import BaseModel, ConfigDict, StrictStr, ValidationError, field_validator

from .core.exceptions import ErrorRecordParseException

_INTEGER_TEXT = re.compile(r"^\s*[+-]?\d+\s*$", re.ASCII)


class RawJavaScriptError(BaseModel):
    """Shape of one entry drained from window.JSErrorCollector_errors"""

    model_config = ConfigDict(extra="ignore", frozen=True)

    errorMessage: StrictStr
    sourceName: StrictStr
    lineNumber: int

    @field_validator("lineNumber", mode="before")
    @classmethod
    def _integer_only(cls, value: Any) -> Any:
        # only real ints or plain decimal strings; bool is an int subclass
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        if isinstance(value, str) and _INTEGER_TEXT.match(value):
            return int(value)
        raise ValueError(f"lineNumber must be an integer, got {value!r}")


@dataclass(frozen=True, eq=False)
class JavaScriptError:
    """
    One JavaScript error captured in the browser.

    Equality and hashing go through the formatted form
    ``"<message> [<source>:<line>]"``, so two errors are equal exactly when
    their string representations are.
    """

    error_message: str
    source_name: str
    line_number: int

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> "JavaScriptError":
        """
        Decode a mapping returned by the browser's script interface.

        Raises:
            ErrorRecordParseException: a key is missing, a field has the wrong
                type, or lineNumber is not an integer.
        """
        try:
            parsed = RawJavaScriptError.model_validate(raw)
        except ValidationError as e:
            details = [
                {"field": ".".join(str(p) for p in err["loc"]), "type": err["type"], "msg": err["msg"]}
                for err in e.errors()
            ]
            fields = ", ".join(d["field"] or "<record>" for d in details)
            raise ErrorRecordParseException(
                f"malformed JavaScript error record ({fields}): {raw!r}",
                raw=raw,
                errors=details,
            ) from e
        return cls(parsed.errorMessage, parsed.sourceName, parsed.lineNumber)

    def to_dict(self) -> Dict[str, Any]:
        """Inverse of from_raw, using the browser's key names"""
        return {
            "errorMessage": self.error_message,
            "sourceName": self.source_name,
            "lineNumber": self.line_number,
        }

    def __str__(self) -> str:
        return f"{self.error_message} [{self.source_name}:{self.line_number}]"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JavaScriptError):
            return NotImplemented
        return str(self) == str(other)

    def __hash__(self) -> int:
        return hash(str(self))
