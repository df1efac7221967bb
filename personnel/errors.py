from __future__ import annotations

from pydantic import ValidationError


class InvalidArgument(ValueError):
    """A constructor or setter argument broke a model precondition."""

    @classmethod
    def from_validation_error(cls, err: ValidationError) -> "InvalidArgument":
        messages = []
        for e in err.errors():
            ctx_err = (e.get("ctx") or {}).get("error")
            messages.append(str(ctx_err) if ctx_err is not None else e["msg"])
        return cls("; ".join(messages))
