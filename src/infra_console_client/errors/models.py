"""Response envelope model.

Every backend response body has the shape ``{"code": int, "msg": str, "data": any}``.
``code == 0`` is the only success value.
"""

from dataclasses import dataclass
from typing import Any

import httpx

SUCCESS_CODE = 0


@dataclass(frozen=True)
class Envelope:
    """Uniform ``{code, msg, data}`` wrapper around every backend response."""

    code: int
    msg: str = ""
    data: Any = None

    @property
    def ok(self) -> bool:
        return self.code == SUCCESS_CODE

    @classmethod
    def from_payload(cls, payload: Any) -> "Envelope | None":
        """Build an envelope from decoded JSON.

        Args:
            payload: Decoded response body

        Returns:
            Envelope, or None if the payload does not have the envelope shape
        """
        if not isinstance(payload, dict):
            return None

        code = payload.get("code")
        # bool is an int subclass; true/false is not a status code
        if not isinstance(code, int) or isinstance(code, bool):
            return None

        msg = payload.get("msg")
        if msg is None:
            msg = ""
        elif not isinstance(msg, str):
            msg = str(msg)

        return cls(code=code, msg=msg, data=payload.get("data"))

    @classmethod
    def from_response(cls, response: httpx.Response) -> "Envelope | None":
        """Parse the envelope from an HTTP response body.

        Args:
            response: HTTP response object

        Returns:
            Envelope, or None if the body is not JSON or not an envelope
        """
        try:
            payload = response.json()
        except (ValueError, TypeError, AttributeError):
            # JSON decode errors, empty bodies, or missing .json() method
            return None
        return cls.from_payload(payload)

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "msg": self.msg, "data": self.data}
