"""Outcome of a single call to the Plaid API"""

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union


@dataclass(frozen=True)
class UpstreamSuccess:
    """Plaid answered with a 2xx status and a JSON object body"""

    status_code: int
    payload: Dict[str, Any]


@dataclass(frozen=True)
class UpstreamFailure:
    """Plaid answered with a non-success status; body is kept as raw text"""

    status_code: int
    body: str

    def error_code(self) -> Optional[str]:
        """
        Plaid's `error_code` from the body, or None if the object has none.

        Raises:
            ValueError: body is not a JSON object
        """
        try:
            data = json.loads(self.body)
        except RecursionError as e:
            raise ValueError("error body nested too deeply") from e
        if not isinstance(data, dict):
            raise ValueError("error body is not a JSON object")
        code = data.get("error_code")
        return code if isinstance(code, str) else None


@dataclass(frozen=True)
class TransportFailure:
    """The call never produced a usable response (network, timeout, bad JSON)"""

    message: str


UpstreamResult = Union[UpstreamSuccess, UpstreamFailure, TransportFailure]
