from __future__ import annotations

from http import HTTPStatus
from typing import Any, Dict


# PUBLIC_INTERFACE
def error_body(status_code: int, reason: str) -> Dict[str, Any]:
    """
    Build the standard error envelope used for unmatched routes and handled errors.

    Args:
        status_code: HTTP status code of the response.
        reason: Explanation of the failure, usually the error message.

    Returns:
        Dict with keys: status, message (the HTTP reason phrase), reason.
    """
    return {
        "status": int(status_code),
        "message": HTTPStatus(status_code).phrase,
        "reason": reason,
    }


def route_not_found_reason(method: str, path: str) -> str:
    return f"The requested route {method} {path} does not exist."
