"""Erros e helpers de parsing para a Graph API (Messenger)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from utils.errors import RemoteApiError

if TYPE_CHECKING:
    from api.transforms.batch import BatchItem, BatchResponseItem

PROVIDER = "Messenger"

# Erros que não adianta repetir
_PERMANENT_STATUS = frozenset({400, 401, 403, 404, 413})
_PERMANENT_TYPES = frozenset({"OAuthException", "InvalidRequest"})


def is_permanent_error(status_code: int | None, error_type: str | None) -> bool:
    """Classifica erro como permanente (4xx de cliente, OAuth) ou transitório."""
    if status_code in _PERMANENT_STATUS:
        return True
    return error_type in _PERMANENT_TYPES


def parse_graph_error(status_code: int | None, data: Any) -> RemoteApiError | None:
    """Extrai `{error: {code, type, message}}` do response da Graph API.

    Returns:
        RemoteApiError se houver erro, None se sucesso
    """
    error_obj = data.get("error") if isinstance(data, dict) else None
    if not isinstance(error_obj, dict):
        if status_code is not None and status_code >= 400:
            return RemoteApiError(PROVIDER, f"HTTP {status_code}", status_code=status_code)
        return None

    code = error_obj.get("code")
    error_type = error_obj.get("type")
    message = error_obj.get("message", "Unknown error")
    return RemoteApiError(
        PROVIDER,
        f"{code} {error_type} {message}",
        status_code=status_code,
        code=code,
        error_type=error_type,
        details={
            key: error_obj[key]
            for key in ("error_subcode", "fbtrace_id", "error_user_msg")
            if key in error_obj
        },
    )


class BatchRequestError(RemoteApiError):
    """Sub-request de batch com status não-2xx."""

    def __init__(self, request: BatchItem, response: BatchResponseItem) -> None:
        body = response.body if isinstance(response.body, dict) else {}
        error_obj = body.get("error") if isinstance(body.get("error"), dict) else {}
        message = error_obj.get("message") or f"HTTP {response.code}"
        super().__init__(
            PROVIDER,
            f"Batch Request Error - {message}",
            status_code=response.code,
            code=error_obj.get("code"),
            error_type=error_obj.get("type"),
        )
        self.request = request
        self.response = response


def is_error_613(error: BaseException) -> bool:
    """Rate limit da Graph API (#613)."""
    if isinstance(error, RemoteApiError) and error.code == 613:
        return True
    return "#613" in str(error)
