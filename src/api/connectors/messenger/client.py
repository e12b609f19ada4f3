"""Fachada da Messenger Platform (Graph API).

Bodies são convertidos para snake_case e, com app secret configurado, toda
chamada recebe `appsecret_proof` (inclusive cada sub-request de batch).
Respostas voltam em camelCase.
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from api.connectors.base_client import BaseApiClient
from api.connectors.messenger.errors import PROVIDER, parse_graph_error
from api.payload_builders.messenger.batch import DEFAULT_USER_PROFILE_FIELDS
from api.payload_builders.messenger.message import (
    MediaType,
    QuickReplies,
    build_recipient,
    build_send_body,
    create_media,
    create_message,
    create_text,
)
from api.transforms.batch import BatchItem, BatchResponseItem, decode_batch, encode_batch
from api.transforms.case import to_snake_case
from api.transforms.envelope import JSON_CONTENT_TYPE
from api.transforms.interceptor import create_request_interceptor
from app.protocols.models import Recipient, SenderAction
from utils.errors import RemoteApiError

if TYPE_CHECKING:
    from api.transforms.interceptor import OnRequest
    from app.protocols.http_client import HttpTransportProtocol


DEFAULT_ORIGIN = "https://graph.facebook.com"
DEFAULT_VERSION = "12.0"

RecipientLike = str | Mapping[str, Any] | Recipient


def normalize_version(version: str) -> str:
    """Aceita "12.0" ou "v12.0" e devolve sem o prefixo."""
    return version[1:] if version.startswith("v") else version


class MessengerClient(BaseApiClient):
    """Cliente da Send API e Graph API do Messenger.

    Uso:
        client = MessengerClient(access_token="...", app_secret="...")
        await client.send_text("PSID", "Olá!")
    """

    provider = PROVIDER

    def __init__(
        self,
        *,
        access_token: str,
        app_secret: str | None = None,
        app_id: str | None = None,
        version: str = DEFAULT_VERSION,
        origin: str | None = None,
        skip_app_secret_proof: bool | None = None,
        on_request: OnRequest | None = None,
        http_client: HttpTransportProtocol | None = None,
    ) -> None:
        if skip_app_secret_proof is None:
            skip_app_secret_proof = not app_secret
        if not skip_app_secret_proof and not app_secret:
            raise ValueError("app_secret is required when skip_app_secret_proof is false")

        self.access_token = access_token
        self.app_id = app_id
        self.version = normalize_version(version)
        self.skip_app_secret_proof = skip_app_secret_proof

        super().__init__(
            base_url=f"{origin or DEFAULT_ORIGIN}/v{self.version}/",
            interceptor=create_request_interceptor(
                body_case="snake",
                on_request=on_request,
                app_secret=app_secret,
                access_token=access_token,
                skip_app_secret_proof=skip_app_secret_proof,
            ),
            http_client=http_client,
            default_headers={"Content-Type": JSON_CONTENT_TYPE},
        )

    def parse_error(self, status_code: int, data: Any) -> RemoteApiError | None:
        return parse_graph_error(status_code, data)

    def _token_params(self, access_token: str | None = None) -> dict[str, str]:
        return {"access_token": access_token or self.access_token}

    # Send API

    async def send_raw_body(
        self,
        body: Mapping[str, Any],
        *,
        access_token: str | None = None,
    ) -> dict[str, Any]:
        return await self.request(
            "POST", "me/messages", body=dict(body), params=self._token_params(access_token)
        )

    async def send_message(
        self,
        recipient: RecipientLike,
        message: Mapping[str, Any],
        *,
        quick_replies: QuickReplies = None,
        access_token: str | None = None,
        **options: Any,
    ) -> dict[str, Any]:
        """Envia uma mensagem.

        Raises:
            ValidationError: Quick replies fora dos limites (antes do envio)
            RemoteApiError: Erro da Graph API
        """
        body = build_send_body(recipient, create_message(message, quick_replies), options)
        return await self.send_raw_body(body, access_token=access_token)

    async def send_text(
        self,
        recipient: RecipientLike,
        text: str,
        *,
        quick_replies: QuickReplies = None,
        access_token: str | None = None,
        **options: Any,
    ) -> dict[str, Any]:
        return await self.send_message(
            recipient, create_text(text), quick_replies=quick_replies,
            access_token=access_token, **options,
        )

    async def send_attachment(
        self,
        recipient: RecipientLike,
        attachment: Mapping[str, Any],
        *,
        quick_replies: QuickReplies = None,
        access_token: str | None = None,
        **options: Any,
    ) -> dict[str, Any]:
        return await self.send_message(
            recipient, {"attachment": dict(attachment)}, quick_replies=quick_replies,
            access_token=access_token, **options,
        )

    async def _send_media(
        self,
        media_type: MediaType,
        recipient: RecipientLike,
        url_or_payload: str | Mapping[str, Any],
        quick_replies: QuickReplies,
        access_token: str | None,
        options: dict[str, Any],
    ) -> dict[str, Any]:
        return await self.send_message(
            recipient, create_media(media_type, url_or_payload), quick_replies=quick_replies,
            access_token=access_token, **options,
        )

    async def send_image(
        self,
        recipient: RecipientLike,
        url_or_payload: str | Mapping[str, Any],
        *,
        quick_replies: QuickReplies = None,
        access_token: str | None = None,
        **options: Any,
    ) -> dict[str, Any]:
        return await self._send_media("image", recipient, url_or_payload, quick_replies, access_token, options)

    async def send_audio(
        self,
        recipient: RecipientLike,
        url_or_payload: str | Mapping[str, Any],
        *,
        quick_replies: QuickReplies = None,
        access_token: str | None = None,
        **options: Any,
    ) -> dict[str, Any]:
        return await self._send_media("audio", recipient, url_or_payload, quick_replies, access_token, options)

    async def send_video(
        self,
        recipient: RecipientLike,
        url_or_payload: str | Mapping[str, Any],
        *,
        quick_replies: QuickReplies = None,
        access_token: str | None = None,
        **options: Any,
    ) -> dict[str, Any]:
        return await self._send_media("video", recipient, url_or_payload, quick_replies, access_token, options)

    async def send_file(
        self,
        recipient: RecipientLike,
        url_or_payload: str | Mapping[str, Any],
        *,
        quick_replies: QuickReplies = None,
        access_token: str | None = None,
        **options: Any,
    ) -> dict[str, Any]:
        return await self._send_media("file", recipient, url_or_payload, quick_replies, access_token, options)

    async def send_attachment_file(
        self,
        recipient: RecipientLike,
        media_type: MediaType,
        content: bytes,
        *,
        filename: str,
        content_type: str = "application/octet-stream",
        is_reusable: bool = False,
        quick_replies: QuickReplies = None,
        access_token: str | None = None,
        **options: Any,
    ) -> dict[str, Any]:
        """Envia anexo por upload multipart (`filedata`).

        Campos multipart não passam pela conversão de casing, por isso o
        body já é montado em snake_case com objetos serializados em JSON.
        """
        message = create_message(
            {"attachment": {"type": media_type, "payload": {"is_reusable": is_reusable}}},
            quick_replies,
        )
        body = build_send_body(recipient, message, options)
        form = {
            key: value if isinstance(value, str) else json.dumps(to_snake_case(value))
            for key, value in body.items()
        }
        return await self.request(
            "POST",
            "me/messages",
            body=form,
            params=self._token_params(access_token),
            files={"filedata": (filename, content, content_type)},
        )

    async def send_sender_action(
        self,
        recipient: RecipientLike,
        sender_action: SenderAction,
        *,
        access_token: str | None = None,
    ) -> dict[str, Any]:
        return await self.send_raw_body(
            {"recipient": build_recipient(recipient), "sender_action": sender_action},
            access_token=access_token,
        )

    async def mark_seen(self, recipient: RecipientLike, **kwargs: Any) -> dict[str, Any]:
        return await self.send_sender_action(recipient, "mark_seen", **kwargs)

    async def typing_on(self, recipient: RecipientLike, **kwargs: Any) -> dict[str, Any]:
        return await self.send_sender_action(recipient, "typing_on", **kwargs)

    async def typing_off(self, recipient: RecipientLike, **kwargs: Any) -> dict[str, Any]:
        return await self.send_sender_action(recipient, "typing_off", **kwargs)

    # Graph API

    async def get_user_profile(
        self,
        user_id: str,
        *,
        fields: Sequence[str] = DEFAULT_USER_PROFILE_FIELDS,
        access_token: str | None = None,
    ) -> dict[str, Any]:
        return await self.request(
            "GET",
            user_id,
            params={"fields": ",".join(fields), **self._token_params(access_token)},
        )

    async def create_label(self, name: str, *, access_token: str | None = None) -> dict[str, Any]:
        """Cria um custom label e devolve `{"id": ...}`."""
        return await self.request(
            "POST", "me/custom_labels", body={"name": name}, params=self._token_params(access_token)
        )

    # Batch

    async def send_batch(
        self,
        items: Sequence[BatchItem | dict[str, Any]],
        *,
        include_headers: bool = True,
    ) -> list[BatchResponseItem]:
        """Envia até 50 sub-requests em uma única chamada.

        Sub-responses com status não-2xx não levantam exceção; o chamador
        inspeciona `BatchResponseItem.code`.

        Raises:
            ValidationError: Se 0 ou mais de 50 itens (antes de qualquer IO)
            RemoteApiError: Erro do batch como um todo
        """
        encoded = encode_batch(items)
        raw = await self.request(
            "POST",
            "",
            body={
                "access_token": self.access_token,
                "include_headers": include_headers,
                "batch": encoded.batch,
            },
            camelcase_response=False,
        )
        if not isinstance(raw, list):
            raise RemoteApiError(PROVIDER, "unexpected batch response")
        return decode_batch(raw, encoded.response_access_paths)
