"""Testes para api/connectors/messenger/batch_queue."""

from __future__ import annotations

import asyncio
import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from api.connectors.messenger import BatchRequestError, MessengerBatchQueue, is_error_613
from api.payload_builders.messenger import batch
from api.transforms.batch import BatchResponseItem
from utils.errors import HttpError, RemoteApiError

RATE_LIMIT_BODY = {
    "error": {
        "message": "(#613) Calls to this api have exceeded the rate limit.",
        "type": "OAuthException",
        "code": 613,
    }
}


def _ok(body: dict) -> BatchResponseItem:
    return BatchResponseItem(code=200, body=body)


def _rate_limited() -> BatchResponseItem:
    return BatchResponseItem(code=400, body=RATE_LIMIT_BODY)


def _client(*side_effect) -> MagicMock:
    client = MagicMock()
    client.send_batch = AsyncMock(side_effect=list(side_effect))
    return client


class TestFlush:
    """Descarregamento da fila."""

    @pytest.mark.asyncio
    async def test_futures_resolve_in_order(self) -> None:
        client = _client([_ok({"id": "1"}), _ok({"id": "2"})])
        queue = MessengerBatchQueue(client)

        first = queue.push(batch.get_user_profile("1"))
        second = queue.push(batch.get_user_profile("2"))
        await queue.flush()

        assert await first == {"id": "1"}
        assert await second == {"id": "2"}
        assert len(queue) == 0
        client.send_batch.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_empty_flush_does_nothing(self) -> None:
        client = _client()
        await MessengerBatchQueue(client).flush()
        client.send_batch.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_failed_item_rejects_with_batch_request_error(self) -> None:
        client = _client([_ok({"id": "1"}), _rate_limited()])
        queue = MessengerBatchQueue(client)

        ok = queue.push(batch.mark_seen("1"))
        failed = queue.push(batch.mark_seen("2"))
        await queue.flush()

        assert await ok == {"id": "1"}
        with pytest.raises(BatchRequestError) as exc_info:
            await failed
        assert "Batch Request Error - (#613)" in str(exc_info.value)
        assert exc_info.value.status_code == 400
        assert is_error_613(exc_info.value)

    @pytest.mark.asyncio
    async def test_whole_batch_failure_rejects_every_item(self) -> None:
        client = _client(HttpError("http_connection_error", is_retryable=True))
        queue = MessengerBatchQueue(client)

        futures = [queue.push(batch.mark_seen(str(i))) for i in range(3)]
        await queue.flush()

        for future in futures:
            with pytest.raises(HttpError):
                await future

    @pytest.mark.asyncio
    async def test_unexpected_error_rejects_items_and_propagates(self) -> None:
        client = _client(RuntimeError("observer failed"))
        queue = MessengerBatchQueue(client, retry_times=3)

        futures = [queue.push(batch.mark_seen(str(i))) for i in range(2)]
        with pytest.raises(RuntimeError, match="observer failed"):
            await queue.flush()

        assert len(queue) == 0
        for future in futures:
            assert future.done()
            with pytest.raises(RuntimeError, match="observer failed"):
                await future

    @pytest.mark.asyncio
    async def test_missing_response_is_an_error(self) -> None:
        client = _client([_ok({})])
        queue = MessengerBatchQueue(client)

        queue.push(batch.mark_seen("1"))
        missing = queue.push(batch.mark_seen("2"))
        await queue.flush()

        with pytest.raises(RemoteApiError, match="missing batch response"):
            await missing

    @pytest.mark.asyncio
    async def test_flushes_at_most_fifty(self) -> None:
        client = MagicMock()
        client.send_batch = AsyncMock(
            side_effect=lambda items, include_headers: [_ok({}) for _ in items]
        )
        queue = MessengerBatchQueue(client)

        for i in range(49):
            queue.push(batch.mark_seen(str(i)))
        assert len(queue) == 49

        queue.push(batch.mark_seen("50"))
        for _ in range(3):
            await asyncio.sleep(0)

        sent_items = client.send_batch.await_args.args[0]
        assert len(sent_items) == 50
        assert len(queue) == 0


class TestRetry:
    """Retry por item."""

    @pytest.mark.asyncio
    async def test_retries_rate_limited_item(self) -> None:
        client = _client([_rate_limited()], [_ok({"id": "1"})])
        queue = MessengerBatchQueue(client, retry_times=1, should_retry=is_error_613)

        future = queue.push(batch.mark_seen("1"))
        await queue.flush()
        assert not future.done()
        assert len(queue) == 1

        await queue.flush()
        assert await future == {"id": "1"}

    @pytest.mark.asyncio
    async def test_gives_up_after_retry_times(self) -> None:
        client = _client([_rate_limited()], [_rate_limited()])
        queue = MessengerBatchQueue(client, retry_times=1)

        future = queue.push(batch.mark_seen("1"))
        await queue.flush()
        await queue.flush()

        with pytest.raises(BatchRequestError):
            await future

    @pytest.mark.asyncio
    async def test_should_retry_false_fails_immediately(self) -> None:
        error_body = {"error": {"message": "(#100) Invalid parameter", "code": 100}}
        client = _client([BatchResponseItem(code=400, body=error_body)])
        queue = MessengerBatchQueue(client, retry_times=3, should_retry=is_error_613)

        future = queue.push(batch.mark_seen("1"))
        await queue.flush()

        with pytest.raises(BatchRequestError, match="Invalid parameter"):
            await future


class TestLifecycle:
    """start/stop do flush periódico."""

    @pytest.mark.asyncio
    async def test_periodic_flush(self) -> None:
        client = _client([_ok({"id": "1"})])
        queue = MessengerBatchQueue(client, delay_seconds=0.01)

        queue.start()
        assert queue.is_running
        result = await asyncio.wait_for(queue.push(batch.mark_seen("1")), timeout=1)
        await queue.stop()

        assert result == {"id": "1"}
        assert not queue.is_running

    @pytest.mark.asyncio
    async def test_periodic_flush_survives_unexpected_error(self) -> None:
        client = _client(RuntimeError("boom"), [_ok({"id": "2"})])
        queue = MessengerBatchQueue(client, delay_seconds=0.01)

        queue.start()
        failed = queue.push(batch.mark_seen("1"))
        with pytest.raises(RuntimeError, match="boom"):
            await asyncio.wait_for(failed, timeout=1)

        result = await asyncio.wait_for(queue.push(batch.mark_seen("2")), timeout=1)
        assert result == {"id": "2"}
        assert queue.is_running
        await queue.stop()

    @pytest.mark.asyncio
    async def test_stop_drains_queue(self) -> None:
        client = _client([_ok({"ok": True})])
        queue = MessengerBatchQueue(client, delay_seconds=60)
        queue.start()

        future = queue.push(batch.mark_seen("1"))
        await queue.stop()

        assert await future == {"ok": True}


class TestIsError613:
    """Detecção de rate limit."""

    def test_by_code_and_message(self) -> None:
        assert is_error_613(RemoteApiError("Messenger", "x", code=613))
        assert is_error_613(Exception(json.dumps(RATE_LIMIT_BODY)))
        assert not is_error_613(RemoteApiError("Messenger", "190 OAuthException", code=190))
