"""Fila que agrupa chamadas do Messenger em batch requests.

Cada `push` devolve um future resolvido com o body do sub-response. A fila
é descarregada a cada `delay_seconds` (após `start`) ou imediatamente ao
atingir 50 itens.

Uso:
    queue = MessengerBatchQueue(client, retry_times=3, should_retry=is_error_613)
    queue.start()
    profile = await queue.push(batch.get_user_profile("USER_ID"))
    await queue.stop()
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from api.connectors.messenger.errors import PROVIDER, BatchRequestError
from api.transforms.batch import MAX_BATCH_SIZE
from utils.errors import MessagingApiError, RemoteApiError

if TYPE_CHECKING:
    from api.connectors.messenger.client import MessengerClient
    from api.transforms.batch import BatchItem

logger = logging.getLogger(__name__)

ShouldRetry = Callable[[BaseException], bool]


def _always_retry(_error: BaseException) -> bool:
    return True


@dataclass
class QueueItem:
    request: BatchItem
    future: asyncio.Future[Any]
    retry: int = 0


class MessengerBatchQueue:
    """Fila de batch com retry por item."""

    def __init__(
        self,
        client: MessengerClient,
        *,
        delay_seconds: float = 1.0,
        retry_times: int = 0,
        should_retry: ShouldRetry = _always_retry,
        include_headers: bool = True,
    ) -> None:
        self._client = client
        self._delay_seconds = delay_seconds
        self._retry_times = retry_times
        self._should_retry = should_retry
        self._include_headers = include_headers
        self._queue: list[QueueItem] = []
        self._task: asyncio.Task[None] | None = None
        self._pending_flushes: set[asyncio.Task[None]] = set()

    def __len__(self) -> int:
        return len(self._queue)

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def push(self, request: BatchItem) -> asyncio.Future[Any]:
        """Enfileira um sub-request e devolve o future do seu resultado."""
        future: asyncio.Future[Any] = asyncio.get_running_loop().create_future()
        self._queue.append(QueueItem(request=request, future=future))
        if len(self._queue) >= MAX_BATCH_SIZE:
            task = asyncio.create_task(self.flush())
            self._pending_flushes.add(task)
            task.add_done_callback(self._pending_flushes.discard)
        return future

    def _requeue_or_fail(self, item: QueueItem, error: BaseException) -> None:
        if item.retry < self._retry_times and self._should_retry(error):
            item.retry += 1
            self._queue.append(item)
            logger.debug("batch_item_requeued", extra={"retry": item.retry})
        elif not item.future.done():
            item.future.set_exception(error)

    async def flush(self) -> None:
        """Envia até 50 itens da fila em uma única chamada."""
        items = self._queue[:MAX_BATCH_SIZE]
        del self._queue[:MAX_BATCH_SIZE]
        if not items:
            return

        try:
            responses = await self._client.send_batch(
                [item.request for item in items],
                include_headers=self._include_headers,
            )
        except asyncio.CancelledError:
            # devolve os itens para o início da fila
            self._queue[:0] = items
            raise
        except MessagingApiError as exc:
            logger.warning(
                "batch_flush_failed",
                extra={"size": len(items), "error_type": type(exc).__name__},
            )
            for item in items:
                self._requeue_or_fail(item, exc)
            return
        except Exception as exc:
            logger.exception(
                "batch_flush_error",
                extra={"size": len(items), "error_type": type(exc).__name__},
            )
            for item in items:
                if not item.future.done():
                    item.future.set_exception(exc)
            raise

        for index, item in enumerate(items):
            if index >= len(responses):
                self._requeue_or_fail(item, RemoteApiError(PROVIDER, "missing batch response"))
                continue
            response = responses[index]
            if response.is_success:
                if not item.future.done():
                    item.future.set_result(response.body)
                continue
            self._requeue_or_fail(item, BatchRequestError(item.request, response))

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self._delay_seconds)
            try:
                await self.flush()
            except Exception:
                # os futures do lote já receberam a exceção
                logger.warning("batch_periodic_flush_failed")

    def start(self) -> None:
        """Inicia o flush periódico."""
        if self.is_running:
            return
        self._task = asyncio.create_task(self._run())

    async def stop(self) -> None:
        """Interrompe o flush periódico e descarrega o que restar."""
        if self._task is not None:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None
        while self._queue:
            await self.flush()
