"""
Payment Service Client Implementation.

Creates payments on the external gateway over HTTP (aiohttp).

Retry policy:
- attempts = retry_count when retry_enabled, else 1
- 5xx, timeouts and transport errors are retried after a fixed delay
- 401 and every other 4xx are terminal on first occurrence
"""
import asyncio
import logging
from typing import Awaitable, Callable, Optional

import aiohttp
from pydantic import ValidationError

from orderhub.application.dtos.payment_dto import CreatePaymentRequest, CreatePaymentResponse
from orderhub.application.interfaces import IPaymentServiceClient
from orderhub.domain.exceptions import GatewayAuthenticationError, GatewayError
from orderhub.settings.payment_settings import PaymentServiceSettings


logger = logging.getLogger(__name__)

HTTP_REQUEST_TIMEOUT = 408


class PaymentServiceClient(IPaymentServiceClient):
    """
    aiohttp implementation of the payment gateway client.

    A session may be injected (shared pool, tests); otherwise a session is
    opened per call.
    """

    def __init__(
        self,
        settings: PaymentServiceSettings,
        session: Optional[aiohttp.ClientSession] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        """
        Initialize payment client.

        Args:
            settings: Gateway URL, timeout and retry settings
            session: Optional aiohttp session to reuse
            sleep: Delay function between attempts
        """
        self.settings = settings
        self.url = settings.base_url.rstrip("/") + settings.create_path
        self._session = session
        self._sleep = sleep
        logger.info(f"PaymentServiceClient initialized ({self.url}, attempts={settings.max_attempts})")

    async def create_payment(
        self, request: CreatePaymentRequest, bearer_token: str
    ) -> CreatePaymentResponse:
        max_attempts = self.settings.max_attempts
        payload = request.to_gateway_payload()
        headers = {"Authorization": f"Bearer {bearer_token}"}

        for attempt in range(1, max_attempts + 1):
            logger.info(f"[{request.order_id}] Creating payment (attempt {attempt}/{max_attempts})")
            try:
                response = await self._send(payload, headers, request.order_id)
            except GatewayError as e:
                if not self._should_retry(e.status_code):
                    logger.error(f"[{request.order_id}] Payment creation failed: {e}")
                    raise
                if attempt >= max_attempts:
                    logger.error(
                        f"[{request.order_id}] Payment creation failed after {max_attempts} attempt(s): {e}"
                    )
                    raise
                logger.warning(
                    f"[{request.order_id}] Retrying payment creation in "
                    f"{self.settings.retry_delay_seconds}s after: {e}"
                )
                await self._sleep(self.settings.retry_delay_seconds)
                continue

            logger.info(f"[{request.order_id}] Payment created: {response.payment_id}")
            return response

        raise GatewayError(f"Payment creation for order {request.order_id} was not attempted")

    @staticmethod
    def _should_retry(status_code: Optional[int]) -> bool:
        """Transport failure (no status), timeout, or 5xx."""
        if status_code is None or status_code == HTTP_REQUEST_TIMEOUT:
            return True
        return status_code >= 500

    async def _send(self, payload: dict, headers: dict, order_id: object) -> CreatePaymentResponse:
        if self._session is not None:
            return await self._post(self._session, payload, headers, order_id)
        async with aiohttp.ClientSession() as session:
            return await self._post(session, payload, headers, order_id)

    async def _post(self, session, payload: dict, headers: dict, order_id: object) -> CreatePaymentResponse:
        timeout = aiohttp.ClientTimeout(total=self.settings.timeout_seconds)
        try:
            async with session.post(self.url, json=payload, headers=headers, timeout=timeout) as response:
                status = response.status
                body = await response.text()
        except asyncio.TimeoutError as e:
            raise GatewayError(
                f"Timeout creating payment for order {order_id}", status_code=HTTP_REQUEST_TIMEOUT
            ) from e
        except aiohttp.ClientError as e:
            raise GatewayError(f"Transport error creating payment for order {order_id}: {e}") from e

        if status == 401:
            raise GatewayAuthenticationError(
                f"Token invalid or expired: gateway returned 401 for order {order_id}"
            )
        if not 200 <= status < 300:
            raise GatewayError(f"Gateway returned HTTP {status} for order {order_id}: {body}", status_code=status)

        if not body or not body.strip():
            raise GatewayError(f"Empty response from gateway for order {order_id}", status_code=status)
        try:
            return CreatePaymentResponse.model_validate_json(body)
        except ValidationError as e:
            raise GatewayError(
                f"Invalid response from gateway for order {order_id}: {e}", status_code=status
            ) from e
