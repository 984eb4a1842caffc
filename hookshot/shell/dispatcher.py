"""Webhook Dispatcher - Imperative Shell.

This module handles HTTP communication with the chat service webhook.
All I/O is contained here; message modelling and body selection are in
the core module.
"""

import logging
import threading
from dataclasses import dataclass
from urllib.parse import urlparse

import requests

from hookshot.core.config import DEFAULT_TIMEOUT
from hookshot.core.errors import (
    DispatchError,
    EncodingError,
    RemoteRejectionError,
    RequestBuildError,
    TransportError,
)
from hookshot.core.message import Message
from hookshot.core.request_body import as_request_kwargs, build_request_body


logger = logging.getLogger(__name__)


# The webhook endpoint answers a delivered message with 204 No Content
SUCCESS_STATUS = 204


@dataclass
class DispatchResult:
    """Outcome of a single send.

    Attributes:
        success: Whether the message was accepted
        status_code: HTTP status code (0 when no response was received)
        error: The failure, if any
    """
    success: bool
    status_code: int
    error: DispatchError | None = None

    def raise_for_error(self) -> None:
        """Raise the carried error, if there is one."""
        if self.error is not None:
            raise self.error


def _redact(url: str) -> str:
    """Strip the path (which embeds the webhook token) from a URL for logs."""
    parsed = urlparse(url)
    if not parsed.netloc:
        return "<invalid url>"
    return f"{parsed.scheme}://{parsed.netloc}/..."


class Dispatcher:
    """Sends one webhook message per call to a fixed URL.

    This is part of the imperative shell - it handles HTTP I/O.
    The session is reused across sends; configure it (headers, adapters,
    proxies) through the `session` attribute if the defaults don't fit.

    One lock guards the current message for the whole of a send, so a
    concurrent set_message() waits until the in-flight send finishes.
    """

    def __init__(
        self,
        url: str,
        timeout: float = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize the dispatcher.

        Args:
            url: Webhook URL
            timeout: Request timeout in seconds
            session: Session to reuse. A new one is created (and owned)
                     when omitted.
        """
        self.url = url
        self.timeout = timeout
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()
        self._message = Message()
        self._lock = threading.Lock()

    @property
    def message(self) -> Message:
        """The message the next send() will deliver."""
        with self._lock:
            return self._message

    def set_message(self, message: Message) -> None:
        """Replace the current message.

        Blocks while a send is in flight.
        """
        with self._lock:
            self._message = message

    def send(self) -> DispatchResult:
        """Send the current message.

        This method performs HTTP I/O and blocks until the round trip
        completes or fails. Nothing is retried.

        Returns:
            DispatchResult indicating success or carrying the DispatchError
        """
        with self._lock:
            try:
                status_code = self._send_locked(self._message)
            except DispatchError as e:
                return DispatchResult(
                    success=False,
                    status_code=e.status_code or 0,
                    error=e,
                )
        return DispatchResult(success=True, status_code=status_code)

    def _prepare(self, message: Message) -> requests.PreparedRequest:
        """Build the prepared request for a message.

        Raises:
            EncodingError: If the message cannot be encoded
            RequestBuildError: If the request cannot be built
        """
        try:
            body = build_request_body(message)
        except EncodingError as e:
            logger.error("Could not encode webhook message: %s", str(e))
            raise

        request = requests.Request("POST", self.url, **as_request_kwargs(body))

        try:
            prepared = self.session.prepare_request(request)
            # Fails on schemes no adapter can handle
            self.session.get_adapter(prepared.url)
        except (requests.RequestException, ValueError, OSError) as e:
            logger.error("Could not build webhook request: %s", str(e))
            raise RequestBuildError(
                "error while building the request", cause=e,
            ) from e

        return prepared

    def _send_locked(self, message: Message) -> int:
        prepared = self._prepare(message)

        logger.info(
            "Sending webhook to %s (%d embeds, %d attachments)",
            _redact(self.url),
            len(message.embeds),
            len(message.attachments),
        )

        # Honour proxy and CA bundle settings from the environment
        settings = self.session.merge_environment_settings(
            prepared.url, {}, True, None, None,
        )

        try:
            response = self.session.send(prepared, timeout=self.timeout, **settings)
        except requests.Timeout as e:
            logger.error("Webhook request timed out")
            raise TransportError("webhook request timed out", cause=e) from e
        except requests.RequestException as e:
            logger.error("Webhook request failed: %s", str(e))
            raise TransportError("error when sending webhook", cause=e) from e

        with response:
            if response.status_code == SUCCESS_STATUS:
                logger.info("Webhook delivered")
                return response.status_code

            status_line = f"{response.status_code} {response.reason or ''}".strip()
            try:
                body = response.text
            except requests.RequestException as e:
                logger.warning(
                    "Webhook returned %s and its body could not be read: %s",
                    status_line,
                    str(e),
                )
                raise RemoteRejectionError(
                    response.status_code, status_line, body_read_error=e,
                ) from e

            logger.warning("Webhook returned %s - %s", status_line, body)
            raise RemoteRejectionError(response.status_code, status_line, body=body)

    def close(self) -> None:
        """Release the session if this dispatcher created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "Dispatcher":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def create(url: str, timeout: float = DEFAULT_TIMEOUT) -> Dispatcher:
    """Create a dispatcher for a webhook URL."""
    return Dispatcher(url, timeout=timeout)
