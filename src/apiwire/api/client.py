"""
Authenticated API client.

Builds requests against an ``Endpoint``, attaches the authorization token when
a request requires it, sends through an ``HttpTransport`` on a worker pool and
decodes JSON responses into the caller's type.

A 401 from any request is treated as the server revoking the credential: the
client drops its authorization, emits a ``LoggedOutEvent`` and cancels the
request's future instead of failing it.
"""

import json
import threading
import uuid
from concurrent.futures import Future, InvalidStateError, ThreadPoolExecutor
from pathlib import Path
from typing import Any, Collection, Generic, Mapping, Optional, Sequence, Type, TypeVar, Union

import requests
from pydantic import BaseModel

from apiwire.constants import DEFAULT_MAX_WORKERS
from apiwire.core.config import APIWireConfig, ConfigManager
from apiwire.exceptions import CredentialsRequiredError, UnauthorizedError
from apiwire.exceptions.api import decode_json
from apiwire.infrastructure.http import HttpTransport, MockResponse, format_request
from apiwire.logging import LoggingContext, configure_logging, get_logger
from apiwire.models import (
    JSON_CONTENT_TYPE,
    Authorization,
    Endpoint,
    HeaderField,
    HTTPMethod,
    HTTPScheme,
    StatusCode,
)
from apiwire.storage import AuthorizationStore, EncryptedFileAuthorizationStore

from .events import EventBroadcaster, LoggedOutEvent

A = TypeVar("A", bound=Authorization)

DEFAULT_SUCCESS_CODES = (StatusCode.OK,)


class APIClient(Generic[A]):
    """Client for one endpoint holding at most one authorization."""

    def __init__(
        self,
        endpoint: Endpoint,
        store: AuthorizationStore,
        authorization_type: Type[A] = Authorization,
        authorization_header: str = HeaderField.AUTHORIZATION,
        transport: Optional[HttpTransport] = None,
        executor: Optional[ThreadPoolExecutor] = None,
        max_workers: int = DEFAULT_MAX_WORKERS,
        debug_print_requests: bool = False,
    ):
        self.endpoint = endpoint
        self.store = store
        self.authorization_type = authorization_type
        self.authorization_header = authorization_header
        self.transport = transport or HttpTransport()
        self.debug_print_requests = debug_print_requests
        self.logger = get_logger(__name__, endpoint=endpoint.name)
        self.logged_out: EventBroadcaster[LoggedOutEvent] = EventBroadcaster("logged_out")

        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="apiwire"
        )
        self._lock = threading.RLock()
        self._authorization: Optional[A] = self._load_authorization()

    @classmethod
    def from_config(
        cls,
        config: APIWireConfig,
        authorization_type: Type[A] = Authorization,
        store: Optional[AuthorizationStore] = None,
    ) -> "APIClient[A]":
        """Build a client from configuration.

        Without an explicit ``store`` the encrypted file store is used at the
        configured credentials path.
        """
        client_config = config.client
        if store is None:
            store = EncryptedFileAuthorizationStore(client_config.credentials_file)
        return cls(
            endpoint=config.endpoint.to_endpoint(),
            store=store,
            authorization_type=authorization_type,
            authorization_header=client_config.authorization_header,
            transport=HttpTransport(timeout=client_config.timeout),
            max_workers=client_config.max_workers,
            debug_print_requests=client_config.debug_print_requests,
        )

    @classmethod
    def from_config_file(
        cls,
        config_file: Optional[Path] = None,
        authorization_type: Type[A] = Authorization,
        store: Optional[AuthorizationStore] = None,
    ) -> "APIClient[A]":
        """Load configuration, install its log handlers and build a client.

        ``config_file`` defaults to ``~/.config/apiwire/config.toml``;
        ``APIWIRE_*`` environment variables override it.
        """
        config = ConfigManager(config_file).load_config()
        configure_logging(config.logging)
        return cls.from_config(config, authorization_type, store)

    def _load_authorization(self) -> Optional[A]:
        record = self.store.load()
        authorization = self.authorization_type.from_record(record)
        if record and authorization is None:
            self.logger.info(
                f"Discarding stored authorization for {self.endpoint.name}: "
                f"not a valid version {self.authorization_type.CURRENT_VERSION} record"
            )
        return authorization

    # Authorization state

    @property
    def authorization(self) -> Optional[A]:
        with self._lock:
            return self._authorization

    @authorization.setter
    def authorization(self, value: Optional[A]) -> None:
        with self._lock:
            self._authorization = value
            if value is not None:
                self.store.save(value.to_record())
            else:
                self.store.delete()

    @property
    def has_credentials(self) -> bool:
        return self.authorization is not None

    @property
    def authorization_token(self) -> str:
        """Token of the held authorization.

        Raises:
            CredentialsRequiredError: no authorization is held
        """
        authorization = self.authorization
        if authorization is None:
            raise CredentialsRequiredError(self.endpoint.name)
        return authorization.authorization_token

    @authorization_token.setter
    def authorization_token(self, token: str) -> None:
        with self._lock:
            if self._authorization is None:
                raise CredentialsRequiredError(self.endpoint.name)
            self.authorization = self._authorization.with_token(token)

    def logout(self, reason: str = "logout") -> None:
        """Drop the authorization and notify ``logged_out`` subscribers.

        The in-memory authorization is cleared and subscribers are notified
        even when the store cannot delete its record; the store's error is
        raised after notification.
        """
        try:
            with LoggingContext(
                entry_msg=f"Logging out of {self.endpoint.name} ({reason})",
                success_msg=f"Logged out of {self.endpoint.name}.",
                failure_msg=f"Stored authorization for {self.endpoint.name} was not deleted",
                logger=self.logger,
            ):
                self.authorization = None
        finally:
            self.logged_out.emit(LoggedOutEvent(self, reason))

    # Requests

    def new_request(
        self,
        method: Union[HTTPMethod, str],
        scheme: Union[HTTPScheme, str] = HTTPScheme.HTTPS,
        path: Optional[Sequence[Any]] = None,
        query: Optional[Mapping[str, Any]] = None,
        is_auth: bool = False,
        body: Any = None,
    ) -> requests.PreparedRequest:
        """Build a request to the endpoint.

        ``body`` (any JSON-serializable value or pydantic model) is sent as
        JSON when not None.

        Raises:
            CredentialsRequiredError: ``is_auth`` is set and no authorization is held
        """
        headers = {
            HeaderField.CLIENT_REQUEST_ID: str(uuid.uuid4()),
            HeaderField.CONNECTION: "close",
            HeaderField.CACHE_CONTROL: "no-cache",
            HeaderField.PRAGMA: "no-cache",
        }

        if is_auth:
            authorization = self.authorization
            if authorization is None:
                raise CredentialsRequiredError(self.endpoint.name)
            headers[self.authorization_header] = authorization.authorization_token

        data = None
        if body is not None:
            data = self._encode_body(body)
            headers[HeaderField.CONTENT_TYPE] = JSON_CONTENT_TYPE
            headers[HeaderField.CONTENT_LENGTH] = str(len(data))

        request = requests.Request(
            method=HTTPMethod(method.upper()).value,
            url=self.endpoint.url(scheme, path, query),
            headers=headers,
            data=data,
        ).prepare()

        if self.debug_print_requests:
            self.logger.info(
                format_request(request, masked_headers=[self.authorization_header]),
                extra={"client_request_id": headers[HeaderField.CLIENT_REQUEST_ID]},
            )

        return request

    @staticmethod
    def _encode_body(body: Any) -> bytes:
        if isinstance(body, BaseModel):
            body = body.model_dump(mode="json", by_alias=True)
        return json.dumps(body).encode("utf-8")

    def send(
        self,
        request: requests.PreparedRequest,
        response_type: Any = None,
        success_codes: Collection[int] = DEFAULT_SUCCESS_CODES,
        expected_failure_codes: Collection[int] = (),
        mock: Optional[MockResponse] = None,
    ) -> Future:
        """Send ``request`` on the worker pool.

        The returned future resolves to the body decoded as ``response_type``
        (or None when ``response_type`` is None). It fails with the transport,
        status or decode error otherwise, except for a 401, which logs the
        client out and cancels the future.
        """
        future: Future = Future()
        self._executor.submit(
            self._perform, future, request, response_type, success_codes,
            expected_failure_codes, mock,
        )
        return future

    def call(
        self,
        method: Union[HTTPMethod, str],
        scheme: Union[HTTPScheme, str] = HTTPScheme.HTTPS,
        path: Optional[Sequence[Any]] = None,
        query: Optional[Mapping[str, Any]] = None,
        is_auth: bool = False,
        body: Any = None,
        response_type: Any = None,
        success_codes: Collection[int] = DEFAULT_SUCCESS_CODES,
        expected_failure_codes: Collection[int] = (),
        mock: Optional[MockResponse] = None,
    ) -> Future:
        """Build and send a request; build failures come back as a failed future."""
        try:
            request = self.new_request(method, scheme, path, query, is_auth, body)
        except Exception as e:
            future: Future = Future()
            future.set_exception(e)
            return future
        return self.send(request, response_type, success_codes, expected_failure_codes, mock)

    def _perform(
        self,
        future: Future,
        request: requests.PreparedRequest,
        response_type: Any,
        success_codes: Collection[int],
        expected_failure_codes: Collection[int],
        mock: Optional[MockResponse],
    ) -> None:
        # The future stays PENDING while the request runs so that a 401 can still cancel it
        if future.cancelled():
            self.logger.debug(f"Skipping cancelled request {request.method} {request.url}")
            return

        try:
            response = self.transport.retrieve(request, success_codes, expected_failure_codes, mock)
            result = None
            if response_type is not None:
                result = decode_json(response.content, response_type)
        except UnauthorizedError:
            try:
                self.logout(reason="unauthorized")
            except Exception:
                self.logger.exception(
                    f"Forced logout of {self.endpoint.name} could not clear the store",
                    extra={"client_request_id": request.headers.get(HeaderField.CLIENT_REQUEST_ID)},
                )
            finally:
                future.cancel()
            return
        except Exception as e:
            self._resolve(future, exception=e)
            return

        self._resolve(future, result=result)

    def _resolve(
        self, future: Future, result: Any = None, exception: Optional[BaseException] = None
    ) -> None:
        try:
            if exception is not None:
                future.set_exception(exception)
            else:
                future.set_result(result)
        except InvalidStateError:
            # Cancelled by the caller while the request was in flight
            self.logger.debug("Dropping outcome of a cancelled request")

    def close(self) -> None:
        """Stop the worker pool and close the transport."""
        if self._owns_executor:
            self._executor.shutdown(wait=True)
        self.transport.close()

    def __enter__(self) -> "APIClient[A]":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()


