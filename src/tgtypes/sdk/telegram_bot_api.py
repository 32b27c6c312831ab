import json
from typing import Any

import requests
from pydantic import SecretStr
from requests import RequestException, Response

from tgtypes.model.decoding import decode
from tgtypes.model.response import ApiResponse
from tgtypes.request.base import BotApiRequest
from tgtypes.util import error_codes, log
from tgtypes.util.config import config
from tgtypes.util.errors import (
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    DecodeError,
    ExternalServiceError,
    NotFoundError,
    RateLimitError,
    ServiceError,
    ValidationError,
)
from tgtypes.util.functions import mask_bot_url


class TelegramBotAPI:
    """
    https://core.telegram.org/bots/api

    Sends one request struct per call and decodes the result into the request's ``result_type``.
    There are no retries here: failures are mapped onto ``ServiceError`` subclasses and raised.
    """

    __bot_token: SecretStr
    __bot_api_url: str
    __timeout_s: int

    def __init__(
        self,
        bot_token: SecretStr | None = None,
        api_base_url: str | None = None,
        timeout_s: int | None = None,
    ):
        self.__bot_token = bot_token if bot_token is not None else config.telegram_bot_token
        if bot_token is None and not config.has_bot_token:
            raise ConfigurationError("Telegram bot token is not configured", error_codes.BOT_TOKEN_MISSING)
        if not self.__bot_token.get_secret_value():
            raise ConfigurationError("Telegram bot token is empty", error_codes.BOT_TOKEN_MISSING)
        base_url = (api_base_url or config.telegram_api_base_url).rstrip("/")
        self.__bot_api_url = f"{base_url}/bot{self.__bot_token.get_secret_value()}"
        self.__timeout_s = timeout_s or config.web_timeout_s

    def execute(self, request: BotApiRequest) -> Any:
        url = f"{self.__bot_api_url}/{request.method}"
        log.d(f"Calling '{request.method}' at {mask_bot_url(url, self.__bot_token)}")
        files = request.files()
        try:
            if files:
                log.t(f"  Uploading {len(files)} file(s): {sorted(files)}")
                response = requests.post(
                    url,
                    data = request.to_form_fields(),
                    files = files,
                    timeout = self.__timeout_s,
                )
            else:
                payload = request.to_payload()
                if config.log_raw_payloads:
                    log.t(f"  Payload for '{request.method}'", payload)
                response = requests.post(url, json = payload, timeout = self.__timeout_s)
        except RequestException as e:
            message = log.w(f"Telegram is unreachable for '{request.method}'")
            raise ExternalServiceError(message, error_codes.TELEGRAM_UNREACHABLE) from e

        envelope = self.__read_envelope(request.method, response)
        if not envelope.ok:
            raise self.__error_for(request.method, envelope)
        try:
            return decode(request.result_type, envelope.result)
        except DecodeError as e:
            log.w(f"Unexpected result shape for '{request.method}'", e)
            raise

    def __read_envelope(self, method: str, response: Response) -> ApiResponse:
        try:
            body = response.json()
        except ValueError as e:
            message = log.w(f"Unreadable response for '{method}': HTTP_{response.status_code}")
            raise ExternalServiceError(message, error_codes.TELEGRAM_RESPONSE_UNREADABLE) from e
        if config.log_raw_payloads:
            log.t(f"  Response for '{method}'", json.dumps(body, indent = 2))
        try:
            envelope: ApiResponse = decode(ApiResponse, body)
        except DecodeError as e:
            message = log.w(f"Response for '{method}' is not a Bot API envelope: HTTP_{response.status_code}")
            raise ExternalServiceError(message, error_codes.TELEGRAM_RESPONSE_UNREADABLE) from e
        if envelope.ok and response.status_code != 200:
            log.w(f"  Status is not '200' for a successful '{method}': HTTP_{response.status_code}")
        if not envelope.ok and envelope.error_code is None:
            envelope.error_code = response.status_code
        return envelope

    @staticmethod
    def __error_for(method: str, envelope: ApiResponse) -> ServiceError:
        description = envelope.description or "no description"
        message = log.w(f"Telegram refused '{method}': [{envelope.error_code}] {description}")
        remote_code = envelope.error_code
        match remote_code:
            case 400:
                return ValidationError(message, error_codes.REQUEST_REJECTED, telegram_error_code = remote_code)
            case 401:
                return AuthenticationError(message, error_codes.BOT_TOKEN_REJECTED, telegram_error_code = remote_code)
            case 403:
                return AuthorizationError(message, error_codes.BOT_FORBIDDEN, telegram_error_code = remote_code)
            case 404:
                return NotFoundError(message, error_codes.RESOURCE_NOT_FOUND, telegram_error_code = remote_code)
            case 429:
                retry_after_s = envelope.parameters.retry_after if envelope.parameters else None
                return RateLimitError(message, error_codes.TELEGRAM_RATE_LIMITED, retry_after_s = retry_after_s)
        return ExternalServiceError(message, error_codes.TELEGRAM_API_FAILURE, telegram_error_code = remote_code)
