# ruff: noqa: E501

import os
from typing import Callable

from pydantic import SecretStr

from tgtypes.util.singleton import Singleton


class Config(metaclass = Singleton):

    INVALID_TOKEN = "invalid"  # placeholder until a real bot token is configured

    log_level: str
    log_raw_payloads: bool
    web_timeout_s: int
    telegram_api_base_url: str

    telegram_bot_token: SecretStr

    def all_secrets(self) -> list[SecretStr]:
        return [self.telegram_bot_token]

    def __init__(
        self,
        def_log_level: str = "INFO",
        def_log_raw_payloads: bool = False,
        def_web_timeout_s: int = 10,
        def_telegram_api_base_url: str = "https://api.telegram.org",

        def_telegram_bot_token: SecretStr = SecretStr(INVALID_TOKEN),
    ):
        # @formatter:off
        self.log_level = self.__env("LOG_LEVEL", lambda: def_log_level).lower()
        self.log_raw_payloads = self.__env("LOG_TG_PAYLOADS", lambda: str(def_log_raw_payloads)).lower() == "true"
        self.web_timeout_s = int(self.__env("WEB_TIMEOUT_S", lambda: str(def_web_timeout_s)))
        self.telegram_api_base_url = self.__env("TELEGRAM_API_BASE_URL", lambda: def_telegram_api_base_url).rstrip("/")

        self.telegram_bot_token = self.__senv("TELEGRAM_BOT_TOKEN", lambda: def_telegram_bot_token)
        # @formatter:on

    @property
    def has_bot_token(self) -> bool:
        token = self.telegram_bot_token.get_secret_value()
        return bool(token) and token != Config.INVALID_TOKEN

    @staticmethod
    def __env(name: str, default: Callable[[], str]) -> str:
        env_value = os.environ.get(name, "").strip()
        return env_value if env_value else default()

    @staticmethod
    def __senv(name: str, default: Callable[[], SecretStr]) -> SecretStr:
        env_value = os.environ.get(name, "").strip()
        return SecretStr(env_value) if env_value else default()


config = Config()
