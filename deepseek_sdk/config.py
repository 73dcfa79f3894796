"""Client configuration"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, SecretStr

from deepseek_sdk.errors import ConfigError
from deepseek_sdk.version import NAME, VERSION

DEFAULT_BASE_URL = "https://api.deepseek.com"
DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_MAX_RETRIES = 3
DEFAULT_BACKOFF_FACTOR = 0.5
DEFAULT_MAX_BACKOFF = 8.0
DEFAULT_USER_AGENT = f"{NAME}/{VERSION}"


class DeepSeekConfig(BaseModel):
    """
    Configuration for the DeepSeek API client

    Instances are immutable; the with_* helpers return updated copies.
    The API key is held as a SecretStr so it is redacted from repr and logs.
    """
    model_config = ConfigDict(frozen=True)

    api_key: SecretStr = Field(..., description="API key for bearer authentication")
    base_url: str = Field(DEFAULT_BASE_URL, description="API base URL")
    timeout: float = Field(DEFAULT_TIMEOUT_SECONDS, description="Per-attempt timeout in seconds")
    max_retries: int = Field(DEFAULT_MAX_RETRIES, description="Additional attempts for retryable errors")
    validate_certs: bool = Field(True, description="Verify TLS certificates")
    proxy: Optional[str] = Field(None, description="Optional proxy URL")
    user_agent: str = DEFAULT_USER_AGENT
    backoff_factor: float = Field(DEFAULT_BACKOFF_FACTOR, description="Base delay for exponential backoff")
    max_backoff: float = Field(DEFAULT_MAX_BACKOFF, description="Upper bound for a single backoff delay")

    @classmethod
    def new(cls, api_key: str) -> "DeepSeekConfig":
        """Create a configuration with defaults for everything but the key"""
        return cls(api_key=SecretStr(api_key))

    def with_base_url(self, url: str) -> "DeepSeekConfig":
        return self.model_copy(update={"base_url": url})

    def with_timeout(self, seconds: float) -> "DeepSeekConfig":
        return self.model_copy(update={"timeout": seconds})

    def with_max_retries(self, retries: int) -> "DeepSeekConfig":
        return self.model_copy(update={"max_retries": retries})

    def with_proxy(self, proxy: str) -> "DeepSeekConfig":
        return self.model_copy(update={"proxy": proxy})

    def with_validate_certs(self, validate: bool) -> "DeepSeekConfig":
        return self.model_copy(update={"validate_certs": validate})

    def with_user_agent(self, user_agent: str) -> "DeepSeekConfig":
        return self.model_copy(update={"user_agent": user_agent})

    def with_backoff(self, factor: float, max_backoff: Optional[float] = None) -> "DeepSeekConfig":
        update = {"backoff_factor": factor}
        if max_backoff is not None:
            update["max_backoff"] = max_backoff
        return self.model_copy(update=update)

    @property
    def chat_completions_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/chat/completions"

    def validate(self) -> None:
        """
        Check the configuration

        Raises:
            ConfigError: If any setting makes requests impossible
        """
        if not self.api_key.get_secret_value().strip():
            raise ConfigError("API key cannot be empty")

        if not self.base_url.strip():
            raise ConfigError("Base URL cannot be empty")

        if not self.base_url.startswith(("http://", "https://")):
            raise ConfigError("Base URL must start with http:// or https://")

        if self.timeout <= 0:
            raise ConfigError("Timeout must be greater than 0")

        if self.max_retries < 0:
            raise ConfigError("Max retries cannot be negative")

        if self.backoff_factor < 0 or self.max_backoff < 0:
            raise ConfigError("Backoff delays cannot be negative")
