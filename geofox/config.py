"""Configuration objects for the Geofox client."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Iterable, Mapping, Optional, Tuple, Union

from .constants import DEFAULT_CONFIG, ENV_PREFIX, VERSION
from .exceptions import ConfigurationError

HeaderPairs = Tuple[Tuple[str, str], ...]


@dataclass(frozen=True)
class Credentials:
    user: str
    password: str

    def __repr__(self) -> str:
        return f"Credentials(user={self.user!r}, password='***')"


@dataclass(frozen=True)
class ClientConfig:
    """
    Immutable client settings shared by every request.

    Attributes:
        base_url: API root, paths are appended to it
        timeout: Receive timeout in seconds
        headers: Extra headers as ordered (name, value) pairs
        credentials: Application id and signing secret, None for public calls
        platform: Value of the X-Platform header (ios, android, web, ...)
        retry: Enable transport level retries
        max_retries: Retry budget when retry is enabled
        version: Library version reported in the User-Agent
    """

    base_url: str = DEFAULT_CONFIG['base_url']
    timeout: float = DEFAULT_CONFIG['timeout']
    headers: HeaderPairs = field(default_factory=tuple)
    credentials: Optional[Credentials] = None
    platform: Optional[str] = None
    retry: bool = DEFAULT_CONFIG['retry']
    max_retries: int = DEFAULT_CONFIG['max_retries']
    version: Optional[str] = VERSION

    def __post_init__(self) -> None:
        object.__setattr__(self, 'base_url', (self.base_url or '').rstrip('/'))
        object.__setattr__(self, 'headers', _header_pairs(self.headers))
        self._validate()

    def _validate(self) -> None:
        if not self.base_url:
            raise ConfigurationError("base_url cannot be empty")

        if self.timeout is None or self.timeout <= 0:
            raise ConfigurationError("timeout must be positive")

        if self.max_retries < 0:
            raise ConfigurationError("max_retries cannot be negative")

    @property
    def authenticated(self) -> bool:
        return self.credentials is not None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **options) -> "ClientConfig":
        """
        Build a config from keyword options, falling back to GEOFOX_* variables.

        Explicit options win over the environment, the environment wins over
        the defaults. Credentials are attached only when both user and
        password resolve to a value.
        """
        env = os.environ if environ is None else environ

        def lookup(key: str):
            value = options.get(key)
            if value is None:
                value = env.get(ENV_PREFIX + key.upper()) or None
            return value

        base_url = lookup('base_url') or DEFAULT_CONFIG['base_url']
        timeout = lookup('timeout')
        try:
            timeout = float(timeout) if timeout is not None else DEFAULT_CONFIG['timeout']
        except ValueError:
            raise ConfigurationError(f"timeout must be a number, got {timeout!r}")

        user = lookup('user')
        password = lookup('password')
        credentials = options.get('credentials')
        if credentials is None and user and password:
            credentials = Credentials(user=user, password=password)

        kwargs = {
            'base_url': base_url,
            'timeout': timeout,
            'headers': options.get('headers') or (),
            'credentials': credentials,
            'platform': lookup('platform'),
            'retry': bool(options.get('retry', DEFAULT_CONFIG['retry'])),
            'max_retries': options.get('max_retries', DEFAULT_CONFIG['max_retries']),
        }
        if 'version' in options:
            kwargs['version'] = options['version']
        return cls(**kwargs)


def _header_pairs(headers: Union[Mapping[str, str], Iterable[Tuple[str, str]], None]) -> HeaderPairs:
    if not headers:
        return ()
    if isinstance(headers, Mapping):
        headers = headers.items()
    return tuple((str(name), str(value)) for name, value in headers)


__all__ = ["ClientConfig", "Credentials"]
