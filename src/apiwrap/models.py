"""Configuration models shared across apiwrap.

These Pydantic models describe *how to reach* a vendor API, not the vendor's
own payloads (those live in each vendor package's ``models`` module):

    :class:`AuthConfig`, :class:`RequestConfig`, :class:`OutputConfig`,
    :class:`VendorProfile`, and :class:`GlobalConfig`.

Every vendor package declares a default :class:`VendorProfile`; the user's
``config.json`` and environment variables are layered on top of it by
:func:`~apiwrap.config.resolve_vendor_profile`.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, SecretStr


class AuthConfig(BaseModel):
    """Authentication settings embedded in a :class:`VendorProfile`.

    The ``type`` field selects the auth plugin (``bearer`` or ``api_key``).
    The credential itself is either given directly via ``token`` (when a
    client is built in code) or resolved from ``source`` at authentication
    time.

    Example::

        AuthConfig(
            type="api_key",
            header="Api-Key",
            source="env:DISCOURSE_API_KEY",
            secret_header="Api-Username",
            secret_source="env:DISCOURSE_API_USERNAME",
        )
    """

    type: str = Field(description="Auth type: bearer, api_key")
    source: str = Field(
        default="prompt",
        description="Credential source: env:VAR, file:/path, prompt",
    )
    token: Optional[SecretStr] = Field(
        default=None, description="Credential supplied directly; wins over source"
    )
    header: Optional[str] = Field(
        default=None, description="Header (or query/cookie) name for api_key auth"
    )
    location: str = Field(
        default="header", description="Where to send an api_key: header, query, cookie"
    )
    secret_source: Optional[str] = Field(
        default=None, description="Source of a second credential sent next to the key"
    )
    secret: Optional[SecretStr] = None
    secret_header: Optional[str] = None

    def resolve_credential(self) -> str:
        """Return the primary credential, resolving ``source`` when no token is set."""
        if self.token is not None:
            return self.token.get_secret_value()
        from apiwrap.config import resolve_credential

        return resolve_credential(self.source)

    def resolve_secret(self) -> Optional[str]:
        """Return the secondary credential, or ``None`` when none is configured."""
        if self.secret is not None:
            return self.secret.get_secret_value()
        if not self.secret_source:
            return None
        from apiwrap.config import resolve_credential

        return resolve_credential(self.secret_source)


class RequestConfig(BaseModel):
    """HTTP settings applied to every call made with a profile.

    The long total timeout leaves room for file downloads; connection
    setup is bounded separately.
    """

    timeout: float = Field(default=600, description="Request timeout in seconds")
    connect_timeout: float = Field(default=60, description="Connect timeout in seconds")
    verify_ssl: bool = Field(default=True, description="Verify SSL certificates")
    max_retries: int = Field(default=3, description="Max retry attempts")


class OutputConfig(BaseModel):
    """Default output format preferences stored in :class:`GlobalConfig`."""

    format: str = Field(
        default="auto", description="Output format: auto, json, plain, rich"
    )


class VendorProfile(BaseModel):
    """Everything needed to talk to one vendor API.

    Extra fields are preserved in ``model_extra`` so a config file can carry
    vendor-specific settings without model changes.
    """

    model_config = ConfigDict(extra="allow")

    name: str
    base_url: Optional[str] = Field(default=None, description="API root URL")
    auth: Optional[AuthConfig] = None
    request: RequestConfig = Field(default_factory=RequestConfig)


class VendorOverride(BaseModel):
    """Per-vendor section of ``config.json``; unset fields keep the vendor default."""

    base_url: Optional[str] = None
    source: Optional[str] = None
    secret_source: Optional[str] = None
    request: Optional[RequestConfig] = None


class GlobalConfig(BaseModel):
    """User-wide configuration persisted at ``~/.config/apiwrap/config.json``.

    Loaded by :func:`~apiwrap.config.load_global_config`. Environment
    variables take precedence over anything stored here.
    """

    output: OutputConfig = Field(default_factory=OutputConfig)
    vendors: dict[str, VendorOverride] = Field(default_factory=dict)
