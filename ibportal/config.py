# ibportal/config.py
"""Gateway configuration loading."""

import logging
from dataclasses import dataclass
from pathlib import Path

import httpx
import yaml

from ibportal.client import Client

logger = logging.getLogger(__name__)

DEFAULT_GATEWAY_URL = "https://127.0.0.1:5555"


@dataclass(frozen=True)
class GatewayConfig:
    """Connection settings for a Client Portal gateway."""

    base_url: str = DEFAULT_GATEWAY_URL

    # The local gateway serves a self-signed certificate.
    verify_ssl: bool = False
    timeout_seconds: float = 10.0

    @classmethod
    def from_yaml(cls, path: str) -> "GatewayConfig":
        """Load gateway config from YAML file."""
        file_path = Path(path)
        if not file_path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(file_path) as f:
            data = yaml.safe_load(f) or {}

        gateway_data = data.get("gateway", {})

        return cls(
            base_url=gateway_data.get("base_url", DEFAULT_GATEWAY_URL).rstrip("/"),
            verify_ssl=gateway_data.get("verify_ssl", False),
            timeout_seconds=float(gateway_data.get("timeout_seconds", 10.0)),
        )

    def http_client(self) -> httpx.Client:
        return httpx.Client(verify=self.verify_ssl, timeout=self.timeout_seconds)


def create_client(config: GatewayConfig) -> Client:
    """Build a Client that owns an httpx.Client configured from config."""
    client = Client(config.base_url, config.http_client(), owns_http_client=True)
    logger.info(f"Client Portal client created for {config.base_url}")
    return client


def load_client(config_path: str) -> Client:
    """Factory function to create a client from config file."""
    return create_client(GatewayConfig.from_yaml(config_path))
