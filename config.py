from __future__ import annotations

from dataclasses import dataclass, field
import os
from pathlib import Path

from resource_docs import RESOURCE_ROOT


@dataclass
class Settings:
    """Runtime configuration for the documentation MCP server."""

    server_name: str = "php-symfony-docs"
    resource_root: Path = field(default_factory=lambda: RESOURCE_ROOT)
    host: str = "127.0.0.1"
    port: int = 8085
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        server_name = os.getenv("DOCS_MCP_SERVER_NAME", cls.server_name)
        root = os.getenv("DOCS_MCP_RESOURCE_ROOT")
        resource_root = Path(root).expanduser().absolute() if root else RESOURCE_ROOT
        host = os.getenv("MCP_HOST", cls.host)
        port = int(os.getenv("MCP_PORT", str(cls.port)))
        log_level = os.getenv("DOCS_MCP_LOG_LEVEL", cls.log_level).upper()
        return cls(
            server_name=server_name,
            resource_root=resource_root,
            host=host,
            port=port,
            log_level=log_level,
        )
