from __future__ import annotations

import logging
from typing import Callable, Optional

from fastmcp import FastMCP

from config import Settings
from resources import ResourceRegistry

logger = logging.getLogger(__name__)


def create_mcp(settings: Optional[Settings] = None, registry: Optional[ResourceRegistry] = None) -> FastMCP:
    """Create a FastMCP server exposing the bundled documentation resources.

    Each domain in the registry contributes ``<scheme>://docs/index`` and the
    ``<scheme>://docs/{topic}`` template. Lookup failures propagate as
    ``ResourceError`` subclasses so their messages reach the client.
    """
    cfg = settings or Settings.from_env()
    docs = registry or ResourceRegistry(cfg)

    mcp = FastMCP(name=cfg.server_name)

    for entry in docs.entries():
        register = mcp.resource(
            entry.uri,
            name=entry.name,
            description=entry.description,
            mime_type=entry.mime_type,
        )
        register(_template_handler(entry.handler) if entry.is_template else _static_handler(entry.handler))
        logger.debug("Registered resource %s at %s", entry.name, entry.uri)

    logger.info("Serving %d documentation resources from %s", len(docs.entries()), cfg.resource_root)
    return mcp


# FastMCP matches URI template parameters against the handler signature, so
# handlers get explicit signatures instead of exposing resolver methods.
def _static_handler(handler: Callable[[], str]) -> Callable[[], str]:
    def read_index() -> str:
        return handler()

    return read_index


def _template_handler(handler: Callable[[str], str]) -> Callable[[str], str]:
    def read_topic(topic: str) -> str:
        return handler(topic)

    return read_topic


__all__ = ["create_mcp"]
