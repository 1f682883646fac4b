from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Tuple


RESOURCE_ROOT = Path(__file__).parent.absolute()


@dataclass(frozen=True)
class DomainSpec:
    domain: str
    title: str
    description: str
    topics: Tuple[str, ...]
    aliases: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    example_alias: str = ""


DOMAIN_CATALOG: Tuple[DomainSpec, ...] = (
    DomainSpec(
        domain="php",
        title="PHP",
        description="PHP language documentation and best practices",
        topics=("best-practices", "common-patterns"),
        aliases=MappingProxyType(
            {
                "best": "best-practices",
                "practices": "best-practices",
                "patterns": "common-patterns",
            }
        ),
        example_alias="best",
    ),
    DomainSpec(
        domain="symfony",
        title="Symfony",
        description="Symfony framework documentation and guides",
        topics=("console-commands", "dependency-injection"),
        aliases=MappingProxyType(
            {
                "console": "console-commands",
                "di": "dependency-injection",
                "dependency": "dependency-injection",
            }
        ),
        example_alias="console",
    ),
)


__all__ = ["DomainSpec", "DOMAIN_CATALOG", "RESOURCE_ROOT"]
