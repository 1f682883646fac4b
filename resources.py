from __future__ import annotations

from dataclasses import dataclass, field
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Tuple
from urllib.parse import unquote

from config import Settings
from errors import InvalidTopic, ResourceNotFound, ResourceReadError, UnknownResource, UnknownTopic
from resource_docs import DOMAIN_CATALOG, DomainSpec

logger = logging.getLogger(__name__)

MARKDOWN_MIME_TYPE = "text/markdown"
_SEPARATORS = ("/", "\\")
INDEX_NAME = "index"


@dataclass(frozen=True)
class DomainConfig:
    """Static tables for one documentation domain.

    ``topics`` is the ordered allowlist and ``aliases`` maps alternate names
    onto entries of it. Both are fixed for the lifetime of the process.
    """

    domain: str
    resource_root: Path
    topics: Tuple[str, ...]
    aliases: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    title: str = ""
    description: str = ""
    example_alias: str = ""

    def __post_init__(self) -> None:
        # Normalize caller-supplied containers into read-only ones.
        object.__setattr__(self, "topics", tuple(self.topics))
        object.__setattr__(self, "aliases", MappingProxyType(dict(self.aliases)))
        object.__setattr__(self, "resource_root", Path(self.resource_root))
        if not self.title:
            object.__setattr__(self, "title", self.domain.capitalize())

        for name in (self.domain, *self.topics, *self.aliases):
            if not name or any(sep in name for sep in _SEPARATORS):
                raise ValueError(f"invalid name in {self.domain!r} domain tables: {name!r}")
        # <scheme>://docs/index is reserved for the synthesized listing
        if INDEX_NAME in self.topics or INDEX_NAME in self.aliases:
            raise ValueError(f"{INDEX_NAME!r} is reserved in {self.domain!r} domain tables")
        for alias, target in self.aliases.items():
            if target not in self.topics:
                raise ValueError(f"alias {alias!r} points at unknown topic {target!r}")

    @classmethod
    def from_spec(cls, spec: DomainSpec, resource_root: Path) -> "DomainConfig":
        return cls(
            domain=spec.domain,
            resource_root=resource_root,
            topics=spec.topics,
            aliases=spec.aliases,
            title=spec.title,
            description=spec.description,
            example_alias=spec.example_alias,
        )

    @property
    def scheme(self) -> str:
        return self.domain

    @property
    def index_uri(self) -> str:
        return self.topic_uri(INDEX_NAME)

    @property
    def uri_template(self) -> str:
        return f"{self.scheme}://docs/{{topic}}"

    def topic_uri(self, topic: str) -> str:
        return f"{self.scheme}://docs/{topic}"


class TopicResolver:
    """Serves the markdown documents of a single domain."""

    def __init__(self, config: DomainConfig) -> None:
        self.config = config

    @property
    def domain(self) -> str:
        return self.config.domain

    def resolve_index(self) -> str:
        """Return a markdown listing of every topic and alias.

        Built from the static tables only; no files are touched.
        """
        cfg = self.config
        sections = [f"# {cfg.title} Documentation Topics", "## Available Topics"]
        sections.append(
            "\n".join(f"- `{topic}`: Access via `{cfg.topic_uri(topic)}`" for topic in cfg.topics)
        )

        if cfg.aliases:
            sections.append("## Topic Aliases")
            sections.append(
                "\n".join(f"- `{alias}` → `{target}`" for alias, target in cfg.aliases.items())
            )

        if cfg.topics:
            examples = [f"- Full topic name: `{cfg.topic_uri(cfg.topics[0])}`"]
            alias = cfg.example_alias or next(iter(cfg.aliases), "")
            if alias:
                examples.append(f"- Using alias: `{cfg.topic_uri(alias)}`")
            sections.append("## Usage Examples")
            sections.append("\n".join(examples))

        return "\n\n".join(sections)

    def canonical_topic(self, topic: str) -> str:
        """Validate ``topic`` and return the allowlisted name it stands for."""
        if any(sep in topic for sep in _SEPARATORS):
            raise InvalidTopic(topic)

        canonical = self.config.aliases.get(topic, topic)
        if canonical not in self.config.topics:
            raise UnknownTopic(topic, self.config.topics)
        return canonical

    def path_for(self, topic: str) -> Path:
        canonical = self.canonical_topic(topic)
        return self.config.resource_root / self.config.domain / f"{canonical}.md"

    def resolve(self, topic: str) -> str:
        """Return the raw markdown for ``topic`` (an allowlisted name or alias).

        Raises:
            InvalidTopic: ``topic`` contains ``/`` or ``\\``.
            UnknownTopic: ``topic`` is neither allowlisted nor an alias.
            ResourceNotFound: the allowlisted document is not deployed.
            ResourceReadError: the document exists but cannot be read.
        """
        path = self.path_for(topic)
        logger.debug("Resolving %s topic %r from %s", self.domain, topic, path)

        # Bytes are decoded directly so line endings reach the client untouched.
        try:
            return path.read_bytes().decode("utf-8")
        except FileNotFoundError as exc:
            logger.warning("Documentation file missing for %s topic %r: %s", self.domain, topic, path)
            raise ResourceNotFound(topic, path) from exc
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Failed to read %s for %s topic %r: %s", path, self.domain, topic, exc)
            raise ResourceReadError(topic, path) from exc


@dataclass
class ResourceEntry:
    name: str
    uri: str
    description: str
    handler: Callable[..., str]
    is_template: bool = False
    mime_type: str = MARKDOWN_MIME_TYPE

    def as_metadata(self) -> Dict[str, str]:
        key = "uriTemplate" if self.is_template else "uri"
        return {
            "name": self.name,
            key: self.uri,
            "description": self.description,
            "mimeType": self.mime_type,
        }


class ResourceRegistry:
    """Registration table the host walks at startup.

    Every domain contributes an index resource at a fixed URI and a
    ``{topic}`` template backed by its :class:`TopicResolver`.
    """

    def __init__(self, settings: Optional[Settings] = None, catalog: Iterable[DomainSpec] = DOMAIN_CATALOG) -> None:
        cfg = settings or Settings.from_env()
        self._resolvers: Dict[str, TopicResolver] = {}
        self._entries: Dict[str, ResourceEntry] = {}
        for spec in catalog:
            self.add_domain(DomainConfig.from_spec(spec, cfg.resource_root))

    def add_domain(self, config: DomainConfig) -> TopicResolver:
        if config.domain in self._resolvers:
            raise ValueError(f"documentation domain already registered: {config.domain}")
        resolver = TopicResolver(config)
        self._resolvers[config.domain] = resolver

        self._register(
            ResourceEntry(
                name=f"{config.domain}_docs_index",
                uri=config.index_uri,
                description=f"List of available {config.title} documentation topics",
                handler=resolver.resolve_index,
            )
        )
        self._register(
            ResourceEntry(
                name=f"{config.domain}_docs",
                uri=config.uri_template,
                description=config.description or f"{config.title} documentation",
                handler=resolver.resolve,
                is_template=True,
            )
        )
        logger.debug("Registered %s documentation domain (%d topics)", config.domain, len(config.topics))
        return resolver

    def _register(self, entry: ResourceEntry) -> None:
        self._entries[entry.name] = entry

    def entries(self) -> List[ResourceEntry]:
        return list(self._entries.values())

    def get(self, name: str) -> ResourceEntry:
        if name not in self._entries:
            raise KeyError(name)
        return self._entries[name]

    def resolver(self, domain: str) -> TopicResolver:
        if domain not in self._resolvers:
            raise KeyError(domain)
        return self._resolvers[domain]

    def list_resources(self) -> List[Dict[str, str]]:
        return [entry.as_metadata() for entry in self._entries.values() if not entry.is_template]

    def list_templates(self) -> List[Dict[str, str]]:
        return [entry.as_metadata() for entry in self._entries.values() if entry.is_template]

    def read_resource(self, uri: str) -> str:
        """Dispatch a concrete URI the way the host does.

        The fixed index URI takes precedence over the ``{topic}`` template.
        """
        scheme, sep, rest = uri.partition("://")
        resolver = self._resolvers.get(scheme)
        if not sep or resolver is None or not rest.startswith("docs/"):
            raise UnknownResource(uri)

        if uri == resolver.config.index_uri:
            return resolver.resolve_index()
        return resolver.resolve(unquote(rest[len("docs/"):]))
