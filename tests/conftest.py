"""Shared fixtures for the documentation resource tests."""

from pathlib import Path

import pytest

from resources import DomainConfig, TopicResolver

PHP_DOCS = {
    "best-practices": "# Best Practices\n\nUse strict types.\n",
    "common-patterns": "# Common Patterns\r\n\r\nValue objects.\r\n",
}


@pytest.fixture
def resource_root(tmp_path: Path) -> Path:
    """A resource root holding the php domain documents."""
    php_dir = tmp_path / "php"
    php_dir.mkdir()
    for topic, content in PHP_DOCS.items():
        (php_dir / f"{topic}.md").write_bytes(content.encode("utf-8"))
    return tmp_path


@pytest.fixture
def php_config(resource_root: Path) -> DomainConfig:
    return DomainConfig(
        domain="php",
        resource_root=resource_root,
        topics=("best-practices", "common-patterns"),
        aliases={"best": "best-practices", "practices": "best-practices", "patterns": "common-patterns"},
        title="PHP",
        description="PHP language documentation and best practices",
        example_alias="best",
    )


@pytest.fixture
def php_resolver(php_config: DomainConfig) -> TopicResolver:
    return TopicResolver(php_config)
