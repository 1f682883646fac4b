"""Tests for the registration table and URI dispatch."""

import pytest

from config import Settings
from errors import InvalidTopic, UnknownResource, UnknownTopic
from resource_docs import DOMAIN_CATALOG, RESOURCE_ROOT
from resources import MARKDOWN_MIME_TYPE, DomainConfig, ResourceRegistry


@pytest.fixture
def registry():
    return ResourceRegistry(Settings())


class TestBundledCatalog:
    @pytest.mark.parametrize("spec", DOMAIN_CATALOG, ids=lambda spec: spec.domain)
    def test_every_topic_has_a_document(self, spec):
        for topic in spec.topics:
            assert (RESOURCE_ROOT / spec.domain / f"{topic}.md").is_file()

    def test_symfony_aliases(self, registry):
        resolver = registry.resolver("symfony")
        assert resolver.resolve("di") == resolver.resolve("dependency-injection")
        assert resolver.resolve("dependency") == resolver.resolve("dependency-injection")
        assert resolver.resolve("console") == resolver.resolve("console-commands")

    def test_bundled_content_matches_file(self, registry):
        expected = (RESOURCE_ROOT / "php" / "best-practices.md").read_bytes().decode("utf-8")
        assert registry.resolver("php").resolve("best") == expected


class TestRegistry:
    def test_entries_per_domain(self, registry):
        names = [entry.name for entry in registry.entries()]
        assert names == ["php_docs_index", "php_docs", "symfony_docs_index", "symfony_docs"]

    def test_list_resources(self, registry):
        assert registry.list_resources() == [
            {
                "name": "php_docs_index",
                "uri": "php://docs/index",
                "description": "List of available PHP documentation topics",
                "mimeType": MARKDOWN_MIME_TYPE,
            },
            {
                "name": "symfony_docs_index",
                "uri": "symfony://docs/index",
                "description": "List of available Symfony documentation topics",
                "mimeType": MARKDOWN_MIME_TYPE,
            },
        ]

    def test_list_templates(self, registry):
        templates = registry.list_templates()
        assert [t["uriTemplate"] for t in templates] == ["php://docs/{topic}", "symfony://docs/{topic}"]
        assert templates[1]["description"] == "Symfony framework documentation and guides"

    def test_get_unknown_entry(self, registry):
        with pytest.raises(KeyError):
            registry.get("python_docs")

    def test_handlers_are_bound_to_their_domain(self, registry):
        assert registry.get("symfony_docs_index").handler().startswith("# Symfony Documentation Topics")
        assert registry.get("php_docs").handler("patterns") == registry.resolver("php").resolve("common-patterns")

    def test_duplicate_domain_is_rejected(self, registry, tmp_path):
        with pytest.raises(ValueError, match="already registered"):
            registry.add_domain(DomainConfig(domain="php", resource_root=tmp_path, topics=("x",)))

    def test_resource_root_from_settings(self, resource_root):
        registry = ResourceRegistry(Settings(resource_root=resource_root))
        assert registry.read_resource("php://docs/best").startswith("# Best Practices")

    def test_default_settings_come_from_environment(self, resource_root, monkeypatch):
        monkeypatch.setenv("DOCS_MCP_RESOURCE_ROOT", str(resource_root))
        registry = ResourceRegistry()
        assert registry.read_resource("php://docs/best") == "# Best Practices\n\nUse strict types.\n"


class TestReadResource:
    def test_index_uri_wins_over_template(self, registry):
        assert registry.read_resource("php://docs/index") == registry.resolver("php").resolve_index()

    def test_topic_uri(self, registry):
        assert registry.read_resource("symfony://docs/di") == registry.resolver("symfony").resolve("dependency-injection")

    def test_traversal_uri(self, registry):
        with pytest.raises(InvalidTopic):
            registry.read_resource("php://docs/../etc/passwd")

    def test_encoded_separator(self, registry):
        with pytest.raises(InvalidTopic):
            registry.read_resource("php://docs/..%2Fetc%2Fpasswd")

    def test_unknown_topic_uri(self, registry):
        with pytest.raises(UnknownTopic, match="best-practices, common-patterns"):
            registry.read_resource("php://docs/unknown")

    @pytest.mark.parametrize(
        "uri",
        ["python://docs/index", "php://guides/best", "php:docs/best", "best-practices", "php://docs"],
    )
    def test_unknown_resource(self, registry, uri):
        with pytest.raises(UnknownResource):
            registry.read_resource(uri)
