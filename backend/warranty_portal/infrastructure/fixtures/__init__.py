from .yaml_fixture_loader import FixtureCatalog, YamlFixtureLoader
from .in_memory_repositories import InMemoryProductRepository, InMemoryServiceRecordRepository

__all__ = [
    "FixtureCatalog",
    "YamlFixtureLoader",
    "InMemoryProductRepository",
    "InMemoryServiceRecordRepository",
]
