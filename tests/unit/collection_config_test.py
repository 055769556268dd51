from pathlib import Path

from collection_tree.core.config import CollectionConfig, ViewConfig


class TestCollectionConfigFromEnv:
    def test_defaults(self) -> None:
        config = CollectionConfig.from_env({})
        assert config.base_url == "https://jsonplaceholder.typicode.com"
        assert config.collection_name == "Generated API Collection"
        assert config.build_number == "dev"
        assert config.output_dir == Path("build")
        assert config.profile == "standard"

    def test_overrides(self) -> None:
        config = CollectionConfig.from_env(
            {
                "API_BASE_URL": "https://staging.example.com",
                "COLLECTION_NAME": "Staging",
                "BUILD_NUMBER": "42",
                "OUTPUT_DIR": "/tmp/out",
                "COLLECTION_PROFILE": "extended",
            }
        )
        assert config.base_url == "https://staging.example.com"
        assert config.collection_name == "Staging"
        assert config.build_number == "42"
        assert config.output_dir == Path("/tmp/out")
        assert config.profile == "extended"

    def test_empty_values_fall_back_to_defaults(self) -> None:
        config = CollectionConfig.from_env({"API_BASE_URL": "", "BUILD_NUMBER": ""})
        assert config.base_url == "https://jsonplaceholder.typicode.com"
        assert config.build_number == "dev"

    def test_reads_process_environment(self, monkeypatch) -> None:  # type: ignore[no-untyped-def]
        monkeypatch.setenv("BUILD_NUMBER", "77")
        assert CollectionConfig.from_env().build_number == "77"


class TestViewConfig:
    def test_inner_dimensions(self) -> None:
        config = ViewConfig()
        assert config.width == 720
        assert config.height == 560
