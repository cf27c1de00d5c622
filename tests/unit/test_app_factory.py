"""Unit tests for the application factory."""

from pathlib import Path

import pytest

from usufruct_api import __version__
from usufruct_api.core.config import Settings
from usufruct_api.core.errors import ConfigurationInvalid
from usufruct_api.main import create_app
from usufruct_api.models.calculation import FactorConfiguration


class TestCreateApp:
    """Startup wiring and configuration failures."""

    def test_missing_factor_file_prevents_startup(self, tmp_path: Path) -> None:
        """An unreadable factor configuration is fatal."""
        settings = Settings(factor_config_path=tmp_path / "missing.json")

        with pytest.raises(ConfigurationInvalid, match="missing.json"):
            create_app(settings=settings)

    def test_invalid_factor_file_prevents_startup(self, tmp_path: Path) -> None:
        """A factor configuration violating table rules is fatal."""
        path = tmp_path / "factors.json"
        path.write_text(
            '{"factor_methods": {"EenLeven": {"active_version": "2030",'
            ' "versions": {"2024": [{"min_age": 0, "max_age": 1, "factor": 1}]}}}}',
            encoding="utf-8",
        )

        with pytest.raises(ConfigurationInvalid, match="2030"):
            create_app(settings=Settings(factor_config_path=path))

    def test_packaged_configuration_is_loaded(self) -> None:
        """Without overrides the bundled tables are served."""
        app = create_app(settings=Settings(rate_limit_enabled=False))

        assert app.state.calculation_service.registry.names == ["EenLeven"]

    def test_version_comes_from_package(self, factor_configuration: FactorConfiguration) -> None:
        """Settings and the OpenAPI document report the package version."""
        settings = Settings()
        app = create_app(settings=settings, factor_configuration=factor_configuration)

        assert settings.app_version == __version__
        assert app.version == __version__
