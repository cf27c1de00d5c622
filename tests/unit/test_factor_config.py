"""Unit tests for loading the factor configuration."""

import json
from decimal import Decimal
from pathlib import Path

import pytest

from usufruct_api.core.config import DEFAULT_FACTOR_CONFIG_PATH
from usufruct_api.core.errors import ConfigurationInvalid
from usufruct_api.core.factor_config import (
    load_factor_configuration,
    parse_factor_configuration,
)


def _document(**overrides: object) -> dict[str, object]:
    document: dict[str, object] = {
        "age_adjustment": {"female_adjustment": 5, "male_adjustment": 0},
        "factor_methods": {
            "EenLeven": {
                "active_version": "2024",
                "versions": {
                    "2024": [
                        {"min_age": 20, "max_age": 29, "factor": 20},
                        {"min_age": 30, "max_age": 39, "factor": 19},
                    ]
                },
            }
        },
    }
    document.update(overrides)
    return document


class TestParseFactorConfiguration:
    """Validation of factor configuration documents."""

    def test_valid_document(self) -> None:
        """A well-formed document loads with rows in declared order."""
        configuration = parse_factor_configuration(json.dumps(_document()))

        table = configuration.factor_methods["EenLeven"].active_table
        assert [row.factor for row in table] == [Decimal("20"), Decimal("19")]
        assert configuration.age_adjustment.female_adjustment == 5

    def test_age_adjustment_defaults_when_omitted(self) -> None:
        """The adjustment block is optional."""
        document = _document()
        del document["age_adjustment"]

        configuration = parse_factor_configuration(json.dumps(document))

        assert configuration.age_adjustment.female_adjustment == 5
        assert configuration.age_adjustment.male_adjustment == 0

    def test_unknown_active_version(self) -> None:
        """The active version must be one of the configured versions."""
        document = _document(
            factor_methods={
                "EenLeven": {
                    "active_version": "2030",
                    "versions": {"2024": [{"min_age": 0, "max_age": 1, "factor": 1}]},
                }
            }
        )

        with pytest.raises(ConfigurationInvalid, match="2030"):
            parse_factor_configuration(json.dumps(document), source="factors.json")

    def test_empty_active_table(self) -> None:
        """An empty active table prevents startup."""
        document = _document(
            factor_methods={"EenLeven": {"active_version": "2024", "versions": {"2024": []}}}
        )

        with pytest.raises(ConfigurationInvalid, match="is empty"):
            parse_factor_configuration(json.dumps(document))

    def test_inverted_row(self) -> None:
        """Rows with min_age above max_age are rejected."""
        document = _document(
            factor_methods={
                "EenLeven": {
                    "active_version": "2024",
                    "versions": {"2024": [{"min_age": 40, "max_age": 30, "factor": 1}]},
                }
            }
        )

        with pytest.raises(ConfigurationInvalid, match="min_age"):
            parse_factor_configuration(json.dumps(document))

    def test_no_methods(self) -> None:
        """At least one method must be configured."""
        with pytest.raises(ConfigurationInvalid):
            parse_factor_configuration(json.dumps(_document(factor_methods={})))

    def test_malformed_json(self) -> None:
        """Syntax errors are reported as configuration errors."""
        with pytest.raises(ConfigurationInvalid) as exc_info:
            parse_factor_configuration("{not json", source="broken.json")

        assert exc_info.value.source == "broken.json"
        assert str(exc_info.value).startswith("broken.json: ")


class TestLoadFactorConfiguration:
    """Reading the configuration from disk."""

    def test_loads_file(self, tmp_path: Path) -> None:
        """Files are read and validated."""
        path = tmp_path / "factors.json"
        path.write_text(json.dumps(_document()), encoding="utf-8")

        configuration = load_factor_configuration(path)

        assert list(configuration.factor_methods) == ["EenLeven"]

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing file is a configuration error naming the path."""
        path = tmp_path / "missing.json"

        with pytest.raises(ConfigurationInvalid, match="cannot read factor configuration"):
            load_factor_configuration(path)

    def test_packaged_default_table(self) -> None:
        """The bundled 2024 single-life table covers ages 0 to 130."""
        configuration = load_factor_configuration(DEFAULT_FACTOR_CONFIG_PATH)

        settings = configuration.factor_methods["EenLeven"]
        table = settings.active_table
        assert settings.active_version == "2024"
        assert table[0].min_age == 0
        assert table[-1].max_age == 130
        assert all(
            previous.max_age + 1 == current.min_age
            for previous, current in zip(table, table[1:])
        )
