"""Test match configuration and settings loading."""

import math

import pytest
from pydantic import ValidationError

from tmcore.config.loader import ConfigLoadError, load_settings, load_settings_from_string
from tmcore.config.schema import MatchConfig, TMSettings


class TestMatchConfig:
    """Test clamping and copy-producing updates."""

    def test_defaults(self):
        """Test the default constructor."""
        config = MatchConfig()
        assert config.threshold == 0.7
        assert config.max_results == 10

    @pytest.mark.parametrize("value,expected", [
        (1.5, 1.0),
        (-1, 0.0),
        (0.0, 0.0),
        (1.0, 1.0),
        (0.42, 0.42),
        (math.inf, 1.0),
        (math.nan, 0.0),
    ])
    def test_threshold_clamped(self, value, expected):
        """Test that thresholds are clamped into [0, 1]."""
        assert MatchConfig(threshold=value).threshold == expected
        assert MatchConfig().with_threshold(value).threshold == expected

    @pytest.mark.parametrize("value,expected", [(0, 1), (-5, 1), (1, 1), (25, 25)])
    def test_max_results_clamped(self, value, expected):
        """Test that max_results is at least 1."""
        assert MatchConfig(max_results=value).max_results == expected
        assert MatchConfig().with_max_results(value).max_results == expected

    def test_setters_return_copies(self):
        """Test that updates produce a new value and leave the original alone."""
        original = MatchConfig(threshold=0.5, max_results=3)
        stricter = original.with_threshold(0.9)
        wider = stricter.with_max_results(50)

        assert original == MatchConfig(threshold=0.5, max_results=3)
        assert stricter == MatchConfig(threshold=0.9, max_results=3)
        assert wider == MatchConfig(threshold=0.9, max_results=50)

    def test_frozen(self):
        """Test that configs cannot be mutated in place."""
        config = MatchConfig()
        with pytest.raises(ValidationError):
            config.threshold = 0.1

    def test_unknown_field_rejected(self):
        """Test strict field validation."""
        with pytest.raises(ValidationError):
            MatchConfig(limit=5)


class TestSettingsLoading:
    """Test loading settings from YAML."""

    def test_load_valid_settings_from_string(self, sample_settings_yaml):
        """Test loading valid settings from a YAML string."""
        settings = load_settings_from_string(sample_settings_yaml)

        assert isinstance(settings, TMSettings)
        assert settings.version == 1
        assert settings.locale == "de-DE"
        assert settings.stemming is True
        assert settings.matching == MatchConfig(threshold=0.75, max_results=5)

    def test_load_valid_settings_from_file(self, temp_settings_file):
        """Test loading valid settings from a file."""
        settings = load_settings(temp_settings_file)
        assert settings.locale == "de-DE"
        assert settings.matching.max_results == 5

    def test_load_accepts_str_path(self, temp_settings_file):
        """Test that string paths work as well as Path objects."""
        assert load_settings(str(temp_settings_file)).matching.threshold == 0.75

    def test_empty_document_uses_defaults(self):
        """Test that an empty YAML document gives default settings."""
        settings = load_settings_from_string("")
        assert settings == TMSettings()
        assert settings.locale == "en"
        assert settings.stemming is False
        assert settings.matching == MatchConfig()

    def test_out_of_range_values_clamped(self):
        """Test that YAML values are clamped, not rejected."""
        settings = load_settings_from_string("""
matching:
  threshold: 2.5
  max_results: 0
""")
        assert settings.matching.threshold == 1.0
        assert settings.matching.max_results == 1

    def test_unknown_locale_is_accepted(self):
        """Test that locale tags are not validated at load time."""
        assert load_settings_from_string("locale: xx-YY").locale == "xx-YY"

    def test_load_invalid_yaml(self):
        """Test loading invalid YAML."""
        invalid_yaml = """
        invalid: yaml: content:
          - missing: bracket
        """

        with pytest.raises(ConfigLoadError, match="Invalid YAML"):
            load_settings_from_string(invalid_yaml)

    def test_non_mapping_document(self):
        """Test that a YAML list is rejected."""
        with pytest.raises(ConfigLoadError, match="must contain a YAML mapping"):
            load_settings_from_string("- en\n- de\n")

    def test_wrong_types(self):
        """Test that non-numeric thresholds are validation failures."""
        with pytest.raises(ConfigLoadError, match="validation failed"):
            load_settings_from_string("matching:\n  threshold: high\n")

    def test_unknown_keys(self):
        """Test that unknown keys are rejected."""
        with pytest.raises(ConfigLoadError, match="validation failed"):
            load_settings_from_string("locale: en\nbackend: sqlite\n")

    def test_missing_file(self, tmp_path):
        """Test loading a file that does not exist."""
        with pytest.raises(ConfigLoadError, match="not found"):
            load_settings(tmp_path / "missing.yaml")
