"""Tests for svg_adapter.config module."""

import pytest
import yaml
from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from svg_adapter.utils import DEFAULT_DECORATIVE_COLORS
from svg_adapter.config import AdapterConfig, parse_config_data, parse_config_file


class TestAdapterConfig:
    """Tests for AdapterConfig defaults."""

    def test_defaults(self):
        config = AdapterConfig()
        assert config.min_area == 100.0
        assert config.min_stroke_width == 2.0
        assert config.decorative_colors == list(DEFAULT_DECORATIVE_COLORS)

    def test_colors_not_shared(self):
        first = AdapterConfig()
        first.decorative_colors.append("#123456")
        assert "#123456" not in AdapterConfig().decorative_colors


class TestParseConfigData:
    """Tests for parse_config_data function."""

    def test_empty_keeps_defaults(self):
        assert parse_config_data({}) == AdapterConfig()

    def test_all_values(self):
        config = parse_config_data(
            {
                "min_area": 150,
                "min_stroke_width": 2.5,
                "decorative_colors": ["#333333", "navy"],
            }
        )
        assert config.min_area == 150.0
        assert config.min_stroke_width == 2.5
        assert config.decorative_colors == ["#333333", "navy"]

    def test_invalid_min_area(self):
        with pytest.raises(ValueError, match="min_area"):
            parse_config_data({"min_area": "big"})

    def test_negative_min_area(self):
        with pytest.raises(ValueError, match="min_area"):
            parse_config_data({"min_area": -1})

    def test_invalid_stroke_width(self):
        with pytest.raises(ValueError, match="min_stroke_width"):
            parse_config_data({"min_stroke_width": 0})

    def test_colors_must_be_list(self):
        with pytest.raises(ValueError, match="decorative_colors"):
            parse_config_data({"decorative_colors": "black"})


class TestParseConfigFile:
    """Tests for parse_config_file function."""

    @pytest.fixture
    def config_file(self, tmp_path) -> Path:
        """Create a config file."""
        content = """
min_area: 50
min_stroke_width: 3
decorative_colors:
  - "#000000"
  - black
"""
        config_file = tmp_path / "adapter.yaml"
        config_file.write_text(content)
        return config_file

    def test_parse_file(self, config_file):
        config = parse_config_file(config_file)
        assert config.min_area == 50.0
        assert config.min_stroke_width == 3.0
        assert config.decorative_colors == ["#000000", "black"]

    def test_empty_file(self, tmp_path):
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("")
        assert parse_config_file(config_file) == AdapterConfig()

    def test_not_a_mapping(self, tmp_path):
        config_file = tmp_path / "list.yaml"
        config_file.write_text("- 1\n- 2\n")
        with pytest.raises(ValueError, match="YAML dictionary"):
            parse_config_file(config_file)

    def test_invalid_yaml(self, tmp_path):
        config_file = tmp_path / "bad.yaml"
        config_file.write_text("min_area: [1, 2\n")
        with pytest.raises(yaml.YAMLError):
            parse_config_file(config_file)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            parse_config_file(tmp_path / "missing.yaml")
