"""
Tests for settings management module.
"""

import json
from unittest.mock import patch

import pytest

from layout_measurement.utils import settings
from layout_measurement.utils.settings import Settings, get_settings, save_settings


class TestSettings:
    """Tests for Settings dataclass"""

    def test_default_values(self):
        """Settings should match the demo's initial frame"""
        s = Settings()
        assert (s.initial_width, s.initial_height) == (200.0, 100.0)
        assert (s.slider_min, s.slider_max) == (0.0, 300.0)
        assert s.stack_spacing == 0.0
        assert s.text == "Hello, world"

    def test_custom_values(self):
        s = Settings(initial_width=150.0, text="Hi")
        assert s.initial_width == 150.0
        assert s.text == "Hi"


class TestSettingsSave:
    """Tests for Settings.save() method"""

    def test_save_creates_directory_and_writes_file(self, tmp_path):
        config_dir = tmp_path / "config"
        config_file = config_dir / "settings.json"

        with (
            patch.object(settings, "CONFIG_DIR", str(config_dir)),
            patch.object(settings, "CONFIG_FILE", str(config_file)),
        ):
            Settings(initial_width=120.0).save()

            assert config_dir.exists()
            data = json.loads(config_file.read_text())
            assert data["initial_width"] == 120.0
            assert data["text"] == "Hello, world"

    def test_save_overwrites_existing_file(self, tmp_path):
        config_dir = tmp_path / "config"
        config_dir.mkdir(parents=True)
        config_file = config_dir / "settings.json"
        config_file.write_text('{"initial_width": 30}')

        with (
            patch.object(settings, "CONFIG_DIR", str(config_dir)),
            patch.object(settings, "CONFIG_FILE", str(config_file)),
        ):
            Settings(initial_width=250.0).save()

            data = json.loads(config_file.read_text())
            assert data["initial_width"] == 250.0


class TestSettingsLoad:
    """Tests for Settings.load() class method"""

    def test_load_returns_defaults_when_file_missing(self, tmp_path):
        config_file = tmp_path / "nonexistent" / "settings.json"

        with patch.object(settings, "CONFIG_FILE", str(config_file)):
            assert Settings.load() == Settings()

    def test_load_reads_existing_file(self, tmp_path):
        config_file = tmp_path / "settings.json"
        config_file.write_text('{"initial_width": 45, "stack_spacing": 8}')

        with patch.object(settings, "CONFIG_FILE", str(config_file)):
            s = Settings.load()
            assert s.initial_width == 45
            assert s.stack_spacing == 8
            assert s.initial_height == 100.0

    def test_load_filters_obsolete_fields(self, tmp_path):
        config_file = tmp_path / "settings.json"
        config_file.write_text(
            json.dumps({"text": "Hey", "obsolete_field": "should be ignored"})
        )

        with patch.object(settings, "CONFIG_FILE", str(config_file)):
            s = Settings.load()
            assert s.text == "Hey"
            assert not hasattr(s, "obsolete_field")

    def test_load_returns_defaults_on_invalid_json(self, tmp_path):
        config_file = tmp_path / "settings.json"
        config_file.write_text("not valid json {{{")

        with (
            patch.object(settings, "CONFIG_FILE", str(config_file)),
            patch.object(settings, "warn") as mock_warn,
        ):
            assert Settings.load() == Settings()
            mock_warn.assert_called_once()

    def test_load_returns_defaults_when_not_an_object(self, tmp_path):
        config_file = tmp_path / "settings.json"
        config_file.write_text("[1, 2, 3]")

        with patch.object(settings, "CONFIG_FILE", str(config_file)):
            assert Settings.load() == Settings()

    def test_load_returns_defaults_on_read_error(self, tmp_path):
        config_file = tmp_path / "settings.json"
        config_file.write_text('{"initial_width": 45}')

        with (
            patch.object(settings, "CONFIG_FILE", str(config_file)),
            patch("builtins.open", side_effect=PermissionError("Access denied")),
        ):
            assert Settings.load().initial_width == 200.0


class TestSettingsValidation:
    """Loaded values are coerced per field, bad ones fall back to defaults"""

    def write(self, tmp_path, data):
        config_file = tmp_path / "settings.json"
        config_file.write_text(json.dumps(data))
        return config_file

    def test_wrong_types_fall_back_per_field(self, tmp_path):
        config_file = self.write(
            tmp_path, {"initial_width": "wide", "slider_max": -5, "initial_height": 80}
        )

        with patch.object(settings, "CONFIG_FILE", str(config_file)):
            s = Settings.load()

        assert s.initial_width == 200.0
        assert s.slider_max == 300.0
        assert s.initial_height == 80.0

    def test_numeric_strings_are_coerced(self, tmp_path):
        config_file = self.write(tmp_path, {"initial_width": "150.5"})

        with patch.object(settings, "CONFIG_FILE", str(config_file)):
            assert Settings.load().initial_width == 150.5

    @pytest.mark.parametrize("value", [True, None, "nan", float("inf"), [1]])
    def test_rejected_numbers(self, tmp_path, value):
        config_file = tmp_path / "settings.json"
        config_file.write_text(json.dumps({"stack_spacing": value}))

        with patch.object(settings, "CONFIG_FILE", str(config_file)):
            assert Settings.load().stack_spacing == 0.0

    def test_text_must_be_a_string(self, tmp_path):
        config_file = self.write(tmp_path, {"text": 42})

        with patch.object(settings, "CONFIG_FILE", str(config_file)):
            assert Settings.load().text == "Hello, world"

    def test_inverted_slider_range_reset(self, tmp_path):
        config_file = self.write(tmp_path, {"slider_min": 250, "slider_max": 100})

        with (
            patch.object(settings, "CONFIG_FILE", str(config_file)),
            patch.object(settings, "warn") as mock_warn,
        ):
            s = Settings.load()

        assert (s.slider_min, s.slider_max) == (0.0, 300.0)
        mock_warn.assert_called_once()


class TestGetSettings:
    """Tests for get_settings() function"""

    def setup_method(self):
        settings._settings = None

    def teardown_method(self):
        settings._settings = None

    def test_get_settings_lazy_loads(self, tmp_path):
        config_file = tmp_path / "settings.json"
        config_file.write_text('{"slider_max": 400}')

        with patch.object(settings, "CONFIG_FILE", str(config_file)):
            assert settings._settings is None
            assert get_settings().slider_max == 400
            assert settings._settings is not None

    def test_get_settings_returns_cached_instance(self, tmp_path):
        config_file = tmp_path / "settings.json"
        config_file.write_text("{}")

        with patch.object(settings, "CONFIG_FILE", str(config_file)):
            assert get_settings() is get_settings()


class TestSaveSettings:
    """Tests for save_settings() function"""

    def setup_method(self):
        settings._settings = None

    def teardown_method(self):
        settings._settings = None

    def test_save_settings_does_nothing_when_not_loaded(self):
        with patch.object(Settings, "save") as mock_save:
            save_settings()
            mock_save.assert_not_called()

    def test_save_settings_saves_loaded_settings(self, tmp_path):
        config_dir = tmp_path / "config"
        config_file = config_dir / "settings.json"

        with (
            patch.object(settings, "CONFIG_DIR", str(config_dir)),
            patch.object(settings, "CONFIG_FILE", str(config_file)),
        ):
            get_settings().initial_width = 175.0
            save_settings()

            assert json.loads(config_file.read_text())["initial_width"] == 175.0
