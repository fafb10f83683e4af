"""Tests for the example catalog runner."""
import pytest
import yaml
from config import get_config
from examples.run_catalog import main
from patterns import car_models
from utils import ConfigurationError


class TestRunCatalog:
    """Tests for run_catalog.main."""

    def test_default_config(self, caplog):
        """Test the shipped configuration runs every demonstration."""
        car_models.clear()

        with caplog.at_level("INFO"):
            assert main() == 0

        assert "Lamborghini" in caplog.messages
        assert "Ferrari" in caplog.messages
        assert "Writing database" in caplog.messages
        assert "Desktop Computer, core i7, NVIDIA GTX 1080, $450.0" in caplog.messages
        assert car_models.stats()['size'] == 2

    def test_failure_is_reported(self, tmp_path):
        """Test a failing demonstration makes main return non-zero."""
        path = tmp_path / "catalog.yaml"
        path.write_text(yaml.safe_dump({
            'logging': {'log_level': 'INFO'},
            'factory': {'car_types': ['tesla']},
        }))

        assert main(str(path)) == 1

    def test_runs_do_not_leak_configuration(self, tmp_path):
        """Test each run starts from a clean global configuration."""
        path = tmp_path / "catalog.yaml"
        path.write_text(yaml.safe_dump({'factory': {'car_types': ['tesla']}}))
        main(str(path))

        assert main() == 0
        assert get_config('factory.car_types') == ['lamborghini', 'ferrari']

    @pytest.mark.parametrize("logging_settings", [
        {'log_level': 'INFO', 'force': True},
        {'log_level': 'INFO', 'colour': 'always'},
        {'log_level': 'LOUD'},
        ['INFO'],
    ])
    def test_bad_logging_settings(self, tmp_path, logging_settings):
        """Test invalid logging settings raise ConfigurationError."""
        path = tmp_path / "catalog.yaml"
        path.write_text(yaml.safe_dump({'logging': logging_settings}))

        with pytest.raises(ConfigurationError):
            main(str(path))
