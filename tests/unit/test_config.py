"""
Unit Tests - Configuration
"""
import pytest
from pydantic import ValidationError

from marketplace_navigator.config import Settings
from marketplace_navigator.config.settings import NavigatorSettings


class TestSettings:
    """Tests for environment-driven settings"""
    
    def test_defaults(self):
        settings = Settings(_env_file=None)
        
        assert settings.navigator.category_separator == " › "
        assert settings.navigator.currency_symbol == "$"
        assert settings.navigator.snapshot_path.endswith("sample-data.json")
    
    def test_environment_normalized(self):
        assert Settings(app_env="Production", _env_file=None).is_production
    
    def test_unknown_environment_rejected(self):
        with pytest.raises(ValidationError):
            Settings(app_env="qa", _env_file=None)
    
    def test_navigator_env_prefix(self, monkeypatch):
        monkeypatch.setenv("NAVIGATOR_CURRENCY_SYMBOL", "€")
        monkeypatch.setenv("NAVIGATOR_SNAPSHOT_PATH", "/srv/snapshot.json")
        
        settings = NavigatorSettings()
        
        assert settings.currency_symbol == "€"
        assert settings.snapshot_path == "/srv/snapshot.json"
