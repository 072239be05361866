import os
from pathlib import Path
import pytest
from omegaconf import OmegaConf
from src.common.config.manager import ConfigManager, resolve_line_separator
from src.common.exceptions import ConfigurationError

REPO_CONF = Path(__file__).resolve().parents[3] / "conf"

@pytest.fixture
def config_dir(tmp_path):
    (tmp_path / "clock").mkdir()
    return tmp_path

def write_profile(config_dir, name, content):
    (config_dir / "clock" / f"{name}.yaml").write_text(content, encoding="utf-8")

def test_load_default_profile_from_repo():
    """Checks that the repository's default profile loads from the default directory."""
    cfg = ConfigManager().load_clock_config()
    assert ConfigManager().config_dir == REPO_CONF
    assert cfg.server.port == 8000
    assert cfg.logging.level == "INFO"
    assert resolve_line_separator(cfg) == os.linesep

def test_partial_profile_gets_defaults(config_dir):
    """Checks that a partial profile is completed from the structured defaults."""
    write_profile(config_dir, "windows", 'display:\n  line_separator: "\\r\\n"\n')
    cfg = ConfigManager(config_dir).load_clock_config("windows")
    assert resolve_line_separator(cfg) == "\r\n"
    assert cfg.server.host == "0.0.0.0"

def test_missing_profile(config_dir):
    """Checks that a missing profile raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        ConfigManager(config_dir).load_clock_config("nope")

def test_missing_required_key(config_dir):
    """Checks that a profile without display is a configuration error."""
    write_profile(config_dir, "broken", "server:\n  port: 9000\n")
    with pytest.raises(ConfigurationError):
        ConfigManager(config_dir).load_clock_config("broken")

def test_schema_mismatch(config_dir):
    """Checks that a wrongly typed value is a configuration error."""
    write_profile(config_dir, "typo", "display: {}\nserver:\n  port: not-a-port\n")
    with pytest.raises(ConfigurationError):
        ConfigManager(config_dir).load_clock_config("typo")

def test_resolve_line_separator_unset():
    """Checks that an unset separator falls back to the platform one."""
    assert resolve_line_separator(OmegaConf.create({})) == os.linesep
