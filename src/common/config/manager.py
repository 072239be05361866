import os
from pathlib import Path

from omegaconf import DictConfig, OmegaConf
from omegaconf.errors import OmegaConfBaseException

from conf.config_models import ClockConfig
from ..exceptions import ConfigurationError
from ..logging import log_execution_time, setup_logger

logger = setup_logger(__name__)

# Repository conf/ directory, next to src/
DEFAULT_CONFIG_DIR = Path(__file__).resolve().parents[3] / "conf"

class ConfigManager:
    """
    Centralizes loading and validation of clock configuration.

    This is the loading path for code that does not run under Hydra, such as
    the API app served by a plain uvicorn command. The scripts get the same
    profiles composed by Hydra.
    """

    required_keys = ('display',)

    def __init__(self, config_dir: Path = DEFAULT_CONFIG_DIR):
        self.config_dir = Path(config_dir)

    @log_execution_time(logger)
    def load_clock_config(self, profile: str = "default") -> DictConfig:
        """Loads a clock profile and merges it over the structured defaults."""
        config_path = self.config_dir / "clock" / f"{profile}.yaml"

        if not config_path.exists():
            raise FileNotFoundError(f"Config not found: {config_path}")

        cfg = OmegaConf.load(config_path)
        for key in self.required_keys:
            if key not in cfg:
                raise ConfigurationError(f"Missing required config key: {key}")

        try:
            return OmegaConf.merge(OmegaConf.structured(ClockConfig), cfg)
        except OmegaConfBaseException as e:
            raise ConfigurationError(f"Invalid config {config_path}: {e}") from e

def resolve_line_separator(cfg: DictConfig) -> str:
    """Configured row separator, or the platform's one when unset."""
    separator = OmegaConf.select(cfg, "display.line_separator")
    return os.linesep if separator is None else separator
