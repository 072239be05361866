import os
import sys
from datetime import datetime

import hydra
from omegaconf import DictConfig

# Add src to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from src.clock.application.converter import TimeConverter
from src.common.config.manager import resolve_line_separator
from src.common.exceptions import InvalidTimeFormat
from src.common.logging import PACKAGE_LOGGER, configure_logging, setup_logger

logger = setup_logger(f"{PACKAGE_LOGGER}.scripts.run_clock")

@hydra.main(version_base=None, config_path="../conf", config_name="config")
def main(cfg: DictConfig):
    configure_logging(cfg.clock.logging.level)

    time_to_read = cfg.time or datetime.now().strftime("%H:%M:%S")
    converter = TimeConverter(line_separator=resolve_line_separator(cfg.clock))

    try:
        print(converter.convert_time(str(time_to_read)))
    except InvalidTimeFormat as e:
        logger.error(str(e))
        sys.exit(1)

if __name__ == "__main__":
    main()
