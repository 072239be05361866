import os
import sys
import hydra
import uvicorn
from omegaconf import DictConfig

# Add src to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from src.clock.presentation.api import app
from src.common.logging import PACKAGE_LOGGER, configure_logging, setup_logger

logger = setup_logger(f"{PACKAGE_LOGGER}.scripts.run_server")

@hydra.main(version_base=None, config_path="../conf", config_name="config")
def main(cfg: DictConfig):
    configure_logging(cfg.clock.logging.level)

    server_cfg = cfg.clock.server
    logger.info(f"Starting server at http://{server_cfg.host}:{server_cfg.port}")

    uvicorn.run(app, host=server_cfg.host, port=server_cfg.port)

if __name__ == "__main__":
    main()
