import logging
import os

from restdocs_testclient.config import Config


def get_config_from_env_vars(logger: logging.Logger) -> Config:
    """
    Load configuration from environment variables
    """
    config = Config()
    config.output_dir = os.path.abspath(config.output_dir)

    logger.info("📂 Output directory  : %s", config.output_dir)
    logger.info("💾 Auto-save         : %s", config.autosave)
    logger.info("🔤 Default charset   : %s", config.default_charset)
    logger.info("📝 Text content types: %s", config.text_content_types)
    return config


# pylint: disable-next=invalid-name
_config = None


def get_config() -> Config:
    if not _config:
        raise ValueError("Config not set")
    return _config


def set_config(new_config: Config | None):
    # pylint: disable-next=global-statement
    global _config
    _config = new_config
