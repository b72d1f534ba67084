# logger.py
import copy
import logging
import logging.config
from sitemap_model.util.file_utils import from_json_or_yaml


DEFAULT_LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        },
    },
    "handlers": {
        "console_handler": {
            "class": "logging.StreamHandler",
            "level": "INFO",
            "formatter": "standard",
            "stream": "ext://sys.stderr",
        },
    },
    "root": {
        "level": "INFO",
        "handlers": ["console_handler"],
    },
}


def setup_logging(
    config_file_path=None,
    log_file_path=None,
    verbose=False,
):
    """
    Loads logging config from 'config_file_path' (YAML or JSON) and sets up logging.
    Falls back to a console-only config when no file is given.
    Optionally override file handler's filename, and set root logger to DEBUG if 'verbose'.
    """
    if config_file_path:
        config = from_json_or_yaml(config_file_path)
    else:
        config = copy.deepcopy(DEFAULT_LOGGING_CONFIG)

    # If user passed a custom file path for logs, override the "filename" in the config
    if log_file_path and "file_handler" in config.get("handlers", {}):
        config["handlers"]["file_handler"]["filename"] = str(log_file_path)

    logging.config.dictConfig(config)

    # If --verbose was passed, raise the global level to DEBUG
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        for handler in logging.getLogger().handlers:
            handler.setLevel(logging.DEBUG)

    return logging.getLogger(__name__)
