import logging
import os
from logging.handlers import RotatingFileHandler

import yaml

BASE_PATH = os.path.dirname(__file__)
# handlers used by logging.yaml and logging_test.yaml
HANDLER_CLASSES = {
    "logging.StreamHandler": logging.StreamHandler,
    "logging.handlers.RotatingFileHandler": RotatingFileHandler,
}


def _create_handler(handler_conf: dict, formatters: dict) -> logging.Handler:
    handler_class = HANDLER_CLASSES.get(handler_conf["class"])
    if handler_class is None:
        raise ValueError(f"Unknown handler class: {handler_conf['class']}")

    kwargs = {k: v for k, v in handler_conf.items() if k not in ["class", "formatter", "level"]}
    if "filename" in kwargs:
        # relative to the package
        file_path = os.path.join(BASE_PATH, kwargs["filename"])
        os.makedirs(os.path.dirname(file_path), exist_ok=True)
        kwargs["filename"] = file_path
    handler = handler_class(**kwargs)
    if "level" in handler_conf:
        handler.setLevel(handler_conf["level"])
    fmt_conf = formatters.get(handler_conf.get("formatter"))
    if fmt_conf:
        handler.setFormatter(logging.Formatter(fmt_conf["format"]))
    return handler


def apply_package_config(config_dict: dict):
    """
    apply handlers to the loggers listed in config. root logger is left as is.

    :param config_dict: dict in the format of logging.config.dictConfig
    """
    formatters = config_dict.get("formatters", {})
    handlers = {name: _create_handler(conf, formatters) for name, conf in config_dict.get("handlers", {}).items()}

    for logger_name, logger_conf in config_dict.get("loggers", {}).items():
        logger = logging.getLogger(logger_name)
        logger.setLevel(logger_conf["level"])
        # setup_logging may be called more than once
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        for handler_name in logger_conf["handlers"]:
            logger.addHandler(handlers[handler_name])
        logger.propagate = logger_conf.get("propagate", True)


def is_debug() -> bool:
    value = os.environ.get("LC_DEBUG", "")
    return value.lower() in ("1", "true", "yes")


def setup_logging(path: str = None):
    if path is None:
        file_name = "logging.yaml" if is_debug() else "logging_test.yaml"
        path = os.path.join(BASE_PATH, file_name)
    with open(path) as f:
        config = yaml.safe_load(f)
    apply_package_config(config)
