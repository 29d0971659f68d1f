import logging
from typing import Optional

from pydantic import ValidationError as SettingsError

from css_selector_builder.config import DEFAULT_LOG_LEVEL, Settings, load_settings

ROOT_LOGGER_NAME = "css_selector_builder"
LOG_FORMAT = "%(asctime)s] %(name)s %(levelname)s: %(message)s"

# silent until the host application configures logging
logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def configure_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """
    Input: settings (optional) - explicit settings, otherwise read through load_settings()
    Functionality: Set the package log level and attach a timestamped stream handler once.
        An unknown log level falls back to the default with a warning.
    Output: the package root logger
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)

    fallback_reason = None
    if settings is None:
        try:
            settings = load_settings()
        except SettingsError as e:
            fallback_reason = e
            settings = Settings(log_level=DEFAULT_LOG_LEVEL)

    root.setLevel(settings.log_level)

    if not any(isinstance(h, logging.StreamHandler) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
        root.addHandler(handler)

    if fallback_reason is not None:
        root.warning(f"Invalid log level setting, using {DEFAULT_LOG_LEVEL}: {fallback_reason}")

    return root


def get_logger(name: str) -> logging.Logger:
    """Return a logger namespaced under the package root logger."""
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
