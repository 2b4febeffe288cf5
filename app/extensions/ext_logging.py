import logging
import os
import sys
from logging.handlers import RotatingFileHandler

from configs import app_config

# Logger name prefix -> tag prepended to the message of every record it emits.
LOG_CHANNELS: dict[str, str] = {
    "libs.http_tree": "[HttpClient] ",
}


def init_logging():
    log_handlers: list[logging.Handler] = []
    log_file = app_config.LOG_FILE
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        log_handlers.append(
            RotatingFileHandler(
                filename=log_file,
                maxBytes=app_config.LOG_FILE_MAX_SIZE * 1024 * 1024,
                backupCount=app_config.LOG_FILE_BACKUP_COUNT,
            )
        )

    # Always add StreamHandler to log to console
    sh = logging.StreamHandler(sys.stdout)
    log_handlers.append(sh)

    for handler in log_handlers:
        handler.addFilter(ChannelFilter())

    logging.basicConfig(
        level=app_config.LOG_LEVEL,
        format=app_config.LOG_FORMAT,
        datefmt=app_config.LOG_DATEFORMAT,
        handlers=log_handlers,
        force=True,
    )

    apply_channel_formatter()

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    log_tz = app_config.LOG_TZ
    if log_tz:
        from datetime import datetime

        import pytz

        timezone = pytz.timezone(log_tz)

        def time_converter(seconds):
            return datetime.fromtimestamp(seconds, tz=timezone).timetuple()

        for handler in logging.root.handlers:
            if handler.formatter:
                handler.formatter.converter = time_converter


def channel_for(logger_name: str) -> str:
    for prefix, channel in LOG_CHANNELS.items():
        if logger_name == prefix or logger_name.startswith(prefix + "."):
            return channel
    return ""


class ChannelFilter(logging.Filter):
    def filter(self, record):
        record.channel = channel_for(record.name)
        return True


class ChannelFormatter(logging.Formatter):
    def format(self, record):
        if not hasattr(record, "channel"):
            record.channel = ""
        return super().format(record)


def apply_channel_formatter():
    for handler in logging.root.handlers:
        if handler.formatter:
            handler.formatter = ChannelFormatter(app_config.LOG_FORMAT, app_config.LOG_DATEFORMAT)
