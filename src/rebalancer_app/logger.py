import logging
import sys
import json
import os
import gzip
import shutil
from datetime import datetime
from logging.handlers import TimedRotatingFileHandler
from typing import Optional
from rebalancer_config import AppConfig
from rebalancer_app.context import get_current_session

_STANDARD_RECORD_FIELDS = {
    'name', 'msg', 'args', 'levelname', 'levelno', 'pathname',
    'filename', 'module', 'lineno', 'funcName', 'created',
    'msecs', 'relativeCreated', 'thread', 'threadName', 'taskName',
    'processName', 'process', 'getMessage', 'exc_info',
    'exc_text', 'stack_info', 'message', 'session_id', 'asset_count',
}

class CompressingTimedRotatingFileHandler(TimedRotatingFileHandler):
    """TimedRotatingFileHandler that compresses rotated files"""

    def doRollover(self):
        """Override to add compression after rotation"""
        super().doRollover()

        # Rotated files carry a timestamp suffix after the base name
        dir_name, base_name = os.path.split(self.baseFilename)

        try:
            for file_name in os.listdir(dir_name):
                if file_name.startswith(base_name) and not file_name.endswith('.gz') and file_name != base_name:
                    full_path = os.path.join(dir_name, file_name)
                    with open(full_path, 'rb') as f_in:
                        with gzip.open(f'{full_path}.gz', 'wb') as f_out:
                            shutil.copyfileobj(f_in, f_out)
                    os.remove(full_path)
        except OSError as e:
            print(f"Error during log compression: {e}", file=sys.stderr)

class StructuredFormatter(logging.Formatter):
    """Formatter for structured logging with session context support"""

    def __init__(self, output_format: str = 'text'):
        super().__init__()
        self.output_format = output_format

    def format(self, record):
        log_data = {
            'timestamp': datetime.now().strftime('%Y-%m-%d %H:%M:%S'),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage()
        }

        if hasattr(record, 'session_id'):
            log_data['session_id'] = record.session_id

        if hasattr(record, 'asset_count'):
            log_data['asset_count'] = record.asset_count

        for key, value in record.__dict__.items():
            if key not in _STANDARD_RECORD_FIELDS:
                if isinstance(value, datetime):
                    log_data[key] = value.strftime('%Y-%m-%d %H:%M:%S')
                else:
                    log_data[key] = value

        if self.output_format == 'json':
            return json.dumps(log_data, default=str)

        base_msg = f"{log_data['timestamp']} - {log_data['logger']} - {log_data['level']} - {log_data['message']}"
        if 'session_id' in log_data:
            base_msg += f" [session_id={log_data['session_id']}]"
        if 'asset_count' in log_data:
            base_msg += f" [assets={log_data['asset_count']}]"
        return base_msg

def setup_logger(name: str) -> logging.Logger:
    # Handlers live on the root logger; module loggers only propagate
    return logging.getLogger(name)

def configure_root_logger(config: Optional[AppConfig] = None):
    """Configure the root logger to use structured formatting for all logs"""
    config = config or AppConfig()
    root_logger = logging.getLogger()

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    root_logger.setLevel(getattr(logging, config.logging.level.upper()))

    formatter = StructuredFormatter(config.logging.format)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if config.logging.file_path:
        log_dir = os.path.dirname(config.logging.file_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        file_handler = CompressingTimedRotatingFileHandler(
            filename=config.logging.file_path,
            when='midnight',
            interval=1,
            backupCount=config.logging.backup_count,
            encoding='utf-8'
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

def _extract_session_properties():
    """Extract relevant properties from the current session for logging"""
    session = get_current_session()

    if session is None:
        return {}

    return {
        'session_id': session.session_id,
        'asset_count': len(session.assets),
    }

class AppLogger:
    """Logger with automatic session context extraction"""

    def __init__(self, name: str):
        self.logger = setup_logger(name)

    def log_debug(self, message: str):
        self.logger.debug(message, extra=_extract_session_properties())

    def log_info(self, message: str):
        self.logger.info(message, extra=_extract_session_properties())

    def log_warning(self, message: str):
        self.logger.warning(message, extra=_extract_session_properties())

    def log_error(self, message: str):
        self.logger.error(message, extra=_extract_session_properties())
