# 日志配置
import logging

from blogsite.config import config

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

def setup_logger(level: str = None, enabled: bool = None):
    if enabled is None:
        enabled = config.ENABLE_LOGGING
    if not enabled:
        logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT)
        return
    logging.basicConfig(level=(level or config.LOG_LEVEL).upper(), format=LOG_FORMAT)
