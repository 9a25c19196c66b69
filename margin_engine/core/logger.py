import os
import logging
from logging.handlers import RotatingFileHandler
from .config import settings


class Logger:
    """
    集中式日志系统
    - 输出到控制台 (Console)
    - 配置了 system.log_file 时同时写文件, 按大小自动分割 (Rotating)
    - 可通过 system.enable_logging 关闭
    """

    _instance = None
    logger = None

    def __new__(cls, name="MarginEngine"):
        if cls._instance is None:
            cls._instance = super(Logger, cls).__new__(cls)
            cls._instance._initialize(name)
        return cls._instance

    def _initialize(self, name):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(settings.system.log_level.upper())

        # Avoid adding handlers multiple times
        if self.logger.handlers:
            return

        if not settings.system.enable_logging:
            self.logger.addHandler(logging.NullHandler())
            return

        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] [%(name)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        self.logger.addHandler(console_handler)

        log_file = settings.system.log_file
        if log_file:
            log_dir = os.path.dirname(os.path.abspath(log_file))
            if not os.path.exists(log_dir):
                os.makedirs(log_dir)
            # 每个文件最大 10MB，保留 5 个备份
            file_handler = RotatingFileHandler(
                log_file, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8"
            )
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    def get_logger(self):
        return self.logger


# 全局单例
system_logger = Logger().get_logger()


def get_logger(module_name=None):
    """
    获取带模块名的子日志记录器
    用法: logger = get_logger("MarginAccount")
    """
    if module_name:
        return system_logger.getChild(module_name)
    return system_logger
