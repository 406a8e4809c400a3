'''
Name: bpnet
Topic: back-propagation
Date: 2026/10/17
'''
import os
import sys

from loguru import logger


class Logging:
    """
    loguru 的薄封裝。
    - 預設沿用 loguru 的 stderr 輸出，import 時不做任何設定
    - configure() 可加上按日期切割的檔案輸出
    """

    FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}"

    def __init__(self):
        self.log_dir = None
        self.level = "INFO"

    def configure(self, log_dir=None, level="INFO", rotation="1 day", retention="30 days"):
        """
        重新設定全域 logger。

        參數:
            log_dir (str, optional): 檔案日誌的目錄，None 表示只輸出到 stderr。
            level (str): 最低輸出等級。
            rotation (str): 檔案切割週期。
            retention (str): 檔案保留時間。
        """
        self.log_dir = log_dir
        self.level = level

        logger.remove()
        logger.add(sys.stderr, level=level, format=self.FORMAT)

        if log_dir is not None:
            os.makedirs(log_dir, exist_ok=True)
            logger.add(
                sink=os.path.join(log_dir, "{time:YYYY-MM-DD}.log"),
                rotation=rotation,
                retention=retention,
                level=level,
                format=self.FORMAT,
                backtrace=True,
                diagnose=True,
            )

    # ----------- 日誌方法 -----------
    def debug(self, msg, *args, **kwargs):
        logger.debug(msg, *args, **kwargs)

    def info(self, msg, *args, **kwargs):
        logger.info(msg, *args, **kwargs)

    def warning(self, msg, *args, **kwargs):
        logger.warning(msg, *args, **kwargs)

    def error(self, msg, *args, **kwargs):
        logger.error(msg, *args, **kwargs)

    def critical(self, msg, *args, **kwargs):
        logger.critical(msg, *args, **kwargs)


logs = Logging()
