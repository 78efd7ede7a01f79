from ndrank.utils.logger import LoggerFactory, MaxLevelFilter, setup_logger

__all__ = ["LoggerFactory", "MaxLevelFilter", "setup_logger"]
