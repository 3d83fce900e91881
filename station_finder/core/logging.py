"""로깅 설정 - 패키지 전용 "station_finder" 로거"""
import logging
import sys

from station_finder.core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = settings.log_level) -> logging.Logger:
    """패키지 로거 설정

    핸들러는 한 번만 붙이고, 다시 호출하면 레벨만 갱신합니다.
    """
    logger = logging.getLogger("station_finder")
    logger.setLevel(level.upper())

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)

    return logger


logger = setup_logging()


def sanitize_for_log(value: str, max_length: int = 100) -> str:
    """사용자 입력을 로깅용 문자열로 변환

    개행 문자를 제거하고 길이를 제한합니다.

    Args:
        value: 로깅할 문자열
        max_length: 최대 길이

    Returns:
        정리된 문자열
    """
    if not value:
        return "[empty]"

    result = value.replace("\r", " ").replace("\n", " ")

    if len(result) > max_length:
        result = result[:max_length] + "..."

    return result
