"""로깅 설정"""
import logging
from typing import Optional, Union

from feedstore.core.config import LOG_LEVEL

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: Optional[Union[int, str]] = None) -> None:
    """루트 로거 설정 (패키지를 사용하는 애플리케이션 시작 시 한 번 호출)"""
    if level is None:
        level = LOG_LEVEL
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logging.basicConfig(level=level, format=LOG_FORMAT)
    # basicConfig는 이미 핸들러가 있으면 무시되므로 레벨은 직접 맞춘다
    logging.getLogger().setLevel(level)
