"""리소스 파일(YAML) 로더 유틸리티"""
import os
import yaml
from typing import Any, Dict
from functools import lru_cache

from station_finder.core.config import settings
from station_finder.core.exceptions import ResourceLoadException
from station_finder.core.logging import logger


def get_resource_path(relative_path: str) -> str:
    """패키지 리소스 디렉토리 기준 절대 경로 반환"""
    # station_finder/utils/resource_loader.py -> station_finder/utils -> station_finder
    base_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    return os.path.join(base_dir, "resources", relative_path)


@lru_cache(maxsize=32)
def load_yaml_resource(relative_path: str) -> Dict[str, Any]:
    """YAML 리소스 로드 및 캐싱

    Raises:
        ResourceLoadException: 파일이 없거나 YAML 파싱에 실패한 경우
    """
    path = get_resource_path(relative_path)
    if not os.path.exists(path):
        logger.error(f"Resource not found: {path}")
        raise ResourceLoadException(path, "file not found")

    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        logger.error(f"Failed to load YAML resource {path}: {e}")
        raise ResourceLoadException(path, str(e)) from e


def load_amenity_table() -> Dict[str, str]:
    """편의시설 표시 라벨 → 식별자 테이블 로드 (표시 순서 유지)"""
    data = load_yaml_resource(settings.amenity_table_resource)
    entries = data.get("amenities", [])
    table: Dict[str, str] = {}
    for entry in entries:
        label = entry.get("label")
        identifier = entry.get("id")
        if not label or not identifier:
            logger.warning(f"Skipping malformed amenity entry: {entry}")
            continue
        table[label] = identifier
    return table
