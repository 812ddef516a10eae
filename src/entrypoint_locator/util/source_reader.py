"""
소스 파일 읽기 유틸리티

여러 인코딩을 순서대로 시도하여 소스 파일을 읽습니다.
마지막 인코딩(latin-1)은 모든 바이트를 디코딩하므로 인코딩 문제로 실패하지 않으며,
파일을 열 수 없거나 읽을 수 없을 때만 SourceReadError를 발생시킵니다.
"""

import logging
from pathlib import Path
from typing import Callable, List, TextIO, TypeVar, Union

logger = logging.getLogger(__name__)

# 마지막 항목은 모든 바이트를 받아들이는 인코딩이어야 함
ENCODINGS = ["utf-8", "euc-kr", "cp949", "latin-1"]

T = TypeVar("T")


class EntryPointError(Exception):
    """진입점 탐색 관련 에러의 기본 클래스"""

    pass


class SourceReadError(EntryPointError):
    """소스 파일을 열거나 읽을 수 없을 때 발생하는 예외"""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"파일을 읽을 수 없습니다: {self.path} - {reason}")


def _read_with_fallback(path: Path, reader: Callable[[TextIO], T]) -> T:
    """
    ENCODINGS 순서대로 파일을 열어 reader를 적용합니다.

    Args:
        path: 파일 경로
        reader: 열린 텍스트 파일을 받아 결과를 반환하는 함수

    Returns:
        reader의 반환값

    Raises:
        SourceReadError: 파일을 열 수 없거나 읽을 수 없는 경우
    """
    fallback_encoding = ENCODINGS[-1]
    for encoding in ENCODINGS[:-1]:
        try:
            with open(path, "r", encoding=encoding) as f:
                return reader(f)
        except UnicodeDecodeError:
            logger.debug(f"인코딩 {encoding}(으)로 읽기 실패: {path}")
        except OSError as e:
            raise SourceReadError(path, str(e)) from e

    logger.debug(f"{fallback_encoding} 인코딩으로 읽습니다: {path}")
    try:
        with open(path, "r", encoding=fallback_encoding) as f:
            return reader(f)
    except OSError as e:
        raise SourceReadError(path, str(e)) from e


def read_source_text(file_path: Union[str, Path]) -> str:
    """
    소스 파일 전체를 문자열로 읽습니다.

    Args:
        file_path: 파일 경로

    Returns:
        str: 파일 내용

    Raises:
        SourceReadError: 파일을 열 수 없거나 읽을 수 없는 경우
    """
    return _read_with_fallback(Path(file_path), lambda f: f.read())


def read_source_lines(file_path: Union[str, Path]) -> List[str]:
    """줄 바꿈 문자를 제외한 줄 목록을 반환합니다."""
    return read_source_text(file_path).splitlines()


def read_first_line(file_path: Union[str, Path]) -> str:
    """
    소스 파일의 첫 줄만 읽습니다.

    Args:
        file_path: 파일 경로

    Returns:
        str: 줄 바꿈 문자를 제외한 첫 줄 (빈 파일이면 빈 문자열)

    Raises:
        SourceReadError: 파일을 열 수 없거나 읽을 수 없는 경우
    """
    return _read_with_fallback(Path(file_path), lambda f: f.readline().rstrip("\r\n"))
