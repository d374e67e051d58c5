"""
소스 로딩 모듈.

검사 대상 파일(Java 소스, JSP/HTML 뷰)의 원문 텍스트를 읽어온다.
파일 읽기 외의 부수 효과는 없다.
"""

from pathlib import Path

from structure_verifier.errors import SourceNotFoundError


def load_source(path: str | Path, encoding: str = "utf-8") -> str:
    """
    파일 전체를 읽어 텍스트로 반환한다.

    바이트 단위로 읽은 뒤 디코딩하며, 디코딩할 수 없는 바이트는 대체 문자로 바꾼다.
    빈 파일은 오류가 아니라 빈 문자열을 반환한다.

    Args:
        path: 읽을 파일 경로
        encoding: 디코딩에 사용할 인코딩 (기본 UTF-8)

    Returns:
        파일 원문 텍스트

    Raises:
        SourceNotFoundError: 경로가 존재하는 일반 파일이 아닐 때
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise SourceNotFoundError(f"소스 파일이 존재하지 않습니다: {file_path}")
    return file_path.read_bytes().decode(encoding, errors="replace")
