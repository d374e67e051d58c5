"""
검사 오류 모듈.

소스 로딩, 파싱, 선언 탐색, 시그니처 해석 단계에서 발생하는 오류를 정의한다.
모든 오류는 InspectionError를 상속하며, kind 라벨로 실패 종류를 구분한다.

하위 계층(loader, parsing, query)은 오류를 그대로 raise하고,
검사 계층(checks)만 InspectionError를 잡아 실패 판정(passed=False)으로 바꾼다.

    InspectionError
    ├── SourceNotFoundError   (NotFound)       파일 없음
    ├── SourceParseError      (ParseError)     문법 오류
    ├── TypeNotFoundError     (TypeNotFound)   기대한 최상위 선언 없음
    ├── MemberNotFoundError   (MemberNotFound) 메서드/생성자/파라미터 없음
    └── AmbiguousMatchError   (AmbiguousMatch) 오버로드를 하나로 좁히지 못함
"""

from typing import Literal

ErrorKind = Literal["NotFound", "ParseError", "TypeNotFound", "MemberNotFound", "AmbiguousMatch"]


class InspectionError(Exception):
    """모든 검사 오류의 기반 클래스."""

    kind: ErrorKind


class SourceNotFoundError(InspectionError, FileNotFoundError):
    kind = "NotFound"


class SourceParseError(InspectionError, ValueError):
    kind = "ParseError"


class TypeNotFoundError(InspectionError):
    kind = "TypeNotFound"


class MemberNotFoundError(InspectionError):
    kind = "MemberNotFound"


class AmbiguousMatchError(InspectionError):
    """
    파라미터 수준 검사에서 대상 메서드/생성자를 하나로 특정할 수 없을 때 발생한다.

    첫 번째 후보를 임의로 고르면 테스트 픽스처의 실수가 가려지므로,
    파라미터 타입 목록으로 좁히도록 호출자에게 알린다.
    """

    kind = "AmbiguousMatch"
