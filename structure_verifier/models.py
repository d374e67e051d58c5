"""
데이터 모델 모듈.

tree-sitter AST에서 추출된 선언 구조와 검사 결과를 표현하는 모델을 정의한다.
모든 모델은 불변(frozen)이며, 파싱 한 번에 생성되어 검사가 끝나면 버려진다.

데이터 흐름:
    Java 소스 →[파싱]→ SourceUnit(TypeDeclaration) →[질의]→ CheckResult
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

from structure_verifier.errors import ErrorKind


class Annotation(BaseModel):
    """
    선언에 붙은 어노테이션 하나.

    인수는 평가하지 않고 소스 텍스트 그대로 보관한다.
    값 검사는 argument_text에 대한 부분 문자열 포함 여부로 판정한다.
    """

    model_config = ConfigDict(frozen=True)

    name: str                          # 소스에 적힌 이름 그대로 (예: "GetMapping", "org.x.Marker")
    arguments: list[str] = []          # 괄호 안 인수 토큰 (예: ['"/greet"'], ['value = "x"'])
    argument_text: str = ""            # 괄호 안 원문 전체, 마커 어노테이션이면 ""


class VariableBinding(BaseModel):
    """필드 선언문이 만드는 변수 하나. 선언문의 어노테이션 전체를 복사해 갖는다."""

    model_config = ConfigDict(frozen=True)

    name: str
    type_name: str                     # 변수 뒤 배열 차원 포함 (예: "int a[]" → "int[]")
    annotations: list[Annotation] = []


class FieldDeclaration(BaseModel):
    model_config = ConfigDict(frozen=True)

    type_name: str                     # 선언문의 타입 (예: "PaymentGateway")
    variables: list[VariableBinding]
    annotations: list[Annotation] = []
    modifiers: list[str] = []


class Parameter(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    type_name: str
    annotations: list[Annotation] = []
    varargs: bool = False              # String... args

    @property
    def signature_type(self) -> str:
        """오버로드 비교에 쓰는 타입 문자열. 가변 인수는 "..."를 붙인다."""
        return f"{self.type_name}..." if self.varargs else self.type_name


class ConstructorDeclaration(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    parameters: list[Parameter] = []
    annotations: list[Annotation] = []
    modifiers: list[str] = []

    def parameter_types(self) -> list[str]:
        return [p.signature_type for p in self.parameters]


class MethodDeclaration(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    return_type: str | None = None
    parameters: list[Parameter] = []
    annotations: list[Annotation] = []
    modifiers: list[str] = []

    def parameter_types(self) -> list[str]:
        return [p.signature_type for p in self.parameters]


class TypeDeclaration(BaseModel):
    """
    파일의 최상위 타입 선언 (class / interface / enum).

    멤버는 소스에 등장한 순서대로 보관한다.
    중첩 타입은 추출하지 않는다.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    kind: Literal["class", "interface", "enum"]
    annotations: list[Annotation] = []
    modifiers: list[str] = []
    fields: list[FieldDeclaration] = []
    constructors: list[ConstructorDeclaration] = []
    methods: list[MethodDeclaration] = []


class SourceUnit(BaseModel):
    """
    파싱된 파일 하나.

    선언 이름이 파일명에서 얻은 기대 이름과 일치할 때만 생성된다.
    일치하지 않으면 파서가 TypeNotFoundError를 발생시키므로
    SourceUnit은 항상 유효한 declaration 하나를 갖는다.
    """

    model_config = ConfigDict(frozen=True)

    path: str | None = None
    package_name: str | None = None
    declaration: TypeDeclaration


class CheckResult(BaseModel):
    """
    검사 하나의 판정 결과.

    passed와 함께 콘솔/로그에 그대로 출력할 수 있는 진단 메시지를 담는다.
    하위 계층 오류로 실패한 경우 error_kind에 실패 종류가 기록된다.
    """

    model_config = ConfigDict(frozen=True)

    name: str                          # 검사 이름 (예: "check_class_annotation")
    path: str
    passed: bool
    message: str
    error_kind: ErrorKind | None = None

    def __bool__(self) -> bool:
        return self.passed

    def line(self) -> str:
        """콘솔 출력용 한 줄 요약."""
        status = "PASS" if self.passed else "FAIL"
        return f"[{status}] {self.name}: {self.message}"
