"""
구조 검사 모듈.

Java 소스 파일 하나를 읽고 파싱한 뒤, 질의 계층(query)으로
클래스/메서드/생성자/필드/파라미터 어노테이션을 검사한다.

각 검사는 (파일 경로, 질의 인수) → CheckResult 단일 패스 함수이며
상태를 갖지 않는다. 하위 계층 오류(NotFound, ParseError, TypeNotFound,
MemberNotFound, AmbiguousMatch)는 예외로 전파하지 않고
passed=False와 진단 메시지로 바꿔 반환한다.
따라서 한 검사의 실패가 이어지는 다른 검사를 중단시키지 않는다.

사용 예:
    result = check_class_annotation("GreetingController.java", "Controller")
    print(result.line())
    # [PASS] check_class_annotation: 클래스 GreetingController에 @Controller 어노테이션이 있습니다
"""

from collections.abc import Callable, Sequence
from pathlib import Path

from structure_verifier.errors import InspectionError
from structure_verifier.models import CheckResult, TypeDeclaration
from structure_verifier.parsing.extractors import parse_unit
from structure_verifier.query.annotations import (
    any_constructor_has_annotation,
    any_field_of_type_has_annotation,
    any_method_has_annotation,
    any_method_has_annotation_with_value,
    has_annotation,
    has_annotation_with_value_contains,
    parameter_has_annotation_with_value,
)
from structure_verifier.query.resolution import resolve_constructor, resolve_method


def _run_check(
    name: str,
    path: str | Path,
    predicate: Callable[[TypeDeclaration], bool],
    passed_message: Callable[[TypeDeclaration], str],
    failed_message: Callable[[TypeDeclaration], str],
    encoding: str = "utf-8",
) -> CheckResult:
    """
    모든 구조 검사의 공통 골격: 로드 → 파싱 → 질의 → 판정.

    predicate 안에서 발생한 InspectionError(시그니처 해석 실패 등)도
    로드/파싱 오류와 같은 방식으로 실패 판정이 된다.
    """
    try:
        declaration = parse_unit(path, encoding=encoding).declaration
        passed = predicate(declaration)
    except InspectionError as exc:
        return CheckResult(
            name=name,
            path=str(path),
            passed=False,
            message=f"[{exc.kind}] {exc}",
            error_kind=exc.kind,
        )

    message = passed_message(declaration) if passed else failed_message(declaration)
    return CheckResult(name=name, path=str(path), passed=passed, message=message)


def _value_suffix(value: str) -> str:
    return f" (값 '{value}')" if value else ""


def check_class_annotation(path: str | Path, annotation: str, encoding: str = "utf-8") -> CheckResult:
    """클래스 선언에 어노테이션이 붙어 있는지 검사한다 (예: @Controller)."""
    return _run_check(
        "check_class_annotation",
        path,
        lambda decl: has_annotation(decl, annotation),
        lambda decl: f"클래스 {decl.name}에 @{annotation} 어노테이션이 있습니다",
        lambda decl: f"클래스 {decl.name}에 @{annotation} 어노테이션이 없습니다",
        encoding,
    )


def check_class_annotation_with_value(
    path: str | Path, annotation: str, value: str, encoding: str = "utf-8"
) -> CheckResult:
    """클래스 어노테이션의 인수 원문에 value가 포함되는지 검사한다 (예: @RequestMapping("/api"))."""
    return _run_check(
        "check_class_annotation_with_value",
        path,
        lambda decl: has_annotation_with_value_contains(decl, annotation, value),
        lambda decl: f"클래스 {decl.name}에 @{annotation}{_value_suffix(value)}이(가) 있습니다",
        lambda decl: f"클래스 {decl.name}에 @{annotation}{_value_suffix(value)}이(가) 없습니다",
        encoding,
    )


def check_method_annotation(path: str | Path, annotation: str, encoding: str = "utf-8") -> CheckResult:
    """메서드 중 하나라도 어노테이션을 가졌는지 검사한다."""
    return _run_check(
        "check_method_annotation",
        path,
        lambda decl: any_method_has_annotation(decl, annotation),
        lambda decl: f"{decl.name}의 메서드에 @{annotation} 어노테이션이 있습니다",
        lambda decl: f"{decl.name}에 @{annotation} 어노테이션이 붙은 메서드가 없습니다",
        encoding,
    )


def check_method_annotation_with_value(
    path: str | Path, annotation: str, value: str, encoding: str = "utf-8"
) -> CheckResult:
    """메서드 중 하나라도 값이 포함된 어노테이션을 가졌는지 검사한다."""
    return _run_check(
        "check_method_annotation_with_value",
        path,
        lambda decl: any_method_has_annotation_with_value(decl, annotation, value),
        lambda decl: f"{decl.name}의 메서드에 @{annotation}{_value_suffix(value)}이(가) 있습니다",
        lambda decl: f"{decl.name}에 @{annotation}{_value_suffix(value)}이(가) 붙은 메서드가 없습니다",
        encoding,
    )


def check_method_signature_annotation(
    path: str | Path,
    method_name: str,
    param_types: Sequence[str] | None,
    annotation: str,
    value: str = "",
    encoding: str = "utf-8",
) -> CheckResult:
    """
    특정 시그니처의 메서드에 어노테이션(과 값)이 있는지 검사한다.

    컴파일된 클래스를 리플렉션으로 조회하던 검사를 소스 기반으로 대체한다:
        check_method_signature_annotation(path, "greetUser", ["String", "int", "Model"],
                                          "GetMapping", "/greet")
    param_types가 None이면 이름만으로 해석하며, 오버로드가 있으면 AmbiguousMatch로 실패한다.
    """
    label = f"{method_name}({', '.join(param_types)})" if param_types is not None else method_name
    return _run_check(
        "check_method_signature_annotation",
        path,
        lambda decl: has_annotation_with_value_contains(
            resolve_method(decl, method_name, param_types), annotation, value
        ),
        lambda decl: f"{decl.name}.{label}에 @{annotation}{_value_suffix(value)}이(가) 있습니다",
        lambda decl: f"{decl.name}.{label}에 @{annotation}{_value_suffix(value)}이(가) 없습니다",
        encoding,
    )


def check_constructor_annotation(path: str | Path, annotation: str, encoding: str = "utf-8") -> CheckResult:
    """생성자 중 하나라도 어노테이션을 가졌는지 검사한다 (예: @Autowired)."""
    return _run_check(
        "check_constructor_annotation",
        path,
        lambda decl: any_constructor_has_annotation(decl, annotation),
        lambda decl: f"{decl.name}의 생성자에 @{annotation} 어노테이션이 있습니다",
        lambda decl: f"{decl.name}에 @{annotation} 어노테이션이 붙은 생성자가 없습니다",
        encoding,
    )


def check_field_annotation(
    path: str | Path, field_type: str, annotation: str, encoding: str = "utf-8"
) -> CheckResult:
    """선언 타입이 field_type인 필드에 어노테이션이 있는지 검사한다."""
    return _run_check(
        "check_field_annotation",
        path,
        lambda decl: any_field_of_type_has_annotation(decl, field_type, annotation),
        lambda decl: f"{decl.name}의 '{field_type}' 타입 필드에 @{annotation} 어노테이션이 있습니다",
        lambda decl: f"{decl.name}의 '{field_type}' 타입 필드에 @{annotation} 어노테이션이 없습니다",
        encoding,
    )


def check_constructor_parameter_annotation(
    path: str | Path,
    param_name: str,
    annotation: str,
    value: str = "",
    param_types: Sequence[str] | None = None,
    encoding: str = "utf-8",
) -> CheckResult:
    """
    생성자 파라미터 param_name에 어노테이션(과 값)이 있는지 검사한다.

    예: public Checkout(@Qualifier("payPalPaymentGateway") PaymentGateway gateway)
        → param_name="gateway", annotation="Qualifier", value="payPalPaymentGateway"

    생성자가 여러 개이고 그중 둘 이상이 param_name을 선언하면
    param_types로 좁혀야 한다 (그렇지 않으면 AmbiguousMatch).
    """
    return _run_check(
        "check_constructor_parameter_annotation",
        path,
        lambda decl: parameter_has_annotation_with_value(
            resolve_constructor(decl, param_types, param_name), param_name, annotation, value
        ),
        lambda decl: f"{decl.name} 생성자 파라미터 '{param_name}'에 @{annotation}{_value_suffix(value)}이(가) 있습니다",
        lambda decl: f"{decl.name} 생성자 파라미터 '{param_name}'에 @{annotation}{_value_suffix(value)}이(가) 없습니다",
        encoding,
    )


def check_method_parameter_annotation_with_value(
    path: str | Path,
    method_name: str,
    annotation: str,
    value: str,
    param_name: str | None = None,
    param_types: Sequence[str] | None = None,
    encoding: str = "utf-8",
) -> CheckResult:
    """
    메서드 method_name의 파라미터에 값이 포함된 어노테이션이 있는지 검사한다.

    param_name이 None이면 해당 메서드의 파라미터 중 하나라도 만족하면 통과한다.
    같은 이름의 오버로드가 여러 개 남으면 param_types로 좁혀야 한다.
    """
    target = f"파라미터 '{param_name}'" if param_name is not None else "파라미터"
    return _run_check(
        "check_method_parameter_annotation_with_value",
        path,
        lambda decl: parameter_has_annotation_with_value(
            resolve_method(decl, method_name, param_types, param_name), param_name, annotation, value
        ),
        lambda decl: f"{decl.name}.{method_name}의 {target}에 @{annotation}{_value_suffix(value)}이(가) 있습니다",
        lambda decl: f"{decl.name}.{method_name}의 {target}에 @{annotation}{_value_suffix(value)}이(가) 없습니다",
        encoding,
    )
