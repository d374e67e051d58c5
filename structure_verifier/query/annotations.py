"""
어노테이션 질의 모듈.

파싱된 선언 모델에 대해 "엔티티 E에 어노테이션 A가 있는가?",
"A의 인수에 값 V가 포함되는가?"를 판정하는 순수 함수들.
모든 검사(checks)는 이 질의 계층을 거친다.

이름 비교는 대소문자를 구분하는 완전 일치이며, 패키지 접두어를 떼지 않는다.
값 비교는 인수 원문에 대한 부분 문자열 포함 여부이다.
    @Qualifier("paypalPaymentGatewayExtra") → "paypalPaymentGateway" 포함 (통과)
    @GetMapping("/greeting")                → "/greet" 포함 (통과)
"""

from typing import Union

from structure_verifier.models import (
    ConstructorDeclaration,
    FieldDeclaration,
    MethodDeclaration,
    Parameter,
    TypeDeclaration,
    VariableBinding,
)

# annotations 속성을 가진 모든 선언 모델
AnnotatedEntity = Union[
    TypeDeclaration,
    FieldDeclaration,
    VariableBinding,
    ConstructorDeclaration,
    MethodDeclaration,
    Parameter,
]


def has_annotation(entity: AnnotatedEntity, name: str) -> bool:
    """엔티티에 이름이 정확히 name인 어노테이션이 하나라도 있으면 True."""
    return any(annotation.name == name for annotation in entity.annotations)


def has_annotation_with_value_contains(entity: AnnotatedEntity, name: str, substring: str) -> bool:
    """
    이름이 name이고 인수 원문에 substring이 포함된 어노테이션이 있으면 True.

    substring이 빈 문자열이면 has_annotation과 같다.
    """
    return any(
        annotation.name == name and substring in annotation.argument_text
        for annotation in entity.annotations
    )


def any_method_has_annotation(declaration: TypeDeclaration, name: str) -> bool:
    return any(has_annotation(method, name) for method in declaration.methods)


def any_method_has_annotation_with_value(declaration: TypeDeclaration, name: str, substring: str) -> bool:
    return any(
        has_annotation_with_value_contains(method, name, substring)
        for method in declaration.methods
    )


def any_constructor_has_annotation(declaration: TypeDeclaration, name: str) -> bool:
    return any(has_annotation(constructor, name) for constructor in declaration.constructors)


def any_field_of_type_has_annotation(declaration: TypeDeclaration, declared_type: str, name: str) -> bool:
    """
    선언 타입 문자열이 declared_type과 정확히 같은 변수 중
    어노테이션 name을 가진 것이 있으면 True.

    변수 단위로 판정하므로 "@A Type x, y;"는 x와 y 각각에서 A가 보인다.
    하위 타입이나 제네릭 소거는 고려하지 않는다 ("List<Item>" ≠ "List").
    """
    return any(
        has_annotation(variable, name)
        for field in declaration.fields
        for variable in field.variables
        if variable.type_name == declared_type
    )


def parameter_has_annotation_with_value(
    member: ConstructorDeclaration | MethodDeclaration,
    param_name: str | None,
    name: str,
    substring: str = "",
) -> bool:
    """
    특정 시그니처의 파라미터에 어노테이션 값 검사를 적용한다.

    Args:
        member: resolve_method / resolve_constructor로 특정한 시그니처
        param_name: 검사할 파라미터 이름. None이면 모든 파라미터가 대상
        name: 어노테이션 이름
        substring: 인수 원문에 포함되어야 할 값
    """
    return any(
        has_annotation_with_value_contains(param, name, substring)
        for param in member.parameters
        if param_name is None or param.name == param_name
    )
