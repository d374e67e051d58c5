"""
시그니처 해석 모듈.

파라미터 수준 검사의 대상이 되는 메서드/생성자를 하나로 특정한다.

해석 전략 (순서대로 후보를 좁힘):
1. 이름 매칭: 메서드는 이름이 같은 것, 생성자는 전부
2. 파라미터 타입 목록이 주어지면 signature_type 목록이 정확히 같은 것
3. 파라미터 이름이 주어지면 그 이름의 파라미터를 선언한 것
4. 남은 후보가 0개 → MemberNotFoundError, 2개 이상 → AmbiguousMatchError

사용 예:
    method = resolve_method(decl, "greetUser", ["String", "int", "Model"])
    ctor = resolve_constructor(decl, param_name="gateway")
"""

from collections.abc import Sequence
from typing import TypeVar

from structure_verifier.errors import AmbiguousMatchError, MemberNotFoundError
from structure_verifier.models import ConstructorDeclaration, MethodDeclaration, TypeDeclaration

Member = TypeVar("Member", ConstructorDeclaration, MethodDeclaration)


def resolve_method(
    declaration: TypeDeclaration,
    method_name: str,
    param_types: Sequence[str] | None = None,
    param_name: str | None = None,
) -> MethodDeclaration:
    """
    이름(과 선택적으로 파라미터 타입/이름)으로 메서드 하나를 특정한다.

    Raises:
        MemberNotFoundError: 조건에 맞는 메서드가 없을 때
        AmbiguousMatchError: 오버로드가 여러 개 남을 때
    """
    candidates = [m for m in declaration.methods if m.name == method_name]
    label = f"{declaration.name}.{method_name}"
    if not candidates:
        raise MemberNotFoundError(f"메서드를 찾을 수 없습니다: {label}")
    return _narrow(candidates, label, param_types, param_name)


def resolve_constructor(
    declaration: TypeDeclaration,
    param_types: Sequence[str] | None = None,
    param_name: str | None = None,
) -> ConstructorDeclaration:
    """
    파라미터 타입/이름으로 생성자 하나를 특정한다.

    Raises:
        MemberNotFoundError: 선언된 생성자가 없거나 조건에 맞는 것이 없을 때
        AmbiguousMatchError: 생성자가 여러 개 남을 때
    """
    candidates = list(declaration.constructors)
    label = f"{declaration.name} 생성자"
    if not candidates:
        raise MemberNotFoundError(f"선언된 생성자가 없습니다: {declaration.name}")
    return _narrow(candidates, label, param_types, param_name)


def _narrow(
    candidates: list[Member],
    label: str,
    param_types: Sequence[str] | None,
    param_name: str | None,
) -> Member:
    if param_types is not None:
        wanted = list(param_types)
        candidates = [c for c in candidates if c.parameter_types() == wanted]
        if not candidates:
            raise MemberNotFoundError(f"시그니처가 일치하는 {label}이(가) 없습니다: ({', '.join(wanted)})")

    if param_name is not None:
        candidates = [c for c in candidates if any(p.name == param_name for p in c.parameters)]
        if not candidates:
            raise MemberNotFoundError(f"{label}에 파라미터 '{param_name}'이(가) 없습니다")

    if len(candidates) > 1:
        signatures = ", ".join(f"({', '.join(c.parameter_types())})" for c in candidates)
        raise AmbiguousMatchError(
            f"{label} 후보가 {len(candidates)}개입니다: {signatures} - 파라미터 타입 목록을 지정하세요"
        )
    return candidates[0]
