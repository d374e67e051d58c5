"""
Java 선언 구조 출력 스크립트.

Java 파일 하나를 파싱하여 최상위 선언의 어노테이션, 필드, 생성자, 메서드를
트리 형태로 출력한다. 검사 픽스처를 작성할 때 파서가 무엇을 보는지 확인하는 용도.

사용법:
    python scripts/run_parse.py path/to/GreetingController.java
    (경로를 생략하면 설정의 컨트롤러 경로를 사용)
"""

import sys
from pathlib import Path

# 프로젝트 루트를 Python 경로에 추가
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from structure_verifier.config import Settings
from structure_verifier.errors import InspectionError
from structure_verifier.models import Annotation
from structure_verifier.parsing.extractors import parse_unit


def _fmt(annotations: list[Annotation]) -> str:
    parts = []
    for a in annotations:
        parts.append(f"@{a.name}({a.argument_text})" if a.argument_text else f"@{a.name}")
    return " ".join(parts)


def main():
    settings = Settings()
    java_file = Path(sys.argv[1]) if len(sys.argv) > 1 else settings.controller_path

    try:
        unit = parse_unit(java_file, encoding=settings.source_encoding)
    except InspectionError as exc:
        print(f"[{exc.kind}] {exc}")
        return 1

    decl = unit.declaration
    print(f"파일: {java_file}")
    print(f"패키지: {unit.package_name or '(없음)'}")
    print("=" * 60)
    print(f"{decl.kind} {decl.name} {_fmt(decl.annotations)}")

    print("── 필드 ──")
    for field in decl.fields:
        for var in field.variables:
            print(f"  {var.type_name:20} {var.name:20} {_fmt(var.annotations)}")

    print("── 생성자 ──")
    for ctor in decl.constructors:
        params = ", ".join(f"{_fmt(p.annotations)} {p.signature_type} {p.name}".strip() for p in ctor.parameters)
        print(f"  {ctor.name}({params}) {_fmt(ctor.annotations)}")

    print("── 메서드 ──")
    for method in decl.methods:
        params = ", ".join(f"{_fmt(p.annotations)} {p.signature_type} {p.name}".strip() for p in method.parameters)
        print(f"  {method.return_type} {method.name}({params}) {_fmt(method.annotations)}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
