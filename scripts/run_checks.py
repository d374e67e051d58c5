"""
과제 구조 검사 실행 스크립트.

인사말 폼 과제 프로젝트에 대해 컨트롤러 어노테이션과 뷰 태그 검사를 실행하고
결과를 콘솔에 출력한다. 검사 하나가 실패해도 나머지 검사는 계속 실행된다.

전체 흐름:
    설정 로드 → 컨트롤러 소스 검사 → 뷰 검사 → 요약 출력

사용법:
    python scripts/run_checks.py
    (검사 대상 경로는 .env 또는 PROJECT_ROOT 환경변수로 지정)
"""

import sys
from collections import Counter
from pathlib import Path

# 프로젝트 루트를 Python 경로에 추가
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from structure_verifier.config import Settings
from structure_verifier.checks.markup import check_tag_closed, check_tag_presence
from structure_verifier.checks.structure import (
    check_class_annotation,
    check_method_parameter_annotation_with_value,
    check_method_signature_annotation,
)


def main():
    settings = Settings()
    encoding = settings.source_encoding
    controller = settings.controller_path

    print(f"검사 대상 프로젝트: {settings.project_root.resolve()}")
    print("=" * 60)

    # ── 1단계: 컨트롤러 소스 검사 ────────────────────────────
    results = [
        check_class_annotation(controller, "Controller", encoding),
        check_method_signature_annotation(controller, "showForm", [], "GetMapping", '"/"', encoding),
        check_method_signature_annotation(
            controller, "greetUser", ["String", "int", "Model"], "GetMapping", "/greet", encoding
        ),
        check_method_parameter_annotation_with_value(
            controller, "greetUser", "RequestParam", "", param_name="name", encoding=encoding
        ),
        check_method_parameter_annotation_with_value(
            controller, "greetUser", "RequestParam", "", param_name="age", encoding=encoding
        ),
    ]

    # ── 2단계: 뷰 검사 ───────────────────────────────────────
    results += [
        check_tag_presence(settings.index_view_path, "<form", encoding),
        check_tag_presence(settings.index_view_path, "<input", encoding),
        check_tag_presence(settings.greeting_view_path, "<h2>", encoding),
        check_tag_closed(settings.greeting_view_path, "h2", encoding),
    ]

    for i, result in enumerate(results, 1):
        print(f"[{i}/{len(results)}] {result.line()}")

    print("=" * 60)

    # ── 요약 ─────────────────────────────────────────────────
    passed = sum(1 for r in results if r.passed)
    print(f"통과: {passed}/{len(results)}")
    error_kinds = Counter(r.error_kind for r in results if r.error_kind)
    for kind, count in error_kinds.most_common():
        print(f"  {kind:15}: {count}개")

    return 0 if passed == len(results) else 1


if __name__ == "__main__":
    sys.exit(main())
