"""
구조 검사 테스트.

검사 함수는 예외를 던지지 않고 CheckResult로 판정과 진단을 돌려줘야 한다.
"""

import pytest

from structure_verifier.checks.structure import (
    check_class_annotation,
    check_class_annotation_with_value,
    check_constructor_annotation,
    check_constructor_parameter_annotation,
    check_field_annotation,
    check_method_annotation,
    check_method_annotation_with_value,
    check_method_parameter_annotation_with_value,
    check_method_signature_annotation,
)

PAYMENT_SOURCE = """
package com.example.shop;

public class PaymentService {

    private final PaymentGateway gateway;

    @Autowired
    public PaymentService(@Qualifier("payPalPaymentGateway") PaymentGateway gateway, Ledger ledger) {
        this.gateway = gateway;
    }
}
"""


@pytest.fixture
def controller(greeting_app):
    return greeting_app / "src/main/java/com/yaksha/assignment/controller/GreetingController.java"


def test_class_annotation(checkout_file):
    passed = check_class_annotation(checkout_file, "Service")
    failed = check_class_annotation(checkout_file, "Repository")

    assert passed.passed is True
    assert passed.error_kind is None
    assert "@Service" in passed.message
    assert failed.passed is False
    assert failed.error_kind is None
    assert "@Repository" in failed.message


def test_result_is_truthy_only_when_passed(checkout_file):
    assert check_class_annotation(checkout_file, "Service")
    assert not check_class_annotation(checkout_file, "Repository")


def test_result_line_format(checkout_file):
    result = check_class_annotation(checkout_file, "Service")

    assert result.line().startswith("[PASS] check_class_annotation: ")
    assert check_class_annotation(checkout_file, "Entity").line().startswith("[FAIL]")


def test_class_annotation_with_value(checkout_file):
    assert check_class_annotation_with_value(checkout_file, "Transactional", "readOnly").passed
    assert not check_class_annotation_with_value(checkout_file, "Transactional", "timeout").passed


def test_method_annotation(checkout_file):
    assert check_method_annotation(checkout_file, "Route").passed
    assert not check_method_annotation(checkout_file, "GetMapping").passed


def test_method_annotation_with_value(checkout_file):
    assert check_method_annotation_with_value(checkout_file, "Route", "/greet").passed
    assert not check_method_annotation_with_value(checkout_file, "Route", "/other").passed


def test_method_signature_annotation(checkout_file):
    result = check_method_signature_annotation(checkout_file, "greet", ["String", "int"], "Route", "/greet")
    assert result.passed
    assert "greet(String, int)" in result.message

    assert not check_method_signature_annotation(checkout_file, "greet", ["String", "int"], "Route", "/other").passed


def test_method_signature_overload_without_types_fails_closed(checkout_file):
    result = check_method_signature_annotation(checkout_file, "greet", None, "Route", "/greet")

    assert result.passed is False
    assert result.error_kind == "AmbiguousMatch"
    assert result.message.startswith("[AmbiguousMatch]")


def test_constructor_annotation(checkout_file):
    assert check_constructor_annotation(checkout_file, "Autowired").passed
    assert not check_constructor_annotation(checkout_file, "Inject").passed


def test_field_annotation(checkout_file):
    assert check_field_annotation(checkout_file, "Order", "Autowired").passed
    assert check_field_annotation(checkout_file, "List<Item>", "Inject").passed
    assert not check_field_annotation(checkout_file, "PaymentGateway", "Autowired").passed


def test_constructor_parameter_value_on_named_parameter(write_java):
    path = write_java("PaymentService.java", PAYMENT_SOURCE)

    assert check_constructor_parameter_annotation(path, "gateway", "Qualifier", "payPalPaymentGateway").passed
    assert not check_constructor_parameter_annotation(path, "ledger", "Qualifier", "payPalPaymentGateway").passed
    assert not check_constructor_parameter_annotation(path, "gateway", "Qualifier", "stripeGateway").passed


def test_constructor_parameter_presence_only(write_java):
    path = write_java("PaymentService.java", PAYMENT_SOURCE)

    assert check_constructor_parameter_annotation(path, "gateway", "Qualifier").passed


def test_constructor_parameter_unknown_name(write_java):
    path = write_java("PaymentService.java", PAYMENT_SOURCE)
    result = check_constructor_parameter_annotation(path, "amount", "Qualifier")

    assert result.passed is False
    assert result.error_kind == "MemberNotFound"


def test_constructor_parameter_needs_types_with_overloads(checkout_file):
    ambiguous = check_constructor_parameter_annotation(checkout_file, "gateway", "Qualifier", "payPal")
    resolved = check_constructor_parameter_annotation(
        checkout_file, "gateway", "Qualifier", "payPal", param_types=["PaymentGateway", "Order"]
    )
    other_ctor = check_constructor_parameter_annotation(
        checkout_file, "gateway", "Qualifier", "payPal", param_types=["PaymentGateway"]
    )

    assert ambiguous.error_kind == "AmbiguousMatch"
    assert resolved.passed
    assert not other_ctor.passed
    assert other_ctor.error_kind is None


def test_method_parameter_annotation_with_value(checkout_file):
    assert check_method_parameter_annotation_with_value(
        checkout_file, "pay", "Qualifier", "paypalPaymentGateway"
    ).passed
    assert check_method_parameter_annotation_with_value(
        checkout_file, "pay", "Qualifier", "paypalPaymentGateway", param_name="gateway"
    ).passed
    assert not check_method_parameter_annotation_with_value(
        checkout_file, "pay", "Qualifier", "paypalPaymentGateway", param_name="cents"
    ).passed


def test_missing_file_fails_with_not_found(tmp_path):
    missing = tmp_path / "Ghost.java"
    result = check_class_annotation(missing, "Service")

    assert result.passed is False
    assert result.error_kind == "NotFound"
    assert result.message.startswith("[NotFound]")
    assert str(missing) in result.message
    assert result.path == str(missing)


def test_type_name_mismatch_fails_with_type_not_found(write_java):
    path = write_java("Foo.src", "@Service class Bar {}")
    result = check_class_annotation(path, "Service")

    assert result.passed is False
    assert result.error_kind == "TypeNotFound"


def test_parse_error_fails_closed(write_java):
    path = write_java("Broken.java", "@Service public class Broken { void run( }")
    result = check_method_annotation(path, "Service")

    assert result.passed is False
    assert result.error_kind == "ParseError"


def test_failure_does_not_abort_following_checks(tmp_path, checkout_file):
    results = [
        check_class_annotation(tmp_path / "Ghost.java", "Service"),
        check_class_annotation(checkout_file, "Service"),
    ]

    assert [r.passed for r in results] == [False, True]


def test_greeting_controller_catalogue(controller):
    assert check_class_annotation(controller, "Controller").passed
    assert check_method_signature_annotation(controller, "showForm", [], "GetMapping", '"/"').passed
    assert check_method_signature_annotation(
        controller, "greetUser", ["String", "int", "Model"], "GetMapping", "/greet"
    ).passed
    assert check_method_parameter_annotation_with_value(
        controller, "greetUser", "RequestParam", "", param_name="name"
    ).passed
    assert not check_method_parameter_annotation_with_value(
        controller, "greetUser", "RequestParam", "", param_name="model"
    ).passed


def test_greeting_controller_wrong_signature(controller):
    result = check_method_signature_annotation(controller, "greetUser", ["String", "int"], "GetMapping", "/greet")

    assert result.passed is False
    assert result.error_kind == "MemberNotFound"
