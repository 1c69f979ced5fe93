"""
Tests for JSON Schema Contract Validators

Тестирование контракта evaluation_result:
- Валидность самой схемы
- Валидация сериализованных EvaluationResult (успех и ошибка)
- Детекция нарушений required полей, типов и enum
- Взаимоисключение value / error
"""

import pytest
from jsonschema import ValidationError

from sciengine.core.contracts import (
    EvaluationResultValidator,
    SchemaLoader,
    validate_evaluation_result,
)
from sciengine.core.domain import AngleMode, EvaluationResult
from sciengine.core.errors import ErrorKind
from sciengine.engine.expression_engine import ExpressionEngine


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def valid_success():
    """Валидный успешный результат."""
    return {"expression": "2+2", "mode": "RAD", "ok": True, "value": 4.0}


@pytest.fixture
def valid_failure():
    """Валидный результат с ошибкой."""
    return {
        "expression": "5/0",
        "mode": "DEG",
        "ok": False,
        "error": {
            "kind": "DIVISION_BY_ZERO",
            "message": "Division by zero",
            "fragment": "5/0",
        },
    }


# =============================================================================
# SCHEMA LOADING
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузки схем"""

    def test_schema_is_valid(self):
        schema = SchemaLoader().load_schema("evaluation_result")
        assert schema["title"] == "evaluation_result"

    def test_schema_cached(self):
        loader = SchemaLoader()
        assert loader.load_schema("evaluation_result") is loader.load_schema(
            "evaluation_result"
        )

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("no_such_contract")

    def test_missing_directory(self, tmp_path):
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "absent")

    def test_invalid_schema(self, tmp_path):
        (tmp_path / "broken.json").write_text('{"type": 42}', encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# VALID DATA
# =============================================================================


class TestValidData:
    """Тесты валидных данных"""

    def test_success(self, valid_success):
        validate_evaluation_result(valid_success)

    def test_failure(self, valid_failure):
        validate_evaluation_result(valid_failure)

    def test_failure_without_fragment(self, valid_failure):
        valid_failure["error"]["fragment"] = None
        validate_evaluation_result(valid_failure)
        del valid_failure["error"]["fragment"]
        validate_evaluation_result(valid_failure)

    @pytest.mark.parametrize(
        "expression", ["sin(30)", "5!", "log(0)", "foo(1)", "(2+3", "5/0", "171!"]
    )
    def test_engine_output_conforms(self, expression):
        result = ExpressionEngine().evaluate(expression, AngleMode.DEGREES)
        validate_evaluation_result(result.to_dict())


# =============================================================================
# INVALID DATA
# =============================================================================


class TestInvalidData:
    """Тесты нарушений контракта"""

    @pytest.mark.parametrize("field", ["expression", "mode", "ok"])
    def test_missing_required(self, valid_success, field):
        del valid_success[field]
        with pytest.raises(ValidationError):
            validate_evaluation_result(valid_success)

    def test_unknown_mode(self, valid_success):
        valid_success["mode"] = "GRAD"
        with pytest.raises(ValidationError):
            validate_evaluation_result(valid_success)

    def test_unknown_error_kind(self, valid_failure):
        valid_failure["error"]["kind"] = "SYNTAX"
        with pytest.raises(ValidationError):
            validate_evaluation_result(valid_failure)

    def test_value_must_be_number(self, valid_success):
        valid_success["value"] = "4"
        with pytest.raises(ValidationError):
            validate_evaluation_result(valid_success)

    def test_success_without_value(self, valid_success):
        del valid_success["value"]
        with pytest.raises(ValidationError):
            validate_evaluation_result(valid_success)

    def test_both_value_and_error(self, valid_success, valid_failure):
        valid_success["error"] = valid_failure["error"]
        with pytest.raises(ValidationError):
            validate_evaluation_result(valid_success)

    def test_ok_flag_mismatch(self, valid_failure):
        valid_failure["ok"] = True
        with pytest.raises(ValidationError):
            validate_evaluation_result(valid_failure)

    def test_additional_properties(self, valid_success):
        valid_success["extra"] = 1
        with pytest.raises(ValidationError):
            validate_evaluation_result(valid_success)

    def test_empty_message(self, valid_failure):
        valid_failure["error"]["message"] = ""
        assert not EvaluationResultValidator().is_valid(valid_failure)

    def test_iter_errors(self, valid_failure):
        valid_failure["error"]["kind"] = ErrorKind.DOMAIN.value.lower()
        errors = list(EvaluationResultValidator().iter_errors(valid_failure))
        assert errors


# =============================================================================
# MODEL INTEGRATION
# =============================================================================


class TestModelIntegration:
    """Интеграция EvaluationResult.to_dict с контрактом"""

    def test_success_roundtrip(self):
        result = EvaluationResult.success("1+1", AngleMode.DEGREES, 2.0)
        assert EvaluationResultValidator().is_valid(result.to_dict())
