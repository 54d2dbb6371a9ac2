"""仕様に基づく要素検証エンジン。"""

import logging
import math
import re
from collections.abc import Callable

from rubric.models.element import InspectableElement
from rubric.models.report import CheckOutcome, Coverage, StyleSuggestion, ValidationReport, ValidationResult
from rubric.models.spec import Requirement, RubricSpec, StyleGuidelines, Value
from rubric.services.diagnostics import DiagnosticsSink
from rubric.validators.common import ValidatorFunction, leading_float
from rubric.validators.registry import VALIDATOR_FACTORIES, VALIDATORS

logger = logging.getLogger(__name__)

_PARAMETERIZED_HINT = re.compile(r"^(\w+)\(([^)]+)\)$")


class RubricValidator:
    """構造化ルールと要件ヒントを要素に対して実行し、レポートを集計する。

    呼び出し間で状態を持たない。診断シンクを渡した場合のみ、
    生成したレポートをシンクへ記録する。
    """

    def __init__(
        self,
        diagnostics: DiagnosticsSink | None = None,
        validators: dict[str, ValidatorFunction] | None = None,
        factories: dict[str, Callable[[float], ValidatorFunction]] | None = None,
    ) -> None:
        self._diagnostics = diagnostics
        self._validators = VALIDATORS if validators is None else validators
        self._factories = VALIDATOR_FACTORIES if factories is None else factories

    def validate(self, element: InspectableElement, spec: RubricSpec) -> ValidationReport:
        """要素を仕様に照らして検証する。

        個々のバリデータの例外は警告としてレポートに記録され、
        このメソッドからは送出されない。

        Args:
            element: 検証対象の要素。
            spec: パース済みの仕様。

        Returns:
            新しく生成された検証レポート。
        """
        report = ValidationReport(component=spec.metadata.name)

        if spec.validation:
            self._validate_rules(element, spec.validation, report)

        self._validate_requirements(element, spec.requirements, report)

        if spec.style is not None:
            report.suggestions = generate_style_suggestions(spec.style)

        report.coverage = compute_coverage(spec.requirements)

        if self._diagnostics is not None:
            self._diagnostics.record(report)
        return report

    def _validate_rules(
        self,
        element: InspectableElement,
        rules: dict[str, Value],
        report: ValidationReport,
    ) -> None:
        for rule_name, rule_value in rules.items():
            if rule_value is None:
                continue

            validator = self._validators.get(rule_name)
            if validator is None:
                report.warnings.append(
                    ValidationResult(
                        rule=rule_name,
                        passed=False,
                        message=f"Unknown validation rule: {rule_name}",
                        severity="warning",
                    )
                )
                continue

            outcome = self._run(validator, element, rule_value, rule_name, report)
            if outcome is None:
                continue

            result = ValidationResult(
                rule=rule_name,
                passed=outcome.passed,
                message=outcome.message,
                severity="info" if outcome.passed else "error",
                details=outcome.details,
            )
            (report.passed if outcome.passed else report.failed).append(result)

    def _validate_requirements(
        self,
        element: InspectableElement,
        requirements: list[Requirement],
        report: ValidationReport,
    ) -> None:
        for requirement in requirements:
            if not requirement.validation:
                report.manual.append(requirement.text)
                continue

            match = _PARAMETERIZED_HINT.match(requirement.validation)
            if match:
                factory = self._factories.get(match.group(1))
                if factory is None:
                    report.manual.append(requirement.text)
                    continue
                param = leading_float(match.group(2))
                validator = factory(math.nan if param is None else param)
                outcome = self._run(validator, element, None, requirement.text, report)
                if outcome is None:
                    continue
                target = report.passed if outcome.passed else report.failed
            else:
                plain = self._validators.get(requirement.validation)
                if plain is None:
                    report.manual.append(requirement.text)
                    continue
                outcome = self._run(plain, element, True, requirement.text, report)
                if outcome is None:
                    continue
                if outcome.passed:
                    target = report.passed
                elif requirement.severity == "warning":
                    target = report.warnings
                else:
                    target = report.failed

            target.append(
                ValidationResult(
                    rule=requirement.text,
                    passed=outcome.passed,
                    message=outcome.message,
                    severity=requirement.severity,
                    details=outcome.details,
                )
            )

    @staticmethod
    def _run(
        validator: ValidatorFunction,
        element: InspectableElement,
        rule_value: Value | None,
        rule_name: str,
        report: ValidationReport,
    ) -> CheckOutcome | None:
        """バリデータを実行する。例外時は警告を記録してNoneを返す。"""
        try:
            return validator(element, rule_value)
        except Exception as e:
            logger.warning("Validator %s raised an error", rule_name, exc_info=True)
            report.warnings.append(
                ValidationResult(
                    rule=rule_name,
                    passed=False,
                    message=f"Error running validation: {e}",
                    severity="warning",
                )
            )
            return None


def validate(
    element: InspectableElement,
    spec: RubricSpec,
    diagnostics: DiagnosticsSink | None = None,
) -> ValidationReport:
    """既定のバリデータカタログで要素を検証する。"""
    return RubricValidator(diagnostics=diagnostics).validate(element, spec)


def compute_coverage(requirements: list[Requirement]) -> Coverage:
    """検証ヒント付き要件の割合を算出する。

    ヒントが解決できたかどうかに関わらず、ヒントがあれば自動化済みと数える。
    """
    total = len(requirements)
    automated = sum(1 for r in requirements if r.validation)
    # 四捨五入（0.5は切り上げ）
    percentage = math.floor(automated / total * 100 + 0.5) if total > 0 else 0
    return Coverage(total=total, automated=automated, percentage=percentage)


def generate_style_suggestions(style: StyleGuidelines) -> list[StyleSuggestion]:
    """@Style ブロックの内容からスタイル提案を生成する。"""
    suggestions: list[StyleSuggestion] = []

    if style.tokens is not None:
        token_types = list(style.tokens.keys()) if isinstance(style.tokens, dict) else []
        token_lines = "\n".join(f"  /* {t} tokens */\n  --{t}-primary: value;" for t in token_types)
        suggestions.append(
            StyleSuggestion(
                type="tokens",
                message=f"Define design tokens for: {', '.join(token_types)}",
                example=f"/* tokens.css */\n:root {{\n{token_lines}\n}}",
            )
        )

    if style.naming is not None:
        naming = style.naming if isinstance(style.naming, dict) else {"pattern": style.naming}
        suggestions.append(
            StyleSuggestion(
                type="naming",
                message=f"Follow {naming.get('pattern')} naming convention",
                example=str(naming.get("example") or ".component--variant--state { }"),
            )
        )

    if style.guidelines:
        suggestions.append(
            StyleSuggestion(
                type="pattern",
                message="Style guidelines to follow",
                example="\n".join(f"• {g}" for g in style.guidelines),
            )
        )

    return suggestions
