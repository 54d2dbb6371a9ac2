"""検証レポートの診断出力。"""

import logging

from rubric.models.report import ValidationReport
from rubric.validators.registry import rule_group

logger = logging.getLogger(__name__)


class DiagnosticsSink:
    """検証エンジンに注入する診断出力先。

    冗長モードの設定と直近のレポートを保持する。いずれも後勝ちで
    上書きされるデバッグ補助であり、排他制御は行わない。
    """

    def __init__(self, verbose: bool = False, log: logging.Logger | None = None) -> None:
        self.verbose = verbose
        self.last_report: ValidationReport | None = None
        self._logger = log or logger

    def enable_verbose(self) -> None:
        self.verbose = True

    def record(self, report: ValidationReport) -> None:
        """レポートを保持し、問題があるか冗長モードならログに出す。"""
        self.last_report = report
        if report.has_issues or self.verbose:
            self.log_report(report, verbose=self.verbose)

    def log_report(self, report: ValidationReport, verbose: bool = False) -> None:
        """レポートをセクションごとにログ出力する。

        失敗はERROR、警告はWARNING、それ以外はINFOレベルで出力する。
        合格したチェックと詳細情報は冗長モードでのみ出力する。
        """
        log = self._logger
        icon = "✅" if not report.failed else "❌"
        log.info("%s Rubric Validation: %s", icon, report.component)
        log.info(
            "Passed: %d | Failed: %d | Warnings: %d",
            len(report.passed),
            len(report.failed),
            len(report.warnings),
        )

        for check in report.failed:
            log.error("%s%s: %s", _group_prefix(check.rule), check.rule, check.message)
            if verbose and check.details:
                log.info("Details: %s", check.details)

        for check in report.warnings:
            log.warning("%s%s: %s", _group_prefix(check.rule), check.rule, check.message)

        if verbose:
            for check in report.passed:
                log.info("%s%s: %s", _group_prefix(check.rule), check.rule, check.message)

        if report.manual:
            log.info("📋 Manual Checks Required")
            for text in report.manual:
                log.info("• %s", text)

        for suggestion in report.suggestions or []:
            log.info("💡 %s: %s", suggestion.type, suggestion.message)
            if suggestion.example:
                log.info("%s", suggestion.example)

        coverage = report.coverage
        log.info(
            "📊 Coverage: %d%% automated (%d/%d)",
            coverage.percentage,
            coverage.automated,
            coverage.total,
        )


def _group_prefix(rule: str) -> str:
    group = rule_group(rule)
    return f"[{group}] " if group else ""
