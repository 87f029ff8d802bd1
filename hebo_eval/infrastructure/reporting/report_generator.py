"""
Report Generator

Renders a RunEvaluationResponse as text, markdown or JSON.
"""

import json
import time
from typing import List

from hebo_eval.application.dtos import RunEvaluationResponse, VALID_OUTPUT_FORMATS
from hebo_eval.domain.services import format_test_case_plain
from hebo_eval.domain.value_objects import TestCaseEvaluation


class ReportGenerator:
    """Generates reports in various formats from evaluation results."""

    def __init__(self, output_format: str = "text"):
        if output_format not in VALID_OUTPUT_FORMATS:
            raise ValueError(f"Unsupported output format: {output_format}")
        self.output_format = output_format

    def generate(self, response: RunEvaluationResponse) -> str:
        if self.output_format == "json":
            return self.generate_json(response)
        if self.output_format == "markdown":
            return self.generate_markdown(response)
        return self.generate_text(response)

    @staticmethod
    def generate_json(response: RunEvaluationResponse) -> str:
        return json.dumps(response.to_dict(), indent=2)

    @staticmethod
    def generate_text(response: RunEvaluationResponse) -> str:
        lines: List[str] = [
            "Test Summary",
            "============",
            f"Total: {response.total}",
            f"Passed: {response.passed}",
            f"Failed: {response.failed}",
            f"Duration: {response.duration:.2f}s",
        ]

        if response.error:
            lines.append(f"Error: {response.error}")

        failures = response.failures
        if failures:
            lines.extend(["", "Failed Tests", "------------"])
            for evaluation in failures:
                lines.append(_failure_line(evaluation))

        if response.load_errors:
            lines.extend(["", "Load Errors", "-----------"])
            for file_path, message in response.load_errors:
                lines.append(f"- {file_path}: {message}")

        return "\n".join(lines)

    @staticmethod
    def generate_markdown(response: RunEvaluationResponse) -> str:
        lines: List[str] = [
            f"# Evaluation Report: {response.agent_id}",
            "",
            f"**Run ID**: {response.run_id}",
            f"**Timestamp**: {time.strftime('%Y-%m-%d %H:%M:%S')}",
            f"**Duration**: {response.duration:.2f}s",
            "",
            "## Summary",
            "",
            "| Metric | Value |",
            "|--------|-------|",
            f"| Total | {response.total} |",
            f"| Passed | {response.passed} |",
            f"| Failed | {response.failed} |",
            f"| Pass Rate | {response.pass_rate:.2%} |",
            f"| Mean Score | {response.mean_score:.3f} |",
            f"| Mean Execution Time (ms) | {response.mean_execution_time:.1f} |",
            f"| P95 Execution Time (ms) | {response.p95_execution_time:.1f} |",
            "",
        ]

        if response.error:
            lines.extend([f"**Error**: {response.error}", ""])

        if response.evaluations:
            lines.extend([
                "## Results",
                "",
                "| Test Case | Result | Score | Time (ms) |",
                "|-----------|--------|-------|-----------|",
            ])
            for evaluation in response.evaluations:
                result = "PASS" if evaluation.success else "FAIL"
                lines.append(
                    f"| {evaluation.test_case_id} | {result} | {evaluation.score:.3f} | {evaluation.execution_time:.1f} |"
                )
            lines.append("")

        failures = response.failures
        if failures:
            lines.extend(["## Failures", ""])
            for evaluation in failures:
                lines.extend(_failure_details(evaluation))

        if response.load_errors:
            lines.extend(["## Load Errors", ""])
            for file_path, message in response.load_errors:
                lines.append(f"- `{file_path}`: {message}")
            lines.append("")

        return "\n".join(lines)


def _failure_line(evaluation: TestCaseEvaluation) -> str:
    line = f"- {evaluation.test_case_id} (score: {evaluation.score:.3f})"
    if evaluation.error:
        line += f": {evaluation.error}"
    return line


def _failure_details(evaluation: TestCaseEvaluation) -> List[str]:
    lines = [f"### {evaluation.test_case_id}", ""]

    if evaluation.error:
        lines.extend([f"**Error**: {evaluation.error}", ""])

    for result in evaluation.assertion_results:
        status = "passed" if result.passed else "failed"
        lines.append(
            f"- Assertion `{result.assertion.expected_text}` "
            f"(threshold {result.assertion.threshold}): {status}, score {result.final_score:.3f}"
        )
    if evaluation.assertion_results:
        lines.append("")

    lines.extend([
        "**Transcript**:",
        "",
        "```",
        format_test_case_plain(evaluation.test_case),
        "```",
        "",
        "**Response**:",
        "",
        "```",
        evaluation.response if evaluation.response is not None else "(no response)",
        "```",
        "",
    ])
    return lines
