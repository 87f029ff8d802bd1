"""
Run Evaluation Use Case

Orchestrates an evaluation run: load test cases, send each conversation to
the agent, score the responses and aggregate the results.
"""

import asyncio
import time
import uuid
from typing import List, Optional, Tuple

import numpy as np

from hebo_eval.application.dtos import RunEvaluationRequest, RunEvaluationResponse
from hebo_eval.domain.entities import TestCase
from hebo_eval.domain.exceptions import AgentError
from hebo_eval.domain.interfaces import IAgent
from hebo_eval.domain.services import ScoringService
from hebo_eval.domain.value_objects import TestCaseEvaluation
from hebo_eval.infrastructure.loaders import TestCaseLoader
from hebo_eval.logging_utils import StructuredLogger
from hebo_eval.models import ComponentType, EventType


class RunEvaluationUseCase:
    """
    Use case for evaluating an agent against a set of test cases.

    Workflow:
    1. Load test cases (or take the ones in the request)
    2. Send every block before the expected one to the agent, bounded by
       max_concurrency and a per-case timeout
    3. Score each response with the ScoringService
    4. Aggregate counts, mean score and execution-time statistics

    Error Handling:
    - Agent failures and timeouts become failed evaluations; they never abort the run
    - Transcripts that fail to load are reported in load_errors
    - Anything else is captured in response.error
    """

    def __init__(
        self,
        agent: IAgent,
        scoring_service: Optional[ScoringService] = None,
        loader: Optional[TestCaseLoader] = None,
        timeout_seconds: float = 30.0,
    ):
        """
        Initialize the use case with dependencies.

        Args:
            agent: Agent under evaluation
            scoring_service: Scorer (defaults to ScoringService())
            loader: Transcript loader (defaults to TestCaseLoader())
            timeout_seconds: Per-case limit on the agent call
        """
        if timeout_seconds <= 0:
            raise ValueError(f"timeout_seconds must be positive, got {timeout_seconds}")

        self._agent = agent
        self._scoring_service = scoring_service or ScoringService()
        self._loader = loader or TestCaseLoader()
        self._timeout = timeout_seconds
        self.logger = StructuredLogger(ComponentType.EVALUATION_RUNNER)

    async def execute_test_case(
        self,
        test_case: TestCase,
        scoring_service: Optional[ScoringService] = None,
    ) -> TestCaseEvaluation:
        """
        Run a single test case. Never raises for agent-side failures.

        Args:
            test_case: Test case to run
            scoring_service: Scorer override (defaults to the injected one)

        Returns:
            TestCaseEvaluation with execution_time in milliseconds
        """
        scoring_service = scoring_service or self._scoring_service
        self.logger.log_event(
            test_case.id,
            EventType.TEST_CASE_STARTED,
            {"name": test_case.name, "input_blocks": len(test_case.input_blocks)},
        )

        start_time = time.perf_counter()
        error: Optional[str] = None
        output = None

        try:
            output = await asyncio.wait_for(
                self._agent.send_input(test_case.input_blocks),
                timeout=self._timeout,
            )
        except asyncio.TimeoutError:
            error = f"Timeout after {self._timeout}s"
        except AgentError as e:
            error = str(e)
        except Exception as e:
            error = f"{type(e).__name__}: {str(e)}"

        execution_time = (time.perf_counter() - start_time) * 1000

        if error is None and output.error is not None:
            error = output.error

        if error is not None:
            evaluation = scoring_service.evaluate_failure(
                test_case,
                error,
                execution_time,
                response=output.response if output is not None else None,
            )
            self.logger.log_event(
                test_case.id,
                EventType.TEST_CASE_FAILED,
                {"error": error},
                metrics={"execution_time_ms": execution_time},
            )
            return evaluation

        evaluation = scoring_service.evaluate(test_case, output.response, execution_time)
        self.logger.log_event(
            test_case.id,
            EventType.TEST_CASE_COMPLETED,
            {"success": evaluation.success, "error": evaluation.error},
            metrics={"score": evaluation.score, "execution_time_ms": execution_time},
        )
        return evaluation

    async def execute(self, request: RunEvaluationRequest) -> RunEvaluationResponse:
        """
        Execute a complete evaluation run.

        Args:
            request: What to evaluate and how

        Returns:
            RunEvaluationResponse with evaluations in input order
        """
        run_id = str(uuid.uuid4())[:8]
        start_time = time.time()
        load_errors: List[Tuple[str, str]] = []

        try:
            if request.test_cases is not None:
                test_cases = list(request.test_cases)
            else:
                result = self._loader.load_from_directory(
                    request.directory,
                    stop_on_error=request.stop_on_error,
                )
                test_cases = result.test_cases
                load_errors = result.errors
                for file_path, message in load_errors:
                    self.logger.log_event(
                        run_id,
                        EventType.LOAD_ERROR,
                        {"file_path": file_path, "error": message},
                    )

            scoring_service = self._scoring_service.with_threshold(request.threshold)
            semaphore = asyncio.Semaphore(request.max_concurrency)

            async def run_one(test_case: TestCase) -> TestCaseEvaluation:
                async with semaphore:
                    return await self.execute_test_case(test_case, scoring_service)

            evaluations = list(await asyncio.gather(*[run_one(tc) for tc in test_cases]))

            response = self._aggregate(
                run_id=run_id,
                evaluations=evaluations,
                load_errors=load_errors,
                duration=time.time() - start_time,
            )

        except Exception as e:
            error_msg = f"{type(e).__name__}: {str(e)}"
            self.logger.error("Evaluation run failed", run_id=run_id, error=error_msg)
            response = RunEvaluationResponse(
                run_id=run_id,
                agent_id=self._agent.agent_id,
                total=0,
                passed=0,
                failed=0,
                mean_score=0.0,
                mean_execution_time=0.0,
                p95_execution_time=0.0,
                duration=time.time() - start_time,
                load_errors=load_errors,
                error=error_msg,
            )

        self.logger.log_event(
            run_id,
            EventType.EVALUATION_FINISHED,
            {"agent_id": response.agent_id, "error": response.error},
            metrics={
                "total": response.total,
                "passed": response.passed,
                "failed": response.failed,
                "mean_score": response.mean_score,
            },
        )
        return response

    async def close(self) -> None:
        """Release resources held by the agent."""
        await self._agent.cleanup()

    def _aggregate(
        self,
        run_id: str,
        evaluations: List[TestCaseEvaluation],
        load_errors: List[Tuple[str, str]],
        duration: float,
    ) -> RunEvaluationResponse:
        passed = sum(1 for evaluation in evaluations if evaluation.success)

        if evaluations:
            scores = [evaluation.score for evaluation in evaluations]
            times = [evaluation.execution_time for evaluation in evaluations]
            mean_score = min(1.0, float(np.mean(scores)))
            mean_time = float(np.mean(times))
            p95_time = float(np.percentile(times, 95))
        else:
            mean_score = mean_time = p95_time = 0.0

        return RunEvaluationResponse(
            run_id=run_id,
            agent_id=self._agent.agent_id,
            total=len(evaluations),
            passed=passed,
            failed=len(evaluations) - passed,
            mean_score=mean_score,
            mean_execution_time=mean_time,
            p95_execution_time=p95_time,
            duration=duration,
            evaluations=evaluations,
            load_errors=load_errors,
        )
