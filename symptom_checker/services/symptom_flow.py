"""
Symptom checker flow: consent -> form -> loading -> results.

The flow owns the current state and only changes it through the
transitions below. The AI call is its single suspension point; the state
is switched to loading before the await, which is what rejects a second
submission on the same flow.
"""

import asyncio
from typing import Optional

from symptom_checker.core.exceptions import IncompleteSubmissionError, InvalidTransitionError
from symptom_checker.core.logging import get_logger
from symptom_checker.schemas.flow import (
    ConsentState,
    FlowState,
    FormState,
    LoadingState,
    ResultsState,
)
from symptom_checker.schemas.symptoms import AnalysisResult, PatientInput
from symptom_checker.services.analysis_gateway import AnalysisGateway

logger = get_logger(__name__)

ANALYSIS_ERROR_MESSAGE = (
    "An error occurred during analysis. The AI provider may be busy, "
    "please try again later."
)


class SymptomCheckerFlow:
    """Four-step UI state machine for one user."""

    def __init__(self, gateway: AnalysisGateway):
        self._gateway = gateway
        self._state: FlowState = ConsentState()

    @property
    def state(self) -> FlowState:
        return self._state

    @property
    def step(self) -> str:
        return self._state.step

    @property
    def result(self) -> Optional[AnalysisResult]:
        return self._state.result if isinstance(self._state, ResultsState) else None

    @property
    def error(self) -> Optional[str]:
        return self._state.error if isinstance(self._state, FormState) else None

    def _require(self, step: str, action: str) -> None:
        if self._state.step != step:
            raise InvalidTransitionError(self._state.step, action)

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def consent(self) -> FlowState:
        """Consent -> Form."""
        self._require("consent", "consent")
        self._state = FormState()
        return self._state

    def begin_analysis(self, patient: PatientInput) -> FlowState:
        """Form -> Loading. Clears any previous error and result."""
        # Also the single-flight guard: a loading flow is not on the form step
        self._require("form", "analyze")

        missing = patient.missing_fields()
        if missing:
            raise IncompleteSubmissionError(missing)

        self._state = LoadingState(submitted=patient)
        return self._state

    def succeed(self, result: AnalysisResult) -> FlowState:
        """Loading -> Results."""
        self._require("loading", "success")
        self._state = ResultsState(result=result)
        return self._state

    def fail(self, reason: str = ANALYSIS_ERROR_MESSAGE) -> FlowState:
        """Loading -> Form, keeping the submitted input as the draft."""
        self._require("loading", "failure")
        self._state = FormState(error=reason, draft=self._state.submitted)
        return self._state

    def new_analysis(self) -> FlowState:
        """Results -> Form with result and error cleared."""
        self._require("results", "new_analysis")
        self._state = FormState()
        return self._state

    # ------------------------------------------------------------------
    # Async operation
    # ------------------------------------------------------------------

    async def analyze(self, patient: PatientInput) -> FlowState:
        """
        Submit the form and wait for the gateway.

        Exactly one of succeed/fail fires. Gateway errors never escape;
        the flow lands back on the form with an error message instead.

        Raises:
            InvalidTransitionError: Not on the form step (including while loading).
            IncompleteSubmissionError: A required field is empty.
        """
        self.begin_analysis(patient)

        try:
            result = await self._gateway.analyze(patient)
        except asyncio.CancelledError:
            self.fail()
            raise
        except Exception as e:
            logger.warning(f"Analysis failed, returning to form: {type(e).__name__}")
            return self.fail()

        return self.succeed(result)
