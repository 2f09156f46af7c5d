"""
Results report builder.

Turns an AnalysisResult into the header cards and the four report tabs
(Conditions, Analysis, Care Plan, Timeline) rendered by the front end.
"""

from datetime import datetime
from typing import Optional

from symptom_checker.schemas.symptoms import AnalysisResult, CarePlanType, UrgencyLevel
from symptom_checker.schemas.views import (
    BadgeInfo,
    HeaderCard,
    ReportTab,
    ResultsView,
    SectionItem,
    UISection,
)

NO_RESULTS_MESSAGE = "No results to display. Please start a new analysis."

TAB_ORDER = ["Conditions", "Analysis", "Care Plan", "Timeline"]

CONDITION_COLORS = ["#38BDF8", "#34D399", "#A78BFA", "#FBBF24"]

URGENCY_VARIANTS = {
    UrgencyLevel.LOW: "success",
    UrgencyLevel.MEDIUM: "warning",
    UrgencyLevel.HIGH: "danger",
    UrgencyLevel.CRITICAL: "critical",
}


def format_number(value: float) -> str:
    """85.0 -> '85', 72.5 -> '72.5'."""
    return str(int(value)) if float(value).is_integer() else str(value)


def build_header(result: AnalysisResult) -> list[HeaderCard]:
    """Summary cards shown above the tabs."""
    return [
        HeaderCard(
            title="AI Confidence",
            value=f"{format_number(result.ai_confidence)}%",
            icon="pulse",
            theme="blue"
        ),
        HeaderCard(
            title="Conditions Analyzed",
            value=str(result.conditions_analyzed),
            icon="brain",
            theme="purple"
        ),
        HeaderCard(
            title="Urgency Level",
            value=result.urgency_level.value,
            icon="warning",
            theme="urgency",
            badge=BadgeInfo(
                text=result.urgency_level.value,
                variant=URGENCY_VARIANTS[result.urgency_level]
            )
        ),
        HeaderCard(
            title="Recommendations",
            value=str(result.recommendations),
            icon="heart",
            theme="green"
        ),
    ]


def _conditions_sections(result: AnalysisResult) -> list[UISection]:
    items = [
        SectionItem(
            label=c.name,
            value=f"{format_number(c.probability)}%",
            explanation=c.description,
            probability=c.probability,
            color=CONDITION_COLORS[i % len(CONDITION_COLORS)]
        )
        for i, c in enumerate(result.conditions)
    ]
    return [UISection(title="Condition Analysis", icon="magnifying-glass", items=items)]


def _analysis_sections(result: AnalysisResult) -> list[UISection]:
    symptoms = result.symptom_analysis
    risk_section = UISection(
        title="Risk Assessment",
        icon="chart-bar",
        items=[
            SectionItem(label=r.factor, value=f"Risk Score: {format_number(r.value)}", score=r.value)
            for r in result.risk_assessment
        ]
    )
    symptom_section = UISection(
        title="Symptom Analysis",
        icon="clipboard-check",
        items=[
            SectionItem(label="Severity", value=symptoms.severity),
            SectionItem(label="Duration Pattern", value=symptoms.duration_pattern),
            SectionItem(label="Progression", value=symptoms.progression),
        ]
    )
    return [risk_section, symptom_section]


def _care_plan_sections(result: AnalysisResult) -> list[UISection]:
    items = []
    for step in result.care_plan:
        caution = step.type == CarePlanType.CAUTION
        items.append(SectionItem(
            label=step.title,
            value=step.description,
            badge=BadgeInfo(
                text=step.type.value.title(),
                variant="warning" if caution else "success"
            )
        ))
    return [UISection(title="Personalized Care Plan", icon="heart", items=items)]


def _timeline_sections(result: AnalysisResult) -> list[UISection]:
    return [UISection(
        title="Follow-up Timeline",
        icon="calendar-days",
        items=[
            SectionItem(label=event.title, value=event.time, explanation=event.description)
            for event in result.timeline
        ]
    )]


_TAB_SECTIONS = {
    "Conditions": _conditions_sections,
    "Analysis": _analysis_sections,
    "Care Plan": _care_plan_sections,
    "Timeline": _timeline_sections,
}


def build_tabs(result: AnalysisResult) -> list[ReportTab]:
    """Report tabs in display order."""
    return [ReportTab(name=name, sections=_TAB_SECTIONS[name](result)) for name in TAB_ORDER]


def build_results_view(
    result: Optional[AnalysisResult],
    generated_at: Optional[datetime] = None
) -> ResultsView:
    """
    Render the results step.

    A missing result degrades to a placeholder instead of failing.
    """
    if result is None:
        return ResultsView(placeholder=NO_RESULTS_MESSAGE)

    return ResultsView(
        generated_at=generated_at,
        header=build_header(result),
        tabs=build_tabs(result)
    )
