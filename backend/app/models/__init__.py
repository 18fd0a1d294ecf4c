"""Caelex Compliance Engine - Data Models"""
from .domain import (
    # Enums
    Jurisdiction, OperatorType, ActivityType, OrbitRegime, SizeClass,
    ComplianceStatus, Severity, Category, RiskLevel, GapPriority, Effort,
    EffortType, NIS2Classification, DeorbitCompliance, Grade,
    # Inputs
    OperatorProfile, ApplicabilityRule, Requirement, RequirementStatus,
    # Outputs
    ComplianceScore, GapItem, AssessmentResult, CrosswalkEntry,
    OverlapRequirement, DeorbitCalculation,
)

__all__ = [
    "Jurisdiction", "OperatorType", "ActivityType", "OrbitRegime", "SizeClass",
    "ComplianceStatus", "Severity", "Category", "RiskLevel", "GapPriority", "Effort",
    "EffortType", "NIS2Classification", "DeorbitCompliance", "Grade",
    "OperatorProfile", "ApplicabilityRule", "Requirement", "RequirementStatus",
    "ComplianceScore", "GapItem", "AssessmentResult", "CrosswalkEntry",
    "OverlapRequirement", "DeorbitCalculation",
]
