"""Compliance engine exceptions."""


class ComplianceError(Exception):
    """Base class for compliance engine errors."""


class AssessmentNotFoundError(ComplianceError, LookupError):
    def __init__(self, assessment_id: str):
        self.assessment_id = assessment_id
        super().__init__(f"Assessment not found: {assessment_id}")


class UnknownRequirementError(ComplianceError, ValueError):
    """Status update names a requirement outside the assessment's catalog."""

    def __init__(self, requirement_ids):
        if isinstance(requirement_ids, str):
            requirement_ids = [requirement_ids]
        self.requirement_ids = list(requirement_ids)
        super().__init__(f"Unknown requirement id(s): {', '.join(self.requirement_ids)}")
