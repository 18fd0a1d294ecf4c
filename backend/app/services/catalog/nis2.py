"""
NIS2 Directive (EU) 2022/2555 - Requirement Catalog

Space is a sector of high criticality under Annex I. Obligations bind
essential and important entities; the entity class comes from
classify_nis2_entity() and is matched through nis2_classifications.
eu_space_act_refs record the EU Space Act articles that cover the same
ground for space operators.
"""

from ...models.domain import (
    ApplicabilityRule,
    Category,
    Jurisdiction,
    NIS2Classification,
    Requirement,
    Severity,
)

J = Jurisdiction.NIS2

IN_SCOPE = ApplicabilityRule(
    nis2_classifications=(NIS2Classification.ESSENTIAL, NIS2Classification.IMPORTANT),
)
ESSENTIAL_ONLY = ApplicabilityRule(nis2_classifications=(NIS2Classification.ESSENTIAL,))
IMPORTANT_ONLY = ApplicabilityRule(nis2_classifications=(NIS2Classification.IMPORTANT,))


NIS2_REQUIREMENTS = (
    # Art. 21(2)(a) - risk analysis and information system security policies
    Requirement(
        id="nis2-001",
        jurisdiction=J,
        article_ref="NIS2 Art. 21(2)(a)",
        title="Information Security Policy for Space Systems",
        category=Category.CYBERSECURITY,
        severity=Severity.CRITICAL,
        applicability=IN_SCOPE,
        implementation_weeks=4,
        eu_space_act_refs=("Art. 74", "Art. 76"),
    ),
    Requirement(
        id="nis2-002",
        jurisdiction=J,
        article_ref="NIS2 Art. 21(2)(a)",
        title="Cybersecurity Risk Analysis for Space Operations",
        category=Category.CYBERSECURITY,
        severity=Severity.CRITICAL,
        applicability=IN_SCOPE,
        implementation_weeks=6,
        eu_space_act_refs=("Art. 77-78",),
    ),
    # Art. 21(2)(b) - incident handling
    Requirement(
        id="nis2-006",
        jurisdiction=J,
        article_ref="NIS2 Art. 21(2)(b)",
        title="Incident Detection for Space Systems",
        category=Category.CYBERSECURITY,
        severity=Severity.CRITICAL,
        applicability=IN_SCOPE,
        implementation_weeks=6,
        eu_space_act_refs=("Art. 83-84",),
    ),
    Requirement(
        id="nis2-007",
        jurisdiction=J,
        article_ref="NIS2 Art. 21(2)(b)",
        title="Incident Response Procedures for Space Operations",
        category=Category.CYBERSECURITY,
        severity=Severity.CRITICAL,
        applicability=IN_SCOPE,
        implementation_weeks=4,
        eu_space_act_refs=("Art. 83-84",),
    ),
    # Art. 21(2)(c) - business continuity
    Requirement(
        id="nis2-011",
        jurisdiction=J,
        article_ref="NIS2 Art. 21(2)(c)",
        title="Business Continuity Plan for Mission-Critical Ground Operations",
        category=Category.BUSINESS_CONTINUITY,
        severity=Severity.CRITICAL,
        applicability=IN_SCOPE,
        implementation_weeks=6,
        eu_space_act_refs=("Art. 85",),
    ),
    Requirement(
        id="nis2-012",
        jurisdiction=J,
        article_ref="NIS2 Art. 21(2)(c)",
        title="Backup and Disaster Recovery for TT&C Systems",
        category=Category.BUSINESS_CONTINUITY,
        severity=Severity.CRITICAL,
        applicability=IN_SCOPE,
        implementation_weeks=4,
        eu_space_act_refs=("Art. 85",),
    ),
    # Art. 21(2)(d) - supply chain
    Requirement(
        id="nis2-015",
        jurisdiction=J,
        article_ref="NIS2 Art. 21(2)(d)",
        title="Supplier Risk Assessment for Space Components",
        category=Category.SUPPLY_CHAIN,
        severity=Severity.CRITICAL,
        applicability=IN_SCOPE,
        implementation_weeks=5,
        eu_space_act_refs=("Art. 73",),
    ),
    Requirement(
        id="nis2-017",
        jurisdiction=J,
        article_ref="NIS2 Art. 21(2)(d)",
        title="Secure Software Development for Flight Software",
        category=Category.SUPPLY_CHAIN,
        severity=Severity.MAJOR,
        applicability=IN_SCOPE,
        implementation_weeks=6,
    ),
    # Art. 21(2)(e) - acquisition, development and maintenance
    Requirement(
        id="nis2-021",
        jurisdiction=J,
        article_ref="NIS2 Art. 21(2)(e)",
        title="Vulnerability Management for Ground Segment",
        category=Category.CYBERSECURITY,
        severity=Severity.CRITICAL,
        applicability=IN_SCOPE,
        implementation_weeks=4,
        eu_space_act_refs=("Art. 79-80",),
    ),
    # Art. 21(2)(f) - effectiveness assessment
    Requirement(
        id="nis2-025",
        jurisdiction=J,
        article_ref="NIS2 Art. 21(2)(f)",
        title="Assessment of Cybersecurity Measure Effectiveness",
        category=Category.GOVERNANCE,
        severity=Severity.MAJOR,
        applicability=IN_SCOPE,
        implementation_weeks=3,
        eu_space_act_refs=("Art. 88",),
    ),
    Requirement(
        id="nis2-026",
        jurisdiction=J,
        article_ref="NIS2 Art. 21(2)(f)",
        title="Threat-Led Penetration Testing of Space Systems",
        category=Category.CYBERSECURITY,
        mandatory=False,
        severity=Severity.MINOR,
        applicability=ESSENTIAL_ONLY,
        implementation_weeks=4,
        eu_space_act_refs=("Art. 88",),
    ),
    # Art. 21(2)(g) - cyber hygiene and training
    Requirement(
        id="nis2-028",
        jurisdiction=J,
        article_ref="NIS2 Art. 21(2)(g)",
        title="Cyber Hygiene and Security Training",
        category=Category.GOVERNANCE,
        severity=Severity.MAJOR,
        applicability=IN_SCOPE,
        implementation_weeks=2,
        eu_space_act_refs=("Art. 74-75",),
    ),
    # Art. 21(2)(h) - cryptography
    Requirement(
        id="nis2-030",
        jurisdiction=J,
        article_ref="NIS2 Art. 21(2)(h)",
        title="Cryptography and Encryption for Space Links",
        category=Category.CYBERSECURITY,
        severity=Severity.CRITICAL,
        applicability=IN_SCOPE,
        implementation_weeks=6,
        eu_space_act_refs=("Art. 81-82",),
    ),
    # Art. 21(2)(i)-(j) - access control and authentication
    Requirement(
        id="nis2-033",
        jurisdiction=J,
        article_ref="NIS2 Art. 21(2)(i)",
        title="Access Control and Asset Management for Mission Systems",
        category=Category.CYBERSECURITY,
        severity=Severity.MAJOR,
        applicability=IN_SCOPE,
        implementation_weeks=3,
    ),
    Requirement(
        id="nis2-036",
        jurisdiction=J,
        article_ref="NIS2 Art. 21(2)(j)",
        title="Multi-Factor Authentication for Operator Consoles",
        category=Category.CYBERSECURITY,
        severity=Severity.MAJOR,
        applicability=IN_SCOPE,
        implementation_weeks=2,
    ),
    # Art. 20 - governance
    Requirement(
        id="nis2-040",
        jurisdiction=J,
        article_ref="NIS2 Art. 20",
        title="Management Body Approval and Accountability",
        category=Category.GOVERNANCE,
        severity=Severity.CRITICAL,
        applicability=IN_SCOPE,
        implementation_weeks=1,
    ),
    # Art. 23 - reporting obligations
    Requirement(
        id="nis2-042",
        jurisdiction=J,
        article_ref="NIS2 Art. 23(4)(a)",
        title="24-Hour Early Warning of Significant Incidents",
        category=Category.INCIDENT_REPORTING,
        severity=Severity.CRITICAL,
        applicability=IN_SCOPE,
        implementation_weeks=2,
        eu_space_act_refs=("Art. 89-92",),
    ),
    Requirement(
        id="nis2-043",
        jurisdiction=J,
        article_ref="NIS2 Art. 23(4)(b)-(d)",
        title="72-Hour Incident Notification and Final Report",
        category=Category.INCIDENT_REPORTING,
        severity=Severity.CRITICAL,
        applicability=IN_SCOPE,
        implementation_weeks=2,
        eu_space_act_refs=("Art. 89-92",),
    ),
    # Art. 27 - registration
    Requirement(
        id="nis2-045",
        jurisdiction=J,
        article_ref="NIS2 Art. 27",
        title="Registration with the Competent Authority",
        category=Category.REGISTRATION,
        severity=Severity.MINOR,
        applicability=IN_SCOPE,
        implementation_weeks=1,
    ),
    # Art. 32-33 - supervision
    Requirement(
        id="nis2-047",
        jurisdiction=J,
        article_ref="NIS2 Art. 32",
        title="Ex-Ante Supervision of Essential Entities",
        category=Category.SUPERVISION,
        severity=Severity.MAJOR,
        applicability=ESSENTIAL_ONLY,
        implementation_weeks=2,
    ),
    Requirement(
        id="nis2-048",
        jurisdiction=J,
        article_ref="NIS2 Art. 33",
        title="Ex-Post Supervision of Important Entities",
        category=Category.SUPERVISION,
        severity=Severity.MINOR,
        applicability=IMPORTANT_ONLY,
        implementation_weeks=1,
    ),
)
