"""
EU Space Act - Requirement Catalog

Title II (authorisation, Art. 6-27), Title III insurance (Art. 28-32),
supervision and reporting (Art. 33-54), debris and safety (Art. 55-73),
cybersecurity (Art. 74-95) and environmental footprint (Art. 96-100).

Operator roles: spacecraft operators (SCO), launch operators (LO), launch
site operators (LSO), in-space operations and services providers (ISOS)
and primary data providers (PDP). Third-country operators (TCO) are
selected through the is_third_country flag.
"""

from ...models.domain import (
    ApplicabilityRule,
    Category,
    Jurisdiction,
    OperatorType,
    Requirement,
    Severity,
    SizeClass,
)

J = Jurisdiction.EU_SPACE_ACT

SPACE_OBJECT_OPERATORS = (OperatorType.SPACECRAFT, OperatorType.ISOS)
LAUNCH_OPERATORS = (OperatorType.LAUNCH_VEHICLE, OperatorType.LAUNCH_SITE)


EU_SPACE_ACT_REQUIREMENTS = (
    # -------------------------------------------------------------------------
    # Authorisation (Art. 6-27)
    # -------------------------------------------------------------------------
    Requirement(
        id="eu-sa-art6-authorization",
        jurisdiction=J,
        article_ref="Art. 6",
        title="Prior Authorisation of Space Activities",
        category=Category.AUTHORIZATION,
        severity=Severity.CRITICAL,
        description="Space activities in or from the Union require prior authorisation by the NCA.",
        implementation_weeks=12,
        guidance="File the authorisation application with the NCA of the Member State of establishment.",
    ),
    Requirement(
        id="eu-sa-art7-application-dossier",
        jurisdiction=J,
        article_ref="Art. 7-9",
        title="Authorisation Application Dossier",
        category=Category.AUTHORIZATION,
        severity=Severity.CRITICAL,
        description="Technical, financial and legal documentation supporting the application.",
        implementation_weeks=8,
        guidance="Prepare mission description, technical compliance evidence and proof of financial standing.",
    ),
    Requirement(
        id="eu-sa-art10-light-regime",
        jurisdiction=J,
        article_ref="Art. 10",
        title="Light Regime for Small Enterprises and Research Institutions",
        category=Category.AUTHORIZATION,
        mandatory=False,
        severity=Severity.MINOR,
        applicability=ApplicabilityRule(size_classes=(SizeClass.MICRO, SizeClass.SMALL)),
        description="Simplified procedure and reduced documentation for qualifying entities.",
        implementation_weeks=2,
        guidance="Document eligibility for the light regime in the application.",
    ),
    Requirement(
        id="eu-sa-art14-tco-representative",
        jurisdiction=J,
        article_ref="Art. 14-16",
        title="Third-Country Operator Legal Representative",
        category=Category.AUTHORIZATION,
        severity=Severity.CRITICAL,
        applicability=ApplicabilityRule(required_flags=("is_third_country",)),
        description="Third-country operators providing services in the Union designate an EU legal representative.",
        implementation_weeks=6,
        guidance="Appoint a representative established in a Member State and register with EUSPA.",
    ),
    Requirement(
        id="eu-sa-art24-registration",
        jurisdiction=J,
        article_ref="Art. 24",
        title="Union Register of Space Objects",
        category=Category.REGISTRATION,
        severity=Severity.MAJOR,
        applicability=ApplicabilityRule(operator_types=SPACE_OBJECT_OPERATORS),
        description="Authorised space objects are entered in the Union Register.",
        implementation_weeks=1,
        guidance="Submit orbital parameters and object identifiers within the registration window.",
    ),
    Requirement(
        id="eu-sa-art27-pdp-notification",
        jurisdiction=J,
        article_ref="Art. 27",
        title="Primary Data Provider Notification",
        category=Category.REGISTRATION,
        severity=Severity.MINOR,
        applicability=ApplicabilityRule(operator_types=(OperatorType.DATA_PROVIDER,)),
        description="Primary data providers notify the NCA before commencing distribution of space data.",
        implementation_weeks=1,
    ),
    # -------------------------------------------------------------------------
    # Insurance (Art. 28-32)
    # -------------------------------------------------------------------------
    Requirement(
        id="eu-sa-art28-insurance",
        jurisdiction=J,
        article_ref="Art. 28-30",
        title="Third-Party Liability Insurance",
        category=Category.INSURANCE_LIABILITY,
        severity=Severity.CRITICAL,
        applicability=ApplicabilityRule(excluded_operator_types=(OperatorType.DATA_PROVIDER,)),
        description="Minimum third-party liability cover for damage caused by space activities.",
        implementation_weeks=6,
        guidance="Obtain cover at or above the minimum amount set for the mission risk profile.",
    ),
    Requirement(
        id="eu-sa-art31-insurance-proof",
        jurisdiction=J,
        article_ref="Art. 31-32",
        title="Proof of Insurance Cover",
        category=Category.INSURANCE_LIABILITY,
        severity=Severity.MAJOR,
        applicability=ApplicabilityRule(excluded_operator_types=(OperatorType.DATA_PROVIDER,)),
        implementation_weeks=1,
    ),
    # -------------------------------------------------------------------------
    # Supervision and reporting (Art. 33-54)
    # -------------------------------------------------------------------------
    Requirement(
        id="eu-sa-art33-supervision",
        jurisdiction=J,
        article_ref="Art. 33-40",
        title="NCA Supervision and Inspections",
        category=Category.SUPERVISION,
        severity=Severity.MAJOR,
        description="Cooperate with supervisory inspections and information requests.",
        implementation_weeks=2,
    ),
    Requirement(
        id="eu-sa-art41-significant-events",
        jurisdiction=J,
        article_ref="Art. 41-45",
        title="Notification of Significant Events",
        category=Category.INCIDENT_REPORTING,
        severity=Severity.MAJOR,
        description="Collisions, fragmentations and loss of control are notified to the NCA without undue delay.",
        implementation_weeks=3,
        guidance="Define event thresholds and a notification runbook owned by mission operations.",
    ),
    Requirement(
        id="eu-sa-art46-annual-report",
        jurisdiction=J,
        article_ref="Art. 46-54",
        title="Annual Compliance Reporting",
        category=Category.SUPERVISION,
        severity=Severity.MINOR,
        implementation_weeks=2,
    ),
    # -------------------------------------------------------------------------
    # Safety and debris (Art. 55-73)
    # -------------------------------------------------------------------------
    Requirement(
        id="eu-sa-art57-launch-safety",
        jurisdiction=J,
        article_ref="Art. 57",
        title="Launch and Launch Site Safety",
        category=Category.SAFETY,
        severity=Severity.CRITICAL,
        applicability=ApplicabilityRule(operator_types=LAUNCH_OPERATORS),
        description="Safety assessment covering launch, flight corridor and range operations.",
        implementation_weeks=10,
    ),
    Requirement(
        id="eu-sa-art58-debris-plan",
        jurisdiction=J,
        article_ref="Art. 58-61",
        title="Space Debris Mitigation Plan",
        category=Category.DEBRIS_MITIGATION,
        severity=Severity.CRITICAL,
        applicability=ApplicabilityRule(
            operator_types=(OperatorType.SPACECRAFT, OperatorType.LAUNCH_VEHICLE, OperatorType.ISOS),
        ),
        description="Debris mitigation plan covering design, operations and disposal phases.",
        implementation_weeks=8,
        guidance="Align the plan with ISO 24113 and the IADC guidelines.",
    ),
    Requirement(
        id="eu-sa-art62-collision-avoidance",
        jurisdiction=J,
        article_ref="Art. 62-64",
        title="Collision Avoidance Services",
        category=Category.DEBRIS_MITIGATION,
        severity=Severity.CRITICAL,
        applicability=ApplicabilityRule(operator_types=SPACE_OBJECT_OPERATORS),
        description="Subscribe to an EU SST collision avoidance service and act on conjunction warnings.",
        implementation_weeks=4,
    ),
    Requirement(
        id="eu-sa-art65-passivation",
        jurisdiction=J,
        article_ref="Art. 65-66",
        title="Passivation at End of Life",
        category=Category.DEBRIS_MITIGATION,
        severity=Severity.MAJOR,
        applicability=ApplicabilityRule(
            operator_types=(OperatorType.SPACECRAFT, OperatorType.LAUNCH_VEHICLE, OperatorType.ISOS),
        ),
        implementation_weeks=4,
    ),
    Requirement(
        id="eu-sa-art67-disposal",
        jurisdiction=J,
        article_ref="Art. 67-70",
        title="Post-Mission Disposal",
        category=Category.DEBRIS_MITIGATION,
        severity=Severity.CRITICAL,
        applicability=ApplicabilityRule(operator_types=SPACE_OBJECT_OPERATORS),
        description="Remove spacecraft from protected orbital regions within the disposal period.",
        implementation_weeks=6,
        guidance="Demonstrate disposal reliability and reserve propellant for the manoeuvre.",
    ),
    Requirement(
        id="eu-sa-art71-constellation-coordination",
        jurisdiction=J,
        article_ref="Art. 71-72",
        title="Constellation Coordination and Trackability",
        category=Category.DEBRIS_MITIGATION,
        severity=Severity.MAJOR,
        applicability=ApplicabilityRule(
            operator_types=SPACE_OBJECT_OPERATORS,
            required_flags=("is_constellation",),
        ),
        implementation_weeks=4,
    ),
    Requirement(
        id="eu-sa-art73-supply-chain",
        jurisdiction=J,
        article_ref="Art. 73",
        title="Supply Chain Compliance",
        category=Category.SUPPLY_CHAIN,
        severity=Severity.MAJOR,
        description="Flow down safety and security requirements to component suppliers and subcontractors.",
        implementation_weeks=6,
    ),
    # -------------------------------------------------------------------------
    # Cybersecurity (Art. 74-95)
    # -------------------------------------------------------------------------
    Requirement(
        id="eu-sa-art74-cyber-framework",
        jurisdiction=J,
        article_ref="Art. 74-75",
        title="Cybersecurity Framework and NIS2 Relationship",
        category=Category.CYBERSECURITY,
        severity=Severity.CRITICAL,
        description="Baseline cyber hygiene and governance for space operators.",
        implementation_weeks=6,
    ),
    Requirement(
        id="eu-sa-art76-risk-management",
        jurisdiction=J,
        article_ref="Art. 76-78",
        title="Space-Specific Cybersecurity Risk Management",
        category=Category.CYBERSECURITY,
        severity=Severity.CRITICAL,
        description="Risk management covering space, ground and link segments.",
        implementation_weeks=8,
        guidance="Include RF interference, space weather and debris impacts in the threat model.",
    ),
    Requirement(
        id="eu-sa-art81-encryption",
        jurisdiction=J,
        article_ref="Art. 81-82",
        title="Telecommand Authentication and Link Encryption",
        category=Category.CYBERSECURITY,
        severity=Severity.CRITICAL,
        applicability=ApplicabilityRule(excluded_operator_types=(OperatorType.LAUNCH_SITE,)),
        implementation_weeks=6,
    ),
    Requirement(
        id="eu-sa-art83-incident-response",
        jurisdiction=J,
        article_ref="Art. 83-84",
        title="Cyber Incident Detection and Response",
        category=Category.CYBERSECURITY,
        severity=Severity.CRITICAL,
        implementation_weeks=6,
    ),
    Requirement(
        id="eu-sa-art85-business-continuity",
        jurisdiction=J,
        article_ref="Art. 85",
        title="Mission Continuity Planning",
        category=Category.BUSINESS_CONTINUITY,
        severity=Severity.MAJOR,
        description="Continuity plans for mission operations, ground station failover and emergency procedures.",
        implementation_weeks=4,
    ),
    Requirement(
        id="eu-sa-art88-penetration-testing",
        jurisdiction=J,
        article_ref="Art. 88",
        title="Threat-Led Penetration Testing Before Launch",
        category=Category.CYBERSECURITY,
        severity=Severity.MAJOR,
        applicability=ApplicabilityRule(size_classes=(SizeClass.MEDIUM, SizeClass.LARGE)),
        implementation_weeks=4,
    ),
    Requirement(
        id="eu-sa-art89-incident-reporting",
        jurisdiction=J,
        article_ref="Art. 89-92",
        title="Cyber Incident Reporting (12-hour Early Warning)",
        category=Category.INCIDENT_REPORTING,
        severity=Severity.CRITICAL,
        description="Early warning within 12 hours, incident notification and a final report.",
        implementation_weeks=3,
    ),
    # -------------------------------------------------------------------------
    # Environmental footprint (Art. 96-100)
    # -------------------------------------------------------------------------
    Requirement(
        id="eu-sa-art96-environmental-footprint",
        jurisdiction=J,
        article_ref="Art. 96-98",
        title="Environmental Footprint Declaration",
        category=Category.ENVIRONMENTAL,
        severity=Severity.MAJOR,
        applicability=ApplicabilityRule(
            operator_types=(OperatorType.SPACECRAFT, OperatorType.LAUNCH_VEHICLE),
        ),
        implementation_weeks=6,
        guidance="Compute the footprint with the Union life-cycle assessment methodology.",
    ),
    Requirement(
        id="eu-sa-art99-supplier-lca-data",
        jurisdiction=J,
        article_ref="Art. 99-100",
        title="Supplier Life-Cycle Data Collection",
        category=Category.ENVIRONMENTAL,
        mandatory=False,
        severity=Severity.MINOR,
        applicability=ApplicabilityRule(
            operator_types=(OperatorType.SPACECRAFT, OperatorType.LAUNCH_VEHICLE),
        ),
        implementation_weeks=3,
    ),
)
