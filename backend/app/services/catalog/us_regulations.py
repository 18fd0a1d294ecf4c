"""
US Federal Space Regulations - Requirement Catalog

FCC (47 CFR Part 25, Part 2), FAA/AST (14 CFR Parts 420, 440, 450) and
NOAA commercial remote sensing (15 CFR Part 960). Every entry requires a
US nexus (US licensee, US market access or launch from US territory).
"""

from ...models.domain import (
    ActivityType,
    ApplicabilityRule,
    Category,
    Jurisdiction,
    OperatorType,
    OrbitRegime,
    Requirement,
    Severity,
)

J = Jurisdiction.US

US_NEXUS = ("has_us_nexus",)
SPACECRAFT = (OperatorType.SPACECRAFT, OperatorType.ISOS)
NGSO = (OrbitRegime.LEO, OrbitRegime.MEO, OrbitRegime.HEO)


US_REQUIREMENTS = (
    # -------------------------------------------------------------------------
    # FCC - licensing
    # -------------------------------------------------------------------------
    Requirement(
        id="fcc-part25-license",
        jurisdiction=J,
        article_ref="47 CFR § 25.102",
        title="Space Station Authorization Required",
        category=Category.AUTHORIZATION,
        severity=Severity.CRITICAL,
        applicability=ApplicabilityRule(operator_types=SPACECRAFT, required_flags=US_NEXUS),
        implementation_weeks=26,
        eu_space_act_refs=("Art. 6",),
    ),
    Requirement(
        id="fcc-part25-ngso-processing",
        jurisdiction=J,
        article_ref="47 CFR § 25.157",
        title="NGSO-like Satellite Processing Rules",
        category=Category.AUTHORIZATION,
        severity=Severity.CRITICAL,
        applicability=ApplicabilityRule(
            operator_types=SPACECRAFT,
            orbit_types=NGSO,
            required_flags=US_NEXUS,
        ),
        implementation_weeks=8,
    ),
    Requirement(
        id="fcc-part25-bond-requirement",
        jurisdiction=J,
        article_ref="47 CFR § 25.165",
        title="Performance Bond Requirement (NGSO)",
        category=Category.INSURANCE_LIABILITY,
        severity=Severity.CRITICAL,
        applicability=ApplicabilityRule(
            operator_types=SPACECRAFT,
            orbit_types=NGSO,
            required_flags=US_NEXUS,
        ),
        implementation_weeks=4,
    ),
    Requirement(
        id="fcc-part25-milestone",
        jurisdiction=J,
        article_ref="47 CFR § 25.164",
        title="Deployment Milestones",
        category=Category.AUTHORIZATION,
        severity=Severity.CRITICAL,
        applicability=ApplicabilityRule(
            operator_types=SPACECRAFT,
            required_flags=("has_us_nexus", "is_constellation"),
        ),
        implementation_weeks=2,
    ),
    # -------------------------------------------------------------------------
    # FCC - orbital debris (47 CFR § 25.114(d)(14))
    # -------------------------------------------------------------------------
    Requirement(
        id="fcc-debris-mitigation-plan",
        jurisdiction=J,
        article_ref="47 CFR § 25.114(d)(14)",
        title="Orbital Debris Mitigation Plan",
        category=Category.DEBRIS_MITIGATION,
        severity=Severity.CRITICAL,
        applicability=ApplicabilityRule(operator_types=SPACECRAFT, required_flags=US_NEXUS),
        implementation_weeks=6,
        eu_space_act_refs=("Art. 58-61",),
    ),
    Requirement(
        id="fcc-debris-collision-avoidance",
        jurisdiction=J,
        article_ref="47 CFR § 25.114(d)(14)(i)",
        title="Collision Avoidance Capability",
        category=Category.DEBRIS_MITIGATION,
        severity=Severity.CRITICAL,
        applicability=ApplicabilityRule(operator_types=SPACECRAFT, required_flags=US_NEXUS),
        implementation_weeks=4,
        eu_space_act_refs=("Art. 62-64",),
    ),
    Requirement(
        id="fcc-debris-passivation",
        jurisdiction=J,
        article_ref="47 CFR § 25.114(d)(14)(ii)",
        title="End-of-Life Passivation",
        category=Category.DEBRIS_MITIGATION,
        severity=Severity.MAJOR,
        applicability=ApplicabilityRule(operator_types=SPACECRAFT, required_flags=US_NEXUS),
        implementation_weeks=3,
        eu_space_act_refs=("Art. 65-66",),
    ),
    Requirement(
        id="fcc-debris-5year-rule",
        jurisdiction=J,
        article_ref="47 CFR § 25.114(d)(14)(iv)",
        title="5-Year Post-Mission Disposal Rule (LEO)",
        category=Category.DEBRIS_MITIGATION,
        severity=Severity.CRITICAL,
        applicability=ApplicabilityRule(
            operator_types=SPACECRAFT,
            orbit_types=(OrbitRegime.LEO,),
            required_flags=US_NEXUS,
        ),
        description="LEO spacecraft must be disposed of no more than 5 years after mission end.",
        implementation_weeks=4,
        eu_space_act_refs=("Art. 67-70",),
    ),
    Requirement(
        id="fcc-debris-casualty-risk",
        jurisdiction=J,
        article_ref="47 CFR § 25.114(d)(14)(v)",
        title="Reentry Casualty Risk Assessment",
        category=Category.SAFETY,
        severity=Severity.CRITICAL,
        applicability=ApplicabilityRule(operator_types=SPACECRAFT, required_flags=US_NEXUS),
        description="Casualty risk from uncontrolled reentry must not exceed 1:10,000.",
        implementation_weeks=3,
    ),
    Requirement(
        id="fcc-debris-trackability",
        jurisdiction=J,
        article_ref="47 CFR § 25.114(d)(14)(vi)",
        title="Trackability Requirements",
        category=Category.DEBRIS_MITIGATION,
        severity=Severity.MAJOR,
        applicability=ApplicabilityRule(
            operator_types=SPACECRAFT,
            mass_up_to_kg=10,
            required_flags=US_NEXUS,
        ),
        description="Small spacecraft must carry tracking aids or demonstrate ground trackability.",
        implementation_weeks=2,
        eu_space_act_refs=("Art. 71-72",),
    ),
    # -------------------------------------------------------------------------
    # FCC - spectrum
    # -------------------------------------------------------------------------
    Requirement(
        id="fcc-spectrum-allocation",
        jurisdiction=J,
        article_ref="47 CFR Part 2",
        title="Spectrum Allocation Compliance",
        category=Category.SPECTRUM,
        severity=Severity.CRITICAL,
        applicability=ApplicabilityRule(operator_types=SPACECRAFT, required_flags=US_NEXUS),
        implementation_weeks=6,
    ),
    Requirement(
        id="fcc-spectrum-earth-stations",
        jurisdiction=J,
        article_ref="47 CFR § 25.115",
        title="Earth Station Authorization",
        category=Category.SPECTRUM,
        severity=Severity.MAJOR,
        applicability=ApplicabilityRule(
            activity_types=(
                ActivityType.GROUND_INFRASTRUCTURE,
                ActivityType.SATELLITE_COMMUNICATIONS,
            ),
            required_flags=US_NEXUS,
        ),
        implementation_weeks=8,
    ),
    # -------------------------------------------------------------------------
    # FAA - commercial space transportation
    # -------------------------------------------------------------------------
    Requirement(
        id="faa-launch-license",
        jurisdiction=J,
        article_ref="14 CFR § 450.3",
        title="Launch License Requirement",
        category=Category.AUTHORIZATION,
        severity=Severity.CRITICAL,
        applicability=ApplicabilityRule(
            operator_types=(OperatorType.LAUNCH_VEHICLE,),
            required_flags=US_NEXUS,
        ),
        implementation_weeks=40,
        eu_space_act_refs=("Art. 6",),
    ),
    Requirement(
        id="faa-reentry-license",
        jurisdiction=J,
        article_ref="14 CFR § 450.3",
        title="Reentry License Requirement",
        category=Category.AUTHORIZATION,
        severity=Severity.CRITICAL,
        applicability=ApplicabilityRule(
            activity_types=(ActivityType.REENTRY,),
            required_flags=US_NEXUS,
        ),
        implementation_weeks=30,
    ),
    Requirement(
        id="faa-launch-site-license",
        jurisdiction=J,
        article_ref="14 CFR Part 420",
        title="Launch Site Operator License",
        category=Category.AUTHORIZATION,
        severity=Severity.CRITICAL,
        applicability=ApplicabilityRule(
            operator_types=(OperatorType.LAUNCH_SITE,),
            required_flags=US_NEXUS,
        ),
        implementation_weeks=40,
    ),
    Requirement(
        id="faa-safety-analysis",
        jurisdiction=J,
        article_ref="14 CFR § 450.101-450.187",
        title="Flight Safety Analysis",
        category=Category.SAFETY,
        severity=Severity.CRITICAL,
        applicability=ApplicabilityRule(
            operator_types=(OperatorType.LAUNCH_VEHICLE,),
            required_flags=US_NEXUS,
        ),
        implementation_weeks=20,
        eu_space_act_refs=("Art. 57",),
    ),
    Requirement(
        id="faa-fts",
        jurisdiction=J,
        article_ref="14 CFR § 450.145",
        title="Flight Safety System (Flight Termination)",
        category=Category.SAFETY,
        severity=Severity.CRITICAL,
        applicability=ApplicabilityRule(
            operator_types=(OperatorType.LAUNCH_VEHICLE,),
            required_flags=US_NEXUS,
        ),
        implementation_weeks=16,
    ),
    Requirement(
        id="faa-financial-responsibility",
        jurisdiction=J,
        article_ref="14 CFR Part 440",
        title="Financial Responsibility Requirements",
        category=Category.INSURANCE_LIABILITY,
        severity=Severity.CRITICAL,
        applicability=ApplicabilityRule(
            operator_types=(OperatorType.LAUNCH_VEHICLE, OperatorType.LAUNCH_SITE),
            required_flags=US_NEXUS,
        ),
        implementation_weeks=6,
        eu_space_act_refs=("Art. 28-30",),
    ),
    Requirement(
        id="faa-environmental",
        jurisdiction=J,
        article_ref="14 CFR § 450.47",
        title="Environmental Review Requirements",
        category=Category.ENVIRONMENTAL,
        severity=Severity.MAJOR,
        applicability=ApplicabilityRule(
            operator_types=(OperatorType.LAUNCH_VEHICLE, OperatorType.LAUNCH_SITE),
            required_flags=US_NEXUS,
        ),
        implementation_weeks=24,
        eu_space_act_refs=("Art. 96-98",),
    ),
    # -------------------------------------------------------------------------
    # NOAA - commercial remote sensing
    # -------------------------------------------------------------------------
    Requirement(
        id="noaa-remote-sensing-license",
        jurisdiction=J,
        article_ref="15 CFR Part 960",
        title="Private Remote Sensing Space System License",
        category=Category.REMOTE_SENSING,
        severity=Severity.CRITICAL,
        applicability=ApplicabilityRule(
            required_flags=("has_us_nexus", "provides_remote_sensing"),
        ),
        implementation_weeks=12,
    ),
    Requirement(
        id="noaa-temporary-conditions",
        jurisdiction=J,
        article_ref="15 CFR § 960.8",
        title="Temporary Operating Conditions (National Security)",
        category=Category.NATIONAL_SECURITY,
        severity=Severity.MAJOR,
        applicability=ApplicabilityRule(
            required_flags=("has_us_nexus", "provides_remote_sensing"),
        ),
        implementation_weeks=3,
    ),
)
