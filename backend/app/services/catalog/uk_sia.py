"""
UK Space Industry Act 2018 / Space Industry Regulations 2021 - Requirement Catalog

Applies to operators with a UK nexus (licensed by the CAA). Launch and
range obligations additionally require launching from the UK; human
spaceflight obligations require that people are carried.
"""

from ...models.domain import (
    ApplicabilityRule,
    Category,
    Jurisdiction,
    OperatorType,
    Requirement,
    Severity,
)

J = Jurisdiction.UK_SIA

UK_NEXUS = ("has_uk_nexus",)
UK_LAUNCH = ("has_uk_nexus", "launches_from_uk")
ORBITAL = (OperatorType.SPACECRAFT, OperatorType.ISOS)
LAUNCH = (OperatorType.LAUNCH_VEHICLE, OperatorType.LAUNCH_SITE)


UK_SIA_REQUIREMENTS = (
    Requirement(
        id="uk-sia-s3-licence",
        jurisdiction=J,
        article_ref="SIA 2018 s.3",
        title="Operator Licence Requirement",
        category=Category.AUTHORIZATION,
        severity=Severity.CRITICAL,
        applicability=ApplicabilityRule(required_flags=UK_NEXUS),
        description="Spaceflight activities carried out in the UK require an operator licence from the CAA.",
        implementation_weeks=16,
        eu_space_act_refs=("Art. 6",),
    ),
    Requirement(
        id="uk-sia-s5-spaceport",
        jurisdiction=J,
        article_ref="SIA 2018 s.5",
        title="Spaceport Licence",
        category=Category.AUTHORIZATION,
        severity=Severity.CRITICAL,
        applicability=ApplicabilityRule(
            operator_types=(OperatorType.LAUNCH_SITE,),
            required_flags=UK_NEXUS,
        ),
        implementation_weeks=20,
    ),
    Requirement(
        id="uk-sia-s6-range",
        jurisdiction=J,
        article_ref="SIA 2018 s.6",
        title="Range Control Licence",
        category=Category.SAFETY,
        severity=Severity.MAJOR,
        applicability=ApplicabilityRule(operator_types=LAUNCH, required_flags=UK_LAUNCH),
        implementation_weeks=8,
    ),
    Requirement(
        id="uk-sia-s7-orbital",
        jurisdiction=J,
        article_ref="SIA 2018 s.7; OSA 1986",
        title="Orbital Operator Licence Conditions",
        category=Category.AUTHORIZATION,
        severity=Severity.CRITICAL,
        applicability=ApplicabilityRule(operator_types=ORBITAL, required_flags=UK_NEXUS),
        implementation_weeks=12,
        eu_space_act_refs=("Art. 7-9",),
    ),
    Requirement(
        id="uk-sia-s17-safety-regs",
        jurisdiction=J,
        article_ref="SIA 2018 s.17-19",
        title="Launch Safety Requirements",
        category=Category.SAFETY,
        severity=Severity.CRITICAL,
        applicability=ApplicabilityRule(operator_types=LAUNCH, required_flags=UK_LAUNCH),
        implementation_weeks=12,
        eu_space_act_refs=("Art. 57",),
    ),
    Requirement(
        id="uk-sia-s17-informed-consent",
        jurisdiction=J,
        article_ref="SIA 2018 s.17(3)",
        title="Informed Consent of Human Occupants",
        category=Category.SAFETY,
        severity=Severity.CRITICAL,
        applicability=ApplicabilityRule(required_flags=("has_uk_nexus", "involves_people")),
        implementation_weeks=2,
    ),
    Requirement(
        id="uk-sir-reg9-safety-case",
        jurisdiction=J,
        article_ref="SIR 2021 reg. 9",
        title="Safety Case",
        category=Category.SAFETY,
        severity=Severity.CRITICAL,
        applicability=ApplicabilityRule(operator_types=LAUNCH, required_flags=UK_LAUNCH),
        implementation_weeks=16,
    ),
    Requirement(
        id="uk-sia-s11-environment",
        jurisdiction=J,
        article_ref="SIA 2018 s.11",
        title="Assessment of Environmental Effects",
        category=Category.ENVIRONMENTAL,
        severity=Severity.MAJOR,
        applicability=ApplicabilityRule(required_flags=UK_LAUNCH),
        implementation_weeks=10,
        eu_space_act_refs=("Art. 96-98",),
    ),
    Requirement(
        id="uk-sia-s34-liability",
        jurisdiction=J,
        article_ref="SIA 2018 s.34-36",
        title="Operator Liability and Indemnity",
        category=Category.INSURANCE_LIABILITY,
        severity=Severity.CRITICAL,
        applicability=ApplicabilityRule(required_flags=UK_NEXUS),
        implementation_weeks=4,
        eu_space_act_refs=("Art. 28-30",),
    ),
    Requirement(
        id="uk-sia-s38-insurance",
        jurisdiction=J,
        article_ref="SIA 2018 s.38",
        title="Third-Party Liability Insurance",
        category=Category.INSURANCE_LIABILITY,
        severity=Severity.CRITICAL,
        applicability=ApplicabilityRule(required_flags=UK_NEXUS),
        implementation_weeks=6,
        eu_space_act_refs=("Art. 28-30", "Art. 31-32"),
    ),
    Requirement(
        id="uk-sir-reg31-debris-mitigation",
        jurisdiction=J,
        article_ref="SIR 2021 reg. 31",
        title="Orbital Debris Mitigation",
        category=Category.DEBRIS_MITIGATION,
        severity=Severity.CRITICAL,
        applicability=ApplicabilityRule(operator_types=ORBITAL, required_flags=UK_NEXUS),
        implementation_weeks=8,
        eu_space_act_refs=("Art. 58-61",),
    ),
    Requirement(
        id="uk-sir-reg32-eol-disposal",
        jurisdiction=J,
        article_ref="SIR 2021 reg. 32",
        title="End-of-Life Disposal Plan",
        category=Category.DEBRIS_MITIGATION,
        severity=Severity.CRITICAL,
        applicability=ApplicabilityRule(operator_types=ORBITAL, required_flags=UK_NEXUS),
        implementation_weeks=6,
        eu_space_act_refs=("Art. 67-70",),
    ),
    Requirement(
        id="uk-sia-s61-registration",
        jurisdiction=J,
        article_ref="SIA 2018 s.61",
        title="UK Registry of Space Objects",
        category=Category.REGISTRATION,
        severity=Severity.MINOR,
        applicability=ApplicabilityRule(operator_types=ORBITAL, required_flags=UK_NEXUS),
        implementation_weeks=1,
        eu_space_act_refs=("Art. 24",),
    ),
    Requirement(
        id="uk-sir-reg41-security",
        jurisdiction=J,
        article_ref="SIR 2021 reg. 41-45",
        title="Security Programme",
        category=Category.NATIONAL_SECURITY,
        severity=Severity.MAJOR,
        applicability=ApplicabilityRule(required_flags=UK_NEXUS),
        implementation_weeks=6,
    ),
    Requirement(
        id="uk-sir-reg46-cyber",
        jurisdiction=J,
        article_ref="SIR 2021 reg. 46",
        title="Cyber Security Strategy",
        category=Category.CYBERSECURITY,
        severity=Severity.MAJOR,
        applicability=ApplicabilityRule(required_flags=UK_NEXUS),
        implementation_weeks=6,
        eu_space_act_refs=("Art. 76-78",),
    ),
    Requirement(
        id="uk-sia-s22-monitoring",
        jurisdiction=J,
        article_ref="SIA 2018 s.22",
        title="Regulator Monitoring and Enforcement Cooperation",
        category=Category.SUPERVISION,
        mandatory=False,
        severity=Severity.MINOR,
        applicability=ApplicabilityRule(required_flags=UK_NEXUS),
        implementation_weeks=1,
    ),
)
