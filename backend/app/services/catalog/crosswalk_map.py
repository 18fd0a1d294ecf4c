"""
Cross-Framework Mapping Tables

Static associations between requirement ids in two catalogs. Each row
states how much implementation work the two requirements share. Rows are
stored with the non-EU framework as source; lookups accept either order.
"""

from typing import Dict, Tuple

from ...models.domain import CrosswalkEntry, EffortType, Jurisdiction

SINGLE = EffortType.SINGLE_IMPLEMENTATION
PARTIAL = EffortType.PARTIAL_OVERLAP
SEPARATE = EffortType.SEPARATE_EFFORT


NIS2_EU_SPACE_ACT_MAPPING = (
    CrosswalkEntry("nis2-001", "eu-sa-art74-cyber-framework", SINGLE,
                   "Security policy requirements are met by the EU Space Act cyber framework."),
    CrosswalkEntry("nis2-002", "eu-sa-art76-risk-management", SINGLE,
                   "EU Space Act risk management extends NIS2 risk analysis with space threat categories."),
    CrosswalkEntry("nis2-006", "eu-sa-art83-incident-response", SINGLE,
                   "Incident detection duties coincide for space operators."),
    CrosswalkEntry("nis2-007", "eu-sa-art83-incident-response", PARTIAL),
    CrosswalkEntry("nis2-011", "eu-sa-art85-business-continuity", SINGLE,
                   "One continuity plan covers both frameworks."),
    CrosswalkEntry("nis2-012", "eu-sa-art85-business-continuity", PARTIAL),
    CrosswalkEntry("nis2-015", "eu-sa-art73-supply-chain", PARTIAL,
                   "EU Space Act supply chain duties add safety flow-down to NIS2 supplier security."),
    CrosswalkEntry("nis2-026", "eu-sa-art88-penetration-testing", SINGLE),
    CrosswalkEntry("nis2-025", "eu-sa-art88-penetration-testing", PARTIAL,
                   "Pre-launch TLPT is stricter than the NIS2 effectiveness assessment."),
    CrosswalkEntry("nis2-028", "eu-sa-art74-cyber-framework", PARTIAL),
    CrosswalkEntry("nis2-030", "eu-sa-art81-encryption", SINGLE,
                   "Telecommand authentication and link encryption satisfy NIS2 cryptography."),
    CrosswalkEntry("nis2-042", "eu-sa-art89-incident-reporting", PARTIAL,
                   "EU Space Act requires a 12-hour early warning instead of 24 hours."),
    CrosswalkEntry("nis2-043", "eu-sa-art89-incident-reporting", PARTIAL),
    CrosswalkEntry("nis2-045", "eu-sa-art24-registration", SEPARATE),
    CrosswalkEntry("nis2-047", "eu-sa-art33-supervision", SEPARATE,
                   "Supervision is carried out by different authorities."),
)

UK_EU_SPACE_ACT_MAPPING = (
    CrosswalkEntry("uk-sia-s3-licence", "eu-sa-art6-authorization", PARTIAL,
                   "Both require prior licensing; dossiers differ in format and authority."),
    CrosswalkEntry("uk-sia-s7-orbital", "eu-sa-art7-application-dossier", PARTIAL),
    CrosswalkEntry("uk-sia-s17-safety-regs", "eu-sa-art57-launch-safety", PARTIAL),
    CrosswalkEntry("uk-sia-s11-environment", "eu-sa-art96-environmental-footprint", SEPARATE,
                   "Assessment of Environmental Effects and the EU footprint use different methods."),
    CrosswalkEntry("uk-sia-s38-insurance", "eu-sa-art28-insurance", SINGLE,
                   "A single policy can be structured to meet both minimum cover requirements."),
    CrosswalkEntry("uk-sia-s34-liability", "eu-sa-art28-insurance", PARTIAL),
    CrosswalkEntry("uk-sir-reg31-debris-mitigation", "eu-sa-art58-debris-plan", SINGLE),
    CrosswalkEntry("uk-sir-reg32-eol-disposal", "eu-sa-art67-disposal", PARTIAL),
    CrosswalkEntry("uk-sia-s61-registration", "eu-sa-art24-registration", SEPARATE),
    CrosswalkEntry("uk-sir-reg46-cyber", "eu-sa-art76-risk-management", PARTIAL),
)

US_EU_SPACE_ACT_MAPPING = (
    CrosswalkEntry("fcc-part25-license", "eu-sa-art6-authorization", SEPARATE),
    CrosswalkEntry("faa-launch-license", "eu-sa-art6-authorization", SEPARATE),
    CrosswalkEntry("fcc-debris-mitigation-plan", "eu-sa-art58-debris-plan", SINGLE,
                   "FCC debris showing and EU debris plan draw on the same analysis."),
    CrosswalkEntry("fcc-debris-collision-avoidance", "eu-sa-art62-collision-avoidance", SINGLE),
    CrosswalkEntry("fcc-debris-passivation", "eu-sa-art65-passivation", SINGLE),
    CrosswalkEntry("fcc-debris-5year-rule", "eu-sa-art67-disposal", PARTIAL,
                   "The FCC 5-year rule is stricter than the EU disposal period."),
    CrosswalkEntry("fcc-debris-trackability", "eu-sa-art71-constellation-coordination", PARTIAL),
    CrosswalkEntry("faa-safety-analysis", "eu-sa-art57-launch-safety", PARTIAL),
    CrosswalkEntry("faa-financial-responsibility", "eu-sa-art28-insurance", PARTIAL),
    CrosswalkEntry("faa-environmental", "eu-sa-art96-environmental-footprint", SEPARATE),
)


CROSSWALK_TABLES: Dict[Tuple[Jurisdiction, Jurisdiction], Tuple[CrosswalkEntry, ...]] = {
    (Jurisdiction.NIS2, Jurisdiction.EU_SPACE_ACT): NIS2_EU_SPACE_ACT_MAPPING,
    (Jurisdiction.UK_SIA, Jurisdiction.EU_SPACE_ACT): UK_EU_SPACE_ACT_MAPPING,
    (Jurisdiction.US, Jurisdiction.EU_SPACE_ACT): US_EU_SPACE_ACT_MAPPING,
}


def get_mapping(a: Jurisdiction, b: Jurisdiction) -> Tuple[CrosswalkEntry, ...]:
    """Return the mapping table for a jurisdiction pair, in either order."""
    table = CROSSWALK_TABLES.get((a, b)) or CROSSWALK_TABLES.get((b, a))
    if table is None:
        raise ValueError(f"No crosswalk mapping between {a.value} and {b.value}")
    return table
