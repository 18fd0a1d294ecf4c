"""
Migration: Create compliance assessment tables.

Creates 2 tables:
1. assessments - operator profile, selected jurisdictions and cached scores
2. requirement_statuses - one row per (assessment, requirement)

Key constraints:
- UNIQUE(assessment_id, requirement_id) on requirement_statuses
- Status rows are removed with their assessment (ON DELETE CASCADE)
- catalog_version records which catalog the cached scores came from
"""
from sqlalchemy import create_engine, text
import os

# Use same DB URL pattern as main app
DATABASE_URL = os.getenv(
    "DATABASE_URL",
    f"postgresql://{os.getenv('USER', 'postgres')}@localhost:5432/caelex"
)


def table_exists(conn, table_name: str) -> bool:
    """Check if a table exists in the database."""
    result = conn.execute(text("""
        SELECT EXISTS (
            SELECT FROM information_schema.tables
            WHERE table_name = :table_name
        )
    """), {"table_name": table_name})
    return result.fetchone()[0]


def run_migration():
    """Create assessment and requirement status tables."""
    engine = create_engine(DATABASE_URL)

    with engine.connect() as conn:
        # =================================================================
        # TABLE 1: assessments
        # =================================================================
        if table_exists(conn, "assessments"):
            print("assessments table already exists")
        else:
            conn.execute(text("""
                CREATE TABLE assessments (
                    id VARCHAR(36) PRIMARY KEY,
                    organization_id VARCHAR(36),
                    name VARCHAR(255) NOT NULL,
                    jurisdictions JSON NOT NULL,
                    profile_data JSON NOT NULL,
                    overall_score INTEGER,
                    mandatory_score INTEGER,
                    category_scores JSON,
                    risk_level VARCHAR(20),
                    gap_count INTEGER,
                    catalog_version VARCHAR(20),
                    scored_at TIMESTAMP,
                    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                )
            """))
            conn.execute(text("""
                CREATE INDEX idx_assessments_org ON assessments(organization_id)
            """))
            print("Created assessments table")

        # =================================================================
        # TABLE 2: requirement_statuses
        # =================================================================
        if table_exists(conn, "requirement_statuses"):
            print("requirement_statuses table already exists")
        else:
            conn.execute(text("""
                CREATE TABLE requirement_statuses (
                    id VARCHAR(36) PRIMARY KEY,
                    assessment_id VARCHAR(36) NOT NULL REFERENCES assessments(id) ON DELETE CASCADE,
                    requirement_id VARCHAR(100) NOT NULL,
                    status VARCHAR(20) NOT NULL DEFAULT 'NOT_ASSESSED',
                    notes TEXT,
                    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                    CONSTRAINT uq_assessment_requirement UNIQUE (assessment_id, requirement_id)
                )
            """))
            conn.execute(text("""
                CREATE INDEX idx_requirement_statuses_assessment ON requirement_statuses(assessment_id)
            """))
            print("Created requirement_statuses table")

        conn.commit()
        print("\nAssessment tables migration completed successfully!")


if __name__ == "__main__":
    run_migration()
