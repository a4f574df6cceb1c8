"""
Initial casebook schema.

Tables: users, victims, suspects, cases, case_suspects, evidence,
forensic_actions, activity_logs.
"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision = 'casebook_initial_20241001'
down_revision = None
branch_labels = None
depends_on = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()')),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()')),
    ]


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('display_name', sa.String(), nullable=True),
        sa.Column('role', sa.String(20), nullable=False, server_default='viewer'),
        *_timestamps(),
        sa.CheckConstraint("role in ('admin','investigator','viewer')", name='ck_users_role'),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'victims',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('contact', sa.String(255), nullable=True),
        sa.Column('location', sa.String(255), nullable=True),
        sa.Column('address', sa.Text(), nullable=True),
        sa.Column('report_date', sa.Date(), nullable=False, server_default=sa.text('CURRENT_DATE')),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('created_by', postgresql.UUID(as_uuid=True), sa.ForeignKey('users.id'), nullable=True),
        *_timestamps(),
    )
    op.create_index('idx_victims_created_at', 'victims', ['created_at'])
    op.create_index('idx_victims_name', 'victims', ['name'])

    op.create_table(
        'suspects',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('contact', sa.String(255), nullable=True),
        sa.Column('address', sa.Text(), nullable=True),
        sa.Column('identification_number', sa.String(100), nullable=True),
        sa.Column('status', sa.String(30), nullable=False, server_default='suspect'),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_by', postgresql.UUID(as_uuid=True), sa.ForeignKey('users.id'), nullable=True),
        *_timestamps(),
        sa.CheckConstraint(
            "status in ('charged','cleared','person_of_interest','suspect')",
            name='ck_suspects_status',
        ),
    )
    op.create_index('idx_suspects_created_at', 'suspects', ['created_at'])
    op.create_index('idx_suspects_name', 'suspects', ['name'])

    op.create_table(
        'cases',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('case_number', sa.String(64), nullable=False, unique=True),
        sa.Column('case_type', sa.String(40), nullable=False),
        sa.Column('status', sa.String(20), nullable=False, server_default='open'),
        sa.Column('incident_date', sa.Date(), nullable=False),
        sa.Column('summary', sa.Text(), nullable=False),
        sa.Column('victim_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('victims.id', ondelete='SET NULL'), nullable=True),
        sa.Column('assigned_to', postgresql.UUID(as_uuid=True), sa.ForeignKey('users.id'), nullable=True),
        sa.Column('created_by', postgresql.UUID(as_uuid=True), sa.ForeignKey('users.id'), nullable=True),
        *_timestamps(),
        sa.CheckConstraint(
            "status in ('archived','closed','in_progress','open')",
            name='ck_cases_status',
        ),
        sa.CheckConstraint(
            "case_type in ('cybercrime','data_breach','fraud','intellectual_property','malware','other')",
            name='ck_cases_case_type',
        ),
    )
    op.create_index('idx_cases_status', 'cases', ['status'])
    op.create_index('idx_cases_case_type', 'cases', ['case_type'])
    op.create_index('idx_cases_victim_id', 'cases', ['victim_id'])
    op.create_index('idx_cases_created_at', 'cases', ['created_at'])

    op.create_table(
        'case_suspects',
        sa.Column('case_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('cases.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('suspect_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('suspects.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('involvement_level', sa.String(20), nullable=False, server_default='unknown'),
        sa.Column('relationship_to_case', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()')),
        sa.CheckConstraint(
            "involvement_level in ('primary','secondary','unknown','witness')",
            name='ck_case_suspects_involvement_level',
        ),
    )
    op.create_index('idx_case_suspects_suspect_id', 'case_suspects', ['suspect_id'])

    op.create_table(
        'evidence',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('case_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('cases.id', ondelete='CASCADE'), nullable=False),
        sa.Column('evidence_number', sa.String(80), nullable=False, unique=True),
        sa.Column('evidence_type', sa.String(30), nullable=False),
        sa.Column('file_name', sa.String(512), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('file_size', sa.BigInteger(), nullable=True),
        sa.Column('file_hash_sha256', sa.String(64), nullable=True),
        sa.Column('storage_location', sa.Text(), nullable=True),
        sa.Column('collected_by', postgresql.UUID(as_uuid=True), sa.ForeignKey('users.id'), nullable=True),
        sa.Column('collection_date', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('now()')),
        *_timestamps(),
        sa.CheckConstraint(
            "evidence_type in ('document','file','image','log','memory_dump','network_capture','other','video')",
            name='ck_evidence_evidence_type',
        ),
        sa.CheckConstraint('file_size IS NULL OR file_size >= 0', name='ck_evidence_file_size'),
    )
    op.create_index('idx_evidence_case_id', 'evidence', ['case_id'])
    op.create_index('idx_evidence_created_at', 'evidence', ['created_at'])

    op.create_table(
        'forensic_actions',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('case_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('cases.id', ondelete='CASCADE'), nullable=False),
        sa.Column('template_id', sa.String(20), nullable=True),
        sa.Column('action_type', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('status', sa.String(20), nullable=False, server_default='pending'),
        sa.Column('is_completed', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('completed_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('performed_by', postgresql.UUID(as_uuid=True), sa.ForeignKey('users.id'), nullable=True),
        *_timestamps(),
        sa.CheckConstraint("status in ('completed','pending')", name='ck_forensic_actions_status'),
    )
    op.create_index('idx_forensic_actions_case_id', 'forensic_actions', ['case_id'])
    op.create_index('idx_forensic_actions_created_at', 'forensic_actions', ['created_at'])

    op.create_table(
        'activity_logs',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('user_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('users.id', ondelete='SET NULL'), nullable=True),
        sa.Column('action', sa.Text(), nullable=False),
        sa.Column('entity_type', sa.Text(), nullable=False),
        sa.Column('entity_id', postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column('details', postgresql.JSONB(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('now()')),
    )
    op.create_index('ix_activity_logs_user_id_created_at', 'activity_logs', ['user_id', 'created_at'])
    op.create_index('ix_activity_logs_entity', 'activity_logs', ['entity_type', 'entity_id'])
    op.create_index('ix_activity_logs_action', 'activity_logs', ['action'])


def downgrade() -> None:
    for table in (
        'activity_logs',
        'forensic_actions',
        'evidence',
        'case_suspects',
        'cases',
        'suspects',
        'victims',
        'users',
    ):
        op.drop_table(table)
