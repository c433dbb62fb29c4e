"""initial_marketplace_schema

Creates users, the skill catalog, seeker and employer profiles, jobs and
applications.

Uniqueness rules live here as constraints so concurrent duplicates fail at
commit: one email per user, one profile per user, one application per
(job, seeker) pair, one row per skill within a profile or job. Every child
foreign key cascades on delete.

Revision ID: 3f2a9c1d7b10
Revises:
Create Date: 2026-10-19 09:12:44.218301

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = '3f2a9c1d7b10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the marketplace schema."""

    op.create_table(
        'users',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True, nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('hashed_password', sa.String(), nullable=False),
        sa.Column('role', sa.Enum('JOB_SEEKER', 'JOB_PROVIDER', name='userrole'), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_users_id', 'users', ['id'])
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'skills',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True, nullable=False),
        sa.Column('skill_name', sa.String(), nullable=False),
        sa.Column('requires_certificate', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_skills_id', 'skills', ['id'])
    op.create_index('ix_skills_skill_name', 'skills', ['skill_name'], unique=True)

    op.create_table(
        'seeker_profiles',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True, nullable=False),
        sa.Column('user_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('address', sa.String(), nullable=True),
        sa.Column('phone', sa.String(), nullable=True),
        sa.Column('education', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
    )
    op.create_index('ix_seeker_profiles_id', 'seeker_profiles', ['id'])
    op.create_index('ix_seeker_profiles_user_id', 'seeker_profiles', ['user_id'], unique=True)

    op.create_table(
        'profile_skills',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True, nullable=False),
        sa.Column('seeker_profile_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('skill_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('certificate_url', sa.String(), nullable=True),
        sa.Column('position', sa.Integer(), nullable=False, server_default='0'),
        sa.ForeignKeyConstraint(['seeker_profile_id'], ['seeker_profiles.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['skill_id'], ['skills.id'], ondelete='CASCADE'),
        sa.UniqueConstraint('seeker_profile_id', 'skill_id', name='uq_profile_skill'),
    )
    op.create_index('ix_profile_skills_seeker_profile_id', 'profile_skills', ['seeker_profile_id'])
    op.create_index('ix_profile_skills_skill_id', 'profile_skills', ['skill_id'])

    op.create_table(
        'employment_entries',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True, nullable=False),
        sa.Column('seeker_profile_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('company_name', sa.String(), nullable=False),
        sa.Column('duration', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('position', sa.Integer(), nullable=False, server_default='0'),
        sa.ForeignKeyConstraint(['seeker_profile_id'], ['seeker_profiles.id'], ondelete='CASCADE'),
    )
    op.create_index('ix_employment_entries_seeker_profile_id', 'employment_entries', ['seeker_profile_id'])

    op.create_table(
        'seeker_references',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True, nullable=False),
        sa.Column('seeker_profile_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('contact', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('position', sa.Integer(), nullable=False, server_default='0'),
        sa.ForeignKeyConstraint(['seeker_profile_id'], ['seeker_profiles.id'], ondelete='CASCADE'),
    )
    op.create_index('ix_seeker_references_seeker_profile_id', 'seeker_references', ['seeker_profile_id'])

    op.create_table(
        'employer_profiles',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True, nullable=False),
        sa.Column('user_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('company_name', sa.String(), nullable=False),
        sa.Column('company_description', sa.Text(), nullable=True),
        sa.Column('company_website', sa.String(), nullable=True),
        sa.Column('contact_info', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
    )
    op.create_index('ix_employer_profiles_id', 'employer_profiles', ['id'])
    op.create_index('ix_employer_profiles_user_id', 'employer_profiles', ['user_id'], unique=True)

    op.create_table(
        'jobs',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True, nullable=False),
        sa.Column('employer_profile_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('pay', sa.Numeric(12, 2), nullable=False),
        sa.Column('employment_type', sa.Enum('PER_DAY', 'PER_PROJECT', name='employmenttype'), nullable=False),
        sa.Column('location', sa.String(), nullable=False),
        sa.Column('duration', sa.String(), nullable=True),
        sa.Column('status', sa.Enum('OPEN', 'CLOSED', name='jobstatus'), nullable=False, server_default='OPEN'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.ForeignKeyConstraint(['employer_profile_id'], ['employer_profiles.id'], ondelete='CASCADE'),
    )
    op.create_index('ix_jobs_id', 'jobs', ['id'])
    op.create_index('ix_jobs_employer_profile_id', 'jobs', ['employer_profile_id'])
    op.create_index('ix_jobs_title', 'jobs', ['title'])
    op.create_index('ix_jobs_pay', 'jobs', ['pay'])
    op.create_index('ix_jobs_employment_type', 'jobs', ['employment_type'])
    op.create_index('ix_jobs_location', 'jobs', ['location'])
    op.create_index('ix_jobs_status', 'jobs', ['status'])
    op.create_index('ix_jobs_created_at', 'jobs', ['created_at'])

    op.create_table(
        'job_skills',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True, nullable=False),
        sa.Column('job_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('skill_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.ForeignKeyConstraint(['job_id'], ['jobs.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['skill_id'], ['skills.id'], ondelete='CASCADE'),
        sa.UniqueConstraint('job_id', 'skill_id', name='uq_job_skill'),
    )
    op.create_index('ix_job_skills_job_id', 'job_skills', ['job_id'])
    op.create_index('ix_job_skills_skill_id', 'job_skills', ['skill_id'])

    op.create_table(
        'applications',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True, nullable=False),
        sa.Column('job_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('seeker_profile_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('applied_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(['job_id'], ['jobs.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['seeker_profile_id'], ['seeker_profiles.id'], ondelete='CASCADE'),
        sa.UniqueConstraint('job_id', 'seeker_profile_id', name='uq_application_job_seeker'),
    )
    op.create_index('ix_applications_id', 'applications', ['id'])
    op.create_index('ix_applications_job_id', 'applications', ['job_id'])
    op.create_index('ix_applications_seeker_profile_id', 'applications', ['seeker_profile_id'])


def downgrade() -> None:
    """Drop the marketplace schema."""
    op.drop_table('applications')
    op.drop_table('job_skills')
    op.drop_table('jobs')
    op.drop_table('employer_profiles')
    op.drop_table('seeker_references')
    op.drop_table('employment_entries')
    op.drop_table('profile_skills')
    op.drop_table('seeker_profiles')
    op.drop_table('skills')
    op.drop_table('users')

    sa.Enum(name='jobstatus').drop(op.get_bind(), checkfirst=True)
    sa.Enum(name='employmenttype').drop(op.get_bind(), checkfirst=True)
    sa.Enum(name='userrole').drop(op.get_bind(), checkfirst=True)
