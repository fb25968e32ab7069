"""baseline_schema

Revision ID: 3c1a9e5d7b20
Revises: 
Create Date: 2026-10-18 10:12:41.508211

Accounts, reference data, companies, candidates, jobs, applications and resumes.
Tables that already exist (created by init_db) are left untouched.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy import inspect


# revision identifiers, used by Alembic.
revision: str = '3c1a9e5d7b20'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

APPLICATION_STATUSES = ('Pending', 'Reviewed', 'Shortlisted', 'Interview', 'Accepted', 'Rejected')


def table_exists(table_name: str) -> bool:
    """Check if a table exists in the database."""
    bind = op.get_bind()
    inspector = inspect(bind)
    return table_name in inspector.get_table_names()


def upgrade() -> None:
    if not table_exists('users'):
        op.create_table('users',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('email', sa.String(), nullable=False),
            sa.Column('password_hash', sa.String(), nullable=False),
            sa.Column('phone_number', sa.String(), nullable=True),
            sa.Column('role', sa.String(), nullable=False),
            sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_users_id'), 'users', ['id'], unique=False)
        op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)
        op.create_index(op.f('ix_users_role'), 'users', ['role'], unique=False)

    if not table_exists('countries'):
        op.create_table('countries',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('name', sa.String(), nullable=False),
            sa.Column('code', sa.String(length=10), nullable=False),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_countries_id'), 'countries', ['id'], unique=False)
        op.create_index(op.f('ix_countries_code'), 'countries', ['code'], unique=True)

    if not table_exists('cities'):
        op.create_table('cities',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('name', sa.String(), nullable=False),
            sa.Column('country_id', sa.Integer(), nullable=False),
            sa.ForeignKeyConstraint(['country_id'], ['countries.id'], ondelete='CASCADE'),
            sa.PrimaryKeyConstraint('id'),
            sa.UniqueConstraint('name', 'country_id', name='uq_cities_name_country')
        )
        op.create_index(op.f('ix_cities_id'), 'cities', ['id'], unique=False)
        op.create_index(op.f('ix_cities_country_id'), 'cities', ['country_id'], unique=False)

    if not table_exists('industries'):
        op.create_table('industries',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('name', sa.String(), nullable=False),
            sa.PrimaryKeyConstraint('id'),
            sa.UniqueConstraint('name')
        )
        op.create_index(op.f('ix_industries_id'), 'industries', ['id'], unique=False)

    if not table_exists('skills'):
        op.create_table('skills',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('name', sa.String(), nullable=False),
            sa.PrimaryKeyConstraint('id'),
            sa.UniqueConstraint('name')
        )
        op.create_index(op.f('ix_skills_id'), 'skills', ['id'], unique=False)

    if not table_exists('companies'):
        op.create_table('companies',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('company_name', sa.String(), nullable=False),
            sa.Column('description', sa.Text(), nullable=False),
            sa.Column('logo_url', sa.String(), nullable=True),
            sa.Column('website', sa.String(), nullable=False),
            sa.Column('location', sa.String(), nullable=False),
            sa.Column('founded_year', sa.Integer(), nullable=False),
            sa.Column('number_of_employees', sa.Integer(), nullable=False),
            sa.Column('linked_in', sa.String(), nullable=False),
            sa.Column('user_id', sa.Integer(), nullable=False),
            sa.Column('industry_id', sa.Integer(), nullable=True),
            sa.Column('country_id', sa.Integer(), nullable=True),
            sa.Column('city_id', sa.Integer(), nullable=True),
            sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
            sa.ForeignKeyConstraint(['industry_id'], ['industries.id'], ondelete='SET NULL'),
            sa.ForeignKeyConstraint(['country_id'], ['countries.id'], ),
            sa.ForeignKeyConstraint(['city_id'], ['cities.id'], ),
            sa.PrimaryKeyConstraint('id'),
            sa.UniqueConstraint('user_id')
        )
        op.create_index(op.f('ix_companies_id'), 'companies', ['id'], unique=False)
        op.create_index(op.f('ix_companies_company_name'), 'companies', ['company_name'], unique=False)

    if not table_exists('candidates'):
        op.create_table('candidates',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('first_name', sa.String(), nullable=False),
            sa.Column('last_name', sa.String(), nullable=False),
            sa.Column('resume_url', sa.String(), nullable=True),
            sa.Column('user_id', sa.Integer(), nullable=False),
            sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
            sa.PrimaryKeyConstraint('id'),
            sa.UniqueConstraint('user_id')
        )
        op.create_index(op.f('ix_candidates_id'), 'candidates', ['id'], unique=False)

    if not table_exists('candidate_skills'):
        op.create_table('candidate_skills',
            sa.Column('candidate_id', sa.Integer(), nullable=False),
            sa.Column('skill_id', sa.Integer(), nullable=False),
            sa.ForeignKeyConstraint(['candidate_id'], ['candidates.id'], ondelete='CASCADE'),
            sa.ForeignKeyConstraint(['skill_id'], ['skills.id'], ondelete='CASCADE'),
            sa.PrimaryKeyConstraint('candidate_id', 'skill_id')
        )

    if not table_exists('jobs'):
        op.create_table('jobs',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('title', sa.String(), nullable=False),
            sa.Column('description', sa.Text(), nullable=False),
            sa.Column('location', sa.String(), nullable=False),
            sa.Column('salary_from', sa.Numeric(precision=18, scale=2), nullable=False),
            sa.Column('salary_to', sa.Numeric(precision=18, scale=2), nullable=True),
            sa.Column('is_remote', sa.Boolean(), nullable=False),
            sa.Column('company_id', sa.Integer(), nullable=False),
            sa.Column('industry_id', sa.Integer(), nullable=True),
            sa.Column('country_id', sa.Integer(), nullable=True),
            sa.Column('city_id', sa.Integer(), nullable=True),
            sa.Column('posted_at', sa.DateTime(), nullable=False),
            sa.Column('expires_at', sa.DateTime(), nullable=False),
            sa.ForeignKeyConstraint(['company_id'], ['companies.id'], ondelete='CASCADE'),
            sa.ForeignKeyConstraint(['industry_id'], ['industries.id'], ondelete='SET NULL'),
            sa.ForeignKeyConstraint(['country_id'], ['countries.id'], ),
            sa.ForeignKeyConstraint(['city_id'], ['cities.id'], ),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_jobs_id'), 'jobs', ['id'], unique=False)
        op.create_index(op.f('ix_jobs_title'), 'jobs', ['title'], unique=False)
        op.create_index(op.f('ix_jobs_location'), 'jobs', ['location'], unique=False)
        op.create_index(op.f('ix_jobs_is_remote'), 'jobs', ['is_remote'], unique=False)
        op.create_index(op.f('ix_jobs_company_id'), 'jobs', ['company_id'], unique=False)
        op.create_index('idx_jobs_company_posted', 'jobs', ['company_id', 'posted_at'], unique=False)

    if not table_exists('job_skills'):
        op.create_table('job_skills',
            sa.Column('job_id', sa.Integer(), nullable=False),
            sa.Column('skill_id', sa.Integer(), nullable=False),
            sa.ForeignKeyConstraint(['job_id'], ['jobs.id'], ondelete='CASCADE'),
            sa.ForeignKeyConstraint(['skill_id'], ['skills.id'], ondelete='CASCADE'),
            sa.PrimaryKeyConstraint('job_id', 'skill_id')
        )

    if not table_exists('resumes'):
        op.create_table('resumes',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('file_name', sa.String(), nullable=False),
            sa.Column('file_url', sa.String(), nullable=False),
            sa.Column('name', sa.String(), nullable=False),
            sa.Column('candidate_id', sa.Integer(), nullable=False),
            sa.Column('created_at', sa.DateTime(), nullable=False),
            sa.Column('is_default', sa.Boolean(), nullable=False),
            sa.ForeignKeyConstraint(['candidate_id'], ['candidates.id'], ondelete='CASCADE'),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_resumes_id'), 'resumes', ['id'], unique=False)
        op.create_index(op.f('ix_resumes_candidate_id'), 'resumes', ['candidate_id'], unique=False)

    if not table_exists('job_applications'):
        op.create_table('job_applications',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('status', sa.Enum(*APPLICATION_STATUSES, name='applicationstatus', native_enum=False), nullable=False),
            sa.Column('candidate_id', sa.Integer(), nullable=False),
            sa.Column('job_id', sa.Integer(), nullable=False),
            sa.Column('resume_id', sa.Integer(), nullable=True),
            sa.Column('applied_at', sa.DateTime(), nullable=False),
            sa.Column('notes', sa.Text(), nullable=False),
            sa.ForeignKeyConstraint(['candidate_id'], ['candidates.id'], ondelete='CASCADE'),
            sa.ForeignKeyConstraint(['job_id'], ['jobs.id'], ondelete='CASCADE'),
            sa.ForeignKeyConstraint(['resume_id'], ['resumes.id'], ondelete='SET NULL'),
            sa.PrimaryKeyConstraint('id'),
            sa.UniqueConstraint('job_id', 'candidate_id', name='uq_job_applications_job_candidate')
        )
        op.create_index(op.f('ix_job_applications_id'), 'job_applications', ['id'], unique=False)
        op.create_index(op.f('ix_job_applications_candidate_id'), 'job_applications', ['candidate_id'], unique=False)
        op.create_index(op.f('ix_job_applications_job_id'), 'job_applications', ['job_id'], unique=False)


def downgrade() -> None:
    op.drop_table('job_applications')
    op.drop_table('resumes')
    op.drop_table('job_skills')
    op.drop_index('idx_jobs_company_posted', table_name='jobs')
    op.drop_table('jobs')
    op.drop_table('candidate_skills')
    op.drop_table('candidates')
    op.drop_table('companies')
    op.drop_table('skills')
    op.drop_table('industries')
    op.drop_table('cities')
    op.drop_table('countries')
    op.drop_table('users')
