"""Initial migration - Create users, medications, logs, journal and cycle tables

Revision ID: 001
Revises:
Create Date: 2025-09-22 15:44:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '001'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table('users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('email', sa.String(length=120), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('first_name', sa.String(length=50), nullable=True),
        sa.Column('last_name', sa.String(length=50), nullable=True),
        sa.Column('profile_image_url', sa.String(length=500), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=True),
        sa.Column('last_login_at', sa.DateTime(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table('medications',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('brand', sa.Text(), nullable=True),
        sa.Column('strength', sa.Text(), nullable=False),
        sa.Column('form', sa.Text(), nullable=True),
        sa.Column('dosage', sa.Text(), nullable=False),
        sa.Column('frequency', sa.Text(), nullable=False),
        sa.Column('time_of_day', sa.Text(), nullable=True),
        sa.Column('purpose', sa.Text(), nullable=True),
        sa.Column('category', sa.Text(), nullable=True),
        sa.Column('bottle_size', sa.Integer(), nullable=True),
        sa.Column('purchase_date', sa.Date(), nullable=True),
        sa.Column('days_supply', sa.Integer(), nullable=True),
        sa.Column('doctor', sa.Text(), nullable=True),
        sa.Column('cost', sa.Text(), nullable=True),
        sa.Column('pharmacy', sa.Text(), nullable=True),
        sa.Column('side_effects', sa.Text(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('image_url', sa.Text(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_medications_user_id', 'medications', ['user_id'], unique=False)

    op.create_table('medication_logs',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('medication_id', sa.Integer(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('taken', sa.Boolean(), nullable=False),
        sa.Column('skipped', sa.Boolean(), nullable=False),
        sa.Column('skip_reason', sa.Text(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(['medication_id'], ['medications.id'], ),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'medication_id', 'date', name='uq_medication_logs_user_medication_date')
    )
    op.create_index('ix_medication_logs_date', 'medication_logs', ['date'], unique=False)
    op.create_index('idx_medication_logs_user_date', 'medication_logs', ['user_id', 'date'], unique=False)

    op.create_table('journal_entries',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('mood', sa.String(length=20), nullable=True),
        sa.Column('symptoms', sa.JSON(), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('cycle_day', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'date', name='uq_journal_entries_user_date')
    )

    op.create_table('cycle_tracking',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('period_start_date', sa.Date(), nullable=False),
        sa.Column('period_end_date', sa.Date(), nullable=True),
        sa.Column('cycle_length', sa.Integer(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_cycle_tracking_period_start_date', 'cycle_tracking', ['period_start_date'], unique=False)


def downgrade():
    op.drop_index('ix_cycle_tracking_period_start_date', table_name='cycle_tracking')
    op.drop_table('cycle_tracking')

    op.drop_table('journal_entries')

    op.drop_index('idx_medication_logs_user_date', table_name='medication_logs')
    op.drop_index('ix_medication_logs_date', table_name='medication_logs')
    op.drop_table('medication_logs')

    op.drop_index('ix_medications_user_id', table_name='medications')
    op.drop_table('medications')

    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
