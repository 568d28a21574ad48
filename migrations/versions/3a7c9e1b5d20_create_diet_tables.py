"""create users, snack and relusersnack tables

Revision ID: 3a7c9e1b5d20
Revises: 
Create Date: 2026-10-19 10:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3a7c9e1b5d20'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    conn = op.get_bind()
    insp = sa.inspect(conn)

    if not insp.has_table('users'):
        op.create_table(
            'users',
            sa.Column('id', sa.String(length=36), primary_key=True),
            sa.Column('session_id', sa.String(length=255), nullable=True),
            sa.Column('name', sa.Text(), nullable=False),
            sa.Column('age', sa.Float(), nullable=False),
            sa.Column('height', sa.Float(), nullable=False),
            sa.Column('weight', sa.Float(), nullable=False),
        )
        op.create_index('ix_users_session_id', 'users', ['session_id'])

    if not insp.has_table('snack'):
        op.create_table(
            'snack',
            sa.Column('id', sa.String(length=36), primary_key=True),
            sa.Column('session_id', sa.String(length=255), nullable=True),
            sa.Column('title', sa.Text(), nullable=False),
            sa.Column('description', sa.Text(), nullable=False),
            sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=True),
            sa.Column('date', sa.Date(), nullable=False),
            sa.Column('time', sa.Time(), nullable=False),
            sa.Column('at_diet', sa.Boolean(), nullable=False),
        )
        op.create_index('ix_snack_session_id', 'snack', ['session_id'])

    # The link table is the only side holding foreign keys
    if not insp.has_table('relusersnack'):
        op.create_table(
            'relusersnack',
            sa.Column('idRel', sa.String(length=36), primary_key=True),
            sa.Column('userId', sa.String(length=36), sa.ForeignKey('users.id'), nullable=False),
            sa.Column('snackId', sa.String(length=36), sa.ForeignKey('snack.id', ondelete='CASCADE'), nullable=False),
        )
        op.create_index('ix_relusersnack_userId', 'relusersnack', ['userId'])
        op.create_index('ix_relusersnack_snackId', 'relusersnack', ['snackId'])


def downgrade():
    op.drop_index('ix_relusersnack_snackId', table_name='relusersnack')
    op.drop_index('ix_relusersnack_userId', table_name='relusersnack')
    op.drop_table('relusersnack')
    op.drop_index('ix_snack_session_id', table_name='snack')
    op.drop_table('snack')
    op.drop_index('ix_users_session_id', table_name='users')
    op.drop_table('users')
