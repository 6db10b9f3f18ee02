"""Create workspace tables

Revision ID: 0001_create_workspace_tables
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from models.base import UUID

# revision identifiers, used by Alembic.
revision: str = '0001_create_workspace_tables'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', UUID(), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('username', sa.String(length=100), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'projects',
        sa.Column('id', UUID(), nullable=False),
        sa.Column('owner_id', UUID(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('settings', sa.JSON(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['owner_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('idx_projects_owner_updated', 'projects', ['owner_id', 'updated_at'])

    op.create_table(
        'files',
        sa.Column('id', UUID(), nullable=False),
        sa.Column('project_id', UUID(), nullable=False),
        sa.Column('parent_id', UUID(), nullable=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('kind', sa.Enum('file', 'folder', name='file_kind'), nullable=False),
        sa.Column('content', sa.Text(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['project_id'], ['projects.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['parent_id'], ['files.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('project_id', 'parent_id', 'name', name='uq_files_project_parent_name'),
    )
    # Root level nodes have a NULL parent, which the constraint above never compares
    op.create_index(
        'uq_files_project_root_name',
        'files',
        ['project_id', 'name'],
        unique=True,
        sqlite_where=sa.text('parent_id IS NULL'),
        postgresql_where=sa.text('parent_id IS NULL'),
    )
    op.create_index('idx_files_project_parent', 'files', ['project_id', 'parent_id'])

    op.create_table(
        'conversations',
        sa.Column('id', UUID(), nullable=False),
        sa.Column('project_id', UUID(), nullable=False),
        sa.Column('title', sa.String(length=200), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['project_id'], ['projects.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(
        'idx_conversations_project_updated', 'conversations', ['project_id', 'updated_at']
    )

    op.create_table(
        'messages',
        sa.Column('id', UUID(), nullable=False),
        sa.Column('conversation_id', UUID(), nullable=False),
        sa.Column('role', sa.Enum('user', 'assistant', 'system', name='message_role'), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['conversation_id'], ['conversations.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(
        'idx_messages_conversation_created', 'messages', ['conversation_id', 'created_at']
    )


def downgrade() -> None:
    op.drop_index('idx_messages_conversation_created', table_name='messages')
    op.drop_table('messages')
    op.drop_index('idx_conversations_project_updated', table_name='conversations')
    op.drop_table('conversations')
    op.drop_index('idx_files_project_parent', table_name='files')
    op.drop_index('uq_files_project_root_name', table_name='files')
    op.drop_table('files')
    op.drop_index('idx_projects_owner_updated', table_name='projects')
    op.drop_table('projects')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
    if op.get_bind().dialect.name == 'postgresql':
        op.execute('DROP TYPE IF EXISTS message_role')
        op.execute('DROP TYPE IF EXISTS file_kind')
