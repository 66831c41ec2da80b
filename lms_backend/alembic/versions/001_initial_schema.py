"""Initial database schema

Revision ID: 001
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '001'
down_revision = None
branch_labels = None
depends_on = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP')),
    ]


def upgrade():
    op.create_table(
        'courses',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(255), nullable=False, server_default=''),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id', name='pk_courses')
    )

    op.create_table(
        'templates',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(255), nullable=False, server_default=''),
        sa.Column('content', sa.Text(), nullable=False, server_default=''),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id', name='pk_templates')
    )

    op.create_table(
        'topics',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('course_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(255), nullable=False, server_default=''),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id', name='pk_topics'),
        sa.ForeignKeyConstraint(['course_id'], ['courses.id'], name='fk_topics_course_id_courses')
    )
    op.create_index('ix_topics_course_id', 'topics', ['course_id'])

    op.create_table(
        'exercises',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('topic_id', sa.Integer(), nullable=False),
        sa.Column('template_id', sa.Integer(), nullable=False),
        sa.Column('question', sa.Text(), nullable=False, server_default=''),
        sa.Column('answer', sa.Text(), nullable=False, server_default=''),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id', name='pk_exercises'),
        sa.ForeignKeyConstraint(['topic_id'], ['topics.id'], name='fk_exercises_topic_id_topics'),
        sa.ForeignKeyConstraint(['template_id'], ['templates.id'], name='fk_exercises_template_id_templates')
    )
    op.create_index('ix_exercises_topic_id', 'exercises', ['topic_id'])

    op.create_table(
        'assessments',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('course_id', sa.Integer(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id', name='pk_assessments'),
        sa.ForeignKeyConstraint(['course_id'], ['courses.id'], name='fk_assessments_course_id_courses'),
        sa.UniqueConstraint('course_id', name='uq_assessments_course_id')
    )


def downgrade():
    op.drop_table('assessments')
    op.drop_index('ix_exercises_topic_id', table_name='exercises')
    op.drop_table('exercises')
    op.drop_index('ix_topics_course_id', table_name='topics')
    op.drop_table('topics')
    op.drop_table('templates')
    op.drop_table('courses')
