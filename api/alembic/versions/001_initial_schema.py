"""Initial schema: vocabulary, tags, templates and generated sentences

Revision ID: 001_initial_schema
Revises: 
Create Date: 2026-10-18 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '001_initial_schema'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # Create vocabulary table
    op.create_table(
        'vocabulary',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('kanji', sa.String(), nullable=True),
        sa.Column('furigana', sa.String(), nullable=True),
        sa.Column('romaji', sa.String(), nullable=True),
        sa.Column('meaning', sa.String(), nullable=True),
        sa.Column('part_of_speech', sa.String(), nullable=True),
        sa.Column('topic', sa.String(), nullable=True),
        sa.Column('subtopic', sa.String(), nullable=True),
        sa.Column('politeness_level', sa.String(), nullable=True),
        sa.Column('jlpt_level', sa.String(), nullable=True),
        sa.Column('difficulty', sa.String(), nullable=True),
        sa.Column('notes', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_vocabulary_part_of_speech'), 'vocabulary', ['part_of_speech'], unique=False)

    # Create tags table (self-referencing for sub tags)
    op.create_table(
        'tags',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('type', sa.String(), nullable=True),
        sa.Column('parent_tag_id', sa.Integer(), nullable=True),
        sa.Column('description', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['parent_tag_id'], ['tags.id'], ),
        sa.PrimaryKeyConstraint('id')
    )

    # Create taggings table
    op.create_table(
        'taggings',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('tag_id', sa.Integer(), nullable=False),
        sa.Column('target_type', sa.String(), nullable=False),
        sa.Column('target_id', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['tag_id'], ['tags.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_taggings_tag_id'), 'taggings', ['tag_id'], unique=False)

    # Create tag_vocab_mapping table
    op.create_table(
        'tag_vocab_mapping',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('tag_id', sa.Integer(), nullable=False),
        sa.Column('vocab_topic', sa.String(), nullable=False),
        sa.Column('vocab_subtopic', sa.String(), nullable=True),
        sa.ForeignKeyConstraint(['tag_id'], ['tags.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_tag_vocab_mapping_tag_id'), 'tag_vocab_mapping', ['tag_id'], unique=False)

    # Create sentence_templates table
    op.create_table(
        'sentence_templates',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('template_pattern', sa.String(), nullable=False),
        sa.Column('description', sa.String(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )

    # Create template_slots table
    op.create_table(
        'template_slots',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('template_id', sa.Integer(), nullable=False),
        sa.Column('slot_name', sa.String(), nullable=False),
        sa.Column('grammatical_role', sa.String(), nullable=True),
        sa.Column('part_of_speech', sa.String(), nullable=True),
        sa.Column('is_required', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('order_index', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('notes', sa.String(), nullable=True),
        sa.ForeignKeyConstraint(['template_id'], ['sentence_templates.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('template_id', 'slot_name', name='uq_template_slot_name')
    )

    # Create generated_sentences table
    op.create_table(
        'generated_sentences',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('template_id', sa.Integer(), nullable=False),
        sa.Column('japanese_sentence', sa.String(), nullable=False),
        sa.Column('english_sentence', sa.String(), nullable=True),
        sa.Column('politeness_level', sa.String(), nullable=True),
        sa.Column('jlpt_level', sa.String(), nullable=True),
        sa.Column('difficulty', sa.String(), nullable=True),
        sa.Column('source_tag_id', sa.Integer(), nullable=True),
        sa.Column('is_favorite', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['template_id'], ['sentence_templates.id'], ),
        sa.ForeignKeyConstraint(['source_tag_id'], ['tags.id'], ),
        sa.PrimaryKeyConstraint('id')
    )

    # Create generated_sentence_vocabulary table
    op.create_table(
        'generated_sentence_vocabulary',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('generated_sentence_id', sa.Integer(), nullable=False),
        sa.Column('vocabulary_id', sa.Integer(), nullable=False),
        sa.Column('slot_name', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['generated_sentence_id'], ['generated_sentences.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['vocabulary_id'], ['vocabulary.id'], ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('generated_sentence_id', 'slot_name', name='uq_generated_sentence_slot')
    )

    # Create practice_history table
    op.create_table(
        'practice_history',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('generated_sentence_id', sa.Integer(), nullable=False),
        sa.Column('practiced_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('result', sa.String(), nullable=True),
        sa.Column('notes', sa.String(), nullable=True),
        sa.ForeignKeyConstraint(['generated_sentence_id'], ['generated_sentences.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )


def downgrade() -> None:
    op.drop_table('practice_history')
    op.drop_table('generated_sentence_vocabulary')
    op.drop_table('generated_sentences')
    op.drop_table('template_slots')
    op.drop_table('sentence_templates')
    op.drop_index(op.f('ix_tag_vocab_mapping_tag_id'), table_name='tag_vocab_mapping')
    op.drop_table('tag_vocab_mapping')
    op.drop_index(op.f('ix_taggings_tag_id'), table_name='taggings')
    op.drop_table('taggings')
    op.drop_table('tags')
    op.drop_index(op.f('ix_vocabulary_part_of_speech'), table_name='vocabulary')
    op.drop_table('vocabulary')
