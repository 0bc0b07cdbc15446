from alembic import op
import sqlalchemy as sa

revision = "0001_init_tables"
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    op.create_table(
        'departments',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('name', sa.String(120), nullable=False, unique=True),
        sa.Column('creation_date', sa.Date(), nullable=False),
        sa.Column('head_employee_id', sa.Integer, nullable=True),
    )

    op.create_table(
        'employees',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('date_of_birth', sa.Date(), nullable=False),
        sa.Column('salary', sa.Numeric(19, 2), nullable=False),
        sa.Column('address', sa.Text(), nullable=True),
        sa.Column('role', sa.Text(), nullable=False),
        sa.Column('joining_date', sa.Date(), nullable=False),
        sa.Column('yearly_bonus_percentage', sa.Float(), nullable=False),
        sa.Column('department_id', sa.Integer, sa.ForeignKey('departments.id'), nullable=True),
        sa.Column('reporting_manager_id', sa.Integer, sa.ForeignKey('employees.id'), nullable=True),
    )
    op.create_index('ix_employees_department_id', 'employees', ['department_id'])

    # departments.head_employee_id -> employees.id closes the cycle between the two tables
    with op.batch_alter_table('departments') as batch:
        batch.create_foreign_key(
            'fk_departments_head_employee_id', 'employees', ['head_employee_id'], ['id']
        )


def downgrade():
    with op.batch_alter_table('departments') as batch:
        batch.drop_constraint('fk_departments_head_employee_id', type_='foreignkey')
    op.drop_index('ix_employees_department_id', table_name='employees')
    op.drop_table('employees')
    op.drop_table('departments')
