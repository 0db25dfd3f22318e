"""create coupon, order and helper tables

Revision ID: a1c0f3e2b9d4
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "a1c0f3e2b9d4"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "user",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("phone", sa.String(length=16), nullable=True),
        sa.Column("gender", sa.String(length=8), nullable=True),
        sa.Column("birth", sa.Integer(), nullable=True),
        sa.Column(
            "create_date",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=True,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_user_email"), "user", ["email"], unique=True)

    op.create_table(
        "event",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=64), nullable=True),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("desc", sa.Text(), nullable=True),
        sa.Column("start_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("end_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("free_shipping", sa.Boolean(), nullable=False),
        sa.Column(
            "create_date",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=True,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )

    op.create_table(
        "clothes",
        sa.Column("code", sa.String(length=5), nullable=False),
        sa.Column("category", sa.String(length=32), nullable=False),
        sa.Column("gender", sa.String(length=8), nullable=True),
        sa.Column("price", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("code"),
    )

    op.create_table(
        "coupon",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("code", sa.String(length=64), nullable=False),
        sa.Column("type", sa.String(length=16), nullable=False),
        sa.Column("price", sa.Integer(), nullable=False),
        sa.Column("free_shipping", sa.Boolean(), nullable=True),
        sa.Column("status", sa.String(length=32), nullable=True),
        sa.Column("expires_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("event_id", sa.Integer(), nullable=True),
        sa.Column("desc", sa.Text(), nullable=True),
        sa.Column(
            "create_date",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=True,
        ),
        sa.Column(
            "update_date",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=True,
        ),
        sa.ForeignKeyConstraint(["event_id"], ["event.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_coupon_code"), "coupon", ["code"], unique=True)
    op.create_index(op.f("ix_coupon_event_id"), "coupon", ["event_id"], unique=False)

    op.create_table(
        "order",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=True),
        sa.Column("coupon_id", sa.Integer(), nullable=True),
        sa.Column("status_id", sa.Integer(), nullable=True),
        sa.Column("online", sa.Boolean(), nullable=False),
        sa.Column("additional_day", sa.Integer(), nullable=False),
        sa.Column("misc", sa.Text(), nullable=True),
        sa.Column(
            "create_date",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=True,
        ),
        sa.Column(
            "update_date",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=True,
        ),
        sa.ForeignKeyConstraint(["user_id"], ["user.id"], ondelete="RESTRICT"),
        sa.ForeignKeyConstraint(["coupon_id"], ["coupon.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_order_user_id"), "order", ["user_id"], unique=False)
    op.create_index(op.f("ix_order_coupon_id"), "order", ["coupon_id"], unique=False)
    op.create_index(op.f("ix_order_status_id"), "order", ["status_id"], unique=False)

    op.create_table(
        "order_detail",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("order_id", sa.Integer(), nullable=False),
        sa.Column("clothes_code", sa.String(length=5), nullable=True),
        sa.Column("name", sa.String(length=255), nullable=True),
        sa.Column("price", sa.Integer(), nullable=False),
        sa.Column("final_price", sa.Integer(), nullable=False),
        sa.Column("desc", sa.Text(), nullable=True),
        sa.Column(
            "create_date",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=True,
        ),
        sa.ForeignKeyConstraint(["order_id"], ["order.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["clothes_code"], ["clothes.code"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_order_detail_order_id"), "order_detail", ["order_id"], unique=False)
    op.create_index(
        op.f("ix_order_detail_clothes_code"), "order_detail", ["clothes_code"], unique=False
    )

    op.create_table(
        "sms",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("from", sa.String(length=12), nullable=False),
        sa.Column("to", sa.String(length=12), nullable=False),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("ret", sa.Integer(), nullable=True),
        sa.Column("status", sa.String(length=32), nullable=False),
        sa.Column("method", sa.String(length=32), nullable=True),
        sa.Column("sent_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column(
            "create_date",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=True,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_sms_to"), "sms", ["to"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_sms_to"), table_name="sms")
    op.drop_table("sms")
    op.drop_index(op.f("ix_order_detail_clothes_code"), table_name="order_detail")
    op.drop_index(op.f("ix_order_detail_order_id"), table_name="order_detail")
    op.drop_table("order_detail")
    op.drop_index(op.f("ix_order_status_id"), table_name="order")
    op.drop_index(op.f("ix_order_coupon_id"), table_name="order")
    op.drop_index(op.f("ix_order_user_id"), table_name="order")
    op.drop_table("order")
    op.drop_index(op.f("ix_coupon_event_id"), table_name="coupon")
    op.drop_index(op.f("ix_coupon_code"), table_name="coupon")
    op.drop_table("coupon")
    op.drop_table("clothes")
    op.drop_table("event")
    op.drop_index(op.f("ix_user_email"), table_name="user")
    op.drop_table("user")
