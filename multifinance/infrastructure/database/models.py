"""SQLAlchemy ORM models for multifinance entities."""

from datetime import datetime, date
from decimal import Decimal

from sqlalchemy import (
    Date,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    SmallInteger,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

MONEY = Numeric(15, 2)


class Base(DeclarativeBase):
    pass


class CustomerModel(Base):
    """Persisted customer record."""

    __tablename__ = "customers"
    __table_args__ = (
        UniqueConstraint("nik", name="uq_customers_nik"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    nik: Mapped[str] = mapped_column(String(16), nullable=False)
    full_name: Mapped[str] = mapped_column(String(255), nullable=False)
    legal_name: Mapped[str] = mapped_column(String(255), nullable=False)
    birth_place: Mapped[str] = mapped_column(String(100), nullable=False)
    birth_date: Mapped[date] = mapped_column(Date, nullable=False)
    salary: Mapped[Decimal] = mapped_column(MONEY, nullable=False)
    ktp_photo_url: Mapped[str] = mapped_column(String(255), nullable=False)
    selfie_photo_url: Mapped[str] = mapped_column(String(255), nullable=False)
    verification_status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="PENDING",
        index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=datetime.utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
    )

    limits: Mapped[list["CustomerLimitModel"]] = relationship(
        "CustomerLimitModel",
        back_populates="customer",
        cascade="all, delete-orphan",
    )


class TenorModel(Base):
    """Tenor reference data, seeded at startup."""

    __tablename__ = "tenors"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    duration_months: Mapped[int] = mapped_column(SmallInteger, nullable=False, unique=True)
    description: Mapped[str | None] = mapped_column(String(50), nullable=True)


class CustomerLimitModel(Base):
    """Per-tenor limit of a customer."""

    __tablename__ = "customer_limits"

    customer_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("customers.id", ondelete="CASCADE"),
        primary_key=True,
    )
    tenor_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("tenors.id", ondelete="RESTRICT"),
        primary_key=True,
    )
    limit_amount: Mapped[Decimal] = mapped_column(MONEY, nullable=False)

    customer: Mapped["CustomerModel"] = relationship(
        "CustomerModel",
        back_populates="limits",
    )


class TransactionModel(Base):
    """Persisted financing transaction."""

    __tablename__ = "transactions"
    __table_args__ = (
        UniqueConstraint("contract_number", name="uq_transactions_contract_number"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    contract_number: Mapped[str] = mapped_column(String(50), nullable=False)
    customer_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("customers.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    tenor_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("tenors.id", ondelete="RESTRICT"),
        nullable=False,
    )
    asset_name: Mapped[str] = mapped_column(String(255), nullable=False)
    otr_amount: Mapped[Decimal] = mapped_column(MONEY, nullable=False)
    admin_fee: Mapped[Decimal] = mapped_column(MONEY, nullable=False)
    total_interest: Mapped[Decimal] = mapped_column(MONEY, nullable=False)
    total_installment_amount: Mapped[Decimal] = mapped_column(MONEY, nullable=False)
    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="PENDING",
    )
    transaction_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=datetime.utcnow,
    )
