import enum
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from sqlalchemy import String, Integer, Date, ForeignKey, Enum, Boolean
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin

CENT = Decimal("0.01")


def cents_to_decimal(cents: int | None) -> Decimal | None:
    """Convert stored integer cents to a 2-place Decimal (None stays None)."""
    if cents is None:
        return None
    return Decimal(int(cents)).scaleb(-2)


def decimal_to_cents(value: Decimal) -> int:
    """Convert a Decimal amount to integer cents, rounding half-up."""
    return int((Decimal(value) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


class TransactionType(enum.Enum):
    """Direction of a transaction."""
    INCOME = "INCOME"
    EXPENSE = "EXPENSE"


class Transaction(Base, TimestampMixin):
    """
    A single income or expense entry.

    Amounts are stored as integer cents to avoid floating point issues and
    are always positive; the direction comes from ``type``.
    An installment purchase is stored once with its full amount and the
    number of installments it is split into.
    """

    __tablename__ = "transactions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Core fields
    description: Mapped[str] = mapped_column(String(255), nullable=False)
    amount_cents: Mapped[int] = mapped_column(Integer, nullable=False)  # Stored as cents
    transaction_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    type: Mapped[TransactionType] = mapped_column(
        Enum(TransactionType), nullable=False, index=True
    )

    # Recurrence and installments
    recurring: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    installments: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    current_installment: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    # Category
    category_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("categories.id", ondelete="CASCADE"), nullable=False, index=True
    )

    notes: Mapped[str | None] = mapped_column(String(500), nullable=True)

    # Relationships (one-directional, loaded with the row)
    category: Mapped["Category"] = relationship("Category", lazy="joined")

    @property
    def amount(self) -> Decimal:
        """Get amount as a 2-place Decimal."""
        return cents_to_decimal(self.amount_cents)

    @amount.setter
    def amount(self, value: Decimal) -> None:
        """Set amount from a Decimal."""
        self.amount_cents = decimal_to_cents(value)

    @property
    def monthly_amount(self) -> Decimal:
        """Amount charged per installment, rounded half-up to cents."""
        if self.installments and self.installments > 1:
            return (self.amount / self.installments).quantize(CENT, rounding=ROUND_HALF_UP)
        return self.amount

    def __repr__(self) -> str:
        return (
            f"<Transaction(id={self.id}, date={self.transaction_date}, "
            f"amount={self.amount}, type={self.type.name}, description='{self.description}')>"
        )
