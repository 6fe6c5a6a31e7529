import logging
from datetime import date
from decimal import Decimal
from sqlalchemy.orm import Session

from ..models import Category, CategoryType, Transaction, TransactionType

logger = logging.getLogger(__name__)

# (name, essential, type)
DEMO_CATEGORIES = [
    # Income
    ("Salário", True, CategoryType.FIXED_INCOME),
    ("Freelancer", False, CategoryType.VARIABLE_INCOME),
    ("Investimentos", False, CategoryType.VARIABLE_INCOME),
    # Essential expenses
    ("Aluguel", True, CategoryType.ESSENTIAL_EXPENSE),
    ("Alimentação", True, CategoryType.ESSENTIAL_EXPENSE),
    ("Transporte", True, CategoryType.ESSENTIAL_EXPENSE),
    ("Saúde", True, CategoryType.ESSENTIAL_EXPENSE),
    ("Contas (Água/Luz/Telefone)", True, CategoryType.ESSENTIAL_EXPENSE),
    # Discretionary expenses
    ("Streaming", False, CategoryType.DISCRETIONARY_EXPENSE),
    ("Restaurantes", False, CategoryType.DISCRETIONARY_EXPENSE),
    ("Compras", False, CategoryType.DISCRETIONARY_EXPENSE),
    ("Viagens", False, CategoryType.DISCRETIONARY_EXPENSE),
    # Invisible expenses
    ("Café", False, CategoryType.INVISIBLE_EXPENSE),
    ("Taxi/Uber", False, CategoryType.INVISIBLE_EXPENSE),
    ("Pequenas Compras", False, CategoryType.INVISIBLE_EXPENSE),
]

# (description, amount, date, type, recurring, category name, installments)
DEMO_TRANSACTIONS = [
    ("Salário Fevereiro", "5000.00", date(2026, 2, 5), TransactionType.INCOME, False, "Salário", 1),
    ("Projeto Website", "1500.00", date(2026, 2, 15), TransactionType.INCOME, False, "Freelancer", 1),
    ("Aluguel Fevereiro", "1500.00", date(2026, 2, 1), TransactionType.EXPENSE, True, "Aluguel", 1),
    ("Supermercado Semanal", "400.00", date(2026, 2, 10), TransactionType.EXPENSE, True, "Alimentação", 1),
    ("Combustível", "200.00", date(2026, 2, 8), TransactionType.EXPENSE, True, "Transporte", 1),
    ("Plano de Saúde", "300.00", date(2026, 2, 5), TransactionType.EXPENSE, True, "Saúde", 1),
    ("Conta de Luz", "150.00", date(2026, 2, 6), TransactionType.EXPENSE, True, "Contas (Água/Luz/Telefone)", 1),
    ("Netflix", "39.90", date(2026, 2, 10), TransactionType.EXPENSE, True, "Streaming", 1),
    ("Jantar Restaurante", "120.00", date(2026, 2, 12), TransactionType.EXPENSE, False, "Restaurantes", 1),
    ("Roupas", "250.00", date(2026, 2, 14), TransactionType.EXPENSE, False, "Compras", 1),
    ("Café da Manhã", "15.00", date(2026, 2, 13), TransactionType.EXPENSE, False, "Café", 1),
    ("Corrida Uber", "35.00", date(2026, 2, 11), TransactionType.EXPENSE, False, "Taxi/Uber", 1),
    ("Notebook Novo", "3600.00", date(2026, 2, 1), TransactionType.EXPENSE, False, "Compras", 12),
]


def seed_demo_data(db: Session) -> bool:
    """
    Insert the sample categories and transactions.

    Does nothing if any category already exists. Returns True if data was
    inserted.
    """
    if db.query(Category.id).first() is not None:
        logger.info("Skipping demo data: categories already present")
        return False

    categories = {}
    for name, essential, category_type in DEMO_CATEGORIES:
        category = Category(name=name, essential=essential, type=category_type)
        db.add(category)
        categories[name] = category
    db.flush()

    for description, amount, posted, tx_type, recurring, category_name, installments in DEMO_TRANSACTIONS:
        transaction = Transaction(
            description=description,
            transaction_date=posted,
            type=tx_type,
            recurring=recurring,
            installments=installments,
            current_installment=1,
            category_id=categories[category_name].id,
        )
        transaction.amount = Decimal(amount)
        db.add(transaction)
    db.flush()

    logger.info(
        "Demo data loaded: %d categories, %d transactions",
        db.query(Category).count(),
        db.query(Transaction).count(),
    )
    return True
