"""Domain services for category grouping and shares."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.constants import ALL_CATEGORIES_LABEL
from src.domain.errors import DivisionUndefined
from src.domain.models import (
    CategoryGroup,
    CategoryShare,
    Transaction,
    TransactionType,
)


def group_all(transactions: Iterable[Transaction]) -> list[CategoryGroup]:
    """Group transactions by category in first-seen order.

    Args:
        transactions: Transactions to group.

    Returns:
        list[CategoryGroup]: One group per distinct category, compared by
        exact string equality.
    """
    groups: dict[str, list[Transaction]] = {}
    for transaction in transactions:
        groups.setdefault(transaction.category, []).append(transaction)
    return [
        CategoryGroup(label=category, transactions=members)
        for category, members in groups.items()
    ]


def group_one(
    transactions: Iterable[Transaction],
    category: str,
) -> list[CategoryGroup]:
    """Split one category into its expense and income transactions.

    Args:
        transactions: Transactions to filter.
        category: Category to keep.

    Returns:
        list[CategoryGroup]: Exactly two groups, expenses then incomes.
    """
    expenses: list[Transaction] = []
    incomes: list[Transaction] = []
    for transaction in transactions:
        if transaction.category != category:
            continue
        if transaction.type == TransactionType.EXPENSE:
            expenses.append(transaction)
        else:
            incomes.append(transaction)
    return [
        CategoryGroup(label=TransactionType.EXPENSE.value, transactions=expenses),
        CategoryGroup(label=TransactionType.INCOME.value, transactions=incomes),
    ]


def group_by_selection(
    transactions: Iterable[Transaction],
    category: str | None,
) -> list[CategoryGroup]:
    """Group all categories, or split a single selected category.

    Only None and the "all categories" label select every category; an
    empty string is a regular category label.
    """
    if category is None or category == ALL_CATEGORIES_LABEL:
        return group_all(transactions)
    return group_one(transactions, category)


def compute_shares(groups: Iterable[CategoryGroup]) -> list[CategoryShare]:
    """Return each group subtotal with its fraction of the total.

    Args:
        groups: Groups produced by ``group_all`` or ``group_one``.

    Returns:
        list[CategoryShare]: Shares in group order.

    Raises:
        DivisionUndefined: When the subtotals sum to zero.
    """
    subtotals = [(group.label, group.subtotal) for group in groups]
    total = sum((subtotal for _, subtotal in subtotals), Decimal("0"))
    if total == 0:
        raise DivisionUndefined(
            f"Cannot compute shares of {len(subtotals)} groups with a zero total"
        )
    return [
        CategoryShare(label=label, subtotal=subtotal, fraction=subtotal / total)
        for label, subtotal in subtotals
    ]


__all__ = ["group_all", "group_one", "group_by_selection", "compute_shares"]
