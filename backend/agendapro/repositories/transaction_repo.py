"""Ledger repository."""

from decimal import Decimal
from typing import List

from agendapro.db.base import Transaction as DbTransaction
from agendapro.domain.entities import Transaction as DomainTransaction
from agendapro.domain.interfaces import ITransactionRepository
from agendapro.repositories.base_repo import OwnedRepository


class TransactionRepository(OwnedRepository, ITransactionRepository):
    model = DbTransaction
    resource = "Transaction"

    def list_for_owner(self, owner_id: str) -> List[DomainTransaction]:
        query = self._owned(owner_id).order_by(
            DbTransaction.date.desc(), DbTransaction.created_at.desc()
        )
        return [self._to_domain(row) for row in self._all(query)]

    def create(self, transaction: DomainTransaction) -> DomainTransaction:
        db_transaction = DbTransaction(
            owner_id=transaction.owner_id,
            appointment_id=transaction.appointment_id,
            description=transaction.description,
            amount=transaction.amount,
            type=transaction.type,
            date=transaction.date,
        )
        return self._to_domain(self._insert(db_transaction))

    def delete(self, owner_id: str, transaction_id: str) -> None:
        self._delete_row(owner_id, transaction_id)

    def _to_domain(self, db_transaction: DbTransaction) -> DomainTransaction:
        return DomainTransaction(
            id=db_transaction.id,
            owner_id=db_transaction.owner_id,
            appointment_id=db_transaction.appointment_id,
            description=db_transaction.description,
            amount=Decimal(db_transaction.amount),
            type=db_transaction.type,
            date=db_transaction.date,
            created_at=db_transaction.created_at,
        )
