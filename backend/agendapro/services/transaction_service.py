"""
Cash ledger use-cases: listing, manual entries and period totals.

Entries posted by completed appointments are created by the appointment
service; this service handles the entries the owner types in.
"""

from datetime import date
from typing import Callable, List, Optional

from agendapro.core.cache import TRANSACTIONS, CollectionCache
from agendapro.core.config import today_local
from agendapro.domain.entities import Transaction
from agendapro.domain.interfaces import INotifier, ITransactionRepository
from agendapro.schemas.dtos import TransactionCreateRequest
from agendapro.services.base_service import NotifyingService
from agendapro.services.period_totals import PeriodTotals, compute_period_totals


class TransactionService(NotifyingService):
    def __init__(
        self,
        transaction_repo: ITransactionRepository,
        notifier: INotifier,
        cache: CollectionCache,
        today: Callable[[], date] = today_local,
    ) -> None:
        super().__init__(notifier, cache)
        self.transaction_repo = transaction_repo
        self.today = today

    def list_transactions(self, owner_id: Optional[str]) -> List[Transaction]:
        """Ledger entries, newest date first."""
        return self._cached_list(
            TRANSACTIONS,
            owner_id,
            lambda: self.transaction_repo.list_for_owner(owner_id),
        )

    def period_totals(self, owner_id: Optional[str]) -> PeriodTotals:
        """Signed totals for today, this week (Mon-Sun) and this month."""
        return compute_period_totals(self.list_transactions(owner_id), self.today())

    def create_transaction(
        self, owner_id: Optional[str], request: TransactionCreateRequest
    ) -> Transaction:
        with self._outcome("Erro ao registrar"):
            owner_id = self._require_owner(owner_id)
            request.validate()
            created = self.transaction_repo.create(
                Transaction(
                    owner_id=owner_id,
                    description=request.description,
                    amount=request.amount,
                    type=request.type,
                    date=request.date or self.today(),
                )
            )
            self.cache.invalidate(TRANSACTIONS, owner_id)

        self.notifier.success(
            "Transação registrada!", "A movimentação foi adicionada ao caixa."
        )
        return created

    def delete_transaction(self, owner_id: Optional[str], transaction_id: str) -> None:
        with self._outcome("Erro ao remover"):
            owner_id = self._require_owner(owner_id)
            self.transaction_repo.delete(owner_id, transaction_id)
            self.cache.invalidate(TRANSACTIONS, owner_id)

        self.notifier.success("Transação removida!", "A movimentação foi excluída.")
