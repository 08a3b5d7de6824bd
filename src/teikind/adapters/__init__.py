"""Concrete collaborators for running the indexer on loaded transactions."""

from teikind.adapters.driver import RecordingStakingWatcher, TransactionDriver
from teikind.adapters.transactions import load_transaction, transaction_from_doc

__all__ = [
    "RecordingStakingWatcher",
    "TransactionDriver",
    "load_transaction",
    "transaction_from_doc",
]
