# /corpus/service.py

import datetime
import uuid
from typing import List, Optional

from corpus.log_templates import process_log_template
from corpus.models import Corpus, Device, FaultCase, ParsedLog
from corpus.repository import InMemoryRepository, Repository
from netops_graph.errors import ValidationError
from netops_graph.logger import get_logger

logger = get_logger(__name__)


def _now() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


def _check_page(limit: int, offset: int):
    if limit < 0 or offset < 0:
        raise ValidationError(f"limit and offset must be non-negative, got limit={limit}, offset={offset}.")


class CorpusService:
    """
    Stores operations corpus entries, fault cases and device records. Storage is injected so the
    in-memory default can be swapped for a persistent backend without touching the callers.
    """
    def __init__(self, corpus_repository: Repository[Corpus] = None,
                 fault_case_repository: Repository[FaultCase] = None,
                 device_repository: Repository[Device] = None):
        self.corpus = corpus_repository or InMemoryRepository()
        self.fault_cases = fault_case_repository or InMemoryRepository()
        self.devices = device_repository or InMemoryRepository()

    # --- Corpus ---
    def add_corpus(self, corpus: Corpus) -> Corpus:
        return self._store_corpus(corpus, _now())

    def bulk_add_corpus(self, items: List[Corpus]) -> List[Corpus]:
        timestamp = _now()
        added = [self._store_corpus(item, timestamp) for item in items]
        logger.info(f"Bulk added {len(added)} corpus item(s)")
        return added

    def _store_corpus(self, corpus: Corpus, timestamp: datetime.datetime) -> Corpus:
        stored = corpus.model_copy(update={
            "id": uuid.uuid4().hex,
            "created_at": timestamp,
            "updated_at": timestamp,
        })
        return self.corpus.add(stored.id, stored)

    def get_corpus_list(self, type: Optional[str] = None, limit: int = 20, offset: int = 0) -> List[Corpus]:
        _check_page(limit, offset)
        predicate = (lambda item: item.type == type) if type else None
        return self.corpus.list(predicate, limit=limit, offset=offset)

    # --- Fault cases ---
    def add_fault_case(self, fault_case: FaultCase) -> FaultCase:
        timestamp = _now()
        stored = fault_case.model_copy(update={
            "id": uuid.uuid4().hex,
            "created_at": timestamp,
            "updated_at": timestamp,
        })
        logger.info(f"Added fault case '{stored.title}' with id {stored.id}")
        return self.fault_cases.add(stored.id, stored)

    def get_fault_cases(self, status: Optional[str] = None, limit: int = 20, offset: int = 0) -> List[FaultCase]:
        _check_page(limit, offset)
        predicate = (lambda item: item.status == status) if status else None
        return self.fault_cases.list(predicate, limit=limit, offset=offset)

    def get_fault_case_by_id(self, fault_case_id: str) -> Optional[FaultCase]:
        return self.fault_cases.get(fault_case_id)

    # --- Devices ---
    def add_device(self, device: Device) -> Device:
        if device.id in self.devices:
            raise ValidationError(f"Device '{device.id}' is already registered.")
        return self.devices.add(device.id, device)

    def get_devices(self, type: Optional[str] = None, status: Optional[str] = None,
                    limit: int = 20, offset: int = 0) -> List[Device]:
        _check_page(limit, offset)

        def matches(device: Device) -> bool:
            return (not type or device.type == type) and (not status or device.status == status)

        return self.devices.list(matches, limit=limit, offset=offset)

    # --- Logs ---
    def process_log_template(self, log: str, vendor: Optional[str] = None) -> ParsedLog:
        return process_log_template(log, vendor)
