from typing import List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query

from api.dependencies import get_corpus_service
from corpus.models import Corpus, Device, FaultCase, ParsedLog
from corpus.service import CorpusService

router = APIRouter(
    prefix="/corpus",
    tags=["Corpus"]
)


@router.post("", response_model=Corpus, status_code=201)
def add_corpus(corpus: Corpus, service: CorpusService = Depends(get_corpus_service)):
    return service.add_corpus(corpus)


@router.post("/bulk", response_model=List[Corpus], status_code=201)
def bulk_add_corpus(items: List[Corpus], service: CorpusService = Depends(get_corpus_service)):
    return service.bulk_add_corpus(items)


@router.get("", response_model=List[Corpus])
def get_corpus_list(
    type: Optional[str] = None,
    limit: int = Query(20, ge=0),
    offset: int = Query(0, ge=0),
    service: CorpusService = Depends(get_corpus_service),
):
    return service.get_corpus_list(type, limit, offset)


@router.post("/fault-cases", response_model=FaultCase, status_code=201)
def add_fault_case(fault_case: FaultCase, service: CorpusService = Depends(get_corpus_service)):
    return service.add_fault_case(fault_case)


@router.get("/fault-cases", response_model=List[FaultCase])
def get_fault_cases(
    status: Optional[str] = None,
    limit: int = Query(20, ge=0),
    offset: int = Query(0, ge=0),
    service: CorpusService = Depends(get_corpus_service),
):
    return service.get_fault_cases(status, limit, offset)


@router.get("/fault-cases/{fault_case_id}", response_model=FaultCase)
def get_fault_case(fault_case_id: str, service: CorpusService = Depends(get_corpus_service)):
    fault_case = service.get_fault_case_by_id(fault_case_id)
    if fault_case is None:
        raise HTTPException(status_code=404, detail=f"Fault case {fault_case_id} not found.")
    return fault_case


@router.post("/devices", response_model=Device, status_code=201)
def add_device(device: Device, service: CorpusService = Depends(get_corpus_service)):
    return service.add_device(device)


@router.get("/devices", response_model=List[Device])
def get_devices(
    type: Optional[str] = None,
    status: Optional[str] = None,
    limit: int = Query(20, ge=0),
    offset: int = Query(0, ge=0),
    service: CorpusService = Depends(get_corpus_service),
):
    return service.get_devices(type, status, limit, offset)


@router.post("/logs/parse", response_model=ParsedLog)
def parse_log(
    log: str = Body(..., embed=True),
    vendor: Optional[str] = Body(None, embed=True),
    service: CorpusService = Depends(get_corpus_service),
):
    """Matches a raw device log line against the vendor log templates."""
    return service.process_log_template(log, vendor)
