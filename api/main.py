from dotenv import load_dotenv
load_dotenv()

from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.corpus_router import router as corpus_router
from api.dependencies import close_database, get_graph_service
from api.graph_router import router as graph_router
from netops_graph.config import settings
from netops_graph.errors import ConnectivityError, NotFoundError, ValidationError
from netops_graph.logger import get_logger
from netops_graph.service import KnowledgeGraphService

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    close_database()
    logger.info("Neo4j driver closed.")


app = FastAPI(
    title="NetOps Knowledge Graph API",
    description="Graph knowledge layer for devices, faults and solutions of the network operations console.",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Include all the Routers ---
app.include_router(graph_router)
app.include_router(corpus_router)


# --- Error Mapping ---
@app.exception_handler(ValidationError)
async def handle_validation_error(request: Request, exc: ValidationError):
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.exception_handler(NotFoundError)
async def handle_not_found(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=404, content={"detail": str(exc), "missing_ids": exc.missing_ids})


@app.exception_handler(ConnectivityError)
async def handle_connectivity_error(request: Request, exc: ConnectivityError):
    logger.error(f"Graph store unavailable for {request.url.path}: {exc}")
    return JSONResponse(
        status_code=503,
        content={"detail": "The knowledge graph is temporarily unavailable. Please retry later."},
    )


@app.get("/health")
def health(service: KnowledgeGraphService = Depends(get_graph_service)):
    connected = service.verify_connectivity()
    return JSONResponse(status_code=200 if connected else 503, content={"neo4j": connected})


@app.get("/")
def read_root():
    return {"message": "NetOps Knowledge Graph API is running."}
