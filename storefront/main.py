"""
Module principal de l'application FastAPI de la boutique.

Configure l'instance FastAPI, le logging, le CORS, la conversion des erreurs
au format {"error": "..."} et inclut les routeurs du catalogue, des commandes,
des statistiques et de l'authentification admin.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from storefront.config import settings
from storefront.core.schemas import ErrorResponse
from storefront.database import create_tables
from storefront.records.interfaces.dependencies import RecordStoreDep

# --- Importer les routeurs ---
from storefront.products.interfaces.api import product_router
from storefront.orders.interfaces.api import order_router
from storefront.stats.interfaces.api import stats_router
from storefront.auth.interfaces.api import auth_router

# Configurer le logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    await create_tables()
    logger.info("Table des enregistrements prête.")
    yield

app = FastAPI(
    title=settings.APP_NAME,
    description="API de la boutique: catalogue, commandes, statistiques et authentification admin.",
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ======================================================
# Format des erreurs
# ======================================================

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=str(exc.detail)).model_dump(),
        headers=getattr(exc, "headers", None),
    )

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ())[1:])
        problems.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    logger.info(f"Requête invalide sur {request.url.path}: {problems}")
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=ErrorResponse(error="Données invalides: " + "; ".join(problems)).model_dump(),
    )

# ======================================================
# Inclure les routeurs
# ======================================================
app.include_router(product_router, prefix="/products", tags=["Produits"])
app.include_router(order_router, prefix="/orders", tags=["Commandes"])
app.include_router(stats_router, prefix="/stats", tags=["Statistiques"])
app.include_router(auth_router, prefix="/auth", tags=["Authentification"])

@app.get("/health", tags=["Santé"])
async def health_check(store: RecordStoreDep):
    reachable = await store.ping()
    return {"status": "healthy" if reachable else "degraded", "store": "up" if reachable else "down"}
