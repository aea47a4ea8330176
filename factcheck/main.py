from fastapi import FastAPI

from factcheck.core.config import settings
from factcheck.core.logger import get_logger
from factcheck.routers.fact_check import router as fact_check_router

logger = get_logger(__name__)

app = FastAPI(title="Fact Check Service", version="1.0.0")

app.include_router(fact_check_router, prefix="/api", tags=["Fact Check"])

logger.info(
    f"Fact Check Service initialized (model={settings.LLM_MODEL_NAME}, "
    f"freshness_policy={settings.EVIDENCE_FRESHNESS_POLICY})"
)
