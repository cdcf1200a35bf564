import uvicorn
from fastapi import FastAPI

from cardcycle.api.routes.health import router as health_router
from cardcycle.api.routes.stats import router as stats_router
from cardcycle.config import settings

app = FastAPI(title="CardCycle API", version="0.1.0")
app.include_router(health_router)
app.include_router(stats_router)


def run() -> None:
    uvicorn.run("cardcycle.api.app:app", host=settings.app_host, port=settings.app_port, reload=False)
