import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import API_PREFIX, APP_VERSION, HOST, PORT, cors_origins, log_level

# Routers
from routers.health import router as health_router
from routers.progress import router as progress_router
from routers.simulations import router as simulations_router
from routers.tutor import router as tutor_router

logger = logging.getLogger("physics-tutorial")
logging.basicConfig(level=log_level())

app = FastAPI(title="Physics Tutorial API", version=APP_VERSION)

origins = cors_origins()
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    # browsers reject credentials with a wildcard origin
    allow_credentials="*" not in origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
def health_root():
    return {"ok": True}


app.include_router(health_router)  # /health
app.include_router(simulations_router, prefix=API_PREFIX)  # /api/v1/simulations/...
app.include_router(tutor_router, prefix=API_PREFIX)  # /api/v1/ai/ask
app.include_router(progress_router, prefix=API_PREFIX)  # /api/v1/progress


if __name__ == "__main__":
    logger.info("Physics Tutorial API listening on %s:%s", HOST, PORT)
    uvicorn.run("main:app", host=HOST, port=PORT)
