from fastapi import FastAPI
from dotenv import load_dotenv
from starlette.middleware.cors import CORSMiddleware
import os
import logging
from pathlib import Path

from database import engine, Base
from routers import participants, prizes, public

ROOT_DIR = Path(__file__).parent
load_dotenv(ROOT_DIR / '.env')

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

app = FastAPI(title="Undian API", version="1.0.0")


# ==================== STARTUP ====================
@app.on_event("startup")
def startup_event():
    # schema is owned by migrations in production; this only fills gaps locally
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ensured")


# Include routers and add middleware
app.include_router(public.router, prefix="/api")
app.include_router(participants.router, prefix="/api")
app.include_router(prizes.router, prefix="/api")

app.add_middleware(
    CORSMiddleware,
    allow_credentials=True,
    allow_origins=os.environ.get('CORS_ORIGINS', '*').split(','),
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Content-Disposition"],
)
