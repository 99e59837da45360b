from fastapi import APIRouter
from datetime import datetime

router = APIRouter()


@router.get("/")
def root():
    return {"message": "Undian API is running"}


@router.get("/health")
def health_check():
    return {"status": "healthy"}


@router.get("/routes")
def list_routes():
    return {
        "generated_at": datetime.utcnow().isoformat() + "Z",
        "routes": [
            {"method": "GET", "path": "/"},
            {"method": "GET", "path": "/health"},
            {"method": "GET", "path": "/routes"},
            {"method": "GET", "path": "/events/{event_id}/participants/{participant_id}/card_data"},
            {"method": "GET", "path": "/events/{event_id}/participants/{participant_id}/download_card"},
            {"method": "GET", "path": "/events/{event_id}/prizes"},
            {"method": "GET", "path": "/events/{event_id}/prizes/export"},
        ],
    }
