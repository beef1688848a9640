"""Recovery and personal record routes."""

from fastapi import APIRouter

from ...db.repositories import ClientRepository, TrainingLogRepository
from ...services.personal_records import calculate_personal_records
from ...services.recovery import summarize_recovery
from .errors import not_found

router = APIRouter(prefix="/clients/{client_id}", tags=["analytics"])


@router.get("/recovery")
async def muscle_recovery(client_id: int):
    """Recovery status per muscle group, least recovered first."""
    client = await ClientRepository().get(client_id)
    if not client:
        return not_found("Client not found")

    logs = await TrainingLogRepository().list_by_client(client_id)
    return summarize_recovery(logs).to_dict()


@router.get("/records")
async def personal_records(client_id: int):
    """Top estimated one-rep-max records and this week's PRs."""
    client = await ClientRepository().get(client_id)
    if not client:
        return not_found("Client not found")

    logs = await TrainingLogRepository().list_by_client(client_id)
    return calculate_personal_records(logs).to_dict()
