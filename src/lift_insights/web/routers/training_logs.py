"""Training log routes.

Logs are posted as JSON in the shape ``TrainingLog.to_dict`` produces.
Input is cleaned before saving: blank exercises and empty sets are dropped.
"""

import logging

from fastapi import APIRouter, Body

from ...db.repositories import ClientRepository, TrainingLogRepository
from ...models.training_log import TrainingLog
from .errors import error_response, not_found

logger = logging.getLogger(__name__)

router = APIRouter(tags=["training-logs"])


def _parse_log(payload: dict, client_id: int, log_id: int | None = None) -> TrainingLog:
    """Build a cleaned TrainingLog from a request body.

    Raises:
        ValueError: If the body is malformed
    """
    try:
        log = TrainingLog.from_dict(payload, id=log_id, client_id=client_id)
    except KeyError as e:
        raise ValueError(f"Missing field {e}") from e
    except (TypeError, ValueError) as e:
        raise ValueError(f"Malformed training log: {e}") from e
    return log.cleaned()


@router.get("/clients/{client_id}/logs")
async def list_logs(client_id: int):
    """List a client's training logs, newest first."""
    client = await ClientRepository().get(client_id)
    if not client:
        return not_found("Client not found")

    logs = await TrainingLogRepository().list_by_client(client_id)
    return {
        "logs": [
            {**log.to_dict(), "total_sets": log.total_sets, "total_volume": log.total_volume}
            for log in logs
        ]
    }


@router.post("/clients/{client_id}/logs", status_code=201)
async def create_log(client_id: int, payload: dict = Body(...)):
    """Log a workout for a client."""
    client = await ClientRepository().get(client_id)
    if not client:
        return not_found("Client not found")

    try:
        log = _parse_log(payload, client_id)
    except ValueError as e:
        return error_response(str(e))

    repo = TrainingLogRepository()
    log_id = await repo.create(log)
    created = await repo.get(log_id)
    return created.to_dict()


@router.get("/logs/{log_id}")
async def get_log(log_id: int):
    """Get a training log with its exercises and sets."""
    log = await TrainingLogRepository().get(log_id)
    if not log:
        return not_found("Training log not found")
    return log.to_dict()


@router.put("/logs/{log_id}")
async def update_log(log_id: int, payload: dict = Body(...)):
    """Update a training log.

    When the body has an ``exercises`` list the whole exercise/set tree is
    replaced; otherwise only the log fields change.
    """
    repo = TrainingLogRepository()
    existing = await repo.get(log_id)
    if not existing:
        return not_found("Training log not found")

    merged = {**existing.to_dict(), **payload}
    try:
        log = _parse_log(merged, existing.client_id, log_id=log_id)
        await repo.update(log, replace_exercises="exercises" in payload)
    except ValueError as e:
        return error_response(str(e))
    except LookupError:
        return not_found("Training log not found")

    updated = await repo.get(log_id)
    return updated.to_dict()


@router.delete("/logs/{log_id}")
async def delete_log(log_id: int):
    """Delete a training log with its exercises and sets."""
    deleted = await TrainingLogRepository().delete(log_id)
    if not deleted:
        return not_found("Training log not found")
    return {"status": "deleted", "id": log_id}
