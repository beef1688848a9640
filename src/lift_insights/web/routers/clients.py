"""Client routes."""

from fastapi import APIRouter, Form

from ...db.repositories import ClientRepository
from ...models.client import Client
from .errors import error_response, not_found

router = APIRouter(prefix="/clients", tags=["clients"])


@router.get("")
async def list_clients():
    """List all clients."""
    clients = await ClientRepository().list_all()
    return {"clients": [c.to_dict() for c in clients]}


@router.post("", status_code=201)
async def create_client(name: str = Form(...)):
    """Create a client."""
    repo = ClientRepository()
    try:
        client_id = await repo.create(Client(name=name))
    except ValueError as e:
        return error_response(str(e))

    client = await repo.get(client_id)
    return client.to_dict()


@router.get("/{client_id}")
async def get_client(client_id: int):
    """Get a client by ID."""
    client = await ClientRepository().get(client_id)
    if not client:
        return not_found("Client not found")
    return client.to_dict()
