from fastapi import APIRouter, Depends, status
from typing import Any, Dict, List
import logging

from greenfarm.api.deps import get_backend_client
from greenfarm.core.backend_client import BackendClient

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/blogs", status_code=status.HTTP_200_OK)
async def list_blogs(backend: BackendClient = Depends(get_backend_client)) -> List[Dict[str, Any]]:
    """Return the blog list from the content backend, in its order and field names."""
    entries = await backend.fetch_blogs()
    return [entry.to_public() for entry in entries]
