"""Extension routes - report whether an extension is loaded."""

from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, status

from newsdesk.api.dependencies import get_extension_condition
from newsdesk.services.extensions import ExtensionLoadedCondition

router = APIRouter()


@router.get("/{extension_key}", response_model=Dict[str, Any])
async def get_extension_status(
    extension_key: str,
    condition: ExtensionLoadedCondition = Depends(get_extension_condition),
) -> Dict[str, Any]:
    """Whether ``extension_key`` is loaded in this deployment."""
    try:
        loaded = condition.verdict(extension_key)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    return {"extensionKey": extension_key, "loaded": loaded}
