from fastapi import APIRouter, HTTPException, Request, status

from msgboard.models import MessageList
from msgboard.services.message_service import message_service

router = APIRouter(prefix="/list", tags=["Messages"])


@router.get("", response_model=MessageList, response_model_by_alias=True)
async def list_messages(request: Request):
    """Messages of one category. The category must be given but filters nothing yet."""
    # The first cate wins when the key is repeated.
    values = request.query_params.getlist("cate")
    cate = values[0] if values else ""
    if not cate:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Missing cate parameter"
        )

    return MessageList(msgs=message_service.list_messages(cate))
