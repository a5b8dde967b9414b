"""
Client 라우트

고객 등록 및 목록 API
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.storage.client_store import DuplicateClientError
from core.types import ClientListSource
from web.dependencies import get_client_list_source, get_db, get_db_write
from web.models.requests import ClientRegisterRequest
from web.models.responses import (
    ClientRegisterResponse,
    ClientResponse,
    ClientWithBalanceResponse,
)
from web.services.client_service import ClientService, ClientValidationError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Clients"])


def _failure(status_code: int, message: str) -> JSONResponse:
    body = ClientRegisterResponse(success=False, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump(by_alias=True))


@router.post("/register-client", response_model=ClientRegisterResponse)
async def register_client(
    request: ClientRegisterRequest,
    db: SQLiteAdapter = Depends(get_db_write),
) -> ClientRegisterResponse | JSONResponse:
    """고객 등록

    - 400: RUT/이름 누락
    - 409: 이미 등록된 RUT
    - 500: 저장 실패
    """
    service = ClientService(db)

    try:
        client = await service.register_client(
            rut=request.rut,
            name=request.name,
            address=request.address,
            phone=request.phone,
        )
    except ClientValidationError as e:
        return _failure(400, str(e))
    except DuplicateClientError:
        return _failure(409, "Ya existe un cliente con este RUT")
    except Exception as e:
        logger.error(f"Client registration failed: {e}")
        return _failure(500, "Error al registrar cliente")

    return ClientRegisterResponse(
        success=True,
        message="Cliente registrado correctamente",
        client=ClientResponse(**client),
    )


@router.get("/register-client", response_model=list[ClientWithBalanceResponse])
async def list_clients(
    db: SQLiteAdapter = Depends(get_db),
    list_source: ClientListSource = Depends(get_client_list_source),
) -> list[ClientWithBalanceResponse]:
    """고객 목록 (최근 Balance 1건 포함)"""
    service = ClientService(db, list_source)

    clients = await service.list_clients()

    return [ClientWithBalanceResponse(**c) for c in clients]
