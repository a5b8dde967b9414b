"""
Export 라우트

POST /api/export-pdf - Balance General HTML 첨부 파일
"""

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from web.dependencies import get_export_service
from web.models.requests import ExportRequest
from web.services.export_service import ExportService, export_filename

router = APIRouter(prefix="/api", tags=["Export"])


@router.post("/export-pdf", response_class=HTMLResponse)
async def export_balance(
    request: ExportRequest,
    service: ExportService = Depends(get_export_service),
) -> HTMLResponse:
    """Balance General 문서 생성

    PDF 대신 인쇄용 HTML을 첨부 파일로 반환.
    """
    html = service.render_balance(
        client_rut=request.client_rut,
        client_name=request.client_name,
        date=request.date,
        accounts=[a.to_input() for a in request.accounts],
        total_debit=request.total_debit,
        total_credit=request.total_credit,
        utility=request.utility,
    )

    filename = export_filename(request.client_rut, request.date)

    return HTMLResponse(
        content=html,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
