"""
Schema API Endpoints

Raw table sections, the schema diagram and the integrity report.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel

from marketplace_navigator.diagram import build_er_diagram, render_diagram
from marketplace_navigator.navigation import RelationalNavigator
from marketplace_navigator.quality import validate_snapshot
from marketplace_navigator.serving.api.dependencies import get_navigator
from marketplace_navigator.snapshot import TableName

router = APIRouter()


class SectionInfo(BaseModel):
    name: str
    records: int


class SectionContent(BaseModel):
    name: str
    content: str


class DiagramResponse(BaseModel):
    """Diagram source with the rendered artifact or its fallback"""
    source: str
    generated: bool
    rendered: bool
    content: str
    error: Optional[str] = None


class IntegrityCheckResponse(BaseModel):
    name: str
    passed: bool
    severity: str
    message: str
    failed_rows: int
    total_rows: int


class IntegrityResponse(BaseModel):
    status: str
    total_checks: int
    passed_checks: int
    failed_checks: int
    warning_count: int
    checks: List[IntegrityCheckResponse]


@router.get("/sections", response_model=List[SectionInfo])
async def list_sections(
    navigator: RelationalNavigator = Depends(get_navigator),
) -> List[SectionInfo]:
    """Every table in display order with its record count."""
    return [
        SectionInfo(name=name, records=len(navigator.snapshot.table(name)))
        for name in navigator.sections()
    ]


@router.get("/sections/{name}", response_model=SectionContent)
async def get_section(
    name: str,
    navigator: RelationalNavigator = Depends(get_navigator),
) -> SectionContent:
    """Records of one table as indented JSON text."""
    table = TableName.parse(name)
    if table is None:
        raise HTTPException(status_code=404, detail=f"Unknown table: {name}")
    return SectionContent(name=table.value, content=navigator.format_section(table))


@router.get("/erd", response_model=DiagramResponse)
async def get_diagram(request: Request) -> DiagramResponse:
    """Schema diagram; generated from the table catalog when no source was loaded."""
    source = request.app.state.diagram_source
    generated = source is None
    if generated:
        source = build_er_diagram()
    
    view = render_diagram(source, renderer=request.app.state.diagram_renderer)
    return DiagramResponse(
        source=view.source,
        generated=generated,
        rendered=view.rendered,
        content=view.content,
        error=view.error,
    )


@router.get("/integrity", response_model=IntegrityResponse)
async def get_integrity_report(
    navigator: RelationalNavigator = Depends(get_navigator),
) -> IntegrityResponse:
    """Duplicate ids and dangling foreign keys in the loaded snapshot."""
    result = validate_snapshot(navigator.snapshot)
    return IntegrityResponse(
        status=result.status.value,
        total_checks=result.total_checks,
        passed_checks=result.passed_checks,
        failed_checks=result.failed_checks,
        warning_count=result.warning_count,
        checks=[
            IntegrityCheckResponse(
                name=check.name,
                passed=check.passed,
                severity=check.severity.value,
                message=check.message,
                failed_rows=check.failed_rows,
                total_rows=check.total_rows,
            )
            for check in result.checks
        ],
    )
