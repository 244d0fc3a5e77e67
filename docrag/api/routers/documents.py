"""
Document API endpoints.

Routes: POST /api/upload, GET /api/documents

Dependencies: docrag.application.services.document_service, docrag.models
System role: Document HTTP API
"""

import logging
import shutil
import tempfile
from pathlib import Path

from fastapi import APIRouter, Depends, File, UploadFile, status

from docrag.api.deps import get_document_service, get_settings_dependency
from docrag.application.services import DocumentService, make_document_id
from docrag.configs import Settings
from docrag.core.exceptions import DocRAGError
from docrag.models.common import SuccessResponse
from docrag.models.document import DocumentListResponse, DocumentSummary, UploadedDocument

logger = logging.getLogger(__name__)

router = APIRouter(tags=["documents"])

TEMP_DIR_PREFIX = "docrag_upload_"
_READ_BLOCK_SIZE = 1024 * 1024


def cleanup_temp_file(file_path: str) -> None:
    """
    Safely remove temporary file and its parent temp directory.

    Args:
        file_path: Path to file to remove
    """
    try:
        path = Path(file_path)
        parent_dir = path.parent

        if path.exists():
            path.unlink()
            logger.debug("Cleaned up temp file", extra={"file_path": file_path})

        if parent_dir.exists() and parent_dir.name.startswith(TEMP_DIR_PREFIX):
            shutil.rmtree(parent_dir, ignore_errors=True)
            logger.debug("Cleaned up temp directory", extra={"temp_dir": str(parent_dir)})

    except OSError as e:
        logger.warning(
            "Failed to cleanup temp file",
            extra={"file_path": file_path, "error": str(e)},
        )


def _validate_upload(file: UploadFile, settings: Settings) -> str:
    """Return the upload's filename, rejecting unsupported file types."""
    if not file.filename:
        raise DocRAGError.validation("No file uploaded", field="pdf")
    extension = Path(file.filename).suffix.lower()
    if extension not in settings.upload.allowed_extensions:
        raise DocRAGError.validation(
            f"Only {', '.join(settings.upload.allowed_extensions)} files are allowed",
            field="pdf",
        )
    return file.filename


async def _save_upload(file: UploadFile, destination: Path, max_bytes: int) -> int:
    """Stream the upload to disk, enforcing the size limit."""
    written = 0
    with destination.open("wb") as buffer:
        while block := await file.read(_READ_BLOCK_SIZE):
            written += len(block)
            if written > max_bytes:
                raise DocRAGError.validation(
                    f"File exceeds the {max_bytes // (1024 * 1024)}MB limit",
                    field="pdf",
                )
            buffer.write(block)
    if written == 0:
        raise DocRAGError.validation("Uploaded file is empty", field="pdf")
    return written


@router.post(
    "/upload",
    response_model=SuccessResponse[UploadedDocument],
    status_code=status.HTTP_201_CREATED,
)
async def upload_document(
    pdf: UploadFile = File(..., description="PDF document to index"),
    document_service: DocumentService = Depends(get_document_service),
    settings: Settings = Depends(get_settings_dependency),
) -> SuccessResponse[UploadedDocument]:
    """
    Upload a PDF, index its text and register it.

    The upload is written to a temporary directory that is always removed,
    whether ingestion succeeds or fails.

    Args:
        pdf: Multipart file field ``pdf``
        document_service: Injected DocumentService
        settings: Application settings

    Returns:
        SuccessResponse[UploadedDocument]: documentId, filename and chunkCount

    Raises:
        DocRAGError: VALIDATION for bad uploads, NO_CONTENT when no text is
            extractable, provider or persistence errors from ingestion
    """
    filename = _validate_upload(pdf, settings)
    document_id = make_document_id(filename)
    temp_path = Path(tempfile.mkdtemp(prefix=TEMP_DIR_PREFIX)) / document_id

    try:
        size = await _save_upload(pdf, temp_path, settings.upload.max_file_size_bytes)
        logger.info(
            "Upload received",
            extra={"document_id": document_id, "doc_filename": filename, "size_bytes": size},
        )
        result = await document_service.ingest_pdf(str(temp_path), filename, document_id=document_id)
    finally:
        cleanup_temp_file(str(temp_path))

    return SuccessResponse(
        data=UploadedDocument(
            document_id=result.document_id,
            filename=result.filename,
            chunk_count=result.chunk_count,
        ),
        message="PDF uploaded and processed successfully",
    )


@router.get("/documents", response_model=DocumentListResponse)
async def list_documents(
    document_service: DocumentService = Depends(get_document_service),
) -> DocumentListResponse:
    """List documents ingested so far, oldest first."""
    entries = document_service.list_documents()
    documents = [
        DocumentSummary(
            document_id=entry.document_id,
            filename=entry.filename,
            chunk_count=entry.chunk_count,
            created_at=entry.created_at,
        )
        for entry in entries
    ]
    return DocumentListResponse(documents=documents, total=len(documents))
