"""
Pydantic schemas

The upload contract keeps the camelCase keys existing uploaders parse
(`jobId`, `uploadedFileName`, `uri`); Python code uses snake_case names.
"""

from pydantic import BaseModel, ConfigDict, Field


class UploadResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    job_id: str = Field(..., alias="jobId", description="Job the file was attached to")
    uploaded_file_name: str = Field(..., alias="uploadedFileName", description="Name as sent in X-JOB-FILENAME")
    uri: str = Field(..., description="Public link to the stored file")


class ErrorResponse(BaseModel):
    error: str
