"""Patient-related API endpoints."""

from typing import List

from fastapi import APIRouter, Query, Request, Response, status

from ...application.dto.patient_dto import (
    CreatePatientRequest,
    RecordHearingTestRequest,
    UpdatePatientRequest,
)
from ..deps import PatientServiceDep
from ..schemas import (
    ApiResponse,
    AssignDeviceRequest,
    ErrorResponse,
    PatientComprehensiveSchema,
    PatientSchema,
)
from ..schemas import CreatePatientRequest as CreatePatientRequestSchema
from ..schemas import RecordHearingTestRequest as RecordHearingTestRequestSchema
from ..schemas import UpdatePatientRequest as UpdatePatientRequestSchema
from ..utils.responses import ok

router = APIRouter(prefix="/patients", tags=["Patients"])

NOT_FOUND = {404: {"model": ErrorResponse, "description": "Patient not found"}}
INVALID = {422: {"model": ErrorResponse, "description": "Invalid input"}}


@router.post(
    "/",
    response_model=ApiResponse[PatientSchema],
    status_code=status.HTTP_201_CREATED,
    summary="Create a new patient",
    responses={**INVALID},
)
async def create_patient(
    http_request: Request,
    request: CreatePatientRequestSchema,
    service: PatientServiceDep,
):
    """Create a patient from name and email. Email is stored lowercased."""
    result = await service.create_patient(
        CreatePatientRequest(name=request.name, email=request.email)
    )
    return ok(http_request, data=PatientSchema.from_dto(result), message="Patient created")


@router.get(
    "/",
    response_model=ApiResponse[List[PatientSchema]],
    summary="List all patients",
)
async def list_patients(http_request: Request, service: PatientServiceDep):
    results = await service.get_all_patients()
    return ok(http_request, data=[PatientSchema.from_dto(r) for r in results])


@router.get(
    "/search",
    response_model=ApiResponse[List[PatientSchema]],
    summary="Search patients by name",
    responses={**INVALID},
)
async def search_patients(
    http_request: Request,
    service: PatientServiceDep,
    name: str = Query("", description="Case-insensitive partial name"),
):
    results = await service.search_patients_by_name(name)
    return ok(http_request, data=[PatientSchema.from_dto(r) for r in results])


@router.get(
    "/{patient_id}",
    response_model=ApiResponse[PatientSchema],
    summary="Get a patient",
    responses={**NOT_FOUND},
)
async def get_patient(http_request: Request, patient_id: str, service: PatientServiceDep):
    result = await service.get_patient(patient_id)
    return ok(http_request, data=PatientSchema.from_dto(result))


@router.put(
    "/{patient_id}",
    response_model=ApiResponse[PatientSchema],
    summary="Update patient contact information",
    responses={**NOT_FOUND, **INVALID},
)
async def update_patient(
    http_request: Request,
    patient_id: str,
    request: UpdatePatientRequestSchema,
    service: PatientServiceDep,
):
    result = await service.update_patient(
        patient_id, UpdatePatientRequest(name=request.name, email=request.email)
    )
    return ok(http_request, data=PatientSchema.from_dto(result), message="Patient updated")


@router.delete(
    "/{patient_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a patient",
)
async def delete_patient(patient_id: str, service: PatientServiceDep):
    await service.delete_patient(patient_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{patient_id}/hearing-tests",
    response_model=ApiResponse[PatientSchema],
    summary="Record a hearing test",
    responses={**NOT_FOUND, **INVALID},
)
async def record_hearing_test(
    http_request: Request,
    patient_id: str,
    request: RecordHearingTestRequestSchema,
    service: PatientServiceDep,
):
    """Record a hearing test. The previous result, if any, is replaced."""
    result = await service.record_hearing_test(
        patient_id,
        RecordHearingTestRequest(
            left_ear_db=request.left_ear_db, right_ear_db=request.right_ear_db
        ),
    )
    return ok(http_request, data=PatientSchema.from_dto(result), message="Hearing test recorded")


@router.post(
    "/{patient_id}/devices",
    response_model=ApiResponse[PatientSchema],
    summary="Assign a hearing device",
    responses={
        **NOT_FOUND,
        **INVALID,
        409: {"model": ErrorResponse, "description": "Device already assigned"},
    },
)
async def assign_device(
    http_request: Request,
    patient_id: str,
    request: AssignDeviceRequest,
    service: PatientServiceDep,
):
    result = await service.assign_device(patient_id, request.device_id)
    return ok(http_request, data=PatientSchema.from_dto(result), message="Device assigned")


@router.get(
    "/{patient_id}/complete",
    response_model=ApiResponse[PatientComprehensiveSchema],
    summary="Get patient with appointments and devices",
    responses={**NOT_FOUND},
)
async def get_complete_patient_data(
    http_request: Request, patient_id: str, service: PatientServiceDep
):
    """
    Fetch the patient record together with appointments and devices.

    The three lookups run concurrently; any failure fails the whole request.
    """
    result = await service.get_complete_patient_data(patient_id)
    return ok(http_request, data=PatientComprehensiveSchema.from_dto(result))
