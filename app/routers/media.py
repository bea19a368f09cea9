from typing import Annotated
from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel
from app.config import API_PREFIX
from app.dependencies import authenticate, DefaultErrorModel, Responses, CreateExampleResponse, CreateAuthResponses, Example
from app.internal import cloudinary, geocoding

router = APIRouter(
    prefix=API_PREFIX,
    tags=['Media']
)

class ImageUpload(BaseModel):
    image: str

class UploadedImage(BaseModel):
    url: str

class Address(BaseModel):
    fullAddress: str
    city: str
    state: str
    country: str
    postcode: str
    lat: float
    lng: float

def ExternalServiceResponse(message: str):
    return CreateExampleResponse(
        code=status.HTTP_502_BAD_GATEWAY,
        description='Bad Gateway',
        examples=[Example(name='ExternalServiceError', summary=message, value=DefaultErrorModel(message=message))]
    )

@router.post(
    '/upload',
    status_code=status.HTTP_201_CREATED,
    responses=Responses(
        CreateAuthResponses(),
        ExternalServiceResponse('Failed to upload image. Please try again.')
    )
)
async def upload_image(
    body: ImageUpload,
    user_id: Annotated[int, Depends(authenticate)]
) -> UploadedImage:
    return UploadedImage(url=await cloudinary.upload_image(body.image))

@router.get(
    '/geocode/reverse',
    status_code=status.HTTP_200_OK,
    responses=Responses(ExternalServiceResponse('Failed to fetch address'))
)
async def reverse_geocode(
    lat: Annotated[float, Query(ge=-90, le=90)],
    lng: Annotated[float, Query(ge=-180, le=180)]
) -> Address:
    return await geocoding.reverse_geocode(lat, lng)
