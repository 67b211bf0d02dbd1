"""
Dog endpoints.
"""
from fastapi import APIRouter, Depends, Request, status
import time
from dogs_api.api.deps import get_dogs_service
from dogs_api.models.schemas.base import ErrorResponse
from dogs_api.models.schemas.dogs import DogCreate, DogCreated
from dogs_api.services import DogsService
from dogs_api.utils import get_logger, log_performance

router = APIRouter()
logger = get_logger(__name__)


@router.post(
    "",
    response_model=DogCreated,
    status_code=status.HTTP_201_CREATED,
    summary="Create dog",
    description="Store a new dog and return its generated id",
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse, "description": "Payload failed validation"},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse, "description": "Store unavailable or write rejected"},
    },
)
def create_dog(
    dog_data: DogCreate,
    request: Request,
    service: DogsService = Depends(get_dogs_service),
) -> DogCreated:
    """
    Create a dog.

    The response deliberately carries only the generated ``id``.
    Validation failures never reach this function (400 from the handler);
    ``PersistenceError`` propagates to its handler and becomes a 500.
    """
    start_time = time.time()
    request_id = getattr(request.state, "request_id", None)

    logger.info(
        "Dog creation started",
        dog_name=dog_data.name,
        breed=dog_data.breed,
        request_id=request_id
    )

    created = service.create(dog_data, request_id=request_id)

    duration_ms = (time.time() - start_time) * 1000
    log_performance(
        operation="create_dog",
        duration_ms=duration_ms,
        additional_data={"dog_id": created.id}
    )

    logger.info(
        "Dog created successfully",
        dog_id=created.id,
        request_id=request_id
    )

    return DogCreated(id=created.id)
