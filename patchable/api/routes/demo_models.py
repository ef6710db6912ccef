"""Demo model endpoints.

POST creates, PUT replaces (creating when the id is unknown) and PATCH
merges. Each maps its HTTP method onto an update operation and translates
the update result into a response.
"""

from typing import Annotated, Any, assert_never
from uuid import UUID

from fastapi import APIRouter, Body, Request, Response

from patchable.api.dependencies import DemoStoreDep, UpdateEngineDep
from patchable.api.exceptions import ModelNotFoundError, UpdateRejectedError
from patchable.api.models.demo import DemoModel
from patchable.observability.logging import get_logger
from patchable.update import Error, NoChanges, Ok, OperationKind

logger = get_logger(__name__)

router = APIRouter(prefix="/demomodels")

DocumentBody = Annotated[dict[str, Any], Body(description="Full or partial DemoModel document")]


@router.get("", response_model=list[DemoModel])
async def list_demo_models(store: DemoStoreDep) -> list[DemoModel]:
    """List every demo model."""
    return await store.list_all()


@router.get("/{model_id}", response_model=DemoModel)
async def get_demo_model(model_id: UUID, store: DemoStoreDep) -> DemoModel:
    """Get one demo model.

    Raises:
        ModelNotFoundError: If the id is unknown
    """
    model = await store.get(model_id)
    if model is None:
        raise ModelNotFoundError(model_id)
    return model


@router.post("", response_model=DemoModel, status_code=201)
async def create_demo_model(
    document: DocumentBody,
    request: Request,
    response: Response,
    store: DemoStoreDep,
    engine: UpdateEngineDep,
) -> DemoModel:
    """Create a demo model with a fresh id from the document."""
    model = DemoModel()
    result = engine.update(model, document, OperationKind.CREATE)

    match result:
        case Error(errors=errors):
            raise UpdateRejectedError(errors)
        case Ok() | NoChanges():
            await store.save(model)
        case _:
            assert_never(result)

    logger.info("demo_model_created", model_id=str(model.id))
    response.headers["Location"] = f"{request.url.path}/{model.id}"
    return model


@router.put("/{model_id}", response_model=DemoModel)
async def replace_demo_model(
    model_id: UUID,
    document: DocumentBody,
    request: Request,
    response: Response,
    store: DemoStoreDep,
    engine: UpdateEngineDep,
) -> DemoModel:
    """Replace a demo model, creating it under ``model_id`` if unknown.

    Returns 200 for an existing model and 201 for a new one.
    """
    async with store.lock(model_id):
        existing = await store.get(model_id)
        model = existing if existing is not None else DemoModel(id=model_id)
        result = engine.update(model, document, OperationKind.REPLACE)

        match result:
            case Error(errors=errors):
                raise UpdateRejectedError(errors)
            case Ok() | NoChanges():
                await store.save(model)
            case _:
                assert_never(result)

    if existing is None:
        response.status_code = 201
        response.headers["Location"] = str(request.url.path)
    logger.info("demo_model_replaced", model_id=str(model_id), created=existing is None)
    return model


@router.patch(
    "/{model_id}",
    response_model=DemoModel,
    responses={204: {"description": "Document changed nothing"}},
)
async def merge_demo_model(
    model_id: UUID,
    document: DocumentBody,
    store: DemoStoreDep,
    engine: UpdateEngineDep,
) -> Any:
    """Merge a partial document into an existing demo model.

    Raises:
        ModelNotFoundError: If the id is unknown
    """
    async with store.lock(model_id):
        model = await store.get(model_id)
        if model is None:
            raise ModelNotFoundError(model_id)

        result = engine.update(model, document, OperationKind.MERGE)

        match result:
            case Error(errors=errors):
                raise UpdateRejectedError(errors)
            case Ok(changed=changed):
                await store.save(model)
                logger.info("demo_model_merged", model_id=str(model_id), changed=changed)
                return model
            case NoChanges():
                return Response(status_code=204)
            case _:
                assert_never(result)
