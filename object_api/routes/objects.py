"""Object CRUD routes.

Every route is bound to a fixed path and answers the same way whatever the
HTTP verb: identifiers travel in the `id` query parameter, records in a JSON
body. There are no path parameters.

Error mapping:
- undecodable body or `id` -> 400 (see `errors.register_error_handlers`)
- `/object`: any `StoreError`, `ObjectNotFound` included -> 404
- every other route: `StoreError` -> 500
"""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ..db import get_repository
from ..errors import StoreError
from ..repository import ObjectRepository
from ..schemas import CreatedResponse, MessageResponse, Object, ObjectCreate, ObjectUpdate

router = APIRouter(tags=["objects"])

ANY_METHOD = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


@router.api_route("/objects", methods=ANY_METHOD, response_model=list[Object])
def list_objects(repo: ObjectRepository = Depends(get_repository)):
    """List every stored object.

    Args:
        repo: Object repository (injected).

    Returns:
        list[Object]: All rows, in store order; `[]` when the table is empty.

    Raises:
        HTTPException: 500 if the store query fails.
    """
    try:
        return repo.list_all()
    except StoreError:
        raise HTTPException(status_code=500, detail="Failed to fetch objects")


@router.api_route("/object", methods=ANY_METHOD, response_model=Object)
def get_object(
    object_id: int = Query(..., alias="id"),
    repo: ObjectRepository = Depends(get_repository),
):
    """Fetch a single object by its identifier.

    Args:
        object_id: Value of the `id` query parameter.
        repo: Object repository (injected).

    Returns:
        Object: The stored record.

    Raises:
        HTTPException: 404 if no row has this id or the store query fails.
    """
    # a failed query is reported the same as a missing row
    try:
        return repo.get(object_id)
    except StoreError:
        raise HTTPException(status_code=404, detail="Object not found")


@router.api_route(
    "/create",
    methods=ANY_METHOD,
    response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_object(body: ObjectCreate, repo: ObjectRepository = Depends(get_repository)):
    """Insert a new object and return the id the store assigned.

    Returns:
        dict: `{"id": <int>}` with status 201.

    Raises:
        HTTPException: 500 if the insert fails.
    """
    try:
        object_id = repo.create(body.name, body.description)
    except StoreError:
        raise HTTPException(status_code=500, detail="Failed to create object")

    return {"id": object_id}


@router.api_route("/update", methods=ANY_METHOD, response_model=MessageResponse)
def update_object(body: ObjectUpdate, repo: ObjectRepository = Depends(get_repository)):
    """Overwrite name and description of an object.

    An id with no matching row is not an error; nothing is written.
    """
    try:
        repo.update(body.id, body.name, body.description)
    except StoreError:
        raise HTTPException(status_code=500, detail="Failed to update object")

    return {"message": "Object updated successfully"}


@router.api_route("/delete", methods=ANY_METHOD, response_model=MessageResponse)
def delete_object(
    object_id: int = Query(..., alias="id"),
    repo: ObjectRepository = Depends(get_repository),
):
    # deleting a missing id succeeds, so repeated deletes are harmless
    try:
        repo.delete(object_id)
    except StoreError:
        raise HTTPException(status_code=500, detail="Failed to delete object")

    return {"message": "Object deleted successfully"}
