from fastapi import HTTPException, status


class ResourceNotFoundError(HTTPException):
    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class ResourceConflictError(HTTPException):
    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


def not_found(entity: str, entity_id) -> ResourceNotFoundError:
    return ResourceNotFoundError(f"{entity} with id {entity_id} not found")


def in_use(entity: str, entity_id) -> ResourceConflictError:
    return ResourceConflictError(f"{entity} with id {entity_id} can't be deleted, it has tasks")
