from typing import Any


class DomainError(Exception):
    """도메인/유즈케이스 공통 베이스 예외"""
    pass

class ResourceNotFound(DomainError):
    def __init__(self, resource: str, detail: str | None = None):
        super().__init__(detail or f"{resource} not found")
        self.resource = resource

class InvalidInput(DomainError):
    def __init__(self, message: str):
        super().__init__(message)

class InvalidPagingParameter(InvalidInput):
    def __init__(self, name: str, value: int, reason: str):
        super().__init__(f"invalid paging parameter {name}={value}: {reason}")
        self.name = name
        self.value = value

class DocumentConflict(DomainError):
    def __init__(self, doc_id: str):
        super().__init__(f"document {doc_id} already exists")
        self.doc_id = doc_id

class StoreUnavailable(DomainError):
    def __init__(self, index_name: str, operation: str):
        super().__init__(f"search store unavailable during {operation} on {index_name}")
        self.index_name = index_name
        self.operation = operation

class PartialBulkFailure(DomainError):
    def __init__(self, index_name: str, indexed: int, errors: list[Any]):
        super().__init__(f"{len(errors)} item(s) failed to be indexed into {index_name}")
        self.index_name = index_name
        self.indexed = indexed
        self.errors = errors
