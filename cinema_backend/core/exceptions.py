from typing import Iterable, List, Tuple

Violation = Tuple[str, str]


class CinemaError(Exception):
    def __init__(self, message: str, status_code: int = 400):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)

    def to_body(self) -> dict:
        return {"message": self.message}


class NotFoundError(CinemaError):
    def __init__(self, resource: str):
        self.resource = resource
        super().__init__(f"{resource} not found", status_code=404)


class ValidationFailedError(CinemaError):
    """Raised when an entity breaks one or more field constraints.

    The message names the first violation; every violation is kept so the
    response can list them.
    """

    def __init__(self, entity: str, violations: Iterable[Violation]):
        self.entity = entity
        self.violations: List[Violation] = list(violations)
        field, problem = self.violations[0]
        super().__init__(
            f"Invalid {entity} payload: field '{field}' {problem}",
            status_code=422)

    def to_body(self) -> dict:
        return {
            "message": self.message,
            "violations": [{"field": field, "message": problem}
                           for field, problem in self.violations],
        }
