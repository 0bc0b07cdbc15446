from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

# Domain errors raised by the service layer
class DomainError(Exception):
    status_code = 500

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail

class NotFoundError(DomainError):
    status_code = 404

class ValidationError(DomainError):
    status_code = 400

async def _domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    # Same body shape as fastapi.HTTPException
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})

def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, _domain_error_handler)
