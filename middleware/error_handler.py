# app/middleware/error_handler.py
from fastapi import Request
from fastapi.responses import JSONResponse
from botocore.exceptions import ClientError

from config.logging_config import logger
from services.exceptions import ConnectorError, ErrorKind


def _client_error_status(e: ClientError):
    error_code = e.response['Error']['Code']
    if error_code == 'ThrottlingException':
        return 429, 'Rate limit exceeded. Please try again later.'
    elif error_code == 'ValidationException':
        return 400, 'Invalid request'
    return None, None


def connector_error_response(e: ConnectorError) -> JSONResponse:
    if e.kind == ErrorKind.VALIDATION_FAILED:
        content = {'error': e.message, 'kind': e.kind.value}
        if e.cause is not None:
            content['details'] = str(e.cause)
        return JSONResponse(status_code=400, content=content)
    if e.kind == ErrorKind.NOT_FOUND:
        return JSONResponse(status_code=404, content={'error': e.message, 'kind': e.kind.value})

    status_code, error = 502, 'AWS Service Error'
    if isinstance(e.cause, ClientError):
        status_code, error = _client_error_status(e.cause)
        status_code = status_code or 502
        error = error or 'AWS Service Error'

    logger.error(f"Remote call failed: {e}")
    return JSONResponse(
        status_code=status_code,
        content={
            'error': error,
            'kind': e.kind.value,
            'details': str(e)
        }
    )


async def aws_error_handler(request: Request, call_next):
    try:
        return await call_next(request)
    except ConnectorError as e:
        return connector_error_response(e)
    except ClientError as e:
        error_message = e.response['Error']['Message']
        status_code, error = _client_error_status(e)

        if status_code:
            return JSONResponse(
                status_code=status_code,
                content={
                    'error': error,
                    'details': error_message
                }
            )
        else:
            return JSONResponse(
                status_code=500,
                content={
                    'error': 'AWS Service Error',
                    'details': str(e)
                }
            )
