"""
Performer Preparers
Turns aggregation results and failures into HTTP responses
"""

import json
from typing import Dict

from starlette.responses import Response, JSONResponse

CORS_HEADERS: Dict[str, str] = {
    'Access-Control-Allow-Origin': '*',
    'Access-Control-Allow-Methods': 'GET, HEAD, POST, OPTIONS',
    'Access-Control-Allow-Headers': 'Content-Type, Authorization',
    'Access-Control-Max-Age': '86400',  # preflight cached for a day
}

AGGREGATION_ERROR_MESSAGE = 'Failed to fetch or aggregate data.'


def add_cors_headers(response: Response) -> Response:
    """Set the allow-all CORS headers on a response, in place"""
    for key, value in CORS_HEADERS.items():
        response.headers[key] = value
    return response


def prepare_aggregated_response(aggregated: Dict[str, int], max_age: int = 60) -> Response:
    """
    Pretty-printed JSON response for the country counts

    Args:
        aggregated: Country code -> count mapping
        max_age: Seconds clients and proxies may reuse the response

    Returns:
        200 response with Cache-Control and CORS headers set
    """
    response = Response(
        content=json.dumps(aggregated, indent=2),
        status_code=200,
        media_type='application/json',
    )
    response.headers['Cache-Control'] = f'public, max-age={max_age}'
    return add_cors_headers(response)


def prepare_error_response(error: BaseException) -> Response:
    """Generic 500 body; the traceback stays in the server log"""
    details = str(error) or 'An unknown error occurred'
    return add_cors_headers(JSONResponse(
        status_code=500,
        content={'error': AGGREGATION_ERROR_MESSAGE, 'details': details},
    ))
