from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware


class CORSHeadersMiddleware(BaseHTTPMiddleware):
    """
    Adds the configured CORS headers to every response, whether or not the
    request carried an Origin header, and answers browser preflights.
    """

    def __init__(
        self,
        app,
        allow_origin: str = "*",
        allow_methods: str = "GET, POST, PUT, DELETE, OPTIONS",
        allow_headers: str = "Content-Type",
    ):
        super().__init__(app)
        self.cors_headers = {
            "Access-Control-Allow-Origin": allow_origin,
            "Access-Control-Allow-Methods": allow_methods,
            "Access-Control-Allow-Headers": allow_headers,
        }

    async def dispatch(self, request: Request, call_next):
        if request.method == "OPTIONS" and "access-control-request-method" in request.headers:
            return Response(status_code=200, headers=self.cors_headers)
        response = await call_next(request)
        response.headers.update(self.cors_headers)
        return response
