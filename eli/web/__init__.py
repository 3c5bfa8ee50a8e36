"""Web service: FastAPI app, auth and the v1 API."""
