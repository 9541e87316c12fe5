"""HTTP layer: FastAPI application, routes and error handling."""
