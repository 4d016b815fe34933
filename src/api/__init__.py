"""HTTP transport: FastAPI app, routes and models."""
