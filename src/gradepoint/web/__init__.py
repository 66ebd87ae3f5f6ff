"""Web API: FastAPI app factory, schemas and routes."""
