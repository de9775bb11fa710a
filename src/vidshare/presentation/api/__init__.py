"""FastAPI REST API for VidShare."""
