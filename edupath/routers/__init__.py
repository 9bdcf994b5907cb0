"""
FastAPI routers grouped by domain (auth, universities, applications).

Each module exposes an APIRouter that ``edupath.app.create_app`` includes.
"""
