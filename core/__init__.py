# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the content logic behind the routes:
# - models/: Pydantic schemas for content forms, sessions and pagination
# - services/: Content CRUD, image storage, pagination and locale paths
#
# Code in this package should NOT import from FastAPI.
# =============================================================================
