# =============================================================================
# core/services/ - Business Logic Services
# =============================================================================
# Services sit between routers and the Supabase client wrapper.
# =============================================================================
