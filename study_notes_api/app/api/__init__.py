"""HTTP layer: routers and endpoint modules for both services."""
