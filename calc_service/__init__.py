"""HTTP calculator service with health and metrics endpoints."""
