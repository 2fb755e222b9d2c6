"""HTTP controllers and response schemas."""
