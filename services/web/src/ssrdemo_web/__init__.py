"""Server-side rendered demo page served through Starlette."""
