"""HTTP server exposing the catalog GraphQL schema."""
