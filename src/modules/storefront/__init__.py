"""Client-side storefront workflows that consume the catalog HTTP API."""
