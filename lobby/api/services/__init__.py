"""Services shared by API routes."""
