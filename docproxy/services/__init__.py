"""Services for docproxy."""
