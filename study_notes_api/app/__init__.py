"""Application package for the Study Notes content and todo services."""
